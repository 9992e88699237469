[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clover"
version = "0.1"
description = "Command-line driver for the clover language: option parsing, source access and a compiler front end"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "language", "toolchain", "cli"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
clover = "clover.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["clover"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
