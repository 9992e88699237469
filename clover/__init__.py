"""Command-line driver, source file access, logging and compiler front end for the clover language."""

__version__ = "0.1"