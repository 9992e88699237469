"""Compilation of source files into an executable."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from clover.log import error


class CompileError(Exception):
    """Raised when compilation fails."""


@dataclass
class Unit:
    """A compiled translation unit."""

    file: str


def compile_unit(file: str) -> Unit:
    """Compile one source file into a unit.

    No code generator is available yet, so this always fails.
    """
    message = "compile_unit: stub"
    error(message)
    raise CompileError(message)


def write_exec(manifest: str | None, output: str | None) -> None:
    """Write the final executable.

    No executable writer is available yet, so this always fails.
    """
    message = "write_exec: stub"
    error(message)
    raise CompileError(message)


def compile_program(
    manifest: str | None,
    files: Iterable[str],
    output: str | None,
    debug: bool = False,
) -> list[Unit]:
    """Compile every file in order, then write the executable.

    Stops at the first file that fails. Returns the compiled units.
    """
    units = [compile_unit(file) for file in files]
    write_exec(manifest, output)
    return units