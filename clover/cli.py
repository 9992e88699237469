"""Command line entry point."""

from __future__ import annotations

import platform
import re
import sys
from dataclasses import dataclass, field

from clover.compiler import CompileError, compile_program
from clover.log import Level, Mode, debug, debug_enabled, error, log, warning

VERSION = "0.1"

_HELP = (
    "Usage:\n"
    "  clover [-f flag1,-flag2...] <file> [--] [args...]\n"
    "  clover -c [-d] [-m <manifest>] [-o <output>] [--] file...\n"
    "\nRun options:\n"
    "  -f FLAGS         Set runtime flags\n"
    "\nFlags:\n"
    "  - jit            Toggle Just-in-Time compiler\n"
    "  - optimize       Toggle host specific optimizations\n"
    "\nCompile options:\n"
    "  -c               Compile program\n"
    "  -d               Enable debug symbols\n"
    "  -m MANIFEST      Set manifest file\n"
    "  -o FILE          Set output file name\n"
    "\nGeneral options:\n"
    "  -h  --help       Displays this message and exits\n"
    "  -v  --version    Displays program version and exits\n"
)


class UsageError(Exception):
    """Raised for a malformed command line."""


@dataclass
class Options:
    """Settings gathered from the command line."""

    compile_mode: bool = False
    args: list[str] = field(default_factory=list)
    jit: bool = True
    optimize: bool = True
    exec_file: str | None = None
    debug: bool = False
    manifest: str | None = None
    output: str | None = None
    show_help: bool = False
    show_version: bool = False


def help_text() -> str:
    """Return the usage message."""
    return _HELP


def version_text() -> str:
    """Return the version banner."""
    build = f"{platform.python_implementation()} {platform.python_version()}"
    return f"clover {VERSION} - built with {build} \n"


def _flag_tokens(flags: str) -> list[str]:
    # The first flag is delimited by commas only; later ones by commas or spaces.
    stripped = flags.lstrip(",")
    if not stripped:
        return []
    first, _, rest = stripped.partition(",")
    return [first, *(token for token in re.split(r"[ ,]", rest) if token)]


def parse_flags(flags: str, options: Options) -> None:
    """Apply a comma separated list of runtime flags to ``options``.

    A leading '-' turns a flag off; unknown flags are warned about.
    """
    for token in _flag_tokens(flags):
        toggle = not token.startswith("-")
        name = token if toggle else token[1:]
        if name == "jit":
            options.jit = toggle
        elif name == "optimize":
            options.optimize = toggle
        else:
            warning(f"invalid flag: '{name}'")


def _is_option(arg: str) -> bool:
    return len(arg) >= 2 and arg.startswith("-")


def parse_options(argv: list[str]) -> Options:
    """Parse the arguments that follow the program name.

    Parsing stops at -h or -v, which are recorded on the result.
    """
    options = Options()
    end_options = False
    args = iter(argv)

    def value_for(option: str) -> str:
        try:
            return next(args)
        except StopIteration:
            raise UsageError(
                f"missing argument for option '{option}'. use -h to get help"
            ) from None

    for arg in args:
        if end_options or not _is_option(arg):
            options.args.append(arg)
        elif arg in ("-h", "--help"):
            options.show_help = True
            return options
        elif arg in ("-v", "--version"):
            options.show_version = True
            return options
        elif arg == "-c":
            options.compile_mode = True
        elif arg == "-d":
            options.debug = True
        elif arg == "-f":
            parse_flags(value_for(arg), options)
        elif arg == "-m":
            options.manifest = value_for(arg)
        elif arg == "-o":
            options.output = value_for(arg)
        elif arg == "--":
            end_options = True
        else:
            raise UsageError(f"invalid option: '{arg}'. use -h to get help")

    compile_only = (
        ("-d", options.debug),
        ("-m", options.manifest is not None),
        ("-o", options.output is not None),
    )
    for option, used in compile_only:
        if used and not options.compile_mode:
            raise UsageError(
                f"'{option}' can only be used in combination with '-c'. use -h to get help"
            )
    return options


def _dump_options(options: Options) -> None:
    debug(f"mode: {'compile' if options.compile_mode else 'run'}")
    debug(f"flags: jit={int(options.jit)}, optimize={int(options.optimize)}")
    log(Level.DEBUG, "cmdline:", Mode.FORMAT)
    for arg in options.args:
        log(Level.DEBUG, f" {arg}", Mode.NONE)
    sys.stdout.write("\n")


def main(argv: list[str] | None = None) -> int:
    """Run the command line tool and return its exit status."""
    if argv is None:
        argv = sys.argv[1:]

    if not argv:
        sys.stdout.write(help_text())
        return 1

    try:
        options = parse_options(argv)
    except UsageError as exc:
        error(str(exc))
        return 1

    if options.show_help:
        sys.stdout.write(help_text())
        return 0
    if options.show_version:
        sys.stdout.write(version_text())
        return 0

    if debug_enabled():
        _dump_options(options)

    if not options.compile_mode:
        error("code execution is unavailable")
        return 1

    try:
        compile_program(options.manifest, options.args, options.output, options.debug)
    except OSError as exc:
        error(exc.strerror or str(exc))
        sys.stdout.write("compilation failed.\n")
        return 1
    except CompileError:
        sys.stdout.write("compilation failed.\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())