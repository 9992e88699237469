# clover

`clover` is the command-line driver for the clover language. It parses the
options for running a source file or for compiling source files into an
executable. It also holds a small library for reading source files and for
writing coloured log messages.

## Installation

```
pip install .
```

This installs the `clover` command.

## Usage

```
clover [-f flag1,-flag2...] <file> [--] [args...]
clover -c [-d] [-m <manifest>] [-o <output>] [--] file...
```

Run options:

- `-f FLAGS` sets runtime flags. This is a comma-separated list. Put `-` in
  front of a flag to turn it off.
  - `jit` toggles the Just-in-Time compiler.
  - `optimize` toggles host-specific optimizations.

  Both flags are on by default. An unknown flag gives the warning
  `invalid flag: '<name>'`, and parsing goes on.

Compile options:

- `-c` compiles the program.
- `-d` turns on debug symbols.
- `-m MANIFEST` sets the manifest file.
- `-o FILE` sets the output file name.

You can use `-d`, `-m` and `-o` only together with `-c`.

General options:

- `-h`, `--help` prints the help text and exits with status 0.
- `-v`, `--version` prints the version line, for example
  `clover 0.1 - built with CPython 3.12.1`, and exits with status 0.

After `--`, every remaining argument is taken as a file or a program
argument, even one that starts with `-`. An argument that is only `-` is
also taken as a plain argument.

If you run `clover` with no arguments, it prints the help text and exits
with status 1. An unknown option, an option with its value missing, or a
compile-only option used without `-c` prints an error to standard error and
exits with status 1.

Set the environment variable `DEBUG=1` to have the driver print the mode,
the flags and the remaining arguments before it goes on.

## What it does not do

The package has no code generator and no runtime:

- Run mode (no `-c`) prints `error: code execution is unavailable` and exits
  with status 1.
- Compile mode (`-c`) reports that compiling a unit or writing the
  executable is a stub, prints `compilation failed.` and exits with
  status 1. No output file is written.

## Library use

```python
from clover.cli import Options, parse_options
from clover.source import Source

options = parse_options(["-c", "-o", "app", "main.clv"])
print(options.compile_mode, options.output, options.args)
# True app ['main.clv']

src = Source("main.clv")
print(len(src), src.at(0), src.substr(0, 4))
```

`parse_options` takes the arguments that follow the program name and returns
an `Options` dataclass with the fields `compile_mode`, `args`, `jit`,
`optimize`, `exec_file`, `debug`, `manifest`, `output`, `show_help` and
`show_version`. It stops at `-h` or `-v` and sets `show_help` or
`show_version`. A malformed command line raises `clover.cli.UsageError`.
`parse_flags(flags, options)` applies a `-f` value to an existing
`Options`. `help_text()` and `version_text()` return the texts that the
command prints.

`Source(path)` reads a whole file as UTF-8 text.

- `at(index)` returns one character.
- `substr(offset, length)` returns a slice. The slice must end strictly
  before the end of the text.
- `text()` returns the whole text.
- `len()` gives its length.

Both `at` and `substr` raise `IndexError` when out of range.

`clover.compiler` has the `Unit` dataclass, `compile_unit(file)`,
`write_exec(manifest, output)` and
`compile_program(manifest, files, output, debug)`. For now, `compile_unit`
and `write_exec` log an error and raise `CompileError`.

`clover.log` writes messages with a coloured level prefix: `log(level, msg,
mode)`, `debug`, `info`, `warning` and `error`. `Level` is `DEBUG`, `INFO`,
`WARNING` or `ERROR`. `Mode` is `NONE`, `FORMAT`, `NEWLINE` or `ALL`.
`debug`, `info` and `warning` write to standard output, and `error` writes
to standard error. Debug messages appear only when `debug_enabled()` is
true, that is, when the environment variable `DEBUG` is exactly `1`. The
value is read once and remembered.

## Tests

```
pip install .[test]
pytest
```