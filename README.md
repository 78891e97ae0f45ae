# pipex

`pipex` runs two commands joined by a pipe. The first command reads its
standard input from a file. The second command writes its standard output
to another file. It does the same job as this shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

To run the tests, install the `test` extra and run `pytest`:

```sh
pip install ".[test]"
pytest
```

## Usage

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

You can also start it with `python -m pipex.cli`.

The command takes exactly four arguments. Each command is split on single
spaces, and empty pieces are dropped. No shell quoting, globbing or
variable expansion is applied.

The commands are resolved like this:

- If the name is already executable as given, it is used unchanged.
- Otherwise it is looked up in the directories listed in `PATH`. The first
  directory that holds an executable file of that name wins.
- A name that contains no `/` and is not found in `PATH` is run relative to
  the current directory.

The input file is opened read-only. The output file is created with mode
`0644`, or truncated if it already exists.

Example:

```sh
pipex input.txt "grep error" "wc -l" count.txt
```

## Exit status and messages

All messages go to standard error.

- If the second command runs, the exit status is that of the second
  command. If a signal kills it, the status is `1`.
- A wrong number of arguments prints `Error: Wrong number of arguments`
  and exits with `1`.
- An empty command prints `'': Comand not found` and exits with `127`.
  Nothing is run.
- A command that cannot be found prints `<name>: Comand not found`. A
  command that cannot be executed for another reason prints
  `<name>: <reason>`.
- An input or output file that cannot be opened prints `<path>: <reason>`.
- A failure on the first side (the input file or the first command) is
  reported, but the second command still runs. The exit status comes from
  the second side.
- If the second command cannot be started, the exit status is `127`. If
  the output file cannot be opened, the exit status is `1`.

## Library use

The pipeline is available from Python:

```python
from pipex.pipeline import Pipex, run_pipex

job = Pipex.from_args(["input.txt", "grep error", "wc -l", "count.txt"])
status = run_pipex(job, {"PATH": "/usr/bin:/bin"})
```

The pipeline functions are:

- `Pipex.from_args(args)` builds a pipeline from `infile cmd1 cmd2 outfile`.
  It raises `UsageError` for a wrong argument count, and
  `CommandNotFoundError` for an empty command.
- `parse_command(text)` splits one command string into its words.
- `run_pipex(pipex, env=None)` runs the pipeline and returns the exit
  status. It uses `os.environ` when `env` is `None`.
- `pipex.cli.main(argv=None)` is the command-line entry point. It returns
  the exit status.

The errors live in `pipex.errors`. All of them derive from `PipexError`,
which has an `exit_status` attribute and a `report(stream=None)` method.
The subclasses are `UsageError`, `FileOpenError` and
`CommandNotFoundError`.

`pipex.paths` provides the command lookup:

- `env_path(env)` returns the non-empty `PATH` directories of a mapping.
- `find_full_path(command, env)` returns the argument list with the program
  name resolved.

## Helpers

The package also includes small helper modules.

- `pipex.chars` provides ASCII classification and case mapping:
  `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`
  and `to_lower`. Each takes a code point or a one-character string.
- `pipex.conversions` provides number parsing and formatting. `atoi`
  parses a leading decimal integer and wraps it to 32 bits. `atol` does
  the same and wraps to 64 bits. `itoa` formats an integer.
- `pipex.strings` provides string functions: `strchr`, `strrchr`,
  `strncmp`, `strnstr`, `substr`, `strjoin`, `strtrim`, `split`,
  `strmapi`, `striteri`, and the bounded copies `strlcpy` and `strlcat`.
  `strlcpy` and `strlcat` return the text together with the length they
  tried to create.
- `pipex.memory` provides byte-buffer functions: `memchr`, `memcmp`,
  `memset`, `bzero`, `memcpy`, `memmove` and `calloc`. `calloc` raises
  `OverflowError` when the size overflows 64 bits.
- `pipex.output` writes to raw file descriptors: `put_char_fd`,
  `put_str_fd`, `put_endl_fd` and `put_nbr_fd`.

## What it does not do

- It joins exactly two commands. Longer chains are not supported.
- There is no here-document mode and no append mode for the output file.
- Commands are not parsed by a shell. Quotes are passed through as
  ordinary characters.