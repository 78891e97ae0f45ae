"""Running ``infile < cmd1 | cmd2 > outfile`` with two child processes."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from .errors import CommandNotFoundError, FileOpenError, PipexError, UsageError
from .paths import find_full_path
from .strings import split

_OUTFILE_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_TRUNC
_OUTFILE_MODE = 0o644


def parse_command(text: str) -> list[str]:
    """Split a command on spaces; an empty command is not found."""
    words = split(text, " ") or []
    if not words:
        raise CommandNotFoundError("", quoted=True)
    return words


@dataclass
class Pipex:
    """The two files and two commands of one pipeline."""

    infile: str
    cmd1: list[str]
    cmd2: list[str]
    outfile: str

    @classmethod
    def from_args(cls, args: Iterable[str]) -> Pipex:
        """Build from ``infile cmd1 cmd2 outfile``."""
        values = list(args)
        if len(values) != 4:
            raise UsageError()
        infile, first, second, outfile = values
        return cls(infile, parse_command(first), parse_command(second), outfile)


def _start(command: Sequence[str], env: Mapping[str, str], stdin: int, stdout: int) -> subprocess.Popen:
    argv = find_full_path(command, env)
    name = argv[0]
    # The resolved name is executed as given, never searched for again.
    executable = name if "/" in name else os.path.join(os.curdir, name)
    try:
        return subprocess.Popen(
            argv, executable=executable, stdin=stdin, stdout=stdout, env=dict(env)
        )
    except FileNotFoundError as error:
        raise CommandNotFoundError(name) from error
    except OSError as error:
        raise CommandNotFoundError(name, reason=error.strerror or str(error)) from error


def _open(path: str, flags: int, mode: int = 0o777) -> int:
    try:
        return os.open(path, flags, mode)
    except OSError as error:
        raise FileOpenError.from_os_error(path, error) from error


def _launch_first(pipex: Pipex, env: Mapping[str, str], pipe_write: int) -> subprocess.Popen:
    infile_fd = _open(pipex.infile, os.O_RDONLY)
    try:
        return _start(pipex.cmd1, env, infile_fd, pipe_write)
    finally:
        os.close(infile_fd)


def _launch_second(pipex: Pipex, env: Mapping[str, str], pipe_read: int) -> subprocess.Popen:
    outfile_fd = _open(pipex.outfile, _OUTFILE_FLAGS, _OUTFILE_MODE)
    try:
        return _start(pipex.cmd2, env, pipe_read, outfile_fd)
    finally:
        os.close(outfile_fd)


def run_pipex(pipex: Pipex, env: Mapping[str, str] | None = None) -> int:
    """Run the pipeline and return the exit status of the second command.

    Failures of either side are reported on stderr; a failure of the first
    side does not change the result.  A second command killed by a signal
    gives 1.
    """
    environment = dict(os.environ if env is None else env)
    read_fd, write_fd = os.pipe()

    first: subprocess.Popen | None = None
    try:
        first = _launch_first(pipex, environment, write_fd)
    except PipexError as error:
        error.report()
    finally:
        os.close(write_fd)

    second: subprocess.Popen | None = None
    status = 1
    try:
        second = _launch_second(pipex, environment, read_fd)
    except PipexError as error:
        error.report()
        status = error.exit_status
    finally:
        os.close(read_fd)

    if first is not None:
        first.wait()
    if second is None:
        return status
    code = second.wait()
    return code if code >= 0 else 1