"""Command-line entry point: ``pipex infile cmd1 cmd2 outfile``."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

from .errors import PipexError
from .pipeline import Pipex, run_pipex


def main(argv: Sequence[str] | None = None) -> int:
    """Run the pipeline described by ``argv`` and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        pipex = Pipex.from_args(args)
    except PipexError as error:
        error.report()
        return error.exit_status
    return run_pipex(pipex, os.environ)


if __name__ == "__main__":
    raise SystemExit(main())