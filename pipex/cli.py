"""Run ``infile | cmd1 | cmd2 > outfile`` the way a shell would."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import BinaryIO, List, Mapping, Optional, Sequence

from .command import CommandError, prepare_command

USAGE = "./pipex file1 cmd1 cmd2 file2"


class PipelineError(Exception):
    """An input or output file of the pipeline could not be opened."""

    exit_status = 1

    def __init__(self, reason: str, path: str):
        super().__init__(f"{reason}: {path}")
        self.reason = reason
        self.path = path


def _report(message: object) -> None:
    print(message, file=sys.stderr, flush=True)


def _status(returncode: int) -> int:
    return 128 - returncode if returncode < 0 else returncode


def open_input(path: str) -> BinaryIO:
    """Open the pipeline's input file for reading."""
    try:
        return open(path, "rb")
    except OSError:
        if os.access(path, os.F_OK) and not os.access(path, os.R_OK):
            raise PipelineError("Permission Denied", path) from None
        raise PipelineError("no such file or directory", path) from None


def open_output(path: str) -> BinaryIO:
    """Create or truncate the pipeline's output file with mode 0644."""
    try:
        fd = os.open(path, os.O_RDWR | os.O_CREAT | os.O_TRUNC, 0o644)
    except OSError:
        if not os.access(path, os.W_OK):
            raise PipelineError("permission denied", path) from None
        raise PipelineError("no such file or directory", path) from None
    return os.fdopen(fd, "r+b")


def _run_first(infile: str, cmd: str, env: Mapping[str, str]) -> bytes:
    """Run the first stage; failures are reported and give empty output."""
    try:
        with open_input(infile) as source:
            path, argv = prepare_command(cmd, env)
            try:
                result = subprocess.run(
                    argv, executable=path, stdin=source,
                    stdout=subprocess.PIPE, env=dict(env),
                )
            except OSError as err:
                _report(f"{err.strerror}: {path}")
                return b""
    except (PipelineError, CommandError) as err:
        _report(err)
        return b""
    return result.stdout


def run_pipeline(
    infile: str,
    first_cmd: str,
    second_cmd: str,
    outfile: str,
    env: Mapping[str, str],
) -> int:
    """Run both stages and return the exit status of the second command.

    Problems with the first stage are reported on stderr and the second
    stage then reads empty input. Problems with the second stage raise
    PipelineError or CommandError.
    """
    data = _run_first(infile, first_cmd, env)
    with open_output(outfile) as sink:
        path, argv = prepare_command(second_cmd, env)
        try:
            result = subprocess.run(
                argv, executable=path, input=data, stdout=sink, env=dict(env),
            )
        except OSError as err:
            raise CommandError(err.strerror or "cannot execute", path, exit_status=126) from None
    return _status(result.returncode)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point: file1 cmd1 cmd2 file2."""
    args: List[str] = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        _report(USAGE)
        return 1
    infile, first_cmd, second_cmd, outfile = args
    try:
        return run_pipeline(infile, first_cmd, second_cmd, outfile, os.environ)
    except (PipelineError, CommandError) as err:
        _report(err)
        return err.exit_status


if __name__ == "__main__":
    sys.exit(main())