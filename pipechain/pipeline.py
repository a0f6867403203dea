"""Run a chain of commands from an input file to an output file.

The command line is ``infile cmd1 cmd2 ... cmdN outfile`` and behaves like
the shell pipeline ``< infile cmd1 | cmd2 | ... | cmdN > outfile``.
"""

from __future__ import annotations

import os
import subprocess
import sys
from typing import IO, Any, Iterable, Mapping, Optional, Sequence

from pipechain.resolve import PathNotFoundError, find_command, path_directories
from pipechain.strings import split

NOT_FOUND_STATUS = 1


class PipexError(Exception):
    """A pipeline could not be set up; the message is meant for the user."""

    def __init__(self, message: str, status: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


def _start(
    command: str,
    stdin: Any,
    stdout: Any,
    directories: Sequence[str],
    env: Mapping[str, str],
) -> Optional[subprocess.Popen]:
    words = split(command, " ")
    path = find_command(words[0], directories) if words else None
    if path is None:
        name = words[0] if words else '""'
        sys.stderr.write(f"command not found : {name}\n")
        return None
    try:
        return subprocess.Popen(
            words, executable=path, stdin=stdin, stdout=stdout, env=dict(env)
        )
    except OSError as exc:
        sys.stderr.write(f"execve error.: {exc.strerror}\n")
        return None


def _run_stages(
    source: IO[bytes],
    commands: Sequence[str],
    sink: IO[bytes],
    directories: Sequence[str],
    env: Mapping[str, str],
) -> list[int]:
    processes: list[Optional[subprocess.Popen]] = []
    stdin: Any = source
    last_position = len(commands) - 1
    for position, command in enumerate(commands):
        is_last = position == last_position
        stdout: Any = sink if is_last else subprocess.PIPE
        process = _start(command, stdin, stdout, directories, env)
        if stdin is not source and stdin is not subprocess.DEVNULL:
            stdin.close()
        processes.append(process)
        if not is_last:
            stdin = process.stdout if process is not None else subprocess.DEVNULL
    return [NOT_FOUND_STATUS if p is None else p.wait() for p in processes]


def run_pipeline(
    infile: str,
    commands: Iterable[str],
    outfile: str,
    environ: Optional[Mapping[str, str]] = None,
) -> list[int]:
    """Run commands as a pipeline from infile to outfile.

    Each command is split on spaces and looked up through PATH. A command
    that cannot be found is reported on standard error and its stage
    produces no output. Returns the exit status of every stage.
    Raises PipexError when PATH is missing or a file cannot be opened.
    """
    stages = list(commands)
    if not stages:
        raise PipexError("Error: no commands given")
    env = dict(os.environ if environ is None else environ)
    try:
        directories = path_directories(env)
    except PathNotFoundError as exc:
        raise PipexError("Error: No path found") from exc
    try:
        source = open(infile, "rb")
    except OSError as exc:
        raise PipexError("Error: infile isn't open") from exc
    with source:
        try:
            fd = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
        except OSError as exc:
            raise PipexError("Error: outfile isn't open") from exc
        with open(fd, "wb") as sink:
            return _run_stages(source, stages, sink, directories, env)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry: ``infile cmd1 cmd2 [cmd...] outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 4:
        sys.stderr.write("Error: You don't have enough arguments\n")
        return 1
    try:
        run_pipeline(args[0], args[1:-1], args[-1])
    except PipexError as exc:
        sys.stderr.write(exc.message + "\n")
        return exc.status
    return 0


if __name__ == "__main__":
    sys.exit(main())