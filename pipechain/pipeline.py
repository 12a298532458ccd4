"""Running commands connected by pipes between an input and an output file."""

from __future__ import annotations

import errno
import os
import subprocess
import sys
from typing import IO, List, Mapping, Optional, Sequence, Union

from pipechain.commands import Command, create_commands, format_commands
from pipechain.paths import Environment

EXEC_FAILURE_STATUS = 127
_USAGE_ERROR = "Error : Number of args is invalid"

Upstream = Union[IO[bytes], int]


class PipexError(Exception):
    """A pipeline could not be set up; status is the exit status to report."""

    def __init__(self, message: str, status: int = 1) -> None:
        super().__init__(message)
        self.status = status


def _environment(env: Optional[Environment]) -> dict:
    if env is None:
        return dict(os.environ)
    if isinstance(env, Mapping):
        return dict(env)
    result = {}
    for entry in env:
        name, _, value = entry.partition("=")
        result.setdefault(name, value)
    return result


def _executable(path: str) -> str:
    # A bare name is taken relative to the working directory, never searched.
    return path if "/" in path else f"./{path}"


def _spawn(command: Command, stdin: Upstream, stdout, environ: dict) -> Optional[subprocess.Popen]:
    if command.path is None:
        sys.stderr.write(f"execve: {os.strerror(errno.EFAULT)}\n")
        return None
    try:
        proc = subprocess.Popen(
            command.argv,
            executable=_executable(command.path),
            stdin=stdin,
            stdout=stdout,
            env=environ,
        )
    except OSError as exc:
        sys.stderr.write(f"execve: {exc.strerror or exc}\n")
        return None
    command.pid = proc.pid
    return proc


def _close(upstream: Upstream) -> None:
    if not isinstance(upstream, int):
        upstream.close()


def _open_outfile(outfile: str) -> int:
    try:
        fd = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    except OSError as exc:
        raise PipexError(f"{outfile}: {exc.strerror}") from exc
    if not os.access(outfile, os.W_OK):
        os.close(fd)
        raise PipexError(f"{outfile}: {os.strerror(errno.EACCES)}")
    return fd


def run_pipeline(
    infile: str,
    commands: Sequence[Command],
    outfile: str,
    env: Optional[Environment] = None,
) -> int:
    """Run commands as infile | cmd1 | ... | cmdN > outfile.

    Returns the exit status of the last command: 127 when it could not be
    started, 0 when it was ended by a signal.
    """
    commands = list(commands)
    if len(commands) < 2:
        raise PipexError(_USAGE_ERROR)
    environ = _environment(env)
    try:
        upstream: Upstream = open(infile, "rb")
    except OSError as exc:
        raise PipexError(f"{infile}: {exc.strerror}") from exc

    started: List[Optional[subprocess.Popen]] = []
    try:
        for command in commands[:-1]:
            try:
                proc = _spawn(command, upstream, subprocess.PIPE, environ)
            finally:
                _close(upstream)
            started.append(proc)
            upstream = proc.stdout if proc is not None else subprocess.DEVNULL
        try:
            out_fd = _open_outfile(outfile)
        except PipexError:
            _close(upstream)
            raise
        try:
            started.append(_spawn(commands[-1], upstream, out_fd, environ))
        finally:
            os.close(out_fd)
            _close(upstream)
    finally:
        for proc in started:
            if proc is not None:
                proc.wait()

    last = started[-1]
    if last is None:
        return EXEC_FAILURE_STATUS
    return last.returncode if last.returncode >= 0 else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command line: infile cmd1 cmd2 [... cmdN] outfile."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 4:
        sys.stderr.write(_USAGE_ERROR + "\n")
        return 1
    env = dict(os.environ)
    try:
        commands = create_commands(args[1:-1], env)
        run_pipeline(args[0], commands, args[-1], env)
    except PipexError as exc:
        sys.stderr.write(f"{exc}\n")
        return exc.status
    except ValueError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    sys.stdout.write(format_commands(commands))
    sys.stdout.flush()
    return 0