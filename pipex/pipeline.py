"""Run a chain of commands between an input file and an output file."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import IO, TextIO, Union

from pipex.heredoc import write_heredoc
from pipex.resolve import resolve_command
from pipex.split import split_shell

HEREDOC = "here_doc"
USAGE_STATUS = 127
NOT_FOUND_STATUS = 127
FAILURE_STATUS = 1
_OUTPUT_MODE = 0o644

_Outcome = Union["subprocess.Popen[bytes]", int]


class UsageError(Exception):
    """The command line does not describe a valid pipeline."""


@dataclass(frozen=True)
class Command:
    """One stage of the pipeline: its words and the executable to run."""

    argv: tuple[str, ...]
    path: str | None

    @classmethod
    def from_text(cls, text: str, env: Mapping[str, str]) -> Command:
        """Split ``text`` into words and resolve its program through PATH."""
        argv = tuple(split_shell(text))
        return cls(argv, resolve_command(argv[0] if argv else None, env))

    @property
    def name(self) -> str:
        return self.argv[0] if self.argv else ""


@dataclass(frozen=True)
class Invocation:
    """What the command line asks for."""

    infile: str
    commands: tuple[str, ...]
    outfile: str
    limiter: str | None = None

    @property
    def heredoc(self) -> bool:
        return self.limiter is not None


def parse_args(args: Sequence[str]) -> Invocation:
    """Interpret the arguments that follow the program name.

    Either ``infile cmd1 cmd2 ... outfile`` or
    ``here_doc LIMITER cmd1 cmd2 ... outfile``; at least two commands.
    """
    args = list(args)
    if len(args) < 4:
        raise UsageError("expected: infile cmd1 cmd2 ... outfile")
    if args[0] == HEREDOC:
        if len(args) < 5:
            raise UsageError("expected: here_doc LIMITER cmd1 cmd2 ... outfile")
        return Invocation(args[0], tuple(args[2:-1]), args[-1], limiter=args[1])
    return Invocation(args[0], tuple(args[1:-1]), args[-1])


def _report(label: str, detail: str | None) -> None:
    print(f"{label}: {detail}", file=sys.stderr)


def _not_found(command: Command) -> int:
    _report("command not found", command.name)
    return NOT_FOUND_STATUS


def _spawn(command: Command, stdin, stdout, env: dict[str, str]) -> _Outcome:
    try:
        return subprocess.Popen(
            list(command.argv),
            executable=command.path,
            stdin=stdin,
            stdout=stdout,
            env=env,
        )
    except OSError as exc:
        _report(f"pipex: {command.name}", exc.strerror)
        return FAILURE_STATUS


def _first_stage(command: Command, infile: str, env: dict[str, str]) -> _Outcome:
    if command.path is None:
        return _not_found(command)
    try:
        fd = os.open(infile, os.O_RDONLY)
    except OSError as exc:
        _report("pipex: input", exc.strerror)
        return FAILURE_STATUS
    try:
        return _spawn(command, fd, subprocess.PIPE, env)
    finally:
        os.close(fd)


def _middle_stage(command: Command, stdin, env: dict[str, str]) -> _Outcome:
    if command.path is None:
        return _not_found(command)
    return _spawn(command, stdin, subprocess.PIPE, env)


def _last_stage(
    command: Command, stdin, outfile: str, append: bool, env: dict[str, str]
) -> _Outcome:
    flags = os.O_WRONLY | os.O_CREAT | (os.O_APPEND if append else os.O_TRUNC)
    try:
        fd = os.open(outfile, flags, _OUTPUT_MODE)
    except OSError as exc:
        _report("pipex: input", exc.strerror)
        return FAILURE_STATUS
    try:
        if command.path is None:
            return _not_found(command)
        return _spawn(command, stdin, fd, env)
    finally:
        os.close(fd)


def _execute(
    commands: list[Command], invocation: Invocation, env: dict[str, str]
) -> int:
    outcomes: list[_Outcome] = []
    upstream: IO[bytes] | None = None
    last = len(commands) - 1
    for index, command in enumerate(commands):
        stdin = upstream if upstream is not None else subprocess.DEVNULL
        if index == 0:
            outcome = _first_stage(command, invocation.infile, env)
        elif index == last:
            outcome = _last_stage(
                command, stdin, invocation.outfile, invocation.heredoc, env
            )
        else:
            outcome = _middle_stage(command, stdin, env)
        if upstream is not None:
            upstream.close()
        upstream = outcome.stdout if isinstance(outcome, subprocess.Popen) else None
        outcomes.append(outcome)

    for outcome in outcomes:
        if isinstance(outcome, subprocess.Popen):
            outcome.wait()

    final = outcomes[-1]
    if isinstance(final, int):
        return final
    return final.returncode if final.returncode >= 0 else 0


def run(
    invocation: Invocation, env: Mapping[str, str], stdin: TextIO | None = None
) -> int:
    """Run the pipeline and return the exit status of its last command."""
    child_env = dict(env)
    commands = [Command.from_text(text, child_env) for text in invocation.commands]
    try:
        if invocation.heredoc and commands[0].path is not None:
            write_heredoc(
                invocation.limiter,
                stdin if stdin is not None else sys.stdin,
                invocation.infile,
            )
        return _execute(commands, invocation, child_env)
    finally:
        if invocation.heredoc:
            Path(invocation.infile).unlink(missing_ok=True)


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point; returns the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        invocation = parse_args(args)
    except UsageError:
        return USAGE_STATUS
    return run(invocation, os.environ, sys.stdin)


if __name__ == "__main__":
    sys.exit(main())