"""A minimal interactive shell that runs pipelines of external commands."""

from __future__ import annotations

import os
import re
import subprocess
import sys

MAX_ARGS = 64
_PROMPT = "Shell> "
_ARG_PATTERN = re.compile(r'"([^"]*)"|(")|([^ \t]+)')


class ShellError(Exception):
    """Raised when a command line cannot be parsed."""


def split_commands(line: str) -> list:
    """Split an input line into the commands of a pipeline.

    Tabs become spaces, anything after the first newline is dropped, and
    empty pieces between ``|`` characters are skipped.
    """
    line = line.replace("\t", " ").split("\n", 1)[0]
    return [piece for piece in line.split("|") if piece]


def split_args(command: str) -> list:
    """Split one command into arguments; double quotes group words together."""
    args = []
    for match in _ARG_PATTERN.finditer(command):
        quoted, unclosed, plain = match.groups()
        if unclosed is not None:
            raise ShellError("Error: comillas sin cerrar")
        args.append(quoted if quoted is not None else plain)
    if len(args) >= MAX_ARGS:
        raise ShellError("Error: demasiados argumentos")
    return args


def _parse_stage(command: str) -> list:
    args = split_args(command)
    if not args or args[0] == "":
        raise ShellError("Comando vacío o inválido")
    return args


def run_pipeline(commands) -> list:
    """Run ``commands`` connected by pipes and return each one's exit status.

    A command that cannot be parsed or started reports on standard error and
    counts as having exited with status 1; the other commands still run.
    """
    commands = list(commands)
    if not commands:
        return []

    pipes = [os.pipe() for _ in range(len(commands) - 1)]
    sys.stdout.flush()
    sys.stderr.flush()

    procs = []
    try:
        for index, command in enumerate(commands):
            stdin = pipes[index - 1][0] if index > 0 else None
            stdout = pipes[index][1] if index < len(commands) - 1 else None
            try:
                args = _parse_stage(command)
            except ShellError as exc:
                print(exc, file=sys.stderr, flush=True)
                procs.append(None)
                continue
            try:
                procs.append(subprocess.Popen(args, stdin=stdin, stdout=stdout))
            except OSError as exc:
                print(f"Error: no se pudo ejecutar el comando '{args[0]}'",
                      file=sys.stderr)
                print(f"execvp: {exc.strerror or exc}", file=sys.stderr, flush=True)
                procs.append(None)
    finally:
        for read_end, write_end in pipes:
            os.close(read_end)
            os.close(write_end)

    statuses = [1 if proc is None else proc.wait() for proc in procs]
    sys.stdout.flush()
    sys.stderr.flush()
    return statuses


def main(argv=None) -> int:
    """Read command lines from standard input until end of input or ``exit``."""
    stdin = sys.stdin
    while True:
        sys.stdout.write(_PROMPT)
        sys.stdout.flush()
        line = stdin.readline()
        if not line:
            break
        commands = split_commands(line)
        if commands == ["exit"]:
            return 0
        if not commands:
            continue
        run_pipeline(commands)
    return 0


if __name__ == "__main__":
    sys.exit(main())