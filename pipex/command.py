"""Locating and preparing the commands a pipeline runs."""

from __future__ import annotations

import os
import sys
from typing import List, Mapping, Optional, Tuple

from .text import split


class CommandError(Exception):
    """A command could not be prepared or started."""

    exit_status = 1

    def __init__(self, reason: str, target: str, exit_status: Optional[int] = None):
        super().__init__(f"{reason}: {target}")
        self.reason = reason
        self.target = target
        if exit_status is not None:
            self.exit_status = exit_status


class CommandNotFoundError(CommandError):
    """The command does not exist; the shell convention gives status 127."""

    exit_status = 127

    def __init__(self, target: str, reason: str = "command not found"):
        super().__init__(reason, target)


class CommandPermissionError(CommandError):
    """The command exists but may not be executed; status 126."""

    exit_status = 126

    def __init__(self, target: str, reason: str = "permission denied"):
        super().__init__(reason, target)


def search_paths(env: Mapping[str, str]) -> List[str]:
    """Return the directories listed in ``PATH``, starting from its first '/'.

    Empty entries are dropped; a missing ``PATH``, or one without any '/',
    gives an empty list.
    """
    value = env.get("PATH")
    if value is None:
        return []
    start = value.find("/")
    if start < 0:
        return []
    return split(value[start:], ":")


def parse_command(cmd: str) -> List[str]:
    """Split a command line into its words on spaces."""
    words = split(cmd, " ")
    if not words:
        raise CommandNotFoundError(cmd)
    return words


def _report(message: str) -> None:
    print(message, file=sys.stderr, flush=True)


def resolve_executable(name: str, env: Mapping[str, str]) -> str:
    """Find ``name`` in the ``PATH`` of ``env``.

    Candidates that exist but are not executable are reported on stderr and
    skipped. Raises CommandNotFoundError when no directory holds a match.
    """
    for directory in search_paths(env):
        candidate = f"{directory}/{name}"
        if not os.access(candidate, os.F_OK):
            continue
        if os.access(candidate, os.X_OK):
            return candidate
        _report(str(CommandPermissionError(candidate)))
    raise CommandNotFoundError(name)


def prepare_command(cmd: str, env: Mapping[str, str]) -> Tuple[str, List[str]]:
    """Return the executable path and the argument vector for ``cmd``.

    A first word holding '/' is used as a path directly; any other word is
    looked up in ``PATH``.
    """
    argv = parse_command(cmd)
    name = argv[0]
    if "/" not in name:
        return resolve_executable(name, env), argv
    if not os.access(name, os.X_OK):
        if not os.access(name, os.F_OK):
            raise CommandNotFoundError(name, reason="no such file or directory")
        raise CommandPermissionError(name)
    return name, argv