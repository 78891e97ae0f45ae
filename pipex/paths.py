"""Resolving a command name against the PATH of an environment."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence

from .strings import split, strlcat, strlcpy

PATH_MAX = 4096


def env_path(env: Mapping[str, str]) -> list[str]:
    """Return the non-empty directories listed in ``env['PATH']``."""
    value = env.get("PATH")
    if value is None:
        return []
    return split(value, ":") or []


def _candidate(directory: str, name: str) -> str:
    path, _ = strlcpy(directory, PATH_MAX)
    path, _ = strlcat(path, "/", PATH_MAX)
    path, _ = strlcat(path, name, PATH_MAX)
    return path


def find_full_path(command: Sequence[str], env: Mapping[str, str]) -> list[str]:
    """Return ``command`` with its program name replaced by an executable path.

    The name is left as it is when the environment has no PATH, when the name
    itself is already executable, or when no PATH directory holds it.
    """
    if not command:
        raise ValueError("command must not be empty")
    name, *rest = command
    directories = env_path(env)
    if not directories or os.access(name, os.X_OK):
        return list(command)
    for directory in directories:
        candidate = _candidate(directory, name)
        if os.access(candidate, os.X_OK):
            return [candidate, *rest]
    return list(command)