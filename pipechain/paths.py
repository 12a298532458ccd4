"""Locating an executable through the PATH entry of an environment."""

from __future__ import annotations

import os
from typing import Iterable, List, Mapping, Optional, Union

Environment = Union[Mapping[str, str], Iterable[str]]

_PATH_PREFIX = "PATH="


def split_path(paths: Iterable[str], cmd: str) -> str:
    """The first "<dir>/<cmd>" that is executable, else cmd unchanged."""
    for directory in paths:
        candidate = f"{directory}/{cmd}"
        if os.access(candidate, os.X_OK):
            return candidate
    return cmd


def _path_value(env: Environment) -> Optional[str]:
    if isinstance(env, Mapping):
        return env.get("PATH")
    for entry in env:
        if entry.startswith(_PATH_PREFIX):
            return entry[len(_PATH_PREFIX):]
    return None


def _directories(value: str) -> List[str]:
    return [part for part in value.split(":") if part]


def find_path(env: Environment, cmd: str) -> Optional[str]:
    """Resolve cmd against the PATH of env.

    env is either a mapping or a sequence of "NAME=value" strings. Returns
    None when env has no PATH, the resolved path when an executable is
    found, and cmd itself otherwise.
    """
    value = _path_value(env)
    if value is None:
        return None
    return split_path(_directories(value), cmd)