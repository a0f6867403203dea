"""Locating commands through the PATH variable of an environment."""

from __future__ import annotations

import os
from typing import Iterable, Mapping, Optional

from pipechain.strings import split


class PathNotFoundError(LookupError):
    """The environment has no PATH variable."""


def path_directories(environ: Mapping[str, str]) -> list[str]:
    """Return the directories listed in the PATH of environ.

    Empty entries are dropped. Raises PathNotFoundError when PATH is absent.
    """
    path = environ.get("PATH")
    if path is None:
        raise PathNotFoundError("no PATH variable in the environment")
    return split(path, ":")


def find_command(name: str, directories: Iterable[str]) -> Optional[str]:
    """Return the first existing "<directory>/<name>", or None.

    An empty name is never found.
    """
    if not name:
        return None
    for directory in directories:
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.F_OK):
            return candidate
    return None