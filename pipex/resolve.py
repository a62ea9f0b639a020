"""Locate the executable for a command name using the PATH variable."""

from __future__ import annotations

import os
from collections.abc import Mapping


def search_path(env: Mapping[str, str]) -> list[str]:
    """Return the non-empty directories listed in ``env['PATH']``."""
    path = env.get("PATH")
    if path is None:
        return []
    return [directory for directory in path.split(":") if directory]


def resolve_command(name: str | None, env: Mapping[str, str]) -> str | None:
    """Return the path to run for ``name``, or None if it cannot be found.

    A name that is itself executable is returned unchanged. Otherwise each
    PATH directory is tried in order, with the name appended after a slash.
    """
    if not name:
        return None
    if os.access(name, os.X_OK):
        return name
    suffix = name if name.startswith("/") else "/" + name
    for directory in search_path(env):
        candidate = directory + suffix
        if os.access(candidate, os.X_OK):
            return candidate
    return None