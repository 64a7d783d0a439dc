"""Taxonomy path normalization."""

from __future__ import annotations

from typing import Any

PATH_SEPARATOR = " > "


def as_path_string(path: Any) -> str:
    """Collapse an upstream path value into one display string.

    Strings pass through unchanged; lists/tuples keep only their string
    elements joined with ``" > "``; anything else becomes ``""``.
    """
    if isinstance(path, str):
        return path
    if isinstance(path, (list, tuple)):
        return PATH_SEPARATOR.join(p for p in path if isinstance(p, str))
    return ""
