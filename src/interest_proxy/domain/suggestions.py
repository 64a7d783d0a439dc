"""Fallback keyword suggestions for queries with no interest results.

Two independent rule sets are evaluated and merged in fixed priority order:

1. one family group, chosen by the first matching family rule (taxonomy
   hints from rejected paths, or a query substring);
2. every keyword-stem group whose stem occurs in the query.

The merge is de-duplicated (first occurrence wins) and capped at
``MAX_SUGGESTIONS``; an empty merge falls back to ``DEFAULT_SUGGESTIONS``.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .paths import as_path_string

MAX_SUGGESTIONS = 4

# (family hint, query substring, group), checked in order; first match wins.
FAMILY_RULES: tuple[tuple[str, str, tuple[str, ...]], ...] = (
    ("games", "game", ("PC game", "Mobile game", "Online game", "Gaming")),
    ("entertainment", "anime", ("Anime", "Manga", "Otaku", "Streaming")),
    ("technology", "tech", ("Computer hardware", "Gadget", "IT", "Software")),
)

# Stem -> group; every stem found in the query contributes, in this order.
KEYWORD_STEMS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("pc", ("PC game", "Computer game", "Gaming PC")),
    ("mobile", ("Mobile game", "Smartphone gaming")),
    ("rpg", ("MMORPG", "Fantasy game")),
    ("moba", ("Dota 2", "League of Legends")),
    ("esports", ("Competitive gaming", "Pro tournaments")),
    ("game", ("Video game", "Online game", "Gaming", "เกมออนไลน์")),
)

DEFAULT_SUGGESTIONS: tuple[str, ...] = ("gaming", "video game", "esports", "เกมออนไลน์")


def family_hints(raw_paths: Iterable[Any]) -> tuple[str, ...]:
    """Second breadcrumb segment of each path, trimmed and lowercased."""
    hints: list[str] = []
    for raw in raw_paths:
        parts = as_path_string(raw).split(">")
        if len(parts) > 1:
            hint = parts[1].strip().lower()
            if hint:
                hints.append(hint)
    return tuple(hints)


def family_group(query: str, hints: tuple[str, ...]) -> tuple[str, ...]:
    lower = query.lower()
    for hint, substring, group in FAMILY_RULES:
        if hint in hints or substring in lower:
            return group
    return ()


def stem_groups(query: str) -> tuple[str, ...]:
    lower = query.lower()
    out: tuple[str, ...] = ()
    for stem, group in KEYWORD_STEMS:
        if stem in lower:
            out += group
    return out


def get_suggestions(query: str | None, raw_paths: Iterable[Any] = ()) -> tuple[str, ...]:
    """Return 1-4 distinct alternative keywords for ``query``.

    Args:
        query: The caller's original free-text query.
        raw_paths: Paths of every upstream result, including rejected ones;
            used only as taxonomy-family hints.

    Returns:
        An ordered tuple of distinct suggestions, never empty.
    """
    query = query or ""
    merged = family_group(query, family_hints(raw_paths)) + stem_groups(query)
    unique = tuple(dict.fromkeys(merged))
    return unique[:MAX_SUGGESTIONS] if unique else DEFAULT_SUGGESTIONS
