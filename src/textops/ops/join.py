"""Joining, splitting and list-formatting operations."""

from __future__ import annotations

import warnings
from collections.abc import Iterable, Sequence
from itertools import islice
from typing import Any

from textops.ops.base import InvalidArgumentError


def to_strings(*values: Any) -> list[str]:
    """Convert arbitrary objects into strings."""
    return [str(value) for value in values]


def separate(start_index: int, items: Sequence[str]) -> list[str]:
    """Return the items from start_index onwards."""
    if not items or start_index < 0 or start_index >= len(items):
        return []
    return list(islice(items, start_index, None))


def combine_array(start_index: int, separator: str, items: Sequence[str] | None) -> str:
    """Join items from start_index onwards with separator between them.

    Missing items or an out-of-range start_index give an empty string.
    """
    if not items or start_index < 0 or start_index >= len(items):
        return ""
    parts: list[str] = []
    for item in islice(items, start_index, None):
        parts.append(item)
        parts.append(separator)
    combined = "".join(parts)
    return combined[:len(combined) - len(separator)]


def combine(separator: str, collection: Iterable[str] | None, start_index: int = 0) -> str:
    """Join any iterable of strings; iteration order is join order."""
    if collection is None:
        return ""
    return combine_array(start_index, separator, list(collection))


def combine_split(start_index: int, items: Sequence[str] | None, separator: str) -> str:
    """Deprecated argument order for :func:`combine_array`."""
    warnings.warn(
        "combine_split() is deprecated, use combine_array()",
        DeprecationWarning,
        stacklevel=2,
    )
    return combine_array(start_index, separator, items)


def split_args(start_index: int, separator: str, items: Sequence[str] | None) -> list[str]:
    """Join items from start_index, then split the result on separator.

    An empty join gives an empty list. The separator is matched literally.
    """
    combined = combine_array(start_index, separator, items)
    if not combined:
        return []
    if not separator:
        return list(combined)
    return combined.split(separator)


def build_sentence_list(words: Sequence[str]) -> str:
    """Format words as an English list, e.g. ``one, two and three``."""
    words = list(words)
    if not words:
        raise InvalidArgumentError("Cannot build a sentence list from no words")
    if len(words) == 1:
        return words[0]
    if len(words) == 2:
        return combine_array(0, " and ", words)
    return combine_array(0, ", ", words[:-1]) + " and " + words[-1]
