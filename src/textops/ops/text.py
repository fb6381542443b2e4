"""Text normalization operations."""

from __future__ import annotations

import re
import unicodedata

from textops.ops.base import InvalidArgumentError, Markup
from textops.ops.join import combine_array

# Combining Diacritical Marks block
_COMBINING_MARKS = range(0x0300, 0x0370)
_MODIFIER_CATEGORIES = ("Lm", "Sk")


def remove_color(text: str, *markers: Markup, legacy: bool = False) -> str:
    """Remove the formatting sequences for the given markers.

    With ``legacy=True`` the input is returned untouched, matching the
    historical behaviour where the stripped result was discarded.
    """
    result = text
    for marker in markers:
        pattern = re.escape(marker.color_char + marker.char)
        result = re.sub(pattern, "", result, flags=re.IGNORECASE)
    if legacy:
        return text
    return result


def capitalise(string: str, force_lower_case: bool = True) -> str:
    """Uppercase the first letter of every space-separated word."""
    parts = string.split(" ")
    for i, part in enumerate(parts):
        if not part:
            continue
        rest = part[1:].lower() if force_lower_case else part[1:]
        parts[i] = part[0].upper() + rest
    return combine_array(0, " ", parts)


def _is_diacritic(char: str) -> bool:
    return ord(char) in _COMBINING_MARKS or unicodedata.category(char) in _MODIFIER_CATEGORIES


def strip_diacritics(text: str) -> str:
    """Remove accents and other modifier characters, keeping base letters."""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(char for char in decomposed if not _is_diacritic(char))


def limit_characters(text: str, max_length: int) -> str:
    """Truncate text to at most max_length characters."""
    if max_length < 0:
        raise InvalidArgumentError(f"max_length must not be negative: {max_length}")
    if len(text) <= max_length:
        return text
    return text[:max_length]
