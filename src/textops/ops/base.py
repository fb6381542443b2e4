"""Base types shared by the text operations."""

from __future__ import annotations

from typing import Protocol


EMPTY_STRINGS: tuple[str, ...] = ()


class InvalidArgumentError(ValueError):
    """An argument could not be turned into a meaningful result."""
    pass


class Markup(Protocol):
    """Protocol for inline formatting markers."""
    @property
    def color_char(self) -> str:
        """Escape sentinel that opens every formatting sequence."""
        ...

    @property
    def char(self) -> str:
        """Single-character code identifying the style."""
        ...
