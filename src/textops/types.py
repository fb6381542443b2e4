"""Core types for textops."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

COLOR_CHAR = "§"


class ChatColor(str, Enum):
    """Minecraft chat formatting codes."""
    BLACK = "0"
    DARK_BLUE = "1"
    DARK_GREEN = "2"
    DARK_AQUA = "3"
    DARK_RED = "4"
    DARK_PURPLE = "5"
    GOLD = "6"
    GRAY = "7"
    DARK_GRAY = "8"
    BLUE = "9"
    GREEN = "a"
    AQUA = "b"
    RED = "c"
    LIGHT_PURPLE = "d"
    YELLOW = "e"
    WHITE = "f"
    MAGIC = "k"
    BOLD = "l"
    STRIKETHROUGH = "m"
    UNDERLINE = "n"
    ITALIC = "o"
    RESET = "r"

    @property
    def char(self) -> str:
        return self.value

    @property
    def color_char(self) -> str:
        return COLOR_CHAR

    def __str__(self) -> str:
        return COLOR_CHAR + self.value


class TextOpsConfig(BaseModel):
    """Defaults used by the command line front end."""
    separator: str = " "
    legacy_color_strip: bool = False  # Reproduce the old no-op colour stripping
    verbose: bool = False
