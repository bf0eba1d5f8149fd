"""Terminal abstraction used by hooks and plugins."""

import os
import sys
from typing import Dict, Optional, TextIO

from .types import ColorName

RESET = "\033[0m"

COLOR_CODES: Dict[str, str] = {
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "grey": "\033[90m",
    "bold": "\033[1m",
}


def _detect_utf8(stream: TextIO) -> bool:
    encoding = getattr(stream, "encoding", None) or ""
    return encoding.lower().replace("-", "").replace("_", "") == "utf8"


def _detect_color_support(stream: TextIO) -> bool:
    return (
        hasattr(stream, "isatty") and stream.isatty() and
        os.environ.get("TERM", "").lower() != "dumb" and
        os.environ.get("NO_COLOR") is None
    )


class Terminal:
    """What the hook knows about the terminal it writes to.

    ``is_utf8`` decides whether plugins may print non-ASCII symbols. Hooks
    whose output ends up in a commit message switch it off.
    """

    def __init__(self, is_utf8: Optional[bool] = None,
                 supports_color: Optional[bool] = None,
                 stream: Optional[TextIO] = None) -> None:
        stream = stream or sys.stdout
        self._is_utf8 = _detect_utf8(stream) if is_utf8 is None else bool(is_utf8)
        self._supports_color = _detect_color_support(stream) if supports_color is None else bool(supports_color)

    @property
    def is_utf8(self) -> bool:
        """Whether output may contain UTF-8 characters."""
        return self._is_utf8

    @is_utf8.setter
    def is_utf8(self, value: bool) -> None:
        self._is_utf8 = bool(value)

    @property
    def supports_color(self) -> bool:
        """Whether ANSI color sequences are emitted."""
        return self._supports_color

    def color(self, color: ColorName, text: str) -> str:
        """Wrap text in the ANSI sequence for a color.

        Args:
            color: One of the names in COLOR_CODES
            text: Text to colorize

        Returns:
            Colorized text, or text unchanged when colors are unsupported

        Raises:
            ValueError: If the color name is unknown
        """
        if color not in COLOR_CODES:
            raise ValueError(f"Unknown color '{color}'. Valid values: {sorted(COLOR_CODES)}")
        if not self._supports_color:
            return text
        return f"{COLOR_CODES[color]}{text}{RESET}"

    def __repr__(self) -> str:
        return f"Terminal(is_utf8={self._is_utf8}, supports_color={self._supports_color})"
