# src/buildflags/utils/__init__.py

from .utils_terminal import (
    BG_RED,
    BOLD,
    RESET,
    WHITE,
    style,
    supports_hyperlinks,
    terminal_link,
)
from .utils_text import closest_match, levenshtein_distance


__all__ = [  # noqa: RUF022
    # utils_terminal
    "BG_RED",
    "BOLD",
    "RESET",
    "WHITE",
    "style",
    "supports_hyperlinks",
    "terminal_link",
    # utils_text
    "closest_match",
    "levenshtein_distance",
]
