# src/buildflags/utils/utils_terminal.py
"""Terminal styling and OSC 8 hyperlinks."""

import os
import sys
from typing import TextIO

from apathetic_utils import is_ci


# ANSI SGR codes for the EXPERIMENTAL marker
RESET = "\033[0m"
BOLD = "\033[1m"
WHITE = "\033[97m"
BG_RED = "\033[41m"

# OSC 8 escape: ESC ] 8 ; params ; URI ST
_OSC8 = "\033]8;;"
_ST = "\033\\"

# TERM_PROGRAM values known to render OSC 8 links
HYPERLINK_TERM_PROGRAMS = {"iTerm.app", "WezTerm", "vscode", "ghostty", "Hyper"}


def _env_truthy(name: str) -> bool:
    return os.getenv(name, "").lower() in {"1", "true", "yes"}


def supports_hyperlinks(stream: TextIO | None = None) -> bool:
    """Return True if `stream` (default stdout) can render terminal hyperlinks."""
    if _env_truthy("FORCE_HYPERLINK"):
        return True
    if "NO_HYPERLINK" in os.environ or is_ci():
        return False

    stream = stream if stream is not None else sys.stdout
    isatty = getattr(stream, "isatty", None)
    if isatty is None or not isatty():
        return False

    if os.getenv("WT_SESSION") or os.getenv("DOMTERM"):
        return True
    if os.getenv("TERM_PROGRAM", "") in HYPERLINK_TERM_PROGRAMS:
        return True

    vte = os.getenv("VTE_VERSION", "")
    # VTE 0.50.0 was the first release with OSC 8 support
    return vte.isdigit() and int(vte) >= 5000  # noqa: PLR2004


def terminal_link(text: str, url: str, *, enabled: bool) -> str:
    """Render `text` as a hyperlink to `url`.

    Falls back to "text (url)" when links are not enabled.
    """
    if not enabled:
        return f"{text} ({url})"
    return f"{_OSC8}{url}{_ST}{text}{_OSC8}{_ST}"


def style(text: str, *codes: str, enable_color: bool) -> str:
    """Wrap `text` in the given ANSI codes when color is enabled."""
    if not enable_color or not codes:
        return text
    return f"{''.join(codes)}{text}{RESET}"
