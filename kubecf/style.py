"""Terminal foreground colouring."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Mapping
from typing import TextIO

_RESET = "\x1b[0m"


def _no_color(env: Mapping[str, str]) -> bool:
    forced = env.get("CLICOLOR_FORCE", "") not in ("", "0")
    return env.get("NO_COLOR", "") != "" or (env.get("CLICOLOR") == "0" and not forced)


def is_color_supported(
    environ: Mapping[str, str] | None = None, stream: TextIO | None = None
) -> bool:
    """Return True if colour output should be used on *stream* (stdout by default)."""
    env = os.environ if environ is None else environ
    out = sys.stdout if stream is None else stream

    if _no_color(env):
        return False
    if env.get("CLICOLOR_FORCE", "") not in ("", "0"):
        return True
    isatty = getattr(out, "isatty", None)
    if isatty is None or not isatty():
        return False
    return env.get("TERM", "") != "dumb"


def _sequence(color: str) -> str:
    if color.startswith("#"):
        digits = color[1:]
        if len(digits) != 6:
            raise ValueError(f"invalid color: {color!r}")
        try:
            r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
        except ValueError:
            raise ValueError(f"invalid color: {color!r}") from None
        return f"38;2;{r};{g};{b}"
    try:
        number = int(color)
    except ValueError:
        raise ValueError(f"invalid color: {color!r}") from None
    if not 0 <= number <= 255:
        raise ValueError(f"invalid color: {color!r}")
    if number < 8:
        return str(30 + number)
    if number < 16:
        return str(90 + number - 8)
    return f"38;5;{number}"


def make_fg_style(color: str, enabled: bool | None = None) -> Callable[[str], str]:
    """Return a function that paints text in *color* (ANSI number or ``#rrggbb``).

    When colour is disabled the returned function leaves text unchanged.
    """
    if enabled is None:
        enabled = is_color_supported()
    if not enabled:
        return lambda s: s
    prefix = f"\x1b[{_sequence(color)}m"
    return lambda s: f"{prefix}{s}{_RESET}"