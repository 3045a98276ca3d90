"""Window colours taken from the desktop settings file, rendered as CSS."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_BACKGROUND = "#FF000000"
DEFAULT_FOREGROUND = "#FFFFFFFF"

_MAX_VALUE_LEN = 63
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _hex_pair(text: str) -> Optional[int]:
    if len(text) != 2 or not set(text) <= _HEX_DIGITS:
        return None
    return int(text, 16)


def parse_color(value: str) -> str:
    """Turn a "#AARRGGBB" colour into CSS rgba(); other values pass through."""
    if value.startswith("#") and len(value) >= 9:
        parts = [_hex_pair(value[i:i + 2]) for i in range(1, 9, 2)]
        if all(p is not None for p in parts):
            a, r, g, b = parts
            return f"rgba({r}, {g}, {b}, {a / 255.0:.3f})"
    return value


def _quoted(line: str) -> Optional[str]:
    start = line.find('"')
    if start < 0:
        return None
    end = line.find('"', start + 1)
    if end < 0:
        return None
    return line[start + 1:end][:_MAX_VALUE_LEN]


def parse_settings(text: str) -> tuple[str, str]:
    """Background and text colours named in a settings file, with defaults."""
    background = DEFAULT_BACKGROUND
    foreground = DEFAULT_FOREGROUND
    for line in text.splitlines():
        if "background_color:" in line:
            value = _quoted(line)
            if value is not None:
                background = value
        elif "text_color:" in line:
            value = _quoted(line)
            if value is not None:
                foreground = value
    return background, foreground


def build_css(background: str, foreground: str) -> str:
    """Style sheet applying the given CSS colours to windows and text."""
    return (
        f"window {{ background-color: {background}; }}\n"
        f"label {{ color: {foreground}; }}\n"
        f".title-label {{ color: {foreground}; }}\n"
        f".subtitle-label {{ color: {foreground}; }}\n"
        f"textview text {{ color: {foreground}; background-color: transparent; }}\n"
    )


def settings_path(home: PathLike) -> Path:
    """Location of the settings file under a home directory."""
    return Path(home) / ".config" / "venom" / "settings.vaxp"


def load_theme_css(path: PathLike) -> Optional[str]:
    """CSS built from a settings file, or None when the file cannot be read."""
    try:
        text = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError:
        return None
    background, foreground = parse_settings(text)
    return build_css(parse_color(background), parse_color(foreground))