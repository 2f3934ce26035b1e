"""Reading ``KEY=value`` settings from a dotenv-style file."""

from __future__ import annotations

import os

_QUOTES = ('"', "'")


def parse_env_line(line: str) -> tuple[str, str] | None:
    """Parse one line into ``(key, value)``, or ``None`` for blanks and comments."""
    content = line.strip(" \t\r\n")
    if not content or content.startswith("#"):
        return None
    key, sep, value = line.partition("=")
    if not sep:
        return None
    key = key.strip(" \t")
    value = value.strip(" \t\r\n")
    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTES:
        value = value[1:-1]
    return key, value


def load_env(path: str | os.PathLike[str] = ".env") -> dict[str, str]:
    """Load settings from ``path``; a missing file gives an empty mapping."""
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.readlines()
    except OSError:
        return {}
    return dict(filter(None, map(parse_env_line, lines)))