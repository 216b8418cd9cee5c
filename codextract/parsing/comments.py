"""Path declaration recognition for `//` comment lines."""

from __future__ import annotations

import re
from typing import Pattern, Tuple

from ..models import ParsedLine

COMMENT_MARKER = "//"

_PATH = r"[\w-]+/[\w/-]+\.\w+"

_VALID_PATH = re.compile(_PATH, re.ASCII)

# Tried in order; the first pattern whose captured path validates wins.
PATH_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(rf"//\s*({_PATH})(?:\s*:\s*(.+))?", re.ASCII),
    re.compile(rf"//\s*@file\s+({_PATH})", re.ASCII),
    re.compile(rf"//\s*filepath:\s*({_PATH})", re.ASCII),
)


def is_valid_path(path: str) -> bool:
    """Return True when ``path`` is a safe relative file path with an extension."""
    return (
        _VALID_PATH.fullmatch(path) is not None
        and ".." not in path
        and not path.startswith("/")
        and "\\" not in path
    )


def parse_line(line: str) -> ParsedLine:
    """Classify ``line`` as a path declaration, a plain comment, or neither."""
    stripped = line.strip()
    if not stripped.startswith(COMMENT_MARKER):
        return ParsedLine(is_path_declaration=False)

    for pattern in PATH_PATTERNS:
        match = pattern.match(stripped)
        if match is None:
            continue
        path = match.group(1)
        if not is_valid_path(path):
            continue
        description = match.group(2) if pattern.groups > 1 else None
        return ParsedLine(
            is_path_declaration=True,
            declared_path=path,
            trailing_comment=description,
        )

    return ParsedLine(
        is_path_declaration=False,
        trailing_comment=stripped[len(COMMENT_MARKER):].strip(),
    )


__all__ = ["COMMENT_MARKER", "PATH_PATTERNS", "is_valid_path", "parse_line"]
