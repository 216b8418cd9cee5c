"""Line-oriented segmentation of text into path-annotated fragments."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional

from ..models import Fragment
from .comments import COMMENT_MARKER, parse_line

_FENCE_LINE = re.compile(r"```[^\s`]*")


def is_fence_line(line: str) -> bool:
    """Return True for a line holding only a fence marker and optional language tag."""
    return _FENCE_LINE.fullmatch(line.strip()) is not None


def _trim_blank_lines(text: str) -> str:
    lines = text.split("\n")
    start = 0
    end = len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    kept = lines[start:end]
    if kept:
        # CRLF input leaves a carriage return on the last kept line.
        kept[-1] = kept[-1].rstrip("\r")
    return "\n".join(kept)


@dataclass
class SegmenterState:
    """Mutable scan state for one pass of :class:`BlockSegmenter`."""

    in_fence: bool = False
    current_path: Optional[str] = None
    accumulator: List[str] = field(default_factory=list)
    fence_buffer: List[str] = field(default_factory=list)
    fragments: List[Fragment] = field(default_factory=list)

    @property
    def has_active_path(self) -> bool:
        return self.current_path is not None

    def toggle_fence(self) -> None:
        if not self.in_fence:
            self.in_fence = True
            return
        if self.current_path is not None:
            self.accumulator.append("".join(self.fence_buffer))
        self.fence_buffer = []
        self.in_fence = False

    def declare_path(self, path: str, description: Optional[str]) -> None:
        self.finalize()
        self.current_path = path
        if description:
            self.accumulator.append(f"{COMMENT_MARKER} {description}")

    def finalize(self) -> None:
        """Emit the active path's content as a fragment and reset the accumulator."""
        if self.current_path is None:
            return
        content = _trim_blank_lines("\n".join(self.accumulator))
        if content:
            self.fragments.append(Fragment(declared_path=self.current_path, content=content))
        self.accumulator = []


class BlockSegmenter:
    """Splits a document into fragments keyed by `//` path declarations.

    Fenced code is treated as opaque: lines inside a fence are never checked
    for path declarations. Text outside fences is kept only once a path has
    been declared, so it stays attached to that path's fragment.
    """

    def segment(self, text: str) -> List[Fragment]:
        state = SegmenterState()
        for line in text.split("\n"):
            self._feed(state, line)
        # An unterminated fence is dropped with the state.
        state.finalize()
        return state.fragments

    @staticmethod
    def _feed(state: SegmenterState, line: str) -> None:
        if is_fence_line(line):
            state.toggle_fence()
            return

        if state.in_fence:
            state.fence_buffer.append(line + "\n")
            return

        parsed = parse_line(line)
        if parsed.is_path_declaration and parsed.declared_path:
            state.declare_path(parsed.declared_path, parsed.trailing_comment)
        elif state.has_active_path:
            state.accumulator.append(line)


def segment(text: str) -> List[Fragment]:
    """Segment ``text`` with a default :class:`BlockSegmenter`."""
    return BlockSegmenter().segment(text)


__all__ = ["BlockSegmenter", "SegmenterState", "is_fence_line", "segment"]
