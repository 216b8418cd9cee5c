"""Core data models shared across codextract components."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class ParsedLine:
    """Classification of a single line of text."""

    is_path_declaration: bool
    declared_path: Optional[str] = None
    trailing_comment: Optional[str] = None


@dataclass(frozen=True)
class Fragment:
    """Code extracted for one declared path, before output resolution."""

    declared_path: str
    content: str
    language_hint: Optional[str] = None

    def with_language_hint(self, hint: Optional[str]) -> "Fragment":
        """Return a copy carrying ``hint`` unless a hint is already present."""
        if self.language_hint or not hint:
            return self
        return replace(self, language_hint=hint)


class RecordOrigin(str, Enum):
    """Where a file record was found in the source document."""

    CODE_BLOCK = "code-block"


@dataclass(frozen=True)
class FileRecord:
    """A fragment resolved to an output location and ready to write."""

    language: str
    file_name: str
    resolved_path: str
    content: str
    origin: RecordOrigin = RecordOrigin.CODE_BLOCK
    declared_path: str = ""
