"""Language detection from file extensions and content."""

from __future__ import annotations

import os
from typing import Dict, Optional, Tuple

PLAIN_TEXT = "txt"

LANGUAGE_EXTENSIONS: Dict[str, str] = {
    "typescript": ".ts",
    "javascript": ".js",
    "python": ".py",
    "java": ".java",
    "cpp": ".cpp",
    "c++": ".cpp",
    "c#": ".cs",
    "rust": ".rs",
    "go": ".go",
    "ruby": ".rb",
    "php": ".php",
    "html": ".html",
    "css": ".css",
    "sql": ".sql",
    "yaml": ".yml",
    "json": ".json",
    "xml": ".xml",
    "markdown": ".md",
    "shell": ".sh",
    "bash": ".sh",
    "zsh": ".sh",
    "powershell": ".ps1",
}



def _build_reverse_lookup(table: Dict[str, str]) -> Dict[str, str]:
    # First language listed for an extension is canonical.
    reverse: Dict[str, str] = {}
    for language, extension in table.items():
        reverse.setdefault(extension, language)
    return reverse


_LANGUAGE_BY_EXTENSION = _build_reverse_lookup(LANGUAGE_EXTENSIONS)

# Order matters: the first substring found decides.
CONTENT_SIGNATURES: Tuple[Tuple[str, str], ...] = (
    ("import { useState }", "typescript"),
    ("def ", "python"),
    ("public class ", "java"),
    ("<?php", "php"),
    ("<!DOCTYPE html>", "html"),
)


def detect_language_from_path(path: str) -> str:
    """Return the language mapped to the extension of ``path``."""
    extension = os.path.splitext(path)[1].lower()
    return _LANGUAGE_BY_EXTENSION.get(extension, PLAIN_TEXT)


def detect_language_from_content(content: str) -> str:
    """Guess a language from characteristic substrings.

    This is a coarse heuristic rather than a parser: the signatures are
    checked in order and the first hit wins, so content mixing languages
    resolves to whichever signature is listed first. Returns ``PLAIN_TEXT``
    when nothing matches.
    """
    for needle, language in CONTENT_SIGNATURES:
        if needle in content:
            return language
    return PLAIN_TEXT


def extension_for_language(language: str) -> Optional[str]:
    """Return the canonical extension for ``language`` if it is known."""
    return LANGUAGE_EXTENSIONS.get(language.lower())


__all__ = [
    "CONTENT_SIGNATURES",
    "LANGUAGE_EXTENSIONS",
    "PLAIN_TEXT",
    "detect_language_from_content",
    "detect_language_from_path",
    "extension_for_language",
]
