"""Parsers that turn assistant output into code fragments."""

from .artifacts import ArtifactExtractor, ArtifactSpan, iter_artifact_spans, parse_attributes
from .comments import is_valid_path, parse_line
from .languages import (
    LANGUAGE_EXTENSIONS,
    PLAIN_TEXT,
    detect_language_from_content,
    detect_language_from_path,
)
from .segmenter import BlockSegmenter, segment

__all__ = [
    "ArtifactExtractor",
    "ArtifactSpan",
    "BlockSegmenter",
    "LANGUAGE_EXTENSIONS",
    "PLAIN_TEXT",
    "detect_language_from_content",
    "detect_language_from_path",
    "is_valid_path",
    "iter_artifact_spans",
    "parse_attributes",
    "parse_line",
    "segment",
]
