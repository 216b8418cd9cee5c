"""Extraction of fragments from tagged artifact markup."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterator, List

from ..logging import get_logger
from ..models import Fragment
from .languages import detect_language_from_content
from .segmenter import BlockSegmenter

ARTIFACT_TAG = "antArtifact"

_ARTIFACT_PATTERN = re.compile(
    rf"<{ARTIFACT_TAG}(?P<attrs>[^>]*)>(?P<body>.*?)</{ARTIFACT_TAG}>",
    re.DOTALL,
)
_ATTRIBUTE_PATTERN = re.compile(r'(\w+)="([^"]*)"')

_EXTRACTABLE_TYPE_MARKERS = ("code", "html")


@dataclass(frozen=True)
class ArtifactSpan:
    """One artifact found in a document."""

    attributes: Dict[str, str]
    body: str

    @property
    def type(self) -> str:
        return self.attributes.get("type", "")

    @property
    def is_extractable(self) -> bool:
        return any(marker in self.type for marker in _EXTRACTABLE_TYPE_MARKERS)


def parse_attributes(opening_tag: str) -> Dict[str, str]:
    """Return ``name="value"`` pairs from an artifact opening tag."""
    attributes: Dict[str, str] = {}
    for name, value in _ATTRIBUTE_PATTERN.findall(opening_tag):
        attributes[name] = value
    return attributes


def iter_artifact_spans(text: str) -> Iterator[ArtifactSpan]:
    """Yield every non-overlapping artifact span in document order."""
    for match in _ARTIFACT_PATTERN.finditer(text):
        yield ArtifactSpan(
            attributes=parse_attributes(match.group("attrs")),
            body=match.group("body"),
        )


class ArtifactExtractor:
    """Pulls path-annotated fragments out of code and HTML artifacts."""

    def __init__(self, segmenter: BlockSegmenter | None = None) -> None:
        self.segmenter = segmenter or BlockSegmenter()
        self.logger = get_logger("artifacts")

    def extract(self, text: str) -> List[Fragment]:
        fragments: List[Fragment] = []
        for span in iter_artifact_spans(text):
            if not span.is_extractable:
                self.logger.debug(
                    "Skipping artifact %r with type %r",
                    span.attributes.get("identifier"),
                    span.type,
                )
                continue

            language = span.attributes.get("language") or detect_language_from_content(
                span.body
            )
            found = self.segmenter.segment(span.body)
            if not found:
                # TODO: synthesize a path from the `identifier` attribute once
                # single-file artifacts are supported.
                self.logger.debug(
                    "Artifact %r has no path declarations; nothing to extract",
                    span.attributes.get("identifier"),
                )
                continue
            fragments.extend(fragment.with_language_hint(language) for fragment in found)
        return fragments


__all__ = [
    "ARTIFACT_TAG",
    "ArtifactExtractor",
    "ArtifactSpan",
    "iter_artifact_spans",
    "parse_attributes",
]
