"""Coordinates fragment parsing into a deduplicated list of file records."""

from __future__ import annotations

import os
from typing import Iterable, List, Set

from .logging import get_logger
from .models import FileRecord, Fragment, RecordOrigin
from .parsing.artifacts import ArtifactExtractor
from .parsing.languages import detect_language_from_path
from .parsing.segmenter import BlockSegmenter


def resolve_output_path(output_dir: str | os.PathLike[str], declared_path: str) -> str:
    """Join ``declared_path`` onto ``output_dir`` in normalized form."""
    return os.path.normpath(os.path.join(os.fspath(output_dir), declared_path))


class CodeExtractor:
    """Turns a document into write-ready file records.

    Fragments from the plain document scan are considered before fragments
    found inside artifacts, and only the first fragment for each resolved
    output path is kept.
    """

    def __init__(
        self,
        segmenter: BlockSegmenter | None = None,
        artifact_extractor: ArtifactExtractor | None = None,
    ) -> None:
        self.segmenter = segmenter or BlockSegmenter()
        self.artifact_extractor = artifact_extractor or ArtifactExtractor(self.segmenter)
        self.logger = get_logger("extractor")

    def extract_files(
        self, text: str, output_dir: str | os.PathLike[str] = "."
    ) -> List[FileRecord]:
        direct = self.segmenter.segment(text)
        from_artifacts = self.artifact_extractor.extract(text)
        self.logger.debug(
            "Found %d direct and %d artifact fragments", len(direct), len(from_artifacts)
        )
        return self._resolve([*direct, *from_artifacts], output_dir)

    def _resolve(
        self, fragments: Iterable[Fragment], output_dir: str | os.PathLike[str]
    ) -> List[FileRecord]:
        records: List[FileRecord] = []
        seen: Set[str] = set()
        for fragment in fragments:
            resolved = resolve_output_path(output_dir, fragment.declared_path)
            if resolved in seen:
                self.logger.debug("Ignoring duplicate fragment for %s", resolved)
                continue
            seen.add(resolved)
            records.append(
                FileRecord(
                    language=fragment.language_hint or detect_language_from_path(resolved),
                    file_name=os.path.basename(resolved),
                    resolved_path=resolved,
                    content=fragment.content,
                    origin=RecordOrigin.CODE_BLOCK,
                    declared_path=fragment.declared_path,
                )
            )
        return records


def extract_files(text: str, output_dir: str | os.PathLike[str] = ".") -> List[FileRecord]:
    """Extract file records from ``text`` using default components."""
    return CodeExtractor().extract_files(text, output_dir)


__all__ = ["CodeExtractor", "extract_files", "resolve_output_path"]
