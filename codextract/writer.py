"""Filesystem sink for extracted file records."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence

from .logging import get_logger
from .models import FileRecord


@dataclass
class WriteFailure:
    """A record that could not be written."""

    path: str
    message: str


@dataclass
class WriteReport:
    """Outcome of writing a batch of records."""

    written: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    failures: List[WriteFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


class FileWriter:
    """Writes records to disk one at a time, continuing past per-file errors."""

    def __init__(self) -> None:
        self.logger = get_logger("writer")

    def find_existing(self, records: Sequence[FileRecord]) -> List[FileRecord]:
        """Return the records whose resolved path already exists."""
        existing: List[FileRecord] = []
        for record in records:
            try:
                if Path(record.resolved_path).exists():
                    existing.append(record)
            except OSError as exc:
                self.logger.debug("Unable to check %s: %s", record.resolved_path, exc)
        return existing

    def write(self, records: Sequence[FileRecord], *, overwrite: bool = False) -> WriteReport:
        report = WriteReport()
        for record in records:
            target = Path(record.resolved_path)
            try:
                target.parent.mkdir(parents=True, exist_ok=True)
                if not overwrite and target.exists():
                    self.logger.warning("File %s already exists. Skipping...", target)
                    report.skipped.append(record.resolved_path)
                    continue
                with target.open("w", encoding="utf-8", newline="") as handle:
                    handle.write(record.content)
            except OSError as exc:
                report.failures.append(WriteFailure(path=record.resolved_path, message=str(exc)))
                continue
            self.logger.info("Created %s", target)
            report.written.append(record.resolved_path)
        return report


__all__ = ["FileWriter", "WriteFailure", "WriteReport"]
