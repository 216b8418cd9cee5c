"""Pipeline orchestration for a single extraction run."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from .extractor import CodeExtractor
from .logging import get_logger
from .models import FileRecord
from .writer import FileWriter, WriteReport

ConfirmCallback = Callable[[Sequence[str]], bool]

STATUS_EMPTY = "empty"
STATUS_DRY_RUN = "dry-run"
STATUS_CANCELLED = "cancelled"
STATUS_COMPLETED = "completed"


class InputReadError(RuntimeError):
    """Raised when the input document cannot be read."""


@dataclass
class ExtractionOutcome:
    """Result of an extraction run."""

    status: str
    records: List[FileRecord] = field(default_factory=list)
    report: Optional[WriteReport] = None
    existing: List[str] = field(default_factory=list)


class Orchestrator:
    """Reads an input document, extracts file records and writes them out."""

    def __init__(
        self,
        extractor: CodeExtractor | None = None,
        writer: FileWriter | None = None,
        confirm: ConfirmCallback | None = None,
    ) -> None:
        self.extractor = extractor or CodeExtractor()
        self.writer = writer or FileWriter()
        self.confirm = confirm
        self.logger = get_logger("orchestrator")

    def run(
        self,
        input_path: str | Path,
        output_dir: str | Path,
        *,
        overwrite: bool = False,
        dry_run: bool = False,
    ) -> ExtractionOutcome:
        """Run the full pipeline once and report what happened."""
        source = Path(input_path).expanduser()
        self.logger.info("Processing input file: %s", source)
        text = self._read_input(source)

        records = self.extractor.extract_files(text, output_dir)
        if not records:
            self.logger.warning("No code blocks or artifacts found in %s", source)
            return ExtractionOutcome(status=STATUS_EMPTY)
        self.logger.debug("Extracted %d file records", len(records))

        if dry_run:
            return ExtractionOutcome(status=STATUS_DRY_RUN, records=records)

        existing: List[str] = []
        if not overwrite:
            existing = [record.resolved_path for record in self.writer.find_existing(records)]
            if existing and self.confirm is not None:
                if not self.confirm(existing):
                    self.logger.warning("Operation cancelled by user")
                    return ExtractionOutcome(
                        status=STATUS_CANCELLED, records=records, existing=existing
                    )
                overwrite = True

        report = self.writer.write(records, overwrite=overwrite)
        if report.failures:
            self.logger.error("Errors occurred during file writing:")
            for failure in report.failures:
                self.logger.error("- %s: %s", failure.path, failure.message)
        else:
            self.logger.info("Extraction completed successfully")

        return ExtractionOutcome(
            status=STATUS_COMPLETED, records=records, report=report, existing=existing
        )

    def _read_input(self, source: Path) -> str:
        try:
            with source.open(encoding="utf-8", newline="") as handle:
                return handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise InputReadError(f"Unable to read input file {source}: {exc}") from exc


__all__ = [
    "ConfirmCallback",
    "ExtractionOutcome",
    "InputReadError",
    "Orchestrator",
    "STATUS_CANCELLED",
    "STATUS_COMPLETED",
    "STATUS_DRY_RUN",
    "STATUS_EMPTY",
]
