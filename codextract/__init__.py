"""Extract path-annotated code blocks and artifacts from assistant responses."""

from .extractor import CodeExtractor, extract_files
from .models import FileRecord, Fragment, ParsedLine, RecordOrigin
from .orchestrator import ExtractionOutcome, InputReadError, Orchestrator
from .writer import FileWriter, WriteReport

__version__ = "1.0.0"

__all__ = [
    "CodeExtractor",
    "ExtractionOutcome",
    "FileRecord",
    "FileWriter",
    "Fragment",
    "InputReadError",
    "Orchestrator",
    "ParsedLine",
    "RecordOrigin",
    "WriteReport",
    "extract_files",
]
