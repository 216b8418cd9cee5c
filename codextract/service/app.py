"""FastAPI application entrypoint for codextract service mode."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..extractor import CodeExtractor
from ..models import FileRecord
from ..parsing.languages import LANGUAGE_EXTENSIONS
from ..writer import FileWriter, WriteReport


class ExtractRequest(BaseModel):
    text: str
    output_dir: str = "."
    write: bool = False
    overwrite: bool = False


class FileEntry(BaseModel):
    path: str
    declared_path: str
    file_name: str
    language: str
    origin: str


class FailureEntry(BaseModel):
    path: str
    message: str


class ExtractResponse(BaseModel):
    status: str
    files: List[FileEntry] = []
    written: List[str] = []
    skipped: List[str] = []
    failures: List[FailureEntry] = []


class HealthResponse(BaseModel):
    status: str


def _default_extractor() -> CodeExtractor:
    return CodeExtractor()


def _default_writer() -> FileWriter:
    return FileWriter()


def _file_entry(record: FileRecord) -> FileEntry:
    return FileEntry(
        path=record.resolved_path,
        declared_path=record.declared_path,
        file_name=record.file_name,
        language=record.language,
        origin=record.origin.value,
    )


class OutputDirectoryError(RuntimeError):
    """Raised when a request names a directory outside the service output root."""


def resolve_output_dir(output_root: Path, requested: str) -> Path:
    """Resolve a requested directory under ``output_root`` or refuse it."""
    root = output_root.resolve()
    target = (root / requested).resolve()
    if target != root and root not in target.parents:
        raise OutputDirectoryError(f"Output directory {requested!r} is outside {root}")
    return target


def create_app(
    extractor_factory: Callable[[], CodeExtractor] = _default_extractor,
    writer_factory: Callable[[], FileWriter] = _default_writer,
    output_root: Path | str | None = None,
) -> FastAPI:
    """Create the FastAPI application exposing extraction.

    Requested output directories are resolved relative to ``output_root``
    (the working directory by default) and may not leave it.
    """

    root = Path(output_root) if output_root is not None else Path.cwd()
    app = FastAPI(title="codextract Service", version="1.0.0")

    async def get_extractor() -> CodeExtractor:
        return extractor_factory()

    async def get_writer() -> FileWriter:
        return writer_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get("/languages")
    async def languages() -> Dict[str, str]:
        return dict(LANGUAGE_EXTENSIONS)

    @app.post("/extract", response_model=ExtractResponse)
    async def extract(
        payload: ExtractRequest,
        extractor: CodeExtractor = Depends(get_extractor),
        writer: FileWriter = Depends(get_writer),
    ) -> ExtractResponse:
        output_dir = resolve_output_dir(root, payload.output_dir)
        records = extractor.extract_files(payload.text, output_dir)
        files = [_file_entry(record) for record in records]
        if not records:
            return ExtractResponse(status="empty")
        if not payload.write:
            return ExtractResponse(status="preview", files=files)

        def _run_write() -> WriteReport:
            return writer.write(records, overwrite=payload.overwrite)

        loop = asyncio.get_running_loop()
        report = await loop.run_in_executor(None, _run_write)
        return ExtractResponse(
            status="written",
            files=files,
            written=report.written,
            skipped=report.skipped,
            failures=[
                FailureEntry(path=failure.path, message=failure.message)
                for failure in report.failures
            ],
        )

    @app.exception_handler(RuntimeError)
    async def runtime_error_handler(
        _: Any, exc: RuntimeError
    ) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1",
    port: int = 8000,
    output_root: Path | str | None = None,
    app: Optional[FastAPI] = None,
) -> None:  # pragma: no cover - integration path
    import uvicorn

    uvicorn.run(app or create_app(output_root=output_root), host=host, port=port)
