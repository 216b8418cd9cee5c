"""CLI entrypoints for codextract commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Sequence

from .config import CONFIG_FILENAME, ConfigError, ExtractConfig, load_config
from .logging import configure_logging
from .orchestrator import (
    STATUS_CANCELLED,
    STATUS_DRY_RUN,
    STATUS_EMPTY,
    ExtractionOutcome,
    InputReadError,
    Orchestrator,
)
from .watch import FileWatcher


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="codextract",
        description="Extract code blocks and artifacts from assistant responses into files.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    extract_parser = subparsers.add_parser(
        "extract",
        help="Write every path-annotated code block in a response to disk.",
    )
    _add_verbose_option(extract_parser, suppress_default=True)
    extract_parser.add_argument(
        "-i",
        "--input",
        required=True,
        help="Input file containing the assistant response.",
    )
    extract_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output directory for extracted files (defaults to ./extracted).",
    )
    extract_parser.add_argument(
        "--overwrite",
        action="store_true",
        default=None,
        help="Overwrite existing files without asking.",
    )
    extract_parser.add_argument(
        "--no-prompt",
        action="store_true",
        help="Never ask before overwriting; existing files are skipped.",
    )
    extract_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="List the files that would be written without touching the disk.",
    )
    extract_parser.add_argument(
        "--watch",
        action="store_true",
        help="Keep running and re-extract whenever the input file changes.",
    )
    extract_parser.add_argument(
        "--interval",
        type=float,
        default=None,
        help="Polling interval in seconds for --watch.",
    )
    extract_parser.add_argument(
        "--config",
        default=None,
        help=f"Path to a {CONFIG_FILENAME} file or its directory (defaults to the current directory).",
    )
    extract_parser.add_argument(
        "--log-file",
        default=None,
        help="Also write logs to this file.",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service exposing extraction.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")
    serve_parser.add_argument(
        "--output-root",
        default=".",
        help="Directory that every requested output directory must stay inside.",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for codextract commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "serve":
        configure_logging(verbose=bool(args.verbose))
        from .service import run_service

        run_service(host=args.host, port=args.port, output_root=args.output_root)
        return

    if args.command != "extract":  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")

    try:
        config = load_config(Path(args.config) if args.config else Path.cwd())
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    log_file = Path(args.log_file) if args.log_file else config.log_file
    configure_logging(verbose=bool(args.verbose), log_file=log_file)

    output_dir = args.output or config.output_dir
    overwrite = config.overwrite if args.overwrite is None else True
    interactive = config.prompt and not args.no_prompt and sys.stdin.isatty()
    orchestrator = Orchestrator(confirm=_prompt_overwrite if interactive else None)

    def _run_once() -> int:
        outcome = orchestrator.run(
            args.input,
            output_dir,
            overwrite=overwrite,
            dry_run=bool(args.dry_run),
        )
        return _report(outcome, args.input, output_dir)

    # Baseline before the first run so edits made during it are still seen.
    watcher = FileWatcher(args.input, interval=_watch_interval(args, config)) if args.watch else None

    try:
        exit_code = _run_once()
    except InputReadError as exc:
        parser.exit(1, f"{exc}\n")

    if watcher is not None:
        _watch(watcher, _run_once)
        return

    if exit_code:
        parser.exit(exit_code)


def _watch_interval(args: argparse.Namespace, config: ExtractConfig) -> float:
    if args.interval is not None and args.interval > 0:
        return float(args.interval)
    return config.watch.interval


def _watch(watcher: FileWatcher, run_once: Callable[[], int]) -> None:
    try:
        watcher.run(run_once)
    except KeyboardInterrupt:
        print("\nStopped watching.")


def _prompt_overwrite(existing: Sequence[str]) -> bool:
    print("\nThe following files already exist:")
    for path in existing:
        print(f"- {path}")
    try:
        answer = input("\nDo you want to overwrite these files? (y/N): ")
    except EOFError:
        return False
    return answer.strip().lower().startswith("y")


def _report(outcome: ExtractionOutcome, input_path: str, output_dir: str) -> int:
    if outcome.status == STATUS_EMPTY:
        print(f"No code blocks or artifacts found in {input_path}")
        return 0
    if outcome.status == STATUS_CANCELLED:
        print("Operation cancelled.")
        return 0
    if outcome.status == STATUS_DRY_RUN:
        print("Files that would be written (dry-run):")
        for record in outcome.records:
            print(f"- {_relativize(Path(record.resolved_path))} ({record.language})")
        return 0

    report = outcome.report
    written = report.written if report else []
    print(f"Extracted {len(written)} file(s) into {output_dir}")
    for path in written:
        print(f"- {_relativize(Path(path))}")
    if report and report.skipped:
        print(f"Skipped {len(report.skipped)} existing file(s)")
    if report and report.failures:
        print("Errors occurred during file writing:")
        for failure in report.failures:
            print(f"- {failure.path}: {failure.message}")
        return 1
    return 0


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
