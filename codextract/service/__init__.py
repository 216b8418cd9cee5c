"""HTTP service mode for codextract."""

from .app import OutputDirectoryError, create_app, resolve_output_dir, run_service

__all__ = ["OutputDirectoryError", "create_app", "resolve_output_dir", "run_service"]
