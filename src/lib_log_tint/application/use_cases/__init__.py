"""Application use cases operating on the log file and pipeline."""

from __future__ import annotations

from .rotate import archive_name, rotate_and_compress_log

__all__ = ["archive_name", "rotate_and_compress_log"]
