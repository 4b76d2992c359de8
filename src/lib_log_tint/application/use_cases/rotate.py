"""Use case archiving the current log file as gzip and truncating it in place.

Purpose
-------
Snapshot a growing append-only log into ``<archive_dir>/server_<timestamp>.log.gz``
and empty the source so writers holding an append handle keep working.

Contents
--------
* :func:`rotate_and_compress_log` - the rotation operation.
* :func:`archive_name` - archive file naming helper.

System Role
-----------
Runs out-of-band, triggered by the caller (CLI ``rotate`` command, scheduler,
shutdown hook). The source is truncated only after the archive has been fully
written and closed; a crash mid-copy leaves a partial archive beside an intact
source. Concurrent rotation and logging is the caller's to coordinate.
"""

from __future__ import annotations

import gzip
import logging
import os
import shutil
from datetime import datetime
from pathlib import Path
from typing import BinaryIO

from lib_log_tint.application.errors import RotationError
from lib_log_tint.application.ports.time import ClockPort

logger = logging.getLogger(__name__)

DEFAULT_LOG_FILE = "server.log"
DEFAULT_ARCHIVE_DIR = "logs"
ARCHIVE_TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"
_COPY_CHUNK_SIZE = 64 * 1024


def archive_name(moment: datetime) -> str:
    """Return the archive file name for ``moment`` (second resolution).

    Examples
    --------
    >>> archive_name(datetime(2025, 1, 2, 3, 4, 5))
    'server_2025-01-02_03-04-05.log.gz'
    """

    return f"server_{moment.strftime(ARCHIVE_TIMESTAMP_FORMAT)}.log.gz"


def _resolve(value: str | os.PathLike[str] | None, fallback: str) -> Path:
    text = os.fspath(value).strip() if value is not None else ""
    return Path(text or fallback)


def rotate_and_compress_log(
    source_path: str | os.PathLike[str] | None = DEFAULT_LOG_FILE,
    archive_dir: str | os.PathLike[str] | None = DEFAULT_ARCHIVE_DIR,
    *,
    clock: ClockPort | None = None,
) -> Path | None:
    """Archive ``source_path`` into ``archive_dir`` and truncate it.

    Parameters
    ----------
    source_path:
        Log file to rotate; blank values fall back to ``server.log``.
    archive_dir:
        Directory receiving the archive; created when missing; blank values
        fall back to ``logs``.
    clock:
        Optional :class:`ClockPort` supplying the archive timestamp; local wall
        time is used otherwise.

    Returns
    -------
    Path | None
        Path of the new archive, or ``None`` when the source is missing or
        empty (nothing archived, nothing truncated).

    Raises
    ------
    RotationError
        When any step fails. Steps after the failing one are skipped, so the
        source is never truncated unless the archive was completely written.
        An archive that already exists (a second rotation within the same
        second) is never overwritten; it fails the ``open`` step.
    """

    source = _resolve(source_path, DEFAULT_LOG_FILE)
    target_dir = _resolve(archive_dir, DEFAULT_ARCHIVE_DIR)

    try:
        target_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise RotationError("mkdir", target_dir) from exc

    try:
        size = source.stat().st_size
    except FileNotFoundError:
        logger.debug("rotation skipped, %s does not exist", source)
        return None
    except OSError as exc:
        raise RotationError("stat", source) from exc
    if size == 0:
        logger.debug("rotation skipped, %s is empty", source)
        return None

    moment = clock.now() if clock is not None else datetime.now().astimezone()
    target = target_dir / archive_name(moment)

    try:
        source_handle = source.open("rb")
    except OSError as exc:
        raise RotationError("open", source) from exc
    with source_handle:
        _write_archive(source_handle, target)

    try:
        os.truncate(source, 0)
    except OSError as exc:
        raise RotationError("truncate", source) from exc

    logger.info("rotated %s into %s", source, target)
    return target


def _write_archive(source_handle: BinaryIO, target: Path) -> None:
    """Stream ``source_handle`` through gzip into ``target`` and close everything."""

    try:
        archive_handle = target.open("xb")
    except OSError as exc:
        raise RotationError("open", target) from exc

    step = "copy"
    try:
        with archive_handle:
            with gzip.GzipFile(fileobj=archive_handle, mode="wb") as compressor:
                shutil.copyfileobj(source_handle, compressor, _COPY_CHUNK_SIZE)
                step = "close"
    except OSError as exc:
        raise RotationError(step, target) from exc


__all__ = [
    "ARCHIVE_TIMESTAMP_FORMAT",
    "DEFAULT_ARCHIVE_DIR",
    "DEFAULT_LOG_FILE",
    "archive_name",
    "rotate_and_compress_log",
]
