"""Byte-stream adapter reassembling lines and colorizing them for the console.

Purpose
-------
Accept raw byte writes that may split a line anywhere, emit each completed
line through the active pipeline, and keep the unfinished tail for the next
write.

Contents
--------
* :class:`ColorizingWriter` - binary-stream facade over a :class:`ConsolePort`.
* :class:`ConsoleWriteError` - raised when the console destination fails.

System Role
-----------
Sits between the console :class:`~lib_log_tint.adapters.text_sink.TextSink`
and the Rich console. The file sink receives the same events uncolored.
"""

from __future__ import annotations

import logging
import threading

from lib_log_tint.application.pipeline import PipelineHandle
from lib_log_tint.application.ports.console import ConsolePort

logger = logging.getLogger(__name__)


class ConsoleWriteError(OSError):
    """The console destination rejected a colorized line.

    ``consumed`` reports how many input bytes the failing :meth:`ColorizingWriter.write`
    call accepted (always all of them); lines not yet emitted stay buffered.
    """

    def __init__(self, consumed: int) -> None:
        super().__init__(f"console write failed after consuming {consumed} bytes")
        self.consumed = consumed


class ColorizingWriter:
    """Line-reassembling writer that colorizes through a :class:`PipelineHandle`.

    The handle is required; pass :func:`lib_log_tint.runtime.pipeline_handle`
    to follow pipelines installed with :func:`lib_log_tint.set_pipeline`. A line
    the pipeline fails to colorize is written through unchanged.

    Examples
    --------
    >>> from io import StringIO
    >>> from lib_log_tint.application.pipeline import Pipeline
    >>> out = StringIO()
    >>> writer = ColorizingWriter(out, PipelineHandle(Pipeline(renderer=lambda record: record.message.upper())))
    >>> writer.write(b"msg=hel")
    7
    >>> out.getvalue()
    ''
    >>> writer.write(b"lo\\nmsg=again\\nmsg=tail")
    21
    >>> out.getvalue()
    'HELLO\\nAGAIN\\n'
    >>> writer.pending
    b'msg=tail'
    """

    def __init__(self, dst: ConsolePort, handle: PipelineHandle, *, encoding: str = "utf-8") -> None:
        self._dst = dst
        self._handle = handle
        self._encoding = encoding
        self._buffer = bytearray()
        self._lock = threading.Lock()

    @property
    def pending(self) -> bytes:
        """Bytes received after the last newline."""

        with self._lock:
            return bytes(self._buffer)

    def writable(self) -> bool:
        return True

    def write(self, data: bytes) -> int:
        """Buffer ``data`` and emit every completed line; return ``len(data)``.

        Raises
        ------
        ConsoleWriteError
            When the destination raises. Remaining complete lines stay
            buffered and are emitted by the next successful write.
        """

        consumed = len(data)
        with self._lock:
            self._buffer.extend(data)
            while True:
                index = self._buffer.find(b"\n")
                if index < 0:
                    break
                line = self._buffer[:index].decode(self._encoding, errors="replace")
                del self._buffer[: index + 1]
                rendered = self._colorize(line)
                try:
                    self._dst.write(rendered + "\n")
                except Exception as exc:
                    raise ConsoleWriteError(consumed) from exc
        return consumed

    def _colorize(self, line: str) -> str:
        try:
            return self._handle.colorize(line)
        except Exception:
            logger.debug("pipeline failed to colorize line, writing it raw", exc_info=True)
            return line

    def flush(self) -> None:
        self._dst.flush()


__all__ = ["ColorizingWriter", "ConsoleWriteError"]
