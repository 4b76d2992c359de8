"""Terminal capability helper enabling ANSI escape processing.

Purpose
-------
Make sure SGR sequences render on Windows consoles, where virtual terminal
processing is off by default.

Contents
--------
* :func:`enable_console_ansi` - idempotent, best-effort switch.

System Role
-----------
Called once by :func:`lib_log_tint.runtime.setup_default_logging`; a no-op on
every platform other than Windows.
"""

from __future__ import annotations

import logging
import sys
import threading

logger = logging.getLogger(__name__)

_STD_OUTPUT_HANDLE = -11
_STD_ERROR_HANDLE = -12
_ENABLE_VIRTUAL_TERMINAL_PROCESSING = 0x0004

_enabled = False
_lock = threading.Lock()


def enable_console_ansi() -> bool:
    """Enable virtual terminal processing on stdout/stderr.

    Returns ``True`` once the console accepts ANSI sequences (always on
    non-Windows platforms). Failures are logged at DEBUG and reported as
    ``False``; repeated calls after a success do nothing.
    """

    global _enabled
    with _lock:
        if _enabled:
            return True
        if sys.platform != "win32":
            _enabled = True
            return True
        _enabled = _enable_windows_vt()
        return _enabled


def _enable_windows_vt() -> bool:
    import ctypes
    from ctypes import wintypes

    kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)
    success = False
    for handle_id in (_STD_OUTPUT_HANDLE, _STD_ERROR_HANDLE):
        handle = kernel32.GetStdHandle(handle_id)
        mode = wintypes.DWORD()
        if not kernel32.GetConsoleMode(handle, ctypes.byref(mode)):
            logger.debug("GetConsoleMode failed for handle %s", handle_id)
            continue
        if kernel32.SetConsoleMode(handle, mode.value | _ENABLE_VIRTUAL_TERMINAL_PROCESSING):
            success = True
        else:
            logger.debug("SetConsoleMode failed for handle %s", handle_id)
    return success


def _reset_for_testing() -> None:
    global _enabled
    with _lock:
        _enabled = False


__all__ = ["enable_console_ansi"]
