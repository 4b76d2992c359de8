"""Optional ``.env`` loading for the ``LOG_*`` configuration variables.

Purpose
-------
Let operators keep logging settings (``LOG_FILE_PATH``, ``LOG_THEME`` ...)
in a project-local ``.env`` file without exporting them by hand.

Contents
--------
* :data:`DOTENV_ENV_VAR` - environment toggle enabling ``.env`` loading.
* :func:`should_use_dotenv` - precedence between CLI flag and toggle.
* :func:`enable_dotenv` - locate and load the nearest ``.env`` once.

System Role
-----------
Used by the CLI before :func:`lib_log_tint.runtime.setup_default_logging`
reads the environment. Existing environment variables always win over
values from the file.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

DOTENV_ENV_VAR = "LIB_LOG_TINT_USE_DOTENV"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})

_lock = threading.Lock()
_loaded = False
_loaded_path: Path | None = None


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` files should be loaded.

    An explicit CLI choice wins; otherwise the :data:`DOTENV_ENV_VAR` value
    decides.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="yes")
    True
    >>> should_use_dotenv()
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUE_VALUES


def enable_dotenv() -> Path | None:
    """Load the nearest ``.env`` without overriding existing variables.

    The search walks upwards from the working directory. Only the first
    call loads a file; later calls return the cached result.

    Returns
    -------
    Path | None
        Resolved path of the loaded file, or ``None`` when none was found.
    """

    global _loaded, _loaded_path
    with _lock:
        if _loaded:
            return _loaded_path
        located = find_dotenv(usecwd=True)
        _loaded = True
        if not located:
            logger.debug("no .env file found")
            return None
        path = Path(located).resolve()
        load_dotenv(path, override=False)
        logger.debug("loaded environment from %s", path)
        _loaded_path = path
        return path


def _reset_dotenv_state_for_testing() -> None:
    global _loaded, _loaded_path
    with _lock:
        _loaded = False
        _loaded_path = None


__all__ = ["DOTENV_ENV_VAR", "enable_dotenv", "should_use_dotenv"]
