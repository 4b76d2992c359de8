"""Static package metadata surfaced by the CLI banner and packaging checks.

Keep these values aligned with ``pyproject.toml``; the CLI ``info`` command and
``--version`` flag read them directly.
"""

from __future__ import annotations

from typing import Callable

name = "lib_log_tint"
title = "Colorized key=value log rendering with console/file fan-out and rotation"
version = "0.1.0"
homepage = "https://github.com/bitranox/lib_log_tint"
author = "bitranox"
author_email = "bitranox@gmail.com"
shell_command = "lib_log_tint"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Emit the metadata banner line by line.

    Parameters
    ----------
    writer:
        Callable receiving each newline-terminated line. Defaults to
        :func:`print` without an additional line break.

    Examples
    --------
    >>> lines = []
    >>> print_info(writer=lines.append)
    >>> lines[0]
    'Info for lib_log_tint:\\n'
    """

    emit = writer if writer is not None else (lambda text: print(text, end=""))
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    emit(f"Info for {name}:\n")
    emit("\n")
    for label, value in fields:
        emit(f"    {label:<{pad}} = {value}\n")
