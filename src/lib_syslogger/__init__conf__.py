"""Static package metadata surfaced by the CLI ``info`` command.

Keep the values in sync with ``pyproject.toml``.
"""

from __future__ import annotations

from typing import Callable

name = "lib_syslogger"
title = "POSIX-style syslog sessions with composable fallback backends"
version = "0.1.0"
homepage = "https://github.com/bitranox/lib_syslogger"
author = "bitranox"
author_email = "bitranox@gmail.com"
shell_command = "lib_syslogger"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Emit the metadata banner one line at a time.

    Examples
    --------
    >>> lines = []
    >>> print_info(writer=lines.append)
    >>> lines[0]
    'Info for lib_syslogger:\\n'
    """

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
    lines = [f"Info for {name}:\n", "\n"]
    lines.extend(f"    {label.ljust(pad)} = {value}\n" for label, value in fields)
    emit = writer or (lambda text: print(text, end=""))
    for line in lines:
        emit(line)


__all__ = ["author", "author_email", "homepage", "name", "print_info", "shell_command", "title", "version"]
