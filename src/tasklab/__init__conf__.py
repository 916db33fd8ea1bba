"""Static package metadata surfaced to CLI commands and documentation.

The ``version`` line is kept in sync with ``pyproject.toml``; the
``LAYEREDCONF_*`` identifiers decide where lib_layered_config looks for
configuration files on each platform.
"""

from __future__ import annotations

name = "tasklab"
title = "Coursework exercises: strings, shapes, JSON and a CSS selector builder"
version = "1.0.0"
homepage = "https://github.com/tasklab/tasklab"
author = "tasklab contributors"
author_email = "tasklab@example.com"
shell_command = "tasklab"

LAYEREDCONF_VENDOR = "tasklab"
LAYEREDCONF_APP = "tasklab"
LAYEREDCONF_SLUG = "tasklab"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for tasklab:
        ...
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
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
