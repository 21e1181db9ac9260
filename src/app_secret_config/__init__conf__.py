"""Static package metadata surfaced to CLI commands and documentation.

Values here are kept in sync with ``pyproject.toml``. The ``LAYEREDCONF_*``
identifiers decide where :mod:`lib_layered_config` looks for configuration
files on each platform.
"""

from __future__ import annotations

from typing import Final

name: Final[str] = "app_secret_config"
title: Final[str] = "Look up provider credentials from layered configuration"
version: Final[str] = "1.0.0"
homepage: Final[str] = "https://github.com/app-secret-config/app_secret_config"
author: Final[str] = "app_secret_config maintainers"
author_email: Final[str] = "maintainers@app-secret-config.invalid"
shell_command: Final[str] = "app-secret-config"

LAYEREDCONF_VENDOR: Final[str] = "app-secret-config"
LAYEREDCONF_APP: Final[str] = "App Secret Config"
LAYEREDCONF_SLUG: Final[str] = "app-secret-config"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for app_secret_config:
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
