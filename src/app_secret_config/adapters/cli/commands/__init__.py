"""CLI command implementations.

Contents:
    * Verb commands from :mod:`.verbs`
    * Info command from :mod:`.info`
    * Config command from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_info
from .verbs import cli_manage_configuration, cli_manage_test_configuration

__all__ = [
    "cli_config",
    "cli_info",
    "cli_manage_configuration",
    "cli_manage_test_configuration",
]
