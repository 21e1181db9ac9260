"""Application layer - use cases and port definitions.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
    * :mod:`.verbs` - Verb actions invoked by the CLI
"""

from __future__ import annotations

from .ports import (
    DisplayConfig,
    GetConfig,
    InitLogging,
    LoadIntegrationConfiguration,
)
from .verbs import ManageConfiguration, ManageTestConfiguration, VerbOutcome

__all__ = [
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "LoadIntegrationConfiguration",
    "ManageConfiguration",
    "ManageTestConfiguration",
    "VerbOutcome",
]
