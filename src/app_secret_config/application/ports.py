"""Application ports - callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature matches the
corresponding adapter function, so plain module-level functions satisfy them
through structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters. ``Config`` from lib_layered_config is
    imported under ``TYPE_CHECKING`` only so the application layer stays free
    of infrastructure imports at runtime.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from ..domain.enums import OutputFormat
from ..domain.integration import IntegrationConfiguration

if TYPE_CHECKING:
    from lib_layered_config import Config


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class LoadIntegrationConfiguration(Protocol):
    """Bind the ``IntegrationConfiguration`` section of a loaded config tree."""

    def __call__(self, config: Config) -> IntegrationConfiguration: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "LoadIntegrationConfiguration",
]
