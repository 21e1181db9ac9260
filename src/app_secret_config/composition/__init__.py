"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config
from ..adapters.config.integration import load_integration_configuration
from ..adapters.config.loader import get_config
from ..adapters.logging.setup import init_logging

# Static conformance assertions checked by the type checker only.
if TYPE_CHECKING:
    from ..application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        LoadIntegrationConfiguration,
    )

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_load_integration_configuration: LoadIntegrationConfiguration = load_integration_configuration
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    display_config: DisplayConfig
    load_integration_configuration: LoadIntegrationConfiguration
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        load_integration_configuration=load_integration_configuration,
        init_logging=init_logging,
    )


def build_testing() -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Section binding stays the production adapter: it performs no I/O and
    the verbs' error mapping depends on its validation.
    """
    from ..adapters.memory import (
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
    )

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        load_integration_configuration=load_integration_configuration,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    "get_config",
    "display_config",
    "load_integration_configuration",
    "init_logging",
    "AppServices",
    "build_production",
    "build_testing",
]
