"""Public package surface exposing provider lookup, metadata, and configuration.

This module provides the stable public API for the package, routing imports
through the proper architectural layers:
- Domain exports: Provider lookup and typed provider configurations
- Composition exports: Wired adapter services (configuration)
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config, load_integration_configuration

# Domain exports
from .domain import (
    CONTRACTING_PROVIDER,
    ConfigurationError,
    ConstructionError,
    ContractingConfiguration,
    IntegrationConfiguration,
    PropertyBag,
    ProviderNotFoundError,
)

__all__ = [
    "CONTRACTING_PROVIDER",
    "ConfigurationError",
    "ConstructionError",
    "ContractingConfiguration",
    "IntegrationConfiguration",
    "PropertyBag",
    "ProviderNotFoundError",
    "get_config",
    "load_integration_configuration",
    "print_info",
]
