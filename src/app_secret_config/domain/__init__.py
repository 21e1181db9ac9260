"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.property_bag` - Field-name to value store
    * :mod:`.configuration` - Data and secret configuration base classes
    * :mod:`.integration` - Provider lookup over the integration section
    * :mod:`.providers` - Typed provider configurations
    * :mod:`.enums` - Domain enumerations (OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .configuration import DataConfiguration, SecretConfiguration
from .enums import OutputFormat
from .errors import ConfigurationError, ConstructionError, ProviderNotFoundError
from .integration import IntegrationConfiguration
from .property_bag import PropertyBag
from .providers import CONTRACTING_PROVIDER, ContractingConfiguration

__all__ = [
    # Configuration objects
    "PropertyBag",
    "DataConfiguration",
    "SecretConfiguration",
    "IntegrationConfiguration",
    "CONTRACTING_PROVIDER",
    "ContractingConfiguration",
    # Enums
    "OutputFormat",
    # Errors
    "ConfigurationError",
    "ConstructionError",
    "ProviderNotFoundError",
]
