"""Configuration adapter - loading, display, overrides, and section binding.

Provides adapters for configuration management using lib_layered_config.

Contents:
    * :mod:`.loader` - Configuration loading with caching
    * :mod:`.display` - Configuration display in human/JSON formats
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
    * :mod:`.integration` - ``IntegrationConfiguration`` section binding
"""

from __future__ import annotations

from .display import display_config
from .integration import load_integration_configuration
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides

__all__ = [
    "get_config",
    "get_default_config_path",
    "display_config",
    "apply_overrides",
    "load_integration_configuration",
]
