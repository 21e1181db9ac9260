"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when required configuration values are absent, malformed, or
    logically inconsistent. Typically caught at CLI boundaries to provide
    user-friendly error messages.

    Example:
        >>> from app_secret_config.domain.errors import ConfigurationError
        >>> err = ConfigurationError("IntegrationConfiguration must be a table")
        >>> str(err)
        'IntegrationConfiguration must be a table'
    """


class ProviderNotFoundError(ConfigurationError):
    """No provider entry matches the requested key.

    Attributes:
        provider_key: The key that was looked up.

    Example:
        >>> err = ProviderNotFoundError("Contracting")
        >>> err.provider_key
        'Contracting'
        >>> str(err)
        'Provider Contracting not found in the configuration'
    """

    def __init__(self, provider_key: str) -> None:
        super().__init__(f"Provider {provider_key} not found in the configuration")
        self.provider_key = provider_key


class ConstructionError(ConfigurationError):
    """Building a typed configuration from a matched provider entry failed.

    Attributes:
        config_type: The factory (usually a class) that was called.
        cause: The exception raised by the factory.

    Example:
        >>> err = ConstructionError(dict, TypeError("Username must be a string"))
        >>> str(err)
        'Cannot build dict: Username must be a string'
        >>> isinstance(err.cause, TypeError)
        True
    """

    def __init__(self, config_type: object, cause: BaseException) -> None:
        type_name = getattr(config_type, "__name__", repr(config_type))
        super().__init__(f"Cannot build {type_name}: {cause}")
        self.config_type = config_type
        self.cause = cause


__all__ = [
    "ConfigurationError",
    "ConstructionError",
    "ProviderNotFoundError",
]
