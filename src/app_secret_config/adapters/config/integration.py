"""Bind the ``IntegrationConfiguration`` section into the domain aggregate.

The section is validated at the boundary with a Pydantic model, then handed
to :class:`~app_secret_config.domain.integration.IntegrationConfiguration`
as plain mappings.

Expected TOML shape::

    [[IntegrationConfiguration.ProviderConfiguration]]
    Name = "Contracting"
    Username = "svc-contracting"
    Password = "..."
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Final, cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from app_secret_config.domain.errors import ConfigurationError
from app_secret_config.domain.integration import PROVIDER_CONFIGURATION, IntegrationConfiguration

#: Top-level configuration section holding the provider list.
INTEGRATION_SECTION: Final[str] = "IntegrationConfiguration"

logger = logging.getLogger(__name__)


class IntegrationSectionModel(BaseModel):
    """Pydantic model for the ``[IntegrationConfiguration]`` section.

    Example:
        >>> model = IntegrationSectionModel.model_validate(
        ...     {"ProviderConfiguration": [{"Name": "Contracting", "Username": "u"}]}
        ... )
        >>> model.provider_configuration[0]["Username"]
        'u'
        >>> IntegrationSectionModel().provider_configuration
        []
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    provider_configuration: list[dict[str, Any]] = Field(default_factory=list, alias=PROVIDER_CONFIGURATION)

    @field_validator("provider_configuration", mode="before")
    @classmethod
    def _coerce_single_entry_to_list(cls, v: Any) -> Any:
        """Accept a lone table or a null where a list of tables is expected.

        Environment variables and ``--set`` overrides frequently provide a
        single provider object instead of an array.

        Examples:
            >>> IntegrationSectionModel._coerce_single_entry_to_list({"Name": "Contracting"})
            [{'Name': 'Contracting'}]
            >>> IntegrationSectionModel._coerce_single_entry_to_list(None)
            []
        """
        if v is None:
            return []
        if isinstance(v, Mapping):
            return [v]
        return v


def _format_validation_error(exc: ValidationError) -> str:
    """Condense a ValidationError into a single readable line."""
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        problems.append(f"{INTEGRATION_SECTION}.{location}: {error['msg']}")
    return "; ".join(problems)


def _resolve_case_insensitive(tree: Mapping[str, object], key: str) -> object:
    """Return the value under ``key``, folding in keys that differ only in case.

    Environment and ``.env`` layers lowercase their keys, so a file's
    ``IntegrationConfiguration`` and the environment's
    ``integrationconfiguration`` name the same section. The exact spelling is
    read first and every other spelling overrides it. Tables merge shallowly;
    any other value replaces the previous one.

    Example:
        >>> _resolve_case_insensitive({"Key": {"a": 1}, "key": {"b": 2}}, "Key")
        {'a': 1, 'b': 2}
        >>> _resolve_case_insensitive({"Key": [], "KEY": [1]}, "Key")
        [1]
        >>> _resolve_case_insensitive({}, "Key") is None
        True
    """
    folded = key.casefold()
    spellings = sorted((k for k in tree if k.casefold() == folded), key=lambda k: k != key)
    resolved: object = None
    for spelling in spellings:
        value = tree[spelling]
        if isinstance(resolved, Mapping) and isinstance(value, Mapping):
            resolved = {**cast("Mapping[str, object]", resolved), **cast("Mapping[str, object]", value)}
        else:
            resolved = value
    return resolved


def load_integration_configuration(config: Config) -> IntegrationConfiguration:
    """Build the integration aggregate from a loaded configuration tree.

    A missing section yields an aggregate without providers; every lookup
    on it then fails with ``ProviderNotFoundError``.

    Args:
        config: Already-loaded layered configuration.

    Returns:
        IntegrationConfiguration holding one bag per provider entry, in the
        order they appear in the configuration.

    Raises:
        ConfigurationError: If the section or its provider list is malformed.

    Example:
        >>> cfg = Config({"IntegrationConfiguration": {"ProviderConfiguration": [{"Name": "Contracting"}]}}, {})
        >>> load_integration_configuration(cfg).provider_names()
        ('Contracting',)
    """
    section_raw = _resolve_case_insensitive(config.as_dict(), INTEGRATION_SECTION)
    if section_raw is None:
        section_raw = {}
    if not isinstance(section_raw, Mapping):
        raise ConfigurationError(f"{INTEGRATION_SECTION} must be a table, got {type(section_raw).__name__}")

    providers = _resolve_case_insensitive(cast("Mapping[str, object]", section_raw), PROVIDER_CONFIGURATION)
    try:
        parsed = IntegrationSectionModel.model_validate({PROVIDER_CONFIGURATION: providers})
    except ValidationError as exc:
        raise ConfigurationError(_format_validation_error(exc)) from exc

    logger.debug("Loaded integration configuration", extra={"providers": len(parsed.provider_configuration)})
    return IntegrationConfiguration(parsed.provider_configuration)


__all__ = [
    "INTEGRATION_SECTION",
    "IntegrationSectionModel",
    "load_integration_configuration",
]
