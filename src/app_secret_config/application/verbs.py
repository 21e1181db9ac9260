"""Verb actions selected by name on the command line.

Each verb receives the loaded configuration tree and runs to completion
synchronously. Domain errors raised while executing are left to the caller,
which maps them to exit codes.

Contents:
    * :class:`VerbOutcome` - Result of a completed verb.
    * :class:`ManageConfiguration` - Looks up the contracting credentials.
    * :class:`ManageTestConfiguration` - Confirms without any lookup.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from ..domain.providers import CONTRACTING_PROVIDER, ContractingConfiguration
from .ports import LoadIntegrationConfiguration

if TYPE_CHECKING:
    from lib_layered_config import Config

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class VerbOutcome:
    """Message produced by a completed verb."""

    verb: str
    message: str


@dataclass(frozen=True, slots=True)
class ManageConfiguration:
    """Resolve the contracting provider's typed configuration.

    Attributes:
        load_integration: Port binding the integration section from the tree.
        provider_key: Provider entry to look up.

    Raises:
        ProviderNotFoundError: When no entry matches ``provider_key``.
        ConstructionError: When the matched entry has the wrong shape.
        ConfigurationError: When the integration section itself is malformed.
    """

    name: ClassVar[str] = "ManageConfiguration"
    help: ClassVar[str] = "Sync ManageConfiguration"

    load_integration: LoadIntegrationConfiguration
    provider_key: str = CONTRACTING_PROVIDER

    def execute(self, config: Config) -> VerbOutcome:
        integration = self.load_integration(config)
        contracting = integration.get_configuration(self.provider_key, ContractingConfiguration)
        logger.info(
            "Resolved provider configuration",
            extra={
                "provider": self.provider_key,
                "username_set": contracting.username is not None,
                "password_set": contracting.password is not None,
            },
        )
        return VerbOutcome(verb=self.name, message="Manage Configuration Called!")


@dataclass(frozen=True, slots=True)
class ManageTestConfiguration:
    """Confirm invocation without reading the integration section."""

    name: ClassVar[str] = "ManageTestConfiguration"
    help: ClassVar[str] = "Sync ManageTestConfiguration"

    def execute(self, config: Config) -> VerbOutcome:
        logger.debug("Skipping provider lookup", extra={"verb": self.name})
        return VerbOutcome(verb=self.name, message="Manage Test Configuration Called!")


__all__ = [
    "ManageConfiguration",
    "ManageTestConfiguration",
    "VerbOutcome",
]
