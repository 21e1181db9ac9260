"""Provider lookup over the ``IntegrationConfiguration`` section.

The section holds an ordered list of provider entries. Each entry is a
mapping of arbitrary keys; it is identified either by an explicit ``Name``
field or, for entries written in the older style, by containing the
provider key itself as a field (``{"Contracting": true, ...}``).

When several entries match a key the first one in list order wins.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Final, TypeVar

from .configuration import DataConfiguration
from .errors import ConstructionError, ProviderNotFoundError
from .property_bag import PropertyBag

#: Explicit identity field of a provider entry.
PROVIDER_NAME: Final[str] = "Name"

PROVIDER_CONFIGURATION: Final[str] = "ProviderConfiguration"

T = TypeVar("T")


def provider_matches(entry: PropertyBag, provider_key: str) -> bool:
    """Return True when ``entry`` belongs to the provider ``provider_key``.

    Field presence only counts for keys other than the reserved ``Name``
    field, so looking up ``"Name"`` matches an entry named ``"Name"`` and
    nothing else.

    Examples:
        >>> provider_matches(PropertyBag({"Name": "Contracting"}), "Contracting")
        True
        >>> provider_matches(PropertyBag({"Contracting": True}), "Contracting")
        True
        >>> provider_matches(PropertyBag({"Name": "Billing"}), "Contracting")
        False
        >>> provider_matches(PropertyBag({"Name": "Billing"}), "Name")
        False
    """
    if entry.get(PROVIDER_NAME) == provider_key:
        return True
    return provider_key != PROVIDER_NAME and provider_key in entry


class IntegrationConfiguration(DataConfiguration):
    """Ordered collection of provider entries with lookup by key.

    Every entry is copied into its own :class:`PropertyBag`, so later changes
    to the source mappings do not leak into the lookup.

    Example:
        >>> integration = IntegrationConfiguration(
        ...     [{"Name": "Contracting", "Username": "u", "Password": "p"}]
        ... )
        >>> integration.find_provider("Contracting").get("Username")
        'u'
        >>> integration.find_provider("Billing")
        Traceback (most recent call last):
        ...
        app_secret_config.domain.errors.ProviderNotFoundError: Provider Billing not found in the configuration
    """

    def __init__(self, provider_configuration: Iterable[PropertyBag | Mapping[str, object]] = ()) -> None:
        super().__init__()
        entries = tuple(
            PropertyBag(entry.as_dict() if isinstance(entry, PropertyBag) else entry) for entry in provider_configuration
        )
        self.set_property(PROVIDER_CONFIGURATION, entries)

    @property
    def provider_configuration(self) -> tuple[PropertyBag, ...]:
        entries = self.get_property(PROVIDER_CONFIGURATION)
        return entries if isinstance(entries, tuple) else ()

    def provider_names(self) -> tuple[str, ...]:
        """Return the explicit ``Name`` of each entry that has one, in order."""
        return tuple(
            name for entry in self.provider_configuration if isinstance(name := entry.get(PROVIDER_NAME), str)
        )

    def find_provider(self, provider_key: str) -> PropertyBag:
        """Return the first entry matching ``provider_key``.

        Raises:
            ProviderNotFoundError: When no entry matches.
        """
        for entry in self.provider_configuration:
            if provider_matches(entry, provider_key):
                return entry
        raise ProviderNotFoundError(provider_key)

    def get_configuration(self, provider_key: str, factory: Callable[[PropertyBag], T]) -> T:
        """Build a typed configuration for ``provider_key``.

        Every call scans the entries again and builds a new object.

        Args:
            provider_key: Key identifying the provider entry.
            factory: Callable (usually a :class:`SecretConfiguration` subclass)
                that accepts the matched bag as its only argument.

        Returns:
            Whatever ``factory`` returns for the matched entry.

        Raises:
            ProviderNotFoundError: When no entry matches ``provider_key``.
            ConstructionError: When ``factory`` rejects the matched entry.

        Example:
            >>> from app_secret_config.domain.providers import ContractingConfiguration
            >>> integration = IntegrationConfiguration([{"Contracting": True, "Username": "u", "Password": "p"}])
            >>> integration.get_configuration("Contracting", ContractingConfiguration).username
            'u'
        """
        entry = self.find_provider(provider_key)
        try:
            return factory(entry)
        except (TypeError, ValueError, KeyError) as exc:
            raise ConstructionError(factory, exc) from exc


__all__ = [
    "PROVIDER_CONFIGURATION",
    "PROVIDER_NAME",
    "IntegrationConfiguration",
    "provider_matches",
]
