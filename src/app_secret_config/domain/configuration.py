"""Configuration objects backed by a :class:`PropertyBag`.

Contents:
    * :class:`DataConfiguration` - untyped get/set accessors over a bag.
    * :class:`SecretConfiguration` - string accessors for credential fields.

Subclasses declare their bag keys as module-level constants and expose
typed read-only properties that call the accessors with those keys.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import ClassVar, cast

from .property_bag import PropertyBag


def _as_property_bag(source: PropertyBag | Mapping[str, object] | None) -> PropertyBag:
    """Return ``source`` as a bag, wrapping mappings and creating empty bags.

    Raises:
        TypeError: When ``source`` is neither a bag nor a mapping.

    Examples:
        >>> _as_property_bag(None)
        PropertyBag(keys=[])
        >>> _as_property_bag({"a": 1}).get("a")
        1
        >>> bag = PropertyBag()
        >>> _as_property_bag(bag) is bag
        True
    """
    if source is None:
        return PropertyBag()
    if isinstance(source, PropertyBag):
        return source
    if isinstance(source, Mapping):
        return PropertyBag(cast("Mapping[str, object]", source))
    raise TypeError(f"expected a mapping of field names, got {type(source).__name__}")


class DataConfiguration:
    """Base class exposing untyped accessors over an owned PropertyBag.

    Example:
        >>> cfg = DataConfiguration({"Timeout": 30})
        >>> cfg.get_property("Timeout")
        30
        >>> cfg.get_property("Retries") is None
        True
        >>> cfg.set_property("Retries", 3)
        3
    """

    def __init__(self, property_bag: PropertyBag | Mapping[str, object] | None = None) -> None:
        self._property_bag = _as_property_bag(property_bag)

    @property
    def property_bag(self) -> PropertyBag:
        """The bag backing this configuration."""
        return self._property_bag

    def get_property(self, field_name: str) -> object | None:
        """Return the raw value for ``field_name`` or ``None`` when absent."""
        return self._property_bag.get(field_name)

    def set_property(self, field_name: str, value: object) -> object:
        """Store ``value`` and return it."""
        self._property_bag.set(field_name, value)
        return value


class SecretConfiguration(DataConfiguration):
    """Base class for credential-shaped configuration.

    Wraps the provider entry it is given (by reference) and validates that
    each field listed in :attr:`secret_fields` is either absent or a string.

    Raises:
        TypeError: When the provider entry is not a mapping, or a declared
            field holds a non-string value.

    Example:
        >>> class Api(SecretConfiguration):
        ...     secret_fields = ("Token",)
        >>> Api({"Token": "abc"}).get_string("Token")
        'abc'
        >>> Api({"Token": "abc"})
        Api(Token='***')
        >>> Api({"Token": 42})
        Traceback (most recent call last):
        ...
        TypeError: Token must be a string, got int
    """

    secret_fields: ClassVar[tuple[str, ...]] = ()

    def __init__(self, provider_config: PropertyBag | Mapping[str, object]) -> None:
        if provider_config is None:
            raise TypeError(f"{type(self).__name__} requires a provider configuration")
        super().__init__(provider_config)
        for field_name in self.secret_fields:
            self.get_string(field_name)

    def get_string(self, field_name: str) -> str | None:
        """Return the string stored under ``field_name`` or ``None``.

        Raises:
            TypeError: When the stored value is not a string.
        """
        value = self.get_property(field_name)
        if value is None or isinstance(value, str):
            return value
        raise TypeError(f"{field_name} must be a string, got {type(value).__name__}")

    def set_string(self, field_name: str, value: str) -> str:
        """Store a string value and return it."""
        if not isinstance(value, str):
            raise TypeError(f"{field_name} must be a string, got {type(value).__name__}")
        self.set_property(field_name, value)
        return value

    def __repr__(self) -> str:
        masked = ", ".join(
            f"{name}={None if self.get_property(name) is None else '***'!r}" for name in self.secret_fields
        )
        return f"{type(self).__name__}({masked})"


__all__ = [
    "DataConfiguration",
    "SecretConfiguration",
]
