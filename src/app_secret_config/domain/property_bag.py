"""Field-name to value store backing every configuration object."""

from __future__ import annotations

from collections.abc import Iterator, Mapping


class PropertyBag:
    """Mutable mapping from field name to an untyped value.

    Reading a field that was never set yields ``None`` instead of raising,
    so typed accessors built on top of the bag can treat "absent" and
    "explicitly null" the same way.

    The ``repr`` lists keys only: bags routinely carry credentials.

    Example:
        >>> bag = PropertyBag({"Username": "alice"})
        >>> bag.get("Username")
        'alice'
        >>> bag.get("Password") is None
        True
        >>> bag.set("Password", "s3cret")
        >>> "Password" in bag
        True
        >>> bag
        PropertyBag(keys=['Username', 'Password'])
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, object] | None = None) -> None:
        self._values: dict[str, object] = dict(values) if values else {}

    def get(self, field_name: str) -> object | None:
        """Return the value stored under ``field_name`` or ``None``."""
        return self._values.get(field_name)

    def set(self, field_name: str, value: object) -> None:
        """Store ``value`` under ``field_name``, replacing any previous value."""
        self._values[field_name] = value

    def as_dict(self) -> dict[str, object]:
        """Return a shallow copy of the stored fields."""
        return dict(self._values)

    def __contains__(self, field_name: object) -> bool:
        return field_name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PropertyBag):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PropertyBag(keys={list(self._values)!r})"


__all__ = ["PropertyBag"]
