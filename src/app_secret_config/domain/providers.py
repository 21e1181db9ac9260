"""Typed provider configurations and their lookup keys."""

from __future__ import annotations

from typing import Final

from .configuration import SecretConfiguration
from .property_bag import PropertyBag

#: Lookup key of the contracting provider inside ``ProviderConfiguration``.
CONTRACTING_PROVIDER: Final[str] = "Contracting"

USERNAME: Final[str] = "Username"
PASSWORD: Final[str] = "Password"


class ContractingConfiguration(SecretConfiguration):
    """Read-only view over the contracting provider's credentials.

    Example:
        >>> cfg = ContractingConfiguration({"Contracting": True, "Username": "u", "Password": "p"})
        >>> cfg.username, cfg.password
        ('u', 'p')
        >>> cfg
        ContractingConfiguration(Username='***', Password='***')
        >>> ContractingConfiguration({}).password is None
        True
    """

    secret_fields = (USERNAME, PASSWORD)

    @classmethod
    def from_credentials(cls, username: str, password: str) -> ContractingConfiguration:
        """Build a configuration directly from a username and password."""
        return cls(PropertyBag({USERNAME: username, PASSWORD: password}))

    @property
    def username(self) -> str | None:
        return self.get_string(USERNAME)

    @property
    def password(self) -> str | None:
        return self.get_string(PASSWORD)


__all__ = [
    "CONTRACTING_PROVIDER",
    "PASSWORD",
    "USERNAME",
    "ContractingConfiguration",
]
