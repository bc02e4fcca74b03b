from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from inventory_backend.config.settings import Credential


@dataclass(frozen=True)
class Principal:
    """
    Identity attached to an authenticated request.

    Attributes
    ----------
    username : str
        Name the client authenticated with.
    roles : tuple[str, ...]
        Role codes granted to the user.
    """

    username: str
    roles: Tuple[str, ...]

    @classmethod
    def from_credential(cls, credential: Credential) -> "Principal":
        return cls(username=credential.username, roles=(credential.role,))

    def has_role(self, *role_codes: str) -> bool:
        """Check if principal has any of the specified roles."""
        return any(r in self.roles for r in role_codes)
