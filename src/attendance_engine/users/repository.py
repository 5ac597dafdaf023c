from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import Organization, User


class UserRepository(Protocol):
    """Read-only view of the user directory.

    Note: services depend on this interface, never on a concrete store.
    """

    def get_by_id(self, user_id: str) -> Optional[User]:
        raise NotImplementedError

    def list_all(self) -> Sequence[User]:
        raise NotImplementedError

    def find_by_role(self, role: Role) -> Sequence[User]:
        raise NotImplementedError


class OrganizationRepository(Protocol):
    def list_all(self) -> Sequence[Organization]:
        raise NotImplementedError
