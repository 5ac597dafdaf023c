from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..core.enums import Role
from .model import Organization, User


class MemoryUserRepository:
    def __init__(self, users: Iterable[User] = ()):
        self._users: dict[str, User] = {u.user_id: u for u in users}

    def add(self, user: User) -> None:
        self._users[user.user_id] = user

    def get_by_id(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)

    def list_all(self) -> Sequence[User]:
        return sorted(self._users.values(), key=lambda u: u.user_id)

    def find_by_role(self, role: Role) -> Sequence[User]:
        return [u for u in self.list_all() if u.role == role]


class MemoryOrganizationRepository:
    def __init__(self, organizations: Iterable[Organization] = ()):
        self._orgs = list(organizations)

    def list_all(self) -> Sequence[Organization]:
        return list(self._orgs)
