from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Directory entry for an employee.

    Owned by the external user directory; the engine only reads it.
    """

    user_id: str
    name: str
    role: Role
    reporting_manager_id: Optional[str] = None
    organization_id: Optional[str] = None
    ref_no: Optional[str] = None


@dataclass(frozen=True)
class Organization:
    organization_id: str
    short_name: str
