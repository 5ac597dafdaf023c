from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveStatus
from .model import LeaveRequest


class LeaveRepository(Protocol):
    def create(self, request: LeaveRequest) -> LeaveRequest:
        raise NotImplementedError

    def get(self, request_id: str) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def list_requests(
        self,
        *,
        user_id: Optional[str] = None,
        status: Optional[LeaveStatus] = None,
    ) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    def replace_if_status(self, request: LeaveRequest, *, expected: LeaveStatus) -> bool:
        """Store `request` only if the stored copy is still in `expected` state.

        Returns False when another writer moved the request first.
        """

        raise NotImplementedError
