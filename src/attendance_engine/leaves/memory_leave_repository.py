from __future__ import annotations

import threading
from typing import Iterable, Optional, Sequence

from ..core.enums import LeaveStatus
from ..core.exceptions import InputValidationError
from .model import LeaveRequest


class MemoryLeaveRepository:
    def __init__(self, requests: Iterable[LeaveRequest] = ()):
        self._lock = threading.Lock()
        self._requests: dict[str, LeaveRequest] = {r.request_id: r for r in requests}

    def create(self, request: LeaveRequest) -> LeaveRequest:
        with self._lock:
            if request.request_id in self._requests:
                raise InputValidationError(f"Leave request {request.request_id} already exists")
            self._requests[request.request_id] = request
        return request

    def get(self, request_id: str) -> Optional[LeaveRequest]:
        with self._lock:
            return self._requests.get(request_id)

    def list_requests(
        self,
        *,
        user_id: Optional[str] = None,
        status: Optional[LeaveStatus] = None,
    ) -> Sequence[LeaveRequest]:
        with self._lock:
            items = list(self._requests.values())
        if user_id is not None:
            items = [r for r in items if r.user_id == user_id]
        if status is not None:
            items = [r for r in items if r.status == status]
        return sorted(items, key=lambda r: (r.start_date, r.request_id))

    def replace_if_status(self, request: LeaveRequest, *, expected: LeaveStatus) -> bool:
        with self._lock:
            current = self._requests.get(request.request_id)
            if current is None or current.status != expected:
                return False
            self._requests[request.request_id] = request
            return True
