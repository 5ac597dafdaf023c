from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import MusterCounts


class PayableDaysCalculator(ABC):
    """Calculator interface (Strategy Pattern for payable days)."""

    @abstractmethod
    def total_payable(self, counts: MusterCounts) -> float:
        raise NotImplementedError
