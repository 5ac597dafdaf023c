from __future__ import annotations

from ...core.constants import HALF_DAY_WEIGHT
from ..model import MusterCounts
from .base import PayableDaysCalculator


class StandardPayableCalculator(PayableDaysCalculator):
    """Standard rule: present + half days at half weight + leave + holidays + week offs."""

    def total_payable(self, counts: MusterCounts) -> float:
        return (
            counts.present
            + counts.half_day * HALF_DAY_WEIGHT
            + counts.leaves
            + counts.holidays
            + counts.week_off
        )
