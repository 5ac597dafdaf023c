from __future__ import annotations

from ...common.datetime_utils import hours_between
from ...core.enums import DayStatus, GapKind
from ..model import DataGapWarning
from .base import DayContext, DayStrategy, StatusDecision


class PunchStrategy(DayStrategy):
    """Workday decided from punches: first check-in to last check-out.

    Sessions are not summed; a day with several in/out pairs collapses to the
    earliest check-in and the latest check-out.
    """

    def decide(self, day: DayContext) -> StatusDecision:
        if not day.check_ins:
            gaps = ()
            if day.check_outs:
                gaps = (
                    DataGapWarning(
                        work_date=day.work_date,
                        kind=GapKind.ORPHAN_CHECK_OUT,
                        detail=f"{len(day.check_outs)} check-out(s) without a check-in",
                        user_id=day.user_id,
                    ),
                )
            return StatusDecision(status=DayStatus.ABSENT, gaps=gaps)

        first_in = day.check_ins[0]
        if not day.check_outs:
            return StatusDecision(status=DayStatus.INCOMPLETE, check_in=first_in)

        last_out = day.check_outs[-1]
        hours = hours_between(first_in, last_out)

        gaps = ()
        if hours < 0:
            # Not clamped: the negative span stays visible on the record.
            gaps = (
                DataGapWarning(
                    work_date=day.work_date,
                    kind=GapKind.NEGATIVE_SPAN,
                    detail=f"last check-out {last_out:%H:%M} precedes first check-in {first_in:%H:%M}",
                    user_id=day.user_id,
                ),
            )

        settings = day.settings
        if hours >= settings.minimum_hours_full_day:
            status = DayStatus.PRESENT
        elif hours >= settings.minimum_hours_half_day:
            status = DayStatus.HALF_DAY
        else:
            status = DayStatus.ABSENT

        return StatusDecision(status=status, check_in=first_in, check_out=last_out, hours=hours, gaps=gaps)
