"""Four-week rolling practice trend."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Sequence

from .aggregation import aggregate_sessions, percent_of, round_half_up
from .dates import align, days_before, end_of_day, month_day_label, resolve_now, start_of_day
from .models import Session

TREND_WEEKS = 4
DAYS_PER_WEEK = 7


@dataclass(frozen=True)
class WeeklyTrend:
    week_label: str
    week_start_date: str
    avg_reps: int
    avg_quality: int
    avg_execution: int


def week_window(reference: datetime, week_offset: int) -> tuple[datetime, datetime]:
    """Inclusive [start 00:00, end 23:59:59.999999] for the week `week_offset` weeks back."""
    start = start_of_day(days_before(reference, week_offset * DAYS_PER_WEEK + DAYS_PER_WEEK - 1))
    end = end_of_day(days_before(reference, week_offset * DAYS_PER_WEEK))
    return start, end


def calculate_weekly_trends(
    sessions: Sequence[Session], *, now: datetime | None = None
) -> list[WeeklyTrend]:
    """Average reps per session and execution % for each of the last four weeks, oldest first."""
    reference = resolve_now(now)
    trends: list[WeeklyTrend] = []

    for week_offset in range(TREND_WEEKS - 1, -1, -1):
        start, end = week_window(reference, week_offset)
        week_sessions = [
            session for session in sessions if start <= align(session.date, reference) <= end
        ]
        totals = aggregate_sessions(week_sessions)

        avg_reps = round_half_up(totals.attempted / len(week_sessions)) if week_sessions else 0
        avg_execution = percent_of(totals.executed, totals.attempted)
        trends.append(
            WeeklyTrend(
                week_label=month_day_label(start),
                week_start_date=start.date().isoformat(),
                avg_reps=avg_reps,
                # no separate quality signal is logged; execution % stands in
                avg_quality=avg_execution,
                avg_execution=avg_execution,
            )
        )

    return trends
