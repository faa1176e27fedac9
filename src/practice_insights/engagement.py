"""Practice consistency histogram and inactivity detection."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
import logging
from typing import Sequence

from .config import DEFAULT_THRESHOLDS, InsightThresholds
from .constants import NEVER_ACTIVE_LABEL
from .dates import (
    align,
    days_before,
    numeric_date_label,
    resolve_now,
    start_of_day,
    weekday_label,
    whole_days_between,
)
from .models import Player, Session

logger = logging.getLogger(__name__)

CONSISTENCY_WINDOW_DAYS = 7


@dataclass(frozen=True)
class DailySessionCount:
    day: str
    date: str
    session_count: int


@dataclass(frozen=True)
class InactivePlayer:
    player_id: str
    name: str
    last_active: str
    days_ago: int


@dataclass(frozen=True)
class ConsistencyData:
    """Seven-day session histogram plus players gone quiet."""

    weekly_data: tuple[DailySessionCount, ...]
    total_weekly_sessions: int
    inactive_players: tuple[InactivePlayer, ...]


def recently_active_player_ids(
    sessions: Sequence[Session], now: datetime, window_days: int
) -> set[str]:
    """Players with a session dated strictly after `now - window_days`."""
    cutoff = days_before(now, window_days)
    return {session.player_id for session in sessions if align(session.date, now) > cutoff}


def latest_session(sessions: Sequence[Session], player_id: str) -> Session | None:
    latest: Session | None = None
    for session in sessions:
        if session.player_id != player_id:
            continue
        if latest is None or align(session.date, latest.date) > latest.date:
            latest = session
    return latest


def inactive_players(
    sessions: Sequence[Session],
    players: Sequence[Player],
    *,
    now: datetime | None = None,
    thresholds: InsightThresholds = DEFAULT_THRESHOLDS,
) -> list[InactivePlayer]:
    """Players without a session in the trailing window, longest inactive first."""
    reference = resolve_now(now)
    active = recently_active_player_ids(sessions, reference, thresholds.inactivity_days)

    rows: list[InactivePlayer] = []
    for player in players:
        if player.id in active:
            continue
        last = latest_session(sessions, player.id)
        if last is None:
            rows.append(
                InactivePlayer(
                    player_id=player.id,
                    name=player.name,
                    last_active=NEVER_ACTIVE_LABEL,
                    days_ago=thresholds.never_active_days,
                )
            )
            continue
        last_date = align(last.date, reference)
        rows.append(
            InactivePlayer(
                player_id=player.id,
                name=player.name,
                last_active=numeric_date_label(last_date),
                days_ago=whole_days_between(last_date, reference),
            )
        )

    return sorted(rows, key=lambda row: -row.days_ago)


def consistency_data(
    sessions: Sequence[Session],
    players: Sequence[Player],
    *,
    now: datetime | None = None,
    thresholds: InsightThresholds = DEFAULT_THRESHOLDS,
) -> ConsistencyData:
    """Count sessions per day for the week ending today, oldest day first."""
    reference = resolve_now(now)
    today = start_of_day(reference)

    per_day: dict[datetime, int] = {}
    for session in sessions:
        day = start_of_day(align(session.date, reference))
        per_day[day] = per_day.get(day, 0) + 1

    weekly_data = []
    for offset in range(CONSISTENCY_WINDOW_DAYS - 1, -1, -1):
        day = days_before(today, offset)
        weekly_data.append(
            DailySessionCount(
                day=weekday_label(day),
                date=day.date().isoformat(),
                session_count=per_day.get(day, 0),
            )
        )

    inactive = inactive_players(sessions, players, now=reference, thresholds=thresholds)
    logger.debug("consistency: %d inactive of %d players", len(inactive), len(players))
    return ConsistencyData(
        weekly_data=tuple(weekly_data),
        total_weekly_sessions=sum(row.session_count for row in weekly_data),
        inactive_players=tuple(inactive),
    )
