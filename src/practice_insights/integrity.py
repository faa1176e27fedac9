"""Heuristics that flag suspicious logging patterns in recent sessions."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Literal, Sequence

import numpy as np

from .aggregation import SetTotals, aggregate_sets
from .config import DEFAULT_THRESHOLDS, InsightThresholds
from .constants import SEVERITY_RANK
from .dates import align, minutes_between
from .models import Player, Session

logger = logging.getLogger(__name__)

IntegrityAlertType = Literal["perfect-streak", "identical-counts", "no-variation", "too-fast"]
Severity = Literal["low", "medium", "high"]


@dataclass(frozen=True)
class IntegrityAlert:
    player_id: str
    player_name: str
    alert_type: IntegrityAlertType
    description: str
    severity: Severity


def population_stdev(values: Sequence[float]) -> float:
    if len(values) == 0:
        return 0.0
    return float(np.std(np.asarray(values, dtype=float)))


def detect_integrity_issues(
    sessions: Sequence[Session],
    players: Sequence[Player],
    *,
    thresholds: InsightThresholds = DEFAULT_THRESHOLDS,
) -> list[IntegrityAlert]:
    """Scan each player's most recent sessions; alerts come back high severity first."""
    cfg = thresholds.integrity
    alerts: list[IntegrityAlert] = []

    for player in players:
        owned = [session for session in sessions if session.player_id == player.id]
        if len(owned) < cfg.min_sessions:
            logger.debug("integrity: skipping %s with %d sessions", player.id, len(owned))
            continue

        anchor = owned[0].date
        history = sorted(owned, key=lambda session: align(session.date, anchor))

        recent = history[-cfg.recent_sessions :]
        recent_totals = [aggregate_sets(session.sets) for session in recent]
        alerts.extend(_check_player(player, history, recent_totals, thresholds))

    logger.debug("integrity: %d alerts across %d players", len(alerts), len(players))
    return sorted(alerts, key=lambda alert: -SEVERITY_RANK[alert.severity])


def _check_player(
    player: Player,
    history: list[Session],
    recent_totals: list[SetTotals],
    thresholds: InsightThresholds,
) -> list[IntegrityAlert]:
    cfg = thresholds.integrity
    window = cfg.recent_sessions
    found: list[IntegrityAlert] = []

    def alert(alert_type: IntegrityAlertType, description: str, severity: Severity) -> None:
        found.append(
            IntegrityAlert(
                player_id=player.id,
                player_name=player.name,
                alert_type=alert_type,
                description=description,
                severity=severity,
            )
        )

    perfect = all(t.attempted > 0 and t.executed == t.attempted for t in recent_totals)
    if perfect and len(history) >= window:
        alert(
            "perfect-streak",
            f"100% execution for {window}+ consecutive sessions",
            "medium",
        )

    rep_counts = [t.attempted for t in recent_totals]
    if (
        len(rep_counts) >= cfg.min_sessions
        and rep_counts[0] > 0
        and all(count == rep_counts[0] for count in rep_counts)
    ):
        alert(
            "identical-counts",
            f"Same rep count ({rep_counts[0]}) for {cfg.min_sessions}+ sessions",
            "low",
        )

    if len(recent_totals) >= window:
        qualities = [t.execution_pct for t in recent_totals]
        if population_stdev(qualities) < cfg.no_variation_stdev_pct:
            alert(
                "no-variation",
                f"Almost no variation in execution % over {window} sessions",
                "low",
            )

    for session in history[-cfg.too_fast_sessions :]:
        if session.created_at is None:
            continue
        minutes_diff = minutes_between(session.date, session.created_at)
        if 0 <= minutes_diff < cfg.too_fast_minutes:
            alert(
                "too-fast",
                f"Session logged less than {cfg.too_fast_minutes:g} minutes after start time",
                "high",
            )

    return found
