"""Volume vs. quality segmentation of players."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Literal, Sequence

import numpy as np

from .aggregation import percent_of
from .config import DEFAULT_THRESHOLDS, InsightThresholds
from .frames import sessions_to_frame
from .models import Player, Session

logger = logging.getLogger(__name__)

PlayerQuadrant = Literal["high-high", "high-low", "low-high", "low-low"]


@dataclass(frozen=True)
class PlayerQuadrantData:
    player_id: str
    name: str
    reps: int
    quality: int
    quadrant: PlayerQuadrant


def median_reps(reps: Sequence[int]) -> int:
    """Upper-middle element of the sorted reps; no averaging for even counts."""
    ordered = np.sort(np.asarray(reps, dtype="int64"))
    return int(ordered[len(ordered) // 2])


def assign_quadrant(
    reps: int, quality: float, median: float, quality_threshold: float
) -> PlayerQuadrant:
    high_volume = reps > median
    high_quality = quality >= quality_threshold
    if high_volume:
        return "high-high" if high_quality else "high-low"
    return "low-high" if high_quality else "low-low"


def categorize_players_by_quadrant(
    sessions: Sequence[Session],
    players: Sequence[Player],
    *,
    thresholds: InsightThresholds = DEFAULT_THRESHOLDS,
) -> list[PlayerQuadrantData]:
    """Bucket active players by reps (vs. team median) and execution quality."""
    frame = sessions_to_frame(sessions)
    per_player = frame.groupby("player_id", sort=False).agg(
        reps=("reps_attempted", "sum"),
        executed=("reps_executed", "sum"),
    )

    stats: list[tuple[Player, int, int]] = []
    for player in players:
        if player.id not in per_player.index:
            continue
        reps = int(per_player.at[player.id, "reps"])
        if reps <= 0:
            continue
        quality = percent_of(int(per_player.at[player.id, "executed"]), reps)
        stats.append((player, reps, quality))

    if not stats:
        return []

    median = median_reps([reps for _, reps, _ in stats])
    logger.debug("quadrants: %d active players, median reps %d", len(stats), median)
    return [
        PlayerQuadrantData(
            player_id=player.id,
            name=player.name,
            reps=reps,
            quality=quality,
            quadrant=assign_quadrant(reps, quality, median, thresholds.quality_threshold_pct),
        )
        for player, reps, quality in stats
    ]
