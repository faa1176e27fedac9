"""Drill usage share, success rates and situational breakdowns."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .aggregation import percent_of, round_half_up
from .config import DEFAULT_THRESHOLDS, InsightThresholds
from .constants import COUNT_SITUATIONS, UNKNOWN_LABEL
from .frames import sessions_to_frame
from .matching import resolve_drill_type
from .models import Drill, Session


@dataclass(frozen=True)
class DrillBreakdown:
    drill_type: str
    total_reps: int
    usage_percent: int
    success_rate: int
    is_undertrained: bool


@dataclass(frozen=True)
class SetBreakdown:
    """Reps and execution % for one situational label."""

    name: str
    reps: int
    execution: int


def analyze_drill_breakdown(
    sessions: Sequence[Session],
    drills: Sequence[Drill] = (),
    *,
    thresholds: InsightThresholds = DEFAULT_THRESHOLDS,
) -> list[DrillBreakdown]:
    """Usage share and success rate per effective drill type, most used first."""
    frame = sessions_to_frame(sessions, drills)
    if frame.empty:
        return []

    frame["drill_type"] = frame["drill_type"].fillna(UNKNOWN_LABEL)
    grouped = frame.groupby("drill_type", sort=False).agg(
        total_reps=("reps_attempted", "sum"),
        total_executed=("reps_executed", "sum"),
    )
    total_all_reps = int(grouped["total_reps"].sum())

    rows: list[DrillBreakdown] = []
    for drill_type, stats in grouped.iterrows():
        total_reps = int(stats["total_reps"])
        share = total_reps / total_all_reps if total_all_reps > 0 else 0.0
        rows.append(
            DrillBreakdown(
                drill_type=str(drill_type),
                total_reps=total_reps,
                usage_percent=percent_of(total_reps, total_all_reps),
                success_rate=percent_of(int(stats["total_executed"]), total_reps),
                is_undertrained=total_all_reps > 0 and share < thresholds.undertrained_share,
            )
        )

    return sorted(rows, key=lambda row: -row.total_reps)


def group_sets_by_drill(
    sessions: Sequence[Session], drills: Sequence[Drill] = ()
) -> list[SetBreakdown]:
    """Reps and execution per resolvable drill type; untyped sets are skipped."""
    grouped: dict[str, list[float]] = {}
    for session in sessions:
        for set_result in session.sets:
            drill_type = resolve_drill_type(session, set_result, drills)
            if not drill_type:
                continue
            _accumulate(grouped, drill_type, set_result.reps_attempted, set_result.reps_executed)
    return _to_breakdown(grouped)


def group_sets_by_pitch(sessions: Sequence[Session]) -> list[SetBreakdown]:
    """Split each set's reps evenly across its pitch types."""
    grouped: dict[str, list[float]] = {}
    for session in sessions:
        for set_result in session.sets:
            pitches = set_result.pitch_types or ()
            for pitch in pitches:
                _accumulate(
                    grouped,
                    pitch,
                    set_result.reps_attempted / len(pitches),
                    set_result.reps_executed / len(pitches),
                )
    return _to_breakdown(grouped)


def group_sets_by_zone(sessions: Sequence[Session]) -> list[SetBreakdown]:
    """Split each set's reps evenly across its target zones."""
    grouped: dict[str, list[float]] = {}
    for session in sessions:
        for set_result in session.sets:
            zones = set_result.target_zones or ()
            for zone in zones:
                _accumulate(
                    grouped,
                    zone,
                    set_result.reps_attempted / len(zones),
                    set_result.reps_executed / len(zones),
                )
    return _to_breakdown(grouped)


def group_sets_by_count(sessions: Sequence[Session]) -> list[SetBreakdown]:
    """Reps and execution by count situation; untagged sets count as `Even`."""
    grouped: dict[str, list[float]] = {label: [0.0, 0.0] for label in COUNT_SITUATIONS}
    for session in sessions:
        for set_result in session.sets:
            situation = set_result.count_situation or "Even"
            _accumulate(grouped, situation, set_result.reps_attempted, set_result.reps_executed)
    return [row for row in _to_breakdown(grouped) if row.reps > 0]


def _accumulate(grouped: dict[str, list[float]], key: str, attempted: float, executed: float) -> None:
    bucket = grouped.setdefault(key, [0.0, 0.0])
    bucket[0] += attempted
    bucket[1] += executed


def _to_breakdown(grouped: dict[str, list[float]]) -> list[SetBreakdown]:
    return [
        SetBreakdown(
            name=name,
            reps=round_half_up(attempted),
            execution=percent_of(executed, attempted),
        )
        for name, (attempted, executed) in grouped.items()
    ]
