"""Personal and team goal progress."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
import logging
from typing import Sequence

from .aggregation import SetTotals, aggregate_sessions, aggregate_sets, percent_of
from .config import DEFAULT_THRESHOLDS, InsightThresholds
from .constants import EXECUTION_PCT, HARD_HIT_PCT, NO_STRIKEOUTS, TOTAL_REPS, UNKNOWN_LABEL
from .engagement import inactive_players
from .matching import Goal, collect_goal_sets
from .models import Drill, PersonalGoal, Player, Session, TeamGoal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GoalProgress:
    """Progress toward one personal goal. `progress_pct` is left unrounded."""

    goal_name: str
    metric: str
    target_value: float
    current_value: int
    progress_pct: float
    total_reps: int
    matched_sets: int
    volume_ratio: float | None = None


@dataclass(frozen=True)
class Contributor:
    player_id: str
    name: str
    value: int


@dataclass(frozen=True)
class EngagementGap:
    player_id: str
    name: str
    days_inactive: int


@dataclass(frozen=True)
class TeamGoalProgress:
    """Team-wide progress toward a shared goal."""

    goal_name: str
    target_value: float
    current_value: int
    progress_pct: float
    total_reps: int
    avg_quality: int
    top_contributors: tuple[Contributor, ...]
    low_engagement: tuple[EngagementGap, ...]


@dataclass(frozen=True)
class SessionGoalResult:
    value: int
    is_success: bool


def metric_value(metric: str, totals: SetTotals) -> int:
    """Current value of a goal metric from aggregated counts."""
    if metric == EXECUTION_PCT:
        return totals.execution_pct
    if metric == HARD_HIT_PCT:
        return totals.hard_hit_pct
    if metric == NO_STRIKEOUTS:
        return totals.strikeouts
    if metric == TOTAL_REPS:
        return totals.attempted
    return 0


def progress_percent(metric: str, current_value: float, target_value: float) -> float:
    """Raw progress toward a target; strikeouts count down instead of up."""
    if metric == NO_STRIKEOUTS:
        if target_value == 0:
            return 100.0 if current_value == 0 else 0.0
        if target_value > 0:
            return max(0.0, 100.0 - (current_value / target_value) * 100.0)
        return 0.0
    if target_value <= 0:
        return 0.0
    return (current_value / target_value) * 100.0


def personal_goal_progress(
    goal: PersonalGoal,
    sessions: Sequence[Session],
    drills: Sequence[Drill] = (),
    *,
    default_min_reps: int | None = None,
) -> GoalProgress:
    """Progress for one personal goal over the player's sessions.

    Execution % goals are volume gated: with `min_reps` on the goal (or
    `default_min_reps` from the caller) progress is scaled by
    `min(total_reps / min_reps, 1)` so a handful of lucky reps cannot read
    as a finished goal.
    """
    matched = collect_goal_sets(goal, sessions, drills)
    totals = aggregate_sets(set_result for _, set_result in matched)
    current = metric_value(goal.metric, totals)
    progress = progress_percent(goal.metric, current, goal.target_value)

    volume_ratio: float | None = None
    min_reps = goal.min_reps if goal.min_reps is not None else default_min_reps
    if goal.metric == EXECUTION_PCT and min_reps:
        volume_ratio = min(totals.attempted / min_reps, 1.0)
        progress *= volume_ratio
        logger.debug(
            "goal %s gated at %.2f (%d of %d reps)",
            goal.id,
            volume_ratio,
            totals.attempted,
            min_reps,
        )

    return GoalProgress(
        goal_name=format_goal_name(goal),
        metric=goal.metric,
        target_value=goal.target_value,
        current_value=current,
        progress_pct=progress,
        total_reps=totals.attempted,
        matched_sets=len(matched),
        volume_ratio=volume_ratio,
    )


def team_goal_progress(
    goal: TeamGoal,
    sessions: Sequence[Session],
    players: Sequence[Player],
    *,
    now: datetime | None = None,
    thresholds: InsightThresholds = DEFAULT_THRESHOLDS,
) -> TeamGoalProgress:
    """Team-wide progress over every team session, ignoring goal filters.

    `sessions` is expected to hold the team's sessions only.
    """
    totals = aggregate_sessions(sessions)
    current = metric_value(goal.metric, totals)
    progress = min(progress_percent(goal.metric, current, goal.target_value), 100.0)

    contributions: dict[str, int] = {}
    for session in sessions:
        reps = aggregate_sets(session.sets).attempted
        contributions[session.player_id] = contributions.get(session.player_id, 0) + reps

    names = {player.id: player.name for player in players}
    contributors = sorted(
        (
            Contributor(player_id=player_id, name=names.get(player_id, UNKNOWN_LABEL), value=reps)
            for player_id, reps in contributions.items()
        ),
        key=lambda row: -row.value,
    )

    quiet = inactive_players(sessions, players, now=now, thresholds=thresholds)
    low_engagement = [
        EngagementGap(player_id=row.player_id, name=row.name, days_inactive=row.days_ago)
        for row in quiet
    ]

    size = thresholds.leaderboard_size
    return TeamGoalProgress(
        goal_name=goal.description,
        target_value=goal.target_value,
        current_value=current,
        progress_pct=progress,
        total_reps=totals.attempted,
        avg_quality=totals.execution_pct,
        top_contributors=tuple(contributors[:size]),
        low_engagement=tuple(low_engagement[:size]),
    )


def current_team_metric_value(
    goal: TeamGoal, sessions: Sequence[Session], drills: Sequence[Drill] = ()
) -> int:
    """Team metric over the sets that pass the goal's drill, zone and pitch filters."""
    matched = collect_goal_sets(goal, sessions, drills)
    return metric_value(goal.metric, aggregate_sets(set_result for _, set_result in matched))


def session_goal_progress(session: Session, drill: Drill) -> SessionGoalResult:
    """One session's value for its drill's goal type and whether it hit the target."""
    totals = aggregate_sets(session.sets)
    target = drill.goal_target_value or 0
    if drill.goal_type in (EXECUTION_PCT, HARD_HIT_PCT):
        value = metric_value(drill.goal_type, totals)
        return SessionGoalResult(value=value, is_success=value >= target)
    if drill.goal_type == NO_STRIKEOUTS:
        return SessionGoalResult(value=totals.strikeouts, is_success=totals.strikeouts <= target)
    return SessionGoalResult(value=0, is_success=False)


def format_goal_name(goal: Goal) -> str:
    """Readable goal label, e.g. `Execution % (Tee Work & Fastball/Slider)`."""
    specifics = _goal_specifics(goal, collapse_pitches=True)
    if specifics:
        return f"{goal.metric} ({' & '.join(specifics)})"
    return goal.metric


def format_team_goal_name(goal: TeamGoal) -> str:
    specifics = _goal_specifics(goal, collapse_pitches=False)
    if specifics:
        return f"{goal.metric} ({' & '.join(specifics)})"
    return goal.metric


def _goal_specifics(goal: Goal, *, collapse_pitches: bool) -> list[str]:
    specifics: list[str] = []
    if goal.drill_type:
        specifics.append(goal.drill_type)
    if goal.pitch_types:
        if collapse_pitches and len(goal.pitch_types) > 2:
            specifics.append(f"{len(goal.pitch_types)} pitch types")
        else:
            specifics.append("/".join(goal.pitch_types))
    if goal.target_zones:
        if len(goal.target_zones) > 2:
            specifics.append(f"{len(goal.target_zones)} zones")
        else:
            specifics.append(", ".join(goal.target_zones))
    return specifics
