"""Drill-type resolution and goal filter matching."""

from __future__ import annotations

from typing import Sequence, Union

from .constants import DRILL_TYPES
from .models import Drill, PersonalGoal, Session, SetResult, TeamGoal

Goal = Union[PersonalGoal, TeamGoal]


def session_drill_type(session: Session, drills: Sequence[Drill] = ()) -> str | None:
    """Drill type implied by the session: its drill template, else an ad-hoc name."""
    if session.drill_id:
        for drill in drills:
            if drill.id == session.drill_id:
                return drill.drill_type
        return None
    if session.name in DRILL_TYPES:
        return session.name
    return None


def resolve_drill_type(
    session: Session, set_result: SetResult, drills: Sequence[Drill] = ()
) -> str | None:
    """Effective drill type of a set: its own tag, then the session context."""
    if set_result.drill_type:
        return set_result.drill_type
    return session_drill_type(session, drills)


def goal_matches(
    goal: Goal,
    session: Session,
    set_result: SetResult,
    drills: Sequence[Drill] = (),
) -> bool:
    """True when every populated goal filter accepts the set."""
    if goal.drill_type:
        if resolve_drill_type(session, set_result, drills) != goal.drill_type:
            return False

    if goal.target_zones:
        if not _intersects(set_result.target_zones, goal.target_zones):
            return False

    if goal.pitch_types:
        if not _intersects(set_result.pitch_types, goal.pitch_types):
            return False

    return True


def collect_goal_sets(
    goal: Goal, sessions: Sequence[Session], drills: Sequence[Drill] = ()
) -> list[tuple[Session, SetResult]]:
    """Matching (session, set) pairs in session order, then set order."""
    return [
        (session, set_result)
        for session in sessions
        for set_result in session.sets
        if goal_matches(goal, session, set_result, drills)
    ]


def _intersects(values: Sequence[str] | None, wanted: Sequence[str]) -> bool:
    if not values:
        return False
    wanted_set = set(wanted)
    return any(value in wanted_set for value in values)
