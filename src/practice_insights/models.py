"""Typed input records for logged practice data."""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

CountSituation = Literal["Ahead", "Even", "Behind"]
GoalMetric = Literal["Execution %", "Hard Hit %", "No Strikeouts", "Total Reps"]
GoalStatus = Literal["Active", "Completed", "Archived"]


class _Record(BaseModel):
    """Immutable record that accepts snake_case or camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class SetResult(_Record):
    """One logged block of reps with outcome counts and optional tags."""

    reps_attempted: int
    reps_executed: int
    hard_hits: int = 0
    strikeouts: int = 0
    grade: Optional[int] = None
    set_number: Optional[int] = None
    drill_type: Optional[str] = None
    target_zones: Optional[tuple[str, ...]] = None
    pitch_types: Optional[tuple[str, ...]] = None
    count_situation: Optional[CountSituation] = None
    base_runners: Optional[tuple[str, ...]] = None
    outs: Optional[int] = None
    notes: Optional[str] = None


class Session(_Record):
    """One practice occasion."""

    id: str
    player_id: str
    team_id: str
    drill_id: Optional[str] = None
    name: Optional[str] = None  # ad-hoc sessions carry the drill type here
    date: datetime
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    sets: tuple[SetResult, ...] = ()
    feedback: Optional[str] = None


class Player(_Record):
    id: str
    name: str
    team_ids: tuple[str, ...] = ()


class Drill(_Record):
    """Coach-defined drill template."""

    id: str
    team_id: str
    name: str
    description: str = ""
    drill_type: Optional[str] = None
    goal_type: Optional[str] = None
    goal_target_value: Optional[float] = None
    target_zones: tuple[str, ...] = ()
    pitch_types: tuple[str, ...] = ()
    count_situation: Optional[CountSituation] = None
    reps_per_set: Optional[int] = None
    sets: Optional[int] = None


class _GoalBase(_Record):
    id: str = ""
    team_id: str
    metric: GoalMetric
    target_value: float
    start_date: Optional[datetime] = None
    target_date: Optional[datetime] = None
    status: GoalStatus = "Active"
    drill_type: Optional[str] = None
    target_zones: Optional[tuple[str, ...]] = None
    pitch_types: Optional[tuple[str, ...]] = None
    min_reps: Optional[int] = None


class PersonalGoal(_GoalBase):
    """Player-scoped goal with optional match filters and volume gate."""

    player_id: str


class TeamGoal(_GoalBase):
    """Team-scoped goal described by a coach."""

    description: str = ""
