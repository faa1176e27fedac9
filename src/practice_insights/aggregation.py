"""Set-level count aggregation and zero-guarded rate helpers."""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Iterable

from .models import Session, SetResult


@dataclass(frozen=True)
class SetTotals:
    """Summed outcome counts across a collection of sets."""

    attempted: int = 0
    executed: int = 0
    hard_hits: int = 0
    strikeouts: int = 0

    def __add__(self, other: SetTotals) -> SetTotals:
        if not isinstance(other, SetTotals):
            return NotImplemented
        return SetTotals(
            attempted=self.attempted + other.attempted,
            executed=self.executed + other.executed,
            hard_hits=self.hard_hits + other.hard_hits,
            strikeouts=self.strikeouts + other.strikeouts,
        )

    @property
    def execution_pct(self) -> int:
        return percent_of(self.executed, self.attempted)

    @property
    def hard_hit_pct(self) -> int:
        return percent_of(self.hard_hits, self.attempted)

    @property
    def strikeout_pct(self) -> int:
        return percent_of(self.strikeouts, self.attempted)

    @property
    def contact_pct(self) -> int:
        return percent_of(self.attempted - self.strikeouts, self.attempted)


def aggregate_sets(sets: Iterable[SetResult]) -> SetTotals:
    """Sum rep, execution, hard-hit and strikeout counts. Empty input is all zeros."""
    attempted = executed = hard_hits = strikeouts = 0
    for item in sets:
        attempted += item.reps_attempted
        executed += item.reps_executed
        hard_hits += item.hard_hits
        strikeouts += item.strikeouts
    return SetTotals(attempted, executed, hard_hits, strikeouts)


def aggregate_sessions(sessions: Iterable[Session]) -> SetTotals:
    """Sum every set of every session."""
    return aggregate_sets(item for session in sessions for item in session.sets)


def round_half_up(value: float) -> int:
    """Round .5 away from the floor, so 2.5 -> 3 and -2.5 -> -2."""
    return int(math.floor(value + 0.5))


def percent_of(numerator: float, denominator: float) -> int:
    """Rounded percentage; 0 when the denominator is 0."""
    if denominator == 0:
        return 0
    return round_half_up((numerator / denominator) * 100.0)


def two_strike_battle_pct(sets: Iterable[SetResult]) -> int:
    """Execution % over sets logged in a `Behind` count."""
    behind = [item for item in sets if item.count_situation == "Behind"]
    if not behind:
        return 0
    return aggregate_sets(behind).execution_pct
