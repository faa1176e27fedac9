from __future__ import annotations

from datetime import datetime

from practice_insights.aggregation import (
    SetTotals,
    aggregate_sessions,
    aggregate_sets,
    percent_of,
    round_half_up,
    two_strike_battle_pct,
)
from practice_insights.matching import collect_goal_sets, goal_matches, resolve_drill_type
from practice_insights.models import Drill, PersonalGoal, Session, SetResult


def _set(attempted: int, executed: int, **tags: object) -> SetResult:
    return SetResult(reps_attempted=attempted, reps_executed=executed, **tags)


def _session(session_id: str, sets: list[SetResult], **extra: object) -> Session:
    return Session(
        id=session_id,
        player_id="p1",
        team_id="t1",
        date=datetime(2026, 10, 18, 15, 0),
        sets=tuple(sets),
        **extra,
    )


def _goal(**filters: object) -> PersonalGoal:
    return PersonalGoal(
        id="g1",
        player_id="p1",
        team_id="t1",
        metric="Execution %",
        target_value=80,
        **filters,
    )


def test_aggregate_sets_sums_every_counter() -> None:
    totals = aggregate_sets(
        [
            SetResult(reps_attempted=10, reps_executed=7, hard_hits=3, strikeouts=1),
            SetResult(reps_attempted=5, reps_executed=5, hard_hits=2, strikeouts=0),
        ]
    )
    assert totals == SetTotals(attempted=15, executed=12, hard_hits=5, strikeouts=1)
    assert totals.execution_pct == 80
    assert totals.hard_hit_pct == 33
    assert totals.contact_pct == 93
    assert totals.strikeout_pct == 7


def test_aggregate_sets_empty_is_all_zero() -> None:
    totals = aggregate_sets([])
    assert totals == SetTotals()
    assert totals.execution_pct == 0


def test_aggregation_is_associative_across_sessions() -> None:
    first = _session("s1", [_set(10, 6), _set(4, 4)])
    second = _session("s2", [_set(8, 2, hard_hits=1, strikeouts=3)])

    combined = aggregate_sessions([first, second])
    pairwise = aggregate_sets(first.sets) + aggregate_sets(second.sets)
    assert combined == pairwise
    assert combined.attempted == 22


def test_round_half_up_matches_display_rounding() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(-2.5) == -2
    assert percent_of(1, 8) == 13
    assert percent_of(5, 0) == 0


def test_two_strike_battle_pct_uses_behind_sets_only() -> None:
    sets = [
        _set(10, 3, count_situation="Behind"),
        _set(10, 10, count_situation="Ahead"),
    ]
    assert two_strike_battle_pct(sets) == 30
    assert two_strike_battle_pct([_set(10, 10)]) == 0


def test_resolve_drill_type_fallback_chain() -> None:
    drills = [Drill(id="d1", team_id="t1", name="Cage", drill_type="Machine")]
    tagged = _set(5, 5, drill_type="Tee Work")
    untagged = _set(5, 5)

    assert resolve_drill_type(_session("s1", [tagged], drill_id="d1"), tagged, drills) == "Tee Work"
    assert resolve_drill_type(_session("s2", [untagged], drill_id="d1"), untagged, drills) == "Machine"
    assert resolve_drill_type(_session("s3", [untagged], name="Soft Toss"), untagged) == "Soft Toss"
    assert resolve_drill_type(_session("s4", [untagged], name="Friday cage"), untagged) is None
    assert resolve_drill_type(_session("s5", [untagged], drill_id="missing"), untagged, drills) is None


def test_unset_filters_accept_any_set() -> None:
    session = _session("s1", [_set(3, 1)])
    assert goal_matches(_goal(), session, session.sets[0])
    assert goal_matches(_goal(target_zones=(), pitch_types=()), session, session.sets[0])


def test_zone_and_pitch_filters_need_intersection() -> None:
    matching = _set(5, 4, target_zones=("Inside High", "Middle Middle"), pitch_types=("Slider",))
    wrong_zone = _set(5, 4, target_zones=("Outside Low",), pitch_types=("Slider",))
    untagged = _set(5, 4)
    session = _session("s1", [matching, wrong_zone, untagged])
    goal = _goal(target_zones=("Middle Middle",), pitch_types=("Slider", "Changeup"))

    assert goal_matches(goal, session, matching)
    assert not goal_matches(goal, session, wrong_zone)
    assert not goal_matches(goal, session, untagged)


def test_drill_filter_uses_effective_drill_type() -> None:
    drills = [Drill(id="d1", team_id="t1", name="Front toss day", drill_type="Front Toss")]
    from_drill = _set(5, 5)
    own_tag = _set(5, 5, drill_type="Live BP")
    session = _session("s1", [from_drill, own_tag], drill_id="d1")
    goal = _goal(drill_type="Front Toss")

    assert goal_matches(goal, session, from_drill, drills)
    assert not goal_matches(goal, session, own_tag, drills)


def test_collect_goal_sets_preserves_session_then_set_order() -> None:
    a1 = _set(1, 1, pitch_types=("Fastball",))
    a2 = _set(2, 1, pitch_types=("Curveball",))
    a3 = _set(3, 1, pitch_types=("Fastball", "Sinker"))
    b1 = _set(4, 1, pitch_types=("Sinker",))
    first = _session("a", [a1, a2, a3])
    second = _session("b", [b1])

    pairs = collect_goal_sets(_goal(pitch_types=("Fastball", "Sinker")), [first, second])
    assert [(session.id, item.reps_attempted) for session, item in pairs] == [
        ("a", 1),
        ("a", 3),
        ("b", 4),
    ]
