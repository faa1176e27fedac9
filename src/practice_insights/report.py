"""One-pass team analysis and the JSON results contract."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
import json
import logging
from pathlib import Path
from typing import Any, Sequence

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from .config import DEFAULT_THRESHOLDS, InsightThresholds
from .dates import resolve_now
from .drills import DrillBreakdown, analyze_drill_breakdown
from .engagement import ConsistencyData, consistency_data
from .goals import GoalProgress, TeamGoalProgress, personal_goal_progress, team_goal_progress
from .integrity import IntegrityAlert, detect_integrity_issues
from .models import Drill, PersonalGoal, Player, Session, TeamGoal
from .quadrants import PlayerQuadrantData, categorize_players_by_quadrant
from .trends import WeeklyTrend, calculate_weekly_trends

logger = logging.getLogger(__name__)


class PracticeSnapshot(BaseModel):
    """Materialized practice data handed over by the surrounding application."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")
    sessions: list[Session] = []
    players: list[Player] = []
    drills: list[Drill] = []
    personal_goals: list[PersonalGoal] = []
    team_goals: list[TeamGoal] = []


@dataclass(frozen=True)
class TeamInsightsResults:
    """Container for one-pass team analysis outputs."""

    generated_for: str
    team_goals: dict[str, TeamGoalProgress]
    personal_goals: dict[str, GoalProgress]
    consistency: ConsistencyData
    quadrants: list[PlayerQuadrantData]
    drill_breakdown: list[DrillBreakdown]
    integrity_alerts: list[IntegrityAlert]
    weekly_trends: list[WeeklyTrend]


def run_team_analysis(
    sessions: Sequence[Session],
    players: Sequence[Player],
    *,
    drills: Sequence[Drill] = (),
    team_goals: Sequence[TeamGoal] = (),
    personal_goals: Sequence[PersonalGoal] = (),
    now: datetime | None = None,
    thresholds: InsightThresholds | None = None,
) -> TeamInsightsResults:
    """Run every analytics component once against the same snapshot and instant."""
    active = thresholds or DEFAULT_THRESHOLDS
    reference = resolve_now(now)

    team_progress = {
        goal.id: team_goal_progress(
            goal,
            [session for session in sessions if session.team_id == goal.team_id],
            [player for player in players if goal.team_id in player.team_ids],
            now=reference,
            thresholds=active,
        )
        for goal in team_goals
    }
    personal_progress = {
        goal.id: personal_goal_progress(
            goal,
            [session for session in sessions if session.player_id == goal.player_id],
            drills,
            default_min_reps=active.default_min_reps,
        )
        for goal in personal_goals
    }

    results = TeamInsightsResults(
        generated_for=reference.isoformat(),
        team_goals=team_progress,
        personal_goals=personal_progress,
        consistency=consistency_data(sessions, players, now=reference, thresholds=active),
        quadrants=categorize_players_by_quadrant(sessions, players, thresholds=active),
        drill_breakdown=analyze_drill_breakdown(sessions, drills, thresholds=active),
        integrity_alerts=detect_integrity_issues(sessions, players, thresholds=active),
        weekly_trends=calculate_weekly_trends(sessions, now=reference),
    )
    logger.info(
        "analyzed %d sessions for %d players (%d alerts)",
        len(sessions),
        len(players),
        len(results.integrity_alerts),
    )
    return results


def results_to_dict(results: TeamInsightsResults) -> dict[str, Any]:
    """JSON-ready view of the analysis results."""
    return asdict(results)


def load_snapshot(path: str | Path) -> PracticeSnapshot:
    """Read and validate a JSON practice snapshot (camelCase or snake_case keys)."""
    snapshot_path = Path(path)
    if not snapshot_path.exists():
        raise FileNotFoundError(f"Snapshot file not found: {snapshot_path}")

    raw = json.loads(snapshot_path.read_text(encoding="utf-8"))
    try:
        return PracticeSnapshot.model_validate(raw)
    except ValidationError as exc:
        raise ValueError(f"Invalid practice snapshot {snapshot_path}: {exc}") from exc


def write_results_contract(results: TeamInsightsResults, output_dir: str | Path) -> Path:
    """Write `results.json` for downstream rendering."""
    root = Path(output_dir)
    root.mkdir(parents=True, exist_ok=True)
    contract_path = root / "results.json"
    contract_path.write_text(
        json.dumps(results_to_dict(results), indent=2) + "\n", encoding="utf-8"
    )
    return contract_path

