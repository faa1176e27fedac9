"""Practice log analytics package."""

from .aggregation import SetTotals, aggregate_sessions, aggregate_sets, percent_of, round_half_up
from .config import (
    DEFAULT_THRESHOLDS,
    InsightThresholds,
    IntegritySettings,
    PracticeInsightsConfig,
    clear_config_cache,
    default_project_config,
    default_thresholds,
    find_project_root,
)
from .drills import (
    DrillBreakdown,
    SetBreakdown,
    analyze_drill_breakdown,
    group_sets_by_count,
    group_sets_by_drill,
    group_sets_by_pitch,
    group_sets_by_zone,
)
from .engagement import ConsistencyData, consistency_data, inactive_players
from .frames import records_frame, sessions_to_frame
from .goals import (
    GoalProgress,
    TeamGoalProgress,
    current_team_metric_value,
    format_goal_name,
    format_team_goal_name,
    personal_goal_progress,
    progress_percent,
    session_goal_progress,
    team_goal_progress,
)
from .integrity import IntegrityAlert, detect_integrity_issues
from .matching import collect_goal_sets, goal_matches, resolve_drill_type
from .models import Drill, PersonalGoal, Player, Session, SetResult, TeamGoal
from .quadrants import PlayerQuadrantData, categorize_players_by_quadrant
from .report import (
    PracticeSnapshot,
    TeamInsightsResults,
    load_snapshot,
    results_to_dict,
    run_team_analysis,
    write_results_contract,
)
from .trends import WeeklyTrend, calculate_weekly_trends

__all__ = [
    "DEFAULT_THRESHOLDS",
    "ConsistencyData",
    "Drill",
    "DrillBreakdown",
    "GoalProgress",
    "InsightThresholds",
    "IntegrityAlert",
    "IntegritySettings",
    "PersonalGoal",
    "Player",
    "PlayerQuadrantData",
    "PracticeInsightsConfig",
    "PracticeSnapshot",
    "Session",
    "SetBreakdown",
    "SetResult",
    "SetTotals",
    "TeamGoal",
    "TeamGoalProgress",
    "TeamInsightsResults",
    "WeeklyTrend",
    "aggregate_sessions",
    "aggregate_sets",
    "analyze_drill_breakdown",
    "calculate_weekly_trends",
    "categorize_players_by_quadrant",
    "clear_config_cache",
    "collect_goal_sets",
    "consistency_data",
    "current_team_metric_value",
    "default_project_config",
    "default_thresholds",
    "detect_integrity_issues",
    "find_project_root",
    "format_goal_name",
    "format_team_goal_name",
    "goal_matches",
    "group_sets_by_count",
    "group_sets_by_drill",
    "group_sets_by_pitch",
    "group_sets_by_zone",
    "inactive_players",
    "load_snapshot",
    "percent_of",
    "personal_goal_progress",
    "progress_percent",
    "records_frame",
    "resolve_drill_type",
    "results_to_dict",
    "round_half_up",
    "run_team_analysis",
    "session_goal_progress",
    "sessions_to_frame",
    "team_goal_progress",
    "write_results_contract",
]
