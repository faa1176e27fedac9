"""Shared labels and threshold constants for practice analytics."""

from __future__ import annotations

DRILL_TYPES: tuple[str, ...] = (
    "Tee Work",
    "Soft Toss",
    "Front Toss",
    "Throwing",
    "Live BP",
    "Machine",
)
TARGET_ZONES: tuple[str, ...] = (
    "Inside High",
    "Inside Middle",
    "Inside Low",
    "Middle High",
    "Middle Middle",
    "Middle Low",
    "Outside High",
    "Outside Middle",
    "Outside Low",
)
PITCH_TYPES: tuple[str, ...] = ("Fastball", "Curveball", "Slider", "Changeup", "Sinker")
COUNT_SITUATIONS: tuple[str, ...] = ("Ahead", "Even", "Behind")

EXECUTION_PCT = "Execution %"
HARD_HIT_PCT = "Hard Hit %"
NO_STRIKEOUTS = "No Strikeouts"
TOTAL_REPS = "Total Reps"
GOAL_METRICS: tuple[str, ...] = (EXECUTION_PCT, HARD_HIT_PCT, NO_STRIKEOUTS, TOTAL_REPS)

UNKNOWN_LABEL = "Unknown"
NEVER_ACTIVE_LABEL = "Never"
NEVER_ACTIVE_DAYS = 999

QUALITY_THRESHOLD_PCT = 75
UNDERTRAINED_SHARE = 0.20
INACTIVITY_WINDOW_DAYS = 7
LEADERBOARD_SIZE = 5
DEFAULT_MIN_REPS = 50

INTEGRITY_MIN_SESSIONS = 3
INTEGRITY_RECENT_SESSIONS = 5
INTEGRITY_TOO_FAST_SESSIONS = 3
NO_VARIATION_STDEV_PCT = 5.0
TOO_FAST_MINUTES = 5.0

SEVERITY_RANK = {"high": 3, "medium": 2, "low": 1}
