"""Coach-facing table formatting helpers."""

from __future__ import annotations

from typing import Sequence

import pandas as pd

from .drills import DrillBreakdown
from .engagement import ConsistencyData
from .frames import records_frame
from .integrity import IntegrityAlert
from .quadrants import PlayerQuadrantData
from .trends import WeeklyTrend

QUADRANT_LABELS = {
    "high-high": "High volume, high quality",
    "low-high": "Low volume, high quality",
    "high-low": "High volume, needs focus",
    "low-low": "Low volume, low quality",
}


def coach_drill_breakdown_table(breakdown: Sequence[DrillBreakdown]) -> pd.DataFrame:
    """Rename drill breakdown columns for coach reports."""
    keep = ["Drill type", "Reps", "Usage (%)", "Success (%)", "Under-trained"]
    if not breakdown:
        return pd.DataFrame(columns=keep)
    table = records_frame(breakdown).rename(
        columns={
            "drill_type": "Drill type",
            "total_reps": "Reps",
            "usage_percent": "Usage (%)",
            "success_rate": "Success (%)",
            "is_undertrained": "Under-trained",
        }
    )
    return table[keep]


def coach_quadrant_table(quadrants: Sequence[PlayerQuadrantData]) -> pd.DataFrame:
    """Quadrant assignments with readable labels, highest volume first."""
    keep = ["Player", "Reps", "Quality (%)", "Quadrant"]
    if not quadrants:
        return pd.DataFrame(columns=keep)
    table = records_frame(quadrants)
    table["quadrant"] = table["quadrant"].map(QUADRANT_LABELS)
    table = table.rename(
        columns={"name": "Player", "reps": "Reps", "quality": "Quality (%)", "quadrant": "Quadrant"}
    )
    return table[keep].sort_values("Reps", ascending=False, kind="stable").reset_index(drop=True)


def coach_weekly_trend_table(trends: Sequence[WeeklyTrend]) -> pd.DataFrame:
    keep = ["Week of", "Avg reps", "Execution (%)"]
    if not trends:
        return pd.DataFrame(columns=keep)
    table = records_frame(trends).rename(
        columns={"week_label": "Week of", "avg_reps": "Avg reps", "avg_execution": "Execution (%)"}
    )
    return table[keep]


def coach_integrity_table(alerts: Sequence[IntegrityAlert]) -> pd.DataFrame:
    """Alert list for review; severity shown upper-case."""
    keep = ["Player", "Severity", "Alert", "Details"]
    if not alerts:
        return pd.DataFrame(columns=keep)
    table = records_frame(alerts)
    table["severity"] = table["severity"].str.upper()
    table = table.rename(
        columns={
            "player_name": "Player",
            "severity": "Severity",
            "alert_type": "Alert",
            "description": "Details",
        }
    )
    return table[keep]


def coach_consistency_table(consistency: ConsistencyData) -> pd.DataFrame:
    table = records_frame(consistency.weekly_data).rename(
        columns={"day": "Day", "date": "Date", "session_count": "Sessions"}
    )
    return table[["Day", "Date", "Sessions"]]
