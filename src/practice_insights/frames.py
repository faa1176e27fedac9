"""Tabular (pandas) views over logged sessions and derived records."""

from __future__ import annotations

from dataclasses import asdict, is_dataclass
from typing import Any, Sequence

import pandas as pd

from .matching import resolve_drill_type
from .models import Drill, Session

SET_FRAME_COLUMNS = (
    "session_id",
    "player_id",
    "team_id",
    "date",
    "set_index",
    "drill_type",
    "reps_attempted",
    "reps_executed",
    "hard_hits",
    "strikeouts",
    "grade",
    "count_situation",
)


def sessions_to_frame(sessions: Sequence[Session], drills: Sequence[Drill] = ()) -> pd.DataFrame:
    """One row per logged set, with the set's effective drill type resolved."""
    rows: list[dict[str, object]] = []
    for session in sessions:
        for set_index, set_result in enumerate(session.sets):
            rows.append(
                {
                    "session_id": session.id,
                    "player_id": session.player_id,
                    "team_id": session.team_id,
                    "date": session.date,
                    "set_index": set_index,
                    "drill_type": resolve_drill_type(session, set_result, drills),
                    "reps_attempted": set_result.reps_attempted,
                    "reps_executed": set_result.reps_executed,
                    "hard_hits": set_result.hard_hits,
                    "strikeouts": set_result.strikeouts,
                    "grade": set_result.grade,
                    "count_situation": set_result.count_situation,
                }
            )

    frame = pd.DataFrame(rows, columns=list(SET_FRAME_COLUMNS))
    for col in ("reps_attempted", "reps_executed", "hard_hits", "strikeouts"):
        frame[col] = frame[col].astype("int64")
    return frame


def records_frame(records: Sequence[Any]) -> pd.DataFrame:
    """Flatten dataclass records into a DataFrame (nested tuples stay as objects)."""
    rows = [asdict(record) if is_dataclass(record) else dict(record) for record in records]
    return pd.DataFrame(rows)
