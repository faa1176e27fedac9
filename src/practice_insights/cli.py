"""CLI entrypoints for the practice analytics project."""

from __future__ import annotations

import argparse
from datetime import datetime
import json
import logging

from .config import default_project_config, default_thresholds
from .report import load_snapshot, results_to_dict, run_team_analysis, write_results_contract


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Summarize a team's practice log snapshot.")
    parser.add_argument("--input", required=True, help="Path to a JSON practice snapshot.")
    parser.add_argument(
        "--team-goal-id",
        default=None,
        help="Only report progress for this team goal.",
    )
    parser.add_argument(
        "--now",
        default=None,
        help="ISO timestamp to evaluate time windows against (default: current local time).",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Also write results.json into this directory.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = default_project_config()
    logging.basicConfig(level=config.runtime.log_level)

    snapshot = load_snapshot(args.input)
    now = datetime.fromisoformat(args.now) if args.now else None
    team_goals = snapshot.team_goals
    if args.team_goal_id:
        team_goals = [goal for goal in team_goals if goal.id == args.team_goal_id]
        if not team_goals:
            parser.error(f"Unknown team goal id: {args.team_goal_id}")
    results = run_team_analysis(
        snapshot.sessions,
        snapshot.players,
        drills=snapshot.drills,
        team_goals=team_goals,
        personal_goals=snapshot.personal_goals,
        now=now,
        thresholds=default_thresholds(),
    )
    payload = results_to_dict(results)
    payload["input_path"] = str(args.input)
    if args.output_dir:
        payload["results_path"] = str(write_results_contract(results, args.output_dir))
    print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main()
