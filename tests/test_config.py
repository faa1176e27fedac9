from __future__ import annotations

from pathlib import Path

import pytest

from practice_insights.config import (
    DEFAULT_THRESHOLDS,
    InsightThresholds,
    clear_config_cache,
    default_project_config,
    default_thresholds,
    find_project_root,
)


def test_builtin_thresholds_match_documented_defaults() -> None:
    assert DEFAULT_THRESHOLDS.quality_threshold_pct == 75
    assert DEFAULT_THRESHOLDS.undertrained_share == 0.20
    assert DEFAULT_THRESHOLDS.inactivity_days == 7
    assert DEFAULT_THRESHOLDS.leaderboard_size == 5
    assert DEFAULT_THRESHOLDS.default_min_reps == 50
    assert DEFAULT_THRESHOLDS.never_active_days == 999
    assert DEFAULT_THRESHOLDS.integrity.recent_sessions == 5


def test_find_project_root_walks_up_to_pyproject(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[project]\nname = 'x'\n", encoding="utf-8")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert find_project_root(nested) == tmp_path.resolve()


def test_pyproject_tool_table_is_merged(monkeypatch, tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        "\n".join(
            [
                "[tool.practice_insights.thresholds]",
                "leaderboard_size = 3",
                "quality_threshold_pct = 80",
            ]
        ),
        encoding="utf-8",
    )
    monkeypatch.setenv("PRACTICE_INSIGHTS_PROJECT_ROOT", str(tmp_path))
    clear_config_cache()

    thresholds = default_thresholds()
    assert thresholds.leaderboard_size == 3
    assert thresholds.quality_threshold_pct == 80
    assert thresholds.inactivity_days == 7

    monkeypatch.delenv("PRACTICE_INSIGHTS_PROJECT_ROOT", raising=False)
    clear_config_cache()


def test_env_overrides_win_over_files(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("PRACTICE_INSIGHTS_PROJECT_ROOT", str(tmp_path))
    monkeypatch.setenv("PRACTICE_INSIGHTS_QUALITY_THRESHOLD", "70")
    monkeypatch.setenv("PRACTICE_INSIGHTS_DEFAULT_MIN_REPS", "none")
    monkeypatch.setenv("PRACTICE_INSIGHTS_LOG_LEVEL", "debug")
    clear_config_cache()

    config = default_project_config()
    assert config.thresholds.quality_threshold_pct == 70.0
    assert config.thresholds.default_min_reps is None
    assert config.runtime.log_level == "DEBUG"

    for name in (
        "PRACTICE_INSIGHTS_PROJECT_ROOT",
        "PRACTICE_INSIGHTS_QUALITY_THRESHOLD",
        "PRACTICE_INSIGHTS_DEFAULT_MIN_REPS",
        "PRACTICE_INSIGHTS_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    clear_config_cache()


def test_external_yaml_config_file_override(monkeypatch, tmp_path: Path) -> None:
    cfg = tmp_path / "insights.yaml"
    cfg.write_text(
        "\n".join(
            [
                "thresholds:",
                "  inactivity_days: 14",
                "  integrity:",
                "    too_fast_minutes: 2.5",
            ]
        ),
        encoding="utf-8",
    )
    monkeypatch.setenv("PRACTICE_INSIGHTS_PROJECT_ROOT", str(tmp_path))
    monkeypatch.setenv("PRACTICE_INSIGHTS_CONFIG_FILE", str(cfg))
    clear_config_cache()

    thresholds = default_thresholds()
    assert thresholds.inactivity_days == 14
    assert thresholds.integrity.too_fast_minutes == 2.5
    assert thresholds.integrity.recent_sessions == 5

    monkeypatch.delenv("PRACTICE_INSIGHTS_CONFIG_FILE", raising=False)
    monkeypatch.delenv("PRACTICE_INSIGHTS_PROJECT_ROOT", raising=False)
    clear_config_cache()


def test_missing_config_file_raises(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("PRACTICE_INSIGHTS_PROJECT_ROOT", str(tmp_path))
    monkeypatch.setenv("PRACTICE_INSIGHTS_CONFIG_FILE", str(tmp_path / "nope.yaml"))
    clear_config_cache()

    with pytest.raises(FileNotFoundError):
        default_project_config()

    monkeypatch.delenv("PRACTICE_INSIGHTS_CONFIG_FILE", raising=False)
    monkeypatch.delenv("PRACTICE_INSIGHTS_PROJECT_ROOT", raising=False)
    clear_config_cache()


def test_invalid_values_are_reported_as_value_error(monkeypatch, tmp_path: Path) -> None:
    cfg = tmp_path / "bad.yaml"
    cfg.write_text("thresholds:\n  undertrained_share: 2.0\n", encoding="utf-8")
    monkeypatch.setenv("PRACTICE_INSIGHTS_PROJECT_ROOT", str(tmp_path))
    monkeypatch.setenv("PRACTICE_INSIGHTS_CONFIG_FILE", str(cfg))
    clear_config_cache()

    with pytest.raises(ValueError, match="Invalid practice_insights config"):
        default_project_config()

    monkeypatch.delenv("PRACTICE_INSIGHTS_CONFIG_FILE", raising=False)
    monkeypatch.delenv("PRACTICE_INSIGHTS_PROJECT_ROOT", raising=False)
    clear_config_cache()


def test_threshold_model_rejects_empty_windows() -> None:
    with pytest.raises(ValueError):
        InsightThresholds(leaderboard_size=0)
