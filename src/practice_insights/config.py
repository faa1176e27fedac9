"""Centralized threshold configuration and project-root resolution."""

from __future__ import annotations

from functools import lru_cache
import os
from pathlib import Path
import tomllib
from typing import Any

from omegaconf import OmegaConf
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from . import constants

DEFAULT_CONFIG_FILE = "config/practice_insights.yaml"
ENV_PREFIX = "PRACTICE_INSIGHTS_"


class IntegritySettings(BaseModel):
    """Windows and cutoffs used by the logging-integrity heuristics."""

    min_sessions: int = constants.INTEGRITY_MIN_SESSIONS
    recent_sessions: int = constants.INTEGRITY_RECENT_SESSIONS
    too_fast_sessions: int = constants.INTEGRITY_TOO_FAST_SESSIONS
    no_variation_stdev_pct: float = constants.NO_VARIATION_STDEV_PCT
    too_fast_minutes: float = constants.TOO_FAST_MINUTES

    @field_validator("min_sessions", "recent_sessions", "too_fast_sessions")
    @classmethod
    def _positive_window(cls, value: int) -> int:
        if value < 1:
            raise ValueError("session windows must be >= 1")
        return value


class InsightThresholds(BaseModel):
    """Threshold choices shared by every analytics component."""

    model_config = ConfigDict(frozen=True)
    quality_threshold_pct: float = constants.QUALITY_THRESHOLD_PCT
    undertrained_share: float = constants.UNDERTRAINED_SHARE
    inactivity_days: int = constants.INACTIVITY_WINDOW_DAYS
    leaderboard_size: int = constants.LEADERBOARD_SIZE
    default_min_reps: int | None = constants.DEFAULT_MIN_REPS
    never_active_days: int = constants.NEVER_ACTIVE_DAYS
    integrity: IntegritySettings = Field(default_factory=IntegritySettings)

    @field_validator("undertrained_share")
    @classmethod
    def _share_in_range(cls, value: float) -> float:
        if not 0.0 <= value <= 1.0:
            raise ValueError("undertrained_share must be within [0, 1]")
        return value

    @field_validator("inactivity_days", "leaderboard_size")
    @classmethod
    def _positive_count(cls, value: int) -> int:
        if value < 1:
            raise ValueError("counts must be >= 1")
        return value


class RuntimeSettings(BaseModel):
    """Runtime behavior controls for the CLI."""

    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        cleaned = value.strip().upper()
        if cleaned not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value}")
        return cleaned


class PracticeInsightsConfig(BaseModel):
    """Typed configuration model for project behavior."""

    model_config = ConfigDict(extra="ignore")
    thresholds: InsightThresholds = Field(default_factory=InsightThresholds)
    runtime: RuntimeSettings = Field(default_factory=RuntimeSettings)


DEFAULT_THRESHOLDS = InsightThresholds()


def find_project_root(start: Path | None = None) -> Path:
    """Find the project root by locating `pyproject.toml`."""
    env_root = os.getenv(f"{ENV_PREFIX}PROJECT_ROOT")
    if env_root:
        return _resolve_path(Path(env_root), Path.cwd())

    cursor = (start or Path.cwd()).resolve()
    for candidate in (cursor, *cursor.parents):
        if (candidate / "pyproject.toml").exists():
            return candidate

    raise FileNotFoundError("Could not find project root containing pyproject.toml")


@lru_cache(maxsize=1)
def default_project_config() -> PracticeInsightsConfig:
    """Load config with OmegaConf merge + Pydantic validation."""
    try:
        project_root = find_project_root()
    except FileNotFoundError:
        project_root = Path.cwd().resolve()
    merged = _load_merged_config(project_root)
    try:
        return PracticeInsightsConfig.model_validate(merged)
    except ValidationError as exc:
        raise ValueError(f"Invalid practice_insights config: {exc}") from exc


def default_thresholds() -> InsightThresholds:
    """Thresholds from the layered project config."""
    return default_project_config().thresholds


def clear_config_cache() -> None:
    """Clear cached config; useful for tests or env-var changes."""
    default_project_config.cache_clear()


def _load_merged_config(project_root: Path) -> dict[str, Any]:
    base_cfg = PracticeInsightsConfig().model_dump()
    pyproject_cfg = _load_pyproject_config(project_root)

    merged = OmegaConf.merge(
        base_cfg,
        pyproject_cfg,
        _load_file_config(project_root),
        _load_env_overrides(),
    )
    raw = OmegaConf.to_container(merged, resolve=True)
    return raw if isinstance(raw, dict) else {}


def _load_file_config(project_root: Path) -> dict[str, Any]:
    env_path = os.getenv(f"{ENV_PREFIX}CONFIG_FILE")
    if env_path:
        cfg_path = _resolve_path(Path(env_path), project_root)
        if not cfg_path.exists():
            raise FileNotFoundError(
                f"{ENV_PREFIX}CONFIG_FILE points to missing file: {cfg_path}"
            )
    else:
        cfg_path = project_root / DEFAULT_CONFIG_FILE
        if not cfg_path.exists():
            return {}

    loaded = OmegaConf.load(cfg_path)
    raw = OmegaConf.to_container(loaded, resolve=True)
    return raw if isinstance(raw, dict) else {}


def _load_env_overrides() -> dict[str, Any]:
    thresholds: dict[str, Any] = {}
    if env_quality := os.getenv(f"{ENV_PREFIX}QUALITY_THRESHOLD"):
        thresholds["quality_threshold_pct"] = float(env_quality)
    if env_min_reps := os.getenv(f"{ENV_PREFIX}DEFAULT_MIN_REPS"):
        thresholds["default_min_reps"] = _parse_optional_int(env_min_reps)
    if env_inactive := os.getenv(f"{ENV_PREFIX}INACTIVITY_DAYS"):
        thresholds["inactivity_days"] = int(env_inactive)

    runtime: dict[str, Any] = {}
    if env_level := os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
        runtime["log_level"] = env_level

    overrides: dict[str, Any] = {}
    if thresholds:
        overrides["thresholds"] = thresholds
    if runtime:
        overrides["runtime"] = runtime
    return overrides


def _resolve_path(path: Path, project_root: Path) -> Path:
    if path.is_absolute():
        return path.expanduser().resolve()
    return (project_root / path).resolve()


def _parse_optional_int(value: str) -> int | None:
    lowered = value.strip().lower()
    if lowered in {"", "none", "off"}:
        return None
    return int(lowered)


def _load_pyproject_config(project_root: Path) -> dict[str, Any]:
    pyproject_path = project_root / "pyproject.toml"
    if not pyproject_path.exists():
        return {}

    with pyproject_path.open("rb") as handle:
        pyproject = tomllib.load(handle)

    tool_cfg = pyproject.get("tool", {})
    insights_cfg = tool_cfg.get("practice_insights", {})
    return insights_cfg if isinstance(insights_cfg, dict) else {}
