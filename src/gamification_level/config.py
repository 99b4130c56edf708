"""Configuration file management for gamification-level.

Reads and writes ~/.gamification-level/config.json, which holds the default
curve options and an optional custom rank table.
"""
from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path

from gamification_level.levels import CurveConfig, resolve_config
from gamification_level.ranks import RankDefinition, validate_rank_table

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH: Path = Path.home() / ".gamification-level" / "config.json"


def load_config(config_path: Path | None = None) -> dict:
    """Load config from JSON file. Returns {} if file missing or invalid."""
    path = config_path or DEFAULT_CONFIG_PATH
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: top level is not an object", path)
        return {}
    return data


def save_config(data: dict, config_path: Path | None = None) -> None:
    """Write config dict to JSON file. Creates parent dirs if needed."""
    path = config_path or DEFAULT_CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


def _curve_section(config: dict, config_path: Path | None) -> dict:
    """The "curve" section, or {} when it is missing or not an object."""
    curve = config.get("curve")
    if curve is None:
        return {}
    if not isinstance(curve, dict):
        logger.warning(
            "Ignoring curve in %s: expected an object, got %s",
            config_path or DEFAULT_CONFIG_PATH, type(curve).__name__,
        )
        return {}
    return curve


def get_curve_config(config_path: Path | None = None) -> CurveConfig:
    """Return the configured curve, falling back to defaults for unset options."""
    config = load_config(config_path)
    curve = _curve_section(config, config_path)
    try:
        return resolve_config(curve)
    except TypeError as exc:
        logger.warning("Ignoring curve in %s: %s", config_path or DEFAULT_CONFIG_PATH, exc)
        return resolve_config(None)


def set_curve_options(options: dict, config_path: Path | None = None) -> CurveConfig:
    """Merge non-None curve options into the config file and return the result."""
    config = load_config(config_path)
    curve = dict(_curve_section(config, config_path))
    curve.update({k: v for k, v in options.items() if v is not None})
    resolved = resolve_config(curve)
    config["curve"] = {
        "base_xp": resolved.base_xp,
        "exponent": resolved.exponent,
        "max_level": resolved.max_level,
    }
    save_config(config, config_path)
    return resolved


def get_rank_table(config_path: Path | None = None) -> tuple[RankDefinition, ...] | None:
    """Return the custom rank table, or None to use the built-in ranks.

    Problems in the table are logged, not fixed: lookups still run against it.
    """
    config = load_config(config_path)
    raw = config.get("ranks")
    if raw is None:
        return None
    try:
        ranks = tuple(RankDefinition.from_dict(entry) for entry in raw)
    except (KeyError, TypeError, ValueError) as exc:
        logger.warning(
            "Ignoring rank table in %s: malformed entry (%s)",
            config_path or DEFAULT_CONFIG_PATH, exc,
        )
        return None
    for problem in validate_rank_table(ranks):
        logger.warning("Rank table in %s: %s", config_path or DEFAULT_CONFIG_PATH, problem)
    return ranks


def set_rank_table(ranks: Sequence[RankDefinition], config_path: Path | None = None) -> None:
    """Persist a custom rank table, keeping the other config keys."""
    config = load_config(config_path)
    config["ranks"] = [rank.to_dict() for rank in ranks]
    save_config(config, config_path)
