"""Level curve calculation. Pure functions, no side effects."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, fields

# camelCase option names accepted alongside the dataclass field names
_OPTION_ALIASES: dict[str, str] = {
    "baseXP": "base_xp",
    "maxLevel": "max_level",
}


@dataclass(frozen=True)
class CurveConfig:
    base_xp: float = 100
    exponent: float = 1.5
    max_level: int = 100


DEFAULT_CONFIG = CurveConfig()

ConfigLike = CurveConfig | Mapping | None


def resolve_config(options: ConfigLike = None) -> CurveConfig:
    """Fill unset curve options from the defaults.

    Accepts a CurveConfig (returned as is), a mapping of options or None.
    Mapping entries set to None fall back to the default value.
    """
    if options is None:
        return DEFAULT_CONFIG
    if isinstance(options, CurveConfig):
        return options
    resolved: dict = {f.name: getattr(DEFAULT_CONFIG, f.name) for f in fields(CurveConfig)}
    for key, value in options.items():
        if value is None:
            continue
        resolved[_OPTION_ALIASES.get(key, key)] = value
    return CurveConfig(**resolved)


def get_required_xp(level: float, config: ConfigLike = None) -> int:
    """Total XP needed to reach a level. Formula: floor(base_xp * L^exponent).

    Levels below 1 need 0 XP; levels above max_level are clamped to it.
    """
    cfg = resolve_config(config)
    if level < 1:
        return 0
    if level > cfg.max_level:
        level = cfg.max_level
    return math.floor(cfg.base_xp * (level ** cfg.exponent))


def calculate_level(total_xp: float, config: ConfigLike = None) -> int:
    """Given total XP, return the highest level whose requirement is met (1..max_level).

    Binary search over the level range, so large caps stay cheap.
    """
    cfg = resolve_config(config)
    if total_xp < 0:
        return 1

    low, high = 1, int(cfg.max_level)
    current_level = 1
    while low <= high:
        mid = (low + high) // 2
        if get_required_xp(mid, cfg) <= total_xp:
            current_level = mid
            low = mid + 1
        else:
            high = mid - 1
    return current_level


def get_xp_progress(current_xp: float, config: ConfigLike = None) -> float:
    """Percentage (0-100) of the way from the current level to the next.

    Returns 100.0 at max level.
    """
    cfg = resolve_config(config)
    current_level = calculate_level(current_xp, cfg)
    if current_level >= cfg.max_level:
        return 100.0

    current_level_xp = get_required_xp(current_level, cfg)
    next_level_xp = get_required_xp(current_level + 1, cfg)
    xp_needed_for_next = next_level_xp - current_level_xp
    if xp_needed_for_next <= 0:
        return 100.0

    xp_in_level = current_xp - current_level_xp
    return min(100.0, max(0.0, xp_in_level / xp_needed_for_next * 100))


def get_xp_to_next_level(current_xp: float, config: ConfigLike = None) -> int:
    """XP still missing for the next level. 0 at max level."""
    cfg = resolve_config(config)
    current_level = calculate_level(current_xp, cfg)
    next_level_xp = get_required_xp(current_level + 1, cfg)
    remaining = next_level_xp - current_xp
    # NaN and infinite remainders have no whole-point answer
    if not remaining > 0 or math.isinf(remaining):
        return 0
    return math.ceil(remaining)
