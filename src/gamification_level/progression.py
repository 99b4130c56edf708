"""Progression helpers built on the level curve: level-ups, milestones, estimates, prestige."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta

from gamification_level.levels import (
    ConfigLike,
    calculate_level,
    get_required_xp,
    resolve_config,
)


@dataclass
class TimeEstimate:
    days: int
    reached_on: date


@dataclass
class LevelUpResult:
    leveled_up: bool
    previous_level: int
    new_level: int
    levels_gained: int


@dataclass
class Milestone:
    level: int
    required_xp: int
    is_milestone: bool


@dataclass
class ProgressionComparison:
    first_level: int
    second_level: int
    level_difference: int
    xp_difference: float
    leader: str  # "first", "second" or "tie"


@dataclass
class PrestigeResult:
    new_xp: int
    bonus_xp: int
    prestige_level: int


def xp_between_levels(from_level: int, to_level: int, config: ConfigLike = None) -> int:
    """XP separating two levels. Negative when to_level is below from_level."""
    cfg = resolve_config(config)
    return get_required_xp(to_level, cfg) - get_required_xp(from_level, cfg)


def estimate_time_to_level(
    current_xp: float,
    target_level: int,
    xp_per_day: float,
    config: ConfigLike = None,
    today: date | None = None,
) -> TimeEstimate:
    """Days (rounded up) and calendar date at which target_level is reached.

    Raises ValueError if XP is still needed but xp_per_day is not positive.
    """
    today = today or date.today()
    xp_needed = get_required_xp(target_level, config) - current_xp
    # NaN compares false, so it counts as reached
    if not xp_needed > 0:
        return TimeEstimate(days=0, reached_on=today)
    if xp_per_day <= 0:
        raise ValueError("xp_per_day must be positive to reach a higher level")
    if math.isinf(xp_needed):
        raise ValueError("current_xp must be finite to estimate a date")
    days = math.ceil(xp_needed / xp_per_day)
    return TimeEstimate(days=days, reached_on=today + timedelta(days=days))


def calculate_xp_bonus(
    base_xp: float, multiplier: float = 1, bonuses: Iterable[float] = ()
) -> int:
    """floor(base_xp * multiplier + sum(bonuses))."""
    return math.floor(base_xp * multiplier + sum(bonuses))


def check_level_up(previous_xp: float, added_xp: float, config: ConfigLike = None) -> LevelUpResult:
    """Compare levels before and after adding XP."""
    cfg = resolve_config(config)
    previous_level = calculate_level(previous_xp, cfg)
    new_level = calculate_level(previous_xp + added_xp, cfg)
    levels_gained = new_level - previous_level
    return LevelUpResult(
        leveled_up=levels_gained > 0,
        previous_level=previous_level,
        new_level=new_level,
        levels_gained=levels_gained,
    )


def generate_milestones(
    max_level: int | None = None, interval: int = 10, config: ConfigLike = None
) -> list[Milestone]:
    """Required XP for every level from 1 to max_level (the curve's cap by default).

    Every interval-th level is flagged as a milestone; interval <= 0 flags none.
    """
    cfg = resolve_config(config)
    top = cfg.max_level if max_level is None else max_level
    return [
        Milestone(
            level=lv,
            required_xp=get_required_xp(lv, cfg),
            is_milestone=interval > 0 and lv % interval == 0,
        )
        for lv in range(1, top + 1)
    ]


def calculate_daily_xp_requirement(
    current_xp: float, target_level: int, days: int, config: ConfigLike = None
) -> int | float:
    """XP per day needed to hit target_level within days. math.inf if days <= 0."""
    xp_needed = get_required_xp(target_level, config) - current_xp
    if not xp_needed > 0:
        return 0
    if days <= 0 or math.isinf(xp_needed):
        return math.inf
    return math.ceil(xp_needed / days)


def compare_progression(
    first_xp: float, second_xp: float, config: ConfigLike = None
) -> ProgressionComparison:
    """Level and XP gap between two XP totals. The leader is decided by XP."""
    cfg = resolve_config(config)
    first_level = calculate_level(first_xp, cfg)
    second_level = calculate_level(second_xp, cfg)
    if first_xp > second_xp:
        leader = "first"
    elif second_xp > first_xp:
        leader = "second"
    else:
        leader = "tie"
    return ProgressionComparison(
        first_level=first_level,
        second_level=second_level,
        level_difference=abs(first_level - second_level),
        xp_difference=abs(first_xp - second_xp),
        leader=leader,
    )


def calculate_prestige(
    current_xp: float, prestige_bonus: float = 0.1, prestige_count: int = 0
) -> PrestigeResult:
    """Reset progress, keeping floor(current_xp * prestige_bonus) as a head start."""
    bonus_xp = math.floor(current_xp * prestige_bonus)
    return PrestigeResult(
        new_xp=bonus_xp,
        bonus_xp=bonus_xp,
        prestige_level=max(0, prestige_count) + 1,
    )


def prestige_stars(prestige_count: int) -> str:
    """Return star characters: 1 -> '★', 3 -> '★★★', 0 -> ''."""
    if prestige_count <= 0:
        return ""
    return "★" * prestige_count
