"""Combined level snapshot for a single XP value."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import asdict, dataclass

from gamification_level.levels import (
    ConfigLike,
    calculate_level,
    get_required_xp,
    get_xp_progress,
    get_xp_to_next_level,
    resolve_config,
)
from gamification_level.ranks import RankDefinition, get_rank


@dataclass(frozen=True)
class LevelInfo:
    level: int
    current_xp: float
    required_xp: int
    next_level_xp: int
    progress: float  # 0.0 to 100.0
    xp_to_next_level: int
    rank: str | None
    rank_title: str | None

    def to_dict(self) -> dict:
        return asdict(self)


def get_level_info(
    current_xp: float,
    config: ConfigLike = None,
    ranks: Sequence[RankDefinition] | None = None,
) -> LevelInfo:
    """Level, progress and rank for current_xp, all computed with the same config."""
    cfg = resolve_config(config)
    level = calculate_level(current_xp, cfg)
    rank = get_rank(level, ranks)
    return LevelInfo(
        level=level,
        current_xp=current_xp,
        required_xp=get_required_xp(level, cfg),
        next_level_xp=get_required_xp(level + 1, cfg),
        progress=get_xp_progress(current_xp, cfg),
        xp_to_next_level=get_xp_to_next_level(current_xp, cfg),
        rank=rank.rank if rank else None,
        rank_title=rank.title if rank else None,
    )
