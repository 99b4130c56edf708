"""MCP server for gamification-level.

Exposes the level calculator as MCP tools so an assistant can query it mid-conversation.
Run via: python3 -m gamification_level.mcp_server
"""
from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any

from mcp.server.fastmcp import FastMCP

from gamification_level.levels import CurveConfig
from gamification_level.ranks import RankDefinition

logger = logging.getLogger(__name__)

mcp = FastMCP(name="gamification-level")


def _load_settings() -> tuple[CurveConfig, tuple[RankDefinition, ...] | None]:
    from gamification_level.config import get_curve_config, get_rank_table
    return get_curve_config(), get_rank_table()


@mcp.tool()
def get_level_info(current_xp: float) -> dict[str, Any]:
    """Get level, progress percentage, XP to next level and rank for an XP total."""
    from gamification_level.info import get_level_info as _get_level_info
    config, ranks = _load_settings()
    info = _get_level_info(current_xp, config, ranks)
    return {**info.to_dict(), "max_level": config.max_level}


@mcp.tool()
def get_required_xp(level: int) -> dict[str, Any]:
    """Get the total XP required to reach a level."""
    from gamification_level.levels import get_required_xp as _get_required_xp
    config, _ = _load_settings()
    return {"level": level, "required_xp": _get_required_xp(level, config)}


@mcp.tool()
def get_rank(level: int) -> dict[str, Any]:
    """Get the rank whose level range contains a level."""
    from gamification_level.ranks import get_rank as _get_rank
    _, ranks = _load_settings()
    rank = _get_rank(level, ranks)
    if rank is None:
        return {"error": f"No rank covers level {level}."}
    return rank.to_dict()


@mcp.tool()
def check_level_up(previous_xp: float, added_xp: float) -> dict[str, Any]:
    """Check whether adding XP to a total crosses one or more level boundaries."""
    from gamification_level.progression import check_level_up as _check_level_up
    config, _ = _load_settings()
    return asdict(_check_level_up(previous_xp, added_xp, config))


@mcp.tool()
def get_milestones(interval: int = 10) -> dict[str, Any]:
    """Get required XP at every interval-th level up to the level cap."""
    if interval <= 0:
        return {"error": "interval must be a positive integer"}
    from gamification_level.progression import generate_milestones
    config, _ = _load_settings()
    milestones = [
        {"level": m.level, "required_xp": m.required_xp}
        for m in generate_milestones(interval=interval, config=config)
        if m.is_milestone
    ]
    return {"milestones": milestones, "max_level": config.max_level}


@mcp.tool()
def get_badge(current_xp: float, prestige_count: int = 0) -> dict[str, Any]:
    """Generate an SVG badge string showing the level and rank for an XP total."""
    from gamification_level.badge import generate_badge_svg
    from gamification_level.info import get_level_info as _get_level_info
    config, ranks = _load_settings()
    info = _get_level_info(current_xp, config, ranks)
    svg = generate_badge_svg(
        level=info.level, rank_title=info.rank_title, rank=info.rank,
        prestige_count=prestige_count, total_xp=current_xp,
    )
    return {"svg": svg, "level": info.level, "rank_title": info.rank_title,
            "markdown": "![Level](level-badge.svg)"}


def main() -> None:
    logger.debug("Starting MCP server")
    mcp.run()


if __name__ == "__main__":
    main()
