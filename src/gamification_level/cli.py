"""CLI commands for gamification-level."""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict, replace
from pathlib import Path

from gamification_level.badge import generate_badge_svg
from gamification_level.config import (
    DEFAULT_CONFIG_PATH,
    get_curve_config,
    get_rank_table,
    set_curve_options,
)
from gamification_level.display import (
    console,
    print_badge_result,
    print_comparison,
    print_config,
    print_daily_requirement,
    print_level_info,
    print_level_up,
    print_milestones,
    print_prestige_result,
    print_rank_table,
    print_required_xp,
    print_time_estimate,
)
from gamification_level.info import get_level_info
from gamification_level.levels import CurveConfig, get_required_xp
from gamification_level.progression import (
    calculate_daily_xp_requirement,
    calculate_prestige,
    check_level_up,
    compare_progression,
    estimate_time_to_level,
    generate_milestones,
    prestige_stars,
)
from gamification_level.ranks import DEFAULT_RANKS, RankDefinition, validate_rank_table

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    parser = argparse.ArgumentParser(
        prog="gamification-level",
        description="Level, progress and rank calculator for XP-based progression",
    )
    parser.add_argument("--config", "-c", default=None, help="Path to config.json")
    parser.add_argument("--base-xp", type=float, default=None, help="XP required for level 1")
    parser.add_argument("--exponent", type=float, default=None, help="Curve growth exponent")
    parser.add_argument("--max-level", type=int, default=None, help="Level cap")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command")
    info_p = subparsers.add_parser("info", help="Level, progress and rank for an XP total")
    info_p.add_argument("xp", type=float)
    info_p.add_argument("--json", action="store_true", help="Print raw JSON")
    required_p = subparsers.add_parser("required", help="Total XP required for a level")
    required_p.add_argument("level", type=int)
    level_p = subparsers.add_parser("level", help="Level for an XP total")
    level_p.add_argument("xp", type=float)
    ranks_p = subparsers.add_parser("ranks", help="Show the rank table")
    ranks_p.add_argument("--level", type=int, default=None, help="Highlight the rank of a level")
    ms_p = subparsers.add_parser("milestones", help="Required XP at milestone levels")
    ms_p.add_argument("--interval", type=int, default=10)
    ms_p.add_argument("--all", action="store_true", help="Show every level")
    lu_p = subparsers.add_parser("levelup", help="Check whether adding XP levels up")
    lu_p.add_argument("previous_xp", type=float)
    lu_p.add_argument("added_xp", type=float)
    est_p = subparsers.add_parser("estimate", help="Days to reach a level at a daily XP rate")
    est_p.add_argument("xp", type=float)
    est_p.add_argument("target_level", type=int)
    est_p.add_argument("--per-day", type=float, required=True, help="XP earned per day")
    daily_p = subparsers.add_parser("daily", help="Daily XP needed to reach a level in time")
    daily_p.add_argument("xp", type=float)
    daily_p.add_argument("target_level", type=int)
    daily_p.add_argument("days", type=int)
    cmp_p = subparsers.add_parser("compare", help="Compare two XP totals")
    cmp_p.add_argument("first_xp", type=float)
    cmp_p.add_argument("second_xp", type=float)
    pr_p = subparsers.add_parser("prestige", help="Compute a prestige reset")
    pr_p.add_argument("xp", type=float)
    pr_p.add_argument("--bonus", type=float, default=0.1, help="Fraction of XP kept")
    pr_p.add_argument("--count", type=int, default=0, help="Prestiges so far")
    badge_p = subparsers.add_parser("badge", help="Generate SVG badge for README")
    badge_p.add_argument("xp", type=float)
    badge_p.add_argument("--output", "-o", default="level-badge.svg", help="Output file path")
    badge_p.add_argument("--prestige", type=int, default=0, help="Prestige count")
    cfg_p = subparsers.add_parser("config", help="Show or change the stored curve")
    cfg_sub = cfg_p.add_subparsers(dest="config_command")
    cfg_sub.add_parser("show", help="Show the effective configuration")
    cfg_set_p = cfg_sub.add_parser("set", help="Store curve options")
    cfg_set_p.add_argument("--base-xp", dest="set_base_xp", type=float, default=None)
    cfg_set_p.add_argument("--exponent", dest="set_exponent", type=float, default=None)
    cfg_set_p.add_argument("--max-level", dest="set_max_level", type=int, default=None)
    return parser


def load_settings(args: argparse.Namespace) -> tuple[CurveConfig, tuple[RankDefinition, ...] | None]:
    """Curve from the config file with command line overrides, plus the custom rank table."""
    config_path = Path(args.config).expanduser() if args.config else None
    curve = get_curve_config(config_path)
    overrides = {
        "base_xp": args.base_xp,
        "exponent": args.exponent,
        "max_level": args.max_level,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides:
        curve = replace(curve, **overrides)
    logger.debug("Using curve %s", curve)
    return curve, get_rank_table(config_path)


def main(argv: list[str] | None = None) -> None:
    """Entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    command = args.command
    if command is None:
        parser.print_help()
        return

    config, ranks = load_settings(args)

    if command == "info":
        do_info(args.xp, config, ranks, as_json=args.json)
    elif command == "required":
        do_required(args.level, config)
    elif command == "level":
        do_level(args.xp, config, ranks)
    elif command == "ranks":
        do_ranks(config, ranks, highlight_level=args.level)
    elif command == "milestones":
        do_milestones(config, interval=args.interval, show_all=args.all)
    elif command == "levelup":
        do_level_up(args.previous_xp, args.added_xp, config)
    elif command == "estimate":
        do_estimate(args.xp, args.target_level, args.per_day, config)
    elif command == "daily":
        do_daily(args.xp, args.target_level, args.days, config)
    elif command == "compare":
        do_compare(args.first_xp, args.second_xp, config)
    elif command == "prestige":
        do_prestige(args.xp, bonus=args.bonus, prestige_count=args.count)
    elif command == "badge":
        do_badge(args.xp, config, ranks, output=args.output, prestige_count=args.prestige)
    elif command == "config":
        config_path = Path(args.config).expanduser() if args.config else None
        if getattr(args, "config_command", None) == "set":
            do_config_set(
                config_path,
                base_xp=args.set_base_xp,
                exponent=args.set_exponent,
                max_level=args.set_max_level,
            )
        else:
            do_config_show(config_path, config, ranks)


def do_info(
    xp: float,
    config: CurveConfig,
    ranks: tuple[RankDefinition, ...] | None = None,
    as_json: bool = False,
) -> dict:
    """Show the full level snapshot for an XP total."""
    info = get_level_info(xp, config, ranks)
    if as_json:
        console.print_json(json.dumps(info.to_dict()))
    else:
        print_level_info(info, config.max_level)
    return {"ok": True, **info.to_dict()}


def do_required(level: int, config: CurveConfig) -> dict:
    required_xp = get_required_xp(level, config)
    print_required_xp(level, required_xp)
    return {"ok": True, "level": level, "required_xp": required_xp}


def do_level(xp: float, config: CurveConfig, ranks: tuple[RankDefinition, ...] | None = None) -> dict:
    info = get_level_info(xp, config, ranks)
    console.print(f"Level [bold]{info.level}[/] {info.rank_title or ''}".rstrip())
    return {"ok": True, "level": info.level}


def do_ranks(
    config: CurveConfig,
    ranks: tuple[RankDefinition, ...] | None = None,
    highlight_level: int | None = None,
) -> dict:
    """Show the rank table and any gaps or overlaps in it."""
    table = DEFAULT_RANKS if ranks is None else ranks
    problems = validate_rank_table(table, max_level=config.max_level)
    print_rank_table(table, problems=problems, highlight_level=highlight_level)
    return {
        "ok": True,
        "ranks": [rank.to_dict() for rank in table],
        "problems": problems,
        "custom": ranks is not None,
    }


def do_milestones(config: CurveConfig, interval: int = 10, show_all: bool = False) -> dict:
    milestones = generate_milestones(interval=interval, config=config)
    print_milestones(milestones, only_milestones=not show_all)
    return {"ok": True, "milestones": [asdict(m) for m in milestones]}


def do_level_up(previous_xp: float, added_xp: float, config: CurveConfig) -> dict:
    result = check_level_up(previous_xp, added_xp, config)
    print_level_up(result)
    return {"ok": True, **asdict(result)}


def do_estimate(xp: float, target_level: int, xp_per_day: float, config: CurveConfig) -> dict:
    """Estimate when target_level is reached at a steady daily rate."""
    try:
        estimate = estimate_time_to_level(xp, target_level, xp_per_day, config)
    except ValueError as exc:
        console.print(f"[red]{exc}[/]")
        return {"ok": False, "reason": "invalid_rate"}
    print_time_estimate(target_level, estimate)
    return {"ok": True, "days": estimate.days, "date": estimate.reached_on.isoformat()}


def do_daily(xp: float, target_level: int, days: int, config: CurveConfig) -> dict:
    xp_per_day = calculate_daily_xp_requirement(xp, target_level, days, config)
    print_daily_requirement(target_level, days, xp_per_day)
    if xp_per_day == float("inf"):
        return {"ok": False, "reason": "invalid_days"}
    return {"ok": True, "xp_per_day": xp_per_day}


def do_compare(first_xp: float, second_xp: float, config: CurveConfig) -> dict:
    comparison = compare_progression(first_xp, second_xp, config)
    print_comparison(comparison)
    return {"ok": True, **asdict(comparison)}


def do_prestige(xp: float, bonus: float = 0.1, prestige_count: int = 0) -> dict:
    """Compute the XP kept after a prestige reset."""
    result = calculate_prestige(xp, prestige_bonus=bonus, prestige_count=prestige_count)
    stars = prestige_stars(result.prestige_level)
    print_prestige_result(result, stars)
    return {"ok": True, "stars": stars, **asdict(result)}


def do_badge(
    xp: float,
    config: CurveConfig,
    ranks: tuple[RankDefinition, ...] | None = None,
    output: str = "level-badge.svg",
    prestige_count: int = 0,
) -> dict:
    """Generate an SVG badge for README."""
    info = get_level_info(xp, config, ranks)
    svg = generate_badge_svg(
        level=info.level, rank_title=info.rank_title, rank=info.rank,
        prestige_count=prestige_count, total_xp=xp,
    )
    output_path = Path(output)
    output_path.write_text(svg, encoding="utf-8")
    logger.debug("Wrote badge to %s", output_path)
    result = {
        "ok": True, "output": str(output_path),
        "level": info.level, "rank_title": info.rank_title,
    }
    print_badge_result(result)
    return result


def do_config_show(
    config_path: Path | None,
    config: CurveConfig,
    ranks: tuple[RankDefinition, ...] | None = None,
) -> dict:
    data = {
        "path": str(config_path or DEFAULT_CONFIG_PATH),
        **asdict(config),
        "custom_ranks": ranks is not None,
    }
    print_config(data)
    return {"ok": True, **data}


def do_config_set(
    config_path: Path | None,
    base_xp: float | None = None,
    exponent: float | None = None,
    max_level: int | None = None,
) -> dict:
    """Store curve options in the config file."""
    options = {"base_xp": base_xp, "exponent": exponent, "max_level": max_level}
    if all(v is None for v in options.values()):
        console.print("[red]Nothing to set. Pass --base-xp, --exponent or --max-level.[/]")
        return {"ok": False, "reason": "no_options"}
    curve = set_curve_options(options, config_path)
    data = {
        "path": str(config_path or DEFAULT_CONFIG_PATH),
        **asdict(curve),
        "custom_ranks": get_rank_table(config_path) is not None,
    }
    print_config(data)
    return {"ok": True, **data}


if __name__ == "__main__":
    main()
