"""Rich terminal display for gamification-level."""

from __future__ import annotations

import math
from collections.abc import Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from gamification_level.info import LevelInfo
from gamification_level.progression import (
    LevelUpResult,
    Milestone,
    PrestigeResult,
    ProgressionComparison,
    TimeEstimate,
)
from gamification_level.ranks import RankDefinition

console = Console()

# Map default rank ids to Rich color names
_RANK_COLORS: dict[str, str] = {
    "trainee": "grey70",
    "junior": "green",
    "intermediate": "deep_sky_blue1",
    "senior": "purple",
    "expert": "gold1",
    "master": "orange_red1",
}


def _rank_color(rank: str | None) -> str:
    """Rich color for a rank id; custom ranks get white."""
    return _RANK_COLORS.get(rank or "", "white")


def format_number(n: float) -> str:
    """Format large numbers: 421543 -> '421.5K', 1200 -> '1,200', 1234567 -> '1.2M'."""
    if not math.isfinite(n):
        return str(n)
    if n >= 1_000_000:
        value = n / 1_000_000
        if value >= 100:
            return f"{value:.0f}M"
        return f"{value:.1f}M"
    if n >= 10_000:
        value = n / 1_000
        if value >= 1000:
            return f"{value:.0f}K"
        return f"{value:.1f}K"
    if isinstance(n, float) and not n.is_integer():
        return f"{n:,.1f}"
    return f"{int(n):,}"


def _xp_bar(progress: float, width: int = 20) -> str:
    """Render a progress percentage as text: [████████░░░░░░░░░░░░]."""
    ratio = min(max(progress / 100, 0.0), 1.0)
    filled = int(ratio * width)
    empty = width - filled
    return "[" + "█" * filled + "░" * empty + "]"


def print_level_info(info: LevelInfo, max_level: int) -> None:
    """Print level, rank and progress towards the next level."""
    color = _rank_color(info.rank)
    title = info.rank_title or "Unranked"

    lines: list[str] = []
    lines.append("")
    lines.append(f"  [bold {color}]Level {info.level} - {title}[/]")

    bar = _xp_bar(info.progress)
    if info.level >= max_level:
        lines.append(f"  {bar} MAX LEVEL")
    else:
        lines.append(f"  {bar} {info.progress:.1f}%")
        lines.append(
            f"  {format_number(info.xp_to_next_level)} XP to level {info.level + 1} "
            f"({format_number(info.next_level_xp)} total)"
        )
    lines.append(f"  Total: [bold]{format_number(info.current_xp)}[/] XP")
    lines.append("")

    panel = Panel(
        "\n".join(lines),
        title="[bold]LEVEL[/]",
        box=box.ROUNDED,
        border_style=color,
        width=50,
    )
    console.print(panel)


def print_required_xp(level: int, required_xp: int) -> None:
    console.print(f"Level [bold]{level}[/] requires [bold]{format_number(required_xp)}[/] XP")


def print_rank_table(
    ranks: Sequence[RankDefinition],
    problems: Sequence[str] = (),
    highlight_level: int | None = None,
) -> None:
    """Print the rank table, marking the rank that contains highlight_level."""
    table = Table(
        title="Ranks",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold",
    )
    table.add_column("Rank", style="bold")
    table.add_column("Title")
    table.add_column("Levels", justify="right")

    for rank in ranks:
        color = _rank_color(rank.rank)
        marker = ""
        if highlight_level is not None and rank.min_level <= highlight_level <= rank.max_level:
            marker = " ←"
        table.add_row(
            f"[{color}]{rank.rank}[/]",
            f"{rank.title}{marker}",
            f"{rank.min_level}-{rank.max_level}",
        )

    console.print(table)
    for problem in problems:
        console.print(f"[yellow]⚠ {problem}[/]")


def print_milestones(milestones: Sequence[Milestone], only_milestones: bool = True) -> None:
    """Print required XP per level, optionally only the flagged milestone levels."""
    table = Table(
        title="Milestones",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold",
    )
    table.add_column("Level", justify="right", style="bold")
    table.add_column("Required XP", justify="right")

    for milestone in milestones:
        if only_milestones and not milestone.is_milestone:
            continue
        table.add_row(str(milestone.level), f"{milestone.required_xp:,}")

    console.print(table)


def print_level_up(result: LevelUpResult) -> None:
    if result.leveled_up:
        plural = "s" if result.levels_gained != 1 else ""
        console.print(
            f"[bold green]⬆ Level up![/] {result.previous_level} → {result.new_level} "
            f"(+{result.levels_gained} level{plural})"
        )
    else:
        console.print(f"No level up. Still level [bold]{result.new_level}[/].")


def print_time_estimate(target_level: int, estimate: TimeEstimate) -> None:
    if estimate.days == 0:
        console.print(f"Level [bold]{target_level}[/] is already reached.")
        return
    console.print(
        f"Level [bold]{target_level}[/] in [bold]{estimate.days}[/] days "
        f"({estimate.reached_on.isoformat()})"
    )


def print_daily_requirement(target_level: int, days: int, xp_per_day: float) -> None:
    if xp_per_day == 0:
        console.print(f"Level [bold]{target_level}[/] is already reached.")
    elif xp_per_day == float("inf"):
        console.print("[red]Days must be positive.[/]")
    else:
        console.print(
            f"Earn [bold]{format_number(xp_per_day)}[/] XP per day "
            f"to reach level {target_level} in {days} days"
        )


def print_comparison(comparison: ProgressionComparison) -> None:
    table = Table(box=box.ROUNDED, show_header=True, header_style="bold")
    table.add_column("", style="bold")
    table.add_column("First", justify="right")
    table.add_column("Second", justify="right")
    table.add_row("Level", str(comparison.first_level), str(comparison.second_level))
    console.print(table)
    if comparison.leader == "tie":
        console.print("Tied on XP.")
    else:
        console.print(
            f"[bold]{comparison.leader.capitalize()}[/] leads by "
            f"{format_number(comparison.xp_difference)} XP "
            f"({comparison.level_difference} levels)"
        )


def print_prestige_result(result: PrestigeResult, stars: str) -> None:
    """Print prestige outcome."""
    lines: list[str] = []
    lines.append("")
    lines.append(f"  [bold yellow]PRESTIGE {result.prestige_level}[/]  {stars}")
    lines.append("")
    lines.append(f"  Bonus XP kept: {format_number(result.bonus_xp)}")
    lines.append(f"  New XP total: {format_number(result.new_xp)}")
    lines.append("")

    panel = Panel(
        "\n".join(lines),
        title="[bold]PRESTIGE[/]",
        box=box.ROUNDED,
        border_style="yellow",
        width=50,
    )
    console.print(panel)


def print_badge_result(result: dict) -> None:
    """Print badge generation result."""
    lines: list[str] = []
    lines.append("")
    lines.append(f"  Badge saved to: [bold]{result.get('output', '')}[/]")
    title = result.get("rank_title") or "Unranked"
    lines.append(f"  Level {result.get('level', 1)} - {title}")
    lines.append("")
    lines.append("  Add to your README:")
    lines.append(f"  ![Level]({result.get('output', '')})")
    lines.append("")

    panel = Panel(
        "\n".join(lines),
        title="[bold]Badge Generated[/]",
        box=box.ROUNDED,
        border_style="green",
        width=50,
    )
    console.print(panel)


def print_config(data: dict) -> None:
    """Print the effective curve and where it came from."""
    table = Table(
        title="Configuration",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold",
    )
    table.add_column("Setting", style="bold")
    table.add_column("Value", justify="right")
    table.add_row("Config file", str(data.get("path", "")))
    table.add_row("Base XP", str(data.get("base_xp")))
    table.add_row("Exponent", str(data.get("exponent")))
    table.add_row("Max level", str(data.get("max_level")))
    table.add_row("Rank table", "custom" if data.get("custom_ranks") else "built-in")
    console.print(table)
