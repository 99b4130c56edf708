"""Rank lookup from level ranges."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class RankDefinition:
    rank: str
    min_level: int
    max_level: int
    title: str

    @classmethod
    def from_dict(cls, data: dict) -> RankDefinition:
        """Build from a dict using snake_case or camelCase level keys."""
        return cls(
            rank=data["rank"],
            min_level=int(data.get("min_level", data.get("minLevel"))),
            max_level=int(data.get("max_level", data.get("maxLevel"))),
            title=data.get("title", ""),
        )

    def to_dict(self) -> dict:
        return {
            "rank": self.rank,
            "min_level": self.min_level,
            "max_level": self.max_level,
            "title": self.title,
        }


DEFAULT_RANKS: tuple[RankDefinition, ...] = (
    RankDefinition("trainee", 1, 10, "Trainee"),
    RankDefinition("junior", 11, 25, "Junior"),
    RankDefinition("intermediate", 26, 50, "Intermediate"),
    RankDefinition("senior", 51, 75, "Senior"),
    RankDefinition("expert", 76, 90, "Expert"),
    RankDefinition("master", 91, 100, "Master"),
)


def get_rank(level: float, ranks: Sequence[RankDefinition] | None = None) -> RankDefinition | None:
    """Return the first rank whose range contains level, or None."""
    table = DEFAULT_RANKS if ranks is None else ranks
    for rank in table:
        if rank.min_level <= level <= rank.max_level:
            return rank
    return None


def get_rank_title(level: float, ranks: Sequence[RankDefinition] | None = None) -> str:
    """Return the rank title for level, or '' if no range matches."""
    rank = get_rank(level, ranks)
    return rank.title if rank else ""


def validate_rank_table(
    ranks: Sequence[RankDefinition], max_level: int | None = None
) -> list[str]:
    """List the problems of a rank table: inverted ranges, gaps, overlaps, coverage.

    An empty list means the table is well formed. When max_level is given the
    table must also cover 1..max_level exactly.
    """
    problems: list[str] = []
    for rank in ranks:
        if rank.min_level > rank.max_level:
            problems.append(
                f"{rank.rank}: min_level {rank.min_level} is above max_level {rank.max_level}"
            )

    ordered = sorted(ranks, key=lambda r: r.min_level)
    for prev, nxt in zip(ordered, ordered[1:]):
        if prev.max_level + 1 < nxt.min_level:
            problems.append(
                f"gap between {prev.rank} and {nxt.rank}: "
                f"levels {prev.max_level + 1}-{nxt.min_level - 1} have no rank"
            )
        elif prev.max_level + 1 > nxt.min_level:
            problems.append(
                f"{prev.rank} and {nxt.rank} overlap at level {nxt.min_level}"
            )

    if max_level is not None:
        if not ordered:
            problems.append(f"no ranks cover levels 1-{max_level}")
        else:
            if ordered[0].min_level > 1:
                problems.append(f"levels 1-{ordered[0].min_level - 1} have no rank")
            top = max(r.max_level for r in ordered)
            if top < max_level:
                problems.append(f"levels {top + 1}-{max_level} have no rank")
    return problems


def ranks_are_contiguous(ranks: Sequence[RankDefinition]) -> bool:
    """True when sorted ranges follow each other with no gaps or overlaps."""
    ordered = sorted(ranks, key=lambda r: r.min_level)
    return all(prev.max_level + 1 == nxt.min_level for prev, nxt in zip(ordered, ordered[1:]))
