"""Tests for rank lookup."""

from gamification_level.ranks import (
    DEFAULT_RANKS,
    RankDefinition,
    get_rank,
    get_rank_title,
    ranks_are_contiguous,
    validate_rank_table,
)

CUSTOM = [
    RankDefinition("bronze", 1, 5, "Bronze"),
    RankDefinition("silver", 6, 10, "Silver"),
]


class TestDefaultRanks:
    def test_six_tiers(self):
        assert [r.rank for r in DEFAULT_RANKS] == [
            "trainee", "junior", "intermediate", "senior", "expert", "master",
        ]

    def test_titles(self):
        assert [r.title for r in DEFAULT_RANKS] == [
            "Trainee", "Junior", "Intermediate", "Senior", "Expert", "Master",
        ]

    def test_contiguous(self):
        assert ranks_are_contiguous(DEFAULT_RANKS)

    def test_well_formed_over_1_to_100(self):
        assert validate_rank_table(DEFAULT_RANKS, max_level=100) == []

    def test_every_level_has_a_rank(self):
        for lv in range(1, 101):
            assert get_rank(lv) is not None

    def test_levels_outside_range_have_no_rank(self):
        for lv in (-10, -1, 0, 101, 150, 10_000):
            assert get_rank(lv) is None


class TestGetRank:
    def test_level_50_is_intermediate(self):
        assert get_rank(50).rank == "intermediate"

    def test_level_101_is_none(self):
        assert get_rank(101) is None

    def test_boundaries(self):
        assert get_rank(10).rank == "trainee"
        assert get_rank(11).rank == "junior"
        assert get_rank(25).rank == "junior"
        assert get_rank(26).rank == "intermediate"
        assert get_rank(90).rank == "expert"
        assert get_rank(91).rank == "master"
        assert get_rank(100).rank == "master"

    def test_custom_table(self):
        assert get_rank(7, CUSTOM).rank == "silver"
        assert get_rank(11, CUSTOM) is None

    def test_empty_custom_table_matches_nothing(self):
        assert get_rank(5, []) is None

    def test_overlap_first_match_wins(self):
        overlapping = [
            RankDefinition("a", 1, 10, "A"),
            RankDefinition("b", 5, 15, "B"),
        ]
        assert get_rank(7, overlapping).rank == "a"
        assert get_rank(12, overlapping).rank == "b"


class TestGetRankTitle:
    def test_match(self):
        assert get_rank_title(1) == "Trainee"
        assert get_rank_title(95) == "Master"

    def test_no_match_is_empty_string(self):
        assert get_rank_title(0) == ""
        assert get_rank_title(101) == ""

    def test_custom_table(self):
        assert get_rank_title(3, CUSTOM) == "Bronze"


class TestValidateRankTable:
    def test_gap(self):
        table = [RankDefinition("a", 1, 5, "A"), RankDefinition("b", 8, 10, "B")]
        problems = validate_rank_table(table)
        assert len(problems) == 1
        assert "gap" in problems[0]
        assert not ranks_are_contiguous(table)

    def test_overlap(self):
        table = [RankDefinition("a", 1, 6, "A"), RankDefinition("b", 5, 10, "B")]
        problems = validate_rank_table(table)
        assert any("overlap" in p for p in problems)
        assert not ranks_are_contiguous(table)

    def test_inverted_range(self):
        problems = validate_rank_table([RankDefinition("a", 10, 1, "A")])
        assert any("above max_level" in p for p in problems)

    def test_unsorted_contiguous_is_fine(self):
        assert validate_rank_table(list(reversed(CUSTOM))) == []
        assert ranks_are_contiguous(list(reversed(CUSTOM)))

    def test_coverage_missing_top(self):
        problems = validate_rank_table(CUSTOM, max_level=20)
        assert problems == ["levels 11-20 have no rank"]

    def test_coverage_missing_bottom(self):
        problems = validate_rank_table([RankDefinition("a", 3, 10, "A")], max_level=10)
        assert problems == ["levels 1-2 have no rank"]

    def test_empty_table_with_max_level(self):
        assert validate_rank_table([], max_level=10) == ["no ranks cover levels 1-10"]


class TestRankDefinitionDict:
    def test_from_snake_case(self):
        rank = RankDefinition.from_dict(
            {"rank": "gold", "min_level": 11, "max_level": 15, "title": "Gold"}
        )
        assert rank == RankDefinition("gold", 11, 15, "Gold")

    def test_from_camel_case(self):
        rank = RankDefinition.from_dict(
            {"rank": "gold", "minLevel": 11, "maxLevel": 15, "title": "Gold"}
        )
        assert rank == RankDefinition("gold", 11, 15, "Gold")

    def test_to_dict(self):
        assert CUSTOM[0].to_dict() == {
            "rank": "bronze", "min_level": 1, "max_level": 5, "title": "Bronze",
        }
