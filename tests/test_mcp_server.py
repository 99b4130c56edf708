"""Tests for the MCP server tool functions."""
from unittest.mock import patch

from gamification_level.levels import CurveConfig
from gamification_level.mcp_server import (
    check_level_up,
    get_badge,
    get_level_info,
    get_milestones,
    get_rank,
    get_required_xp,
)
from gamification_level.ranks import RankDefinition

DEFAULTS = (CurveConfig(), None)


class TestGetLevelInfo:
    @patch("gamification_level.mcp_server._load_settings", return_value=DEFAULTS)
    def test_snapshot(self, mock_settings):
        result = get_level_info(3162)
        assert result["level"] == 10
        assert result["rank"] == "trainee"
        assert result["max_level"] == 100
        mock_settings.assert_called_once()

    @patch("gamification_level.mcp_server._load_settings")
    def test_uses_configured_curve(self, mock_settings):
        mock_settings.return_value = (CurveConfig(exponent=1), None)
        assert get_level_info(500)["level"] == 5

    @patch("gamification_level.mcp_server._load_settings")
    def test_custom_ranks(self, mock_settings):
        mock_settings.return_value = (CurveConfig(), (RankDefinition("all", 1, 100, "All"),))
        assert get_level_info(0)["rank_title"] == "All"


class TestGetRequiredXp:
    @patch("gamification_level.mcp_server._load_settings", return_value=DEFAULTS)
    def test_level_10(self, _):
        assert get_required_xp(10) == {"level": 10, "required_xp": 3162}


class TestGetRank:
    @patch("gamification_level.mcp_server._load_settings", return_value=DEFAULTS)
    def test_match(self, _):
        result = get_rank(50)
        assert result["rank"] == "intermediate"
        assert result["min_level"] == 26

    @patch("gamification_level.mcp_server._load_settings", return_value=DEFAULTS)
    def test_no_match_returns_error(self, _):
        assert "error" in get_rank(101)


class TestCheckLevelUp:
    @patch("gamification_level.mcp_server._load_settings", return_value=DEFAULTS)
    def test_level_up(self, _):
        result = check_level_up(0, 282)
        assert result["leveled_up"] is True
        assert result["levels_gained"] == 1


class TestGetMilestones:
    @patch("gamification_level.mcp_server._load_settings", return_value=DEFAULTS)
    def test_default_interval(self, _):
        result = get_milestones()
        assert [m["level"] for m in result["milestones"]] == list(range(10, 101, 10))
        assert result["milestones"][0]["required_xp"] == 3162

    def test_invalid_interval(self):
        assert "error" in get_milestones(0)


class TestGetBadge:
    @patch("gamification_level.mcp_server._load_settings", return_value=DEFAULTS)
    def test_badge_structure(self, _):
        result = get_badge(3162)
        assert "<svg" in result["svg"]
        assert result["level"] == 10
        assert result["rank_title"] == "Trainee"
        assert "markdown" in result
