from gamification_level.badge import _RANK_HEX, _text_width, generate_badge_svg


class TestTextWidth:
    def test_empty_string(self):
        assert _text_width("") == 0

    def test_single_narrow_char(self):
        assert _text_width("i") == 4

    def test_single_wide_char(self):
        assert _text_width("m") == 10

    def test_default_width_char(self):
        assert _text_width("a") == 7


class TestGenerateBadgeSvg:
    def test_contains_svg_tag(self):
        svg = generate_badge_svg(1, "Trainee", "trainee")
        assert "<svg" in svg
        assert "</svg>" in svg

    def test_contains_label(self):
        svg = generate_badge_svg(1, "Trainee", "trainee")
        assert ">level<" in svg

    def test_contains_level_and_rank(self):
        svg = generate_badge_svg(12, "Junior", "junior")
        assert "Lv.12 Junior" in svg

    def test_rank_color_applied(self):
        svg = generate_badge_svg(95, "Master", "master")
        assert _RANK_HEX["master"] in svg

    def test_unknown_rank_uses_default_color(self):
        svg = generate_badge_svg(3, "Custom", "custom")
        assert "6b7280" in svg

    def test_no_rank(self):
        svg = generate_badge_svg(150)
        assert "Lv.150<" in svg

    def test_prestige_stars(self):
        svg = generate_badge_svg(5, "Trainee", "trainee", prestige_count=2)
        assert "★★" in svg
        assert "Prestige 2" in svg

    def test_no_stars_without_prestige(self):
        assert "★" not in generate_badge_svg(5, "Trainee", "trainee")

    def test_tooltip_xp(self):
        svg = generate_badge_svg(10, "Trainee", "trainee", total_xp=3162)
        assert "3,162 XP" in svg

    def test_title_is_escaped(self):
        svg = generate_badge_svg(2, "R&D <Lead>", "custom")
        assert "R&amp;D &lt;Lead&gt;" in svg
        assert "<Lead>" not in svg

    def test_wider_for_longer_text(self):
        short = generate_badge_svg(1, "A", "trainee")
        long = generate_badge_svg(1, "A much longer rank title", "trainee")
        short_w = int(short.split('width="')[1].split('"')[0])
        long_w = int(long.split('width="')[1].split('"')[0])
        assert long_w > short_w
