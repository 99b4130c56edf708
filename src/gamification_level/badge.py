"""SVG badge generation for gamification-level.

Generates a shields.io-style flat badge showing level, rank title and prestige stars.
Pure functions, no side effects, no external dependencies.
"""

from __future__ import annotations

from gamification_level.progression import prestige_stars

# Rank id -> hex color for SVG
_RANK_HEX: dict[str, str] = {
    "trainee": "6b7280",
    "junior": "16a34a",
    "intermediate": "2563eb",
    "senior": "7c3aed",
    "expert": "d97706",
    "master": "a21caf",
}
_DEFAULT_HEX = "6b7280"

_LABEL = "level"
_LABEL_BG = "555555"
_FONT_SIZE = 11
_FONT_FAMILY = "DejaVu Sans,Verdana,Geneva,sans-serif"


def _text_width(text: str) -> int:
    """Estimate pixel width of text at 11px DejaVu Sans."""
    widths = {
        "f": 4, "i": 4, "j": 4, "l": 4, "r": 4, "t": 5,
        "m": 10, "w": 9, "W": 10, "M": 10,
        " ": 4, ".": 4, ",": 4, ":": 4, "/": 5,
    }
    return sum(widths.get(ch, 7) for ch in text)


def _escape(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def generate_badge_svg(
    level: int,
    rank_title: str | None = None,
    rank: str | None = None,
    prestige_count: int = 0,
    total_xp: float = 0,
) -> str:
    """Generate a shields.io flat-style SVG badge string.

    Layout: [level | Lv.12 Junior ★]
    """
    value_text = f"Lv.{level}"
    if rank_title:
        value_text = f"{value_text} {rank_title}"
    stars = prestige_stars(prestige_count)
    if stars:
        value_text = f"{value_text} {stars}"
    value_text = _escape(value_text)

    right_hex = _RANK_HEX.get(rank or "", _DEFAULT_HEX)

    label_text_w = _text_width(_LABEL)
    value_text_w = _text_width(value_text)

    pad = 10
    label_w = label_text_w + pad * 2
    value_w = value_text_w + pad * 2
    total_w = label_w + value_w
    height = 20

    label_cx = label_w // 2
    value_cx = label_w + value_w // 2

    tooltip = f"Level {level}"
    if rank_title:
        tooltip += f" {rank_title}"
    if prestige_count > 0:
        tooltip += f" (Prestige {prestige_count})"
    if total_xp > 0:
        tooltip += f" - {total_xp:,.0f} XP"
    tooltip = _escape(tooltip)

    svg = f'''<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" width="{total_w}" height="{height}" role="img" aria-label="{tooltip}">
  <title>{tooltip}</title>
  <linearGradient id="s" x2="0" y2="100%">
    <stop offset="0" stop-color="#bbb" stop-opacity=".1"/>
    <stop offset="1" stop-opacity=".1"/>
  </linearGradient>
  <clipPath id="r">
    <rect width="{total_w}" height="{height}" rx="3" fill="#fff"/>
  </clipPath>
  <g clip-path="url(#r)">
    <rect width="{label_w}" height="{height}" fill="#{_LABEL_BG}"/>
    <rect x="{label_w}" width="{value_w}" height="{height}" fill="#{right_hex}"/>
    <rect width="{total_w}" height="{height}" fill="url(#s)"/>
  </g>
  <g fill="#fff" text-anchor="middle" font-family="{_FONT_FAMILY}" text-rendering="geometricPrecision" font-size="{_FONT_SIZE}">
    <text aria-hidden="true" x="{label_cx}.5" y="15" fill="#010101" fill-opacity=".3">{_LABEL}</text>
    <text x="{label_cx}.5" y="14">{_LABEL}</text>
    <text aria-hidden="true" x="{value_cx}.5" y="15" fill="#010101" fill-opacity=".3">{value_text}</text>
    <text x="{value_cx}.5" y="14">{value_text}</text>
  </g>
</svg>
'''
    return svg
