"""Sprites for the player, enemies, runes and the death screen.

Each function returns one line of a sprite, without a line break. Lines
outside a sprite's range are empty.
"""

from __future__ import annotations

from .constants import Area
from .models import Tint
from .printer import Color, color_background, color_text, reset_colors

SPRITE_HEIGHT = 9
SPRITE_WIDTH = 15

_BLOCK = "█"


def _pad(count: int) -> str:
    return " " * count


def _blocks(count: int) -> str:
    return _BLOCK * count


def player_sprite_line(line: int, tint: Tint) -> str:
    """One line (1 to 9) of the player sprite in the player's colours."""
    c1, c2, c3 = tint.color1, tint.color2, tint.color3
    skin = Color.PLAYER_SKIN
    reset = reset_colors()
    rows = {
        1: _pad(5) + color_text(c1) + _blocks(5) + reset + _pad(5),
        2: _pad(4) + color_text(c1) + _blocks(1) + color_background(c1)
        + _pad(5) + _blocks(1) + reset + _pad(4),
        3: _pad(3) + color_text(c1) + _blocks(1) + color_background(c1)
        + _pad(7) + _blocks(1) + reset + _pad(3),
        4: _pad(3) + color_text(c1) + _blocks(1) + color_background(c1)
        + _pad(6) + _blocks(2) + reset + _pad(3),
        5: _pad(2) + color_text(c1) + _blocks(1) + color_background(c1)
        + _pad(2) + _blocks(5) + color_background(skin) + _pad(2) + reset + _pad(3),
        6: _pad(2) + color_text(c1) + _blocks(3) + color_background(skin) + _pad(1)
        + color_text(c2) + _blocks(1) + _pad(2) + _blocks(1) + _pad(2) + reset + _pad(3),
        7: _pad(4) + color_background(skin) + _pad(2) + color_text(c2) + _blocks(1)
        + _pad(2) + _blocks(1) + _pad(1) + color_text(skin) + _blocks(1) + reset + _pad(3),
        8: _pad(2) + color_text(c3) + _blocks(3) + color_background(skin)
        + _pad(5) + _blocks(3) + reset + _pad(2),
        9: _pad(1) + color_text(c3) + _blocks(1) + color_background(c3) + _pad(3)
        + _blocks(5) + _pad(3) + _blocks(1) + reset + _pad(1),
    }
    return rows.get(line, "")


def enemy_sprite_line(line: int, area: int, tint: Tint) -> str:
    """One line (1 to 9) of an enemy sprite; empty for an unknown area."""
    try:
        Area(area)
    except ValueError:
        return ""
    c1, c2, c3 = tint.color1, tint.color2, tint.color3
    outline = color_text(Color.SPRITE_OUTLINE)
    reset = reset_colors()
    rows = {
        1: _pad(5) + outline + _blocks(5) + _pad(5) + reset,
        2: _pad(3) + outline + _blocks(2) + color_background(c2) + _pad(5)
        + outline + _blocks(2) + reset + _pad(3),
        3: _pad(2) + outline + _blocks(1) + color_background(c2) + _pad(9)
        + outline + _blocks(1) + reset + _pad(2),
        4: _pad(2) + outline + _blocks(1) + color_background(c2) + _pad(2)
        + _blocks(5) + _pad(2) + _blocks(1) + reset + _pad(2),
        5: _pad(1) + outline + _blocks(1) + color_background(c2) + _pad(2)
        + _blocks(1) + color_text(c1) + _blocks(5) + outline + _blocks(1)
        + _pad(2) + _blocks(1) + reset + _pad(1),
        6: _pad(2) + outline + _blocks(1) + color_background(c2) + _pad(2)
        + _blocks(1) + color_text(c1) + _blocks(1) + outline + _blocks(1)
        + color_text(c1) + _blocks(1) + outline + _blocks(1) + _pad(2)
        + _blocks(1) + reset + _pad(2),
        7: _pad(2) + outline + _blocks(1) + color_background(c2) + _pad(3)
        + _blocks(1) + _pad(1) + _blocks(1) + _pad(3) + _blocks(1) + reset + _pad(2),
        8: _pad(3) + outline + _blocks(2) + color_background(c2) + _pad(5)
        + _blocks(2) + reset + _pad(3),
        9: _pad(2) + outline + _blocks(1) + color_background(c3) + _pad(2)
        + _blocks(5) + _pad(2) + _blocks(1) + reset + _pad(2),
    }
    return rows.get(line, "")


def sprite_border(line: int) -> str:
    """Top (line 2) or bottom (line 12) frame around a sprite."""
    if line == 2:
        return "│█" + "▀" * SPRITE_WIDTH + "█│ "
    if line == 12:
        return "│█" + "▄" * SPRITE_WIDTH + "█│"
    return ""


def rune_line(line: int) -> str:
    """One line (1 to 7) of the rune sprite."""
    dark = color_text(Color.RUNE_DARK)
    light = color_background(Color.RUNE_LIGHT)
    reset = reset_colors()
    if line in (1, 7):
        return _pad(6) + dark + _blocks(3) + reset + _pad(6)
    if line in (2, 6):
        return _pad(5) + dark + _blocks(1) + light + _pad(3) + _blocks(1) + reset + _pad(5)
    if line in (3, 5):
        return _pad(4) + dark + _blocks(1) + light + _pad(5) + _blocks(1) + reset + _pad(4)
    if line == 4:
        return _pad(3) + dark + _blocks(1) + light + _pad(7) + _blocks(1) + reset + _pad(3)
    return ""


def lose_sprite_line(line: int) -> str:
    """One line (1 to 8) of the skull shown when the player dies."""
    dark = color_text(Color.LOSE_DARK)
    light = color_background(Color.LOSE_LIGHT)
    reset = reset_colors()
    rows = {
        1: _pad(6) + dark + _blocks(3) + reset + _pad(6),
        2: _pad(5) + dark + _blocks(1) + light + _pad(3) + _blocks(1) + reset + _pad(5),
        3: _pad(4) + dark + _blocks(1) + light + _pad(5) + _blocks(1) + reset + _pad(4),
        4: _pad(3) + dark + _blocks(1) + light + _pad(2) + reset + _blocks(1)
        + light + _pad(1) + reset + _blocks(1) + light + _pad(2) + dark
        + _blocks(1) + reset + _pad(3),
        5: _pad(2) + dark + _blocks(1) + light + _pad(4) + reset + _blocks(1)
        + light + _pad(4) + dark + _blocks(1) + reset + _pad(2),
        6: _pad(1) + dark + _blocks(1) + light + _pad(4) + reset + _blocks(1)
        + light + _pad(1) + reset + _blocks(1) + light + _pad(4) + dark
        + _blocks(1) + reset + _pad(1),
        7: _pad(1) + dark + _blocks(1) + light + _pad(11) + _blocks(1) + reset + _pad(1),
        8: _pad(2) + dark + _blocks(11) + reset + _pad(2),
    }
    return rows.get(line, "")