"""Shared text builders for screens: colours, centred text, options and messages."""

from __future__ import annotations

from enum import IntEnum

from .constants import (
    CENTER_OPTION_PADDING,
    ENABLE_COLORS,
    HEADER_PADDING_LEFT,
    INPUT_DESIGN,
    INPUT_PADDING,
    OPTIONS_LONG_TEXT_LENGTH,
    OPTIONS_TEXT_LENGTH,
    SCREEN_PADDING_LEFT,
    SCREEN_WIDTH,
    TWO_LONG_OPTION_PADDING,
    TWO_OPTION_PADDING,
)

SYSTEM_MESSAGE = "SYSTEM MESSAGE"

OPTION_START = "START"
OPTION_CONTINUE = "CONTINUE"
OPTION_EXIT = "EXIT"
OPTION_BACK = "BACK"
OPTION_CONFIRM = "CONFIRM"

_MARGIN = SCREEN_PADDING_LEFT - HEADER_PADDING_LEFT


class Color(IntEnum):
    """256-colour terminal codes for each screen element."""

    TILE_EMPTY = 250
    TILE_PLAYER = 226
    TILE_DOOR_UP = 39
    TILE_DOOR_DOWN = 38
    TILE_DOOR_LEFT = 37
    TILE_DOOR_RIGHT = 36
    TILE_SPAWN = 214
    TILE_BOSS = 160
    TILE_FAST_TRAVEL = 129
    TILE_CREDITS = 220
    TILE_INVALID = 240
    DAMAGED_BAR = 238
    HEALTH_GREEN = 46
    HEALTH_YELLOW = 227
    HEALTH_RED = 196
    POTION = 202
    SHARD = 51
    PLAYER_SKIN = 223
    SPRITE_OUTLINE = 232
    RUNE_DARK = 178
    RUNE_LIGHT = 221
    LOSE_DARK = 88
    LOSE_LIGHT = 124


def _half(value: int) -> int:
    """Halve, truncating toward zero."""
    return value // 2 if value >= 0 else -((-value) // 2)


def color_text(color: int) -> str:
    """Escape sequence selecting a foreground colour."""
    return f"\033[38;5;{int(color)}m" if ENABLE_COLORS else ""


def color_background(color: int) -> str:
    """Escape sequence selecting a background colour."""
    return f"\033[48;5;{int(color)}m" if ENABLE_COLORS else ""


def reset_colors() -> str:
    """Escape sequence restoring default colours."""
    return "\033[0m" if ENABLE_COLORS else ""


def middle_sub_header(text: str) -> str:
    """Centred text with an underline five characters wider on each side."""
    offset = _half(SCREEN_WIDTH - len(text))
    return (
        " " * (_MARGIN + offset) + text + "\n"
        + " " * (_MARGIN + offset - 5) + "─" * (len(text) + 10) + "\n\n"
    )


def middle_text(text: str, left: str, right: str) -> str:
    """Centred text framed by two decorations."""
    offset = _half(SCREEN_WIDTH - len(text) - 4)
    return " " * (_MARGIN + offset) + f"{left} {text} {right}\n"


def input_divider() -> str:
    """The divider shown above the input prompt."""
    design = "─" * INPUT_DESIGN + "═" * INPUT_DESIGN
    closing = "═" * INPUT_DESIGN + "─" * INPUT_DESIGN
    return (
        " " * (SCREEN_PADDING_LEFT + INPUT_PADDING + 3)
        + design + "╣   USER INPUT   ╠" + closing + "\n"
    )


def input_tag(tag: str) -> str:
    """An input prompt such as ``[INPUT]: ``."""
    return " " * SCREEN_PADDING_LEFT + f"[{tag}]: "


def footer() -> str:
    """A full-width rule closing a screen."""
    return " " * _MARGIN + "─" * SCREEN_WIDTH + "\n\n"


def message(kind: str, text: str) -> str:
    """A tagged message line."""
    return "\n" + " " * SCREEN_PADDING_LEFT + f"[{kind}]: {text}\n"


def invalid_input_message(error: str) -> str:
    """The invalid input notice followed by a hint."""
    return (
        message(SYSTEM_MESSAGE, "INVALID INPUT")
        + " " * (SCREEN_PADDING_LEFT + HEADER_PADDING_LEFT) + error + "\n\n"
    )


def battle_damage_prompt(who: str, damage: int) -> str:
    """Line announcing damage dealt."""
    return "\n" + " " * SCREEN_PADDING_LEFT + f"[PROMPT]: {who} DEALT {damage} DAMAGE\n"


def battle_heal_prompt(healed: int) -> str:
    """Line announcing health gained."""
    return "\n" + " " * SCREEN_PADDING_LEFT + f"[PROMPT]: YOU GAINED {healed} HEALTH\n"


def _option_row(number: int, text: str, width: int) -> str:
    return f"│ [{number}] {text}" + " " * (width - (len(text) + 5)) + "│"


def _option_pair(
    indent: int, gap: int, width: int,
    number1: int, text1: str, number2: int, text2: str,
) -> str:
    lead = " " * indent
    space = " " * gap
    bar = "─" * width
    return (
        f"{lead}┌{bar}┐{space}┌{bar}┐\n"
        f"{lead}{_option_row(number1, text1, width)}{space}{_option_row(number2, text2, width)}\n"
        f"{lead}└{bar}┘{space}└{bar}┘\n\n"
    )


def two_options(number1: int, text1: str, number2: int, text2: str) -> str:
    """Two boxed options side by side."""
    return _option_pair(
        SCREEN_PADDING_LEFT + TWO_OPTION_PADDING, TWO_OPTION_PADDING - 9,
        OPTIONS_TEXT_LENGTH, number1, text1, number2, text2,
    )


def two_long_options(number1: int, text1: str, number2: int, text2: str) -> str:
    """Two wide boxed options side by side."""
    return _option_pair(
        SCREEN_PADDING_LEFT + TWO_LONG_OPTION_PADDING, TWO_LONG_OPTION_PADDING - 6,
        OPTIONS_LONG_TEXT_LENGTH, number1, text1, number2, text2,
    )


def center_option(number: int, text: str) -> str:
    """One boxed option in the middle of the screen."""
    lead = " " * (SCREEN_PADDING_LEFT + CENTER_OPTION_PADDING)
    bar = "─" * OPTIONS_TEXT_LENGTH
    return (
        f"{lead}┌{bar}┐\n"
        f"{lead}{_option_row(number, text, OPTIONS_TEXT_LENGTH)}\n"
        f"{lead}└{bar}┘\n\n"
    )


def fielded_option(number: int, text: str) -> str:
    """The middle row of an option box, without a line break."""
    return (
        " " * (SCREEN_PADDING_LEFT + TWO_OPTION_PADDING)
        + _option_row(number, text, OPTIONS_TEXT_LENGTH) + " "
    )


def middle_stats(label: str, value: int) -> str:
    """A centred ``label: value`` line followed by a blank line."""
    offset = _half(SCREEN_WIDTH - (len(label) + 4))
    return " " * (_MARGIN + offset) + f"{label}: {value}\n\n"


def _stat_cell(label: str, value: int) -> str:
    return f"{label}: " + " " * (OPTIONS_TEXT_LENGTH - (len(label) + 1) - 3) + f"{value:3d}"


def two_stats(label1: str, value1: int, label2: str, value2: int) -> str:
    """Two aligned stat columns on one line."""
    return (
        " " * (SCREEN_PADDING_LEFT + CENTER_OPTION_PADDING - 10)
        + _stat_cell(label1, value1) + " │ "
        + _stat_cell(label2, value2) + " │\n"
    )