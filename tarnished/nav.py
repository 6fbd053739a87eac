"""Navigation box shown under the Roundtable Hold and area screens.

The box has the player sprite on the left, a middle panel with stats,
movement keys or companion dialogue, and the player's level, runes,
health and potions on the right.
"""

from __future__ import annotations

from .battle import player_health_bar, potions
from .console import random_between
from .constants import HEADER_PADDING_LEFT, SCREEN_PADDING_LEFT, SCREEN_WIDTH
from .dialogue import dialogue_line, load_dialogue
from .models import Player
from .sprites import SPRITE_WIDTH, player_sprite_line, sprite_border

NAV_HEIGHT = 14
NAV_WIDTH = 70

MIDDLE_WIDTH = 28
STATS_WIDTH = 19
MAX_SHARDS = 6
DIALOGUE_COUNT = 5

_MARGIN = SCREEN_PADDING_LEFT - HEADER_PADDING_LEFT
_OFFSET = (SCREEN_WIDTH - NAV_WIDTH) // 2


def _stat_row(label: str, value: int) -> str:
    return label + f"{value:<2d}" + " " * (MIDDLE_WIDTH - len(label) - 2) + "│"


def nav_end(line: int, offset: int) -> str:
    """Top (line 1) or bottom frame of the navigation box, with its line break."""
    top = line == 1
    return (
        " " * (_MARGIN + offset)
        + " "
        + ("╔" if top else "╚")
        + "═" * (SPRITE_WIDTH + 2)
        + ("╦" if top else "╩")
        + "═" * MIDDLE_WIDTH
        + ("╦" if top else "╩")
        + "═" * STATS_WIDTH
        + ("╗" if top else "╝")
        + "\n"
    )


def _pick_dialogue(dialogue_number: int | None) -> int:
    return random_between(DIALOGUE_COUNT, 1) if dialogue_number is None else dialogue_number


def roundtable_nav(player: Player, prompt: int, dialogue_number: int | None = None) -> str:
    """The whole Roundtable Hold box; a random dialogue is chosen if none is given."""
    number = _pick_dialogue(dialogue_number)
    return "".join(
        roundtable_nav_line(line, _OFFSET, player, prompt, number) for line in range(NAV_HEIGHT)
    )


def roundtable_nav_line(
    line: int, offset: int, player: Player, prompt: int, dialogue_number: int
) -> str:
    """One line (0 to 13) of the Roundtable Hold box."""
    if line == 0:
        return "\n"
    if line == 1:
        return nav_end(line, offset)
    if line == 2:
        return name_and_job_line(line, player, offset)
    if 3 <= line <= 12:
        middle = (
            dialogue_panel_line(line, prompt, dialogue_number)
            if prompt
            else roundtable_stats_line(line, player)
        )
        border = sprite_border(line) if line == 12 else ""
        return (
            player_sprite_nav_line(line, offset, player)
            + border
            + middle
            + player_stats_line(line, player)
        )
    if line == 13:
        return nav_end(line, offset) + "\n"
    return ""


def roundtable_stats_line(line: int, player: Player) -> str:
    """One line (3 to 12) of the middle panel with shards and attribute levels."""
    stats = player.stats
    row = line - 3
    if row == 0:
        return "─" * MIDDLE_WIDTH + "┼"
    if row == 1:
        collected = max(player.shards, 0)
        missing = max(MAX_SHARDS - collected, 0)
        return " SHARDS: " + "█ " * collected + "░ " * missing + " " * 7 + "│"
    if row == 2:
        return " " * MIDDLE_WIDTH + "│"
    if row == 3:
        return " PLAYER STATS:" + " " * 14 + "│"
    rows = {
        4: (" HEALTH LEVEL: ", stats.health),
        5: (" ENDURANCE LEVEL: ", stats.endurance),
        6: (" DEXTERITY LEVEL: ", stats.dexterity),
        7: (" STRENGTH LEVEL: ", stats.strength),
        8: (" INTELLIGENCE LEVEL: ", stats.intelligence),
        9: (" FAITH LEVEL: ", stats.faith),
    }
    if row in rows:
        return _stat_row(*rows[row])
    return ""


def area_nav(player: Player, prompt: int, dialogue_number: int | None = None) -> str:
    """The whole area box; a random dialogue is chosen if none is given."""
    number = _pick_dialogue(dialogue_number)
    return "".join(
        area_nav_line(line, _OFFSET, player, prompt, number) for line in range(NAV_HEIGHT)
    )


def area_nav_line(
    line: int, offset: int, player: Player, prompt: int, dialogue_number: int
) -> str:
    """One line (0 to 13) of the area box."""
    if line == 0:
        return "\n"
    if line == 1:
        return nav_end(line, offset)
    if line == 2:
        return name_and_job_line(line, player, offset)
    if 3 <= line <= 12:
        middle = (
            dialogue_panel_line(line, prompt, dialogue_number)
            if prompt
            else nav_options_line(line)
        )
        border = sprite_border(line) if line == 12 else ""
        return (
            player_sprite_nav_line(line, offset, player)
            + border
            + middle
            + player_stats_line(line, player)
        )
    if line == 13:
        return nav_end(line, offset) + "\n"
    return ""


def name_and_job_line(line: int, player: Player, offset: int) -> str:
    """The sprite's top frame followed by the player's name and job class."""
    return (
        " " * (_MARGIN + offset)
        + " "
        + sprite_border(line)
        + player.name
        + " " * (27 - len(player.name))
        + "│ "
        + player.job_class
        + " " * (18 - len(player.job_class))
        + "│\n"
    )


def player_sprite_nav_line(line: int, offset: int, player: Player) -> str:
    """One framed line of the player sprite on the left of the box."""
    parts = [" " * (_MARGIN + offset), " "]
    if line != 12:
        parts.append("│█")
    parts.append(player_sprite_line(line - 2, player.tint))
    if line == 3:
        parts.append("█├")
    elif line != 12:
        parts.append("█│")
    return "".join(parts)


_NAV_OPTIONS = {
    0: "─" * MIDDLE_WIDTH + "┼",
    1: " " * MIDDLE_WIDTH + "│",
    2: " " * 8 + "╔─W─╗" + " " * 7 + "╔─E─╗" + " " * 3 + "│",
    3: " " * 8 + "│ ▲ │" + " " * 7 + "│ ¤ │" + " " * 3 + "│",
    4: " " * 2 + "╔─A─╗" + " " + "╚───╝" + " " + "╔─D─╗" + " " + "╚───╝" + " " * 3 + "│",
    5: " " * 2 + "│ ◄ │" + " " * 7 + "│ ► │" + " " * 9 + "│",
    6: " " * 2 + "╚───╝" + " " + "╔─S─╗" + " " + "╚───╝" + " " * 9 + "│",
    7: " " * 8 + "│ ▼ │" + " " * 15 + "│",
    8: " " * 8 + "╚───╝" + " " * 15 + "│",
    9: " " * MIDDLE_WIDTH + "│",
}


def nav_options_line(line: int) -> str:
    """One line (3 to 12) of the movement key panel."""
    return _NAV_OPTIONS.get(line - 3, "")


def player_stats_line(line: int, player: Player) -> str:
    """One line (3 to 12) of the right-hand stats panel, always ending in a line break."""
    details = player.area_details
    row = line - 3
    if row == 0:
        body = "─" * STATS_WIDTH + "┤"
    elif row == 1:
        body = " LEVEL: " + f"{player.level:<10d}" + " │"
    elif row in (2, 4, 7):
        body = " " * STATS_WIDTH + "│"
    elif row == 3:
        runes = f"{player.runes:<9d} " if player.runes < 999999999 else "999999999+"
        body = " RUNES: " + runes + " │"
    elif row == 5:
        health = (
            f"{details.current_health:<8d} "
            if details.current_health < 99999999
            else "99999999+"
        )
        body = " HEALTH: " + health + " │"
    elif row == 6:
        body = player_health_bar(details, 15) + "  │"
    elif row == 8:
        body = " POTIONS" + " " * 11 + "│"
    elif row == 9:
        body = potions(player.equipment.potions) + "  │"
    else:
        body = ""
    return body + "\n"


def dialogue_panel_line(line: int, prompt: int, dialogue_number: int) -> str:
    """One line (3 to 12) of the companion dialogue panel."""
    if line - 3 == 0:
        return "─" * MIDDLE_WIDTH + "┼"
    text = load_dialogue(prompt, dialogue_number)
    return dialogue_line(line - 4, text) + "│"