"""Battle screen: the enemy and player panels, health bars and battle results."""

from __future__ import annotations

from .constants import DEFAULT_POTION_COUNT, HEADER_PADDING_LEFT, SCREEN_PADDING_LEFT, SCREEN_WIDTH
from .models import AreaDetails, Enemy, Player
from .printer import Color, color_text, middle_text, reset_colors
from .sprites import (
    SPRITE_HEIGHT,
    SPRITE_WIDTH,
    enemy_sprite_line,
    lose_sprite_line,
    player_sprite_line,
    rune_line,
    sprite_border,
)

HEALTH_WIDTH = 50

_MARGIN = SCREEN_PADDING_LEFT - HEADER_PADDING_LEFT
_PANEL_LINES = SPRITE_HEIGHT + 5


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def _digits(value: int) -> int:
    return len(str(abs(value)))


def _bar_color(current: int, maximum: int) -> int:
    if current >= maximum * 0.66:
        return Color.HEALTH_GREEN
    if maximum * 0.33 <= current <= maximum * 0.66:
        return Color.HEALTH_YELLOW
    return Color.HEALTH_RED


def battle_display(player: Player, enemy: Enemy, area: int, enemy_turn: bool, boss: bool) -> str:
    """Both battle panels; a divider follows on the player's turn while alive."""
    offset = (SCREEN_WIDTH - HEALTH_WIDTH - SPRITE_WIDTH) // 2
    parts = [enemy_panel_line(line, offset + 15, enemy, area, boss) for line in range(_PANEL_LINES)]
    parts += [
        player_panel_line(line, offset - 20, player, enemy.final_attack)
        for line in range(_PANEL_LINES)
    ]
    parts.append("\n")
    if not enemy_turn and player.area_details.current_health != 0:
        parts.append(" " * (_MARGIN + offset) + "─" * (HEALTH_WIDTH + SPRITE_WIDTH) + "\n")
    return "".join(parts)


def enemy_panel_line(line: int, offset: int, enemy: Enemy, area: int, boss: bool) -> str:
    """One line (0 to 13) of the enemy panel, with its line break."""
    if line in (1, 13):
        body = enemy_panel_end(line, offset)
    elif 2 <= line <= 12:
        body = _enemy_panel_body(line, offset, enemy, area, boss)
    else:
        body = ""
    return body + "\n"


def enemy_panel_end(line: int, offset: int) -> str:
    """Top (line 1) or bottom frame of the enemy sprite box."""
    top = line == 1
    return (
        " " * (_MARGIN + offset + HEALTH_WIDTH)
        + ("╔" if top else "╚") + "═" * 17 + ("╗" if top else "╝")
    )


def _enemy_panel_body(line: int, offset: int, enemy: Enemy, area: int, boss: bool) -> str:
    parts = []
    if line == 2:
        parts.append(" " * (_MARGIN + offset + HEALTH_WIDTH) + sprite_border(line))
    if line == 6:
        parts.append(enemy_name(offset, enemy.name))
    if line == 7:
        parts.append(enemy_health_bar(offset, enemy, boss))
    if line == 8:
        parts.append(enemy_health(offset, enemy))
    if line != 2:
        parts.append(_enemy_sprite_cell(line, offset, enemy, area))
    if line == 12:
        parts.append(sprite_border(line))
    return "".join(parts)


def _enemy_sprite_cell(line: int, offset: int, enemy: Enemy, area: int) -> str:
    parts = []
    if line not in (6, 7, 8):
        parts.append(" " * (_MARGIN + offset + HEALTH_WIDTH))
    if line != 12:
        parts.append("│█")
    parts.append(enemy_sprite_line(line - 2, area, enemy.tint))
    if line != 12:
        parts.append("█│")
    return "".join(parts)


def enemy_name(offset: int, name: str) -> str:
    """The enemy's name, right-aligned against the sprite box."""
    return " " * (_MARGIN + offset + HEALTH_WIDTH - len(name) - 1) + name + " "


def enemy_health_bar(offset: int, enemy: Enemy, boss: bool) -> str:
    """The enemy's health bar, or the felled notice once its health is gone."""
    parts = [" " * (_MARGIN + offset - 1)]
    if enemy.current_health != 0:
        if enemy.final_health <= 0:
            raise ValueError(f"enemy final health must be positive, got {enemy.final_health}")
        damaged = enemy.final_health - enemy.current_health
        damaged_bars = max(_trunc_div(damaged * HEALTH_WIDTH, enemy.final_health), 0)
        parts.append((color_text(Color.DAMAGED_BAR) + "░") * damaged_bars)
        healthy = max(HEALTH_WIDTH - damaged_bars, 0)
        color = color_text(_bar_color(enemy.current_health, enemy.final_health))
        parts.append((color + "█") * healthy)
        parts.append(reset_colors())
    else:
        text = "GREAT ENEMY FELLED" if boss else "ENEMY FELLED"
        parts.append(color_text(Color.HEALTH_RED) + text.rjust(50) + reset_colors())
    parts.append(" ")
    return "".join(parts)


def enemy_health(offset: int, enemy: Enemy) -> str:
    """The enemy's current and full health as numbers."""
    width = _digits(enemy.current_health) + _digits(enemy.final_health)
    return (
        " " * (_MARGIN + offset + HEALTH_WIDTH - 7 - width - 1)
        + f"HP: {enemy.current_health} | {enemy.final_health} "
    )


def player_panel_line(line: int, offset: int, player: Player, incoming_damage: int) -> str:
    """One line (0 to 13) of the player panel, with its line break."""
    if line in (1, 13):
        body = player_panel_end(line, offset)
    elif 2 <= line <= 12:
        body = _player_panel_body(line, offset, player, incoming_damage)
    else:
        body = ""
    return body + "\n"


def player_panel_end(line: int, offset: int) -> str:
    """Top (line 1) or bottom frame of the player sprite box."""
    top = line == 1
    return " " * (_MARGIN + offset) + ("╔" if top else "╚") + "═" * 17 + ("╗" if top else "╝")


def _player_panel_body(line: int, offset: int, player: Player, damage: int) -> str:
    parts = [" " * (_MARGIN + offset)]
    if line == 2:
        parts.append(sprite_border(line))
    else:
        if line != 12:
            parts.append("│█")
        parts.append(player_sprite_line(line - 2, player.tint))
        if line != 12:
            parts.append("█│")
    if line == 3:
        parts.append(incoming_damage(damage, player))
    if line == 5:
        parts.append(player_name_job(player))
    if line == 6:
        parts.append(player_health_bar(player.area_details, HEALTH_WIDTH))
    if line == 7:
        parts.append(player_health(player.area_details))
    if line == 9:
        parts.append(" POTIONS")
    if line == 10:
        parts.append(potions(player.equipment.potions))
    if line == 12:
        parts.append(sprite_border(line))
    return "".join(parts)


def player_name_job(player: Player) -> str:
    """The player's name and job class."""
    return f" {player.name} | {player.job_class}"


def incoming_damage(amount: int, player: Player) -> str:
    """The damage the enemy is about to deal; empty once the player is dead."""
    if player.area_details.current_health != 0:
        return f" INCOMING DAMAGE: {amount}"
    return ""


def player_health_bar(details: AreaDetails, bars: int) -> str:
    """The player's health bar of the given width, or the death notice."""
    parts = [" "]
    if details.current_health != 0:
        if details.max_health <= 0:
            raise ValueError(f"max health must be positive, got {details.max_health}")
        healthy = max(_trunc_div(details.current_health * bars, details.max_health), 0)
        color = color_text(_bar_color(details.current_health, details.max_health))
        parts.append((color + "█") * healthy)
        parts.append((color_text(Color.DAMAGED_BAR) + "░") * max(bars - healthy, 0))
        parts.append(reset_colors())
    else:
        parts.append(color_text(Color.HEALTH_RED) + "YOU DIED" + reset_colors())
    parts.append(" ")
    return "".join(parts)


def player_health(details: AreaDetails) -> str:
    """The player's current and maximum health as numbers."""
    return f" HP: {details.current_health} | {details.max_health} "


def potions(count: int) -> str:
    """Remaining potions followed by used ones, out of the default count."""
    filled = max(count, 0)
    used = max(DEFAULT_POTION_COUNT - filled, 0)
    return (
        " "
        + (color_text(Color.POTION) + "█ ") * filled
        + (color_text(Color.DAMAGED_BAR) + "░ ") * used
        + reset_colors()
    )


def battle_runes_gained(runes: int, boss: bool) -> str:
    """The victory screen body: runes, the felled notice and the runes won."""
    sprite_indent = " " * (_MARGIN + (SCREEN_WIDTH - SPRITE_WIDTH) // 2)
    parts = ["\n"]
    parts += [sprite_indent + rune_line(line) + "\n" for line in range(1, SPRITE_HEIGHT - 1)]
    parts.append("\n" + middle_text("GREAT ENEMY FELLED" if boss else "ENEMY FELLED", "»", "«"))
    offset = (SCREEN_WIDTH - len("YOU HAVE GAINED ") - _digits(runes) - len("RUNES!") - 4) // 2
    parts.append("\n" + " " * (_MARGIN + offset) + f"║ YOU HAVE GAINED {runes} RUNES! ║\n\n")
    return "".join(parts)


def runes_lost() -> str:
    """The defeat screen body."""
    sprite_indent = " " * (_MARGIN + (SCREEN_WIDTH - SPRITE_WIDTH) // 2)
    parts = ["\n"]
    parts += [sprite_indent + lose_sprite_line(line) + "\n" for line in range(1, SPRITE_HEIGHT)]
    parts.append("\n" + middle_text("YOU DIED", "»", "«"))
    offset = (SCREEN_WIDTH - len("YOU LOST ALL YOUR RUNES! ") - 4) // 2
    parts.append("\n" + " " * (_MARGIN + offset) + "║ YOU LOST ALL YOUR RUNES! ║\n\n")
    return "".join(parts)