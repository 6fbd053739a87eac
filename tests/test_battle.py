import re

import pytest

from tarnished.battle import (
    HEALTH_WIDTH,
    battle_display,
    battle_runes_gained,
    enemy_health,
    enemy_health_bar,
    enemy_name,
    enemy_panel_end,
    enemy_panel_line,
    incoming_damage,
    player_health,
    player_health_bar,
    player_name_job,
    player_panel_end,
    player_panel_line,
    potions,
    runes_lost,
)
from tarnished.constants import DEFAULT_POTION_COUNT, Area
from tarnished.models import AreaDetails, Enemy, Player, Tint
from tarnished.printer import Color, color_text
from tarnished.sprites import SPRITE_WIDTH, sprite_border

ANSI = re.compile(r"\033\[[0-9;]*m")


def plain(text):
    return ANSI.sub("", text)


def make_enemy(current=100, final=100):
    return Enemy(
        name="Godrick",
        final_health=final,
        current_health=current,
        final_attack=42,
        tint=Tint(1, 2, 3),
    )


def make_player(current=100, maximum=100, potion_count=DEFAULT_POTION_COUNT):
    player = Player(
        name="Ash",
        job_class="VAGABOND",
        area_details=AreaDetails(current_health=current, max_health=maximum),
    )
    player.equipment.potions = potion_count
    return player


def test_enemy_panel_end_corners():
    assert plain(enemy_panel_end(1, 0)).strip() == "╔" + "═" * 17 + "╗"
    assert plain(enemy_panel_end(13, 0)).strip() == "╚" + "═" * 17 + "╝"


def test_enemy_panel_end_offset_shifts_indent():
    assert len(enemy_panel_end(1, 5)) - len(enemy_panel_end(1, 0)) == 5


def test_player_panel_end_corners():
    assert plain(player_panel_end(1, 0)).strip() == "╔" + "═" * 17 + "╗"
    assert plain(player_panel_end(13, 0)).strip() == "╚" + "═" * 17 + "╝"


def test_enemy_health_bar_full_is_green():
    raw = enemy_health_bar(0, make_enemy(), False)
    assert plain(raw).strip() == "█" * HEALTH_WIDTH
    assert color_text(Color.HEALTH_GREEN) in raw


def test_enemy_health_bar_partial():
    raw = enemy_health_bar(0, make_enemy(current=50), False)
    text = plain(raw)
    assert text.count("░") + text.count("█") == HEALTH_WIDTH
    assert text.count("░") > 0
    assert color_text(Color.HEALTH_YELLOW) in raw


def test_enemy_health_bar_low_is_red():
    raw = enemy_health_bar(0, make_enemy(current=10), False)
    assert color_text(Color.HEALTH_RED) in raw
    assert color_text(Color.HEALTH_GREEN) not in raw


@pytest.mark.parametrize("boss, text", [(False, "ENEMY FELLED"), (True, "GREAT ENEMY FELLED")])
def test_enemy_health_bar_felled(boss, text):
    result = plain(enemy_health_bar(0, make_enemy(current=0), boss))
    assert result.endswith(text.rjust(50) + " ")
    assert result.strip() == text


def test_enemy_health_bar_rejects_zero_final_health():
    with pytest.raises(ValueError):
        enemy_health_bar(0, make_enemy(current=5, final=0), False)


def test_enemy_health_text():
    assert enemy_health(0, make_enemy(current=30, final=100)).endswith("HP: 30 | 100 ")


def test_enemy_health_keeps_width():
    short = enemy_health(0, make_enemy(current=5, final=100))
    long = enemy_health(0, make_enemy(current=12345, final=100000))
    assert len(short) == len(long)


def test_enemy_name_is_right_aligned():
    short = enemy_name(0, "A")
    long = enemy_name(0, "Godrick the Grafted")
    assert len(short) == len(long)
    assert long.endswith("Godrick the Grafted ")


def test_player_health_bar_full():
    details = AreaDetails(current_health=100, max_health=100)
    assert plain(player_health_bar(details, 15)) == " " + "█" * 15 + " "


def test_player_health_bar_dead():
    details = AreaDetails(current_health=0, max_health=100)
    assert plain(player_health_bar(details, 15)) == " YOU DIED "


def test_player_health_bar_partial_counts():
    details = AreaDetails(current_health=45, max_health=100)
    text = plain(player_health_bar(details, 20))
    assert text.count("█") + text.count("░") == 20
    assert text.count("░") > 0


def test_player_health_bar_rejects_zero_max():
    with pytest.raises(ValueError):
        player_health_bar(AreaDetails(current_health=10, max_health=0), 15)


def test_player_health_text():
    assert player_health(AreaDetails(current_health=40, max_health=100)) == " HP: 40 | 100 "


def test_player_name_job():
    assert player_name_job(make_player()) == " Ash | VAGABOND"


def test_incoming_damage_alive_and_dead():
    assert incoming_damage(42, make_player()) == " INCOMING DAMAGE: 42"
    assert incoming_damage(42, make_player(current=0)) == ""


@pytest.mark.parametrize("count", [0, 3, DEFAULT_POTION_COUNT])
def test_potions(count):
    text = plain(potions(count))
    assert text.startswith(" ")
    assert text.count("█") == count
    assert text.count("░") == DEFAULT_POTION_COUNT - count


def test_battle_runes_gained():
    normal = battle_runes_gained(500, False)
    boss = battle_runes_gained(500, True)
    assert "║ YOU HAVE GAINED 500 RUNES! ║" in normal
    assert "» ENEMY FELLED «" in normal
    assert "» GREAT ENEMY FELLED «" in boss


def test_runes_lost():
    text = runes_lost()
    assert "║ YOU LOST ALL YOUR RUNES! ║" in text
    assert "» YOU DIED «" in text


def test_panel_line_zero_is_blank():
    assert enemy_panel_line(0, 0, make_enemy(), Area.STORMVEIL_CASTLE, False) == "\n"
    assert player_panel_line(0, 0, make_player(), 42) == "\n"


def test_player_panel_lines():
    assert "POTIONS" in player_panel_line(9, 0, make_player(), 42)
    assert sprite_border(2) in player_panel_line(2, 0, make_player(), 42)


def test_enemy_panel_line_felled():
    line = enemy_panel_line(7, 0, make_enemy(current=0), Area.STORMVEIL_CASTLE, False)
    assert "ENEMY FELLED" in plain(line)


def test_battle_display_divider():
    divider = "─" * (HEALTH_WIDTH + SPRITE_WIDTH)
    area = Area.STORMVEIL_CASTLE
    assert divider in battle_display(make_player(), make_enemy(), area, False, False)
    assert divider not in battle_display(make_player(), make_enemy(), area, True, False)
    assert divider not in battle_display(make_player(current=0), make_enemy(), area, False, False)


def test_battle_display_content():
    text = plain(battle_display(make_player(), make_enemy(), Area.REDMANE_CASTLE, False, False))
    assert "INCOMING DAMAGE: 42" in text
    assert "Godrick" in text
    assert "Ash | VAGABOND" in text
    assert "HP: 100 | 100" in text