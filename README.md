# tarnished

Building blocks for a terminal role-playing game: the game state, console
input helpers, and text rendering for the battle screen, the navigation
box with the player's stats, character and enemy sprites, and companion
dialogue.

Every drawing function returns a string and prints nothing. You can
assemble screens from these strings, test them, and write them to any
stream.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `tarnished.constants`: the enumerations `JobClass`, `MenuOption`,
  `Area`, `Tile`, `WeaponType`, `SpawnKind`, `Direction` and `Prompt`,
  plus the screen layout settings and the string length limits.
- `tarnished.models`: dataclasses for the game state. These are
  `Player`, `Enemy`, `Statistics`, `Equipment`, `WeaponStats`, `Tint`,
  `AreaDetails`, `UnlockedAreas`, `Door` and `AreaFloor`.
  - `Player` and `WeaponStats` raise `ValueError` for names over the limit.
  - `AreaFloor.tile(row, column)` reads one tile and raises `IndexError`
    outside the floor.
  - `AreaFloor.board()` returns a copy of the current floor.
- `tarnished.console`: `Console` wraps an input stream and an output
  stream.
  - `read_int(current, minimum, maximum)` shows an invalid-input notice
    when `current` is out of range. It then reads a number and keeps
    `current` if the line holds no number.
  - `read_string`, `read_name` and `read_char` read a line, a name and a
    single character.
  - `press_enter` waits for a line.
  - `write` sends text to the output stream.
  - A closed input raises `EOFError`.
  - The module also provides `random_between(upper, lower)`,
    `has_char_match(key, valid)` and `normalize_name(raw)`.
    `normalize_name` strips leading spaces, cuts the name to 25
    characters and reports whether it was too long.
- `tarnished.printer`: shared layout pieces.
  - Option boxes: `two_options`, `two_long_options`, `center_option`,
    `fielded_option`.
  - Centred text: `middle_text`, `middle_sub_header`.
  - Messages and prompts: `message`, `invalid_input_message`,
    `battle_damage_prompt`, `battle_heal_prompt`.
  - Stat lines: `middle_stats`, `two_stats`.
  - Frame and input lines: `input_divider`, `input_tag`, `footer`.
  - ANSI 256-colour escapes: `color_text`, `color_background`,
    `reset_colors`, with the colour codes in `Color`.
- `tarnished.sprites`: one line at a time of the player sprite, the enemy
  sprite, the rune sprite and the death skull, plus the sprite frame
  borders.
- `tarnished.dialogue`:
  - `load_dialogue(prompt, number)` returns one of five companion lines
    for a prompt, padded to 234 characters.
  - `dialogue_line(line, dialogue)` returns one 26-character row of it.
- `tarnished.battle`: the full battle panels via `battle_display`, their
  individual lines, the health bars, the potion row, and the victory and
  defeat bodies (`battle_runes_gained`, `runes_lost`).
- `tarnished.nav`: the navigation box.
  - `roundtable_nav` has shards and attribute levels in the middle panel.
  - `area_nav` has the movement keys in the middle panel.
  - When a non-zero prompt is given, either box shows companion dialogue
    in the middle instead. Pass `dialogue_number` to pick the line, or
    leave it out to get a random one.

## Example

```python
import sys

from tarnished.battle import battle_display
from tarnished.console import Console
from tarnished.constants import Area, Prompt
from tarnished.models import AreaDetails, Enemy, Player
from tarnished.nav import area_nav

console = Console(sys.stdin, sys.stdout)

player = Player(
    name="Tarnished",
    job_class="SAMURAI",
    area_details=AreaDetails(current_health=90, max_health=120),
)
enemy = Enemy(name="Godrick Soldier", final_health=100, current_health=80, final_attack=25)

console.write(area_nav(player, Prompt.ENEMY_TILE, dialogue_number=2))
console.press_enter()
console.write(battle_display(player, enemy, Area.STORMVEIL_CASTLE, enemy_turn=False, boss=False))
choice = console.read_int(1, 1, 3)
```

## What this package does not do

- It has no command and no game loop. Moving between screens, fighting
  turns, levelling, saving and loading are left to the program that uses
  it.
- It draws no area map and no title or area banners.
- It draws no inventory grid, shop screen, or weapon sprites. `WeaponStats`
  and `WeaponType` describe weapons, but nothing here renders them.