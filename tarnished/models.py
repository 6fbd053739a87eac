"""Data records for the player, enemies, weapons and area floors."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

from .constants import (
    DEFAULT_POTION_COUNT,
    JOB_CLASS_LENGTH,
    PLAYER_NAME_LENGTH,
    WEAPON_NAME_LENGTH,
)


@dataclass
class AreaDetails:
    """Where the player stands and how healthy they are inside an area."""

    row: int = 0
    column: int = 0
    current_health: int = 0
    max_health: int = 0


@dataclass
class Statistics:
    """Player attribute levels."""

    health: int = 0
    endurance: int = 0
    dexterity: int = 0
    strength: int = 0
    intelligence: int = 0
    faith: int = 0


@dataclass
class UnlockedAreas:
    """Which second fast-travel tiles (and the credits) have been unlocked."""

    stormveil: bool = False
    raya_lucaria: bool = False
    redmane: bool = False
    volcano: bool = False
    leyndell: bool = False
    elden_throne_credits: bool = False


@dataclass
class Tint:
    """Three sprite colours."""

    color1: int = 0
    color2: int = 0
    color3: int = 0


@dataclass
class WeaponStats:
    """A weapon with its stat bonuses, cost and inventory slot."""

    name: str
    health: int = 0
    endurance: int = 0
    dexterity: int = 0
    strength: int = 0
    intelligence: int = 0
    faith: int = 0
    cost: int = 0
    weapon_type: int = 0
    inventory_index: int = 0

    def __post_init__(self) -> None:
        if len(self.name) > WEAPON_NAME_LENGTH:
            raise ValueError(
                f"weapon name longer than {WEAPON_NAME_LENGTH} characters: {self.name!r}"
            )


@dataclass
class Equipment:
    """Equipped weapon and remaining potions."""

    current_weapon: WeaponStats | None = None
    potions: int = DEFAULT_POTION_COUNT


@dataclass
class Player:
    """The player character."""

    name: str
    job_class: str
    level: int = 1
    runes: int = 0
    shards: int = 0
    inventory: list[WeaponStats] = field(default_factory=list)
    equipment: Equipment = field(default_factory=Equipment)
    stats: Statistics = field(default_factory=Statistics)
    area_details: AreaDetails = field(default_factory=AreaDetails)
    unlocked: UnlockedAreas = field(default_factory=UnlockedAreas)
    tint: Tint = field(default_factory=Tint)

    def __post_init__(self) -> None:
        if len(self.name) > PLAYER_NAME_LENGTH:
            raise ValueError(
                f"player name longer than {PLAYER_NAME_LENGTH} characters: {self.name!r}"
            )
        if len(self.job_class) > JOB_CLASS_LENGTH:
            raise ValueError(
                f"job class longer than {JOB_CLASS_LENGTH} characters: {self.job_class!r}"
            )


@dataclass
class Enemy:
    """An enemy or boss with its rolled stats."""

    name: str = ""
    enemy_type: int = 0
    health_upper: int = 0
    health_lower: int = 0
    base_health: int = 0
    final_health: int = 0
    current_health: int = 0
    attack_upper: int = 0
    attack_lower: int = 0
    base_attack: int = 0
    final_attack: int = 0
    physical_def: float = 0.0
    sorcery_def: float = 0.0
    incantation_def: float = 0.0
    tint: Tint = field(default_factory=Tint)


@dataclass
class Door:
    """A door location on a floor."""

    floor_number: int
    row: int
    column: int


@dataclass
class AreaFloor:
    """One floor of an area, with the boards of every floor of that area."""

    area: int
    floor_number: int
    rows: int
    columns: int
    boards: list[list[list[int]]]
    doors: list[list[Door]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not 1 <= self.floor_number <= len(self.boards):
            raise ValueError(
                f"floor {self.floor_number} is outside the {len(self.boards)} boards given"
            )
        grid = self.boards[self.floor_number - 1]
        if len(grid) != self.rows or any(len(row) != self.columns for row in grid):
            raise ValueError(
                f"board of floor {self.floor_number} is not {self.rows}x{self.columns}"
            )

    def tile(self, row: int, column: int) -> int:
        """Return the tile at a position of the current floor."""
        if not (0 <= row < self.rows and 0 <= column < self.columns):
            raise IndexError(f"position ({row}, {column}) is outside the floor")
        return self.boards[self.floor_number - 1][row][column]

    def board(self) -> list[list[int]]:
        """Return an independent copy of the current floor's tiles."""
        return copy.deepcopy(self.boards[self.floor_number - 1])