"""Game-wide constants: identifiers, screen layout settings and string limits."""

from enum import IntEnum


class JobClass(IntEnum):
    """Starting classes a player can choose."""

    VAGABOND = 1
    SAMURAI = 2
    WARRIOR = 3
    HERO = 4
    ASTROLOGER = 5
    PROPHET = 6


class MenuOption(IntEnum):
    """Options of the Roundtable Hold menu."""

    QUIT_GAME = 0
    FAST_TRAVEL = 1
    LEVEL_UP = 2
    INVENTORY = 3
    SHOP = 4
    SAVE = 5


class Area(IntEnum):
    """Areas that can be travelled to."""

    STORMVEIL_CASTLE = 1
    RAYA_LUCARIA_ACADEMY = 2
    REDMANE_CASTLE = 3
    VOLCANO_MANOR = 4
    LEYNDELL_ROYAL_CAPITAL = 5
    THE_ELDEN_THRONE = 6


class Tile(IntEnum):
    """Kinds of tile on an area floor."""

    EMPTY = 0
    PLAYER = 1
    DOOR_UP = 2
    DOOR_DOWN = 3
    DOOR_LEFT = 4
    DOOR_RIGHT = 5
    SPAWN = 6
    BOSS = 7
    FAST_TRAVEL = 8
    CREDITS = 9
    INVALID = 10


class WeaponType(IntEnum):
    """Every weapon sold in the shop, grouped in families of four."""

    SHORT_SWORD = 1
    ROGIER_RAPIER = 2
    CODED_SWORD = 3
    SWORD_OF_NIGHT_AND_FIRE = 4

    UCHIGATANA = 5
    MOONVEIL = 6
    RIVERS_OF_BLOOD = 7
    HAND_OF_MALENIA = 8

    BASE_WHIP = 9
    URUMI = 10
    THORNED_WHIP = 11
    HOSLOW_PETAL_WHIP = 12

    CLAYMORE = 13
    STARSCOURGE_GREATSWORD = 14
    INSEPARABLE_SWORD = 15
    MALIKETH_BLACK_BLADE = 16

    ASTROLOGER_STAFF = 17
    ALBINAURIC_STAFF = 18
    STAFF_OF_THE_GUILTY = 19
    CARIAN_REGAL_SCEPTER = 20

    FINGER_SEAL = 21
    GODSLAYER_SEAL = 22
    GOLDEN_ORDEAL_SEAL = 23
    DRAGON_COMMUNION_SEAL = 24


class SpawnKind(IntEnum):
    """What a spawn tile turned out to hold."""

    TREASURE = 1
    ENEMY = 2
    NO_SPAWN_YET = 3


class Direction(IntEnum):
    """Movement directions on a floor."""

    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4


class Prompt(IntEnum):
    """Dialogue prompts shown in the navigation box."""

    NONE = 0
    EMPTY_TILE = 1
    TREASURE_TILE = 2
    ENEMY_TILE = 3
    BOSS_TILE = 4
    LOCKED_TILE = 5
    NEW_UNLOCKED_TILE = 6
    FINISHED_ELDEN_THRONE = 7
    RH_FAST_TRAVEL = 8
    RH_FAST_TRAVEL_LOCKED = 9


NORMAL_BATTLE = 0
BOSS_BATTLE = 1

ENEMY_YIELD = 75
TREASURE_YIELD = 25

LEVEL_MAX = 50
DEFAULT_POTION_COUNT = 8

# Screen layout
SCREEN_WIDTH = 120
HEADER_PADDING_LEFT = 5
INPUT_DESIGN = 10
INPUT_PADDING = 23
SCREEN_PADDING_TOP = 3
SCREEN_PADDING_LEFT = 20
TWO_OPTION_PADDING = 25
TWO_LONG_OPTION_PADDING = 18
CENTER_OPTION_PADDING = 44
ENABLE_COLORS = True

# String limits
OPTIONS_TEXT_LENGTH = 20
OPTIONS_LONG_TEXT_LENGTH = 30
PLAYER_NAME_LENGTH = 25
JOB_CLASS_LENGTH = 10
WEAPON_NAME_LENGTH = 25
DIALOGUE_MAX_LENGTH = 234
DIALOGUE_LINE_MAX_LENGTH = 26