"""Shared identifiers, status flags and directions."""

from enum import IntEnum, IntFlag

WINDOW_WIDTH = 512
WINDOW_HEIGHT = 450
SCALE_FACTOR = 1.0


class EntityId(IntEnum):
    """Identifies the kind of a game entity."""

    UNKNOWN = -1
    PLAYER = 0
    MAIN_MENU = 1
    FONTFULL = 2

    INFO = 4
    HEART_ICON = 5
    HIT_POINT_ICON = 6
    BORDER = 7

    WEAPON = 10
    DAGGER = 11
    AXE = 12
    BOOMERANG = 13

    MAP_STAGE_21 = 21
    MAP_STAGE_22 = 22
    MAP_STAGE_23 = 23

    BOSS = 200
    MEDUSA = 201
    SNAKE = 202


class Status(IntFlag):
    """Combinable state flags of an object."""

    NORMAL = 0
    MOVING_LEFT = 1 << 0
    MOVING_RIGHT = 1 << 1
    JUMPING = 1 << 2
    RUNNING = 1 << 3
    DIE = 1 << 4
    ATTACKING = 1 << 8


class Direction(IntFlag):
    """Sides of a physics body."""

    NONE = 0
    TOP = 1
    BOTTOM = 2
    LEFT = 4
    RIGHT = 8
    ALL = TOP | BOTTOM | LEFT | RIGHT


class SoundId(IntEnum):
    """Sound effect and music identifiers."""

    INTRO_SCENE = 0
    PLAY_SCENE = 1
    OVER_SCENE = 2
    OPEN_DOOR = 3
    WIN_LEVEL = 4
    HIT_SOUND = 5
    DIE_SOUND = 6
    AXE_SOUND = 7
    DAGGER_SOUND = 8
    BOSS_SOUND = 9
    TIME_OUT = 10
    GET_ITEM = 11
    GET_MONEY = 12
    GET_HEART = 13