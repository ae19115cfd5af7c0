"""Weapons the player can wield: the whip and the thrown axe."""

from __future__ import annotations

from abc import abstractmethod
from enum import Enum, auto
from typing import Any, Dict, List, Tuple

from nightcrawl.animation import Animation, Frame
from nightcrawl.game_object import GameObject

WHIP_FRAME_TIME = 0.3
WHIP_DURATION = 0.9
WHIP_MAX_LEVEL_EXTRA_REACH = -25.0

AXE_FRAME_TIME = 0.2
AXE_DURATION = 0.6
AXE_SPEED_X = 100.0
AXE_SPEED_Y = -200.0
AXE_GRAVITY = 400.0
AXE_GROUND_Y = 360.0

Offset = Tuple[float, float]

# Frames used when a whip is first created, keyed by level.
_INITIAL_WHIP_FRAMES: Dict[int, List[Frame]] = {
    1: [Frame(0, 0, 16, 48), Frame(16, 5, 48, 43), Frame(48, 15, 104, 33)],
    5: [Frame(104, 0, 120, 48), Frame(120, 0, 152, 48), Frame(208, 15, 296, 33)],
    2: [Frame(0, 48, 16, 96), Frame(16, 48, 48, 96), Frame(48, 57, 124, 70)],
    3: [Frame(0, 96, 16, 144), Frame(16, 96, 48, 144), Frame(48, 108, 133, 120)],
    4: [Frame(0, 144, 16, 192), Frame(16, 144, 48, 192), Frame(48, 160, 133, 172)],
}

# Frames used once the whip's level is changed, keyed by level.
_UPGRADED_WHIP_FRAMES: Dict[int, List[Frame]] = {
    1: [Frame(0, 0, 16, 48), Frame(16, 0, 48, 48), Frame(48, 15, 104, 33)],
    2: [Frame(104, 0, 120, 48), Frame(120, 0, 152, 48), Frame(208, 15, 296, 33)],
    3: [Frame(0, 48, 16, 96), Frame(16, 48, 48, 96), Frame(48, 57, 124, 70)],
    4: [Frame(0, 96, 16, 144), Frame(16, 96, 48, 144), Frame(48, 108, 133, 120)],
    5: [Frame(0, 144, 16, 192), Frame(16, 144, 48, 192), Frame(48, 160, 133, 172)],
}

# Per frame: (offset when facing right, offset when facing left).
_WHIP_FRAME_OFFSETS: List[Tuple[Offset, Offset]] = [
    ((-23.0, 15.0), (60.0, 15.0)),
    ((-45.0, 0.0), (55.0, 0.0)),
    ((19.0, 15.0), (-30.0, 16.0)),
]

_AXE_FRAMES: List[Frame] = [
    Frame(84, 0, 114, 28),
    Frame(114, 0, 144, 28),
    Frame(144, 0, 174, 28),
    Frame(174, 0, 204, 28),
]


class WeaponType(Enum):
    WHIP = auto()
    DAGGER = auto()
    AXE = auto()
    HOLYWATER = auto()
    CROSS = auto()
    STOPWATCH = auto()


class Weapon(GameObject):
    """A weapon that is inactive until it attacks."""

    def __init__(self, x: float, y: float, weapon_type: WeaponType, texture: Any = None) -> None:
        super().__init__(x, y, texture)
        self.type = weapon_type
        self.is_active = False
        self.facing_left = False

    def set_pos(self, x: float, y: float, facing_left: bool) -> None:
        """Move the weapon; the facing is left to the attack that follows."""
        self.x = x
        self.y = y

    @abstractmethod
    def attack(self) -> None:
        """Start an attack."""


class Whip(Weapon):
    """A whip swung for a fixed duration; its reach depends on its level."""

    def __init__(self, x: float, y: float, level: int, texture: Any = None) -> None:
        super().__init__(x, y, WeaponType.WHIP, texture)
        self.level = level
        self.timer = 0.0
        self.animation = Animation(
            texture, list(_INITIAL_WHIP_FRAMES.get(level, [])), WHIP_FRAME_TIME
        )
        self.frame_offsets = list(_WHIP_FRAME_OFFSETS)

    def set_level(self, level: int) -> None:
        self.level = level
        self.animation = Animation(
            self.texture, list(_UPGRADED_WHIP_FRAMES.get(level, [])), WHIP_FRAME_TIME
        )

    def update(self, elapsed_time: float) -> None:
        if not self.is_active:
            return
        self.timer += elapsed_time
        self.animation.update(elapsed_time)
        if self.timer >= WHIP_DURATION:
            self.is_active = False
            self.timer = 0.0

    def attack(self) -> None:
        self.is_active = True
        self.timer = 0.0
        self.animation.reset()

    def draw_offset(self) -> Offset:
        """Offset from the whip's position at which the current frame is drawn."""
        frame_index = self.animation.current_frame()
        right, left = self.frame_offsets[frame_index]
        if not self.facing_left:
            return right
        offset_x, offset_y = left
        if self.level > 1 and frame_index == 2:
            offset_x += WHIP_MAX_LEVEL_EXTRA_REACH
        return offset_x, offset_y


class Axe(Weapon):
    """An axe thrown in an arc that disappears when it falls below the ground line."""

    def __init__(self, x: float, y: float, facing_left: bool, texture: Any = None) -> None:
        super().__init__(x, y, WeaponType.AXE, texture)
        self.throw_left = facing_left
        self.facing_left = facing_left
        self.timer = 0.0
        self.is_thrown = False
        self.gravity = AXE_GRAVITY
        self.animation = Animation(texture, list(_AXE_FRAMES), AXE_FRAME_TIME)
        self.velocity_x = 0.0
        self.velocity_y = 0.0
        self.reset_velocity()

    def update(self, elapsed_time: float) -> None:
        if not self.is_active:
            return
        self.animation.update(elapsed_time)
        if not self.is_thrown:
            return
        self.x += self.velocity_x * elapsed_time
        self.y += self.velocity_y * elapsed_time
        self.velocity_y += self.gravity * elapsed_time
        if self.y > AXE_GROUND_Y:
            self.is_active = False
            self.is_thrown = False

    def attack(self) -> None:
        self.is_active = True
        self.timer = 0.0
        self.animation.reset()

    def reset_velocity(self) -> None:
        """Restore the launch velocity, sideways in the throwing direction and upwards."""
        self.velocity_x = -AXE_SPEED_X if self.throw_left else AXE_SPEED_X
        self.velocity_y = AXE_SPEED_Y