"""Pickups and the breakable objects that hide them."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, Dict

from nightcrawl.animation import Animation, Frame
from nightcrawl.collision import Collider
from nightcrawl.game_object import GameObject

ITEM_LIFETIME = 5.0
ITEM_FALL_SPEED = 40.0
_DEFAULT_RECT = Frame(0, 0, 16, 16)


class ItemType(Enum):
    SMALL_HEART = auto()
    BIG_HEART = auto()
    RED_MONEY = auto()
    YELLOW_MONEY = auto()
    BLUE_MONEY = auto()
    WHIP_UPGRADE = auto()
    DAGGER = auto()
    STOPWATCH = auto()
    CROSS = auto()
    AXE = auto()
    BOOMERANG = auto()
    HOLY_WATER = auto()
    POT_ROAST = auto()
    SMALL_BLUE = auto()
    BIG_BLUE = auto()
    SMALL_RED = auto()
    BIG_RED = auto()
    BALL_1 = auto()
    BALL_2 = auto()
    POTION = auto()
    BOX_YELLOW = auto()
    BOX_RED = auto()
    CROWN_YELLOW = auto()
    CROWN_RED = auto()


def item_sprite_rects() -> Dict[ItemType, Frame]:
    """Source rectangles on the item sheet for the item types that have one."""
    return {
        ItemType.SMALL_HEART: Frame(0, 0, 16, 16),
        ItemType.BIG_HEART: Frame(16, 0, 40, 20),
        ItemType.AXE: Frame(256, 0, 286, 28),
        ItemType.POT_ROAST: Frame(62, 32, 94, 58),
    }


class Item(GameObject):
    """A pickup that drifts downwards and expires after a few seconds."""

    def __init__(self, x: float, y: float, item_type: ItemType, texture: Any = None) -> None:
        super().__init__(x, y, texture)
        self.type = item_type
        self.collider = Collider(x, y, 16, 16)
        self.source_rect = item_sprite_rects().get(item_type, _DEFAULT_RECT)
        self.lifetime = ITEM_LIFETIME
        self.marked_for_deletion = False

    def update(self, dt: float) -> None:
        self.lifetime -= dt
        self.y += ITEM_FALL_SPEED * dt
        self.collider.set_position(self.x, self.y)

    def is_expired(self) -> bool:
        return self.lifetime <= 0

    def mark_for_delete(self) -> None:
        self.marked_for_deletion = True


class BreakableItem(GameObject):
    """An object that plays a break animation once hit, hiding an item."""

    def __init__(self, x: float, y: float, break_anim: Animation, hidden_item: ItemType) -> None:
        super().__init__(x, y)
        self.break_anim = break_anim
        self.hidden_item = hidden_item
        self.is_broken = False
        self.collider = Collider(x, y, 32, 32)

    def update(self, elapsed_time: float) -> None:
        if self.is_broken:
            self.break_anim.update(elapsed_time)

    def hit(self) -> None:
        """Break the object; hitting it again has no effect."""
        if self.is_broken:
            return
        self.is_broken = True
        self.break_anim.reset()