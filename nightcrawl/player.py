"""The player character: movement, stairs, combat and weapon handling."""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Any, Dict, List, Optional, Sequence, Union

from nightcrawl.animation import Animation
from nightcrawl.collision import Collider, StairCollider, StairDirection, process
from nightcrawl.game_object import GameObject
from nightcrawl.info import Info
from nightcrawl.items import Item, ItemType
from nightcrawl.timing import GameTime
from nightcrawl.vector import Vector2
from nightcrawl.weapons import Axe, Weapon, WeaponType, Whip

logger = logging.getLogger(__name__)

VK_LEFT = 0x25
VK_UP = 0x26
VK_RIGHT = 0x27
VK_DOWN = 0x28

WALK_SPEED = 150.0
JUMP_SPEED = -120.0
GRAVITY = 9.8
FALL_BOOST = 1.0
STAIR_SPEED = 25.0
STAIR_SCALE = 3.125
ATTACK_DURATION = 0.91
SIT_DOWN_OFFSET = 13.0
MAX_WHIP_LEVEL = 5
GROUND_EPSILON = 1.0
AIRBORNE_GROUND_OFFSET = 3.0
WEAPON_OFFSET_X = 20.0
STAIR_TOP_TOLERANCE = 1.0

Key = Union[int, str]


class PlayerState(Enum):
    IDLE = auto()
    WALKING = auto()
    JUMPING = auto()
    SIT_DOWN = auto()
    STAND_HIT = auto()
    UP_HIT = auto()
    DOWN_HIT = auto()
    CLIMBING = auto()
    ATTACKING = auto()
    TAKING_DAMAGE = auto()
    DEAD = auto()
    PICKING_UP_ITEM = auto()
    FALLING = auto()


_HIT_STATES = frozenset({PlayerState.STAND_HIT, PlayerState.UP_HIT, PlayerState.DOWN_HIT})


def _key_code(key: Key) -> int:
    """Turn a key given as a letter or a virtual key code into a key code."""
    if isinstance(key, str):
        if len(key) != 1:
            raise ValueError(f"expected a single character key, got {key!r}")
        return ord(key.upper())
    return int(key)


def _overlaps(a: Sequence[float], b: Sequence[float]) -> bool:
    l1, t1, r1, b1 = a
    l2, t2, r2, b2 = b
    return r1 > l2 and l1 < r2 and b1 > t2 and t1 < b2


class Player(GameObject):
    """The character controlled from the keyboard."""

    def __init__(
        self,
        x: float,
        y: float,
        animations: Optional[Dict[PlayerState, Animation]] = None,
        whip_texture: Any = None,
        axe_texture: Any = None,
        game_time: Optional[GameTime] = None,
    ) -> None:
        super().__init__(x, y)
        self.animations: Dict[PlayerState, Animation] = dict(animations or {})
        self.state = PlayerState.IDLE
        self.facing_left = False
        self.velocity = Vector2(0.0, 0.0)
        self.collider = Collider(x, y, 32, 64)
        self.gravity = GRAVITY
        self.stair_speed = STAIR_SPEED

        self.is_on_ground = False
        self.is_on_stair = False
        self.is_climbing = False
        self.stair_direction = Vector2(1.0, -1.0)
        self.current_stair: Optional[StairCollider] = None
        self.stair_top_as_ground: Optional[StairCollider] = None

        self.info = Info(game_time)
        self.info.heart = 50
        self.info.life = 3
        self.info.score = 0
        self.info.player_hit_point = 16
        self.info.enemy_hit_point = 16
        self.info.activate_time()
        self.info.set_time(300)

        self._whip_texture = whip_texture
        self._axe_texture = axe_texture
        self.whip_level = 1
        self.weapon_pool: Dict[WeaponType, Weapon] = {}
        self.current_weapon: Weapon = Whip(x, y, self.whip_level, whip_texture)
        self.attack_timer = 0.0

        self.ground_colliders: List[Collider] = []
        self.stair_colliders: List[Collider] = []
        self.items: Optional[List[Optional[Item]]] = None

    def _animation(self, state: PlayerState) -> Animation:
        return self.animations.setdefault(state, Animation())

    def _enter_state(self, state: PlayerState) -> None:
        self.state = state
        self._animation(state).reset()

    # Setup

    def set_ground_colliders(self, colliders: Sequence[Collider]) -> None:
        self.ground_colliders = list(colliders)

    def set_stair_colliders(self, colliders: Sequence[Collider]) -> None:
        self.stair_colliders = list(colliders)

    def set_item_list(self, items: List[Optional[Item]]) -> None:
        """Share the world's item list; items are checked for pickup on update."""
        self.items = items

    # Input

    def on_key_pressed(self, key: Key) -> None:
        code = _key_code(key)
        if code in (ord("A"), VK_LEFT):
            if self.is_on_ground:
                self.move_left()
        elif code in (ord("D"), VK_RIGHT):
            if self.is_on_ground:
                self.move_right()
        elif code == ord("L"):
            if self.is_on_ground:
                self.sit_down()
        elif code in (VK_UP, ord("W")):
            self.climb_up()
        elif code in (VK_DOWN, ord("S")):
            self.climb_down()
        elif code == ord("K"):
            self.jump()
        elif code == ord("J"):
            self.attack()
        elif code == ord("I"):
            if self.current_weapon.type == WeaponType.WHIP:
                self.change_weapon(WeaponType.AXE)
            else:
                self.change_weapon(WeaponType.WHIP)
        elif code == ord("G"):
            logger.info("Ground count: %d", len(self.ground_colliders))
        elif code == ord("O"):
            self.upgrade_whip()

    def on_key_released(self, key: Key) -> None:
        code = _key_code(key)
        if code in (ord("A"), VK_LEFT, ord("D"), VK_RIGHT):
            self.velocity.x = 0.0
            self.state = PlayerState.IDLE
        elif code in (VK_UP, ord("W"), VK_DOWN, ord("S")):
            self.velocity = Vector2(0.0, 0.0)
            if self.is_on_ground:
                self.is_climbing = False
                self.state = PlayerState.IDLE
        elif code == ord("L"):
            if self.state == PlayerState.SIT_DOWN:
                self.y -= SIT_DOWN_OFFSET

    # Per-frame handling

    def handle_collision(self, elapsed_time: float) -> None:
        """Move the collider against the ground and take its resulting position."""
        process(self.collider, elapsed_time, self.ground_colliders)
        self.x, self.y = self.collider.position()
        self.velocity = Vector2(*self.collider.speed())

    def handle_state_change(self, elapsed_time: float) -> None:
        self.is_on_ground = False
        own_box = self.collider.bounding_box()
        for ground in self.ground_colliders:
            l1, _, r1, b1 = own_box
            l2, t2, r2, _ = ground.bounding_box()
            offset = (
                AIRBORNE_GROUND_OFFSET
                if self.state in (PlayerState.SIT_DOWN, PlayerState.JUMPING)
                else 0.0
            )
            if abs((b1 + offset) - t2) < GROUND_EPSILON and r1 > l2 and l1 < r2:
                self.is_on_ground = True
                if self.state == PlayerState.JUMPING and self.velocity.y > 0:
                    self.state = PlayerState.IDLE
                break

        if self.state in _HIT_STATES:
            self.attack_timer += elapsed_time
            if self.attack_timer >= ATTACK_DURATION:
                self.state = PlayerState.IDLE
                self.current_weapon.is_active = False

        if self.is_on_ground and self.state == PlayerState.WALKING:
            self.x += self.velocity.x * elapsed_time

    def handle_weapon_update(self, elapsed_time: float) -> None:
        weapon = self.current_weapon
        if not weapon.is_active:
            return
        offset_x = -WEAPON_OFFSET_X if self.facing_left else WEAPON_OFFSET_X
        if isinstance(weapon, Whip):
            weapon.set_pos(self.x + offset_x - 2, self.y, self.facing_left)
        else:
            self.handle_axe_update()
        weapon.update(elapsed_time)

    def handle_axe_update(self) -> None:
        """Launch the axe from the player's hands if it has not been thrown yet."""
        axe = self.current_weapon
        if isinstance(axe, Axe) and not axe.is_thrown:
            axe.set_pos(self.x, self.y - 10, self.facing_left)
            axe.reset_velocity()
            axe.is_thrown = True

    def handle_stair_interaction(self, elapsed_time: float) -> None:
        self.is_on_stair = False
        self.current_stair = None
        own_box = self.collider.bounding_box()
        _, _, _, player_bottom = own_box

        for stair in self.stair_colliders:
            stair_box = stair.bounding_box()
            if not _overlaps(own_box, stair_box) or not isinstance(stair, StairCollider):
                continue
            stair_top = stair_box[1]
            if player_bottom <= stair_top + STAIR_TOP_TOLERANCE:
                self.is_climbing = False
                self.state = PlayerState.IDLE
                self.collider.set_position(self.x + 10.0, self.y - 10.0)
                self.is_on_ground = True
                self.stair_top_as_ground = stair
                stair.is_blocking = True
                if not any(ground is stair for ground in self.ground_colliders):
                    self.ground_colliders.append(stair)
                    logger.info("Stair top added to ground colliders")
            self.current_stair = stair
            self.is_on_stair = True
            break

        if not self.is_on_stair and self.is_climbing:
            self.is_climbing = False
            self.velocity = Vector2(0.0, 0.0)

    def update(self, elapsed_time: float) -> None:
        if not self.is_climbing:
            self.velocity.y += self.gravity * elapsed_time + FALL_BOOST
        self.collider.vx = self.velocity.x
        self.collider.vy = self.velocity.y
        if self.items is None:
            return

        own_box = self.collider.bounding_box()
        for item in self.items:
            if item is None:
                continue
            if _overlaps(own_box, item.collider.bounding_box()):
                if item.type == ItemType.POT_ROAST:
                    item.mark_for_delete()

        self.handle_collision(elapsed_time)
        self.handle_state_change(elapsed_time)
        self.handle_weapon_update(elapsed_time)
        self.handle_stair_interaction(elapsed_time)
        self._animation(self.state).update(elapsed_time)

    # Movement

    def move_left(self) -> None:
        if self.state != PlayerState.WALKING:
            self._enter_state(PlayerState.WALKING)
        self.velocity.x = -WALK_SPEED
        self.facing_left = True

    def move_right(self) -> None:
        if self.state != PlayerState.WALKING:
            self._enter_state(PlayerState.WALKING)
        self.velocity.x = WALK_SPEED
        self.facing_left = False

    def jump(self) -> None:
        if self.is_on_ground:
            self.velocity.y = JUMP_SPEED
            self.is_on_ground = False
            self._enter_state(PlayerState.JUMPING)

    def sit_down(self) -> None:
        if self.is_on_ground and self.state != PlayerState.SIT_DOWN:
            self._enter_state(PlayerState.SIT_DOWN)

    def _climb(self, up: bool) -> None:
        if not self.is_on_stair or self.current_stair is None:
            self.state = PlayerState.IDLE
            return
        left_up = self.current_stair.direction == StairDirection.LEFT_UP
        if up:
            self.stair_direction = Vector2(1.0, -1.0) if left_up else Vector2(-1.0, -1.0)
        else:
            self.stair_direction = Vector2(-1.0, 1.0) if left_up else Vector2(1.0, 1.0)
        self.state = PlayerState.CLIMBING
        self.velocity = self.stair_direction * self.stair_speed * STAIR_SCALE
        self.is_climbing = True

    def climb_up(self) -> None:
        self._climb(up=True)

    def climb_down(self) -> None:
        self._climb(up=False)

    # Combat

    def attack(self) -> None:
        weapon = self.current_weapon
        if weapon.is_active:
            return
        weapon.facing_left = self.facing_left
        if self.is_on_ground:
            state = PlayerState.STAND_HIT
        elif self.velocity.y < 0:
            state = PlayerState.UP_HIT
        else:
            state = PlayerState.DOWN_HIT
        self._enter_state(state)
        self.attack_timer = 0.0
        weapon.is_active = True
        weapon.attack()

    def take_damage(self, damage: int) -> None:
        """Lose hit points, never going below zero."""
        self.info.player_hit_point = max(0, self.info.player_hit_point - damage)

    def change_weapon(self, new_type: WeaponType) -> None:
        """Switch to a weapon, creating it the first time it is chosen.

        Raises ValueError for weapon types the player cannot wield.
        """
        if new_type not in self.weapon_pool:
            if new_type == WeaponType.WHIP:
                weapon: Weapon = Whip(self.x, self.y, self.whip_level, self._whip_texture)
            elif new_type == WeaponType.AXE:
                weapon = Axe(self.x, self.y, self.facing_left, self._axe_texture)
            else:
                raise ValueError(f"unsupported weapon: {new_type.name}")
            self.weapon_pool[new_type] = weapon
        self.current_weapon = self.weapon_pool[new_type]

    def upgrade_whip(self) -> None:
        self.whip_level = min(self.whip_level + 1, MAX_WHIP_LEVEL)
        weapon = self.current_weapon
        if weapon.type == WeaponType.WHIP and isinstance(weapon, Whip):
            weapon.set_level(self.whip_level)