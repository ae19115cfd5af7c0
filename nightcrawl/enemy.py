"""Enemies driven by status flags and per-status animations."""

from __future__ import annotations

from typing import Any, Dict, Optional

from nightcrawl.animation import Animation
from nightcrawl.defines import Direction, EntityId, Status
from nightcrawl.game_object import GameObject
from nightcrawl.timing import GameTime, StopWatch

DEFAULT_HEALTH = 100
DEFAULT_DAMAGE = 10
DEFAULT_MOVE_SPEED = 50.0


class Enemy(GameObject):
    """An enemy that walks, attacks and dies according to its status."""

    def __init__(
        self,
        x: float,
        y: float,
        texture: Any = None,
        animations: Optional[Dict[Status, Animation]] = None,
        game_time: Optional[GameTime] = None,
    ) -> None:
        super().__init__(x, y, texture)
        self.health = DEFAULT_HEALTH
        self.damage = DEFAULT_DAMAGE
        self.move_speed = DEFAULT_MOVE_SPEED
        self.is_active = True
        self.enemy_type = EntityId.UNKNOWN
        self.status = Status.NORMAL
        self.direction = Direction.NONE
        self.is_boss = False
        self.animations: Dict[Status, Animation] = dict(animations or {})
        self.attack_cooldown = StopWatch(game_time)
        self.state_timer = StopWatch(game_time)

    @property
    def current_animation(self) -> Optional[Animation]:
        return self.animations.get(self.status)

    @property
    def flipped(self) -> bool:
        """Whether the sprite is drawn mirrored, i.e. facing left."""
        return self.direction == Direction.LEFT

    def is_dead(self) -> bool:
        return (self.status & Status.DIE) == Status.DIE

    def update(self, elapsed_time: float) -> None:
        if not self.is_active:
            return

        if self.is_dead():
            animation = self.current_animation
            if animation is not None and animation.is_finished():
                self.is_active = False
                return

        animation = self.current_animation
        if animation is not None:
            animation.update(elapsed_time)

        if (self.status & Status.MOVING_LEFT) == Status.MOVING_LEFT:
            self.x -= self.move_speed * elapsed_time
            self.direction = Direction.LEFT
        elif (self.status & Status.MOVING_RIGHT) == Status.MOVING_RIGHT:
            self.x += self.move_speed * elapsed_time
            self.direction = Direction.RIGHT

        if (self.status & Status.ATTACKING) == Status.ATTACKING:
            animation = self.current_animation
            if animation is not None and animation.is_finished():
                self.set_state(Status.NORMAL)

    def take_damage(self, amount: int) -> None:
        if self.is_dead():
            return
        self.health -= amount
        if self.health <= 0:
            self.health = 0
            self.set_state(Status.DIE)

    def set_state(self, new_state: Status) -> None:
        if self.status == new_state:
            return
        self.status = new_state
        animation = self.current_animation
        if animation is not None:
            animation.reset()
        self.state_timer.restart()