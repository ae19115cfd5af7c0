"""The base of every object that lives in the game world."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional, Tuple

from nightcrawl.collision import Collider
from nightcrawl.defines import Direction, EntityId, Status
from nightcrawl.vector import Vector2


class GameObject(ABC):
    """A positioned object with a velocity, status flags and an optional texture."""

    def __init__(self, x: float, y: float, texture: Any = None) -> None:
        self.x = x
        self.y = y
        self.texture = texture
        self.collider: Optional[Collider] = None
        self.velocity = Vector2(0.0, 0.0)
        self.id = EntityId.UNKNOWN
        self.status = Status.NORMAL
        self.physics_side = Direction.NONE

    @property
    def position(self) -> Tuple[float, float]:
        return self.x, self.y

    def set_position(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def set_velocity(self, vx: float, vy: float) -> None:
        self.velocity = Vector2(vx, vy)

    def add_status(self, status: Status) -> None:
        self.status = self.status | status

    def remove_status(self, status: Status) -> None:
        self.status = self.status & ~status

    def is_in_status(self, status: Status) -> bool:
        return (self.status & status) == status

    def check_collision(self, other: GameObject, dt: float) -> float:
        """Time of contact with another object; plain objects never collide."""
        return 0.0

    @abstractmethod
    def update(self, elapsed_time: float) -> None:
        """Advance the object by elapsed_time seconds."""