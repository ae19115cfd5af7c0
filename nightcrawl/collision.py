"""Axis-aligned colliders, swept collision tests and tile-map collider builders."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

BoundingBox = Tuple[float, float, float, float]

_PUSH_BACK = 0.01


@dataclass(eq=False)
class Collider:
    """A moving or static box positioned at its top-left corner."""

    x: float
    y: float
    width: float
    height: float
    vx: float = 0.0
    vy: float = 0.0
    is_blocking: bool = True

    def bounding_box(self) -> BoundingBox:
        """Return (left, top, right, bottom)."""
        return self.x, self.y, self.x + self.width, self.y + self.height

    def speed(self) -> Tuple[float, float]:
        return self.vx, self.vy

    def position(self) -> Tuple[float, float]:
        return self.x, self.y

    def set_position(self, x: float, y: float) -> None:
        self.x = x
        self.y = y


class StairDirection(Enum):
    """Which way a staircase rises."""

    LEFT_UP = "left_up"
    RIGHT_UP = "right_up"


@dataclass(eq=False)
class StairCollider(Collider):
    """A non-blocking stair tile."""

    direction: StairDirection = StairDirection.LEFT_UP
    is_top: bool = False
    temporarily_disabled: bool = False

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        direction: StairDirection,
        is_top: bool,
    ) -> None:
        super().__init__(x, y, width, height, 0.0, 0.0, False)
        self.direction = direction
        self.is_top = is_top
        self.temporarily_disabled = False


@dataclass(eq=False)
class CollisionEvent:
    """The outcome of sweeping one collider against another over a step."""

    t: float
    nx: float
    ny: float
    dx: float
    dy: float
    src: Collider
    dest: Collider
    is_deleted: bool = False

    def was_collided(self) -> bool:
        return 0.0 <= self.t <= 1.0


def swept_aabb(
    ml: float,
    mt: float,
    mr: float,
    mb: float,
    dx: float,
    dy: float,
    sl: float,
    st: float,
    sr: float,
    sb: float,
) -> Tuple[float, float, float]:
    """Sweep a moving box by (dx, dy) against a static box.

    Returns (t, nx, ny): the fraction of the step at which contact begins and
    the contact normal. t is -1 when there is no contact.
    """
    miss = (-1.0, 0.0, 0.0)

    bl = ml if dx > 0 else ml + dx
    bt = mt if dy > 0 else mt + dy
    br = mr + dx if dx > 0 else mr
    bb = mb + dy if dy > 0 else mb
    if br < sl or bl > sr or bb < st or bt > sb:
        return miss

    if dx > 0:
        dx_entry, dx_exit = sl - mr, sr - ml
    else:
        dx_entry, dx_exit = sr - ml, sl - mr
    if dy > 0:
        dy_entry, dy_exit = st - mb, sb - mt
    else:
        dy_entry, dy_exit = sb - mt, st - mb

    tx_entry = -math.inf if dx == 0 else dx_entry / dx
    tx_exit = math.inf if dx == 0 else dx_exit / dx
    ty_entry = -math.inf if dy == 0 else dy_entry / dy
    ty_exit = math.inf if dy == 0 else dy_exit / dy

    if (tx_entry < 0 and ty_entry < 0) or tx_entry > 1 or ty_entry > 1:
        return miss

    t_entry = max(tx_entry, ty_entry)
    t_exit = min(tx_exit, ty_exit)
    if t_entry > t_exit:
        return miss

    if tx_entry > ty_entry:
        return t_entry, (-1.0 if dx > 0 else 1.0), 0.0
    return t_entry, 0.0, (-1.0 if dy > 0 else 1.0)


def sweep(src: Collider, dt: float, dest: Collider) -> CollisionEvent:
    """Sweep src against dest using their relative motion over dt."""
    mvx, mvy = src.speed()
    svx, svy = dest.speed()
    dx = mvx * dt - svx * dt
    dy = mvy * dt - svy * dt
    t, nx, ny = swept_aabb(*src.bounding_box(), dx, dy, *dest.bounding_box())
    return CollisionEvent(t, nx, ny, dx, dy, src, dest)


def scan(src: Collider, dt: float, objects: Iterable[Collider]) -> List[CollisionEvent]:
    """Return the events of every object that src touches during dt."""
    events = (sweep(src, dt, obj) for obj in objects)
    return [event for event in events if event.was_collided()]


def filter_events(
    events: Sequence[CollisionEvent],
    filter_block: bool = True,
    filter_x: bool = True,
    filter_y: bool = True,
) -> Tuple[Optional[CollisionEvent], Optional[CollisionEvent]]:
    """Pick the earliest horizontal and earliest vertical contact.

    Deleted events are skipped, and with filter_block so are events against
    non-blocking colliders. Only contacts strictly before the end of the step
    are chosen.
    """
    min_tx = min_ty = 1.0
    col_x: Optional[CollisionEvent] = None
    col_y: Optional[CollisionEvent] = None
    for event in events:
        if event.is_deleted:
            continue
        if filter_block and not event.dest.is_blocking:
            continue
        if filter_x and event.nx != 0 and event.t < min_tx:
            min_tx, col_x = event.t, event
        if filter_y and event.ny != 0 and event.t < min_ty:
            min_ty, col_y = event.t, event
    return col_x, col_y


def process(src: Collider, dt: float, objects: Iterable[Collider]) -> None:
    """Move src by its velocity over dt, stopping just short of blocking colliders."""
    events = scan(src, dt, objects) if src.is_blocking else []

    x, y = src.position()
    vx, vy = src.speed()
    dx = vx * dt
    dy = vy * dt

    if not events:
        src.set_position(x + dx, y + dy)
        return

    col_x, col_y = filter_events(events)
    if col_x is not None and col_y is not None:
        if col_y.t < col_x.t:
            y += col_y.t * dy + col_y.ny * _PUSH_BACK
        else:
            x += col_x.t * dx + col_x.nx * _PUSH_BACK
    elif col_x is not None:
        x += col_x.t * dx + col_x.nx * _PUSH_BACK
        y += dy
    elif col_y is not None:
        x += dx
        y += col_y.t * dy + col_y.ny * _PUSH_BACK
    else:
        x += dx
        y += dy
    src.set_position(x, y)


def optimized_colliders_from_tile_map(
    tile_map: Sequence[Sequence[int]],
    tile_size: int,
    solid_tile_value: int = 0,
) -> List[Collider]:
    """Merge runs of solid tiles into as few blocking rectangles as possible.

    Each run along a row is grown downwards while the rows below are solid
    across its whole width. The given map is left unchanged.
    """
    grid = [list(row) for row in tile_map]
    if not grid:
        return []
    rows = len(grid)
    cols = len(grid[0])
    consumed = -1
    colliders: List[Collider] = []

    for row in range(rows):
        col = 0
        while col < cols:
            if grid[row][col] != solid_tile_value:
                col += 1
                continue
            start_col = col
            while col < cols and grid[row][col] == solid_tile_value:
                grid[row][col] = consumed
                col += 1
            span = range(start_col, col)

            height = 1
            while row + height < rows and all(
                grid[row + height][c] == solid_tile_value for c in span
            ):
                for c in span:
                    grid[row + height][c] = consumed
                height += 1

            colliders.append(
                Collider(
                    float(start_col * tile_size),
                    float(row * tile_size),
                    float(len(span) * tile_size),
                    float(height * tile_size),
                    0.0,
                    0.0,
                    True,
                )
            )
    return colliders


def stair_colliders_from_tile_map(
    tile_map: Sequence[Sequence[int]], tile_size: int
) -> List[StairCollider]:
    """Create one stair collider per stair tile.

    Tile 1 rises to the left; tile 2 rises to the right and marks a stair top.
    """
    colliders: List[StairCollider] = []
    for row, tiles in enumerate(tile_map):
        for col, tile in enumerate(tiles):
            if tile not in (1, 2):
                continue
            direction = StairDirection.LEFT_UP if tile == 1 else StairDirection.RIGHT_UP
            colliders.append(
                StairCollider(
                    float(col * tile_size),
                    float(row * tile_size),
                    float(tile_size),
                    float(tile_size),
                    direction,
                    tile == 2,
                )
            )
    return colliders