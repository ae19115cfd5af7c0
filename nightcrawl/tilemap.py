"""Tile maps loaded from text grids, and the tile classes used for collision."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from typing import Any, List, Sequence, Union

from nightcrawl.animation import Frame
from nightcrawl.camera import Camera

EMPTY_TILE = -1
SOLID_TILE = 0
STAIR_TILE = 1
STAIR_TOP_TILE = 2

DRAW_SCALE = 3.125

_SOLID_IDS = frozenset({0, 7, 8, 9, 17, 18})
_STAIR_IDS = frozenset({4, 14, 27})
_LEADING_INT = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class DrawCommand:
    """One tile to draw: where it comes from on the tileset and where it goes."""

    source: Frame
    x: float
    y: float
    scale: float


def _parse_row(line: str) -> List[int]:
    """Read integers from a line until the first token that is not one."""
    row: List[int] = []
    for token in line.split():
        match = _LEADING_INT.match(token)
        if match is None:
            break
        row.append(int(match.group()))
        if match.end() != len(token):
            break
    return row


class TileMap:
    """A grid of tile ids drawn from a horizontal strip tileset."""

    tile_size = 50

    def __init__(self, tile_width: int = 0, tile_height: int = 0) -> None:
        self.tile_width = tile_width
        self.tile_height = tile_height
        self.map_data: List[List[int]] = []
        self.map_width = 0
        self.map_height = 0
        self.texture: Any = None
        self.map_file = ""
        self.tileset_file = ""

    def load_map_data(self, path: Union[str, PathLike]) -> None:
        """Load a whitespace-separated grid of tile ids.

        Raises ValueError if the grid is empty or its rows differ in length.
        """
        with open(path, encoding="utf-8") as handle:
            data = [_parse_row(line) for line in handle.read().splitlines()]

        if not data or not data[0]:
            raise ValueError(f"no tile data in {path!s}")
        width = len(data[0])
        if any(len(row) != width for row in data):
            raise ValueError(f"rows of unequal length in {path!s}")

        self.map_data = data
        self.map_width = width
        self.map_height = len(data)

    def width(self) -> int:
        return self.map_width

    def height(self) -> int:
        return self.map_height

    def draw_commands(self, camera: Camera) -> List[DrawCommand]:
        """List the tiles to draw, scrolled horizontally by the camera."""
        cam_x = camera.left()
        commands: List[DrawCommand] = []
        for row_index, row in enumerate(self.map_data):
            for col_index, tile_id in enumerate(row):
                if tile_id == EMPTY_TILE:
                    continue
                source = Frame(
                    tile_id * self.tile_width,
                    0,
                    (tile_id + 1) * self.tile_width,
                    self.tile_height,
                )
                commands.append(
                    DrawCommand(
                        source,
                        col_index * DRAW_SCALE * self.tile_width - DRAW_SCALE * cam_x,
                        row_index * DRAW_SCALE * self.tile_height,
                        DRAW_SCALE,
                    )
                )
        return commands


def classify_tiles(map_data: Sequence[Sequence[int]]) -> List[List[int]]:
    """Map tileset ids to collision classes: solid, stair or empty."""

    def classify(tile: int) -> int:
        if tile in _SOLID_IDS:
            return SOLID_TILE
        if tile in _STAIR_IDS:
            return STAIR_TILE
        return EMPTY_TILE

    return [[classify(tile) for tile in row] for row in map_data]