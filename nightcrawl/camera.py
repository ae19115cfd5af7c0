"""The viewport that follows the player across the map."""

from dataclasses import dataclass


@dataclass
class Camera:
    """A rectangular view positioned at its top-left corner."""

    x: float = 0.0
    y: float = 0.0
    width: int = 0
    height: int = 0

    def set_position(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def set_size(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def reset(self) -> None:
        self.x = 0.0
        self.y = 0.0

    def left(self) -> float:
        return self.x

    def top(self) -> float:
        return self.y

    def right(self) -> float:
        return self.x + self.width

    def bottom(self) -> float:
        return self.y + self.height

    def follow(self, target_x: float, map_width: int, view_width: int) -> float:
        """Keep the target a third of the view from the left, clamped to the map.

        Returns the new horizontal position.
        """
        third = view_width // 3
        cam_x = target_x - third
        right_edge = map_width - third
        cam_x = max(0.0, min(cam_x, right_edge))
        self.set_position(cam_x, 0.0)
        return cam_x