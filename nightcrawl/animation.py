"""Frame-based sprite animation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass(frozen=True)
class Frame:
    """A source rectangle on a sprite sheet."""

    left: int
    top: int
    right: int
    bottom: int


@dataclass
class Animation:
    """Cycles through frames, advancing one frame each time frame_time passes."""

    sprite_sheet: Any = None
    frames: List[Frame] = field(default_factory=list)
    frame_time: float = 0.0
    elapsed_time: float = 0.0
    _current: int = field(default=0, repr=False)

    def update(self, delta_time: float) -> None:
        self.elapsed_time += delta_time
        if self.elapsed_time >= self.frame_time:
            if self.frames:
                self._current = (self._current + 1) % len(self.frames)
            self.elapsed_time = 0.0

    def is_finished(self) -> bool:
        return (
            self._current == len(self.frames) - 1
            and self.elapsed_time >= self.frame_time * 1.5
        )

    def reset(self) -> None:
        self._current = 0
        self.elapsed_time = 0.0

    def current_frame(self) -> int:
        """Index of the frame being shown."""
        return self._current

    @property
    def frame(self) -> Optional[Frame]:
        """The rectangle to draw, or None when there is nothing to draw."""
        if self.sprite_sheet is None or not self.frames:
            return None
        return self.frames[self._current]