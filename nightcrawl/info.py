"""Player statistics shown on the status bar."""

from __future__ import annotations

from typing import Optional

from nightcrawl.timing import GameTime

MAX_PLAYER_HIT_POINTS = 16
MAX_HEARTS = 99


class Info:
    """Hit points, hearts, lives, score, stage and the stage timer."""

    def __init__(self, game_time: Optional[GameTime] = None) -> None:
        self._game_time = game_time
        self._player_hit_point = 0
        self._heart = 0
        self.enemy_hit_point = 0
        self.life = 0
        self.score = 0
        self.stage = 0
        self.max_weapon = 0
        self.time = 0
        self.time_budget = 0
        self.begin_time = 0.0
        self.paused = False

    @property
    def player_hit_point(self) -> int:
        return self._player_hit_point

    @player_hit_point.setter
    def player_hit_point(self, number: int) -> None:
        self._player_hit_point = min(number, MAX_PLAYER_HIT_POINTS)

    @property
    def heart(self) -> int:
        return self._heart

    @heart.setter
    def heart(self, number: int) -> None:
        self._heart = MAX_HEARTS if number >= 100 else number

    def set_time(self, number: int) -> None:
        """Set the remaining time; while running this also restarts the countdown."""
        if not self.paused:
            clock = self._game_time if self._game_time is not None else GameTime.shared()
            self.time_budget = number + 1
            self.begin_time = clock.total_ms()
        self.time = number

    def pause_time(self) -> None:
        self.paused = True

    def activate_time(self) -> None:
        self.paused = False