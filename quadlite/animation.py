"""Sprite-sheet animations driven by elapsed frame time."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from quadlite.geometry import Rect, Vec2

__all__ = ["Animation", "AnimationFrame", "AnimatedSprite"]


@dataclass
class Animation:
    """One row of a sprite sheet played at a fixed rate."""

    name: str
    row: int
    frames: int
    fps: int


@dataclass(frozen=True)
class AnimationFrame:
    """The part of the sheet to draw and the size to draw it at."""

    source_rect: Rect
    dest_size: Vec2


class AnimatedSprite:
    """Tracks the current animation and frame of a sprite sheet."""

    def __init__(
        self,
        tile_width: int,
        tile_height: int,
        animations: Sequence[Animation],
        playing: bool,
    ) -> None:
        self._tile_width = float(tile_width)
        self._tile_height = float(tile_height)
        self._animations = list(animations)
        self._current = 0
        self._time = 0.0
        self._frame = 0
        self.playing = playing

    def _animation(self, index: int) -> Animation:
        if not 0 <= index < len(self._animations):
            raise IndexError(f"no animation with index {index}")
        return self._animations[index]

    def set_animation(self, animation: int) -> None:
        """Switch to another animation, keeping the frame within its range."""
        selected = self._animation(animation)
        self._current = animation
        self._frame %= selected.frames

    def current_animation(self) -> int:
        """Index of the animation being played."""
        return self._current

    def set_frame(self, frame: int) -> None:
        """Jump to a frame of the current animation."""
        self._frame = frame

    def update(self, dt: float) -> None:
        """Advance the animation by dt seconds."""
        animation = self._animation(self._current)
        if self.playing:
            self._time += dt
            if self._time > 1.0 / animation.fps:
                self._frame += 1
                self._time = 0.0
        self._frame %= animation.frames

    def frame(self) -> AnimationFrame:
        """The region of the sheet for the current frame."""
        animation = self._animation(self._current)
        return AnimationFrame(
            source_rect=Rect(
                self._tile_width * self._frame,
                self._tile_height * animation.row,
                self._tile_width,
                self._tile_height,
            ),
            dest_size=Vec2(self._tile_width, self._tile_height),
        )