"""Frame-based sprite sheet animation."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

from .geometry import Rect


class AnimationAxis(enum.Enum):
    """Direction in which the frames are laid out on the sprite sheet."""

    X = "x"
    Y = "y"


@dataclass
class Animation:
    """Cycles a source rectangle over the frames of a sprite sheet."""

    texture: Any
    x_offset: int
    y_offset: int
    num_frames: int
    width: int
    height: int
    axis: AnimationAxis = AnimationAxis.X
    speed: float = 0.0
    current_frame: int = field(default=0, init=False)
    last_time_updated: float = field(default=0.0, init=False)
    frame: Rect = field(init=False)

    def __post_init__(self):
        if self.num_frames < 1:
            raise ValueError("an animation needs at least one frame")
        self.frame = Rect(self.x_offset, self.y_offset, self.width, self.height)

    def update(self, delta_time):
        """Advance the clock and move to the next frame once `speed` seconds have passed."""
        self.last_time_updated += delta_time
        if self.last_time_updated < self.speed:
            return
        self.current_frame = (self.current_frame + 1) % self.num_frames
        if self.axis is AnimationAxis.X:
            self.frame.x = self.current_frame * self.width + self.x_offset
        else:
            self.frame.x = self.x_offset
        if self.axis is AnimationAxis.Y:
            self.frame.y = self.current_frame * self.height + self.y_offset
        else:
            self.frame.y = self.y_offset
        self.last_time_updated = 0.0