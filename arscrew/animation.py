"""Frame-based sprite animation driven by elapsed time."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

__all__ = ["AnimationFrame", "Animation"]

_log = logging.getLogger(__name__)


@dataclass
class AnimationFrame:
    """One frame: a sprite, how long it shows, and its drawing offset."""

    sprite: Any
    duration: float
    offset: tuple[int, int] = (0, 0)


@dataclass
class Animation:
    """A sequence of frames that advances with time, optionally looping."""

    frames: list[AnimationFrame] = field(default_factory=list)
    loop: bool = False
    current_frame: int = field(default=0, init=False)
    frame_timer: float = field(default=0.0, init=False)
    finished: bool = field(default=False, init=False)

    def add_frame(self, frame: AnimationFrame) -> None:
        """Append a frame."""
        self.frames.append(frame)

    def update(self, delta_time: float) -> None:
        """Advance the animation by ``delta_time`` seconds."""
        if not self.frames or self.finished:
            return
        self.frame_timer += delta_time
        while self.frame_timer >= self.frames[self.current_frame].duration:
            self.frame_timer -= self.frames[self.current_frame].duration
            if self.current_frame + 1 < len(self.frames):
                self.current_frame += 1
            elif self.loop:
                self.current_frame = 0
            else:
                self.finished = True
                break

    def reset(self) -> None:
        """Return to the first frame and clear the finished state."""
        self.current_frame = 0
        self.frame_timer = 0.0
        self.finished = False

    def _frame(self, what: str) -> Optional[AnimationFrame]:
        if 0 <= self.current_frame < len(self.frames):
            return self.frames[self.current_frame]
        _log.error("frame index out of range in %s", what)
        return None

    def current_sprite(self) -> Any:
        """Sprite of the current frame, or None when there is no such frame."""
        frame = self._frame("current_sprite")
        return frame.sprite if frame is not None else None

    def current_offset(self) -> tuple[int, int]:
        """Offset of the current frame, or (0, 0) when there is no such frame."""
        frame = self._frame("current_offset")
        return frame.offset if frame is not None else (0, 0)