"""Explosion animations played where objects are destroyed."""

from __future__ import annotations

import math
import random as _random
from typing import Any, Optional

from spacefighter.timing import FrameTime
from spacefighter.vector2 import Vector2

_WHITE = (1.0, 1.0, 1.0, 1.0)


class Explosion:
    """An animation with an optional sound, played once at a position.

    The animation offers ``update(time)``, ``get_frame(index)`` (a frame with a
    ``center``), ``set_loop_count(count)``, ``play()`` and ``is_playing()``;
    the sound offers ``play()``.
    """

    def __init__(
        self,
        animation: Any = None,
        sound: Any = None,
        rng: Optional[_random.Random] = None,
    ) -> None:
        self.animation = animation
        self.sound = sound
        self.position = Vector2()
        self.rotation = 0.0
        self.scale = 1.0
        self._rng = rng if rng is not None else _random.Random()

    def update(self, time: FrameTime) -> None:
        """Advance the animation."""
        if self.animation is not None:
            self.animation.update(time)

    def draw(self, sprite_batch: Any) -> None:
        """Render the current frame while the explosion plays."""
        if not self.is_active():
            return
        center = self.animation.get_frame(0).center
        sprite_batch.draw(
            self.animation,
            self.position,
            _WHITE,
            center,
            Vector2.ONE * self.scale,
            self.rotation,
        )

    def activate(self, position: Vector2, scale: float = 1.0) -> None:
        """Start the explosion at a position with a random rotation."""
        if self.animation is None:
            raise RuntimeError("explosion has no animation")
        self.position = position.copy()
        self.scale = scale
        self.rotation = self._rng.random() * 2 * math.pi
        self.animation.set_loop_count(0)
        self.animation.play()
        if self.sound is not None:
            self.sound.play()

    def is_active(self) -> bool:
        """True while the animation is playing."""
        return self.animation is not None and bool(self.animation.is_playing())