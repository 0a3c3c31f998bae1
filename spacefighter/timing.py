"""Frame timing passed to every update."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class FrameTime:
    """Seconds elapsed in the last frame and in total since the start."""

    elapsed: float = 0.0
    total: float = 0.0

    def advance(self, seconds: float) -> FrameTime:
        """Move time forward by one frame of the given length."""
        if seconds < 0:
            raise ValueError("frame time cannot go backwards")
        self.elapsed = seconds
        self.total += seconds
        return self