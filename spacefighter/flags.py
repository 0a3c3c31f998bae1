"""Bit-mask types for collision groups and weapon triggers."""

from __future__ import annotations

from enum import IntFlag


class CollisionType(IntFlag):
    """Collision category; combine bits, e.g. PLAYER | PROJECTILE."""

    NONE = 0
    PLAYER = 1 << 0
    ENEMY = 1 << 1
    SHIP = 1 << 2
    PROJECTILE = 1 << 3

    def contains(self, other: CollisionType) -> bool:
        """True if the two types share at least one bit."""
        return (int(self) & int(other)) > 0


class TriggerType(IntFlag):
    """Input trigger that can fire a weapon."""

    NONE = 0
    PRIMARY = 1 << 0
    SECONDARY = 1 << 1
    SPECIAL = 1 << 2
    ALL = 0xFFFF

    def contains(self, other: TriggerType) -> bool:
        """True if the two triggers share at least one bit."""
        return (int(self) & int(other)) > 0