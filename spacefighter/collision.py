"""Pairwise collision dispatch between game objects."""

from __future__ import annotations

from typing import Callable, Dict, Set, Tuple

from spacefighter.flags import CollisionType
from spacefighter.game_object import GameObject

OnCollision = Callable[[GameObject, GameObject], None]

_Pair = Tuple[CollisionType, CollisionType]


def _ordered(type1: CollisionType, type2: CollisionType) -> _Pair:
    return (type1, type2) if type1 <= type2 else (type2, type1)


class CollisionManager:
    """Runs callbacks for registered pairs of collision types that overlap."""

    def __init__(self) -> None:
        self._collisions: Dict[_Pair, OnCollision] = {}
        self._non_collisions: Set[_Pair] = set()

    def add_collision_type(
        self,
        type1: CollisionType,
        type2: CollisionType,
        callback: OnCollision,
    ) -> None:
        """Check objects of these two types against each other.

        The callback receives the objects ordered by their collision type,
        lower value first. The first callback registered for a pair wins.
        """
        self._collisions.setdefault(_ordered(type1, type2), callback)

    def add_non_collision_type(self, type1: CollisionType, type2: CollisionType) -> None:
        """Never check objects of these two types against each other."""
        self._non_collisions.add(_ordered(type1, type2))

    def check_collision(self, first: GameObject, second: GameObject) -> None:
        """Run the matching callback if the two objects overlap.

        A pair of types that is neither registered nor excluded is
        remembered as excluded, so it is not looked up again.
        """
        t1 = first.collision_type()
        t2 = second.collision_type()

        if t1 == t2 or t1 == CollisionType.NONE or t2 == CollisionType.NONE:
            return

        if t1 > t2:
            t1, t2 = t2, t1
            first, second = second, first

        pair = (t1, t2)
        if pair in self._non_collisions:
            return

        callback = self._collisions.get(pair)
        if callback is None:
            self.add_non_collision_type(t1, t2)
            return

        difference = first.position - second.position
        radii = first.collision_radius + second.collision_radius
        if difference.length_squared() <= radii * radii:
            callback(first, second)