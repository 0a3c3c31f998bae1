"""Weapons that fire projectiles from a pool."""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, List, Optional

from spacefighter.flags import TriggerType
from spacefighter.game_object import Attachable, Attachment, GameObject
from spacefighter.projectile import Projectile
from spacefighter.timing import FrameTime
from spacefighter.vector2 import Vector2


class Weapon(Attachment):
    """A weapon attached to a game object, firing projectiles taken from a pool."""

    def __init__(
        self,
        key: str,
        is_attached_to_player: bool = True,
        active: bool = True,
        trigger_type: TriggerType = TriggerType.PRIMARY,
        projectile_pool: Optional[List[Projectile]] = None,
    ) -> None:
        self._key = key
        self.is_attached_to_player = is_attached_to_player
        self._enabled = active
        self.trigger_type = trigger_type
        self.projectile_pool = projectile_pool
        self.fire_sound: Any = None
        self.game_object: Optional[GameObject] = None
        self.offset = Vector2()

    @property
    def key(self) -> str:
        return self._key

    @property
    def attachment_type(self) -> str:
        return "Weapon"

    def attach_to(self, attachable: Attachable, offset: Vector2) -> None:
        """Mount the weapon on a game object at an offset from its centre."""
        if not isinstance(attachable, GameObject):
            raise TypeError("weapons can only be attached to game objects")
        self.game_object = attachable
        self.offset = offset.copy()

    def update(self, time: FrameTime) -> None:
        """Advance the weapon by one frame; a plain weapon has nothing to do."""

    def draw(self, sprite_batch: Any) -> None:
        """Render the weapon; a plain weapon is not drawn."""

    @abstractmethod
    def fire(self, trigger: TriggerType) -> bool:
        """Try to fire; return True if a projectile was launched."""

    def activate(self) -> None:
        self._enabled = True

    def deactivate(self) -> None:
        self._enabled = False

    def is_active(self) -> bool:
        """True if the weapon is enabled and mounted on an active object."""
        return (
            self._enabled
            and self.game_object is not None
            and self.game_object.is_active()
        )

    def position(self) -> Vector2:
        """The screen position of the weapon."""
        if self.game_object is None:
            raise RuntimeError(f"weapon {self._key!r} is not attached")
        return self.game_object.position + self.offset

    def get_projectile(self) -> Optional[Projectile]:
        """The first inactive projectile in the pool, or None."""
        if self.projectile_pool is None:
            return None
        return next((p for p in self.projectile_pool if not p.is_active()), None)


class Blaster(Weapon):
    """A weapon that fires one projectile per shot and then cools down."""

    def __init__(self, key: str, **kwargs: Any) -> None:
        super().__init__(key, **kwargs)
        self.cooldown = 0.0
        self.cooldown_seconds = 0.35

    def update(self, time: FrameTime) -> None:
        if self.cooldown > 0:
            self.cooldown -= time.elapsed

    def can_fire(self) -> bool:
        return self.cooldown <= 0

    def reset_cooldown(self) -> None:
        self.cooldown = 0.0

    def fire(self, trigger: TriggerType) -> bool:
        """Fire if active, cooled down and the trigger matches the blaster's."""
        if not self.is_active() or not self.can_fire():
            return False
        if not trigger.contains(self.trigger_type):
            return False

        projectile = self.get_projectile()
        if projectile is None:
            return False

        if self.fire_sound is not None:
            self.fire_sound.play()

        projectile.activate(self.position(), self.is_attached_to_player)
        self.cooldown = self.cooldown_seconds
        return True