"""Projectiles fired by weapons."""

from __future__ import annotations

from typing import Any, ClassVar

from spacefighter.flags import CollisionType
from spacefighter.game_object import GameObject
from spacefighter.timing import FrameTime
from spacefighter.vector2 import Vector2


class Projectile(GameObject):
    """A shot travelling in a straight line until it leaves the screen."""

    texture: ClassVar[Any] = None

    def __init__(self) -> None:
        super().__init__()
        self.direction = -Vector2.UNIT_Y
        self.collision_radius = 9
        self.speed = 500.0
        self.damage = 1.0
        self.was_shot_by_player = True

    @staticmethod
    def set_texture(texture: Any) -> None:
        """Set the texture shared by all projectiles; it has size and center vectors."""
        Projectile.texture = texture

    def _texture_size(self) -> Vector2:
        texture = Projectile.texture
        return texture.size if texture is not None else Vector2()

    def update(self, time: FrameTime) -> None:
        """Move the projectile and deactivate it once it is off the screen."""
        if self.is_active():
            self.translate(self.direction * (self.speed * time.elapsed))

            width, height = GameObject.screen_size
            size = self._texture_size()
            x, y = self.position.x, self.position.y
            if (
                y < -size.y
                or x < -size.x
                or y > height + size.y
                or x > width + size.x
            ):
                self.deactivate()

        super().update(time)

    def draw(self, sprite_batch: Any) -> None:
        if not self.is_active() or Projectile.texture is None:
            return
        level = GameObject.current_level
        alpha = level.alpha() if level is not None else 1.0
        texture = Projectile.texture
        sprite_batch.draw(texture, self.position, (alpha,) * 4, texture.center)

    def activate(self, position: Vector2, was_shot_by_player: bool = True) -> None:
        """Launch the projectile from a position."""
        self.was_shot_by_player = was_shot_by_player
        self.set_position(position)
        super().activate()

    def projectile_type(self) -> CollisionType:
        return CollisionType.PROJECTILE

    def collision_type(self) -> CollisionType:
        owner = CollisionType.PLAYER if self.was_shot_by_player else CollisionType.ENEMY
        return owner | self.projectile_type()

    def __str__(self) -> str:
        owner = "Player" if self.was_shot_by_player else "Enemy"
        return f"{owner} Projectile"