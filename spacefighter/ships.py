"""Ships: the shared base, enemy ships and the player's ship."""

from __future__ import annotations

import logging
import math
from abc import abstractmethod
from typing import Any, Callable, Collection, Dict, List, Optional, Union

from spacefighter.flags import CollisionType, TriggerType
from spacefighter.game_object import Attachable, Attachment, GameObject
from spacefighter.input import Key
from spacefighter.timing import FrameTime
from spacefighter.vector2 import Vector2
from spacefighter.weapons import Weapon

_log = logging.getLogger(__name__)

_DIAGONAL = math.sqrt(0.5)
_SCREEN_PADDING = 4
_ENEMY_GRACE_SECONDS = 2


def _level_alpha() -> float:
    level = GameObject.current_level
    return level.alpha() if level is not None else 1.0


class Ship(GameObject, Attachable):
    """A game object with hit points, a speed and attached items such as weapons."""

    def __init__(self) -> None:
        super().__init__()
        self.set_position(Vector2())
        self.collision_radius = 10
        self.speed = 300.0
        self.max_hit_points = 3.0
        self.hit_points = self.max_hit_points
        self.invulnerable = False
        self._attachments: Dict[str, Attachment] = {}
        self.reset_hit_points()

    @property
    def attachments(self) -> List[Attachment]:
        """The attached items, ordered by key."""
        return [self._attachments[key] for key in sorted(self._attachments)]

    def update(self, time: FrameTime) -> None:
        """Update every attachment, then register with the current level."""
        for attachment in self.attachments:
            attachment.update(time)
        super().update(time)

    @abstractmethod
    def draw(self, sprite_batch: Any) -> None:
        """Render the ship."""

    @abstractmethod
    def collision_type(self) -> CollisionType:
        """The collision category of the ship."""

    def hit(self, damage: float) -> None:
        """Apply damage; at zero hit points the ship is destroyed and explodes."""
        if self.invulnerable:
            return
        self.hit_points -= damage
        if self.hit_points > 0:
            return

        _log.info(
            "%s Ship destroyed at (%g, %g)", self, self.position.x, self.position.y
        )
        GameObject.deactivate(self)
        level = GameObject.current_level
        if level is not None:
            level.spawn_explosion(self)

    def attach_item(self, item: Attachment, offset: Vector2) -> None:
        """Attach an item at an offset from the ship's centre, replacing any with its key."""
        item.attach_to(self, offset)
        self._attachments[item.key] = item

    def get_attachment(self, key: Union[str, int]) -> Optional[Attachment]:
        """Find an attachment by key, or by its position in key order."""
        if isinstance(key, str):
            return self._attachments.get(key)
        ordered = self.attachments
        if 0 <= key < len(ordered):
            return ordered[key]
        return None

    def fire_weapons(self, trigger: TriggerType = TriggerType.ALL) -> None:
        """Ask every attached weapon to fire with the given trigger."""
        for attachment in self.attachments:
            if attachment.attachment_type != "Weapon":
                continue
            attachment.fire(trigger)  # type: ignore[attr-defined]

    def get_weapon(self, key: str) -> Optional[Weapon]:
        """The attached weapon with the given key, or None."""
        item = self._attachments.get(key)
        return item if isinstance(item, Weapon) else None

    def reset_hit_points(self) -> None:
        """Restore the ship to its maximum hit points."""
        self.hit_points = self.max_hit_points

    def __str__(self) -> str:
        return "Ship"


class EnemyShip(Ship):
    """An enemy ship that activates after a delay and leaves once off the screen."""

    def __init__(self) -> None:
        super().__init__()
        self.max_hit_points = 1.0
        self.collision_radius = 20
        self.delay_seconds = 0.0
        self.activation_seconds = 0.0

    def update(self, time: FrameTime) -> None:
        """Count down the activation delay and deactivate once gone from the screen."""
        if self.delay_seconds > 0:
            self.delay_seconds -= time.elapsed
            if self.delay_seconds <= 0:
                GameObject.activate(self)

        if self.is_active():
            self.activation_seconds += time.elapsed
            if self.activation_seconds > _ENEMY_GRACE_SECONDS and not self.is_on_screen():
                self.deactivate()

        super().update(time)

    def initialize(self, position: Vector2, delay_seconds: float) -> None:
        """Place the ship and set how long it waits before activating."""
        self.set_position(position)
        self.delay_seconds = delay_seconds
        self.reset_hit_points()

    def fire(self) -> None:
        """Fire the ship's weapons; a plain enemy ship has none."""

    def collision_type(self) -> CollisionType:
        return CollisionType.ENEMY | CollisionType.SHIP

    def __str__(self) -> str:
        return "Enemy Ship"


class BioEnemyShip(EnemyShip):
    """A biological enemy that drifts down the screen, swaying from side to side."""

    def __init__(self, texture: Any = None) -> None:
        super().__init__()
        self.speed = 150.0
        self.max_hit_points = 1.0
        self.collision_radius = 20
        self.texture = texture

    def update(self, time: FrameTime) -> None:
        if self.is_active():
            sway = math.sin(time.total * math.pi * 2 + self.index)
            sway *= self.speed * time.elapsed * 2.0
            self.translate(Vector2(sway, self.speed * time.elapsed))
            if not self.is_on_screen():
                self.deactivate()

        super().update(time)

    def draw(self, sprite_batch: Any) -> None:
        if not self.is_active() or self.texture is None:
            return
        alpha = _level_alpha()
        sprite_batch.draw(
            self.texture,
            self.position,
            (alpha,) * 4,
            self.texture.center,
            Vector2.ONE,
            math.pi,
            1,
        )


class PlayerShip(Ship):
    """The ship steered by the player."""

    def __init__(self) -> None:
        super().__init__()
        self.desired_direction = Vector2()
        self.velocity = Vector2()
        self.responsiveness = 0.0
        self.confined = False
        self.texture: Any = None

    def load_content(
        self,
        resources: Any,
        texture_factory: Callable[[], Any],
        sound_factory: Callable[[], Any],
    ) -> None:
        """Load the ship's texture and laser sound and move it to its start position."""
        self.confine_to_screen()
        self.set_responsiveness(0.1)
        self.texture = resources.load(texture_factory, "Textures/PlayerShip.png")
        self.speed = 600.0

        sound = resources.load(sound_factory, "Audio/Effects/Laser.wav")
        sound.volume = 0.5
        weapon = self.get_weapon("Main Blaster")
        if weapon is not None:
            weapon.fire_sound = sound

        width, height = GameObject.screen_size
        self.set_position(Vector2(width / 2, height / 2) + Vector2.UNIT_Y * 300)

    def handle_input(self, pressed_keys: Collection[Key]) -> None:
        """Steer with the arrow keys and fire the primary weapon with space."""
        if not self.is_active():
            return
        keys = frozenset(pressed_keys)

        direction = Vector2()
        if Key.DOWN in keys:
            direction.y += 1
        if Key.UP in keys:
            direction.y -= 1
        if Key.RIGHT in keys:
            direction.x += 1
        if Key.LEFT in keys:
            direction.x -= 1

        if direction.x != 0 and direction.y != 0:
            direction *= _DIAGONAL

        trigger = TriggerType.NONE
        if Key.SPACE in keys:
            trigger |= TriggerType.PRIMARY

        self.set_desired_direction(direction)
        if trigger != TriggerType.NONE:
            self.fire_weapons(trigger)

    def update(self, time: FrameTime) -> None:
        """Ease toward the desired velocity, move, and keep within the screen if confined."""
        target = self.desired_direction * (self.speed * time.elapsed)
        self.velocity = Vector2.lerp(self.velocity, target, self.responsiveness)
        self.translate(self.velocity)

        if self.confined:
            width, height = GameObject.screen_size
            top = left = _SCREEN_PADDING
            right = width - _SCREEN_PADDING
            bottom = height - _SCREEN_PADDING
            half = self.half_dimensions()

            if self.position.x - half.x < left:
                self.set_position(Vector2(left + half.x, self.position.y))
                self.velocity.x = 0.0
            if self.position.x + half.x > right:
                self.set_position(Vector2(right - half.x, self.position.y))
                self.velocity.x = 0.0
            if self.position.y - half.y < top:
                self.set_position(Vector2(self.position.x, top + half.y))
                self.velocity.y = 0.0
            if self.position.y + half.y > bottom:
                self.set_position(Vector2(self.position.x, bottom - half.y))
                self.velocity.y = 0.0

        super().update(time)

    def draw(self, sprite_batch: Any) -> None:
        if not self.is_active() or self.texture is None:
            return
        alpha = _level_alpha()
        sprite_batch.draw(self.texture, self.position, (alpha,) * 4, self.texture.center)

    def half_dimensions(self) -> Vector2:
        """Half the texture size, or the collision radius while no texture is loaded."""
        if self.texture is None:
            return super().half_dimensions()
        return self.texture.center.copy()

    def set_desired_direction(self, direction: Vector2) -> None:
        self.desired_direction = direction.copy()

    def confine_to_screen(self, confined: bool = True) -> None:
        """Keep the ship from moving off the screen."""
        self.confined = confined

    def set_responsiveness(self, responsiveness: float) -> None:
        """Set how quickly the ship reaches its desired velocity, clamped to [0, 1]."""
        self.responsiveness = min(max(responsiveness, 0.0), 1.0)

    def collision_type(self) -> CollisionType:
        return CollisionType.PLAYER | CollisionType.SHIP

    def __str__(self) -> str:
        return "Player Ship"