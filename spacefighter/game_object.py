"""Base class for objects in a level, and the attachment interfaces."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Iterator, Optional, Tuple, Union

from spacefighter.flags import CollisionType
from spacefighter.timing import FrameTime
from spacefighter.vector2 import Vector2


class Attachable(ABC):
    """Something that items can be attached to."""

    @abstractmethod
    def get_attachment(self, key: Union[str, int]) -> Optional["Attachment"]:
        """Find an attachment by its key or by its position among the attachments."""


class Attachment(ABC):
    """An item that can be attached to an attachable object."""

    @abstractmethod
    def attach_to(self, attachable: Attachable, offset: Vector2) -> None:
        """Attach the item at an offset from the attachable's position."""

    @abstractmethod
    def update(self, time: FrameTime) -> None:
        """Advance the item by one frame."""

    @property
    @abstractmethod
    def key(self) -> str:
        """The key the item is looked up by."""

    @property
    @abstractmethod
    def attachment_type(self) -> str:
        """The kind of item, such as "Weapon"."""


class GameObject(ABC):
    """An object that is updated, drawn and checked for collisions by a level."""

    current_level: ClassVar[Any] = None
    screen_size: ClassVar[Tuple[int, int]] = (1600, 900)
    _indices: ClassVar[Iterator[int]] = itertools.count()

    def __init__(self) -> None:
        self.index = next(GameObject._indices)
        self._active = False
        self.position = Vector2()
        self.previous_position = Vector2()
        self.collision_radius = 0.0

    @staticmethod
    def set_current_level(level: Any) -> None:
        """Set the level that active objects report their sector position to."""
        GameObject.current_level = level

    @staticmethod
    def set_screen_size(width: int, height: int) -> None:
        GameObject.screen_size = (width, height)

    def update(self, time: FrameTime) -> None:
        """Register the object's sector position with the current level."""
        if not self.is_active():
            return
        level = GameObject.current_level
        if level is None:
            return
        level.update_sector_position(self)

    @abstractmethod
    def draw(self, sprite_batch: Any) -> None:
        """Render the object."""

    @abstractmethod
    def collision_type(self) -> CollisionType:
        """The collision category of the object."""

    def activate(self) -> None:
        self._active = True

    def deactivate(self) -> None:
        self._active = False

    def is_active(self) -> bool:
        return self._active

    def half_dimensions(self) -> Vector2:
        """Half the size of the object; both components are the collision radius."""
        return Vector2(self.collision_radius, self.collision_radius)

    def hit(self, damage: float) -> None:
        """Apply damage; plain objects ignore it."""

    def has_mask(self, mask: CollisionType) -> bool:
        """True if the object's collision type shares a bit with the mask."""
        return mask.contains(self.collision_type())

    def is_mask(self, mask: CollisionType) -> bool:
        """True if the object's collision type is exactly the mask."""
        return self.collision_type() == mask

    def is_drawn_by_level(self) -> bool:
        return True

    def set_position(self, position: Vector2) -> None:
        """Move to a new position, remembering the old one."""
        self.previous_position = self.position
        self.position = Vector2(position.x, position.y)

    def translate(self, offset: Vector2) -> None:
        """Move by an offset."""
        self.set_position(self.position + offset)

    def is_on_screen(self) -> bool:
        """True if any part of the object lies within the screen."""
        width, height = GameObject.screen_size
        half = self.half_dimensions()
        x, y = self.position.x, self.position.y
        if y - half.y >= height:
            return False
        if y + half.y <= 0:
            return False
        if x - half.x >= width:
            return False
        if x + half.x <= 0:
            return False
        return True

    def __str__(self) -> str:
        return type(self).__name__