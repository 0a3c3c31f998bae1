"""Levels: the game objects in play, collision sectors and enemy waves."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Callable, Collection, List, Optional, Protocol, Tuple, Type, TypeVar

from spacefighter.collision import CollisionManager
from spacefighter.explosion import Explosion
from spacefighter.flags import CollisionType
from spacefighter.game_object import GameObject
from spacefighter.input import Key
from spacefighter.projectile import Projectile
from spacefighter.ships import BioEnemyShip, PlayerShip
from spacefighter.timing import FrameTime
from spacefighter.vector2 import Vector2
from spacefighter.weapons import Blaster

T = TypeVar("T", bound=GameObject)

_SECTOR_SIZE = 64
_PROJECTILE_COUNT = 100
_EXPLOSION_COUNT = 10
_APPROXIMATE_TEXTURE_RADIUS = 120.0
_DRAMATIC_EFFECT = 2.2
_START_DELAY = 3.0


class _Screen(Protocol):
    def alpha(self) -> float:
        ...

    def exit(self) -> None:
        ...


@dataclass(frozen=True)
class SpawnPoint:
    """Where an enemy enters, as a share of the screen width, and when."""

    x_fraction: float
    delay_seconds: float


@dataclass(frozen=True)
class LevelLayout:
    """The enemy wave and background texture of one level."""

    background: str
    spawns: Tuple[SpawnPoint, ...]


_WAVE_X = (
    0.25, 0.2, 0.3,
    0.75, 0.8, 0.7,
    0.3, 0.25, 0.35, 0.2, 0.4,
    0.7, 0.75, 0.65, 0.8, 0.6,
    0.5, 0.4, 0.6, 0.45, 0.55,
)

_WAVE_DELAYS = (
    0.0, 0.25, 0.25,
    3.0, 0.25, 0.25,
    3.25, 0.25, 0.25, 0.25, 0.25,
    3.25, 0.25, 0.25, 0.25, 0.25,
    3.5, 0.3, 0.3, 0.3, 0.3,
)

_LEVELS = (
    ("Textures/SpaceBackground01.png", _WAVE_X, _WAVE_DELAYS),
    ("Textures/mikebackground.png", _WAVE_X + (0.6,), _WAVE_DELAYS + (0.3,)),
)


def level_layout(level_index: int) -> LevelLayout:
    """The layout of a level; delays are counted from the start of the level."""
    if not 0 <= level_index < len(_LEVELS):
        raise ValueError(f"no level with index {level_index}")
    background, xs, gaps = _LEVELS[level_index]
    spawns = []
    delay = _START_DELAY
    for x, gap in zip(xs, gaps):
        delay += gap
        spawns.append(SpawnPoint(x, delay))
    return LevelLayout(background, tuple(spawns))


def player_shoots_enemy(first: GameObject, second: GameObject) -> None:
    """A player projectile hits an enemy ship: damage the ship, spend the shot."""
    first_is_enemy = first.has_mask(CollisionType.ENEMY)
    enemy = first if first_is_enemy else second
    projectile = second if first_is_enemy else first
    enemy.hit(projectile.damage)  # type: ignore[attr-defined]
    projectile.deactivate()


def player_collides_with_enemy(first: GameObject, second: GameObject) -> None:
    """The player rams an enemy ship: both are destroyed."""
    first_is_player = first.has_mask(CollisionType.PLAYER)
    player = first if first_is_player else second
    enemy = second if first_is_player else first
    player.hit(sys.float_info.max)
    enemy.hit(sys.float_info.max)


def _sector_of(coordinate: int, count: int) -> int:
    return min(max(int(coordinate / _SECTOR_SIZE), 0), count - 1)


class Level:
    """Holds the player, projectiles, enemies and explosions of one level."""

    def __init__(self, level_index: Optional[int] = None, screen: Optional[_Screen] = None) -> None:
        self.level_index = level_index
        self.screen = screen
        self.background: Any = None
        self.background_audio: Any = None
        self.enemy_texture: Any = None
        self.explosions: List[Explosion] = []
        self.game_objects: List[GameObject] = []
        self.projectiles: List[Projectile] = []

        width, height = GameObject.screen_size
        self.sector_count = (width // _SECTOR_SIZE + 1, height // _SECTOR_SIZE + 1)
        columns, rows = self.sector_count
        self.sectors: List[List[GameObject]] = [[] for _ in range(columns * rows)]
        self.collision_manager = CollisionManager()

        GameObject.set_current_level(self)

        self.player_ship = PlayerShip()
        blaster = Blaster("Main Blaster", projectile_pool=self.projectiles)
        self.player_ship.attach_item(blaster, Vector2.UNIT_Y * -20)

        for _ in range(_PROJECTILE_COUNT):
            projectile = Projectile()
            self.projectiles.append(projectile)
            self.add_game_object(projectile)

        self.player_ship.activate()
        self.add_game_object(self.player_ship)

        player_ship = CollisionType.PLAYER | CollisionType.SHIP
        player_projectile = CollisionType.PLAYER | CollisionType.PROJECTILE
        enemy_ship = CollisionType.ENEMY | CollisionType.SHIP

        manager = self.collision_manager
        manager.add_non_collision_type(player_ship, player_projectile)
        manager.add_collision_type(player_projectile, enemy_ship, player_shoots_enemy)
        manager.add_collision_type(player_ship, enemy_ship, player_collides_with_enemy)

    def load_content(
        self,
        resources: Any,
        texture_factory: Callable[[], Any],
        sound_factory: Callable[[], Any],
        animation_factory: Callable[[], Any],
    ) -> None:
        """Load the enemy wave, background, player ship and explosions."""
        if self.level_index is not None:
            layout = level_layout(self.level_index)
            self.enemy_texture = resources.load(texture_factory, "Textures/BioEnemyShip.png")
            self.populate(layout, -self.enemy_texture.center.y)
            self.background = resources.load(texture_factory, layout.background)

        self.player_ship.load_content(resources, texture_factory, sound_factory)

        if not self.explosions:
            sound = resources.load(sound_factory, "Audio/Effects/Explosion.ogg")
            animation = resources.load(animation_factory, "Animations/Explosion.anim")
            animation.stop()
            for _ in range(_EXPLOSION_COUNT):
                self.add_explosion(Explosion(animation.clone(), sound))

    def populate(self, layout: LevelLayout, spawn_y: float) -> List[BioEnemyShip]:
        """Add an enemy ship for each spawn point of the layout at height spawn_y."""
        width, _ = GameObject.screen_size
        ships = []
        for spawn in layout.spawns:
            ship = BioEnemyShip(self.enemy_texture)
            GameObject.set_current_level(self)
            ship.initialize(Vector2(spawn.x_fraction * width, spawn_y), spawn.delay_seconds)
            self.add_game_object(ship)
            ships.append(ship)
        return ships

    def add_game_object(self, game_object: GameObject) -> None:
        """Add an object to be updated, drawn and checked for collisions."""
        self.game_objects.append(game_object)

    def add_explosion(self, explosion: Explosion) -> None:
        """Add an explosion to the pool used by spawn_explosion."""
        self.explosions.append(explosion)

    def handle_input(self, pressed_keys: Collection[Key]) -> None:
        """Pass input to the player's ship unless the screen is transitioning."""
        if self.is_screen_transitioning():
            return
        self.player_ship.handle_input(pressed_keys)

    def update(self, time: FrameTime) -> None:
        """Update every object, resolve collisions and end the level if the player died."""
        for sector in self.sectors:
            sector.clear()

        for game_object in self.game_objects:
            game_object.update(time)

        for sector in self.sectors:
            if len(sector) > 1:
                self._check_collisions(sector)

        for explosion in self.explosions:
            explosion.update(time)

        if not self.player_ship.is_active() and self.screen is not None:
            self.screen.exit()

    def update_sector_position(self, game_object: GameObject) -> None:
        """Record the object in every sector its bounds overlap."""
        position = game_object.position
        half = game_object.half_dimensions()
        columns, rows = self.sector_count

        min_x = _sector_of(int(position.x - half.x - 0.5), columns)
        max_x = _sector_of(int(position.x + half.x + 0.5), columns)
        min_y = _sector_of(int(position.y - half.y - 0.5), rows)
        max_y = _sector_of(int(position.y + half.y + 0.5), rows)

        for x in range(min_x, max_x + 1):
            for y in range(min_y, max_y + 1):
                self.sectors[y * columns + x].append(game_object)

    def _check_collisions(self, objects: List[GameObject]) -> None:
        for i, first in enumerate(objects):
            if not first.is_active():
                continue
            for second in objects[i + 1:]:
                if not first.is_active():
                    break
                if second.is_active():
                    self.collision_manager.check_collision(first, second)

    def spawn_explosion(self, exploding_object: GameObject) -> Optional[Explosion]:
        """Play an idle explosion sized to the object; None if all are playing."""
        explosion = next((e for e in self.explosions if not e.is_active()), None)
        if explosion is None:
            return None
        size_scale = (1 / _APPROXIMATE_TEXTURE_RADIUS) * exploding_object.collision_radius * 2
        explosion.activate(exploding_object.position, size_scale * _DRAMATIC_EFFECT)
        return explosion

    def alpha(self) -> float:
        """The screen's fade value; fully opaque when there is no screen."""
        return self.screen.alpha() if self.screen is not None else 1.0

    def is_screen_transitioning(self) -> bool:
        return self.alpha() < 1

    def closest_object(
        self, position: Vector2, max_range: float, kind: Type[T]
    ) -> Optional[T]:
        """The nearest inactive object of the given kind within range.

        A range of zero or less means the whole screen. Active objects are
        passed over.
        """
        squared_range = max_range * max_range
        if max_range <= 0:
            width, height = GameObject.screen_size
            squared_range = width * width + height * height

        closest: Optional[T] = None
        for game_object in self.game_objects:
            if game_object.is_active():
                continue
            squared_distance = (position - game_object.position).length_squared()
            if squared_distance < squared_range and isinstance(game_object, kind):
                closest = game_object
                squared_range = squared_distance
        return closest

    def draw(self, sprite_batch: Any) -> None:
        """Draw the background and objects, then the explosions additively."""
        sprite_batch.begin()
        alpha = self.alpha()
        if self.background is not None:
            sprite_batch.draw(self.background, Vector2.ZERO, (alpha,) * 4)
        for game_object in self.game_objects:
            game_object.draw(sprite_batch)
        sprite_batch.end()

        sprite_batch.begin(blend="additive")
        for explosion in self.explosions:
            explosion.draw(sprite_batch)
        sprite_batch.end()