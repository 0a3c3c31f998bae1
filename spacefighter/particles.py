"""Particles and the pieces that create, update, draw and emit them."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, Tuple

from spacefighter.timing import FrameTime
from spacefighter.vector2 import Vector2

_log = logging.getLogger(__name__)

Color = Tuple[float, float, float, float]

WHITE: Color = (1.0, 1.0, 1.0, 1.0)


@dataclass
class Particle:
    """A basic particle that moves with a fixed velocity until its life runs out."""

    position: Vector2 = field(default_factory=Vector2)
    velocity: Vector2 = field(default_factory=Vector2)
    color: Color = WHITE
    scale: float = 1.0
    life_span: float = 0.0
    life_remaining: float = 0.0
    life_percentage: float = 0.0

    def is_active(self) -> bool:
        """True while the particle has life remaining."""
        return self.life_remaining > 0

    def initialize(self, position: Vector2) -> None:
        """Place the particle and restore its full life span."""
        self.position = position.copy()
        self.life_remaining = self.life_span

    def update(self, time: FrameTime) -> None:
        """Age the particle and move it by its velocity."""
        elapsed = time.elapsed
        self.life_remaining = max(self.life_remaining - elapsed, 0.0)
        if self.life_span > 0:
            self.life_percentage = self.life_remaining / self.life_span
        else:
            self.life_percentage = 0.0
        self.position += self.velocity * elapsed


class ParticleInitializer:
    """Gives a particle its life span, velocity, scale and color, then places it."""

    def __init__(self, color: Color = WHITE, scale: float = 1.0) -> None:
        self.color = color
        self.scale = scale
        self.life_span = 0.5
        self.velocity = Vector2.UNIT_Y * 50

    def initialize(self, particle: Particle, position: Vector2) -> None:
        particle.life_span = self.life_span
        particle.velocity = self.velocity.copy()
        particle.scale = self.scale
        particle.color = self.color
        particle.initialize(position)


class ParticleUpdater:
    """Updates a particle by letting it update itself."""

    def update(self, particle: Particle, time: FrameTime) -> None:
        particle.update(time)


class ParticleRenderer:
    """Draws a particle as a texture centred on its position."""

    def __init__(self, texture: Any = None) -> None:
        self.texture = texture

    def draw(self, particle: Particle, sprite_batch: Any) -> None:
        """Draw the particle; nothing is drawn while no texture is set."""
        if self.texture is None:
            _log.warning("No texture set for particle renderer!")
            return
        sprite_batch.draw(
            self.texture,
            particle.position,
            particle.color,
            self.texture.center,
            Vector2.ONE * particle.scale,
        )


class _ParticlePool(Protocol):
    def get_inactive_particle(self) -> Optional[Particle]:
        ...


class ParticleEmitter:
    """Takes inactive particles from a pool and initializes them at a position."""

    def __init__(
        self,
        initializer: ParticleInitializer,
        pool: Optional[_ParticlePool] = None,
    ) -> None:
        self.initializer = initializer
        self.pool = pool
        self.position = Vector2()
        self.max_particles_per_second = 100
        self.remaining_particles = 0.0

    def emit(self, amount: float, time: FrameTime) -> None:
        """Emit particles; amount in [0, 1] is the share of the maximum rate."""
        wanted = amount * self.max_particles_per_second * time.elapsed
        count = int(wanted)
        self.remaining_particles += wanted - count

        while count:
            if self.pool is None:
                raise RuntimeError("no particle pool set for emitter")
            particle = self.pool.get_inactive_particle()
            if particle is None:
                self.remaining_particles += count
                return
            self.initializer.initialize(particle, self.position)
            count -= 1