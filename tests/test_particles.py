import pytest

from spacefighter.particles import (
    WHITE,
    Particle,
    ParticleEmitter,
    ParticleInitializer,
    ParticleRenderer,
    ParticleUpdater,
)
from spacefighter.timing import FrameTime
from spacefighter.vector2 import Vector2


class _Pool:
    def __init__(self, size):
        self.particles = [Particle() for _ in range(size)]

    def get_inactive_particle(self):
        return next((p for p in self.particles if not p.is_active()), None)


class _Batch:
    def __init__(self):
        self.calls = []

    def draw(self, *args):
        self.calls.append(args)


class _Texture:
    center = Vector2(8, 8)


def _frame(seconds):
    return FrameTime().advance(seconds)


def test_new_particle_is_inactive():
    assert Particle().is_active() is False


def test_initialize_restores_life_and_position():
    particle = Particle(life_span=2.0)
    start = Vector2(3, 4)
    particle.initialize(start)
    assert particle.is_active()
    assert particle.life_remaining == 2.0
    assert particle.position == start


def test_initialize_does_not_alias_position():
    particle = Particle(life_span=1.0, velocity=Vector2(1, 0))
    start = Vector2(0, 0)
    particle.initialize(start)
    particle.update(_frame(0.5))
    assert start == Vector2(0, 0)


def test_update_moves_by_velocity():
    particle = Particle(velocity=Vector2(2, -4), life_span=10.0)
    particle.initialize(Vector2(1, 1))
    particle.update(_frame(0.5))
    assert particle.position == Vector2(1, 1) + Vector2(2, -4) * 0.5


def test_life_clamps_at_zero():
    particle = Particle(life_span=0.5)
    particle.initialize(Vector2())
    particle.update(_frame(2.0))
    assert particle.life_remaining == 0.0
    assert particle.life_percentage == 0.0
    assert not particle.is_active()


def test_life_percentage_is_share_of_span():
    particle = Particle(life_span=4.0)
    particle.initialize(Vector2())
    particle.update(_frame(1.0))
    assert particle.life_percentage == pytest.approx(
        particle.life_remaining / particle.life_span
    )


def test_initializer_defaults():
    initializer = ParticleInitializer()
    particle = Particle()
    initializer.initialize(particle, Vector2(5, 6))
    assert particle.life_span == 0.5
    assert particle.velocity == Vector2.UNIT_Y * 50
    assert particle.scale == 1.0
    assert particle.color == WHITE
    assert particle.position == Vector2(5, 6)
    assert particle.is_active()


def test_initializer_custom_color_and_scale():
    color = (1.0, 0.0, 0.0, 1.0)
    initializer = ParticleInitializer(color, 3.0)
    particle = Particle()
    initializer.initialize(particle, Vector2())
    assert particle.color == color
    assert particle.scale == 3.0


def test_updater_delegates_to_particle():
    particle = Particle(life_span=1.0)
    particle.initialize(Vector2())
    ParticleUpdater().update(particle, _frame(0.25))
    assert particle.life_remaining == pytest.approx(0.75)


def test_renderer_without_texture_draws_nothing():
    batch = _Batch()
    ParticleRenderer().draw(Particle(), batch)
    assert batch.calls == []


def test_renderer_draws_scaled_texture():
    batch = _Batch()
    texture = _Texture()
    particle = Particle(position=Vector2(10, 20), scale=2.0)
    ParticleRenderer(texture).draw(particle, batch)
    assert batch.calls == [
        (texture, Vector2(10, 20), WHITE, texture.center, Vector2.ONE * 2.0)
    ]


def test_emitter_initializes_whole_count():
    pool = _Pool(20)
    emitter = ParticleEmitter(ParticleInitializer(), pool)
    emitter.max_particles_per_second = 10
    emitter.position = Vector2(7, 9)
    emitter.emit(1.0, _frame(0.5))
    active = [p for p in pool.particles if p.is_active()]
    assert len(active) == 5
    assert all(p.position == Vector2(7, 9) for p in active)
    assert emitter.remaining_particles == 0.0


def test_emitter_keeps_fraction():
    pool = _Pool(20)
    emitter = ParticleEmitter(ParticleInitializer(), pool)
    emitter.max_particles_per_second = 10
    emitter.emit(0.25, _frame(1.0))
    active = [p for p in pool.particles if p.is_active()]
    assert len(active) == 2
    assert emitter.remaining_particles == pytest.approx(0.5)


def test_emitter_remembers_particles_it_could_not_emit():
    pool = _Pool(2)
    emitter = ParticleEmitter(ParticleInitializer(), pool)
    emitter.max_particles_per_second = 10
    emitter.emit(1.0, _frame(0.5))
    assert all(p.is_active() for p in pool.particles)
    assert emitter.remaining_particles == 3


def test_emitter_without_pool_raises():
    emitter = ParticleEmitter(ParticleInitializer())
    with pytest.raises(RuntimeError):
        emitter.emit(1.0, _frame(1.0))


def test_emitter_zero_amount_needs_no_pool():
    emitter = ParticleEmitter(ParticleInitializer())
    emitter.emit(0.0, _frame(1.0))
    assert emitter.remaining_particles == 0.0