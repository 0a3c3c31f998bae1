# spacefighter

The game logic of a top-down space shooter in plain Python, with no runtime
dependencies: vector maths, rectangular regions, input enums, bit-mask
collision and trigger flags, a particle system, a resource manager, game
objects, projectiles, weapons, ships, explosions and levels with
sector-based collision checks.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## A quick tour

```python
from spacefighter.vector2 import Vector2

a = Vector2(3, 4)
print(a.length())                                        # 5.0
print(Vector2.lerp(Vector2(0, 0), Vector2(10, 0), 0.5))  # { 5, 0 }
print(a + Vector2(1, 1), a * 2, -a)
```

Collision and trigger types are bit masks that combine with `|`:

```python
from spacefighter.flags import CollisionType, TriggerType

player_projectile = CollisionType.PLAYER | CollisionType.PROJECTILE
enemy_ship = CollisionType.ENEMY | CollisionType.SHIP
print(player_projectile.contains(CollisionType.PROJECTILE))   # True
print(TriggerType.ALL.contains(TriggerType.PRIMARY))          # True
```

A `CollisionManager` calls a function when two objects of a registered pair
of types overlap (their collision radii touch). The callback receives the
two objects ordered by collision type value, lowest first; here the enemy
ship (`ENEMY | SHIP`) comes before the player's shot:

```python
from spacefighter.collision import CollisionManager

manager = CollisionManager()
manager.add_collision_type(player_projectile, enemy_ship,
                           lambda enemy, shot: print("hit!"))
```

Pairs that are neither registered nor excluded with
`add_non_collision_type` are remembered as excluded the first time they
are checked.

## Running a level

A `Level` owns the player ship (with a `Blaster` called "Main Blaster"), a
pool of 100 projectiles and whatever enemies you add. Each frame it sorts
active objects into 64-pixel screen sectors and checks collisions only
within a sector.

```python
from spacefighter.input import Key
from spacefighter.level import Level, level_layout
from spacefighter.timing import FrameTime

level = Level()
level.populate(level_layout(0), spawn_y=-20)   # 21 BioEnemyShips for level 0

time = FrameTime()
for _ in range(600):
    level.handle_input({Key.UP, Key.SPACE})    # keys held down this frame
    level.update(time.advance(1 / 60))
```

`level_layout(0)` and `level_layout(1)` give the enemy wave and background
texture path of the two levels; any other index raises `ValueError`.
Screen size defaults to 1600 × 900 and is changed with
`GameObject.set_screen_size`.

Pass a screen object with `alpha()` and `exit()` as `Level(level_index,
screen)` to fade input out while `alpha()` is below 1 and to have `exit()`
called once the player ship is destroyed. `Level.load_content` loads the
enemy texture, background, player ship texture and sound, and ten
explosions through a `ResourceManager`, using the factories you pass in.

## Modules

- `spacefighter.vector2`: `Vector2`
- `spacefighter.region`: `Region`
- `spacefighter.timing`: `FrameTime`
- `spacefighter.input`: `Key`, `MouseButton`, `Button`, `ButtonState`, `GamePadState` and its parts
- `spacefighter.flags`: `CollisionType`, `TriggerType`
- `spacefighter.particles`: `Particle`, `ParticleInitializer`, `ParticleUpdater`, `ParticleRenderer`, `ParticleEmitter`
- `spacefighter.resources`: `ResourceManager`
- `spacefighter.collision`: `CollisionManager`
- `spacefighter.game_object`: `GameObject`, `Attachable`, `Attachment`
- `spacefighter.projectile`: `Projectile`
- `spacefighter.weapons`: `Weapon`, `Blaster`
- `spacefighter.ships`: `Ship`, `EnemyShip`, `BioEnemyShip`, `PlayerShip`
- `spacefighter.explosion`: `Explosion`
- `spacefighter.level`: `Level`, `level_layout`, `player_shoots_enemy`, `player_collides_with_enemy`

## What the package does not do

- It opens no window, runs no main loop and has no command to start a game.
  You drive it frame by frame with `handle_input` and `update`.
- It has no menu or title screens; a level's screen is whatever object you
  pass in.
- It draws nothing itself. The `draw` methods call `draw`, `begin` and `end`
  on a sprite batch object that you supply.
- It reads no image, sound or animation files. `ResourceManager.load` calls
  your factory and the resource's own `load(path, manager)`, and only caches
  and clones what comes back.
- It reads no keyboard, mouse or game pad. You tell it which `Key` values
  are held down.