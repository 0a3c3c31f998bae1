import pytest

from spacefighter.flags import CollisionType
from spacefighter.game_object import Attachable, Attachment, GameObject
from spacefighter.timing import FrameTime
from spacefighter.vector2 import Vector2


class Body(GameObject):
    def __init__(self, kind=CollisionType.ENEMY | CollisionType.SHIP, radius=5):
        super().__init__()
        self.kind = kind
        self.collision_radius = radius

    def collision_type(self):
        return self.kind

    def draw(self, sprite_batch):
        sprite_batch.append(self)


class RecordingLevel:
    def __init__(self):
        self.reported = []

    def update_sector_position(self, game_object):
        self.reported.append(game_object)


@pytest.fixture
def level():
    recording = RecordingLevel()
    GameObject.set_current_level(recording)
    yield recording
    GameObject.set_current_level(None)


def test_indices_increase_with_each_object():
    first = Body()
    second = Body()
    assert second.index == first.index + 1
    assert GameObject.is_active(first) is False
    assert GameObject.is_active(second) is False


def test_new_object_is_inactive_until_activated():
    body = Body()
    assert GameObject.is_active(body) is False
    GameObject.activate(body)
    assert GameObject.is_active(body) is True
    GameObject.deactivate(body)
    assert GameObject.is_active(body) is False


def test_set_position_remembers_previous():
    body = Body()
    body.set_position(Vector2(3, 4))
    body.set_position(Vector2(7, 8))
    assert body.previous_position == Vector2(3, 4)
    assert body.position == Vector2(7, 8)


def test_translate_moves_by_offset():
    body = Body()
    body.set_position(Vector2(1, 2))
    body.translate(Vector2(10, -2))
    assert body.position == Vector2(11, 0)
    assert body.previous_position == Vector2(1, 2)


def test_half_dimensions_use_collision_radius():
    body = Body(radius=12)
    assert body.half_dimensions() == Vector2(12, 12)


def test_active_object_reports_to_level(level):
    body = Body()
    body.activate()
    body.update(FrameTime(0.1, 0.1))
    assert level.reported == [body]


def test_inactive_object_does_not_report(level):
    body = Body()
    body.update(FrameTime(0.1, 0.1))
    assert level.reported == []


def test_has_mask_and_is_mask():
    body = Body(CollisionType.ENEMY | CollisionType.SHIP)
    assert GameObject.has_mask(body, CollisionType.ENEMY)
    assert not GameObject.has_mask(body, CollisionType.PLAYER)
    assert GameObject.is_mask(body, CollisionType.ENEMY | CollisionType.SHIP)
    assert not GameObject.is_mask(body, CollisionType.ENEMY)


def test_object_in_middle_of_screen_is_on_screen():
    width, height = GameObject.screen_size
    body = Body()
    body.set_position(Vector2(width / 2, height / 2))
    assert body.is_on_screen() is True


@pytest.mark.parametrize("x, expected", [(-5, False), (-4, True)])
def test_left_edge_of_screen(x, expected):
    body = Body(radius=5)
    body.set_position(Vector2(x, 100))
    assert body.is_on_screen() is expected


def test_object_past_bottom_is_off_screen():
    width, height = GameObject.screen_size
    body = Body(radius=5)
    body.set_position(Vector2(width / 2, height + 5))
    assert body.is_on_screen() is False


def test_hit_leaves_plain_object_active():
    body = Body()
    GameObject.activate(body)
    GameObject.hit(body, 100)
    assert GameObject.is_active(body) is True


def test_interfaces_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Attachable()
    with pytest.raises(TypeError):
        Attachment()
    with pytest.raises(TypeError):
        GameObject()