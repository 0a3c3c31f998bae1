import pytest

from spacefighter.resources import ResourceManager


class _Texture:
    def __init__(self):
        self.loaded_from = None
        self.id = None
        self.resource_manager = None

    def load(self, path, manager):
        self.loaded_from = path
        return not path.endswith("missing.png")

    def is_cloneable(self):
        return False

    def clone(self):
        raise AssertionError("not cloneable")


class _Animation(_Texture):
    def is_cloneable(self):
        return True

    def clone(self):
        copy = _Animation()
        copy.loaded_from = self.loaded_from
        return copy


def test_content_path_is_prepended():
    manager = ResourceManager("Content/")
    texture = manager.load(_Texture, "ship.png")
    assert texture.loaded_from == "Content/ship.png"
    assert texture.resource_manager is manager


def test_content_path_can_be_skipped():
    manager = ResourceManager("Content/")
    texture = manager.load(_Texture, "ship.png", True, False)
    assert texture.loaded_from == "ship.png"


def test_cached_resource_is_reused():
    manager = ResourceManager()
    first = manager.load(_Texture, "ship.png")
    second = manager.load(_Texture, "ship.png")
    assert first is second


def test_uncached_resource_is_loaded_again():
    manager = ResourceManager()
    first = manager.load(_Texture, "ship.png", cache=False)
    second = manager.load(_Texture, "ship.png", cache=False)
    assert first is not second
    assert second.id == first.id + 1


def test_ids_are_sequential():
    manager = ResourceManager()
    ids = [manager.load(_Texture, name).id for name in ("a.png", "b.png", "c.png")]
    assert ids == [0, 1, 2]


def test_failed_load_raises():
    manager = ResourceManager()
    with pytest.raises(OSError):
        manager.load(_Texture, "missing.png")


def test_failed_load_is_not_cached():
    manager = ResourceManager()
    with pytest.raises(OSError):
        manager.load(_Texture, "missing.png")
    with pytest.raises(OSError):
        manager.load(_Texture, "missing.png")


def test_cloneable_resource_hands_out_clones():
    manager = ResourceManager()
    original = manager.load(_Animation, "boom.anim")
    clone = manager.load(_Animation, "boom.anim")
    assert clone is not original
    assert clone.loaded_from == original.loaded_from
    assert clone.id == original.id + 1


def test_unload_all_forgets_cache():
    manager = ResourceManager()
    first = manager.load(_Texture, "ship.png")
    manager.unload_all()
    second = manager.load(_Texture, "ship.png")
    assert first is not second


def test_cached_resource_of_other_type_raises():
    manager = ResourceManager()
    manager.load(_Texture, "ship.png")
    with pytest.raises(TypeError):
        manager.load(_Animation, "ship.png")