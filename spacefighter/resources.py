"""Loading and caching of game resources."""

from __future__ import annotations

from typing import Any, Callable, Dict, List

_ID_LIMIT = 1 << 16


class ResourceManager:
    """Loads resources from files and keeps the ones it is asked to cache.

    A resource is made by a factory and must offer ``load(path, manager)``
    returning a bool, ``is_cloneable()`` and ``clone()``. The manager sets its
    ``resource_manager`` and ``id`` attributes.
    """

    def __init__(self, content_path: str = "") -> None:
        self.content_path = content_path
        self._resources: Dict[str, Any] = {}
        self._clones: List[Any] = []
        self._next_id = 0

    def _take_id(self) -> int:
        resource_id = self._next_id
        self._next_id = (self._next_id + 1) % _ID_LIMIT
        return resource_id

    def load(
        self,
        factory: Callable[[], Any],
        path: str,
        cache: bool = True,
        append_content_path: bool = True,
    ) -> Any:
        """Return the resource at path, loading it if it is not cached.

        A cached resource that can be cloned is handed out as a fresh clone.
        Raises OSError if the resource fails to load.
        """
        cached = self._resources.get(path)
        if cached is not None:
            if isinstance(factory, type) and not isinstance(cached, factory):
                raise TypeError(
                    f"resource {path!r} is a {type(cached).__name__}, "
                    f"not a {factory.__name__}"
                )
            if cached.is_cloneable():
                clone = cached.clone()
                clone.id = self._take_id()
                self._clones.append(clone)
                return clone
            return cached

        resource = factory()
        resource.resource_manager = self
        full_path = self.content_path + path if append_content_path else path

        if not resource.load(full_path, self):
            raise OSError(f"could not load resource {full_path!r}")

        if cache:
            self._resources[path] = resource
        resource.id = self._take_id()
        return resource

    def unload_all(self) -> None:
        """Forget every cached resource and every clone handed out."""
        self._resources.clear()
        self._clones.clear()