"""A small entity-component store: entities are integers, components are objects keyed by type."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, TypeVar

T = TypeVar("T")


class NoSuchEntity(LookupError):
    """The entity does not exist in the world."""


class ComponentMissing(LookupError):
    """The entity (or the world) has no component of the requested type."""


class World:
    """Holds entities and their components, at most one component per type."""

    def __init__(self) -> None:
        self._entities: dict[int, dict[type, Any]] = {}
        self._next_id = 0

    def __len__(self) -> int:
        return len(self._entities)

    def _components(self, entity: int) -> dict[type, Any]:
        try:
            return self._entities[entity]
        except KeyError:
            raise NoSuchEntity(entity) from None

    def spawn(self, *components: Any) -> int:
        """Create an entity holding the given components and return it."""
        entity = self._next_id
        self._next_id += 1
        self._entities[entity] = {type(c): c for c in components}
        return entity

    def despawn(self, entity: int) -> None:
        """Remove an entity and all its components."""
        self._components(entity)
        del self._entities[entity]

    def insert(self, entity: int, *components: Any) -> None:
        """Add components to an entity, replacing any of the same type."""
        store = self._components(entity)
        for component in components:
            store[type(component)] = component

    def remove(self, entity: int, component_type: type[T]) -> T:
        """Detach and return the component of the given type."""
        store = self._components(entity)
        try:
            return store.pop(component_type)
        except KeyError:
            raise ComponentMissing(component_type.__name__) from None

    def get(self, entity: int, component_type: type[T]) -> T:
        """Return the entity's component of the given type."""
        store = self._components(entity)
        try:
            return store[component_type]
        except KeyError:
            raise ComponentMissing(component_type.__name__) from None

    def has(self, entity: int, component_type: type) -> bool:
        """Whether the entity holds a component of the given type."""
        return component_type in self._components(entity)

    def contains(self, entity: int) -> bool:
        """Whether the entity exists."""
        return entity in self._entities

    def query(
        self, *component_types: type, without: type | Iterable[type] = ()
    ) -> Iterator[tuple[int, tuple[Any, ...]]]:
        """Yield ``(entity, components)`` for entities holding every requested type.

        Entities holding any type in ``without`` are skipped. Entities come in
        creation order; the world may be changed while iterating.
        """
        excluded = (without,) if isinstance(without, type) else tuple(without)
        for entity, store in list(self._entities.items()):
            if entity not in self._entities:
                continue
            if all(t in store for t in component_types) and not any(
                t in store for t in excluded
            ):
                yield entity, tuple(store[t] for t in component_types)

    def single(self, component_type: type[T]) -> tuple[int, T]:
        """Return the most recently created entity holding the type, with the component."""
        found: tuple[int, T] | None = None
        for entity, (component,) in self.query(component_type):
            found = (entity, component)
        if found is None:
            raise ComponentMissing(f"no entity with {component_type.__name__}")
        return found

    def entities(self) -> list[int]:
        """All entities, in creation order."""
        return list(self._entities)

    def clear(self) -> None:
        """Remove every entity."""
        self._entities.clear()