"""Registry of map link providers keyed by provider id."""

from __future__ import annotations

import logging
from typing import Any, Callable

from map_link.exceptions import DuplicateMapLinkError, UnknownMapLinkError
from map_link.providers import (
    AppleMapsLink,
    GoogleDirectionsLink,
    GoogleSearchLink,
    MapLinkBase,
    OpenStreetMapLink,
)

logger = logging.getLogger(__name__)

MapLinkFactory = Callable[..., MapLinkBase]

BUILTIN_MAP_LINKS: tuple[type[MapLinkBase], ...] = (
    GoogleDirectionsLink,
    GoogleSearchLink,
    AppleMapsLink,
    OpenStreetMapLink,
)


class MapLinkRegistry:
    """Map provider ids to factories that build ``MapLinkBase`` instances.

    A factory is any callable accepting the ``MapLinkBase`` constructor
    keyword arguments; provider classes themselves qualify.
    """

    def __init__(self) -> None:
        self._factories: dict[str, MapLinkFactory] = {}
        self._names: dict[str, str] = {}

    def register(
        self,
        link_id: str,
        factory: MapLinkFactory,
        name: str | None = None,
    ) -> None:
        """Register ``factory`` under ``link_id``.

        Raises
        ------
        DuplicateMapLinkError
            If ``link_id`` is already registered.
        """
        if link_id in self._factories:
            raise DuplicateMapLinkError(f"Map link {link_id!r} is already registered")
        self._factories[link_id] = factory
        self._names[link_id] = name or getattr(factory, "name", link_id)
        logger.debug("Registered map link %s", link_id)

    def register_class(self, link_class: type[MapLinkBase]) -> None:
        """Register a provider class under its own ``id`` and ``name``."""
        self.register(link_class.id, link_class, link_class.name)

    def create(self, link_id: str, **kwargs: Any) -> MapLinkBase:
        """Instantiate the provider registered as ``link_id``.

        Raises
        ------
        UnknownMapLinkError
            If ``link_id`` is not registered.
        """
        factory = self._factories.get(link_id)
        if factory is None:
            known = ", ".join(sorted(self._factories)) or "none"
            raise UnknownMapLinkError(
                f"Unknown map link {link_id!r} (available: {known})"
            )
        return factory(**kwargs)

    def available(self) -> dict[str, str]:
        """Return provider id -> display name, sorted by id."""
        return {link_id: self._names[link_id] for link_id in sorted(self._names)}

    def __contains__(self, link_id: object) -> bool:
        return link_id in self._factories

    def __len__(self) -> int:
        return len(self._factories)


def default_registry() -> MapLinkRegistry:
    """Return a new registry holding the built-in providers."""
    registry = MapLinkRegistry()
    for link_class in BUILTIN_MAP_LINKS:
        registry.register_class(link_class)
    return registry


_DEFAULT_REGISTRY = default_registry()


def get_map_link(link_id: str, **kwargs: Any) -> MapLinkBase:
    """Instantiate a built-in provider by id."""
    return _DEFAULT_REGISTRY.create(link_id, **kwargs)
