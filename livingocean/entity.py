"""Base type for everything that lives in the ocean grid."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .ocean import Ocean


class EntityType(Enum):
    """Kinds of grid inhabitant."""

    SAND = 0
    ALGAE = 1
    HERBIVORE = 2
    PREDATOR = 3


class Entity(ABC):
    """An inhabitant that acts once per tick from its grid cell."""

    @abstractmethod
    def update(self, ocean: "Ocean", r: int, c: int) -> None:
        """Act for one tick while standing at row ``r``, column ``c``."""

    @property
    @abstractmethod
    def symbol(self) -> str:
        """Single character used when the grid is drawn as text."""

    @property
    @abstractmethod
    def entity_type(self) -> EntityType:
        """The kind of this entity."""

    def is_dead(self) -> bool:
        """Whether the entity should be removed at the end of the tick."""
        return False