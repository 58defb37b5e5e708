"""Algae: stationary food that occasionally spreads to a neighbouring cell."""

from __future__ import annotations

from typing import TYPE_CHECKING

from . import logger, rng
from .entity import Entity, EntityType

if TYPE_CHECKING:
    from .ocean import Ocean

ALGAE_REPRODUCTION_CHANCE_PERCENT = 3


class Algae(Entity):
    """A patch of algae; it never dies of its own accord."""

    def update(self, ocean: "Ocean", r: int, c: int) -> None:
        """With a small chance, seed a new patch in a random empty neighbouring cell."""
        if rng.get_int(1, 100) > ALGAE_REPRODUCTION_CHANCE_PERCENT:
            return
        empty = ocean.empty_adjacent_cells(r, c)
        if not empty:
            return
        rng.shuffle(empty)
        tr, tc = empty[0]
        if ocean.add_entity(Algae(), tr, tc):
            logger.debug("Algae at (", r, ",", c, ") reproduced to (", tr, ",", tc, ")")

    @property
    def symbol(self) -> str:
        return "A"

    @property
    def entity_type(self) -> EntityType:
        return EntityType.ALGAE

    def __repr__(self) -> str:
        return "Algae()"