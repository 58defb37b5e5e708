"""Herbivorous fish that graze on algae, breed and age."""

from __future__ import annotations

from typing import TYPE_CHECKING

from . import logger, rng
from .entity import Entity, EntityType

if TYPE_CHECKING:
    from .ocean import Ocean

HERBIVORE_INITIAL_ENERGY = 120
HERBIVORE_MAX_ENERGY = 250
HERBIVORE_MAX_AGE = 70
HERBIVORE_ENERGY_PER_TICK = 2
HERBIVORE_ENERGY_FROM_ALGAE = 30

HERBIVORE_REPRODUCTION_ENERGY_THRESHOLD = 180
HERBIVORE_REPRODUCTION_COST = 80
HERBIVORE_OFFSPRING_INITIAL_ENERGY = 90
HERBIVORE_REPRODUCTION_CHANCE_PERCENT = 25

HERBIVORE_SIGHT_RADIUS = 4
HERBIVORE_CRITICAL_ENERGY_THRESHOLD = 70


class HerbivoreFish(Entity):
    """A fish that eats adjacent algae, seeks it when hungry and otherwise wanders."""

    def __init__(self, initial_energy: int = HERBIVORE_INITIAL_ENERGY) -> None:
        self._energy = min(initial_energy, HERBIVORE_MAX_ENERGY)
        self._age = 0

    @property
    def energy(self) -> int:
        return self._energy

    @property
    def age(self) -> int:
        return self._age

    def is_dead(self) -> bool:
        return self._energy <= 0 or self._age >= HERBIVORE_MAX_AGE

    @property
    def symbol(self) -> str:
        if self.is_dead():
            return "x"
        if self._energy < HERBIVORE_CRITICAL_ENERGY_THRESHOLD // 2:
            return "h"
        return "H"

    @property
    def entity_type(self) -> EntityType:
        return EntityType.HERBIVORE

    def _try_to_eat(self, ocean: "Ocean", r: int, c: int) -> bool:
        algae = ocean.adjacent_cells_of_type(r, c, EntityType.ALGAE)
        if not algae:
            return False
        rng.shuffle(algae)
        ar, ac = algae[0]
        if ocean.remove_entity(ar, ac) is None:
            return False
        self._energy = min(self._energy + HERBIVORE_ENERGY_FROM_ALGAE, HERBIVORE_MAX_ENERGY)
        logger.debug("H @(", r, ",", c, ") moving to eat at (", ar, ",", ac, ")")
        ocean.move_entity(r, c, ar, ac)
        logger.info("H at (", ar, ",", ac, ") ate Algae. E:", self._energy)
        return True

    def _try_to_reproduce(self, ocean: "Ocean", r: int, c: int) -> bool:
        if self._energy < HERBIVORE_REPRODUCTION_ENERGY_THRESHOLD:
            return False
        if rng.get_int(1, 100) > HERBIVORE_REPRODUCTION_CHANCE_PERCENT:
            return False
        empty = ocean.empty_adjacent_cells(r, c)
        if not empty:
            return False
        rng.shuffle(empty)
        orow, ocol = empty[0]
        if not ocean.add_entity(HerbivoreFish(HERBIVORE_OFFSPRING_INITIAL_ENERGY), orow, ocol):
            return False
        self._energy -= HERBIVORE_REPRODUCTION_COST
        logger.info(
            "H at (", r, ",", c, ") reproduced to (", orow, ",", ocol,
            "). Parent E:", self._energy,
        )
        return True

    def _intelligent_move(self, ocean: "Ocean", r: int, c: int) -> None:
        if self._energy < HERBIVORE_CRITICAL_ENERGY_THRESHOLD * 1.5:
            dr, dc = ocean.direction_to_nearest_target(
                r, c, EntityType.ALGAE, HERBIVORE_SIGHT_RADIUS
            )
            if (dr, dc) != (0, 0):
                nr, nc = r + dr, c + dc
                if ocean.is_valid_coordinate(nr, nc):
                    occupant = ocean.get_entity(nr, nc)
                    if occupant is None:
                        logger.debug(
                            "H @(", r, ",", c, ") moving towards food to (", nr, ",", nc, ")"
                        )
                        ocean.move_entity(r, c, nr, nc)
                        return
                    if occupant.entity_type == EntityType.ALGAE:
                        logger.debug(
                            "H @(", r, ",", c, ") sees food at (", nr, ",", nc,
                            ") but cell not empty for step. Will try random.",
                        )

        logger.debug("H @(", r, ",", c, ") moving randomly.")
        empty = ocean.empty_adjacent_cells(r, c)
        if not empty:
            logger.debug("H @(", r, ",", c, ") has nowhere to move (randomly).")
            return
        rng.shuffle(empty)
        tr, tc = empty[0]
        logger.debug("H @(", r, ",", c, ") random move to (", tr, ",", tc, ")")
        ocean.move_entity(r, c, tr, tc)

    def update(self, ocean: "Ocean", r: int, c: int) -> None:
        """Age, spend energy, then eat, breed or move."""
        logger.debug("H updating @(", r, ",", c, "). E:", self._energy, ", Age:", self._age)
        self._age += 1
        self._energy -= HERBIVORE_ENERGY_PER_TICK

        if self.is_dead():
            logger.debug("H @(", r, ",", c, ") is dead at start of update.")
            return

        if self._try_to_eat(ocean, r, c):
            logger.debug("H @(", r, ",", c, ") ATE. Update finished.")
            return

        if self._energy > HERBIVORE_CRITICAL_ENERGY_THRESHOLD * 1.1:
            if self._try_to_reproduce(ocean, r, c):
                logger.debug("H @(", r, ",", c, ") REPRODUCED. Update might continue for move.")
                if self.is_dead():
                    logger.debug("H @(", r, ",", c, ") died after reproducing.")
                    return
                self._intelligent_move(ocean, r, c)
                return

        self._intelligent_move(ocean, r, c)

    def __repr__(self) -> str:
        return f"HerbivoreFish(energy={self._energy}, age={self._age})"