"""Predatory fish that hunt herbivores, breed and age."""

from __future__ import annotations

from typing import TYPE_CHECKING

from . import logger, rng
from .entity import Entity, EntityType

if TYPE_CHECKING:
    from .ocean import Ocean

PREDATOR_INITIAL_ENERGY = 180
PREDATOR_MAX_ENERGY = 350
PREDATOR_MAX_AGE = 90
PREDATOR_ENERGY_PER_TICK = 3
PREDATOR_ENERGY_FROM_HERBIVORE = 75

PREDATOR_REPRODUCTION_ENERGY_THRESHOLD = 280
PREDATOR_REPRODUCTION_COST = 130
PREDATOR_OFFSPRING_INITIAL_ENERGY = 120
PREDATOR_REPRODUCTION_CHANCE_PERCENT = 10

PREDATOR_SIGHT_RADIUS = 6
PREDATOR_CRITICAL_ENERGY_THRESHOLD = 90


class PredatorFish(Entity):
    """A fish that eats adjacent herbivores, hunts when hungry and otherwise explores."""

    def __init__(self, initial_energy: int = PREDATOR_INITIAL_ENERGY) -> None:
        self._energy = min(initial_energy, PREDATOR_MAX_ENERGY)
        self._age = 0

    @property
    def energy(self) -> int:
        return self._energy

    @property
    def age(self) -> int:
        return self._age

    def is_dead(self) -> bool:
        return self._energy <= 0 or self._age >= PREDATOR_MAX_AGE

    @property
    def symbol(self) -> str:
        if self.is_dead():
            return "x"
        if self._energy < PREDATOR_CRITICAL_ENERGY_THRESHOLD // 2:
            return "p"
        return "P"

    @property
    def entity_type(self) -> EntityType:
        return EntityType.PREDATOR

    def _try_to_eat(self, ocean: "Ocean", r: int, c: int) -> bool:
        prey = ocean.adjacent_cells_of_type(r, c, EntityType.HERBIVORE)
        if not prey:
            return False
        rng.shuffle(prey)
        pr, pc = prey[0]
        eaten = ocean.remove_entity(pr, pc)
        if eaten is None:
            return False
        if eaten.entity_type != EntityType.HERBIVORE:
            logger.warn(
                "P @(", r, ",", c, ") tried to eat non-herbivore at (", pr, ",", pc, ")"
            )
            ocean.add_entity(eaten, pr, pc)
            return False
        self._energy = min(self._energy + PREDATOR_ENERGY_FROM_HERBIVORE, PREDATOR_MAX_ENERGY)
        ocean.move_entity(r, c, pr, pc)
        logger.info("P at (", pr, ",", pc, ") ate Herbivore. E:", self._energy)
        return True

    def _try_to_reproduce(self, ocean: "Ocean", r: int, c: int) -> bool:
        if self._energy < PREDATOR_REPRODUCTION_ENERGY_THRESHOLD:
            return False
        if rng.get_int(1, 100) > PREDATOR_REPRODUCTION_CHANCE_PERCENT:
            return False
        empty = ocean.empty_adjacent_cells(r, c)
        if not empty:
            return False
        rng.shuffle(empty)
        orow, ocol = empty[0]
        if not ocean.add_entity(PredatorFish(PREDATOR_OFFSPRING_INITIAL_ENERGY), orow, ocol):
            return False
        self._energy -= PREDATOR_REPRODUCTION_COST
        logger.info(
            "P at (", r, ",", c, ") reproduced to (", orow, ",", ocol,
            "). Parent E:", self._energy,
        )
        return True

    def _hunt_or_explore(self, ocean: "Ocean", r: int, c: int) -> None:
        if self._energy < PREDATOR_CRITICAL_ENERGY_THRESHOLD * 1.5:
            dr, dc = ocean.direction_to_nearest_target(
                r, c, EntityType.HERBIVORE, PREDATOR_SIGHT_RADIUS
            )
            if (dr, dc) != (0, 0):
                nr, nc = r + dr, c + dc
                if ocean.is_valid_coordinate(nr, nc):
                    occupant = ocean.get_entity(nr, nc)
                    if occupant is None or occupant.entity_type == EntityType.HERBIVORE:
                        logger.debug(
                            "P @(", r, ",", c, ") moving towards prey to (", nr, ",", nc, ")"
                        )
                        ocean.move_entity(r, c, nr, nc)
                        return

        logger.debug("P @(", r, ",", c, ") exploring randomly.")
        empty = ocean.empty_adjacent_cells(r, c)
        if not empty:
            logger.debug("P @(", r, ",", c, ") has nowhere to move (exploring).")
            return
        rng.shuffle(empty)
        tr, tc = empty[0]
        logger.debug("P @(", r, ",", c, ") random move to (", tr, ",", tc, ")")
        ocean.move_entity(r, c, tr, tc)

    def update(self, ocean: "Ocean", r: int, c: int) -> None:
        """Age, spend energy, then eat, or possibly breed and then hunt or explore."""
        logger.debug("P updating @(", r, ",", c, "). E:", self._energy, ", Age:", self._age)
        self._age += 1
        self._energy -= PREDATOR_ENERGY_PER_TICK

        if self.is_dead():
            logger.debug("P @(", r, ",", c, ") is dead at start of update.")
            return

        if self._try_to_eat(ocean, r, c):
            logger.debug("P @(", r, ",", c, ") ATE. Update finished.")
            return

        if self._energy > PREDATOR_CRITICAL_ENERGY_THRESHOLD * 1.2:
            if self._try_to_reproduce(ocean, r, c):
                logger.debug("P @(", r, ",", c, ") REPRODUCED. Update might continue.")
                if self.is_dead():
                    logger.debug("P @(", r, ",", c, ") died after reproducing.")
                    return

        self._hunt_or_explore(ocean, r, c)

    def __repr__(self) -> str:
        return f"PredatorFish(energy={self._energy}, age={self._age})"