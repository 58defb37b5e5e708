"""The rectangular ocean grid and the rules for placing and moving entities."""

from __future__ import annotations

from typing import List, Optional, Tuple

from . import logger, rng
from .entity import Entity, EntityType

Cell = Tuple[int, int]

_NEIGHBOUR_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


class Ocean:
    """A grid of cells, each empty or holding one entity."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows <= 0 or cols <= 0:
            message = f"Ocean dimensions must be positive. Requested: {rows}x{cols}"
            logger.error(message)
            raise ValueError(message)
        self._rows = rows
        self._cols = cols
        self._grid: List[List[Optional[Entity]]] = [[None] * cols for _ in range(rows)]
        logger.info("Ocean created with size ", rows, "x", cols, ".")

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def is_valid_coordinate(self, r: int, c: int) -> bool:
        """Whether (r, c) lies inside the grid."""
        return 0 <= r < self._rows and 0 <= c < self._cols

    def _require_inside(self, where: str, r: int, c: int) -> None:
        if not self.is_valid_coordinate(r, c):
            message = (
                f"{where}: Coordinates ({r},{c}) are outside ocean bounds "
                f"({self._rows}x{self._cols})."
            )
            logger.error(message)
            raise IndexError(message)

    def add_entity(self, entity: Optional[Entity], r: int, c: int) -> bool:
        """Place ``entity`` at (r, c); return False if it is None or the cell is taken."""
        if entity is None:
            logger.warn("Attempted to add a null entity to (", r, ",", c, ").")
            return False
        self._require_inside("add_entity", r, c)
        occupant = self._grid[r][c]
        if occupant is not None:
            logger.debug(
                "Cannot add entity: cell (", r, ",", c, ") is already occupied by type ",
                occupant.entity_type.value, ". Requested type: ", entity.entity_type.value,
            )
            return False
        self._grid[r][c] = entity
        return True

    def get_entity(self, r: int, c: int) -> Optional[Entity]:
        """Return the entity at (r, c), or None if the cell is empty."""
        self._require_inside("get_entity", r, c)
        return self._grid[r][c]

    def remove_entity(self, r: int, c: int) -> Optional[Entity]:
        """Take the entity out of (r, c) and return it, or None if the cell was empty."""
        self._require_inside("remove_entity", r, c)
        entity = self._grid[r][c]
        self._grid[r][c] = None
        return entity

    def move_entity(self, r_from: int, c_from: int, r_to: int, c_to: int) -> bool:
        """Move the entity at the source into an empty target cell."""
        for label, r, c in (("Source", r_from, c_from), ("Target", r_to, c_to)):
            if not self.is_valid_coordinate(r, c):
                message = (
                    f"move_entity: {label} coordinates ({r},{c}) are outside ocean bounds."
                )
                logger.error(message)
                raise IndexError(message)
        mover = self._grid[r_from][c_from]
        if mover is None:
            logger.warn("No entity at source location (", r_from, ",", c_from, ") to move.")
            return False
        if (r_from, c_from) == (r_to, c_to):
            return True
        occupant = self._grid[r_to][c_to]
        if occupant is not None:
            logger.debug(
                "Destination cell (", r_to, ",", c_to, ") for move is occupied by type ",
                occupant.entity_type.value, ". Source type: ", mover.entity_type.value,
            )
            return False
        self._grid[r_to][c_to] = mover
        self._grid[r_from][c_from] = None
        return True

    def render(self) -> str:
        """Return the grid as text: one symbol and a space per cell, a blank line after."""
        lines = [
            "".join(f"{'.' if cell is None else cell.symbol} " for cell in row) + "\n"
            for row in self._grid
        ]
        return "".join(lines) + "\n"

    def display(self) -> None:
        """Print the grid as text."""
        print(self.render(), end="")

    def tick(self) -> None:
        """Let every entity act once, in random order, then remove the dead."""
        occupied = [
            (r, c)
            for r, row in enumerate(self._grid)
            for c, cell in enumerate(row)
            if cell is not None
        ]
        rng.shuffle(occupied)
        for r, c in occupied:
            entity = self._grid[r][c]
            if entity is not None:
                entity.update(self, r, c)

        for r, row in enumerate(self._grid):
            for c, entity in enumerate(row):
                if entity is not None and entity.is_dead():
                    row[c] = None
                    logger.info(
                        "Removed dead entity of type ", entity.entity_type.value,
                        " at (", r, ",", c, ")",
                    )

    def _neighbours(self, r: int, c: int):
        for dr, dc in _NEIGHBOUR_OFFSETS:
            nr, nc = r + dr, c + dc
            if self.is_valid_coordinate(nr, nc):
                yield nr, nc, self._grid[nr][nc]

    def empty_adjacent_cells(self, r: int, c: int) -> List[Cell]:
        """Empty cells among the eight neighbours of (r, c), row by row."""
        return [(nr, nc) for nr, nc, cell in self._neighbours(r, c) if cell is None]

    def adjacent_cells_of_type(self, r: int, c: int, entity_type: EntityType) -> List[Cell]:
        """Neighbouring cells of (r, c) holding an entity of ``entity_type``."""
        return [
            (nr, nc)
            for nr, nc, cell in self._neighbours(r, c)
            if cell is not None and cell.entity_type == entity_type
        ]

    def direction_to_nearest_target(
        self, start_r: int, start_c: int, target_type: EntityType, radius: int
    ) -> Cell:
        """Unit step (dr, dc) toward the nearest ``target_type`` in the square of ``radius``.

        Returns (0, 0) when no target is in sight.
        """
        best: Optional[Cell] = None
        best_dist_sq = radius * radius * 2 + 1
        for r in range(start_r - radius, start_r + radius + 1):
            for c in range(start_c - radius, start_c + radius + 1):
                if (r, c) == (start_r, start_c) or not self.is_valid_coordinate(r, c):
                    continue
                cell = self._grid[r][c]
                if cell is None or cell.entity_type != target_type:
                    continue
                dist_sq = (r - start_r) ** 2 + (c - start_c) ** 2
                if dist_sq < best_dist_sq:
                    best_dist_sq = dist_sq
                    best = (r, c)
        if best is None:
            return (0, 0)

        def _sign(value: int) -> int:
            return (value > 0) - (value < 0)

        return (_sign(best[0] - start_r), _sign(best[1] - start_c))