"""Command-line entry point: populate an ocean and run the simulation as text."""

from __future__ import annotations

import argparse
import sys
import time
from typing import NamedTuple, Optional, Sequence, TextIO

from . import logger, rng
from .algae import Algae
from .herbivore import HerbivoreFish
from .ocean import Ocean
from .predator import PredatorFish
from .resource import ResourceWrapper

DEFAULT_ROWS = 50
DEFAULT_COLS = 50
DEFAULT_TICKS = 100
TICK_INTERVAL = 0.5

ALGAE_CELLS_PER_ATTEMPT = 15
HERBIVORE_CELLS_PER_ATTEMPT = 100
PREDATOR_CELLS_PER_ATTEMPT = 300


class Population(NamedTuple):
    """How many entities of each kind were placed."""

    algae: int
    herbivores: int
    predators: int


def _scatter(ocean: Ocean, factory, attempts: int) -> int:
    placed = 0
    for _ in range(attempts):
        r = rng.get_int(0, ocean.rows - 1)
        c = rng.get_int(0, ocean.cols - 1)
        if ocean.add_entity(factory(), r, c):
            placed += 1
    return placed


def populate_ocean(ocean: Ocean) -> Population:
    """Drop algae, herbivores and predators on random cells, in proportion to the grid size."""
    cells = ocean.rows * ocean.cols
    algae = _scatter(ocean, Algae, cells // ALGAE_CELLS_PER_ATTEMPT)
    logger.info("Added ", algae, " Algae initially.")
    herbivores = _scatter(ocean, HerbivoreFish, cells // HERBIVORE_CELLS_PER_ATTEMPT)
    logger.info("Added ", herbivores, " HerbivoreFish initially.")
    predators = _scatter(ocean, PredatorFish, cells // PREDATOR_CELLS_PER_ATTEMPT)
    logger.info("Added ", predators, " PredatorFish initially.")
    return Population(algae, herbivores, predators)


def demonstrate_resource_semantics(out: Optional[TextIO] = None) -> None:
    """Walk through copying and handing over a ResourceWrapper, describing each step."""
    out = sys.stdout if out is None else out

    def show(wrapper: ResourceWrapper, prefix: str) -> None:
        out.write(wrapper.describe(prefix) + "\n")

    logger.info("--- Demonstrating copy and move semantics with ResourceWrapper ---")
    out.write("\n--- Demonstrating copy and move semantics with ResourceWrapper ---\n")

    out.write("\n1. Construction:\n")
    r1 = ResourceWrapper("Hello")
    show(r1, "r1: ")
    r2_empty = ResourceWrapper()
    show(r2_empty, "r2_empty: ")

    out.write("\n2. Copy Construction:\n")
    r3 = r1.copy()
    show(r1, "r1 (after r3=r1): ")
    show(r3, "r3 (copy of r1): ")

    out.write("\n3. Copy Assignment:\n")
    r2_assign = ResourceWrapper("Original R2")
    show(r2_assign, "r2_assign (before assignment): ")
    r2_assign.assign(r1)
    show(r1, "r1 (after r2_assign=r1): ")
    show(r2_assign, "r2_assign (now copy of r1): ")

    out.write("\n4. Move Construction:\n")
    r4 = r1.take()
    show(r1, "r1 (after move to r4): ")
    show(r4, "r4 (moved from r1): ")

    out.write("\n5. Move Assignment:\n")
    r5 = ResourceWrapper("Original R5")
    show(r5, "r5 (before assignment): ")
    r5.take_from(r3)
    show(r3, "r3 (after move to r5): ")
    show(r5, "r5 (moved from r3): ")

    out.write("\n6. Self-assignment check (copy):\n")
    r_self_copy = ResourceWrapper("SelfCopyTest")
    show(r_self_copy, "r_self_copy (before): ")
    r_self_copy.assign(r_self_copy)
    show(r_self_copy, "r_self_copy (after self-copy): ")

    out.write("\n7. Self-assignment check (move):\n")
    r_self_move = ResourceWrapper("SelfMoveTest")
    show(r_self_move, "r_self_move (before): ")
    r_self_move.take_from(r_self_move)
    show(r_self_move, "r_self_move (after self-move): ")

    out.write("\n--- End of demonstration ---\n")


def run_simulation(ocean: Ocean, ticks: int, out: Optional[TextIO] = None) -> int:
    """Advance ``ocean`` by ``ticks`` steps, writing the grid after each; return the count."""
    if ticks < 0:
        raise ValueError(f"ticks must not be negative, got {ticks}")
    out = sys.stdout if out is None else out
    for number in range(1, ticks + 1):
        ocean.tick()
        out.write(f"Tick {number}:\n")
        out.write(ocean.render())
    return ticks


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return value


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {value}")
    return value


def _non_negative_float(text: str) -> float:
    value = float(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {value}")
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="livingocean", description="Run the living ocean simulation in the terminal."
    )
    parser.add_argument("--rows", type=_positive_int, default=DEFAULT_ROWS)
    parser.add_argument("--cols", type=_positive_int, default=DEFAULT_COLS)
    parser.add_argument("--ticks", type=_non_negative_int, default=DEFAULT_TICKS)
    parser.add_argument(
        "--interval", type=_non_negative_float, default=TICK_INTERVAL,
        help="seconds to wait between ticks",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible runs")
    parser.add_argument("--log-file", default=logger.DEFAULT_LOG_FILE)
    parser.add_argument(
        "--no-demo", action="store_true", help="skip the resource semantics walkthrough"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments, set up logging, and run the simulation."""
    args = _parser().parse_args(argv)
    if args.seed is not None:
        rng.seed(args.seed)

    logger.init(args.log_file)
    logger.info("Logger system initialized.")
    try:
        logger.info("Main: Program starting...")
        if not args.no_demo:
            demonstrate_resource_semantics(sys.stdout)

        ocean = Ocean(args.rows, args.cols)
        populate_ocean(ocean)
        try:
            if args.interval > 0:
                for number in range(1, args.ticks + 1):
                    time.sleep(args.interval)
                    ocean.tick()
                    sys.stdout.write(f"Tick {number}:\n")
                    sys.stdout.write(ocean.render())
            else:
                run_simulation(ocean, args.ticks, sys.stdout)
        except KeyboardInterrupt:
            logger.info("Main: Simulation interrupted.")
        logger.info("Main: Program finished.")
    finally:
        logger.info("Logger system shutting down.")
        logger.shutdown()
    return 0


if __name__ == "__main__":
    sys.exit(main())