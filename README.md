# livingocean

A small ecosystem simulation on a rectangular ocean grid. Three kinds of
inhabitants share the cells:

- **Algae** (`A`) never die; each tick an alga has a 3 % chance of spreading
  into a random empty neighbouring cell.
- **Herbivore fish** (`H`, or `h` when starving) eat an adjacent alga and move
  into its cell, swim towards the nearest alga within 4 cells when hungry,
  sometimes reproduce when well fed, and otherwise move to a random empty
  neighbouring cell.
- **Predator fish** (`P`, or `p` when starving) eat an adjacent herbivore and
  move into its cell, head for the nearest herbivore within 6 cells when
  hungry, sometimes reproduce when well fed, and otherwise explore at random.

Every fish loses energy each tick and ages; it dies when its energy runs out
or it reaches its maximum age (70 ticks for herbivores, 90 for predators).
Dead fish are removed at the end of the tick. Empty cells are shown as `.`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
livingocean
```

The command first prints a step-by-step walkthrough of copying and handing
over the buffer of a `ResourceWrapper`, then fills an ocean with random algae,
herbivores and predators and runs the simulation, printing `Tick N:` and the
grid as text after each tick. Ctrl-C stops the run early.

Options:

| Option | Default | Meaning |
| --- | --- | --- |
| `--rows N` | 50 | number of grid rows (positive) |
| `--cols N` | 50 | number of grid columns (positive) |
| `--ticks N` | 100 | number of ticks to run (not negative) |
| `--interval SECONDS` | 0.5 | pause before each tick; 0 runs without pausing |
| `--seed N` | none | seed the random generator for a reproducible run |
| `--log-file PATH` | `simulation.log` | file that log messages are appended to |
| `--no-demo` | | skip the `ResourceWrapper` walkthrough |

Log messages at warning level and above go to the console; messages at info
level and above are appended to the log file.

## Library use

```python
from livingocean.ocean import Ocean
from livingocean.algae import Algae
from livingocean.herbivore import HerbivoreFish
from livingocean.predator import PredatorFish
from livingocean import rng

rng.seed(42)  # reproducible runs

ocean = Ocean(10, 10)
ocean.add_entity(Algae(), 2, 2)
ocean.add_entity(HerbivoreFish(), 2, 3)
ocean.add_entity(PredatorFish(), 5, 5)

for _ in range(5):
    ocean.tick()
    print(ocean.render())
```

`Ocean` raises `ValueError` for non-positive dimensions and `IndexError` for
coordinates outside the grid. `add_entity` returns `False` when the entity is
`None` or the cell is occupied; `move_entity` returns `False` when the source
cell is empty or the target cell is occupied. Other queries are
`get_entity`, `remove_entity`, `empty_adjacent_cells`,
`adjacent_cells_of_type` and `direction_to_nearest_target`.

New kinds of inhabitant subclass `livingocean.entity.Entity`, providing
`update(ocean, r, c)` and the `symbol` and `entity_type` properties, and
optionally overriding `is_dead()`.

`livingocean.cli` also offers `populate_ocean(ocean)` (one placement attempt
per 15 cells for algae, per 100 for herbivores and per 300 for predators, at
random cells; it returns how many of each were placed) and
`run_simulation(ocean, ticks, out)`, which ticks without pausing and writes
each grid to `out`.

`livingocean.logger` provides a `Logger` class and module-level `init`,
`shutdown`, `debug`, `info`, `warn` and `error` functions on a shared logger.

## What it does not do

The simulation is shown only as text in the terminal. There is no graphical
window, no sprites, and no keyboard control; a run lasts the given number of
ticks or until interrupted.