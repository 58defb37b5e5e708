import io

import pytest

from livingocean import rng
from livingocean.cli import (
    Population,
    demonstrate_resource_semantics,
    main,
    populate_ocean,
    run_simulation,
)
from livingocean.entity import EntityType
from livingocean.ocean import Ocean


def _count(ocean, entity_type):
    return sum(
        1
        for r in range(ocean.rows)
        for c in range(ocean.cols)
        if ocean.get_entity(r, c) is not None
        and ocean.get_entity(r, c).entity_type == entity_type
    )


def test_populate_counts_match_grid():
    rng.seed(7)
    ocean = Ocean(30, 30)
    population = populate_ocean(ocean)
    assert population.algae == _count(ocean, EntityType.ALGAE)
    assert population.herbivores == _count(ocean, EntityType.HERBIVORE)
    assert population.predators == _count(ocean, EntityType.PREDATOR)


def test_populate_never_exceeds_attempts():
    rng.seed(3)
    ocean = Ocean(30, 30)
    population = populate_ocean(ocean)
    assert 0 < population.algae <= 900 // 15
    assert population.herbivores <= 900 // 100
    assert population.predators <= 900 // 300


def test_populate_tiny_ocean_places_nothing():
    ocean = Ocean(3, 3)
    assert populate_ocean(ocean) == Population(0, 0, 0)
    assert ocean.render() == Ocean(3, 3).render()


def test_demonstration_shows_moved_from_is_empty():
    out = io.StringIO()
    demonstrate_resource_semantics(out)
    text = out.getvalue()
    assert "r1 (after move to r4): ResourceWrapper data: null (size: 0, addr: null)" in text
    assert 'r4 (moved from r1): ResourceWrapper data: "Hello"' in text
    assert "r3 (after move to r5): ResourceWrapper data: null" in text
    assert 'r5 (moved from r3): ResourceWrapper data: "Hello"' in text


def test_demonstration_self_assignment_keeps_data():
    out = io.StringIO()
    demonstrate_resource_semantics(out)
    text = out.getvalue()
    assert 'r_self_copy (after self-copy): ResourceWrapper data: "SelfCopyTest"' in text
    assert 'r_self_move (after self-move): ResourceWrapper data: "SelfMoveTest"' in text
    assert 'r2_assign (now copy of r1): ResourceWrapper data: "Hello"' in text


def test_run_simulation_empty_ocean_output():
    ocean = Ocean(2, 3)
    out = io.StringIO()
    assert run_simulation(ocean, 3, out) == 3
    grid = ocean.render()
    assert out.getvalue() == "".join(f"Tick {n}:\n{grid}" for n in (1, 2, 3))


def test_run_simulation_zero_ticks_writes_nothing():
    out = io.StringIO()
    assert run_simulation(Ocean(4, 4), 0, out) == 0
    assert out.getvalue() == ""


def test_run_simulation_rejects_negative_ticks():
    with pytest.raises(ValueError):
        run_simulation(Ocean(2, 2), -1, io.StringIO())


def test_main_runs_and_logs(tmp_path, capsys):
    log_path = tmp_path / "sim.log"
    code = main([
        "--rows", "6", "--cols", "6", "--ticks", "2", "--seed", "1",
        "--interval", "0", "--no-demo", "--log-file", str(log_path),
    ])
    assert code == 0
    output = capsys.readouterr().out
    assert "Tick 1:" in output and "Tick 2:" in output
    assert "Tick 3:" not in output
    assert "Logger initialized. Logging to file" in log_path.read_text(encoding="utf-8")


def test_main_is_reproducible_with_seed(tmp_path, capsys):
    argv = [
        "--rows", "20", "--cols", "20", "--ticks", "4", "--seed", "42",
        "--interval", "0", "--no-demo", "--log-file", str(tmp_path / "a.log"),
    ]
    main(argv)
    first = capsys.readouterr().out
    main(argv)
    second = capsys.readouterr().out
    assert first == second


def test_main_with_demo_prints_walkthrough(tmp_path, capsys):
    main([
        "--rows", "2", "--cols", "2", "--ticks", "0", "--interval", "0",
        "--log-file", str(tmp_path / "d.log"),
    ])
    assert "1. Construction:" in capsys.readouterr().out


def test_main_rejects_non_positive_rows(tmp_path):
    with pytest.raises(SystemExit):
        main(["--rows", "0", "--log-file", str(tmp_path / "x.log")])