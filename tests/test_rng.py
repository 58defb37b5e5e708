import pytest

from livingocean import rng


def test_get_int_within_bounds():
    rng.seed(1)
    values = [rng.get_int(1, 100) for _ in range(500)]
    assert all(1 <= v <= 100 for v in values)


def test_get_int_swapped_bounds():
    rng.seed(2)
    values = [rng.get_int(10, 3) for _ in range(200)]
    assert all(3 <= v <= 10 for v in values)
    assert min(values) == 3 and max(values) == 10


def test_get_int_single_value():
    assert rng.get_int(5, 5) == 5


def test_get_double_within_bounds():
    rng.seed(3)
    values = [rng.get_double(2.5, -1.0) for _ in range(200)]
    assert all(-1.0 <= v <= 2.5 for v in values)


def test_seed_reproduces_sequence():
    rng.seed(42)
    first = [rng.get_int(0, 1000) for _ in range(20)]
    rng.seed(42)
    second = [rng.get_int(0, 1000) for _ in range(20)]
    assert first == second


@pytest.mark.parametrize("size", [0, 1, 2, 10])
def test_shuffle_is_permutation(size):
    rng.seed(7)
    items = list(range(size))
    rng.shuffle(items)
    assert sorted(items) == list(range(size))


def test_shuffle_reproducible_with_seed():
    rng.seed(9)
    a = list(range(20))
    rng.shuffle(a)
    rng.seed(9)
    b = list(range(20))
    rng.shuffle(b)
    assert a == b