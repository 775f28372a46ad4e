"""
Tests for the focused Zipfian generator: hotspot placement, folding,
wrap-around and the exact mean.
"""

import numpy as np
import pytest

from txbench.distributions import FocusedZipfianGenerator, ZipfianGenerator
from txbench.exceptions import ConfigurationError


@pytest.mark.parametrize(
    "min_value,max_value,num,denom",
    [
        (0, -1, 0, 1),
        (0, 99, 0, 0),
        (0, 99, -1, 4),
        (0, 99, 4, 4),
        (0, 9, 0, 6),
    ],
)
def test_rejects_invalid_configuration(rng, min_value, max_value, num, denom):
    with pytest.raises(ConfigurationError):
        FocusedZipfianGenerator(min_value, max_value, num, denom, rng)


@pytest.mark.parametrize(
    "num,denom,expected_offset",
    [(0, 1, 50), (1, 4, 36), (3, 4, 84), (0, 50, 1), (49, 50, 99)],
)
def test_offset_places_center_in_slice(rng, num, denom, expected_offset):
    gen = FocusedZipfianGenerator(1000, 1099, num, denom, rng)

    assert gen.offset == expected_offset
    assert gen.center == 1000 + expected_offset
    slice_size = 100 / denom
    assert num * slice_size <= gen.offset < (num + 1) * slice_size


def test_draws_stay_in_range_for_random_bounds():
    trial_rng = np.random.RandomState(4321)
    out_of_range = 0

    for _ in range(2000):
        min_value = int(trial_rng.randint(-500, 500))
        item_count = int(trial_rng.randint(2, 3000))
        denom = int(trial_rng.randint(1, item_count // 2 + 1))
        num = int(trial_rng.randint(0, denom))
        theta = float(trial_rng.choice([0.0, 0.5, 0.99]))
        gen = FocusedZipfianGenerator(
            min_value, min_value + item_count - 1, num, denom, trial_rng, theta
        )
        for _ in range(20):
            value = gen.next_value()
            if not gen.min <= value <= gen.max:
                out_of_range += 1

    assert out_of_range == 0


@pytest.mark.parametrize("num,denom", [(0, 1), (1, 4), (3, 4), (9, 10)])
def test_center_is_the_hottest_key(num, denom):
    gen = FocusedZipfianGenerator(
        -20, 79, num, denom, np.random.RandomState(3), theta=0.99
    )
    draws = np.array([gen.next_value() for _ in range(20_000)])
    values, counts = np.unique(draws, return_counts=True)

    assert values[np.argmax(counts)] == gen.center


def test_neighbours_of_center_are_hotter_than_far_keys():
    gen = FocusedZipfianGenerator(0, 999, 1, 2, np.random.RandomState(8))
    draws = np.array([gen.next_value() for _ in range(50_000)])
    counts = np.bincount(draws, minlength=1000)
    center = gen.center

    near = counts[center - 5 : center + 6].sum()
    far = counts[0:11].sum()
    assert near > 5 * far


def test_every_key_is_reachable():
    gen = FocusedZipfianGenerator(10, 59, 2, 5, np.random.RandomState(21))
    draws = {gen.next_value() for _ in range(50_000)}

    assert draws == set(range(10, 60))


@pytest.mark.slow
def test_every_key_is_reachable_in_a_wider_space():
    gen = FocusedZipfianGenerator(0, 999, 1, 3, np.random.RandomState(22), theta=0.5)
    draws = {gen.next_value() for _ in range(200_000)}

    assert draws == set(range(1000))


def test_single_key_space_always_returns_min(rng):
    gen = FocusedZipfianGenerator(7, 7, 0, 1, rng)

    assert gen.center == 7
    assert {gen.next_value() for _ in range(200)} == {7}
    assert gen.mean() == pytest.approx(7.0)


def test_hotspot_in_last_slice_wraps_to_low_keys():
    # offset 9 in a 10 key space: the first rank above center wraps to min
    gen = FocusedZipfianGenerator(100, 109, 4, 5, np.random.RandomState(5))
    draws = [gen.next_value() for _ in range(5000)]

    assert gen.center == 109
    assert 100 in draws
    assert min(draws) >= 100
    assert max(draws) <= 109


def test_folding_matches_raw_ranks():
    gen = FocusedZipfianGenerator(0, 99, 1, 4, np.random.RandomState(17))
    twin = ZipfianGenerator(0, 100, np.random.RandomState(17))

    for _ in range(1000):
        rank = twin.next_rank()
        folded = -(rank // 2) if rank % 2 == 0 else rank // 2
        assert gen.next_value() == (folded + gen.offset) % 100


def test_last_value_tracks_draws(rng):
    gen = FocusedZipfianGenerator(0, 99, 0, 2, rng)

    assert gen.last_value() is None
    value = gen.next_value()
    assert gen.last_value() == value


@pytest.mark.parametrize("num,denom,theta", [(0, 1, 0.99), (1, 4, 0.5), (3, 4, 0.0)])
def test_mean_matches_sample_mean(num, denom, theta):
    gen = FocusedZipfianGenerator(
        0, 99, num, denom, np.random.RandomState(31), theta=theta
    )
    sample_mean = np.mean([gen.next_value() for _ in range(100_000)])

    assert sample_mean == pytest.approx(gen.mean(), abs=0.5)


def test_mean_matches_direct_expectation(rng):
    gen = FocusedZipfianGenerator(-10, 89, 1, 4, rng, theta=0.8)
    ranks = np.arange(101)
    weights = np.power(ranks + 1.0, -0.8)
    folded = np.where(ranks % 2 == 0, -(ranks // 2), ranks // 2)
    values = -10 + (folded + gen.offset) % 100

    expected = float(np.dot(weights, values) / weights.sum())
    assert gen.mean() == pytest.approx(expected, rel=1e-9)
