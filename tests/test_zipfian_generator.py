"""
Tests for the plain Zipfian generator: bounds, skew, zeta caching and means.
"""

import numpy as np
import pytest

from txbench.distributions import ZipfianGenerator
from txbench.distributions import zipfian_generator
from txbench.distributions.zipfian_generator import EXACT_ZETA_ITEM_LIMIT
from txbench.exceptions import ConfigurationError


def law_mean(min_value, item_count, theta):
    ranks = np.arange(item_count, dtype=np.float64)
    weights = np.power(ranks + 1.0, -theta)
    return min_value + float(np.dot(ranks, weights) / weights.sum())


@pytest.mark.parametrize("min_value,max_value", [(0, -1), (10, 5)])
def test_rejects_empty_key_space(rng, min_value, max_value):
    with pytest.raises(ConfigurationError):
        ZipfianGenerator(min_value, max_value, rng)


def test_rejects_negative_theta(rng):
    with pytest.raises(ConfigurationError):
        ZipfianGenerator(0, 10, rng, theta=-0.1)


def test_theta_one_on_exact_key_space():
    gen = ZipfianGenerator(0, 99, np.random.RandomState(1), theta=1.0)
    draws = np.array([gen.next_value() for _ in range(20_000)])
    counts = np.bincount(draws, minlength=100)

    assert draws.min() >= 0
    assert draws.max() <= 99
    assert counts[0] > counts[1] > counts[10]
    assert gen.mean() == pytest.approx(law_mean(0, 100, 1.0), rel=1e-9)


def test_theta_one_rejects_approximated_key_space(rng):
    with pytest.raises(ConfigurationError):
        ZipfianGenerator(0, EXACT_ZETA_ITEM_LIMIT, rng, theta=1.0)

    gen = ZipfianGenerator(0, EXACT_ZETA_ITEM_LIMIT - 1, rng, theta=1.0)
    with pytest.raises(ConfigurationError):
        gen.set_item_count(EXACT_ZETA_ITEM_LIMIT + 1)

    assert gen.item_count == EXACT_ZETA_ITEM_LIMIT
    assert 0 <= gen.next_value() < EXACT_ZETA_ITEM_LIMIT


def test_draws_stay_in_range_for_random_bounds():
    trial_rng = np.random.RandomState(1234)
    out_of_range = 0

    for _ in range(2000):
        min_value = int(trial_rng.randint(-10_000, 10_000))
        item_count = int(trial_rng.randint(1, 5000))
        theta = float(trial_rng.choice([0.0, 0.5, 0.99, 1.5]))
        gen = ZipfianGenerator(
            min_value, min_value + item_count - 1, trial_rng, theta=theta
        )
        for _ in range(20):
            value = gen.next_value()
            if not gen.min <= value <= gen.max:
                out_of_range += 1

    assert out_of_range == 0


def test_frequency_is_non_increasing_by_rank():
    gen = ZipfianGenerator(0, 9, np.random.RandomState(7), theta=0.99)
    draws = np.array([gen.next_rank() for _ in range(100_000)])
    counts = np.bincount(draws, minlength=10)

    for rank in range(9):
        tolerance = 3 * np.sqrt(counts[rank])
        assert counts[rank] + tolerance >= counts[rank + 1]
    assert counts[0] > counts[-1]


def test_approximate_mode_keeps_hot_low_ranks():
    item_count = EXACT_ZETA_ITEM_LIMIT * 5
    gen = ZipfianGenerator(0, item_count - 1, np.random.RandomState(7), theta=0.99)
    draws = np.array([gen.next_rank() for _ in range(50_000)])
    counts = np.bincount(draws, minlength=item_count)

    assert counts[0] > counts[1]
    assert counts[0] > counts[2:].max()
    assert counts[: item_count // 2].sum() > counts[item_count // 2 :].sum()


def test_theta_zero_is_uniform_without_division_by_zero():
    gen = ZipfianGenerator(5, 6, np.random.RandomState(0), theta=0.0)
    draws = {gen.next_value() for _ in range(200)}

    assert draws == {5, 6}
    assert gen.mean() == pytest.approx(5.5)


def test_single_item_key_space(rng):
    gen = ZipfianGenerator(3, 3, rng)

    assert [gen.next_value() for _ in range(10)] == [3] * 10
    assert gen.mean() == pytest.approx(3.0)


def test_last_value_does_not_consume_randomness():
    gen = ZipfianGenerator(0, 99, np.random.RandomState(11))
    twin = ZipfianGenerator(0, 99, np.random.RandomState(11))

    assert gen.last_value() is None
    value = gen.next_value()
    assert gen.last_value() == value
    assert gen.last_rank() == value
    gen.last_value()
    gen.last_value()

    twin.next_value()
    assert gen.next_value() == twin.next_value()


def test_same_seed_gives_same_sequence():
    first = ZipfianGenerator(0, 10_000, np.random.RandomState(99))
    second = ZipfianGenerator(0, 10_000, np.random.RandomState(99))

    assert [first.next_value() for _ in range(100)] == [
        second.next_value() for _ in range(100)
    ]


@pytest.mark.parametrize("item_count", [100, EXACT_ZETA_ITEM_LIMIT * 5])
@pytest.mark.parametrize("theta", [0.0, 0.5, 0.99, 1.2])
def test_mean_matches_law(rng, item_count, theta):
    gen = ZipfianGenerator(-50, item_count - 51, rng, theta=theta)

    assert gen.mean() == pytest.approx(law_mean(-50, item_count, theta), rel=1e-9)


def test_mean_matches_sample_mean():
    gen = ZipfianGenerator(10, 109, np.random.RandomState(5), theta=0.5)
    sample_mean = np.mean([gen.next_value() for _ in range(100_000)])

    assert sample_mean == pytest.approx(gen.mean(), abs=0.5)


def test_incremental_zeta_matches_fresh_construction(rng):
    gen = ZipfianGenerator(0, 9, rng, theta=0.99)

    for item_count in [100, EXACT_ZETA_ITEM_LIMIT, EXACT_ZETA_ITEM_LIMIT + 1, 100_000]:
        gen.set_item_count(item_count)
        fresh = ZipfianGenerator(0, item_count - 1, rng, theta=0.99)

        assert gen.item_count == item_count
        assert gen.max == item_count - 1
        assert gen.zeta_n == pytest.approx(fresh.zeta_n, rel=1e-9)
        assert gen.mean() == pytest.approx(fresh.mean(), rel=1e-9)
        assert all(0 <= gen.next_value() < item_count for _ in range(100))


def test_growth_only_sums_the_new_ranks(rng, monkeypatch):
    gen = ZipfianGenerator(0, EXACT_ZETA_ITEM_LIMIT * 2, rng)
    calls = []
    original_zeta = zipfian_generator.zeta

    def recording_zeta(start, stop, theta, initial_sum=0.0):
        calls.append((start, stop))
        return original_zeta(start, stop, theta, initial_sum)

    monkeypatch.setattr(zipfian_generator, "zeta", recording_zeta)
    gen.set_item_count(EXACT_ZETA_ITEM_LIMIT * 4)

    assert calls == [(EXACT_ZETA_ITEM_LIMIT * 2 + 1, EXACT_ZETA_ITEM_LIMIT * 4)]


def test_draws_never_touch_zeta(rng, monkeypatch):
    gen = ZipfianGenerator(0, EXACT_ZETA_ITEM_LIMIT * 4, rng)

    def fail(*args, **kwargs):
        raise AssertionError("zeta recomputed during a draw")

    monkeypatch.setattr(zipfian_generator, "zeta", fail)
    for _ in range(1000):
        gen.next_value()


def test_shrinking_recomputes_zeta(rng):
    gen = ZipfianGenerator(0, 4999, rng)
    gen.set_item_count(50)
    fresh = ZipfianGenerator(0, 49, rng)

    assert gen.zeta_n == pytest.approx(fresh.zeta_n, rel=1e-12)
    assert all(0 <= gen.next_value() < 50 for _ in range(100))


@pytest.mark.parametrize("item_count", [0, -3])
def test_set_item_count_rejects_non_positive(rng, item_count):
    gen = ZipfianGenerator(0, 10, rng)

    with pytest.raises(ConfigurationError):
        gen.set_item_count(item_count)
