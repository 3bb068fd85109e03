import random

import pytest

from solfuzz.exceptions import InvariantViolation
from solfuzz.generator.distribution import UniformRandomDistribution


@pytest.mark.parametrize("n", [1, 2, 3, 10, 1000])
def test_distribution_one_to_n_in_range(n):
    dist = UniformRandomDistribution(1234)
    draws = [dist.distribution_one_to_n(n) for _ in range(500)]
    assert all(1 <= d <= n for d in draws)
    if n <= 3:
        assert set(draws) == set(range(1, n + 1))


@pytest.mark.parametrize("n", [0, -1])
def test_distribution_one_to_n_empty_range(n):
    dist = UniformRandomDistribution(0)
    with pytest.raises(InvariantViolation):
        dist.distribution_one_to_n(n)


def test_draws_follow_seeded_random():
    dist = UniformRandomDistribution(42)
    rng = random.Random(42)
    for n in [3, 2, 7, 1, 100]:
        assert dist.distribution_one_to_n(n) == rng.randint(1, n)


def test_same_seed_same_stream():
    a = UniformRandomDistribution(2**64 - 1)
    b = UniformRandomDistribution(2**64 - 1)
    assert [a.distribution_one_to_n(50) for _ in range(100)] == [
        b.distribution_one_to_n(50) for _ in range(100)
    ]


def test_negative_seed_rejected():
    with pytest.raises(InvariantViolation):
        UniformRandomDistribution(-5)


def test_probable_frequency():
    dist = UniformRandomDistribution(7)
    trials = 100_000
    hits = sum(dist.probable(10) for _ in range(trials))
    assert 0.09 < hits / trials < 0.11


def test_likely_is_complement_of_probable():
    a = UniformRandomDistribution(99)
    b = UniformRandomDistribution(99)
    for _ in range(1000):
        assert a.probable(4) == (not b.likely(4))


@pytest.mark.parametrize("n", [1, 0])
def test_probable_and_likely_need_n_above_one(n):
    dist = UniformRandomDistribution(0)
    with pytest.raises(InvariantViolation):
        dist.probable(n)
    with pytest.raises(InvariantViolation):
        dist.likely(n)


def test_subset_is_sparse_subset():
    dist = UniformRandomDistribution(3)
    items = {f"su{i}.sol" for i in range(8)}
    sizes = []
    for _ in range(2000):
        sub = dist.subset(items)
        assert sub <= items
        sizes.append(len(sub))
    # each element kept with probability 1/8, so about one per draw
    assert 0.8 < sum(sizes) / len(sizes) < 1.2


def test_subset_ignores_set_iteration_order():
    items = ["c", "a", "b", "d"]
    a = UniformRandomDistribution(11)
    b = UniformRandomDistribution(11)
    assert [a.subset(items) for _ in range(50)] == [
        b.subset(reversed(items)) for _ in range(50)
    ]


def test_subset_needs_two_elements():
    dist = UniformRandomDistribution(0)
    with pytest.raises(InvariantViolation):
        dist.subset({"only"})


def test_choice():
    dist = UniformRandomDistribution(5)
    items = ("x", "y", "z")
    picked = {dist.choice(items) for _ in range(200)}
    assert picked == set(items)
    with pytest.raises(InvariantViolation):
        dist.choice(())
