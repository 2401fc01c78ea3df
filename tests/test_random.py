"""Tests for the Alea PRNG and seed helpers."""

import pytest

from py_gridnav.config import settings
from py_gridnav.core.alea_prng import AleaPRNG
from py_gridnav.utils.random import create_prng, normalize_seed


class TestAleaPRNG:
    """Test Alea PRNG determinism and helpers."""

    def test_same_seed_same_sequence(self):
        a = AleaPRNG("seed")
        b = AleaPRNG("seed")
        assert [a.random() for _ in range(50)] == [b.random() for _ in range(50)]

    def test_different_seeds_differ(self):
        assert AleaPRNG("one").random() != AleaPRNG("two").random()

    def test_values_in_unit_interval(self):
        prng = AleaPRNG(12345)
        for _ in range(1000):
            value = prng.random()
            assert 0.0 <= value < 1.0

    def test_call_count(self):
        prng = AleaPRNG("count")
        for _ in range(7):
            prng.random()
        assert prng.call_count == 7

    def test_randint_inclusive(self):
        prng = AleaPRNG("ints")
        values = {prng.randint(3, 6) for _ in range(500)}
        assert values == {3, 4, 5, 6}

    def test_randint_empty_range(self):
        with pytest.raises(ValueError):
            AleaPRNG("x").randint(5, 4)

    def test_chance_extremes(self):
        prng = AleaPRNG("chance")
        assert all(prng.chance(1.0) for _ in range(20))
        assert not any(prng.chance(0.0) for _ in range(20))

    def test_shuffle_is_permutation(self):
        items = list(range(30))
        shuffled = AleaPRNG("shuffle").shuffled(items)
        assert sorted(shuffled) == items
        assert shuffled != items
        assert items == list(range(30))

    def test_choice_empty(self):
        with pytest.raises(IndexError):
            AleaPRNG("c").choice([])

    def test_iterable_seed(self):
        assert AleaPRNG(["a", "b"]).random() == AleaPRNG(["a", "b"]).random()
        assert AleaPRNG(["a", "b"]).random() != AleaPRNG("a").random()


class TestSeedHelpers:
    def test_default_seed(self):
        assert normalize_seed(None) == settings.default_seed

    def test_int_and_string_seeds_match(self):
        assert normalize_seed(42) == "42"
        assert create_prng(42).random() == create_prng("42").random()

    def test_salt_separates_streams(self):
        assert create_prng("s", "maze").random() != create_prng("s", "noise").random()

    def test_instances_are_independent(self):
        first = create_prng("shared")
        first.random()
        second = create_prng("shared")
        assert second.call_count == 0
        assert second.random() == create_prng("shared").random()
