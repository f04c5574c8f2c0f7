"""Tests for random sources and the random-access capability check."""

from __future__ import annotations

import random

import pytest
from klaw_sampling import RandomSource, StdlibSource, is_random_access

from tests.strategies import ScriptedSource, one_pass


class TestStdlibSource:
    """Tests for the random.Random adapter."""

    def test_is_a_random_source(self):
        assert isinstance(StdlibSource(), RandomSource)
        assert isinstance(ScriptedSource(), RandomSource)

    def test_random_in_unit_interval(self):
        source = StdlibSource(random.Random(1))
        assert all(0.0 <= source.random() < 1.0 for _ in range(1_000))

    def test_randbelow_in_range(self):
        source = StdlibSource(random.Random(1))
        values = {source.randbelow(6) for _ in range(1_000)}
        assert values == set(range(6))

    def test_randbelow_one(self):
        assert StdlibSource().randbelow(1) == 0

    @pytest.mark.parametrize('bound', [0, -3])
    def test_randbelow_rejects_empty_range(self, bound):
        with pytest.raises(ValueError, match='bound must be >= 1'):
            StdlibSource().randbelow(bound)

    def test_same_seed_same_draws(self):
        a = StdlibSource(random.Random(99))
        b = StdlibSource(random.Random(99))
        assert [a.randbelow(100) for _ in range(20)] == [b.randbelow(100) for _ in range(20)]

    def test_wraps_system_random(self):
        source = StdlibSource(random.SystemRandom())
        assert isinstance(source.generator, random.SystemRandom)
        assert repr(source) == 'StdlibSource(SystemRandom)'


class TestIsRandomAccess:
    @pytest.mark.parametrize('source', [[1], (1,), 'a', range(3)])
    def test_sequences(self, source):
        assert is_random_access(source)

    @pytest.mark.parametrize('source', [{1}, {'a': 1}, iter([1]), one_pass([1]), frozenset()])
    def test_forward_only(self, source):
        assert not is_random_access(source)
