"""Tests for Fisher-Yates shuffles."""

from __future__ import annotations

from collections import Counter
from itertools import permutations

import pytest
from hypothesis import given
from klaw_sampling import shuffle, shuffle_in_place

from tests.strategies import CountingSource, ScriptedSource, element_lists, one_pass, seeded, seeds

# Chi-square critical value, 5 degrees of freedom, p = 1e-6.
CHI2_5DOF = 35.89


class TestShuffleInPlace:
    """Tests for shuffle_in_place."""

    def test_swap_order_follows_draws(self):
        """Position i is swapped with the drawn j, walking from the end."""
        seq = ['a', 'b', 'c', 'd']
        rng = ScriptedSource(ints=[0, 0, 0])
        shuffle_in_place(seq, rng)
        assert seq == ['b', 'c', 'd', 'a']
        assert rng.bounds == [4, 3, 2]

    def test_self_swaps_keep_order(self):
        """Drawing j == i at every step leaves the sequence unchanged."""
        seq = [1, 2, 3, 4]
        shuffle_in_place(seq, ScriptedSource(ints=[3, 2, 1]))
        assert seq == [1, 2, 3, 4]

    @pytest.mark.parametrize('seq', [[], ['only']])
    def test_short_sequences_draw_nothing(self, seq):
        """Length 0 and 1 are no-ops that consume no draws."""
        before = list(seq)
        rng = ScriptedSource()
        shuffle_in_place(seq, rng)
        assert seq == before
        assert rng.bounds == []

    def test_uses_n_minus_one_draws(self, rng):
        """Exactly n - 1 integer draws for n elements."""
        counting = CountingSource(rng)
        shuffle_in_place(list(range(10)), counting)
        assert counting.int_draws == 9
        assert counting.float_draws == 0

    @given(element_lists, seeds)
    def test_permutation_invariance(self, values, seed):
        """Result is a permutation of the input multiset."""
        seq = list(values)
        shuffle_in_place(seq, seeded(seed))
        assert len(seq) == len(values)
        assert Counter(map(repr, seq)) == Counter(map(repr, values))


class TestShuffle:
    """Tests for the copying shuffle."""

    def test_does_not_mutate_input(self, rng):
        """The input list keeps its order."""
        values = [1, 2, 3, 4, 5]
        result = list(shuffle(values, rng))
        assert values == [1, 2, 3, 4, 5]
        assert sorted(result) == values

    def test_accepts_forward_only_source(self, rng):
        """Generators are materialized before shuffling."""
        assert sorted(shuffle(one_pass(range(20)), rng)) == list(range(20))

    def test_result_is_one_shot(self, rng):
        """A consumed result cannot be replayed."""
        result = shuffle([1, 2, 3], rng)
        assert len(list(result)) == 3
        assert list(result) == []

    def test_permutation_computed_before_iteration(self):
        """All draws happen when shuffle() is called."""
        rng = ScriptedSource(ints=[0, 0])
        result = shuffle('abc', rng)
        assert rng.exhausted
        assert list(result) == ['b', 'c', 'a']

    def test_empty_input(self, rng):
        assert list(shuffle([], rng)) == []

    @given(element_lists, seeds)
    def test_permutation_invariance(self, values, seed):
        """Output contains exactly the input multiset."""
        result = list(shuffle(values, seeded(seed)))
        assert Counter(map(repr, result)) == Counter(map(repr, values))

    def test_orderings_are_uniform(self, rng):
        """All 3! orderings of three items appear equally often (chi-square)."""
        trials = 60_000
        counts = Counter(tuple(shuffle('abc', rng)) for _ in range(trials))
        assert set(counts) == set(permutations('abc'))

        expected = trials / 6
        chi2 = sum((observed - expected) ** 2 / expected for observed in counts.values())
        assert chi2 < CHI2_5DOF
