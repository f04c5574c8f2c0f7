"""Tests for the Result type returned by try_* operations."""

import pytest
from hypothesis import given
from hypothesis import strategies as st
from klaw_sampling import EmptySequence, Err, Ok


class TestOk:
    """Tests for the Ok variant."""

    def test_unwrap(self):
        assert Ok(42).unwrap() == 42

    def test_querying(self):
        assert Ok(1).is_ok() is True
        assert Ok(1).is_err() is False

    def test_defaults_ignored(self):
        assert Ok(1).unwrap_or(0) == 1
        assert Ok(1).unwrap_or_else(lambda: 0) == 1
        assert Ok(1).expect('unused') == 1

    def test_map(self):
        assert Ok(2).map(lambda x: x * 10) == Ok(20)
        assert Ok(2).map_err(str) == Ok(2)

    def test_is_frozen(self):
        with pytest.raises(AttributeError):
            Ok(1).value = 2  # type: ignore[misc]

    @given(st.integers())
    def test_equality(self, value):
        assert Ok(value) == Ok(value)
        assert Ok(value) != Err(value)


class TestErr:
    """Tests for the Err variant."""

    def test_unwrap_raises(self):
        with pytest.raises(RuntimeError, match='Called unwrap on Err'):
            Err(EmptySequence()).unwrap()

    def test_expect_raises_with_message(self):
        with pytest.raises(RuntimeError, match='need a winner'):
            Err(EmptySequence()).expect('need a winner')

    def test_querying(self):
        assert Err('e').is_err() is True
        assert Err('e').is_ok() is False

    def test_defaults(self):
        assert Err('e').unwrap_or(5) == 5
        assert Err('e').unwrap_or_else(lambda: 6) == 6

    def test_map_err(self):
        assert Err(EmptySequence('x')).map_err(lambda e: e.operation) == Err('x')
        assert Err('e').map(lambda x: x + 1) == Err('e')

    def test_pattern_matching(self):
        match Err(EmptySequence('random_element')):
            case Err(EmptySequence(operation)):
                assert operation == 'random_element'
            case _:
                pytest.fail('Err did not match')
