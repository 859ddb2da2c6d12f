"""Tests for Result.all/any and Option.all/any."""

from hypothesis import given
from hypothesis import strategies as st

from oxide import Err, Nothing, Ok, Option, Result, Some
from tests.strategies import options, results


def ok(value):
    return Ok(value)


def err(error):
    return Err(error)


class TestResultAll:
    """Tests for Result.all."""

    def test_all_ok_returns_ordered_values(self):
        """Should return an Ok tuple when all results are Ok."""
        assert Result.all(ok(1), ok('test_string'), ok(True), ok({'a': 1, 'b': 2})).unwrap() == (
            1,
            'test_string',
            True,
            {'a': 1, 'b': 2},
        )

    def test_first_err_wins(self):
        """Should return the first Err if any Err is present."""
        assert Result.all(ok(1), ok('two'), err('test_err'), ok({'a': 1}), err('test_err_2')).unwrap_err() == 'test_err'

    def test_first_err_returned_unchanged(self):
        failure = Err(ValueError('x'))
        assert Result.all(Ok(1), failure, Ok(2)) is failure

    def test_empty(self):
        assert Result.all() == Ok(())

    @given(st.lists(results))
    def test_matches_sequential_scan(self, items):
        """all() equals a left-to-right scan stopping at the first Err."""
        first_err = next((r for r in items if r.is_err()), None)
        expected = first_err if first_err is not None else Ok(tuple(r.unwrap() for r in items))
        assert Result.all(*items) == expected


class TestResultAny:
    """Tests for Result.any."""

    def test_first_ok_wins(self):
        assert Result.any(Err('a'), Ok(5), Err('b')).unwrap() == 5

    def test_first_ok_returned_unchanged(self):
        success = Ok([1])
        assert Result.any(Err('a'), success, Ok(2)) is success

    def test_all_errors_collected_in_order(self):
        assert Result.any(Err('a'), Err('b')).unwrap_err() == ('a', 'b')

    def test_empty(self):
        assert Result.any() == Err(())


class TestOptionAll:
    """Tests for Option.all."""

    def test_all_some(self):
        assert Option.all(Some(1), Some('s'), Some(None)) == Some((1, 's', None))

    def test_nothing_short_circuits(self):
        assert Option.all(Some(1), Nothing, Some(2)) is Nothing

    def test_empty(self):
        assert Option.all() == Some(())

    @given(st.lists(options))
    def test_matches_sequential_scan(self, items):
        if any(o.is_none() for o in items):
            assert Option.all(*items) is Nothing
        else:
            assert Option.all(*items) == Some(tuple(o.unwrap() for o in items))


class TestOptionAny:
    """Tests for Option.any."""

    def test_first_some_wins(self):
        first = Some(2)
        assert Option.any(Nothing, first, Some(3)) is first

    def test_all_nothing(self):
        assert Option.any(Nothing, Nothing) is Nothing

    def test_empty(self):
        assert Option.any() is Nothing
