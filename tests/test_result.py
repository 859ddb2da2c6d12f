"""Tests for Result type (Ok and Err)."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from oxide import Err, Nothing, Ok, Some, UnwrapPanic, collect
from tests.strategies import errs, oks, results, scalars


class TestOkCreation:
    """Tests for Ok instantiation and basic properties."""

    def test_ok_creation(self):
        """Ok wraps a value."""
        ok = Ok(42)
        assert ok.value == 42

    def test_ok_with_none(self):
        """Ok can wrap None."""
        assert Ok(None).value is None

    def test_ok_is_frozen(self):
        """Ok instances are immutable."""
        ok = Ok(42)
        with pytest.raises(AttributeError):
            ok.value = 100  # type: ignore[misc]

    def test_err_is_frozen(self):
        """Err instances are immutable."""
        err = Err('error')
        with pytest.raises(AttributeError):
            err.error = 'new error'  # type: ignore[misc]

    def test_native_match_statement(self):
        """Ok and Err work with Python's match statement."""

        def describe(result):
            match result:
                case Ok(value):
                    return f'ok {value}'
                case Err(error):
                    return f'err {error}'

        assert describe(Ok(1)) == 'ok 1'
        assert describe(Err('x')) == 'err x'


class TestResultEquality:
    """Tests for Result equality and hashing."""

    def test_ok_equality(self):
        assert Ok(42) == Ok(42)
        assert Ok(42) != Ok(43)

    def test_err_equality(self):
        assert Err('error') == Err('error')
        assert Err('error1') != Err('error2')

    def test_ok_not_equal_to_err(self):
        """Ok is never equal to Err."""
        assert Ok(42) != Err(42)

    def test_ok_not_equal_to_some(self):
        """Containers of different families never compare equal."""
        assert Ok(42) != Some(42)

    def test_hashable(self):
        assert {Ok(42): 'value'}[Ok(42)] == 'value'
        assert hash(Err('error')) == hash(Err('error'))


class TestResultQuerying:
    """Tests for is_ok/is_err and their predicate forms."""

    @given(scalars)
    def test_ok_predicates(self, value):
        """Ok(v) is ok and never err."""
        assert Ok(value).is_ok() is True
        assert Ok(value).is_err() is False

    @given(scalars)
    def test_err_predicates(self, error):
        """Err(e) is err and never ok."""
        assert Err(error).is_err() is True
        assert Err(error).is_ok() is False

    def test_is_ok_and(self):
        assert Ok(5).is_ok_and(lambda x: x > 3) is True
        assert Ok(1).is_ok_and(lambda x: x > 3) is False
        assert Err(5).is_ok_and(lambda x: x > 3) is False

    def test_is_err_and(self):
        assert Err('boom').is_err_and(lambda e: e == 'boom') is True
        assert Ok('boom').is_err_and(lambda e: e == 'boom') is False


class TestResultUnwrap:
    """Tests for unwrap, unwrap_err, unwrap_or, unwrap_or_else, expect."""

    @given(scalars)
    def test_ok_unwrap(self, value):
        assert Ok(value).unwrap() == value

    @given(scalars)
    def test_err_unwrap_err(self, error):
        assert Err(error).unwrap_err() == error

    def test_err_unwrap_panics(self):
        """unwrap on Err raises UnwrapPanic naming the error."""
        with pytest.raises(UnwrapPanic, match="Err\\('bad'\\)"):
            Err('bad').unwrap()

    def test_unwrap_panic_is_runtime_error(self):
        """Generic RuntimeError handlers still see panics."""
        with pytest.raises(RuntimeError):
            Err('bad').unwrap()

    def test_ok_unwrap_err_panics(self):
        with pytest.raises(UnwrapPanic, match='unwrap_err'):
            Ok(1).unwrap_err()

    @given(errs, scalars)
    def test_err_unwrap_or(self, err, default):
        """unwrap_or never fails and returns the default for Err."""
        assert err.unwrap_or(default) == default

    def test_ok_unwrap_or(self):
        assert Ok(1).unwrap_or(2) == 1

    def test_unwrap_or_else(self):
        """The fallback function receives the error."""
        assert Err('abc').unwrap_or_else(len) == 3
        assert Ok(1).unwrap_or_else(len) == 1

    def test_unwrap_unchecked(self):
        assert Ok(1).unwrap_unchecked() == 1
        assert Err('e').unwrap_unchecked() == 'e'

    def test_expect(self):
        assert Ok(1).expect('needs value') == 1
        with pytest.raises(UnwrapPanic, match='needs value'):
            Err('e').expect('needs value')

    def test_expect_err(self):
        assert Err('e').expect_err('needs error') == 'e'
        with pytest.raises(UnwrapPanic, match='needs error'):
            Ok(1).expect_err('needs error')


class TestResultTransform:
    """Tests for map, map_err, map_or, map_or_else, and_then, or_else."""

    def test_ok_map(self):
        assert Ok(2).map(lambda x: x * 10) == Ok(20)

    def test_err_map_is_noop(self):
        """map over Err returns the receiver itself."""
        err = Err('x')
        assert err.map(lambda x: x * 10) is err

    def test_map_does_not_mutate(self):
        """map returns a new container and leaves the original alone."""
        data = [1, 2]
        ok = Ok(data)
        mapped = ok.map(lambda xs: [*xs, 3])
        assert ok == Ok([1, 2])
        assert mapped == Ok([1, 2, 3])
        assert mapped is not ok

    def test_map_err(self):
        assert Err('x').map_err(str.upper) == Err('X')
        ok = Ok(1)
        assert ok.map_err(str.upper) is ok

    def test_map_or(self):
        assert Ok(2).map_or(0, lambda x: x + 1) == 3
        assert Err('x').map_or(0, lambda x: x + 1) == 0

    def test_map_or_else(self):
        """map_or_else feeds the error to the default function."""
        assert Ok('Simon').map_or_else(lambda e: f'Error: {e}', lambda u: f'Hello {u}') == 'Hello Simon'
        assert Err('*silence*').map_or_else(lambda e: f'Error: {e}', lambda u: f'Hello {u}') == 'Error: *silence*'

    def test_and_then(self):
        def half(x: int):
            return Ok(x // 2) if x % 2 == 0 else Err('odd')

        assert Ok(8).and_then(half).and_then(half) == Ok(2)
        assert Ok(6).and_then(half).and_then(half) == Err('odd')
        assert Err('early').and_then(half) == Err('early')

    def test_or_else(self):
        assert Err('x').or_else(lambda e: Ok(len(e))) == Ok(1)
        assert Ok(3).or_else(lambda e: Ok(len(e))) == Ok(3)

    def test_and_or(self):
        assert Ok(1).and_(Ok(2)) == Ok(2)
        assert Err('a').and_(Ok(2)) == Err('a')
        assert Ok(1).or_(Err('b')) == Ok(1)
        assert Err('a').or_(Ok(2)) == Ok(2)

    def test_inspect(self):
        seen = []
        assert Ok(1).inspect(seen.append) == Ok(1)
        assert Err('e').inspect(seen.append) == Err('e')
        assert Err('e').inspect_err(seen.append) == Err('e')
        assert seen == [1, 'e']

    @given(results)
    def test_identity_map(self, result):
        """Mapping the identity function yields an equal container."""
        assert result.map(lambda x: x) == result
        assert result.map_err(lambda e: e) == result


class TestResultConversion:
    """Tests for ok, err, into, into_tuple and filter."""

    def test_ok_err(self):
        assert Ok(1).ok() == Some(1)
        assert Ok(1).err() is Nothing
        assert Err('e').ok() is Nothing
        assert Err('e').err() == Some('e')

    def test_into(self):
        assert Ok(1).into() == 1
        assert Err('e').into() is None

    def test_into_tuple(self):
        assert Ok(1).into_tuple() == (None, 1)
        assert Err('e').into_tuple() == ('e', None)

    def test_filter(self):
        assert Ok(4).filter(lambda x: x > 3) == Some(4)
        assert Ok(1).filter(lambda x: x > 3) is Nothing
        assert Err('e').filter(lambda x: True) is Nothing


class TestCollect:
    """Tests for collect over an iterable of Results."""

    def test_collect_all_ok(self):
        assert collect([Ok(1), Ok(2), Ok(3)]) == Ok([1, 2, 3])

    def test_collect_first_err(self):
        assert collect([Ok(1), Err('a'), Err('b')]) == Err('a')

    def test_collect_stops_pulling(self):
        """Items after the first Err are never pulled from the iterable."""
        pulled = []

        def gen():
            for item in (Ok(1), Err('stop'), Ok(3)):
                pulled.append(item)
                yield item

        assert collect(gen()) == Err('stop')
        assert pulled == [Ok(1), Err('stop')]

    @given(st.lists(oks))
    def test_collect_oks(self, items):
        assert collect(items) == Ok([item.value for item in items])
