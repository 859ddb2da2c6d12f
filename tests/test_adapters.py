"""Tests for Result.safe and Option.safe."""

import asyncio

import pytest

from oxide import Err, Nothing, Ok, Option, Result, Some


def boom():
    raise ValueError('boom')


class TestResultSafe:
    """Tests for the synchronous Result.safe adapter."""

    def test_returns_ok(self):
        assert Result.safe(lambda: 42) == Ok(42)

    def test_captures_exception(self):
        """A raised exception becomes the Err payload, unchanged."""
        result = Result.safe(boom)
        assert result.is_err()
        assert isinstance(result.unwrap_err(), ValueError)
        assert str(result.unwrap_err()) == 'boom'

    def test_passes_arguments(self):
        assert Result.safe(int, '42') == Ok(42)
        assert Result.safe(int, '2a', base=16) == Ok(42)
        assert isinstance(Result.safe(int, 'x').unwrap_err(), ValueError)

    def test_base_exceptions_propagate(self):
        """Signals outside Exception are never converted."""

        def interrupt():
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            Result.safe(interrupt)

    def test_rejects_coroutine_function(self):
        async def fetch():
            return 1

        with pytest.raises(TypeError, match='awaitable'):
            Result.safe(fetch)

    def test_rejects_non_callable(self):
        with pytest.raises(TypeError):
            Result.safe(42)


class TestResultSafeAwaitable:
    """Tests for the awaitable overload of Result.safe."""

    @pytest.mark.asyncio
    async def test_resolution_becomes_ok(self):
        async def fetch():
            return 'data'

        assert await Result.safe(fetch()) == Ok('data')

    @pytest.mark.asyncio
    async def test_rejection_becomes_err(self):
        async def fetch():
            raise ValueError('boom')

        result = await Result.safe(fetch())
        assert isinstance(result.unwrap_err(), ValueError)
        assert str(result.unwrap_err()) == 'boom'

    @pytest.mark.asyncio
    async def test_future(self):
        future = asyncio.get_running_loop().create_future()
        future.set_exception(RuntimeError('rejected'))
        result = await Result.safe(future)
        assert isinstance(result.unwrap_err(), RuntimeError)

    @pytest.mark.asyncio
    async def test_rejects_extra_arguments(self):
        async def fetch():
            return 1

        coro = fetch()
        try:
            with pytest.raises(TypeError, match='no extra arguments'):
                Result.safe(coro, 1)
        finally:
            coro.close()


class TestOptionSafe:
    """Tests for Option.safe."""

    def test_returns_some(self):
        assert Option.safe(lambda: 42) == Some(42)

    def test_exception_collapses_to_nothing(self):
        assert Option.safe(boom) is Nothing

    def test_passes_arguments(self):
        assert Option.safe(int, '7') == Some(7)

    @pytest.mark.asyncio
    async def test_awaitable(self):
        async def ok():
            return 1

        async def fail():
            raise ValueError('x')

        assert await Option.safe(ok()) == Some(1)
        assert await Option.safe(fail()) is Nothing


class TestSafeInsideGuard:
    """safe never swallows a guard exit raised inside the adapted call."""

    def test_guard_exit_passes_through_safe(self):
        @Result
        def f(guard):
            inner = Result.safe(lambda: guard(Err('guarded')))
            return Ok(('not reached', inner))

        assert f() == Err('guarded')
