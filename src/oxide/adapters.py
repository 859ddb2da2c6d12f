"""`safe` adapters: turn raising calls and awaitables into containers.

`safe_result` keeps the raised exception as the Err payload; `safe_option`
drops it and returns Nothing. Only `Exception` subclasses are caught, so
`KeyboardInterrupt`, `SystemExit`, task cancellation and guard exits keep
propagating.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable, Coroutine
from typing import Any, overload

from oxide._logging import get_logger
from oxide.config import logging_enabled
from oxide.types.option import Nothing, OptionOf, Some
from oxide.types.result import Err, Ok, ResultOf

__all__ = ['safe_option', 'safe_result']

logger = get_logger(__name__)


def _wants_await(fn: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> bool:
    """Return True when `fn` is an awaitable to settle rather than a function to call."""
    if inspect.isawaitable(fn):
        if args or kwargs:
            msg = 'safe() takes no extra arguments when given an awaitable'
            raise TypeError(msg)
        return True
    if inspect.iscoroutinefunction(fn):
        msg = f'safe() needs an awaitable for coroutine function {fn.__qualname__}; pass {fn.__name__}(...) instead'
        raise TypeError(msg)
    if not callable(fn):
        msg = f'safe() expects a callable or an awaitable, got {fn!r}'
        raise TypeError(msg)
    return False


@overload
def safe_result[T](fn: Awaitable[T], /) -> Coroutine[Any, Any, ResultOf[T, Exception]]: ...
@overload
def safe_result[**P, T](fn: Callable[P, T], /, *args: P.args, **kwargs: P.kwargs) -> ResultOf[T, Exception]: ...
def safe_result(fn: Any, /, *args: Any, **kwargs: Any) -> Any:
    """Call `fn(*args, **kwargs)` and capture the outcome as a Result.

    Given an awaitable instead, return a coroutine that awaits it and always
    completes with a Result.

    Example:
        ```python
        safe_result(int, '42')      # Ok(value=42)
        safe_result(int, 'x')       # Err(error=ValueError(...))
        await safe_result(fetch())  # Ok(...) or Err(...)
        ```
    """
    if _wants_await(fn, args, kwargs):
        return _settle_result(fn)
    try:
        return Ok(fn(*args, **kwargs))
    except Exception as exc:
        if logging_enabled():
            logger.debug('safe captured exception', function=_describe(fn), error=repr(exc))
        return Err(exc)


async def _settle_result[T](awaitable: Awaitable[T]) -> ResultOf[T, Exception]:
    try:
        return Ok(await awaitable)
    except Exception as exc:
        if logging_enabled():
            logger.debug('safe captured rejection', error=repr(exc))
        return Err(exc)


@overload
def safe_option[T](fn: Awaitable[T], /) -> Coroutine[Any, Any, OptionOf[T]]: ...
@overload
def safe_option[**P, T](fn: Callable[P, T], /, *args: P.args, **kwargs: P.kwargs) -> OptionOf[T]: ...
def safe_option(fn: Any, /, *args: Any, **kwargs: Any) -> Any:
    """Call `fn(*args, **kwargs)`; Some(return value), or Nothing if it raised.

    The exception is discarded; it only shows up in the debug log.
    """
    if _wants_await(fn, args, kwargs):
        return _settle_option(fn)
    try:
        return Some(fn(*args, **kwargs))
    except Exception as exc:
        if logging_enabled():
            logger.debug('safe discarded exception', function=_describe(fn), error=repr(exc))
        return Nothing


async def _settle_option[T](awaitable: Awaitable[T]) -> OptionOf[T]:
    try:
        return Some(await awaitable)
    except Exception as exc:
        if logging_enabled():
            logger.debug('safe discarded rejection', error=repr(exc))
        return Nothing


def _describe(fn: Callable[..., Any]) -> str:
    return getattr(fn, '__qualname__', None) or repr(fn)
