"""@safe decorator for catching exceptions."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any, overload

import wrapt

from oxide.guard import GuardExit
from oxide.types.result import Err, Ok

__all__ = ['safe']


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, Ok[T] | Err[Exception]]: ...


@overload
def safe[E: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...],
) -> Callable[[Callable[..., Any]], Callable[..., Any]]: ...


def safe(
    func: Callable[..., Any] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Decorator that catches exceptions and returns Err.

    Wraps a function so that it returns Ok(value) on success and
    Err(exception) if an exception is raised. For coroutine functions the
    call returns a coroutine that settles to a Result.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(ValueError, TypeError))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Exception types to catch, BaseException subclasses
            included. Defaults to (Exception,). Anything outside the tuple
            propagates unchanged, and guard exits always propagate.

    Example:
        ```python
        @safe
        def divide(a: int, b: int) -> float:
            return a / b
        divide(10, 2)
        # Ok(value=5.0)
        divide(10, 0)
        # Err(error=ZeroDivisionError('division by zero'))
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    async def settle(awaitable: Awaitable[Any]) -> Ok[Any] | Err[Any]:
        try:
            return Ok(await awaitable)
        except GuardExit:
            raise
        except catch as e:
            return Err(e)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Any:
        if inspect.iscoroutinefunction(wrapped):
            return settle(wrapped(*args, **kwargs))
        try:
            return Ok(wrapped(*args, **kwargs))
        except GuardExit:
            raise
        except catch as e:
            return Err(e)

    if func is not None:
        return wrapper(func)
    return wrapper
