"""Guards and guarded functions.

A guarded function receives a guard as its first argument. Calling the guard
on a container returns the success value, or aborts the whole function body
and makes the wrapper return the failure container unchanged. This is the
same idea as Rust's `?` operator, scoped to a single call.

Example:
    ```python
    from oxide import Err, Ok, Result

    def to_pos(pos: int) -> Result[int, str]:
        return Ok(pos * 10) if 0 < pos < 100 else Err('Invalid Pos')

    @Result
    def get_pos(guard, x: int, y: int):
        return Ok({'x': guard(to_pos(x)), 'y': guard(to_pos(y))})

    get_pos(10, 20)  # Ok(value={'x': 100, 'y': 200})
    get_pos(0, 50)   # Err(error='Invalid Pos')
    ```

The abort travels as a `GuardExit`, which derives from `BaseException` so that
`except Exception` handlers in the body never see it. Handlers that catch
`BaseException` must call `guard.bubble(exc)` first.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any

import wrapt

from oxide._logging import get_logger
from oxide.config import get_config
from oxide.errors import GuardExpired
from oxide.types.option import Nothing, NothingType, Some
from oxide.types.result import Err, Ok

__all__ = [
    'Guard',
    'GuardExit',
    'OptionGuard',
    'ResultGuard',
    'guarded',
]

logger = get_logger(__name__)


class GuardExit(BaseException):  # noqa: N818
    """Control signal raised by a guard to leave the guarded body.

    Not an error. The wrapper that created the owning guard catches it and
    returns `container`; no other frame should swallow it.
    """

    __slots__ = ('_container', '_owner')

    def __init__(self, owner: Guard, container: Any) -> None:
        self._owner = owner
        self._container = container
        super().__init__(container)

    @property
    def owner(self) -> Guard:
        """The guard that raised this exit."""
        return self._owner

    @property
    def container(self) -> Any:
        """The failure container the guarded function returns."""
        return self._container


class Guard:
    """Base guard: unwraps success containers and aborts on failures.

    A guard is bound to a single guarded invocation and expires when that
    invocation returns.
    """

    __slots__ = ('_active',)

    #: container type accepted as success
    success: type = object
    #: container type that aborts the body
    failure: type = object

    def __init__(self) -> None:
        self._active = True

    def __call__[T](self, container: Any) -> T:
        if not self._active:
            msg = f'{type(self).__name__} used after its guarded call returned'
            raise GuardExpired(msg)
        if isinstance(container, self.success):
            return container.unwrap_unchecked()
        if isinstance(container, self.failure):
            config = get_config()
            if config.trace_guards and config.log_level is not None:
                logger.debug('guard short-circuit', guard=type(self).__name__, container=repr(container))
            raise GuardExit(self, self._exit_value(container))
        msg = f'{type(self).__name__} expects {self.success.__name__} or {self.failure.__name__}, got {container!r}'
        raise TypeError(msg)

    def _exit_value(self, container: Any) -> Any:
        return container

    @staticmethod
    def bubble(caught: object) -> None:
        """Re-raise `caught` if it is a guard exit, otherwise do nothing.

        Call this first in any handler inside a guarded body that catches
        `BaseException`, so an in-flight abort keeps propagating.

        Example:
            ```python
            @Result
            def load(guard, path):
                try:
                    data = guard(read(path))
                except BaseException as exc:
                    guard.bubble(exc)
                    return Err(str(exc))
                return Ok(data)
            ```
        """
        if isinstance(caught, GuardExit):
            raise caught

    @property
    def active(self) -> bool:
        """Whether the guarded invocation that owns this guard is still running."""
        return self._active

    def close(self) -> None:
        self._active = False


class ResultGuard(Guard):
    """Guard for Result bodies: `Ok` unwraps, `Err` is returned as-is."""

    __slots__ = ()

    success = Ok
    failure = Err


class OptionGuard(Guard):
    """Guard for Option bodies: `Some` unwraps, `Nothing` is returned."""

    __slots__ = ()

    success = Some
    failure = NothingType

    def _exit_value(self, container: Any) -> Any:
        return Nothing


def guarded(body: Callable[..., Any], guard_type: type[Guard]) -> Callable[..., Any]:
    """Wrap `body` so it receives a fresh guard and honours its exits.

    Coroutine functions are detected and wrapped with an async wrapper. Any
    exception that is not an exit of this invocation's guard propagates.

    Args:
        body: Function whose first parameter (after `self` for methods) is the guard.
        guard_type: ResultGuard or OptionGuard.

    Returns:
        A function taking the remaining parameters of `body`.
    """
    if inspect.iscoroutinefunction(body):

        @wrapt.decorator
        async def async_wrapper(
            wrapped: Callable[..., Awaitable[Any]],
            instance: Any,
            args: tuple[Any, ...],
            kwargs: dict[str, Any],
        ) -> Any:
            guard = guard_type()
            try:
                return await wrapped(guard, *args, **kwargs)
            except GuardExit as exit_:
                if exit_.owner is not guard:
                    raise
                return exit_.container
            finally:
                guard.close()

        return async_wrapper(body)

    @wrapt.decorator
    def sync_wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Any:
        guard = guard_type()
        try:
            return wrapped(guard, *args, **kwargs)
        except GuardExit as exit_:
            if exit_.owner is not guard:
                raise
            return exit_.container
        finally:
            guard.close()

    return sync_wrapper(body)
