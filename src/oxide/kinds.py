"""The `Result` and `Option` namespaces.

Each is a single immutable object that is at once:

- the guarded-function constructor: `Result(body)` / `Option(body)`, also
  usable as a decorator;
- a home for the static helpers `is_`, `safe`, `all` and `any`;
- subscriptable for annotations: `Result[int, str]` is `Ok[int] | Err[str]`.

Example:
    ```python
    from oxide import Err, Ok, Option, Result, Some

    Result.all(Ok(1), Ok('s'), Ok(True))   # Ok(value=(1, 's', True))
    Result.any(Err('a'), Err('b'))         # Err(error=('a', 'b'))
    Option.safe(int, 'nope')               # Nothing

    @Option
    def first_even_half(guard, xs: list[int]) -> Option[int]:
        even = guard(Option.from_nullable(next((x for x in xs if x % 2 == 0), None)))
        return Some(even // 2)
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Final, TypeIs

from oxide._frozen import Frozen
from oxide.adapters import safe_option, safe_result
from oxide.aggregate import all_options, all_results, any_options, any_results
from oxide.guard import OptionGuard, ResultGuard, guarded
from oxide.types.option import Nothing, NothingType, OptionOf, Some
from oxide.types.result import Err, Ok, ResultOf

__all__ = ['Option', 'OptionKind', 'Result', 'ResultKind']


class ResultKind(Frozen):
    """Namespace type of `Result`. Use the `Result` instance, not this class."""

    __slots__ = ()

    def __call__[T, E](self, body: Callable[..., ResultOf[T, E]]) -> Callable[..., ResultOf[T, E]]:
        """Wrap `body(guard, *args)` into a function of `*args` returning a Result."""
        return guarded(body, ResultGuard)

    def __getitem__(self, params: Any) -> Any:
        if isinstance(params, tuple):
            value_type, error_type = params
        else:
            value_type, error_type = params, Exception
        return Ok[value_type] | Err[error_type]

    def __repr__(self) -> str:
        return 'Result'

    @staticmethod
    def is_(value: object) -> TypeIs[ResultOf[Any, Any]]:
        """Return True if value is an Ok or an Err."""
        return isinstance(value, Ok | Err)

    safe = staticmethod(safe_result)
    all = staticmethod(all_results)
    any = staticmethod(any_results)


class OptionKind(Frozen):
    """Namespace type of `Option`. Use the `Option` instance, not this class."""

    __slots__ = ()

    def __call__[T](self, body: Callable[..., OptionOf[T]]) -> Callable[..., OptionOf[T]]:
        """Wrap `body(guard, *args)` into a function of `*args` returning an Option."""
        return guarded(body, OptionGuard)

    def __getitem__(self, value_type: Any) -> Any:
        return Some[value_type] | NothingType

    def __repr__(self) -> str:
        return 'Option'

    @staticmethod
    def is_(value: object) -> TypeIs[OptionOf[Any]]:
        """Return True if value is a Some or Nothing."""
        return isinstance(value, Some | NothingType)

    @staticmethod
    def from_nullable[T](value: T | None) -> OptionOf[T]:
        """Nothing for None, Some(value) for anything else."""
        if value is None:
            return Nothing
        return Some(value)

    safe = staticmethod(safe_option)
    all = staticmethod(all_options)
    any = staticmethod(any_options)


Result: Final = ResultKind()
Option: Final = OptionKind()
