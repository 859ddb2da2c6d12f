"""Variadic `all`/`any` folds over Results and Options.

The overloads correlate each positional argument with its slot in the output
tuple, so `all_results(Ok(1), Ok('a'))` is typed `Result[tuple[int, str], ...]`.
Past five arguments the element types widen to `Any`.
"""

from __future__ import annotations

from typing import Any, overload

from oxide.types.option import Nothing, NothingType, OptionOf, Some
from oxide.types.result import Err, Ok, ResultOf

__all__ = ['all_options', 'all_results', 'any_options', 'any_results']


@overload
def all_results() -> Ok[tuple[()]]: ...
@overload
def all_results[T1, E1](r1: ResultOf[T1, E1], /) -> ResultOf[tuple[T1], E1]: ...
@overload
def all_results[T1, T2, E1, E2](
    r1: ResultOf[T1, E1], r2: ResultOf[T2, E2], /
) -> ResultOf[tuple[T1, T2], E1 | E2]: ...
@overload
def all_results[T1, T2, T3, E1, E2, E3](
    r1: ResultOf[T1, E1], r2: ResultOf[T2, E2], r3: ResultOf[T3, E3], /
) -> ResultOf[tuple[T1, T2, T3], E1 | E2 | E3]: ...
@overload
def all_results[T1, T2, T3, T4, E1, E2, E3, E4](
    r1: ResultOf[T1, E1], r2: ResultOf[T2, E2], r3: ResultOf[T3, E3], r4: ResultOf[T4, E4], /
) -> ResultOf[tuple[T1, T2, T3, T4], E1 | E2 | E3 | E4]: ...
@overload
def all_results[T1, T2, T3, T4, T5, E1, E2, E3, E4, E5](
    r1: ResultOf[T1, E1], r2: ResultOf[T2, E2], r3: ResultOf[T3, E3], r4: ResultOf[T4, E4], r5: ResultOf[T5, E5], /
) -> ResultOf[tuple[T1, T2, T3, T4, T5], E1 | E2 | E3 | E4 | E5]: ...
@overload
def all_results(*results: ResultOf[Any, Any]) -> ResultOf[tuple[Any, ...], Any]: ...
def all_results(*results: ResultOf[Any, Any]) -> ResultOf[tuple[Any, ...], Any]:
    """Return the first Err, or Ok of every value in order.

    Examples:
        >>> all_results(Ok(1), Ok('s'), Ok(True))
        Ok(value=(1, 's', True))
        >>> all_results(Ok(1), Err('x'), Err('y'))
        Err(error='x')
    """
    values = []
    for result in results:
        if not result.is_ok():
            return result
        values.append(result.unwrap_unchecked())
    return Ok(tuple(values))


@overload
def any_results() -> Err[tuple[()]]: ...
@overload
def any_results[T1, E1](r1: ResultOf[T1, E1], /) -> ResultOf[T1, tuple[E1]]: ...
@overload
def any_results[T1, T2, E1, E2](
    r1: ResultOf[T1, E1], r2: ResultOf[T2, E2], /
) -> ResultOf[T1 | T2, tuple[E1, E2]]: ...
@overload
def any_results[T1, T2, T3, E1, E2, E3](
    r1: ResultOf[T1, E1], r2: ResultOf[T2, E2], r3: ResultOf[T3, E3], /
) -> ResultOf[T1 | T2 | T3, tuple[E1, E2, E3]]: ...
@overload
def any_results[T1, T2, T3, T4, E1, E2, E3, E4](
    r1: ResultOf[T1, E1], r2: ResultOf[T2, E2], r3: ResultOf[T3, E3], r4: ResultOf[T4, E4], /
) -> ResultOf[T1 | T2 | T3 | T4, tuple[E1, E2, E3, E4]]: ...
@overload
def any_results(*results: ResultOf[Any, Any]) -> ResultOf[Any, tuple[Any, ...]]: ...
def any_results(*results: ResultOf[Any, Any]) -> ResultOf[Any, tuple[Any, ...]]:
    """Return the first Ok, or Err of every error in order.

    Examples:
        >>> any_results(Err('a'), Ok(5), Err('b'))
        Ok(value=5)
        >>> any_results(Err('a'), Err('b'))
        Err(error=('a', 'b'))
    """
    errors = []
    for result in results:
        if result.is_ok():
            return result
        errors.append(result.unwrap_unchecked())
    return Err(tuple(errors))


@overload
def all_options() -> Some[tuple[()]]: ...
@overload
def all_options[T1](o1: OptionOf[T1], /) -> OptionOf[tuple[T1]]: ...
@overload
def all_options[T1, T2](o1: OptionOf[T1], o2: OptionOf[T2], /) -> OptionOf[tuple[T1, T2]]: ...
@overload
def all_options[T1, T2, T3](
    o1: OptionOf[T1], o2: OptionOf[T2], o3: OptionOf[T3], /
) -> OptionOf[tuple[T1, T2, T3]]: ...
@overload
def all_options[T1, T2, T3, T4](
    o1: OptionOf[T1], o2: OptionOf[T2], o3: OptionOf[T3], o4: OptionOf[T4], /
) -> OptionOf[tuple[T1, T2, T3, T4]]: ...
@overload
def all_options(*options: OptionOf[Any]) -> OptionOf[tuple[Any, ...]]: ...
def all_options(*options: OptionOf[Any]) -> OptionOf[tuple[Any, ...]]:
    """Return Nothing at the first Nothing, else Some of every value in order."""
    values = []
    for option in options:
        if not option.is_some():
            return Nothing
        values.append(option.unwrap_unchecked())
    return Some(tuple(values))


@overload
def any_options() -> NothingType: ...
@overload
def any_options[T1](o1: OptionOf[T1], /) -> OptionOf[T1]: ...
@overload
def any_options[T1, T2](o1: OptionOf[T1], o2: OptionOf[T2], /) -> OptionOf[T1 | T2]: ...
@overload
def any_options[T1, T2, T3](o1: OptionOf[T1], o2: OptionOf[T2], o3: OptionOf[T3], /) -> OptionOf[T1 | T2 | T3]: ...
@overload
def any_options(*options: OptionOf[Any]) -> OptionOf[Any]: ...
def any_options(*options: OptionOf[Any]) -> OptionOf[Any]:
    """Return the first Some unchanged, else Nothing."""
    for option in options:
        if option.is_some():
            return option
    return Nothing
