"""Structural matching over containers and plain values.

`match(value, entries)` walks `entries` top to bottom and stops at the first
one that accepts `value`. An entry is either a `(pattern, result)` pair or a
bare callable, which acts as the default and receives the raw value.

Example:
    ```python
    from oxide import Err, Nothing, Ok, Some, SomeIs, _, match

    def describe(opt):
        return match(opt, [
            (Some(SomeIs(lambda n: n > 10)), 'big'),
            (Some(_), lambda n: f'small {n}'),
            (Nothing, 'empty'),
        ])

    describe(Some(20))  # 'big'
    describe(Some(5))   # 'small 5'
    describe(Nothing)   # 'empty'
    ```

Pattern kinds, checked in this order:

- tagged patterns built by `Fn`, `SomeIs`, `OkIs`, `ErrIs`, plus the `_` and
  `Default` markers;
- container shapes `Some(p)`, `Ok(p)`, `Err(p)` and `Nothing`, whose payload
  pattern `p` is matched recursively. A predicate wrapper of the same kind
  placed directly in a shape, e.g. `Some(SomeIs(pred))`, tests the payload;
- classes, tested with `isinstance`;
- other callables, used as predicates (wrap functions in `Fn` to compare them
  by identity instead);
- mappings, matched key by key (extra keys in the value are ignored);
- lists and tuples, matched element-wise with equal length;
- anything else, compared with `==`.

When the winning entry's result is callable it is called: with the payload
for container shapes and predicate wrappers, with no arguments for `Nothing`,
and with the raw value otherwise.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from enum import Enum
from typing import Any, Final

from oxide._frozen import Frozen
from oxide._logging import get_logger
from oxide.config import logging_enabled
from oxide.errors import InvalidPattern, NonExhaustiveMatch
from oxide.types.option import NothingType, Some
from oxide.types.result import Err, Ok

__all__ = [
    'Default',
    'ErrIs',
    'Fn',
    'Matcher',
    'OkIs',
    'Pattern',
    'PatternKind',
    'SomeIs',
    '_',
    'match',
    'matches',
]

logger = get_logger(__name__)


class PatternKind(Enum):
    """Tag attached to a Pattern when it is built."""

    WILDCARD = 'wildcard'
    DEFAULT = 'default'
    FN = 'fn'
    SOME_IS = 'some_is'
    OK_IS = 'ok_is'
    ERR_IS = 'err_is'


_PREDICATE_TARGETS: Final = {
    PatternKind.SOME_IS: Some,
    PatternKind.OK_IS: Ok,
    PatternKind.ERR_IS: Err,
}

_SHAPE_KINDS: Final = {
    Some: PatternKind.SOME_IS,
    Ok: PatternKind.OK_IS,
    Err: PatternKind.ERR_IS,
}


class Pattern(Frozen):
    """A tagged pattern. Build these with the constructors below."""

    __slots__ = ('_kind', '_target')

    def __init__(self, kind: PatternKind, target: Any = None) -> None:
        object.__setattr__(self, '_kind', kind)
        object.__setattr__(self, '_target', target)

    @property
    def kind(self) -> PatternKind:
        return self._kind

    @property
    def target(self) -> Any:
        return self._target

    def __repr__(self) -> str:
        match self._kind:
            case PatternKind.WILDCARD:
                return '_'
            case PatternKind.DEFAULT:
                return 'Default'
            case PatternKind.FN:
                return f'Fn({self._target!r})'
            case _:
                name = _PREDICATE_TARGETS[self._kind].__name__
                return f'{name}Is({self._target!r})'


def Fn(target: Callable[..., Any]) -> Pattern:  # noqa: N802
    """Match a callable by identity, never by calling it."""
    if not callable(target):
        raise TypeError(f'Fn() expects a callable, got {target!r}')
    return Pattern(PatternKind.FN, target)


def SomeIs(pred: Callable[[Any], bool]) -> Pattern:  # noqa: N802
    """Match `Some(v)` when `pred(v)` is truthy."""
    return Pattern(PatternKind.SOME_IS, pred)


def OkIs(pred: Callable[[Any], bool]) -> Pattern:  # noqa: N802
    """Match `Ok(v)` when `pred(v)` is truthy."""
    return Pattern(PatternKind.OK_IS, pred)


def ErrIs(pred: Callable[[Any], bool]) -> Pattern:  # noqa: N802
    """Match `Err(e)` when `pred(e)` is truthy."""
    return Pattern(PatternKind.ERR_IS, pred)


_: Final = Pattern(PatternKind.WILDCARD)
"""Wildcard: matches any value without binding it."""

Default: Final = Pattern(PatternKind.DEFAULT)
"""Catch-all marker for `(Default, result)` entries."""


def matches(pattern: Any, value: Any) -> bool:
    """Return True if `value` has the shape described by `pattern`."""
    if isinstance(pattern, Pattern):
        return _matches_tagged(pattern, value)
    if isinstance(pattern, NothingType):
        return isinstance(value, NothingType)
    shape_kind = _SHAPE_KINDS.get(type(pattern))
    if shape_kind is not None:
        if type(value) is not type(pattern):
            return False
        inner = pattern.unwrap_unchecked()
        payload = value.unwrap_unchecked()
        if isinstance(inner, Pattern) and inner.kind is shape_kind:
            return bool(inner.target(payload))
        return matches(inner, payload)
    if isinstance(pattern, type):
        return isinstance(value, pattern)
    if callable(pattern):
        return bool(pattern(value))
    if isinstance(pattern, Mapping):
        return isinstance(value, Mapping) and all(
            key in value and matches(sub, value[key]) for key, sub in pattern.items()
        )
    if isinstance(pattern, list | tuple):
        return (
            isinstance(value, list | tuple)
            and len(pattern) == len(value)
            and all(matches(sub, item) for sub, item in zip(pattern, value, strict=True))
        )
    return bool(pattern == value)


def _matches_tagged(pattern: Pattern, value: Any) -> bool:
    match pattern.kind:
        case PatternKind.WILDCARD | PatternKind.DEFAULT:
            return True
        case PatternKind.FN:
            return callable(value) and value is pattern.target
        case kind:
            target = _PREDICATE_TARGETS[kind]
            return isinstance(value, target) and bool(pattern.target(value.unwrap_unchecked()))


def _call_args(pattern: Any, value: Any) -> tuple[Any, ...]:
    if isinstance(pattern, NothingType):
        return ()
    if type(pattern) in _SHAPE_KINDS:
        return (value.unwrap_unchecked(),)
    if isinstance(pattern, Pattern) and pattern.kind in _PREDICATE_TARGETS:
        return (value.unwrap_unchecked(),)
    return (value,)


def _resolve(result: Any, args: tuple[Any, ...]) -> Any:
    if callable(result):
        return result(*args)
    return result


class Matcher(Frozen):
    """Type of the `match` callable."""

    __slots__ = ()

    def __call__(self, value: Any, entries: Sequence[Any]) -> Any:
        """Return the result of the first entry whose pattern accepts `value`.

        Raises:
            NonExhaustiveMatch: No entry matched and there is no default.
            InvalidPattern: An entry is neither a pair nor a callable.
        """
        for entry in entries:
            if isinstance(entry, tuple | list):
                if len(entry) != 2:
                    raise InvalidPattern(entry)
                pattern, result = entry
                if matches(pattern, value):
                    return _resolve(result, _call_args(pattern, value))
            elif callable(entry):
                return entry(value)
            else:
                raise InvalidPattern(entry)

        if logging_enabled():
            logger.debug('match exhausted', value=repr(value))
        raise NonExhaustiveMatch(value)

    def __repr__(self) -> str:
        return 'match'


match = Matcher()
