"""Error types raised for programmer misuse.

Domain failures travel as data (`Err`, `Nothing`) and are never raised.
The classes here cover the remaining cases: unwrapping the wrong variant,
a `match` with no matching entry, malformed match entries and guards used
outside their invocation. Each one also derives from the closest builtin so
generic handlers keep working.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    'GuardExpired',
    'InvalidPattern',
    'NonExhaustiveMatch',
    'OxideError',
    'UnwrapPanic',
]


class OxideError(Exception):
    """Base exception class for oxide errors.

    Attributes:
        message (str): A human-readable description of the error.
        code (str | None): An optional error code for programmatic error handling.

    Example:
        ```python
        from oxide import Err, OxideError

        try:
            Err('boom').unwrap()
        except OxideError as e:
            print(e)  # [unwrap] called unwrap() on Err('boom')
        ```
    """

    code: str | None = None

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message: str = message
        if code is not None:
            self.code = code

    def __str__(self) -> str:
        """Return a string representation of the error."""
        if self.code:
            return f'[{self.code}] {self.message}'
        return self.message


class UnwrapPanic(OxideError, RuntimeError):  # noqa: N818
    """A container was unwrapped on the wrong variant.

    Raised by `unwrap`, `unwrap_err`, `expect` and `expect_err`. It signals a
    bug in the caller and is not meant to be caught and retried.
    """

    code = 'unwrap'


class NonExhaustiveMatch(OxideError, LookupError):  # noqa: N818
    """No entry of a `match` call accepted the value."""

    code = 'match'

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f'no pattern matched {value!r}')


class InvalidPattern(OxideError, TypeError):  # noqa: N818
    """A `match` entry is neither a `(pattern, result)` pair nor a callable."""

    code = 'pattern'

    def __init__(self, entry: Any) -> None:
        self.entry = entry
        super().__init__(f'match entries must be (pattern, result) pairs or callables, got {entry!r}')


class GuardExpired(OxideError, RuntimeError):  # noqa: N818
    """A guard was called after the guarded invocation that created it returned."""

    code = 'guard'
