"""Result type: Ok[T] | Err[E] for explicit error handling."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from oxide._frozen import FrozenStructMeta
from oxide.errors import UnwrapPanic

if TYPE_CHECKING:
    from oxide.types.option import OptionOf

__all__ = ['Err', 'Ok', 'ResultOf', 'collect']


class Ok[T](msgspec.Struct, frozen=True, gc=False, metaclass=FrozenStructMeta):
    """Success variant of Result containing a value of type T.

    Ok represents the successful outcome of an operation. It wraps a value
    that can be extracted, transformed, or propagated through a chain of
    Result-returning operations.

    Examples:
        >>> ok = Ok(42)
        >>> ok.unwrap()
        42
        >>> ok.map(lambda x: x * 2)
        Ok(value=84)
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True if the result is Ok.

        This method provides type narrowing - after checking is_ok(),
        the type checker knows the result is Ok[T].
        """
        return True

    def is_err(self) -> TypeIs[Err[Any]]:
        """Return False since this is Ok."""
        return False

    def is_ok_and(self, pred: Callable[[T], bool]) -> bool:
        """Return True if the value satisfies the predicate."""
        return bool(pred(self.value))

    def is_err_and(self, _pred: Callable[[Any], bool]) -> bool:
        """Return False since there is no error to test."""
        return False

    def unwrap(self) -> T:
        """Return the contained Ok value.

        Since this is Ok, this always succeeds.
        """
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise since this is Ok.

        Raises:
            UnwrapPanic: Always, since Ok has no error to unwrap.
        """
        raise UnwrapPanic(f'called unwrap_err() on Ok({self.value!r})')

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[Any], T]) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the fallback function."""
        return self.value

    def unwrap_unchecked(self) -> T:
        """Return the payload without checking the variant.

        Meant for code that has already checked the variant. On Err this
        returns the error, not a value.
        """
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained Ok value, ignoring the message."""
        return self.value

    def expect_err(self, msg: str) -> NoReturn:
        """Raise with a custom message since this is Ok.

        Raises:
            UnwrapPanic: Always, with the custom message.
        """
        raise UnwrapPanic(f'{msg}: {self.value!r}')

    def ok(self) -> OptionOf[T]:
        """Convert to Option, returning Some(value)."""
        from oxide.types.option import Some

        return Some(self.value)

    def err(self) -> OptionOf[Any]:
        """Convert to Option, returning Nothing since this is Ok."""
        from oxide.types.option import Nothing

        return Nothing

    def into(self) -> T:
        """Return the value, or None for Err."""
        return self.value

    def into_tuple(self) -> tuple[None, T]:
        """Return `(error, value)` with the missing side set to None."""
        return (None, self.value)

    def filter(self, pred: Callable[[T], bool]) -> OptionOf[T]:
        """Return Some(value) if the predicate holds, else Nothing."""
        from oxide.types.option import Nothing, Some

        if pred(self.value):
            return Some(self.value)
        return Nothing

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def map_err[F](self, _f: Callable[[Any], F]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def map_or[U](self, _default: U, f: Callable[[T], U]) -> U:
        """Apply f to the value; the default is unused for Ok."""
        return f(self.value)

    def map_or_else[U](self, _default: Callable[[Any], U], f: Callable[[T], U]) -> U:
        """Apply f to the value; the default function is unused for Ok."""
        return f(self.value)

    def and_then[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Apply a function that returns a Result to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    def or_else[F](self, _f: Callable[[Any], Ok[T] | Err[F]]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def and_[U, E](self, other: Ok[U] | Err[E]) -> Ok[U] | Err[E]:
        """Return other if self is Ok, else return self (Err).

        Since this is Ok, returns other.
        """
        return other

    def or_[F](self, _other: Ok[T] | Err[F]) -> Ok[T]:
        """Return self if Ok, else return other.

        Since this is Ok, returns self.
        """
        return self

    def inspect(self, f: Callable[[T], Any]) -> Ok[T]:
        """Call f with the value for side effects and return self."""
        f(self.value)
        return self

    def inspect_err(self, _f: Callable[[Any], Any]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self


class Err[E](msgspec.Struct, frozen=True, gc=False, metaclass=FrozenStructMeta):
    """Error variant of Result containing an error of type E.

    Err represents the failure outcome of an operation. It wraps an error
    value that can be transformed, recovered from, or propagated.

    Examples:
        >>> err = Err('something went wrong')
        >>> err.is_err()
        True
        >>> err.unwrap_or(0)
        0
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[Any]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True if the result is Err.

        This method provides type narrowing - after checking is_err(),
        the type checker knows the result is Err[E].
        """
        return True

    def is_ok_and(self, _pred: Callable[[Any], bool]) -> bool:
        """Return False since there is no value to test."""
        return False

    def is_err_and(self, pred: Callable[[E], bool]) -> bool:
        """Return True if the error satisfies the predicate."""
        return bool(pred(self.error))

    def unwrap(self) -> NoReturn:
        """Raise since this is Err.

        Raises:
            UnwrapPanic: Always, since Err has no Ok value to unwrap.
        """
        raise UnwrapPanic(f'called unwrap() on Err({self.error!r})')

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def unwrap_or_else[T](self, f: Callable[[E], T]) -> T:
        """Compute a fallback value from the error."""
        return f(self.error)

    def unwrap_unchecked(self) -> E:
        """Return the error without checking the variant."""
        return self.error

    def expect(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message.

        Args:
            msg: Custom error message.

        Raises:
            UnwrapPanic: Always, with the custom message.
        """
        raise UnwrapPanic(f'{msg}: {self.error!r}')

    def expect_err(self, _msg: str) -> E:
        """Return the contained error, ignoring the message."""
        return self.error

    def ok(self) -> OptionOf[Any]:
        """Convert to Option, returning Nothing since this is Err."""
        from oxide.types.option import Nothing

        return Nothing

    def err(self) -> OptionOf[E]:
        """Convert to Option, returning Some(error)."""
        from oxide.types.option import Some

        return Some(self.error)

    def into(self) -> None:
        """Return None since there is no value."""
        return None

    def into_tuple(self) -> tuple[E, None]:
        """Return `(error, value)` with the missing side set to None."""
        return (self.error, None)

    def filter(self, _pred: Callable[[Any], bool]) -> OptionOf[Any]:
        """Return Nothing since there is no value to filter."""
        from oxide.types.option import Nothing

        return Nothing

    def map[U](self, _f: Callable[[Any], U]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            Err containing the transformed error.
        """
        return Err(f(self.error))

    def map_or[U](self, default: U, _f: Callable[[Any], U]) -> U:
        """Return the default since this is Err."""
        return default

    def map_or_else[U](self, default: Callable[[E], U], _f: Callable[[Any], U]) -> U:
        """Compute the default from the error since this is Err."""
        return default(self.error)

    def and_then[U](self, _f: Callable[[Any], Ok[U] | Err[E]]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def or_else[T, F](self, f: Callable[[E], Ok[T] | Err[F]]) -> Ok[T] | Err[F]:
        """Apply a recovery function to the error.

        Args:
            f: Function that takes the error and returns a new Result.

        Returns:
            The Result returned by f.
        """
        return f(self.error)

    def and_[U](self, _other: Ok[U] | Err[E]) -> Err[E]:
        """Return self since this is Err."""
        return self

    def or_[T, F](self, other: Ok[T] | Err[F]) -> Ok[T] | Err[F]:
        """Return other since this is Err."""
        return other

    def inspect(self, _f: Callable[[Any], Any]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def inspect_err(self, f: Callable[[E], Any]) -> Err[E]:
        """Call f with the error for side effects and return self."""
        f(self.error)
        return self


type ResultOf[T, E = Exception] = Ok[T] | Err[E]


def collect[T, E](results: Iterable[Ok[T] | Err[E]]) -> Ok[list[T]] | Err[E]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Err encountered; later items are not pulled
    from the iterable.

    Examples:
        >>> collect([Ok(1), Ok(2), Ok(3)])
        Ok(value=[1, 2, 3])
        >>> collect([Ok(1), Err('fail'), Ok(3)])
        Err(error='fail')
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)
