"""Option type: Some[T] | Nothing for optional values."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from oxide._frozen import FrozenStructMeta
from oxide.errors import UnwrapPanic

if TYPE_CHECKING:
    from oxide.types.result import Err, Ok

__all__ = ['Nothing', 'NothingType', 'OptionOf', 'Some']


class Some[T](msgspec.Struct, frozen=True, gc=False, metaclass=FrozenStructMeta):
    """Some variant of Option containing a value of type T.

    Some represents the presence of a value. It wraps a value that can be
    extracted, transformed, or propagated through a chain of Option-returning
    operations. `Some(None)` is a present value and is not `Nothing`.

    Examples:
        >>> some = Some(42)
        >>> some.unwrap()
        42
        >>> some.map(lambda x: x * 2)
        Some(value=84)
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True if the option is Some.

        This method provides type narrowing - after checking is_some(),
        the type checker knows the option is Some[T].
        """
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def is_some_and(self, pred: Callable[[T], bool]) -> bool:
        return bool(pred(self.value))

    def is_none_or(self, pred: Callable[[T], bool]) -> bool:
        return bool(pred(self.value))

    def unwrap(self) -> T:
        """Return the contained Some value.

        Since this is Some, this always succeeds.
        """
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the fallback function."""
        return self.value

    def unwrap_unchecked(self) -> T:
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained Some value, ignoring the message."""
        return self.value

    def into(self) -> T:
        """Return the value, or None for Nothing."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Some containing the result of applying f to the value.
        """
        return Some(f(self.value))

    def map_or[U](self, _default: U, f: Callable[[T], U]) -> U:
        return f(self.value)

    def map_or_else[U](self, _default: Callable[[], U], f: Callable[[T], U]) -> U:
        return f(self.value)

    def and_then[U](self, f: Callable[[T], Some[U] | NothingType]) -> Some[U] | NothingType:
        """Apply a function that returns an Option to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by f.
        """
        return f(self.value)

    def or_else(self, _f: Callable[[], Some[T] | NothingType]) -> Some[T]:
        """Return self unchanged since this is Some."""
        return self

    def and_[U](self, other: Some[U] | NothingType) -> Some[U] | NothingType:
        """Return other if self is Some, else return Nothing.

        Since this is Some, returns other.
        """
        return other

    def or_(self, _other: Some[T] | NothingType) -> Some[T]:
        """Return self if Some, else return other.

        Since this is Some, returns self.
        """
        return self

    def xor(self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        """Return self if other is Nothing, else Nothing."""
        if isinstance(other, NothingType):
            return self
        return Nothing

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Return Some if the predicate is satisfied, else Nothing.

        Args:
            predicate: Function that returns True to keep the value.

        Returns:
            Some(value) if predicate(value) is True, else Nothing.
        """
        if predicate(self.value):
            return self
        return Nothing

    def zip[U](self, other: Some[U] | NothingType) -> Some[tuple[T, U]] | NothingType:
        """Combine two Some values into a tuple.

        If both are Some, returns Some((self.value, other.value)).
        If other is Nothing, returns Nothing.
        """
        if isinstance(other, Some):
            return Some((self.value, other.value))
        return Nothing

    def flatten[U](self: Some[Some[U] | NothingType]) -> Some[U] | NothingType:
        """Flatten a nested Option.

        Converts Option[Option[T]] into Option[T].
        """
        return self.value

    def inspect(self, f: Callable[[T], Any]) -> Some[T]:
        f(self.value)
        return self

    def ok_or[E](self, _err: E) -> Ok[T]:
        """Convert to Result, returning Ok(value)."""
        from oxide.types.result import Ok

        return Ok(self.value)

    def ok_or_else[E](self, _f: Callable[[], E]) -> Ok[T]:
        """Convert to Result, returning Ok(value) without calling the factory."""
        from oxide.types.result import Ok

        return Ok(self.value)


class NothingType(msgspec.Struct, frozen=True, gc=False, metaclass=FrozenStructMeta):
    """Nothing variant of Option representing absence of a value.

    Nothing represents the absence of a value. Operations on Nothing
    typically return Nothing or a default value.

    This is a singleton - use the `Nothing` constant instead of
    instantiating directly. Stray instances still compare equal to it.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
    """

    def __repr__(self) -> str:
        return 'Nothing'

    def is_some(self) -> TypeIs[Some[Any]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True if the option is Nothing.

        This method provides type narrowing - after checking is_none(),
        the type checker knows the option is Nothing.
        """
        return True

    def is_some_and(self, _pred: Callable[[Any], bool]) -> bool:
        return False

    def is_none_or(self, _pred: Callable[[Any], bool]) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raise since this is Nothing.

        Raises:
            UnwrapPanic: Always, since Nothing has no value to unwrap.
        """
        raise UnwrapPanic('called unwrap() on Nothing')

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value since this is Nothing."""
        return f()

    def unwrap_unchecked(self) -> None:
        """Return None; Nothing carries no payload."""
        return None

    def expect(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message.

        Raises:
            UnwrapPanic: Always, with the custom message.
        """
        raise UnwrapPanic(msg)

    def into(self) -> None:
        return None

    def map[U](self, _f: Callable[[Any], U]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def map_or[U](self, default: U, _f: Callable[[Any], U]) -> U:
        return default

    def map_or_else[U](self, default: Callable[[], U], _f: Callable[[Any], U]) -> U:
        return default()

    def and_then[U](self, _f: Callable[[Any], Some[U] | NothingType]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    def or_else[T](self, f: Callable[[], Some[T] | NothingType]) -> Some[T] | NothingType:
        """Apply a recovery function since this is Nothing.

        Args:
            f: Function that returns a new Option.

        Returns:
            The Option returned by f.
        """
        return f()

    def and_[U](self, _other: Some[U] | NothingType) -> NothingType:
        """Return Nothing since self is Nothing."""
        return self

    def or_[T](self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        """Return other since self is Nothing."""
        return other

    def xor[T](self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        """Return other if it is Some, else Nothing."""
        return other

    def filter(self, _predicate: Callable[[Any], bool]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        return self

    def zip[U](self, _other: Some[U] | NothingType) -> NothingType:
        """Return Nothing since self is Nothing."""
        return self

    def flatten(self) -> NothingType:
        """Return Nothing since there's nothing to flatten."""
        return self

    def inspect(self, _f: Callable[[Any], Any]) -> NothingType:
        return self

    def ok_or[E](self, err: E) -> Err[E]:
        """Convert to Result, returning Err(err)."""
        from oxide.types.result import Err

        return Err(err)

    def ok_or_else[E](self, f: Callable[[], E]) -> Err[E]:
        """Convert to Result, computing the error.

        Args:
            f: Function that produces the error value.

        Returns:
            Err containing the computed error.
        """
        from oxide.types.result import Err

        return Err(f())


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type OptionOf[T] = Some[T] | NothingType
