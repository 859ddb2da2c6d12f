"""Immutable bases for the exported namespace objects and container classes."""

from __future__ import annotations

from typing import Any, NoReturn

import msgspec

__all__ = ['Frozen', 'FrozenMeta', 'FrozenStructMeta']


class FrozenMeta(type):
    """Metaclass that forbids rebinding or deleting class attributes after creation."""

    def __setattr__(cls, name: str, value: Any) -> NoReturn:
        raise AttributeError(f'cannot set {name!r} on immutable class {cls.__name__}')

    def __delattr__(cls, name: str) -> NoReturn:
        raise AttributeError(f'cannot delete {name!r} from immutable class {cls.__name__}')


class Frozen(metaclass=FrozenMeta):
    """Stateless base whose instances reject attribute assignment and deletion."""

    __slots__ = ()

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f'{type(self).__name__} is immutable')


class FrozenStructMeta(msgspec.StructMeta):
    """StructMeta whose classes are sealed once their class body has run.

    `frozen=True` only protects instance fields; this also stops methods such
    as `Ok.map` from being replaced or deleted on the class. `typing.Generic`
    still sets `__parameters__` while the class is being built, so the seal is
    applied after `StructMeta.__new__` returns.
    """

    def __new__(mcls, name: str, bases: tuple[type, ...], namespace: dict[str, Any], /, **kwargs: Any) -> Any:
        cls = super().__new__(mcls, name, bases, namespace, **kwargs)
        msgspec.StructMeta.__setattr__(cls, '__sealed__', True)
        return cls

    def __setattr__(cls, name: str, value: Any) -> None:
        if cls.__dict__.get('__sealed__', False):
            raise AttributeError(f'cannot set {name!r} on immutable class {cls.__name__}')
        super().__setattr__(name, value)

    def __delattr__(cls, name: str) -> None:
        if cls.__dict__.get('__sealed__', False):
            raise AttributeError(f'cannot delete {name!r} from immutable class {cls.__name__}')
        super().__delattr__(name)
