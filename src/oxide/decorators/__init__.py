"""Decorators: @safe for sync and async functions."""

from oxide.decorators.safe import safe

__all__ = [
    'safe',
]
