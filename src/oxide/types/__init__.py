"""Core container types: Ok, Err, Some, Nothing."""

from oxide.types.option import Nothing, NothingType, OptionOf, Some
from oxide.types.result import Err, Ok, ResultOf, collect

__all__ = [
    'Err',
    'Nothing',
    'NothingType',
    'Ok',
    'OptionOf',
    'ResultOf',
    'Some',
    'collect',
]
