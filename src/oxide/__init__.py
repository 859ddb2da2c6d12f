"""oxide: Result and Option containers for Python 3.13+.

Containers, guarded functions, `all`/`any` folds, `safe` adapters and a
structural matcher, all importable from the package root:

    from oxide import Result, Ok, Err, Option, Some, Nothing
    from oxide import match, Fn, SomeIs, OkIs, ErrIs, _, Default

Submodule imports (for organization):
    from oxide.types import Ok, Err, Some, Nothing
    from oxide.guard import ResultGuard, OptionGuard
    from oxide.matching import match
"""

# Types
from oxide.types import (
    Err,
    Nothing,
    NothingType,
    Ok,
    OptionOf,
    ResultOf,
    Some,
    collect,
)

# Errors
from oxide.errors import (
    GuardExpired,
    InvalidPattern,
    NonExhaustiveMatch,
    OxideError,
    UnwrapPanic,
)

# Guards
from oxide.guard import GuardExit, OptionGuard, ResultGuard

# Namespaces
from oxide.kinds import Option, Result

# Matching
from oxide.matching import Default, ErrIs, Fn, OkIs, SomeIs, _, match

# Decorators
from oxide.decorators import safe

__all__ = [
    'Default',
    'Err',
    'ErrIs',
    'Fn',
    'GuardExit',
    'GuardExpired',
    'InvalidPattern',
    'NonExhaustiveMatch',
    'Nothing',
    'NothingType',
    'Ok',
    'OkIs',
    'Option',
    'OptionGuard',
    'OptionOf',
    'OxideError',
    'Result',
    'ResultGuard',
    'ResultOf',
    'Some',
    'SomeIs',
    'UnwrapPanic',
    '_',
    'collect',
    'match',
    'safe',
]
