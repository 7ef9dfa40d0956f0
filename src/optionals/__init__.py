"""optionals: a typed Option (Some | Nothing) for Python 3.13+.

Flat imports (preferred):
    from optionals import Option, Some, Nothing, from_nullable
    from optionals import early_return, flatten_options, MarkerPair

Submodule imports (for organization):
    from optionals.option import Some, Nothing, Option
    from optionals.iterables import flat_map, flatten_options
    from optionals.codec import OptionCodec
"""

from optionals._config import (
    InconsistentStatePolicy,
    OptionalsConfig,
    get_config,
    init,
)
from optionals._logging import configure_logging, get_logger

# Codec
from optionals.codec import OptionCodec

# Decorators
from optionals.decorators import early_return

# Errors
from optionals.errors import (
    GuardFallthroughError,
    InconsistentState,
    InconsistentStateError,
    UnwrapError,
)

# Collection helpers
from optionals.iterables import (
    filter_map,
    first_some,
    flat_map,
    flatten,
    flatten_options,
    sequence,
)
from optionals.markers import MarkerPair

# Option types
from optionals.option import (
    Nothing,
    NothingType,
    Option,
    Some,
    from_nullable,
    some,
    to_nullable,
)
from optionals.propagate import Propagate

__all__ = [
    'GuardFallthroughError',
    'InconsistentState',
    'InconsistentStateError',
    'InconsistentStatePolicy',
    'MarkerPair',
    'Nothing',
    'NothingType',
    'Option',
    'OptionCodec',
    'OptionalsConfig',
    'Propagate',
    'Some',
    'UnwrapError',
    'configure_logging',
    'early_return',
    'filter_map',
    'first_some',
    'flat_map',
    'flatten',
    'flatten_options',
    'from_nullable',
    'get_config',
    'get_logger',
    'init',
    'sequence',
    'some',
    'to_nullable',
]
