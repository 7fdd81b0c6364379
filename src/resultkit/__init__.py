"""resultkit: Result and Option types with a Try adapter for Python 3.13+.

Flat imports (preferred):
    from resultkit import Result, Ok, Err, Option, Some, Nothing
    from resultkit import try_, try_sync, option_of, attempt

Submodule imports (for organization):
    from resultkit.result import Ok, Err, Result
    from resultkit.option import Some, Nothing, Option
    from resultkit.json_rpc import is_json_rpc_error, is_json_rpc_success
    from resultkit.errors import ErrorCatalog, JsonRpcFault
"""

# Configuration
from resultkit._config import Config, LogFormat, get_config, init, reset_config

# Logging
from resultkit._logging import configure_logging, get_logger

# Decorators
from resultkit.decorators import attempt, attempt_sync

# Errors
from resultkit.errors import ErrorCatalog, ErrorDetail, JsonRpcFault, define_error

# JSON-RPC envelopes
from resultkit.json_rpc import (
    JsonRpcError,
    JsonRpcSuccess,
    is_json_rpc_error,
    is_json_rpc_success,
)
from resultkit.option import (
    Nothing,
    NothingType,
    Option,
    Some,
    option_of,
    option_of_sync,
    some,
)
from resultkit.propagate import Propagate
from resultkit.response import FetchResponse, is_fetch_response
from resultkit.result import Err, Ok, Result, collect

# Text
from resultkit.text import capitalize

# Try adapter
from resultkit.try_ import try_, try_sync

__all__ = [
    'Config',
    'Err',
    'ErrorCatalog',
    'ErrorDetail',
    'FetchResponse',
    'JsonRpcError',
    'JsonRpcFault',
    'JsonRpcSuccess',
    'LogFormat',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Propagate',
    'Result',
    'Some',
    'attempt',
    'attempt_sync',
    'capitalize',
    'collect',
    'configure_logging',
    'define_error',
    'get_config',
    'get_logger',
    'init',
    'is_fetch_response',
    'is_json_rpc_error',
    'is_json_rpc_success',
    'option_of',
    'option_of_sync',
    'reset_config',
    'some',
    'try_',
    'try_sync',
]
