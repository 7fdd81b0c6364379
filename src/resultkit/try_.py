"""The ``try_`` adapter: run a computation, get a Result back.

``try_`` accepts any zero-argument callable, sync or async, and normalizes
whatever happens into ``Ok`` or ``Err``:

- plain values become ``Ok(value)``;
- Ok and Err values pass through untouched;
- fetch-like responses are unwrapped and their JSON-RPC body classified;
- raised exceptions become ``Err(exc)`` or ``sad_path(exc)``;
- ``Propagate`` carrying an Err (``err.bail()``) yields that Err.

The callable is invoked exactly once. What it returns decides the branch: an
awaitable is awaited and classified by the async rules, anything else (or a
synchronous raise) by the sync rules. The two rule sets differ on purpose,
see the function docstrings.

Example:
    ```python
    from resultkit import try_

    async def fetch_user(user_id: int) -> dict: ...

    user = await try_(lambda: fetch_user(7))
    match user:
        case Ok(data):
            ...
        case Err(error):
            ...
    ```
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any

from resultkit._config import get_config
from resultkit._logging import get_logger, is_configured
from resultkit.json_rpc import is_json_rpc_error, is_json_rpc_success
from resultkit.propagate import Propagate
from resultkit.response import is_fetch_response, read_body
from resultkit.result import Err, Ok

__all__ = ['SadPath', 'try_', 'try_sync']

logger = get_logger(__name__)

type SadPath = Callable[[Any], Any]
type Capture = tuple[type[BaseException], ...]


def _classified[R](tier: str, rule: str, outcome: R) -> R:
    if is_configured():
        logger.debug('try.classified', tier=tier, rule=rule, outcome=type(outcome).__name__)
    return outcome


def _propagated_err(error: BaseException) -> Err[Any] | None:
    """Return the Err carried by a Propagate, if any."""
    if isinstance(error, Propagate) and isinstance(error.value, Err):
        return error.value
    return None


async def _apply_sad_path(sad_path: SadPath, payload: Any, capture: Capture) -> Any:
    try:
        outcome = sad_path(payload)
        if inspect.isawaitable(outcome):
            outcome = await outcome
    except capture as exc:
        if is_configured():
            logger.warning('try.sad_path_failed', error=repr(exc))
        return Err(exc)
    return outcome


def _apply_sad_path_sync(sad_path: SadPath, payload: Any, capture: Capture) -> Any:
    try:
        return sad_path(payload)
    except capture as exc:
        if is_configured():
            logger.warning('try.sad_path_failed', error=repr(exc))
        return Err(exc)


async def _fail(tier: str, payload: Any, sad_path: SadPath | None, capture: Capture) -> Any:
    if sad_path is None:
        return _classified(tier, 'error', Err(payload))
    return _classified(tier, 'sad_path', await _apply_sad_path(sad_path, payload, capture))


async def _settled_value(value: Any, sad_path: SadPath | None, capture: Capture) -> Any:
    """Async rules for a settled value, first match wins.

    1. fetch-like response: read the body; a JSON-RPC success envelope or any
       other body is Ok(body), an error envelope goes to sad_path or Err(body).
    2. Ok or Err: returned unchanged.
    3. anything else: Ok(value).
    """
    if is_fetch_response(value):
        try:
            body = await read_body(value)
        except capture as exc:
            return await _settled_error(exc, sad_path, capture)
        if is_json_rpc_success(body):
            return _classified('async', 'response_rpc_success', Ok(body))
        if is_json_rpc_error(body):
            return await _fail('async', body, sad_path, capture)
        return _classified('async', 'response_body', Ok(body))
    if isinstance(value, Ok | Err):
        return _classified('async', 'tagged', value)
    return _classified('async', 'value', Ok(value))


async def _settled_error(error: BaseException, sad_path: SadPath | None, capture: Capture) -> Any:
    """Async rules for a raised exception, first match wins.

    1. JSON-RPC error envelope shape (e.g. JsonRpcFault): Err(error), sad_path
       is not consulted.
    2. Propagate carrying an Err: that Err unchanged.
    3. anything else: sad_path(error) or Err(error).
    """
    if is_json_rpc_error(error):
        return _classified('async', 'rpc_error', Err(error))
    propagated = _propagated_err(error)
    if propagated is not None:
        return _classified('async', 'propagated', propagated)
    return await _fail('async', error, sad_path, capture)


def _returned_value(value: Any) -> Any:
    """Sync rules for a returned value: Ok/Err unchanged, else Ok(value)."""
    if isinstance(value, Ok | Err):
        return _classified('sync', 'tagged', value)
    return _classified('sync', 'value', Ok(value))


def _raised_error(error: BaseException, sad_path: SadPath | None, capture: Capture) -> Any:
    """Sync rules for a raised exception: Propagate(Err) unwraps, else sad_path or Err."""
    propagated = _propagated_err(error)
    if propagated is not None:
        return _classified('sync', 'propagated', propagated)
    if sad_path is None:
        return _classified('sync', 'error', Err(error))
    return _classified('sync', 'sad_path', _apply_sad_path_sync(sad_path, error, capture))


async def try_(
    happy_path: Callable[[], Awaitable[Any] | Any],
    sad_path: SadPath | None = None,
) -> Any:
    """Run ``happy_path`` once and classify its outcome into a Result.

    Never raises for exceptions in ``Config.capture`` (``Exception`` by
    default), whether they come from ``happy_path``, the response body
    reader or ``sad_path`` itself; a failing ``sad_path`` yields
    ``Err(<its exception>)``.

    Args:
        happy_path: Zero-argument callable, sync or async.
        sad_path: Optional error transform. It receives unrecognized
            exceptions and JSON-RPC error bodies read from responses, and its
            return value (awaited if awaitable) is returned as-is. It never
            sees Err values that were already tagged.

    Returns:
        Ok, Err, or whatever ``sad_path`` returned.

    Examples:
        >>> await try_(lambda: 1)
        Ok(data=1)
        >>> await try_(lambda: int('x'), lambda e: Err(str(e)))
        Err(data="invalid literal for int() with base 10: 'x'")
    """
    capture = get_config().capture
    try:
        outcome = happy_path()
    except capture as exc:
        propagated = _propagated_err(exc)
        if propagated is not None:
            return _classified('sync', 'propagated', propagated)
        return await _fail('sync', exc, sad_path, capture)

    if not inspect.isawaitable(outcome):
        return _returned_value(outcome)

    try:
        value = await outcome
    except capture as exc:
        return await _settled_error(exc, sad_path, capture)
    return await _settled_value(value, sad_path, capture)


def try_sync(
    happy_path: Callable[[], Any],
    sad_path: SadPath | None = None,
) -> Any:
    """Synchronous ``try_`` for computations known not to suspend.

    Applies the sync rules only: Ok/Err returned unchanged, other values
    wrapped in Ok; a Propagate carrying an Err unwraps to that Err, other
    captured exceptions go to ``sad_path`` or become Err. An awaitable
    return value is wrapped as a plain value, so pass coroutine functions to
    ``try_`` instead.

    Examples:
        >>> try_sync(lambda: {'a': 1}['b'])
        Err(data=KeyError('b'))
    """
    capture = get_config().capture
    try:
        outcome = happy_path()
    except capture as exc:
        return _raised_error(exc, sad_path, capture)
    return _returned_value(outcome)
