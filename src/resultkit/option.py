"""Option type: Some[T] | Nothing for values that may be absent.

``option_of`` turns the outcome of a computation into an Option: nullish and
empty outcomes (None, an empty list or tuple, an empty string, Nothing) and
any captured exception become Nothing, everything else becomes Some. Falsy but
meaningful values such as ``0`` and ``False`` stay present.

Example:
    ```python
    from resultkit import option_of

    name = await option_of(lambda: next((n for n in names if n == 'bar'), None))
    name.unwrap_or('anonymous')
    ```
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, NoReturn

from resultkit._config import get_config
from resultkit._logging import get_logger, is_configured
from resultkit.propagate import Propagate

if TYPE_CHECKING:
    from resultkit.result import Err, Ok

__all__ = [
    'Nothing',
    'NothingType',
    'Option',
    'Some',
    'option_of',
    'option_of_sync',
    'some',
]

logger = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class Some[T]:
    """Some variant of Option containing a value of type T.

    Examples:
        >>> Some(42).unwrap()
        42
        >>> Some(42).map(lambda x: x * 2)
        Some(data=84)
    """

    data: T
    __match_args__ = ('data',)

    def is_some(self) -> bool:
        """Return True since this is Some."""
        return True

    def is_none(self) -> bool:
        """Return False since this is Some."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.data

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.data

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the fallback function."""
        return self.data

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.data

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value."""
        return Some(f(self.data))

    def and_then[U](self, f: Callable[[T], Some[U] | NothingType]) -> Some[U] | NothingType:
        """Apply a function that returns an Option to the contained value."""
        return f(self.data)

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Return self if the predicate holds for the value, else Nothing."""
        if predicate(self.data):
            return self
        return Nothing

    def ok_or(self, _err: object) -> Ok[T]:
        """Convert to Result, returning Ok(data)."""
        from resultkit.result import Ok

        return Ok(self.data)

    def bail(self) -> T:
        """Return the contained value (no-op for Some)."""
        return self.data


@dataclass(slots=True, frozen=True)
class NothingType:
    """Nothing variant of Option representing absence of a value.

    Use the ``Nothing`` singleton instead of instantiating directly; all
    instances compare equal anyway.
    """

    def is_some(self) -> bool:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> bool:
        """Return True since this is Nothing."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise since there is no value.

        Raises:
            RuntimeError: Always.
        """
        raise RuntimeError('Called unwrap on Nothing')

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value since this is Nothing."""
        return f()

    def expect(self, msg: str) -> NoReturn:
        """Raise with a custom message.

        Raises:
            RuntimeError: Always, with the custom message.
        """
        raise RuntimeError(msg)

    def map(self, _f: Callable[[Any], Any]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def and_then(self, _f: Callable[[Any], Any]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    def filter(self, _predicate: Callable[[Any], bool]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        return self

    def ok_or[E](self, err: E) -> Err[E]:
        """Convert to Result, returning Err(err)."""
        from resultkit.result import Err

        return Err(err)

    def bail(self) -> NoReturn:
        """Raise Propagate carrying Nothing.

        Raises:
            Propagate: Always, containing Nothing.
        """
        raise Propagate(self)

    def __repr__(self) -> str:
        return 'Nothing'


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


def some[T](data: T) -> Some[T]:
    """Wrap a value in Some, whatever it is (``some(None)`` included)."""
    return Some(data)


def _is_empty(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, list | tuple) and not value:
        return True
    if isinstance(value, str) and value == '':
        return True
    return isinstance(value, NothingType)


def _option_of_thing(value: Any) -> Some[Any] | NothingType:
    """Classify a resolved value, first matching rule wins."""
    if _is_empty(value):
        return Nothing
    if isinstance(value, Some):
        return value
    return Some(value)


async def option_of[T](fn: Callable[[], Awaitable[T] | T]) -> Some[T] | NothingType:
    """Run ``fn`` and turn its outcome into an Option.

    Awaitable return values are awaited. Captured exceptions (see
    ``Config.capture``) raised by the call or while awaiting resolve to
    Nothing; this coroutine never raises them.

    Args:
        fn: Zero-argument callable, sync or async.

    Returns:
        Nothing for None, ``[]``, ``()``, ``''``, Nothing or a captured
        exception; an existing Some unchanged; otherwise Some(value).

    Examples:
        >>> await option_of(lambda: [])
        Nothing
        >>> await option_of(lambda: 0)
        Some(data=0)
    """
    capture = get_config().capture
    try:
        value = fn()
        if inspect.isawaitable(value):
            value = await value
    except capture as exc:
        if is_configured():
            logger.debug('option_of.captured', error=repr(exc))
        return Nothing
    return _option_of_thing(value)


def option_of_sync[T](fn: Callable[[], T]) -> Some[T] | NothingType:
    """Synchronous ``option_of`` for callables known not to suspend.

    An awaitable return value is not awaited; it is wrapped like any other
    value, so pass coroutine functions to ``option_of`` instead.
    """
    capture = get_config().capture
    try:
        value = fn()
    except capture as exc:
        if is_configured():
            logger.debug('option_of.captured', error=repr(exc))
        return Nothing
    return _option_of_thing(value)
