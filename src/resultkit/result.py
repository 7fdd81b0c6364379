"""Result type: Ok[T] | Err[E] for explicit success/failure values.

Ok wraps the outcome of a successful operation, Err wraps its failure and the
moment the failure was recorded. ``map`` is the transform both variants share:
it applies to Ok and is inert on Err, so a chain of transforms short-circuits
on the first failure.

Example:
    ```python
    from resultkit import Err, Ok

    Ok(20).map(lambda x: x + 1)  # Ok(data=21)

    failed = Err('boom')
    failed.map(lambda x: x + 1) is failed  # True
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, NoReturn

from resultkit.propagate import Propagate

if TYPE_CHECKING:
    from resultkit.option import NothingType, Some

__all__ = ['Err', 'Ok', 'Result', 'collect']


def _now() -> datetime:
    return datetime.now(UTC)


@dataclass(slots=True, frozen=True)
class Ok[T]:
    """Success variant of Result containing a value of type T.

    Attributes:
        data: The successful result value.

    Examples:
        >>> Ok(42).unwrap()
        42
        >>> Ok(42).map(lambda x: x * 2)
        Ok(data=84)
    """

    data: T
    __match_args__ = ('data',)

    def is_ok(self) -> bool:
        """Return True, indicating this is a successful result."""
        return True

    def is_err(self) -> bool:
        """Return False, indicating this is not an error result."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.data

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.data

    def unwrap_or_else(self, f: Callable[[Any], T]) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the fallback function."""
        return self.data

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.data

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Transform the value using a function.

        Args:
            f: A callable that takes the value and returns a new value of type U.

        Returns:
            Ok[U]: A new Ok containing the transformed value.
        """
        return Ok(f(self.data))

    def map_err(self, _f: Callable[[Any], Any]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def and_then[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Chain a computation that may fail.

        Args:
            f: A callable that takes the value and returns a Result.

        Returns:
            The Result returned by f.
        """
        return f(self.data)

    def or_else(self, _f: Callable[[Any], Any]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def ok(self) -> Some[T]:
        """Convert to Option, returning Some(data)."""
        from resultkit.option import Some

        return Some(self.data)

    def err(self) -> NothingType:
        """Convert to Option, returning Nothing since this is Ok."""
        from resultkit.option import Nothing

        return Nothing

    def bail(self) -> T:
        """Return the contained value (no-op for Ok)."""
        return self.data


@dataclass(slots=True, frozen=True)
class Err[E]:
    """Failure variant of Result containing an error of type E.

    Err also records when it was created. The timestamp is informational and
    does not take part in equality, so two Errs with equal data compare equal.

    Attributes:
        data: The error payload.
        timestamp: Timezone-aware UTC time of construction.

    Examples:
        >>> err = Err('something went wrong')
        >>> err.is_err()
        True
        >>> err.unwrap_or(0)
        0
    """

    data: E
    timestamp: datetime = field(default_factory=_now, compare=False, repr=False)
    __match_args__ = ('data',)

    def is_ok(self) -> bool:
        """Return False since this is Err."""
        return False

    def is_err(self) -> bool:
        """Return True since this is Err."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise since this is Err.

        Raises:
            RuntimeError: Always, since Err has no Ok value to unwrap.
        """
        raise RuntimeError(f'Called unwrap on Err: {self.data!r}')

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def unwrap_or_else[T](self, f: Callable[[E], T]) -> T:
        """Compute a fallback from the error payload."""
        return f(self.data)

    def expect(self, msg: str) -> NoReturn:
        """Raise with a custom message.

        Raises:
            RuntimeError: Always, with the custom message.
        """
        raise RuntimeError(f'{msg}: {self.data!r}')

    def map(self, _f: Callable[[Any], Any]) -> Err[E]:
        """Return self unchanged; the function is never called."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the error payload.

        The new Err gets a fresh timestamp.
        """
        return Err(f(self.data))

    def and_then(self, _f: Callable[[Any], Any]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def or_else[T, F](self, f: Callable[[E], Ok[T] | Err[F]]) -> Ok[T] | Err[F]:
        """Apply a recovery function to the error payload.

        Returns:
            The Result returned by f.
        """
        return f(self.data)

    def ok(self) -> NothingType:
        """Convert to Option, returning Nothing since this is Err."""
        from resultkit.option import Nothing

        return Nothing

    def err(self) -> Some[E]:
        """Convert to Option, returning Some(data)."""
        from resultkit.option import Some

        return Some(self.data)

    def bail(self) -> NoReturn:
        """Raise Propagate carrying this Err.

        ``try_`` and ``try_sync`` recognize the carried Err and return it
        unchanged.

        Raises:
            Propagate: Always, containing this Err.
        """
        raise Propagate(self)


type Result[T, E = Exception] = Ok[T] | Err[E]


def collect[T, E](results: Iterable[Ok[T] | Err[E]]) -> Ok[list[T]] | Err[E]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Err encountered.

    Examples:
        >>> collect([Ok(1), Ok(2), Ok(3)])
        Ok(data=[1, 2, 3])
        >>> collect([Ok(1), Err('fail'), Ok(3)])
        Err(data='fail')
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.data)
    return Ok(values)
