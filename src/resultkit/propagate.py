"""Propagate exception for raising a tagged failure through plain control flow."""

from typing import Any

__all__ = ['Propagate']


class Propagate(Exception):  # noqa: N818
    """Exception raised by .bail() to carry an Err or Nothing up the call stack.

    ``try_`` and ``try_sync`` unwrap a raised Propagate that carries an Err and
    return that Err untouched. The name intentionally doesn't end with "Error":
    the payload is the failure, the exception is only the vehicle.
    """

    __slots__ = ('_value',)

    def __init__(self, value: Any) -> None:
        """Initialize Propagate with the value to carry.

        Args:
            value: The Err or Nothing value being propagated.
        """
        self._value = value
        super().__init__(f'Propagate({value!r})')

    @property
    def value(self) -> Any:
        """The value being propagated."""
        return self._value
