"""@attempt and @attempt_sync decorators routing calls through try_/try_sync."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

import wrapt

from resultkit.try_ import SadPath, try_, try_sync

__all__ = ['attempt', 'attempt_sync']


def attempt(
    func: Callable[..., Any] | None = None,
    *,
    sad_path: SadPath | None = None,
) -> Any:
    """Decorator that makes every call return ``await try_(...)``.

    Works on sync and async functions alike; the decorated function is always
    awaited. Can be used with or without arguments:

        @attempt
        async def fetch_user(user_id: int) -> dict: ...

        @attempt(sad_path=lambda e: Err(str(e)))
        def parse(raw: str) -> int: ...

    Args:
        func: The function to wrap (when used without parentheses).
        sad_path: Error transform handed to ``try_``.

    Returns:
        A wrapped function returning an awaitable Result.

    Example:
        ```python
        @attempt
        def divide(a: int, b: int) -> float:
            return a / b

        await divide(10, 2)
        # Ok(data=5.0)
        await divide(10, 0)
        # Err(data=ZeroDivisionError('division by zero'))
        ```
    """

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[..., Awaitable[Any] | Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Any:
        return await try_(lambda: wrapped(*args, **kwargs), sad_path)

    if func is not None:
        return wrapper(func)
    return wrapper


def attempt_sync[**P, T](
    func: Callable[P, T] | None = None,
    *,
    sad_path: SadPath | None = None,
) -> Any:
    """Decorator that makes every call return ``try_sync(...)``.

    Synchronous counterpart of ``@attempt`` for functions that never suspend.

    Example:
        ```python
        @attempt_sync
        def first(items: list[int]) -> int:
            return items[0]

        first([])
        # Err(data=IndexError('list index out of range'))
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Any:
        return try_sync(lambda: wrapped(*args, **kwargs), sad_path)

    if func is not None:
        return wrapper(func)
    return wrapper
