"""Fetch-like HTTP response shape.

Any object exposing ``ok``, ``redirected``, ``status``, ``status_text`` and a
``json()`` body reader counts as a response; ``json()`` may be a plain method
or a coroutine method. No HTTP client is bundled, adapt whatever client is in
use to this protocol.
"""

from __future__ import annotations

import inspect
from typing import Any, Protocol

import msgspec

__all__ = ['FetchResponse', 'is_fetch_response', 'read_body']


class FetchResponse(Protocol):
    """Structural type of the responses ``try_`` unwraps."""

    ok: bool
    redirected: bool
    status: int
    status_text: str

    def json(self) -> Any: ...


class _ResponseHead(msgspec.Struct, frozen=True, gc=False):
    ok: bool
    redirected: bool
    status: int
    status_text: str


def is_fetch_response(value: object) -> bool:
    """Check whether ``value`` looks like a fetch response.

    The status line attributes must have the right types (a bool is not a
    status code) and ``json`` must be callable.
    """
    if not callable(getattr(value, 'json', None)):
        return False
    try:
        msgspec.convert(value, _ResponseHead, from_attributes=True)
    except msgspec.ValidationError:
        return False
    return True


async def read_body(response: FetchResponse) -> Any:
    """Extract the body of a response, awaiting the reader if it suspends."""
    body = response.json()
    if inspect.isawaitable(body):
        body = await body
    return body
