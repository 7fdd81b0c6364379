"""JSON-RPC envelope recognizers.

Two reply shapes are recognized:

- success: ``{"jsonrpc": "2.0", "id": ..., "result": {"data": ...}}``
- error: ``{"jsonrpc": "2.0", "id": ..., "error": {"message": str,
  "data": {"req_uuid": str, "detail": ...}}}``

``jsonrpc`` may be missing but, when present, must be ``"2.0"``; ``id`` may be
a string, a number, None or missing. Unknown keys are ignored. Recognition is a
typed ``msgspec.convert`` into the structs below, so mappings and objects that
expose the same attributes (such as ``JsonRpcFault``) are both accepted.
Nothing here encodes or decodes wire bytes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal

import msgspec

if TYPE_CHECKING:
    from resultkit.errors import JsonRpcFault

__all__ = [
    'ErrorData',
    'ErrorObject',
    'JsonRpcError',
    'JsonRpcSuccess',
    'ResultObject',
    'as_json_rpc_error',
    'as_json_rpc_success',
    'is_json_rpc_error',
    'is_json_rpc_success',
]


class ResultObject(msgspec.Struct, frozen=True):
    """``result`` member of a success envelope."""

    data: Any


class JsonRpcSuccess(msgspec.Struct, frozen=True):
    """Success envelope."""

    result: ResultObject
    id: str | int | float | None = None
    jsonrpc: Literal['2.0'] | msgspec.UnsetType = msgspec.UNSET


class ErrorData(msgspec.Struct, frozen=True):
    """``error.data`` member of an error envelope."""

    req_uuid: str
    detail: Any


class ErrorObject(msgspec.Struct, frozen=True):
    """``error`` member of an error envelope."""

    message: str
    data: ErrorData


class JsonRpcError(msgspec.Struct, frozen=True):
    """Error envelope - struct variant, see ``JsonRpcFault`` for the exception."""

    error: ErrorObject
    id: str | int | float | None = None
    jsonrpc: Literal['2.0'] | msgspec.UnsetType = msgspec.UNSET

    def to_exception(self) -> JsonRpcFault:
        """Convert to exception for raise-based code."""
        from resultkit.errors import JsonRpcFault

        return JsonRpcFault(
            message=self.error.message,
            req_uuid=self.error.data.req_uuid,
            detail=self.error.data.detail,
            id=self.id,
        )


def as_json_rpc_success(value: object) -> JsonRpcSuccess | None:
    """Return ``value`` as a JsonRpcSuccess, or None if it has another shape."""
    try:
        return msgspec.convert(value, JsonRpcSuccess, from_attributes=True)
    except msgspec.ValidationError:
        return None


def as_json_rpc_error(value: object) -> JsonRpcError | None:
    """Return ``value`` as a JsonRpcError, or None if it has another shape."""
    try:
        return msgspec.convert(value, JsonRpcError, from_attributes=True)
    except msgspec.ValidationError:
        return None


def is_json_rpc_success(value: object) -> bool:
    """Check whether ``value`` has the success envelope shape.

    Examples:
        >>> is_json_rpc_success({'jsonrpc': '2.0', 'id': 1, 'result': {'data': 42}})
        True
        >>> is_json_rpc_success({'jsonrpc': '1.0', 'id': 1, 'result': {'data': 42}})
        False
    """
    return as_json_rpc_success(value) is not None


def is_json_rpc_error(value: object) -> bool:
    """Check whether ``value`` has the error envelope shape."""
    return as_json_rpc_error(value) is not None
