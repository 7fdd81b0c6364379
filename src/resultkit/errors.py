"""Error types: a catalog of named Err factories and the JSON-RPC fault exception.

``ErrorCatalog`` groups factories that each build an ``Err[ErrorDetail]``, so a
module can declare its failure modes in one place and callers can refer to
them by name:

    ```python
    UserErrors = ErrorCatalog(
        NotFound=define_error('not_found', 'user {user_id} does not exist'),
        Banned=define_error('banned', 'user is banned'),
    )

    def load(user_id: int) -> Result[User, ErrorDetail]:
        ...
        return UserErrors.NotFound(user_id=user_id)
    ```

``JsonRpcFault`` is the exception form of a JSON-RPC error envelope; raising it
from a computation wrapped by ``try_`` yields ``Err(fault)``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from typing import Any

import msgspec

from resultkit.json_rpc import ErrorData, ErrorObject, JsonRpcError, as_json_rpc_error
from resultkit.result import Err

__all__ = [
    'ErrorCatalog',
    'ErrorDetail',
    'ErrorFactory',
    'JsonRpcFault',
    'define_error',
]


class ErrorDetail(msgspec.Struct, frozen=True, gc=False):
    """Payload carried by catalog errors."""

    type: str
    name: str
    message: str


type ErrorFactory = Callable[..., Err[ErrorDetail]]


def define_error(kind: str, message: str, name: str | None = None) -> ErrorFactory:
    """Build a factory returning ``Err(ErrorDetail(...))``.

    Keyword arguments passed to the factory are substituted into ``message``
    with ``str.format``.

    Args:
        kind: Machine-readable error type, stored as ``ErrorDetail.type``.
        message: Human-readable message, optionally with ``{placeholders}``.
        name: Display name. Defaults to ``kind``.

    Examples:
        >>> not_found = define_error('not_found', 'no user {user_id}')
        >>> not_found(user_id=7).data.message
        'no user 7'
    """
    display_name = name if name is not None else kind

    def factory(**params: Any) -> Err[ErrorDetail]:
        text = message.format(**params) if params else message
        return Err(ErrorDetail(type=kind, name=display_name, message=text))

    factory.__name__ = display_name
    factory.__qualname__ = display_name
    return factory


class ErrorCatalog:
    """Named collection of Err factories.

    Attribute access (``catalog.NotFound``) and item access
    (``catalog['NotFound']``) both return the factory.
    """

    __slots__ = ('_factories',)

    def __init__(self, **factories: ErrorFactory) -> None:
        for name, factory in factories.items():
            if not callable(factory):
                msg = f'error factory {name!r} must be callable, got {type(factory).__name__}'
                raise TypeError(msg)
        self._factories: dict[str, ErrorFactory] = dict(factories)

    def __getattr__(self, name: str) -> ErrorFactory:
        if name.startswith('_'):
            raise AttributeError(name)
        try:
            return self._factories[name]
        except KeyError:
            msg = f'{type(self).__name__} has no error named {name!r}'
            raise AttributeError(msg) from None

    def __getitem__(self, name: str) -> ErrorFactory:
        return self._factories[name]

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __iter__(self) -> Iterator[str]:
        return iter(self._factories)

    def __len__(self) -> int:
        return len(self._factories)

    def __repr__(self) -> str:
        return f'{type(self).__name__}({", ".join(self._factories)})'

    def names(self) -> tuple[str, ...]:
        """Return the registered error names in declaration order."""
        return tuple(self._factories)


class JsonRpcFault(Exception):
    """JSON-RPC error envelope - exception variant.

    Exposes ``jsonrpc``, ``id`` and ``error`` attributes with the envelope
    layout, so the envelope recognizer matches a raised fault directly.
    """

    def __init__(
        self,
        message: str,
        req_uuid: str,
        detail: Any = None,
        id: str | int | float | None = None,  # noqa: A002
    ) -> None:
        self.jsonrpc = '2.0'
        self.id = id
        self.error: dict[str, Any] = {
            'message': message,
            'data': {'req_uuid': req_uuid, 'detail': detail},
        }
        super().__init__(message)

    @property
    def message(self) -> str:
        return self.error['message']

    @property
    def req_uuid(self) -> str:
        return self.error['data']['req_uuid']

    @property
    def detail(self) -> Any:
        return self.error['data']['detail']

    @classmethod
    def from_envelope(cls, envelope: Mapping[str, Any] | JsonRpcError) -> JsonRpcFault:
        """Build a fault from an error envelope.

        Raises:
            ValueError: If ``envelope`` does not have the error envelope shape.
        """
        struct = envelope if isinstance(envelope, JsonRpcError) else as_json_rpc_error(envelope)
        if struct is None:
            msg = f'not a JSON-RPC error envelope: {envelope!r}'
            raise ValueError(msg)
        return struct.to_exception()

    def to_struct(self) -> JsonRpcError:
        """Convert to struct for Result-based code."""
        return JsonRpcError(
            error=ErrorObject(
                message=self.message,
                data=ErrorData(req_uuid=self.req_uuid, detail=self.detail),
            ),
            id=self.id,
            jsonrpc='2.0',
        )
