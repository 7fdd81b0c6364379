"""Pytest configuration and shared fixtures for resultkit tests."""

from __future__ import annotations

from typing import Any

import pytest
from hypothesis import HealthCheck, settings
from resultkit import reset_config
from resultkit._logging import clear_log_hooks

# clean_state only resets module globals, so sharing it across examples is fine
settings.register_profile('resultkit', suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile('resultkit')


class FakeResponse:
    """Minimal fetch-like response used to exercise response unwrapping."""

    def __init__(
        self,
        body: Any = None,
        *,
        ok: bool = True,
        redirected: bool = False,
        status: int = 200,
        status_text: str = 'OK',
        async_body: bool = True,
        body_error: BaseException | None = None,
    ) -> None:
        self.ok = ok
        self.redirected = redirected
        self.status = status
        self.status_text = status_text
        self._body = body
        self._async_body = async_body
        self._body_error = body_error
        self.reads = 0

    def _read(self) -> Any:
        self.reads += 1
        if self._body_error is not None:
            raise self._body_error
        return self._body

    def json(self) -> Any:
        if self._async_body:

            async def read() -> Any:
                return self._read()

            return read()
        return self._read()


@pytest.fixture(autouse=True)
def clean_state() -> None:
    """Reset process-wide configuration and log hooks around each test."""
    reset_config()
    clear_log_hooks()
    yield
    reset_config()
    clear_log_hooks()


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from resultkit import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from resultkit import Err

    return Err(ValueError('test error'))


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from resultkit import Some

    return Some('hello')


@pytest.fixture
def rpc_success_body() -> dict[str, Any]:
    """JSON-RPC success envelope."""
    return {'jsonrpc': '2.0', 'id': 1, 'result': {'data': 42}}


@pytest.fixture
def rpc_error_body() -> dict[str, Any]:
    """JSON-RPC error envelope."""
    return {
        'jsonrpc': '2.0',
        'id': '1',
        'error': {'message': 'x', 'data': {'req_uuid': 'u1', 'detail': {}}},
    }


@pytest.fixture
def make_response():
    """Factory for FakeResponse objects."""
    return FakeResponse
