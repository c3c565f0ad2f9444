"""Test configuration and fixtures."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from url_helper import RequestContext, UrlHelper, UrlHelperSettings


class RecordingResponse:
    """IResponseContext that appends a session id, or fails on demand."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.calls: list[str] = []

    def encode_url(self, url: str) -> str:
        self.calls.append(url)
        if self.fail:
            raise RuntimeError("response already committed")
        return url + ";jsessionid=abc"


class IdentityEncoder:
    """Encoder that writes values unchanged."""

    def encode(self, value: str) -> str:
        return value


def _request(**overrides: Any) -> RequestContext:
    values: dict[str, Any] = {
        "scheme": "http",
        "server_name": "www.example.com",
        "server_port": 80,
        "context_path": "/app",
        "request_uri": "/app/orders/list",
    }
    values.update(overrides)
    return RequestContext(**values)


@pytest.fixture
def helper() -> UrlHelper:
    return UrlHelper()


@pytest.fixture
def custom_port_helper() -> UrlHelper:
    return UrlHelper(UrlHelperSettings(http_port=8080, https_port=8443))


@pytest.fixture
def make_request() -> Callable[..., RequestContext]:
    """Factory for request contexts; keyword arguments override defaults."""
    return _request


@pytest.fixture
def request_ctx() -> RequestContext:
    return _request()


@pytest.fixture
def response() -> RecordingResponse:
    return RecordingResponse()


@pytest.fixture
def failing_response() -> RecordingResponse:
    return RecordingResponse(fail=True)


@pytest.fixture
def identity_encoder() -> IdentityEncoder:
    return IdentityEncoder()
