"""StarletteRequestContext — IRequestContext over a Starlette Request."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ...settings import DEFAULT_HTTP_PORT, DEFAULT_HTTPS_PORT

if TYPE_CHECKING:
    from starlette.requests import Request


class StarletteRequestContext:
    """Expose a Starlette request to :class:`url_helper.UrlBuilder`.

    The context path is the ASGI ``root_path`` and attributes are read
    from the request state (``scope["state"]``), so middleware can set
    the forwarded or current URI there.

    Example:
        ```python
        @app.route("/orders")
        async def orders(request: Request) -> Response:
            ctx = StarletteRequestContext(request)
            next_page = helper.build_url(None, ctx, params={"page": 2})
        ```
    """

    def __init__(self, request: Request) -> None:
        self._request = request

    @property
    def scheme(self) -> str:
        return self._request.url.scheme

    @property
    def server_name(self) -> str:
        return self._request.url.hostname or ""

    @property
    def server_port(self) -> int:
        port = self._request.url.port
        if port is not None:
            return port
        return DEFAULT_HTTPS_PORT if self.scheme == "https" else DEFAULT_HTTP_PORT

    @property
    def context_path(self) -> str:
        return str(self._request.scope.get("root_path", ""))

    @property
    def request_uri(self) -> str:
        return self._request.url.path

    def get_attribute(self, name: str) -> Any:
        state = self._request.scope.get("state") or {}
        return state.get(name)
