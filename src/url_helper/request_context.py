"""RequestContext — plain-value implementation of IRequestContext."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True)
class RequestContext:
    """Transport details of one inbound request.

    Useful for background jobs that render links outside of a live
    request, and in tests.

    Attributes:
        scheme: ``"http"`` or ``"https"``.
        server_name: Host name the request was addressed to.
        server_port: Port the request was received on.
        context_path: Application prefix, ``""`` when deployed at the root.
        request_uri: Request path without query string.
        attributes: Named request attributes (forwarded URI and the like).
    """

    scheme: str = "http"
    server_name: str = "localhost"
    server_port: int = 80
    context_path: str = ""
    request_uri: str = "/"
    attributes: Mapping[str, Any] = field(default_factory=dict)

    def get_attribute(self, name: str) -> Any:
        return self.attributes.get(name)
