"""URL helper ports (protocols).

The builder only talks to the HTTP layer and to the percent-encoding
primitives through these protocols. All ports use @runtime_checkable for
isinstance checks.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IRequestContext(Protocol):
    """Read-only view of the inbound request.

    Implementations:
        - RequestContext (plain values)
        - StarletteRequestContext
    """

    @property
    def scheme(self) -> str:
        """Transport scheme of the request, e.g. ``"http"``."""
        ...

    @property
    def server_name(self) -> str:
        """Host name the request was addressed to."""
        ...

    @property
    def server_port(self) -> int:
        """Port the request was received on."""
        ...

    @property
    def context_path(self) -> str:
        """Path prefix of the deployed application (``""`` at the root)."""
        ...

    @property
    def request_uri(self) -> str:
        """Request path, without query string."""
        ...

    def get_attribute(self, name: str) -> Any:
        """Return a named request attribute, or None when unset."""
        ...


@runtime_checkable
class IResponseContext(Protocol):
    """Response-level URL rewriting (e.g. session id propagation)."""

    def encode_url(self, url: str) -> str:
        """Return *url* rewritten for the response. May raise."""
        ...


@runtime_checkable
class IUrlEncoder(Protocol):
    """Percent-encodes a single name or value."""

    def encode(self, value: str) -> str: ...


@runtime_checkable
class IUrlDecoder(Protocol):
    """Percent-decodes a single name or value."""

    def decode(self, value: str, is_query_string: bool = False) -> str:
        """Decode *value*; query-string mode also turns ``+`` into a space."""
        ...
