"""UrlHelperSettings — default ports and charset for URL building."""

from __future__ import annotations

import codecs

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_HTTP_PORT = 80
DEFAULT_HTTPS_PORT = 443


class UrlHelperSettings(BaseModel):
    """Process-wide settings, fixed once a helper is constructed.

    Ports are the ones used when a link switches scheme; they do not
    affect which port is considered the well-known one for suppression.
    String values such as ``"8443"`` are coerced to integers.
    """

    model_config = ConfigDict(frozen=True)

    http_port: int = Field(default=DEFAULT_HTTP_PORT, ge=1, le=65535)
    https_port: int = Field(default=DEFAULT_HTTPS_PORT, ge=1, le=65535)
    encoding: str = "utf-8"

    @field_validator("encoding")
    @classmethod
    def _known_codec(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding {value!r}") from exc
        return value

    def port_for(self, scheme: str) -> int:
        """Return the configured port for *scheme* (``http`` or ``https``)."""
        return self.http_port if scheme == "http" else self.https_port
