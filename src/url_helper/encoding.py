"""Default percent-encoding collaborators backed by urllib.parse."""

from __future__ import annotations

import codecs
from urllib.parse import quote_plus, unquote, unquote_plus

from .exceptions import ConfigurationError


def _checked_encoding(encoding: str) -> str:
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise ConfigurationError(f"Unknown encoding {encoding!r}") from exc
    return encoding


class DefaultUrlEncoder:
    """Form-style encoding: spaces become ``+``, reserved characters ``%XX``."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = _checked_encoding(encoding)

    def encode(self, value: str) -> str:
        return quote_plus(value, safe="", encoding=self.encoding, errors="strict")


class DefaultUrlDecoder:
    """Percent-decoding with separate path and query-string rules.

    Malformed escapes are left as-is and undecodable bytes are replaced,
    so decoding never raises on client input.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = _checked_encoding(encoding)

    def decode(self, value: str, is_query_string: bool = False) -> str:
        if is_query_string:
            return unquote_plus(value, encoding=self.encoding, errors="replace")
        return unquote(value, encoding=self.encoding, errors="replace")
