"""UrlHelper — one entry point for building links and parsing query strings."""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING, Any

from .builder import UrlBuilder
from .encoding import DefaultUrlDecoder, DefaultUrlEncoder
from .parser import QueryStringParser
from .query_string import ParametersStringBuilder
from .settings import UrlHelperSettings

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .ports import IRequestContext, IResponseContext, IUrlDecoder, IUrlEncoder


class UrlHelper:
    """Wire builder, serializer and parser from one settings object.

    Example:
        ```python
        helper = UrlHelper(UrlHelperSettings(https_port=8443))
        link = helper.build_url(
            "/orders", request, response, {"page": 2}, scheme="https"
        )
        params = helper.parse_query_string("a=1&a=2")  # {"a": ["1", "2"]}
        ```
    """

    def __init__(
        self,
        settings: UrlHelperSettings | None = None,
        *,
        encoder: IUrlEncoder | None = None,
        decoder: IUrlDecoder | None = None,
    ) -> None:
        self.settings = settings or UrlHelperSettings()
        self.encoder = encoder or DefaultUrlEncoder(self.settings.encoding)
        self.decoder = decoder or DefaultUrlDecoder(self.settings.encoding)
        self.parameters_builder = ParametersStringBuilder(self.encoder)
        self.builder = UrlBuilder(self.settings, self.parameters_builder)
        self.parser = QueryStringParser(self.decoder)

    def build_url(
        self,
        action: str | None,
        request: IRequestContext,
        response: IResponseContext | None = None,
        params: Mapping[str, Any] | None = None,
        *,
        scheme: str | None = None,
        include_context: bool = True,
        encode_result: bool = True,
        force_add_scheme_host_and_port: bool = False,
        escape_amp: bool = True,
    ) -> str:
        """See :meth:`UrlBuilder.build`."""
        return self.builder.build_url(
            action,
            request,
            response,
            params,
            scheme=scheme,
            include_context=include_context,
            encode_result=encode_result,
            force_add_scheme_host_and_port=force_add_scheme_host_and_port,
            escape_amp=escape_amp,
        )

    def parse_query_string(
        self, query_string: str | None, force_value_array: bool = False
    ) -> dict[str, str | list[str]]:
        """Parse into plain values: ``str`` per name, ``list`` when repeated."""
        return self.parser.parse(query_string, force_value_array).to_dict()

    # ── Deprecated ───────────────────────────────────────────────

    def build_parameters_string(
        self,
        params: Mapping[str, Any] | None,
        link: str,
        separator: str,
        encode: bool = True,
    ) -> str:
        """Deprecated, use ``ParametersStringBuilder`` directly.

        *encode* is ignored; parameters are always encoded.
        """
        warnings.warn(
            "UrlHelper.build_parameters_string is deprecated, "
            "use ParametersStringBuilder.build_parameters_string",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.parameters_builder.build_parameters_string(
            params, link, separator
        )

    def encode(self, value: str) -> str:
        """Deprecated, use the encoder directly."""
        warnings.warn(
            "UrlHelper.encode is deprecated, use IUrlEncoder.encode",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.encoder.encode(value)

    def decode(self, value: str, is_query_string: bool = False) -> str:
        """Deprecated, use the decoder directly."""
        warnings.warn(
            "UrlHelper.decode is deprecated, use IUrlDecoder.decode",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.decoder.decode(value, is_query_string)
