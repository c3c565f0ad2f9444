"""UrlBuilder — action path + request context -> outbound link."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, NamedTuple

from .encoding import DefaultUrlEncoder
from .escaping import contains_script, escape_ecmascript
from .query_string import AMP, ParametersStringBuilder
from .result import RewriteResult
from .settings import DEFAULT_HTTP_PORT, DEFAULT_HTTPS_PORT, UrlHelperSettings

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .ports import IRequestContext, IResponseContext

logger = logging.getLogger(__name__)

HTTP_PROTOCOL = "http"
HTTPS_PROTOCOL = "https"

# Set by the HTTP layer when a request was forwarded internally.
FORWARD_REQUEST_URI_ATTRIBUTE = "forward.request_uri"
# Set by the application to pin the "same page" URI.
CURRENT_REQUEST_URI_ATTRIBUTE = "url_helper.request_uri"

_WELL_KNOWN_PORTS = {
    HTTP_PROTOCOL: DEFAULT_HTTP_PORT,
    HTTPS_PROTOCOL: DEFAULT_HTTPS_PORT,
}


class BuildOptions(NamedTuple):
    """How a link is built."""

    scheme: str | None = None
    include_context: bool = True
    encode_result: bool = True
    force_add_scheme_host_and_port: bool = False
    escape_amp: bool = True


def is_valid_scheme(scheme: str | None) -> bool:
    return scheme in (HTTP_PROTOCOL, HTTPS_PROTOCOL)


class UrlBuilder:
    """Build links back into the application.

    Links stay path-relative unless a different scheme is requested or
    scheme, host and port are forced. Parameters are appended as an
    encoded query string.
    """

    def __init__(
        self,
        settings: UrlHelperSettings | None = None,
        parameters_builder: ParametersStringBuilder | None = None,
    ) -> None:
        """
        Initialize UrlBuilder.

        Args:
            settings: Ports used when switching scheme and the charset of
                the default encoder (defaults to UrlHelperSettings()).
            parameters_builder: Query string serializer (defaults to one
                backed by DefaultUrlEncoder).
        """
        self.settings = settings or UrlHelperSettings()
        self._parameters_builder = parameters_builder or ParametersStringBuilder(
            DefaultUrlEncoder(self.settings.encoding)
        )

    @property
    def parameters_builder(self) -> ParametersStringBuilder:
        return self._parameters_builder

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
        """Keyword form of :meth:`build`."""
        options = BuildOptions(
            scheme=scheme,
            include_context=include_context,
            encode_result=encode_result,
            force_add_scheme_host_and_port=force_add_scheme_host_and_port,
            escape_amp=escape_amp,
        )
        return self.build(action, request, response, params, options)

    def build(
        self,
        action: str | None,
        request: IRequestContext,
        response: IResponseContext | None = None,
        params: Mapping[str, Any] | None = None,
        options: BuildOptions | None = None,
    ) -> str:
        """Return the link for *action*.

        Args:
            action: Target path. Absolute paths (``/x``) get the context
                path, relative ones resolve against the current URI when
                the scheme changes. ``None`` links to the current page.
            request: Current request.
            response: Rewrites the final URL when ``encode_result`` is set.
            params: Query parameters, appended in insertion order.
            options: Scheme override and output flags.

        Returns:
            The link. Never raises on a failing response rewrite.
        """
        options = options or BuildOptions()
        scheme = options.scheme if is_valid_scheme(options.scheme) else None

        authority, changed_scheme = self._authority(
            request, scheme, options.force_add_scheme_host_and_port
        )
        link = authority + self._path(
            action, request, options.include_context, changed_scheme
        )

        separator = AMP if options.escape_amp else "&"
        link = self._parameters_builder.build_parameters_string(
            params, link, separator
        )

        if contains_script(link):
            link = escape_ecmascript(link)

        if options.encode_result and response is not None:
            return self.rewrite(response, link).value_or(link)
        return link

    def rewrite(self, response: IResponseContext, url: str) -> RewriteResult:
        """Pass *url* through the response's rewriting hook."""
        try:
            return RewriteResult.success(response.encode_url(url))
        except Exception as exc:
            logger.debug(
                "Could not encode the URL, using it unchanged: %s", url, exc_info=True
            )
            return RewriteResult.failure(f"encode_url failed: {exc}", exc)

    def _authority(
        self, request: IRequestContext, scheme: str | None, force: bool
    ) -> tuple[str, bool]:
        request_scheme = request.scheme
        if force:
            target = scheme or request_scheme
            if scheme is not None and scheme != request_scheme:
                port = self.settings.port_for(scheme)
            else:
                port = request.server_port
        elif scheme is not None and scheme != request_scheme:
            target = scheme
            port = self.settings.port_for(scheme)
        else:
            return "", False
        return f"{target}://{request.server_name}{_port_suffix(target, port)}", True

    def _path(
        self,
        action: str | None,
        request: IRequestContext,
        include_context: bool,
        changed_scheme: bool,
    ) -> str:
        if action is None:
            return _current_uri(request)
        if action.startswith("/"):
            if include_context:
                context_path = request.context_path
                if context_path != "/":
                    return context_path + action
            return action
        if changed_scheme:
            uri = request.get_attribute(FORWARD_REQUEST_URI_ATTRIBUTE)
            if uri is None:
                uri = request.request_uri
            uri = str(uri)
            return uri[: uri.rfind("/") + 1] + action
        return action


def _port_suffix(scheme: str, port: int) -> str:
    well_known = _WELL_KNOWN_PORTS.get(scheme)
    if well_known is None or port == well_known:
        return ""
    return f":{port}"


def _current_uri(request: IRequestContext) -> str:
    for attribute in (CURRENT_REQUEST_URI_ATTRIBUTE, FORWARD_REQUEST_URI_ATTRIBUTE):
        uri = request.get_attribute(attribute)
        if uri is not None:
            return str(uri)
    return request.request_uri
