"""url-helper — outbound link building and query string parsing."""

from __future__ import annotations

from .builder import (
    CURRENT_REQUEST_URI_ATTRIBUTE,
    FORWARD_REQUEST_URI_ATTRIBUTE,
    BuildOptions,
    UrlBuilder,
)
from .encoding import DefaultUrlDecoder, DefaultUrlEncoder
from .escaping import escape_ecmascript
from .exceptions import ConfigurationError, UrlHelperError
from .helper import UrlHelper
from .params import ParameterMap, ParamValue, Scalar, Sequence
from .parser import QueryStringParser
from .ports import IRequestContext, IResponseContext, IUrlDecoder, IUrlEncoder
from .query_string import AMP, ParametersStringBuilder
from .request_context import RequestContext
from .result import RewriteResult
from .settings import UrlHelperSettings

__all__ = [
    "AMP",
    "BuildOptions",
    "CURRENT_REQUEST_URI_ATTRIBUTE",
    "ConfigurationError",
    "DefaultUrlDecoder",
    "DefaultUrlEncoder",
    "FORWARD_REQUEST_URI_ATTRIBUTE",
    "IRequestContext",
    "IResponseContext",
    "IUrlDecoder",
    "IUrlEncoder",
    "ParamValue",
    "ParameterMap",
    "ParametersStringBuilder",
    "QueryStringParser",
    "RequestContext",
    "RewriteResult",
    "Scalar",
    "Sequence",
    "UrlBuilder",
    "UrlHelper",
    "UrlHelperError",
    "UrlHelperSettings",
    "escape_ecmascript",
]
