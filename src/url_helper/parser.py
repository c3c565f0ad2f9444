"""QueryStringParser — raw query string -> ParameterMap."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .exceptions import ConfigurationError
from .params import ParameterMap

if TYPE_CHECKING:
    from .ports import IUrlDecoder

logger = logging.getLogger(__name__)


class QueryStringParser:
    """Parse ``a=1&b=2&a=3`` style strings, keeping repeated names."""

    def __init__(self, decoder: IUrlDecoder) -> None:
        if decoder is None:
            raise ConfigurationError("decoder parameter is required.")
        self._decoder = decoder

    def parse(
        self, query_string: str | None, force_value_array: bool = False
    ) -> ParameterMap:
        """Return the parameters of *query_string* in order of appearance.

        Args:
            query_string: Raw query string without the leading ``?``.
                ``None`` yields an empty map.
            force_value_array: Store names seen once as one-element
                sequences instead of scalars.

        Returns:
            ParameterMap with decoded names and values. Blank pairs and
            a bare ``=`` are skipped; ``=x`` is kept under the name ``""``.
        """
        params = ParameterMap()
        if not query_string:
            return params
        for pair in query_string.split("&"):
            if not pair.strip():
                continue
            raw_name, _, raw_value = pair.partition("=")
            if not raw_name and not raw_value:
                logger.debug("Skipping empty query pair: %r", pair)
                continue
            name = self._decoder.decode(raw_name, True)
            value = self._decoder.decode(raw_value, True)
            params.add(name, value, force_sequence=force_value_array)
        return params
