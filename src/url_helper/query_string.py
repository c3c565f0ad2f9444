"""ParametersStringBuilder — ParameterMap -> query string appended to a link."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .exceptions import ConfigurationError
from .params import ParameterMap

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .ports import IUrlEncoder

AMP = "&amp;"


class ParametersStringBuilder:
    """Serialize parameters as ``name=value`` pairs.

    Values are always encoded; names are written as given.
    """

    def __init__(self, encoder: IUrlEncoder) -> None:
        if encoder is None:
            raise ConfigurationError("encoder parameter is required.")
        self._encoder = encoder

    def build_parameters_string(
        self,
        params: Mapping[str, Any] | None,
        link: str = "",
        separator: str = "&",
    ) -> str:
        """Return *link* with *params* appended as a query string.

        The first pair is introduced by ``?``, or by *separator* when
        *link* already carries a query string.
        """
        pairs = self._pairs(ParameterMap.from_mapping(params))
        if not pairs:
            return link
        lead = separator if "?" in link else "?"
        return link + lead + separator.join(pairs)

    def _pairs(self, params: ParameterMap) -> list[str]:
        encode = self._encoder.encode
        out: list[str] = []
        for name, entry in params.items():
            out.extend(f"{name}={encode(v)}" for v in entry.values())
        return out
