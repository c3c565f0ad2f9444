"""ParameterMap — ordered query parameters with explicit value shapes.

A value is either a :class:`Scalar` or a :class:`Sequence`. A name starts
as a scalar and turns into a sequence on its second occurrence (or on the
first one when the caller forces sequences). A sequence only grows.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Scalar:
    value: str

    def values(self) -> tuple[str, ...]:
        return (self.value,)


@dataclass(frozen=True)
class Sequence:
    items: tuple[str, ...]

    def values(self) -> tuple[str, ...]:
        return self.items

    def appended(self, value: str) -> Sequence:
        return Sequence((*self.items, value))


ParamValue = Scalar | Sequence


def _to_text(value: Any) -> str:
    return "" if value is None else str(value)


class ParameterMap(Mapping[str, ParamValue]):
    """Insertion-ordered mapping from parameter name to :data:`ParamValue`."""

    def __init__(self) -> None:
        self._entries: dict[str, ParamValue] = {}

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any] | None) -> ParameterMap:
        """Coerce a plain mapping.

        Lists and tuples become sequences (even with a single element),
        ``None`` becomes ``""`` and anything else goes through ``str()``.
        Existing ParameterMap instances are returned unchanged.
        """
        if isinstance(params, ParameterMap):
            return params
        out = cls()
        for name, raw in (params or {}).items():
            if isinstance(raw, (Scalar, Sequence)):
                out._entries[name] = raw
            elif isinstance(raw, (list, tuple)):
                out._entries[name] = Sequence(tuple(_to_text(v) for v in raw))
            else:
                out._entries[name] = Scalar(_to_text(raw))
        return out

    def add(self, name: str, value: str, *, force_sequence: bool = False) -> None:
        """Record one occurrence of *name*.

        *force_sequence* only matters when *name* has not been seen yet.
        """
        current = self._entries.get(name)
        if current is None:
            self._entries[name] = (
                Sequence((value,)) if force_sequence else Scalar(value)
            )
        elif isinstance(current, Scalar):
            self._entries[name] = Sequence((current.value, value))
        else:
            self._entries[name] = current.appended(value)

    def to_dict(self) -> dict[str, str | list[str]]:
        """Plain form: ``str`` for scalars, ``list[str]`` for sequences."""
        return {
            name: entry.value if isinstance(entry, Scalar) else list(entry.values())
            for name, entry in self._entries.items()
        }

    def __getitem__(self, name: str) -> ParamValue:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ParameterMap({self.to_dict()!r})"
