"""Starlette integration for url-helper."""

from __future__ import annotations

from .request import StarletteRequestContext

__all__ = ["StarletteRequestContext"]
