"""URL helper exceptions."""

from __future__ import annotations


class UrlHelperError(Exception):
    """Root exception for the url-helper package."""


class ConfigurationError(UrlHelperError):
    """Raised when a helper is wired with missing or unusable collaborators."""
