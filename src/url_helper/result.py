"""RewriteResult — outcome of response-level URL rewriting."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RewriteResult:
    """Either a rewritten URL or the reason rewriting failed.

    Usage::

        result = RewriteResult.success("/app/page;jsessionid=1")
        result = RewriteResult.failure("encode_url raised", exc)
        url = result.value_or(original)
    """

    value: str | None = None
    reason: str | None = None
    error: BaseException | None = None

    @property
    def is_success(self) -> bool:
        return self.reason is None

    # ── Factory methods ──────────────────────────────────────────

    @classmethod
    def success(cls, value: str) -> RewriteResult:
        return cls(value=value)

    @classmethod
    def failure(
        cls, reason: str, error: BaseException | None = None
    ) -> RewriteResult:
        return cls(reason=reason, error=error)

    def value_or(self, default: str) -> str:
        """Return the rewritten URL, or *default* on failure."""
        if self.is_success and self.value is not None:
            return self.value
        return default
