"""Tests for RewriteResult."""

from __future__ import annotations

from url_helper import RewriteResult


def test_success() -> None:
    result = RewriteResult.success("/a;sid=1")
    assert result.is_success
    assert result.value_or("/a") == "/a;sid=1"


def test_failure() -> None:
    error = ValueError("boom")
    result = RewriteResult.failure("encode_url failed: boom", error)
    assert not result.is_success
    assert result.error is error
    assert result.value_or("/a") == "/a"
