"""Tests for ParametersStringBuilder."""

from __future__ import annotations

import pytest

from url_helper import (
    AMP,
    ConfigurationError,
    DefaultUrlDecoder,
    DefaultUrlEncoder,
    ParameterMap,
    ParametersStringBuilder,
    QueryStringParser,
    Sequence,
)


@pytest.fixture
def builder() -> ParametersStringBuilder:
    return ParametersStringBuilder(DefaultUrlEncoder())


def test_first_pair_gets_question_mark(builder) -> None:
    assert builder.build_parameters_string({"a": "1"}, "/x") == "/x?a=1"


def test_pairs_joined_by_separator(builder) -> None:
    out = builder.build_parameters_string({"a": "1", "b": "2"}, "/x", AMP)
    assert out == "/x?a=1&amp;b=2"


def test_sequence_emits_one_pair_per_value(builder) -> None:
    out = builder.build_parameters_string({"a": ["1", "2"], "b": "3"}, "", "&")
    assert out == "?a=1&a=2&b=3"


def test_existing_query_is_continued(builder) -> None:
    assert builder.build_parameters_string({"b": "2"}, "/x?a=1", "&") == "/x?a=1&b=2"


@pytest.mark.parametrize("params", [None, {}, {"a": []}])
def test_nothing_to_emit(builder, params) -> None:
    assert builder.build_parameters_string(params, "/x", "&") == "/x"


def test_empty_sequence_between_values(builder) -> None:
    out = builder.build_parameters_string({"a": "1", "b": [], "c": "3"}, "/x", "&")
    assert out == "/x?a=1&c=3"


def test_values_are_encoded_names_are_not(builder) -> None:
    out = builder.build_parameters_string({"first name": "a&b=c/d"}, "", "&")
    assert out == "?first name=a%26b%3Dc%2Fd"


def test_structured_names_are_written_verbatim(builder) -> None:
    out = builder.build_parameters_string(
        {"user.roles[0]": "admin", "a b": "x"}, "/x", "&"
    )
    assert out == "/x?user.roles[0]=admin&a b=x"


def test_none_and_numbers(builder) -> None:
    out = builder.build_parameters_string({"a": None, "b": 5, "c": (1, 2)}, "", "&")
    assert out == "?a=&b=5&c=1&c=2"


def test_requires_encoder() -> None:
    with pytest.raises(ConfigurationError):
        ParametersStringBuilder(None)  # type: ignore[arg-type]


def test_parse_recovers_serialized_parameters(builder) -> None:
    original = ParameterMap.from_mapping(
        {"q": "fish & chips", "tag": ["a", "b c", "ü"], "empty": ""}
    )
    query = builder.build_parameters_string(original, "", "&")
    parsed = QueryStringParser(DefaultUrlDecoder()).parse(query[1:])
    assert parsed == original
    assert parsed["tag"] == Sequence(("a", "b c", "ü"))
