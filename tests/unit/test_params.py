"""Tests for ParameterMap and the value variants."""

from __future__ import annotations

from url_helper import ParameterMap, Scalar, Sequence


class TestParameterMap:
    def test_add_keeps_first_occurrence_scalar(self) -> None:
        params = ParameterMap()
        params.add("a", "1")
        assert params["a"] == Scalar("1")

    def test_second_occurrence_becomes_sequence(self) -> None:
        params = ParameterMap()
        params.add("a", "1")
        params.add("a", "2")
        params.add("a", "3")
        assert params["a"] == Sequence(("1", "2", "3"))

    def test_force_only_applies_to_new_names(self) -> None:
        params = ParameterMap()
        params.add("a", "1")
        params.add("a", "2", force_sequence=True)
        params.add("b", "x", force_sequence=True)
        assert params["a"] == Sequence(("1", "2"))
        assert params["b"] == Sequence(("x",))

    def test_to_dict(self) -> None:
        params = ParameterMap()
        params.add("a", "1")
        params.add("b", "2")
        params.add("b", "3")
        assert params.to_dict() == {"a": "1", "b": ["2", "3"]}

    def test_from_mapping_coerces_values(self) -> None:
        params = ParameterMap.from_mapping(
            {"s": "x", "n": 3, "none": None, "l": ["1"], "t": ("a", None)}
        )
        assert params == {
            "s": Scalar("x"),
            "n": Scalar("3"),
            "none": Scalar(""),
            "l": Sequence(("1",)),
            "t": Sequence(("a", "")),
        }

    def test_from_mapping_returns_same_map(self) -> None:
        params = ParameterMap()
        assert ParameterMap.from_mapping(params) is params

    def test_from_mapping_accepts_variants(self) -> None:
        params = ParameterMap.from_mapping({"a": Sequence(("1", "2"))})
        assert params["a"].values() == ("1", "2")

    def test_iteration_order(self) -> None:
        params = ParameterMap.from_mapping({"z": "1", "a": "2"})
        assert list(params) == ["z", "a"]
        assert len(params) == 2
        assert "z" in params

    def test_repr(self) -> None:
        assert repr(ParameterMap.from_mapping({"a": "1"})) == (
            "ParameterMap({'a': '1'})"
        )
