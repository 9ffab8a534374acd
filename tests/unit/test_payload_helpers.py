"""Unit tests for payload and sequence helpers."""

from learning_patterns.utils.payload import as_dict, as_list, first_present, score_of
from learning_patterns.utils.sequences import unique_in_order


def test_as_dict_and_as_list_reject_other_shapes():
    assert as_dict({"a": 1}) == {"a": 1}
    assert as_dict(["a"]) == {}
    assert as_list(("a", "b")) == ["a", "b"]
    assert as_list("ab") == []


def test_first_present_skips_none():
    assert first_present({"pattern": None, "category": "visual"}, ("pattern", "category")) == "visual"
    assert first_present({}, ("pattern",)) is None


def test_score_of():
    assert score_of({"score": 42}) == 42
    assert score_of({"score": True}) == 0
    assert score_of({"score": "42"}) == 0
    assert score_of(None) == 0


def test_unique_in_order_dedupes_then_caps():
    items = ["a", "b", "a", "c", "d", "b", "e", "f"]
    assert unique_in_order(items) == ("a", "b", "c", "d", "e", "f")
    assert unique_in_order(items, 3) == ("a", "b", "c")
