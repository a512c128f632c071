from __future__ import annotations

import pytest

from dataaware.keys import normalize_keys, normalize_string


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("test one", "testOne"),
        ("test-two", "testTwo"),
        ("testThree", "testThree"),
        (" test four ", "testFour"),
        ("Test five", "testFive"),
        ("test SIX", "testSIX"),
        ("test.seven", "testSeven"),
        ("snake_case_key", "snakeCaseKey"),
        ("path/to\\thing", "pathToThing"),
        ("URLPath", "URLPath"),
        ("ID", "ID"),
        ("", ""),
    ],
)
def test_normalize_string(raw: str, expected: str) -> None:
    assert normalize_string(raw) == expected


def test_normalize_string_is_idempotent() -> None:
    for raw in ("test one", "URLPath", "Test five", "a-b_c.d/e\\f g", "HTTP server"):
        once = normalize_string(raw)
        assert normalize_string(once) == once


def test_normalize_keys_renames_nested_mappings_and_keeps_sequences() -> None:
    tree = {
        "test one": "1",
        "test four": {"nested one": "4-1"},
        "item list": [{"item name": "a"}, "plain", ["deep key"]],
    }

    normalized = normalize_keys(tree)

    assert normalized == {
        "testOne": "1",
        "testFour": {"nestedOne": "4-1"},
        "itemList": [{"itemName": "a"}, "plain", ["deep key"]],
    }
    # Input untouched.
    assert "test one" in tree
    assert "nested one" in tree["test four"]


def test_normalize_keys_output_has_no_delimiters() -> None:
    tree = {"a b": {"c-d": {"e_f": {"g.h": {"i/j": 1}}}}}
    normalized = normalize_keys(tree)

    node = normalized
    while isinstance(node, dict):
        (key,) = node.keys()
        assert not any(ch in key for ch in " -_./\\")
        node = node[key]
    assert node == 1


def test_normalize_keys_keeps_non_string_keys_and_scalars() -> None:
    assert normalize_keys({1: {"x y": 2}}) == {1: {"xY": 2}}
    assert normalize_keys("scalar") == "scalar"
    assert normalize_keys(None) is None


def test_normalize_keys_later_duplicate_wins() -> None:
    assert normalize_keys({"test one": 1, "test-one": 2}) == {"testOne": 2}


def test_normalize_keys_handles_very_deep_trees() -> None:
    depth = 5000
    tree: dict[str, object] = {}
    node = tree
    for _ in range(depth):
        child: dict[str, object] = {}
        node["next node"] = child
        node = child

    normalized = normalize_keys(tree)

    count = 0
    node = normalized
    while node:
        node = node["nextNode"]
        count += 1
    assert count == depth
