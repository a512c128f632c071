from __future__ import annotations

import pytest

from dataaware.exceptions import PropertyPathError
from dataaware.property_path import (
    format_path,
    get_steps,
    get_value,
    is_readable,
    parse_path,
    set_steps,
    set_value,
)
from dataaware.tree import Step


def test_parse_path_segments() -> None:
    assert parse_path("[a][b c][0]") == ("a", "b c", "0")
    assert parse_path("[a.b]") == ("a.b",)


@pytest.mark.parametrize("path", ["", "a", "a[b]", "[a]b", "[a][]", "[a]]", "[[a]]", "[a"])
def test_parse_path_rejects_malformed(path: str) -> None:
    with pytest.raises(PropertyPathError) as excinfo:
        parse_path(path)
    assert excinfo.value.path == path


def test_get_value_mappings_and_sequences() -> None:
    tree = {"a": {"b": [10, {"c": "deep"}]}, "none": None, 3: "int key"}

    assert get_value(tree, "[a][b][0]").value == 10
    assert get_value(tree, "[a][b][1][c]").value == "deep"
    assert get_value(tree, "[3]").value == "int key"

    found_none = get_value(tree, "[none]")
    assert found_none.found
    assert found_none.value is None


@pytest.mark.parametrize(
    "path",
    ["[missing]", "[a][b][2]", "[a][b][-1]", "[a][b][x]", "[a][b][0][c]", "a.b", "[a"],
)
def test_get_value_failures_are_not_found(path: str) -> None:
    tree = {"a": {"b": [10, {"c": "deep"}]}}
    assert not get_value(tree, path).found
    assert not is_readable(tree, path)


def test_set_value_creates_intermediate_dicts() -> None:
    tree: dict[str, object] = {}
    set_value(tree, "[a][b]", 1)
    set_value(tree, "[status][404]", "Not found")

    assert tree == {"a": {"b": 1}, "status": {"404": "Not found"}}


def test_set_value_indexes_existing_lists() -> None:
    tree: dict[str, object] = {"list": []}
    set_value(tree, "[list][0][name]", "first")
    set_value(tree, "[list][1][name]", "second")

    assert tree == {"list": [{"name": "first"}, {"name": "second"}]}


def test_set_steps_builds_containers_by_step_kind() -> None:
    tree: dict[str, object] = {}
    set_steps(tree, (Step("ports"), Step(1, True)), 443)
    set_steps(tree, (Step("codes"), Step("1000000", False)), "big")

    assert tree == {"ports": [None, 443], "codes": {"1000000": "big"}}
    assert get_steps(tree, (Step("ports"), Step(1, True))).value == 443
    assert not get_steps(tree, (Step("ports"), Step(2, True))).found


def test_set_steps_reaches_keys_bracket_syntax_cannot() -> None:
    tree: dict[str, object] = {}
    set_steps(tree, (Step(""),), "blank")
    set_steps(tree, (Step("a[b]"), Step("c]")), 1)

    assert tree == {"": "blank", "a[b]": {"c]": 1}}
    assert format_path((Step("a"), Step(0, True))) == "[a][0]"


def test_set_value_pads_lists_and_replaces_entries() -> None:
    tree: dict[str, object] = {"items": ["a"]}
    set_value(tree, "[items][3]", "d")
    set_value(tree, "[items][0]", "A")
    assert tree == {"items": ["A", None, None, "d"]}


def test_set_value_replaces_empty_intermediates() -> None:
    tree: dict[str, object] = {"a": None, "b": ""}
    set_value(tree, "[a][x]", 1)
    set_value(tree, "[b][0]", 2)
    assert tree == {"a": {"x": 1}, "b": {"0": 2}}


def test_set_value_replaces_empty_list_when_a_key_is_needed() -> None:
    tree: dict[str, object] = {"colors": []}
    set_value(tree, "[colors][fg]", "black")
    assert tree == {"colors": {"fg": "black"}}


def test_set_value_refuses_to_overwrite_scalars() -> None:
    tree = {"a": "text"}
    with pytest.raises(PropertyPathError):
        set_value(tree, "[a][b]", 1)
    assert tree == {"a": "text"}


def test_set_value_refuses_key_into_list() -> None:
    with pytest.raises(PropertyPathError):
        set_value({"a": [1]}, "[a][name]", 1)
