from __future__ import annotations

import dataclasses
import enum

from pydantic import BaseModel, Field

from dataaware.tree import NOT_FOUND, Resolution, as_tree


class Level(enum.Enum):
    LOW = "low"


@dataclasses.dataclass
class Limits:
    max_items: int = 3
    level: Level = Level.LOW


class Settings(BaseModel):
    api_url: str = Field(default="https://example.test", alias="api url")
    tags: tuple[str, ...] = ("a", "b")


def test_as_tree_converts_models_dataclasses_and_tuples() -> None:
    tree = as_tree({"settings": Settings(), "limits": Limits(), "pair": (1, (2, 3))})

    assert tree == {
        "settings": {"api url": "https://example.test", "tags": ["a", "b"]},
        "limits": {"max_items": 3, "level": "low"},
        "pair": [1, [2, 3]],
    }


def test_as_tree_returns_new_containers() -> None:
    source = {"a": {"b": [1]}}
    tree = as_tree(source)
    tree["a"]["b"].append(2)
    assert source == {"a": {"b": [1]}}


def test_resolution_truthiness() -> None:
    assert Resolution.hit(None)
    assert Resolution.hit(None).found
    assert not NOT_FOUND
    assert NOT_FOUND.value is None
