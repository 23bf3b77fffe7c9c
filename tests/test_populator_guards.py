from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, TypeVar

import pytest

from dummygen import (
    ConstructionError,
    DummyConfig,
    FieldAssignmentError,
    InvalidRequestError,
    ObjectPopulator,
    PopulationError,
    populate,
)

T = TypeVar("T")


class NodeA:
    label: str
    b: NodeB

    def __init__(self) -> None:
        self.label = ""
        self.b = None  # type: ignore[assignment]


class NodeB:
    label: str
    a: NodeA

    def __init__(self) -> None:
        self.label = ""
        self.a = None  # type: ignore[assignment]


class TreeNode:
    value: int
    parent: TreeNode
    children: list[TreeNode]

    def __init__(self) -> None:
        self.value = -1
        self.parent = None  # type: ignore[assignment]
        self.children = []


class Level0:
    label: str
    child: Level1

    def __init__(self) -> None:
        self.label = ""
        self.child = None  # type: ignore[assignment]


class Level1:
    label: str
    child: Level2

    def __init__(self) -> None:
        self.label = ""
        self.child = None  # type: ignore[assignment]


class Level2:
    label: str
    child: Level3

    def __init__(self) -> None:
        self.label = ""
        self.child = None  # type: ignore[assignment]


class Level3:
    label: str
    child: Level4

    def __init__(self) -> None:
        self.label = ""
        self.child = None  # type: ignore[assignment]


class Level4:
    label: str
    child: Level5

    def __init__(self) -> None:
        self.label = ""
        self.child = None  # type: ignore[assignment]


class Level5:
    label: str

    def __init__(self) -> None:
        self.label = ""


class Leaf:
    title: str

    def __init__(self) -> None:
        self.title = ""


class Pair:
    left: Leaf
    right: Leaf

    def __init__(self) -> None:
        self.left = None  # type: ignore[assignment]
        self.right = None  # type: ignore[assignment]


class Mood(Enum):
    pass


class Unfillable:
    mood: Mood
    anything: Any
    generic: T  # type: ignore[valid-type]
    pair: int | str

    def __init__(self) -> None:
        self.mood = "keep"  # type: ignore[assignment]
        self.anything = "keep"
        self.generic = "keep"
        self.pair = "keep"


class NeedsArgument:
    name: str

    def __init__(self, name: str) -> None:
        self.name = name


class HoldsBroken:
    title: str
    inner: NeedsArgument

    def __init__(self) -> None:
        self.title = ""
        self.inner = None  # type: ignore[assignment]


class AbstractShape(ABC):
    name: str

    @abstractmethod
    def area(self) -> float: ...


class Slotted:
    __slots__ = ("name",)

    name: str
    extra: str


def test_mutual_cycle_terminates() -> None:
    a = populate(NodeA)
    assert a.label
    assert isinstance(a.b, NodeB)
    assert a.b.label
    assert a.b.a is None


def test_self_reference_terminates() -> None:
    node = populate(TreeNode)
    assert 0 <= node.value <= 999
    assert node.parent is None
    assert node.children == []


def test_depth_bound() -> None:
    root = populate(Level0)
    chain: list[Any] = [root]
    while chain[-1].child is not None:
        chain.append(chain[-1].child)
    assert [type(n) for n in chain] == [Level0, Level1, Level2, Level3, Level4]
    assert all(n.label for n in chain)


def test_custom_max_depth() -> None:
    root = ObjectPopulator(max_depth=2).populate(Level0)
    assert isinstance(root.child, Level1)
    assert root.child.child is None


def test_max_depth_must_be_positive() -> None:
    with pytest.raises(ValueError):
        ObjectPopulator(max_depth=0)


def test_siblings_of_same_type_are_both_populated() -> None:
    pair = populate(Pair)
    assert pair.left.title and pair.right.title
    assert pair.left is not pair.right


def test_absent_values_keep_defaults() -> None:
    obj = populate(Unfillable)
    assert obj.mood == "keep"
    assert obj.anything == "keep"
    assert obj.generic == "keep"
    assert obj.pair == "keep"


def test_absent_values_become_none_when_allowed() -> None:
    obj = populate(Unfillable, DummyConfig(allow_null_fields=True))
    assert obj.mood is None
    assert obj.anything is None
    assert obj.generic is None
    assert obj.pair is None


def test_cycle_branch_becomes_none_when_nulls_allowed() -> None:
    a = populate(NodeA, DummyConfig(allow_null_fields=True))
    assert a.b.a is None


@pytest.mark.parametrize("target", [None, 42, "NodeA", NodeA()])
def test_invalid_requests(target: Any) -> None:
    with pytest.raises(InvalidRequestError):
        populate(target)


def test_invalid_request_is_value_error() -> None:
    with pytest.raises(ValueError):
        populate(None)  # type: ignore[arg-type]


def test_constructor_failure_names_root_type() -> None:
    with pytest.raises(PopulationError, match="Failed to populate class") as info:
        populate(NeedsArgument)
    assert "NeedsArgument" in str(info.value)
    assert info.value.failed_type is NeedsArgument
    assert isinstance(info.value.__cause__, ConstructionError)
    assert "Cannot create instance of class" in str(info.value.__cause__)


def test_nested_failure_is_attributed() -> None:
    with pytest.raises(PopulationError) as info:
        populate(HoldsBroken)
    assert "HoldsBroken" in str(info.value)
    assert info.value.target is HoldsBroken
    assert info.value.failed_type is NeedsArgument


def test_abstract_class_is_rejected() -> None:
    with pytest.raises(PopulationError) as info:
        populate(AbstractShape)
    assert isinstance(info.value.__cause__, ConstructionError)


def test_assignment_failure() -> None:
    with pytest.raises(PopulationError) as info:
        populate(Slotted)
    cause = info.value.__cause__
    assert isinstance(cause, FieldAssignmentError)
    assert cause.field == "extra"
    assert info.value.failed_type is Slotted
