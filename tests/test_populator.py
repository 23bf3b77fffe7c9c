from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import ClassVar, Final, Literal

import pytest
from pydantic import BaseModel

from dummygen import (
    Byte,
    Char,
    DummyConfig,
    Float32,
    Instant,
    Long,
    ObjectPopulator,
    Short,
    populate,
)

NOW = datetime(2024, 6, 15, 12, 0, 0)


class Color(Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"


@dataclass
class Address:
    street: str = ""
    city: str = ""
    zip_code: int = 0


@dataclass
class User:
    name: str = ""
    email: str = ""
    age: int = 0
    active: bool = False
    rating: float = 0.0
    created_at: datetime | None = None
    home: Address = field(default_factory=Address)
    favourite: Color = Color.RED
    tags: list[str] = field(default_factory=list)


@dataclass
class Employee(User):
    salary: int = 0
    department: str = ""


@dataclass
class Bag:
    ids: set[int] = field(default_factory=set)
    codes: frozenset[str] = frozenset()
    scores: dict[str, int] = field(default_factory=dict)
    history: tuple[float, ...] = ()
    labels: Sequence[str] = ()
    untyped: list = field(default_factory=list)  # type: ignore[type-arg]
    addresses: list[Address] = field(default_factory=list)


@dataclass
class Scalars:
    file_size: Long = Long(0)
    small: Short = Short(0)
    tiny: Byte = Byte(0)
    ratio: Float32 = Float32(0.0)
    initial: Char = Char(" ")
    seen_at: Instant | None = None
    amount: Decimal = Decimal(0)
    birth_date: date | None = None
    status: Literal["open", "closed"] = "open"


@dataclass
class Member:
    birthDate: datetime = datetime.min
    birth_date: date = date.min


@dataclass
class Settings:
    VERSION: ClassVar[str] = "1.0"
    LIMIT: Final[int] = 10
    name: str = ""


@dataclass(frozen=True)
class Point:
    label: str = ""
    x: int = 0


@dataclass(slots=True)
class Compact:
    title: str = ""
    count: int = 0


class Guarded:
    """Rejects attribute writes through the regular protocol."""

    email: str

    def __init__(self) -> None:
        object.__setattr__(self, "email", "")

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(name)


class Profile(BaseModel):
    name: str = ""
    age: int = 0
    tags: list[str] = []


def test_populates_scalar_fields() -> None:
    user = populate(User, now=NOW)
    assert isinstance(user, User)
    assert user.name and " " in user.name
    assert "@" in user.email
    assert 1 <= user.age <= 80
    assert isinstance(user.active, bool)
    assert 0.0 <= user.rating <= 5.0
    assert user.favourite in Color


def test_populates_nested_objects() -> None:
    user = populate(User)
    assert isinstance(user.home, Address)
    assert user.home.city
    assert user.home.street
    assert 0 <= user.home.zip_code <= 999


def test_inherited_fields_are_populated() -> None:
    employee = populate(Employee)
    assert employee.name and employee.email
    assert 30000 <= employee.salary <= 129999
    assert employee.department


def test_collection_sizes_stay_within_bounds() -> None:
    cfg = DummyConfig(max_list_size=5)
    for _ in range(100):
        assert 1 <= len(populate(User, cfg).tags) <= 5


def test_non_positive_list_size_gives_single_element() -> None:
    for size in (0, -3):
        assert len(populate(User, DummyConfig(max_list_size=size)).tags) == 1


def test_containers() -> None:
    bag = populate(Bag)
    assert isinstance(bag.ids, set) and 1 <= len(bag.ids) <= 3
    assert all(isinstance(i, int) for i in bag.ids)
    assert isinstance(bag.codes, frozenset) and 1 <= len(bag.codes) <= 3
    assert isinstance(bag.scores, dict) and 1 <= len(bag.scores) <= 3
    assert all(isinstance(k, str) and isinstance(v, int) for k, v in bag.scores.items())
    assert isinstance(bag.history, tuple) and 1 <= len(bag.history) <= 3
    assert all(isinstance(v, float) for v in bag.history)
    assert isinstance(bag.labels, list) and 1 <= len(bag.labels) <= 3
    assert 1 <= len(bag.addresses) <= 3
    assert all(isinstance(a, Address) and a.city for a in bag.addresses)


def test_unknown_element_type_gives_empty_container() -> None:
    assert populate(Bag).untyped == []


def test_marker_types() -> None:
    values = populate(Scalars, now=NOW)
    assert 0 <= values.file_size <= 2**63 - 1
    assert -32768 <= values.small <= 32767
    assert -128 <= values.tiny <= 127
    assert isinstance(values.ratio, float)
    assert len(values.initial) == 1 and 32 <= ord(values.initial) <= 126
    assert isinstance(values.amount, Decimal)
    assert 1 <= values.amount <= 1001
    assert values.status in ("open", "closed")


def test_optional_fields_are_sometimes_none() -> None:
    seen = [populate(Scalars, now=NOW) for _ in range(100)]
    births = [s.birth_date for s in seen]
    assert any(b is None for b in births)
    assert any(b is not None for b in births)
    # the wrapped value is generated like a container element, not by field name
    for value in births:
        assert value is None or date(2023, 6, 15) <= value <= date(2024, 6, 15)
    for s in seen:
        assert s.seen_at is None or s.seen_at.tzinfo is not None


def test_static_and_final_fields_are_untouched() -> None:
    settings = populate(Settings)
    assert Settings.VERSION == "1.0"
    assert "VERSION" not in vars(settings)
    assert settings.LIMIT == 10
    assert settings.name


def test_frozen_and_slotted_dataclasses() -> None:
    point = populate(Point)
    assert point.label
    compact = populate(Compact)
    assert compact.title
    assert 1 <= compact.count <= 100


def test_setattr_override_is_bypassed() -> None:
    assert "@" in populate(Guarded).email


def test_pydantic_model() -> None:
    profile = populate(Profile)
    assert profile.name
    assert 1 <= profile.age <= 80
    assert 1 <= len(profile.tags) <= 3


def test_populator_instances_are_independent() -> None:
    populator = ObjectPopulator()
    first = populator.populate(User, DummyConfig(language="tr"))
    second = populator.populate(User)
    assert isinstance(first, User) and isinstance(second, User)
    assert first is not second


def test_birth_dates_use_the_birth_range() -> None:
    for _ in range(100):
        member = populate(Member, now=NOW)
        assert 1950 <= member.birthDate.year <= 2005
        assert 1950 <= member.birth_date.year <= 2005
