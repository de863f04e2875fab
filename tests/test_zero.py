"""
Unit tests for zero values.

This module tests:
- Zero values of builtin, generic, optional, dataclass and pydantic types
- The is_zero predicate
- first_non_zero precedence chains
- Registration of custom zero values
"""

import threading

import pytest
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Optional, TypeVar

from pydantic import BaseModel

from grab.grab_error import GrabError
from grab.zero import (
    DefaultZeroValues,
    ZeroValues,
    first_non_zero,
    get_zero_values,
    is_zero,
    register_zero_value,
    set_zero_values,
    zero_value,
)


@dataclass
class Point:
    x: int
    y: float
    label: str = "origin"
    tags: list[str] = field(default_factory=list)


@dataclass
class Segment:
    start: Point
    end: Optional[Point]


class User(BaseModel):
    name: str
    age: int
    tags: list[str] = []


class Color(Enum):
    RED = "red"
    BLUE = "blue"


class Connection:
    """Class which cannot be built without arguments"""

    def __init__(self, url: str):
        self.url = url


class Tags(list):
    pass


class InvalidName(Exception):
    pass


@dataclass
class Person:
    name: str

    def __post_init__(self):
        if not self.name:
            raise InvalidName("name_required")


class Session:
    """Class whose constructor raises without a url"""

    def __init__(self, url: str = ""):
        if not url:
            raise ConnectionError("url_required")
        self.url = url


class Matrix:
    """Class whose equality cannot be reduced to a bool"""

    def __eq__(self, other):
        raise ValueError("ambiguous_comparison")


@dataclass
class Node:
    value: int
    next: "Node"


class Category(BaseModel):
    name: str
    parent: "Category"


Category.model_rebuild()


class TestZeroValue:
    """Test cases for zero_value"""

    @pytest.mark.parametrize(
        "value_type,expected",
        [
            (int, 0),
            (float, 0.0),
            (str, ""),
            (bool, False),
            (bytes, b""),
            (Decimal, Decimal(0)),
            (list, []),
            (dict, {}),
            (tuple, ()),
        ],
    )
    def test_builtin_types(self, value_type, expected):
        result = zero_value(value_type)
        assert result == expected
        assert type(result) is value_type

    def test_no_type_is_none(self):
        assert zero_value() is None
        assert zero_value(None) is None
        assert zero_value(type(None)) is None

    def test_optional_and_union_types_are_none(self):
        assert zero_value(Optional[int]) is None
        assert zero_value(int | None) is None
        assert zero_value(int | str) is None

    def test_any_and_type_var_are_none(self):
        assert zero_value(Any) is None
        assert zero_value(TypeVar("X")) is None

    def test_parameterized_generic_uses_origin(self):
        assert zero_value(list[int]) == []
        assert zero_value(dict[str, int]) == {}

    def test_annotated_uses_inner_type(self):
        assert zero_value(Annotated[int, "meta"]) == 0

    def test_dataclass(self):
        result = zero_value(Point)
        assert result == Point(x=0, y=0.0)
        assert result.label == "origin"

    def test_nested_dataclass(self):
        result = zero_value(Segment)
        assert result == Segment(start=Point(x=0, y=0.0), end=None)

    def test_pydantic_model(self):
        result = zero_value(User)
        assert result == User(name="", age=0)
        assert result.tags == []

    def test_type_without_zero_value_is_none(self):
        assert zero_value(Connection) is None
        assert zero_value(Color) is None
        assert zero_value(datetime) is None

    def test_zero_values_are_not_shared(self):
        first = zero_value(list)
        first.append(1)
        assert zero_value(list) == []


class TestIsZero:
    """Test cases for is_zero"""

    @pytest.mark.parametrize(
        "value", [None, 0, 0.0, "", False, b"", [], {}, (), Decimal("0.00")]
    )
    def test_zero(self, value):
        assert is_zero(value) is True

    @pytest.mark.parametrize("value", [1, -1, 0.5, "hello", True, b"x", [0], {"a": 1}])
    def test_not_zero(self, value):
        assert is_zero(value) is False

    def test_dataclass(self):
        assert is_zero(Point(x=0, y=0.0))
        assert not is_zero(Point(x=1, y=0.0))
        assert not is_zero(Point(x=0, y=0.0, label="elsewhere"))

    def test_pydantic_model(self):
        assert is_zero(User(name="", age=0))
        assert not is_zero(User(name="alice", age=0))

    def test_value_of_type_without_zero_value(self):
        assert not is_zero(Connection("sqlite://"))
        assert not is_zero(Color.RED)
        assert not is_zero(datetime.min)


class TestFirstNonZero:
    """Test cases for first_non_zero"""

    def test_second_element(self):
        assert first_non_zero("", "selected", "") == "selected"

    def test_first_element(self):
        assert first_non_zero("override", "default") == "override"

    def test_skips_none(self):
        assert first_non_zero(None, None, 8080) == 8080

    def test_no_args_returns_none(self):
        assert first_non_zero() is None

    def test_no_args_with_value_type_returns_zero_value(self):
        assert first_non_zero(value_type=str) == ""

    def test_all_zero_returns_zero_value_of_last_element(self):
        result = first_non_zero(0, 0.0)
        assert result == 0.0
        assert isinstance(result, float)

    def test_all_zero_with_value_type(self):
        assert first_non_zero(None, None, value_type=int) == 0

    def test_all_none(self):
        assert first_non_zero(None, None) is None


class TestRegisterZeroValue:
    """Test cases for zero value registration"""

    def test_register_zero_value(self):
        register_zero_value(datetime, datetime.min)

        assert zero_value(datetime) == datetime.min
        assert is_zero(datetime.min)
        assert not is_zero(datetime(2024, 1, 1))

    def test_registration_applies_to_subclasses(self):
        class Timestamp(datetime):
            pass

        register_zero_value(datetime, datetime.min)

        assert zero_value(Timestamp) == datetime.min

    def test_registration_overrides_default(self):
        register_zero_value(Color, Color.RED)

        assert zero_value(Color) is Color.RED
        assert is_zero(Color.RED)
        assert not is_zero(Color.BLUE)

    def test_registered_zero_value_is_copied(self):
        register_zero_value(Tags, Tags(["none"]))

        result = zero_value(Tags)
        result.append("extra")

        assert zero_value(Tags) == ["none"]
        assert isinstance(zero_value(Tags), Tags)

    def test_registration_is_reset_with_strategy(self):
        register_zero_value(datetime, datetime.min)
        set_zero_values(None)

        assert zero_value(datetime) is None

    def test_register_with_custom_strategy_raises_error(self):
        class NoneZeroValues(ZeroValues):
            def get_zero_value(self, value_type):
                return None

        set_zero_values(NoneZeroValues())

        with pytest.raises(GrabError):
            register_zero_value(datetime, datetime.min)


class TestDefaultZeroValues:
    """Test cases for using a DefaultZeroValues instance directly"""

    def test_registrations_are_per_instance(self):
        zero_values = DefaultZeroValues()
        zero_values.register(datetime, datetime.min)

        assert zero_values.get_zero_value(datetime) == datetime.min
        assert DefaultZeroValues().get_zero_value(datetime) is None

    def test_initial_zero_values(self):
        zero_values = DefaultZeroValues(zero_values={str: "n/a"})

        assert zero_values.is_zero("n/a")
        assert not zero_values.is_zero("")

    def test_default_strategy(self):
        assert isinstance(get_zero_values(), DefaultZeroValues)
        assert get_zero_values() is get_zero_values()


class TestZeroValueTotality:
    """Test cases for types whose zero value cannot be built or compared"""

    def test_validating_dataclass_has_no_zero_value(self):
        assert zero_value(Person) is None

    def test_validating_dataclass_is_not_zero(self):
        assert is_zero(Person("bob")) is False

    def test_first_non_zero_with_validating_dataclass(self):
        assert first_non_zero(Person("bob")) == Person("bob")
        assert first_non_zero(None, Person("bob")) == Person("bob")

    def test_raising_constructor_has_no_zero_value(self):
        assert zero_value(Session) is None
        assert is_zero(Session("sqlite://")) is False

    def test_failing_comparison_is_not_zero(self):
        assert is_zero(Matrix()) is False

    def test_self_referential_dataclass(self):
        result = zero_value(Node)

        assert result == Node(value=0, next=None)
        assert is_zero(Node(value=0, next=None))
        assert not is_zero(Node(value=1, next=None))

    def test_self_referential_model(self):
        result = zero_value(Category)

        assert result.name == ""
        assert result.parent is None

    def test_building_state_is_cleared(self):
        zero_values = DefaultZeroValues()

        zero_values.get_zero_value(Node)

        assert zero_values.get_zero_value(Node) == Node(value=0, next=None)

    def test_registered_uncopyable_zero_value(self):
        lock = threading.Lock()
        register_zero_value(Matrix, lock)

        assert zero_value(Matrix) is lock
