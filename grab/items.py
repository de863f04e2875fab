"""Helpers building new lists and dicts from iterables. Input order is always kept."""

from collections.abc import Callable, Hashable, Iterable
from typing import TypeVar

T = TypeVar("T")
R = TypeVar("R")
H = TypeVar("H", bound=Hashable)
V = TypeVar("V")


def map_items(items: Iterable[T], fn: Callable[[T], R]) -> list[R]:
    """Get a list of fn applied to each item"""
    return [fn(item) for item in items]


def flat_map_items(items: Iterable[T], fn: Callable[[T], Iterable[R]]) -> list[R]:
    """Get the concatenation of the iterables produced by fn for each item"""
    return [result for item in items for result in fn(item)]


def filter_items(items: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    """Get the items for which predicate holds"""
    return [item for item in items if predicate(item)]


def dict_from_items(items: Iterable[H], value: V) -> dict[H, V]:
    """Get a dict mapping each distinct item to value, e.g. to build a lookup set
    from a list: dict_from_items(["apple", "banana"], True)"""
    return {item: value for item in items}
