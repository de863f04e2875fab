import copy
from dataclasses import dataclass
from typing import Generic, TypeVar

from grab.zero import zero_value

T = TypeVar("T")


@dataclass
class Ref(Generic[T]):
    """Reference to a value. An absent reference is None, which differs from a Ref
    holding the zero value of T."""

    value: T


def ref(o: T) -> Ref[T]:
    """Get a new reference to a shallow copy of the value given.

    The reference does not share its top level with o, so it can wrap function
    results such as ref(datetime.now(UTC)). Values which cannot be copied
    (generators, locks, open files...) are referenced as they are.
    """
    try:
        value = copy.copy(o)
    except (TypeError, copy.Error):
        value = o
    return Ref(value)


def deref(r: Ref[T] | None, value_type: type[T] | None = None) -> T | None:
    """Get the value of a reference, or the zero value of value_type if the
    reference is absent (None when no value_type is given)."""
    if r is None:
        return zero_value(value_type)
    return r.value
