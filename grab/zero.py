"""
Zero values: the value a type takes when nothing has been supplied for it
(0, "", False, empty containers, None for absent references...).

Resolution is pluggable: the active ZeroValues strategy is loaded from the
GRAB_ZERO_VALUES environment variable and defaults to DefaultZeroValues.
"""

import copy
import dataclasses
import logging
import types
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Annotated, Any, TypeVar, Union, get_args, get_origin, get_type_hints

from pydantic import BaseModel

from grab.constants import GRAB_ZERO_VALUES
from grab.grab_error import GrabError
from grab.util import get_impl

T = TypeVar("T")
_LOGGER = logging.getLogger(__name__)


class ZeroValues(ABC):
    """Strategy for resolving the zero value of a type"""

    @abstractmethod
    def get_zero_value(self, value_type: Any) -> Any:
        """Get the zero value of the type given

        Args:
            value_type: A class or typing construct (list[int], Optional[str]...)

        Returns:
            The zero value, or None if the type has no zero value other than absence
        """

    def is_zero(self, value: Any) -> bool:
        """Check whether the value given is None or equal to the zero value of its type.

        Values whose comparison with the zero value fails are not zero.
        """
        if value is None:
            return True
        try:
            return bool(value == self.get_zero_value(type(value)))
        except Exception:
            _LOGGER.debug("zero_comparison_failed:%s", type(value).__qualname__, exc_info=True)
            return False


@dataclass
class DefaultZeroValues(ZeroValues):
    """
    Resolve zero values from explicit registrations, then by building pydantic models
    and dataclasses from the zero values of their required fields, then by calling the
    type without arguments.

    A type whose constructor raises has no zero value (None). Constructors run on every
    lookup, so register a zero value for types whose construction has side effects.
    A required field referring back to a type already being built gets None.
    """

    zero_values: dict[type, Any] = field(default_factory=dict)
    _building: set[type] = field(default_factory=set, init=False, repr=False, compare=False)

    def register(self, value_type: type[T], zero: T) -> None:
        """Register the zero value for a type (and its subclasses)"""
        self.zero_values[value_type] = zero

    def get_zero_value(self, value_type: Any) -> Any:
        if value_type is None or value_type is Any or isinstance(value_type, TypeVar):
            return None

        origin = get_origin(value_type)
        if origin is Annotated:
            return self.get_zero_value(get_args(value_type)[0])
        if origin is Union or origin is types.UnionType:
            return None
        if origin is not None:
            value_type = origin

        if not isinstance(value_type, type) or value_type is types.NoneType:
            return None

        for base in value_type.__mro__:
            if base in self.zero_values:
                zero = self.zero_values[base]
                try:
                    return copy.copy(zero)
                except (TypeError, copy.Error):
                    return zero

        # A required field referring back to a type being built has no zero value
        if value_type in self._building:
            return None

        if issubclass(value_type, BaseModel) or dataclasses.is_dataclass(value_type):
            self._building.add(value_type)
            try:
                if issubclass(value_type, BaseModel):
                    return self._get_model_zero_value(value_type)
                return self._get_dataclass_zero_value(value_type)
            finally:
                self._building.discard(value_type)

        try:
            return value_type()
        except Exception:
            _LOGGER.debug("no_zero_value_for_type:%s", value_type.__qualname__)
            return None

    def _get_model_zero_value(self, model_type: type[BaseModel]) -> BaseModel | None:
        values = {
            name: self.get_zero_value(info.annotation)
            for name, info in model_type.model_fields.items()
            if info.is_required()
        }
        try:
            return model_type.model_construct(**values)
        except Exception:
            _LOGGER.debug("no_zero_value_for_type:%s", model_type.__qualname__)
            return None

    def _get_dataclass_zero_value(self, dataclass_type: type) -> Any:
        try:
            type_hints = get_type_hints(dataclass_type)
        except NameError:
            type_hints = {}
        kwargs = {}
        for dataclass_field in dataclasses.fields(dataclass_type):
            if not dataclass_field.init:
                continue
            if (
                dataclass_field.default is not dataclasses.MISSING
                or dataclass_field.default_factory is not dataclasses.MISSING
            ):
                continue
            field_type = type_hints.get(dataclass_field.name, dataclass_field.type)
            kwargs[dataclass_field.name] = self.get_zero_value(field_type)
        try:
            return dataclass_type(**kwargs)
        except Exception:
            _LOGGER.debug("no_zero_value_for_type:%s", dataclass_type.__qualname__)
            return None


_zero_values: ZeroValues | None = None


def get_zero_values() -> ZeroValues:
    global _zero_values
    if _zero_values is None:
        zero_values_type = get_impl(GRAB_ZERO_VALUES, ZeroValues, DefaultZeroValues)
        _zero_values = zero_values_type()
    return _zero_values


def set_zero_values(zero_values: ZeroValues | None):
    """Replace the active strategy. Passing None reloads it from the environment on next use."""
    global _zero_values
    _zero_values = zero_values


def register_zero_value(value_type: type[T], zero: T) -> None:
    zero_values = get_zero_values()
    if not isinstance(zero_values, DefaultZeroValues):
        raise GrabError(f"zero_values_not_registrable:{type(zero_values).__qualname__}")
    zero_values.register(value_type, zero)


def zero_value(value_type: type[T] | None = None) -> T | None:
    """Get the zero value of the type given (None when no type is given)"""
    return get_zero_values().get_zero_value(value_type)


def is_zero(value: Any) -> bool:
    """Check whether value is None or equal to the zero value of its type.

    Example:
        >>> is_zero(0)
        True
        >>> is_zero("hello")
        False
    """
    return get_zero_values().is_zero(value)


def first_non_zero(*elements: T, value_type: type[T] | None = None) -> T | None:
    """Get the first element which is not a zero value, scanning left to right.

    Useful for precedence chains such as an explicit override, then an environment
    default, then a hardcoded fallback.

    Args:
        elements: Candidate values
        value_type: Type whose zero value is returned when every element is zero.
            Defaults to the type of the last element.

    Returns:
        The first non zero element, otherwise the zero value (None when there are no
        elements and no value_type)

    Example:
        >>> first_non_zero("", "selected", "")
        'selected'
    """
    zero_values = get_zero_values()
    for element in elements:
        if not zero_values.is_zero(element):
            return element
    if value_type is None and elements:
        value_type = type(elements[-1])
    return zero_values.get_zero_value(value_type)
