import importlib
import os
from typing import TypeVar

T = TypeVar("T")


def import_from(qual_name: str):
    """Import a value from its fully qualified name.

    Args:
        qual_name: A fully qualified name in the format 'module.submodule.name'
                  e.g. 'grab.zero.DefaultZeroValues'

    Returns:
        The imported value (class, function, or variable)

    Example:
        >>> DefaultZeroValues = import_from('grab.zero.DefaultZeroValues')
        >>> zero_values = DefaultZeroValues()
    """
    parts = qual_name.split(".")
    module_name = ".".join(parts[:-1])
    if not module_name:
        raise ValueError(f"not_a_qualified_name:{qual_name!r}")
    module = importlib.import_module(module_name)
    return getattr(module, parts[-1])


def get_impl(key: str, base_type: type[T], default_type: type | None = None) -> type[T]:
    """Get the implementation of base_type named by the key environment variable,
    falling back to default_type when the variable is unset or empty."""
    value = os.getenv(key)
    if not value:
        if default_type is None:
            raise ValueError("no_default_type")
        assert issubclass(default_type, base_type)
        return default_type
    imported_type = import_from(value)
    assert issubclass(imported_type, base_type)
    return imported_type
