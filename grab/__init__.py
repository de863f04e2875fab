"""
Grab - generic helpers for optional references, zero values, conditionals,
item transformations and aggregation of paginated results.
"""

# Conditionals and references
from grab.conditional import if_
from grab.ref import Ref, ref, deref

# Zero values
from grab.zero import (
    ZeroValues,
    DefaultZeroValues,
    get_zero_values,
    set_zero_values,
    register_zero_value,
    zero_value,
    is_zero,
    first_non_zero,
)

# Pagination
from grab.page import Page
from grab.pagination import (
    iter_pages,
    all_pages,
    count_items,
    iter_pages_async,
    all_pages_async,
    count_items_async,
)

# Items
from grab.items import map_items, flat_map_items, filter_items, dict_from_items

from grab.grab_error import GrabError, InvalidPageError

__all__ = [
    # Conditionals and references
    'if_',
    'Ref',
    'ref',
    'deref',

    # Zero values
    'ZeroValues',
    'DefaultZeroValues',
    'get_zero_values',
    'set_zero_values',
    'register_zero_value',
    'zero_value',
    'is_zero',
    'first_non_zero',

    # Pagination
    'Page',
    'iter_pages',
    'all_pages',
    'count_items',
    'iter_pages_async',
    'all_pages_async',
    'count_items_async',

    # Items
    'map_items',
    'flat_map_items',
    'filter_items',
    'dict_from_items',

    # Errors
    'GrabError',
    'InvalidPageError',
]
