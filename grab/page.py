from dataclasses import dataclass
from typing import Generic, TypeVar


T = TypeVar("T")
K = TypeVar("K")


@dataclass
class Page(Generic[T, K]):
    """Page of items. A next_page_id which is None or the zero value of its type
    means there are no more pages."""

    items: list[T]
    next_page_id: K | None = None
