"""Base service class for domain services."""

import math
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    pass


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives.

    ``round()`` uses banker's rounding (``round(2.5) == 2``); ratings need
    ``2.5 -> 3``.
    """
    return math.floor(value + 0.5)


def paginate(items: list, limit: int) -> tuple[list, bool]:
    """Split a ``limit + 1`` fetch into the page and a has-more flag."""
    has_more = len(items) > limit
    return (items[:limit] if has_more else items), has_more


T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """One page of a cursor-paginated listing."""

    items: list[T]
    next_cursor: str | None
    has_more: bool


def page_after_cursor(
    items: list[T], cursor: str | None, limit: int, key: Callable[[T], str]
) -> Page[T]:
    """Slice an already-sorted list into the page following ``cursor``.

    An unknown cursor starts from the beginning.
    """
    start = 0
    if cursor:
        for index, item in enumerate(items):
            if key(item) == cursor:
                start = index + 1
                break

    window, has_more = paginate(items[start : start + limit + 1], limit)
    next_cursor = key(window[-1]) if has_more and window else None
    return Page(items=window, next_cursor=next_cursor, has_more=has_more)
