"""Search and dietary filtering over the merged collection."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from expo_stalls.models.stall import StallRecord


class CategoryFilter(StrEnum):
    ALL = "all"
    VEG = "veg"
    EGG = "egg"
    NON_VEG = "non-veg"


def _matches_text(stall: StallRecord, needle: str) -> bool:
    if not needle:
        return True
    haystacks = [stall.name, stall.topic, stall.short_description]
    if stall.presenter:
        haystacks.append(stall.presenter)
    return any(needle in text.lower() for text in haystacks)


def _matches_category(stall: StallRecord, category: CategoryFilter) -> bool:
    return category == CategoryFilter.ALL or stall.dietary.value == category.value


def filter_stalls(
    stalls: Sequence[StallRecord],
    query: str = "",
    category: CategoryFilter | str = CategoryFilter.ALL,
) -> list[StallRecord]:
    """Return the stalls matching both the text query and the dietary category.

    The query is a case-insensitive substring test against name, topic, short
    description and presenter. Results keep the input order.

    Raises ``ValueError`` for an unknown category.
    """
    category = CategoryFilter(category)
    needle = query.strip().lower()
    return [
        stall
        for stall in stalls
        if _matches_text(stall, needle) and _matches_category(stall, category)
    ]


def find_stall(stalls: Sequence[StallRecord], stall_id: int) -> StallRecord | None:
    """Return the stall with the given id, or None."""
    return next((stall for stall in stalls if stall.id == stall_id), None)
