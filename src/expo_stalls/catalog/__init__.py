"""Catalog loading, merging, caching and querying."""

from expo_stalls.catalog.cache import SessionCache
from expo_stalls.catalog.loader import CatalogLoader
from expo_stalls.catalog.merge import merge_edits
from expo_stalls.catalog.query import CategoryFilter, filter_stalls, find_stall

__all__ = [
    "CatalogLoader",
    "CategoryFilter",
    "SessionCache",
    "filter_stalls",
    "find_stall",
    "merge_edits",
]
