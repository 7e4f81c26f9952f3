"""
Document-tree parsing layer for watched-listing pages.
"""

from watchsync.parsing.listing import extract_id, extract_listing, find_listing
from watchsync.parsing.paging import inspect_paging, page_count, paging_state, read_paging_state
from watchsync.parsing.tree import any_class_predicate, class_predicate, has_class, locate

__all__ = [
    "any_class_predicate",
    "class_predicate",
    "extract_id",
    "extract_listing",
    "find_listing",
    "has_class",
    "inspect_paging",
    "locate",
    "page_count",
    "paging_state",
    "read_paging_state",
]
