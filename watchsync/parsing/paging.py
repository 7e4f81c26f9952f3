"""
Pagination marker parsing.

The marker reads like `1—200 из 1234`: the item range shown on the current
page, then the total number of items.
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup

from watchsync.config.models import ListingMarkup
from watchsync.errors import PagingParseError
from watchsync.parsing.tree import class_predicate, locate
from watchsync.types import PagingState

TOTAL_SEPARATOR = re.compile(r"\s+из\s+")
RANGE_DASH = re.compile(r"[—–]")
_DIGITS = re.compile(r"\d+")


def inspect_paging(marker_text: str) -> tuple[int, int]:
    """
    Return `(total_items, page_size)` parsed from pagination marker text.

    Raises PagingParseError when the text does not have the expected shape.
    """

    parts = TOTAL_SEPARATOR.split(marker_text.strip())
    if len(parts) < 2:
        raise PagingParseError(f"Pagination marker has no total: {marker_text!r}")

    range_parts = RANGE_DASH.split(parts[0])
    if len(range_parts) < 2:
        raise PagingParseError(f"Pagination marker has no item range: {marker_text!r}")

    first = _parse_count(range_parts[0], marker_text)
    last = _parse_count(range_parts[1], marker_text)
    total_items = _parse_count(parts[1], marker_text)

    page_size = last - first + 1
    if page_size <= 0:
        raise PagingParseError(f"Pagination marker range is empty: {marker_text!r}")
    return total_items, page_size


def page_count(total_items: int, page_size: int) -> int:
    if page_size <= 0:
        raise ValueError("page_size must be positive.")
    return -(-total_items // page_size)


def paging_state(total_items: int, page_size: int) -> PagingState:
    return PagingState(
        total_items=total_items,
        page_size=page_size,
        page_count=page_count(total_items, page_size),
    )


def read_paging_state(soup: BeautifulSoup, markup: ListingMarkup) -> PagingState:
    """
    Locate the pagination marker in a parsed page and derive the listing geometry.
    """

    marker = locate(
        soup,
        class_predicate(markup.paging_marker_class, tag="div", mode=markup.class_match),
    )
    if marker is None:
        raise PagingParseError("Pagination marker not found.")
    total_items, page_size = inspect_paging(marker.get_text(" ", strip=True))
    return paging_state(total_items, page_size)


def _parse_count(raw: str, marker_text: str) -> int:
    value = raw.strip()
    if not _DIGITS.fullmatch(value):
        raise PagingParseError(f"Non-numeric pagination value {value!r} in {marker_text!r}")
    return int(value)
