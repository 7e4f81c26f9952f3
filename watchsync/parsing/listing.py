"""
Watched-listing extraction.

Each entry of the listing container is expected to look like:

    <div class="item">
      <div class="info">
        <div class="nameRus"><a href="/film/535341/">Title (2010)</a></div>
      </div>
    </div>
"""

from __future__ import annotations

from collections.abc import Iterator

from bs4 import BeautifulSoup, Tag

from watchsync.config.models import ListingMarkup
from watchsync.parsing.tree import NodePredicate, any_class_predicate, class_predicate, locate
from watchsync.types import Record

ID_SEGMENT = "id"
ID_SEGMENT_INDEX = 2


def find_listing(soup: BeautifulSoup, markup: ListingMarkup) -> Tag | None:
    return locate(
        soup,
        class_predicate(markup.container_class, tag="div", mode=markup.class_match),
    )


def extract_listing(container: Tag, markup: ListingMarkup | None = None) -> list[Record]:
    """
    Extract records from the container's direct entry children, in document order.

    Entries missing the info/name/anchor path are skipped.
    """

    markup = markup or ListingMarkup()
    is_entry = any_class_predicate(markup.entry_classes, mode=markup.class_match)
    is_info = class_predicate(markup.info_class, mode=markup.class_match)
    is_name = class_predicate(markup.name_class, mode=markup.class_match)

    records: list[Record] = []
    for child in container.children:
        if not is_entry(child):
            continue
        record = _extract_entry(child, is_info=is_info, is_name=is_name)
        if record is not None:
            records.append(record)
    return records


def extract_id(href: str) -> str | None:
    """
    Return the item identifier from a link target.

    `/film/535341/` -> `535341` (third `/`-delimited segment). When the path
    spells the identifier out, as in `/film/type/1/id/535341/`, the segment
    after `id` is used instead.
    """

    parts = href.split("/")
    if ID_SEGMENT in parts:
        position = parts.index(ID_SEGMENT) + 1
        if position < len(parts) and parts[position]:
            return parts[position]
    if len(parts) > ID_SEGMENT_INDEX and parts[ID_SEGMENT_INDEX]:
        return parts[ID_SEGMENT_INDEX]
    return None


def _extract_entry(
    entry: Tag,
    *,
    is_info: NodePredicate,
    is_name: NodePredicate,
) -> Record | None:
    for info in _matching_children(entry, is_info):
        for name_block in _matching_children(info, is_name):
            for anchor in name_block.find_all("a", recursive=False):
                href = anchor.get("href")
                if href is None:
                    continue
                record_id = extract_id(href)
                if record_id is None:
                    return None
                return Record(id=record_id, name=anchor.get_text(strip=True))
    return None


def _matching_children(node: Tag, predicate: NodePredicate) -> Iterator[Tag]:
    for child in node.children:
        if predicate(child):
            yield child
