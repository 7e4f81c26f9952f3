from __future__ import annotations

import unittest

from bs4 import BeautifulSoup
from listing_pages import entry, listing_page

from watchsync.config import ListingMarkup
from watchsync.parsing.listing import extract_id, extract_listing, find_listing
from watchsync.types import Record


class TestExtractListing(unittest.TestCase):
    def _container(self, html: str):
        soup = BeautifulSoup(html, "html.parser")
        container = find_listing(soup, ListingMarkup())
        self.assertIsNotNone(container)
        return container

    def test_extracts_accepted_entries_in_document_order(self) -> None:
        container = self._container(
            listing_page(
                entry("535341", "Inception (2010)"),
                entry("326", "The Shawshank Redemption (1994)", css="item even"),
                entry("448", "Forrest Gump (1994)"),
            )
        )

        records = extract_listing(container)

        self.assertEqual(
            records,
            [
                Record(id="535341", name="Inception (2010)"),
                Record(id="326", name="The Shawshank Redemption (1994)"),
                Record(id="448", name="Forrest Gump (1994)"),
            ],
        )

    def test_rejected_children_do_not_count(self) -> None:
        container = self._container(
            listing_page(
                entry("1", "Accepted one"),
                entry("2", "Banner", css="banner"),
                entry("3", "Accepted two", css="item even"),
                entry("4", "Ad block", css="adv"),
            )
        )

        records = extract_listing(container)

        self.assertEqual([record.id for record in records], ["1", "3"])

    def test_entries_missing_the_name_path_are_skipped(self) -> None:
        container = self._container(
            listing_page(
                '<div class="item"><div class="info"><span>no name block</span></div></div>',
                '<div class="item"><div class="info"><div class="nameRus">no link</div></div></div>',
                '<div class="item"><div class="nameRus"><a href="/film/9/">No info block</a></div></div>',
                entry("10", "Kept"),
            )
        )

        records = extract_listing(container)

        self.assertEqual(records, [Record(id="10", name="Kept")])

    def test_nested_entries_are_not_direct_children(self) -> None:
        container = self._container(
            listing_page(f'<div class="wrapper">{entry("5", "Nested")}</div>')
        )

        self.assertEqual(extract_listing(container), [])

    def test_anchor_without_href_falls_through_to_next_anchor(self) -> None:
        container = self._container(
            listing_page(
                '<div class="item"><div class="info"><div class="nameRus">'
                '<a name="anchor">skip</a><a href="/film/77/">  Spaced Title  </a>'
                "</div></div></div>"
            )
        )

        self.assertEqual(extract_listing(container), [Record(id="77", name="Spaced Title")])

    def test_find_listing_returns_none_without_container(self) -> None:
        soup = BeautifulSoup("<div class='navigator'></div>", "html.parser")

        self.assertIsNone(find_listing(soup, ListingMarkup()))


class TestExtractId(unittest.TestCase):
    def test_third_segment(self) -> None:
        self.assertEqual(extract_id("/film/535341/"), "535341")

    def test_explicit_id_segment(self) -> None:
        self.assertEqual(extract_id("/film/type/1/id/535341/somepath/"), "535341")

    def test_href_without_identifier(self) -> None:
        self.assertIsNone(extract_id("/film"))
        self.assertIsNone(extract_id(""))


if __name__ == "__main__":
    unittest.main()
