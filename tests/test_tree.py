from __future__ import annotations

import unittest

from bs4 import BeautifulSoup

from watchsync.parsing.tree import any_class_predicate, class_predicate, has_class, locate


class TestLocate(unittest.TestCase):
    def setUp(self) -> None:
        self.soup = BeautifulSoup(
            "<div id='root' class='outer'>"
            "<section><p class='target' id='first'>one</p></section>"
            "<p class='target' id='second'>two</p>"
            "<div class='pagesFromTo2' id='decoy'>x</div>"
            "<div class='pagesFromTo' id='marker'>1—50 из 237</div>"
            "</div>",
            "html.parser",
        )

    def test_returns_first_match_in_pre_order(self) -> None:
        found = locate(self.soup, class_predicate("target"))

        self.assertIsNotNone(found)
        self.assertEqual(found["id"], "first")

    def test_checks_root_itself(self) -> None:
        root = self.soup.find("div", id="root")

        self.assertIs(locate(root, class_predicate("outer")), root)

    def test_returns_none_when_nothing_matches(self) -> None:
        self.assertIsNone(locate(self.soup, class_predicate("missing")))

    def test_tag_filter(self) -> None:
        found = locate(self.soup, class_predicate("target", tag="section"))

        self.assertIsNone(found)

    def test_token_mode_skips_longer_class_names(self) -> None:
        found = locate(self.soup, class_predicate("pagesFromTo", tag="div"))

        self.assertEqual(found["id"], "marker")

    def test_substring_mode_matches_longer_class_names(self) -> None:
        found = locate(self.soup, class_predicate("pagesFromTo", tag="div", mode="substring"))

        self.assertEqual(found["id"], "decoy")

    def test_is_deterministic(self) -> None:
        predicate = class_predicate("target")

        self.assertIs(locate(self.soup, predicate), locate(self.soup, predicate))


class TestClassPredicates(unittest.TestCase):
    def test_multi_token_class_name_requires_all_tokens(self) -> None:
        soup = BeautifulSoup("<div class='item even'></div><div class='item'></div>", "html.parser")
        striped, plain = soup.find_all("div")

        self.assertTrue(has_class(striped, "item even"))
        self.assertFalse(has_class(plain, "item even"))
        self.assertTrue(has_class(plain, "item"))

    def test_any_class_predicate_accepts_either_spelling(self) -> None:
        soup = BeautifulSoup(
            "<div class='item'></div><div class='item even'></div><div class='banner'></div>",
            "html.parser",
        )
        predicate = any_class_predicate(("item", "item even"))

        self.assertEqual([predicate(node) for node in soup.find_all("div")], [True, True, False])

    def test_text_nodes_never_match(self) -> None:
        soup = BeautifulSoup("<div class='item'>text</div>", "html.parser")
        text_node = soup.div.string

        self.assertFalse(class_predicate("item")(text_node))

    def test_unknown_mode_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            class_predicate("item", mode="fuzzy")


if __name__ == "__main__":
    unittest.main()
