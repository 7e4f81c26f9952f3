"""
Depth-first node lookup over BeautifulSoup trees.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from bs4.element import PageElement, Tag

from watchsync.config.models import CLASS_MATCH_MODES

NodePredicate = Callable[[PageElement], bool]


def locate(root: Tag, predicate: NodePredicate) -> Tag | None:
    """
    Return the first node, in pre-order, for which `predicate` holds.

    `root` itself is checked first. Returns None when the tree is exhausted.
    """

    if predicate(root):
        return root
    for node in root.descendants:
        if predicate(node):
            return node
    return None


def class_tokens(node: PageElement) -> list[str]:
    if not isinstance(node, Tag):
        return []
    raw = node.get("class")
    if raw is None:
        return []
    if isinstance(raw, str):
        return raw.split()
    return list(raw)


def has_class(node: PageElement, class_name: str, *, mode: str = "token") -> bool:
    """
    Check a node's class attribute against `class_name`.

    `token` mode requires every token of `class_name` to be one of the node's
    class tokens. `substring` mode matches `class_name` anywhere in the whole
    attribute value, so `pagesFromTo` also matches `pagesFromTo2`; it exists
    for markup that only works with that looser rule.
    """

    tokens = class_tokens(node)
    if not tokens:
        return False
    if mode == "substring":
        return class_name in " ".join(tokens)
    wanted = class_name.split()
    return bool(wanted) and all(token in tokens for token in wanted)


def class_predicate(
    class_name: str,
    *,
    tag: str | None = None,
    mode: str = "token",
) -> NodePredicate:
    """
    Build a predicate matching elements that carry `class_name`.
    """

    return any_class_predicate((class_name,), tag=tag, mode=mode)


def any_class_predicate(
    class_names: Iterable[str],
    *,
    tag: str | None = None,
    mode: str = "token",
) -> NodePredicate:
    """
    Build a predicate matching elements that carry any of `class_names`.
    """

    if mode not in CLASS_MATCH_MODES:
        allowed = ", ".join(CLASS_MATCH_MODES)
        raise ValueError(f"Unknown class match mode '{mode}'. Allowed modes: {allowed}.")
    names = tuple(class_names)

    def predicate(node: PageElement) -> bool:
        if not isinstance(node, Tag):
            return False
        if tag is not None and node.name != tag:
            return False
        return any(has_class(node, name, mode=mode) for name in names)

    return predicate
