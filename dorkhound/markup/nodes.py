"""Node tree adapter over the BeautifulSoup element model.

Architectural role:
    The tree itself is produced by the parse collaborator (`bs4`). This module is
    the only place that knows about bs4 node classes; predicate evaluation,
    traversal and the facades go through the helpers below.

Node kinds:
    Kind is derived from the bs4 class on every call and never stored. The set
    is closed:
    - `DOCUMENT`: the `BeautifulSoup` object at the root.
    - `ELEMENT`: any other `Tag`.
    - `COMMENT`: `Comment` strings.
    - `DOCTYPE`: doctype, declaration and processing-instruction strings.
    - `TEXT`: every other `NavigableString`, including CDATA and script/style
      content.

Links:
    bs4 keeps plain bidirectional references (`parent`, `contents`). Parent
    links are only read here, never used to manage lifetime.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum

from bs4 import BeautifulSoup
from bs4.element import (
    Comment,
    Declaration,
    Doctype,
    NavigableString,
    PageElement,
    ProcessingInstruction,
    Tag,
)


class NodeKind(Enum):
    """Closed set of node kinds seen by the query engine."""

    DOCUMENT = "document"
    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"
    DOCTYPE = "doctype"


def kind_of(node: PageElement) -> NodeKind:
    """Return the kind of a bs4 node.

    Raises:
        TypeError: If `node` is not a bs4 page element.
    """
    if isinstance(node, BeautifulSoup):
        return NodeKind.DOCUMENT
    if isinstance(node, Tag):
        return NodeKind.ELEMENT
    if isinstance(node, Comment):
        return NodeKind.COMMENT
    if isinstance(node, (Doctype, Declaration, ProcessingInstruction)):
        return NodeKind.DOCTYPE
    if isinstance(node, NavigableString):
        return NodeKind.TEXT
    raise TypeError(f"not a markup node: {type(node).__name__}")


def children_of(node: PageElement) -> list[PageElement]:
    """Return a snapshot of the child list (empty for leaf kinds)."""
    if isinstance(node, Tag):
        return list(node.contents)
    return []


def first_child_of(node: PageElement) -> PageElement | None:
    if isinstance(node, Tag) and node.contents:
        return node.contents[0]
    return None


def has_siblings(node: PageElement) -> bool:
    return node.previous_sibling is not None or node.next_sibling is not None


def attribute_pairs(node: PageElement) -> list[tuple[str, str]]:
    """Return element attributes as ordered `(key, value)` pairs.

    Multi-valued attribute values (lists) are joined with single spaces so
    callers always see strings. Non-element nodes have no attributes.
    """
    if kind_of(node) is not NodeKind.ELEMENT:
        return []

    pairs: list[tuple[str, str]] = []
    for key, value in node.attrs.items():
        if isinstance(value, (list, tuple)):
            value = " ".join(value)
        pairs.append((key, "" if value is None else str(value)))
    return pairs


def get_attribute(node: PageElement, key: str) -> str | None:
    """Return the first value stored under `key`, or `None` when absent."""
    for name, value in attribute_pairs(node):
        if name == key:
            return value
    return None


def walk(root: PageElement) -> Iterator[PageElement]:
    """Yield `root` and its descendants in document (pre-) order.

    Uses an explicit stack so deeply nested documents do not hit the
    interpreter recursion limit.
    """
    stack: list[PageElement] = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(children_of(node)))


def is_ancestor(candidate: PageElement, node: PageElement) -> bool:
    """Return whether `candidate` is `node` itself or one of its ancestors."""
    current: PageElement | None = node
    while current is not None:
        if current is candidate:
            return True
        current = current.parent
    return False
