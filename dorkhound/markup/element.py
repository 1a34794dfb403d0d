"""Element facade and facade-level selection helpers.

Architectural role:
    `Element` is a handle on one element node of a document tree. It exposes the
    read operations callers need on a matched node (text, attributes, nested
    selection, rendering) and the two structural mutations (`detach`,
    `append_child`). It never owns the node; the `Document` that produced it
    owns the tree.

Lifetime:
    Detached subtrees stay alive for as long as a facade refers to them, so a
    facade never dangles. After `detach()` it simply refers to the root of a
    subtree that no longer hangs off the document.

Mutation contract:
    - `detach()` requires a parent.
    - `append_child(other)` requires `other` to be free (no parent, no
      siblings) and not to contain this element.
    Violations raise `InvalidOperation` before the tree is touched.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from bs4.element import PageElement

from dorkhound.markup.errors import InvalidOperation
from dorkhound.markup.match import Match
from dorkhound.markup.nodes import (
    NodeKind,
    attribute_pairs,
    children_of,
    get_attribute,
    has_siblings,
    is_ancestor,
    kind_of,
    walk,
)
from dorkhound.markup.select import iter_match_nodes


class Element:
    """Non-owning handle on an element node."""

    __slots__ = ("_node",)

    def __init__(self, node: PageElement):
        if kind_of(node) is not NodeKind.ELEMENT:
            raise TypeError(f"Element expects an element node, got {kind_of(node).value}")
        self._node = node

    # -----------------------------------------------------
    # Identity
    # -----------------------------------------------------

    @property
    def node(self) -> PageElement:
        """Underlying bs4 node."""
        return self._node

    @property
    def name(self) -> str:
        return self._node.name

    @property
    def kind(self) -> NodeKind:
        """Always `NodeKind.ELEMENT`; detached elements included."""
        return kind_of(self._node)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return self._node is other._node

    def __hash__(self) -> int:
        return id(self._node)

    def __repr__(self) -> str:
        attrs = "".join(f" {key}={value!r}" for key, value in attribute_pairs(self._node))
        return f"<Element {self.name}{attrs}>"

    # -----------------------------------------------------
    # Content
    # -----------------------------------------------------

    def text(self) -> str:
        """Concatenate every text descendant in document order.

        No whitespace normalization: newlines and indentation of the source
        text nodes are kept as they are. Returns `""` when there is no text.
        """
        return "".join(str(node) for node in walk(self._node) if kind_of(node) is NodeKind.TEXT)

    def attribute(self, key: str) -> str:
        """Return the value of the first `key` attribute.

        Absent and empty attributes both return `""`. Use `has_attribute` when
        the difference matters.
        """
        value = get_attribute(self._node, key)
        return value if value is not None else ""

    def has_attribute(self, key: str) -> bool:
        return get_attribute(self._node, key) is not None

    @property
    def attributes(self) -> list[tuple[str, str]]:
        """Attributes as ordered `(key, value)` pairs."""
        return attribute_pairs(self._node)

    def to_markup(self) -> str:
        """Render this subtree back to markup, reflecting any mutation."""
        return self._node.decode()

    # -----------------------------------------------------
    # Navigation
    # -----------------------------------------------------

    @property
    def parent(self) -> Element | None:
        """Enclosing element, or `None` at the top level or when detached."""
        parent = self._node.parent
        if parent is None or kind_of(parent) is not NodeKind.ELEMENT:
            return None
        return Element(parent)

    def ancestors(self) -> Iterator[Element]:
        """Yield enclosing elements from the nearest outwards."""
        current = self.parent
        while current is not None:
            yield current
            current = current.parent

    def children(self) -> list[Element]:
        """Element children in document order (text and comments skipped)."""
        return [Element(child) for child in children_of(self._node) if kind_of(child) is NodeKind.ELEMENT]

    # -----------------------------------------------------
    # Selection rooted at this element
    # -----------------------------------------------------

    def iter_matches(self, match: Match | None) -> Iterator[Element]:
        return iter_matches(self, match)

    def find(self, match: Match | None) -> Element | None:
        """Return the first outermost match in this subtree, or `None`."""
        return find_first(self, match)

    def find_all(self, match: Match | None) -> list[Element]:
        """Return every outermost match in this subtree."""
        return find_all(self, match)

    def for_each_match(self, match: Match | None, visitor: Callable[[Element], Any]) -> int:
        return for_each_match(self, match, visitor)

    # -----------------------------------------------------
    # Mutation
    # -----------------------------------------------------

    def detach(self) -> Element:
        """Remove this element from its parent's child list.

        Returns:
            `self`, now the root of a free subtree.

        Raises:
            InvalidOperation: If the element has no parent.
        """
        if self._node.parent is None:
            raise InvalidOperation(f"cannot detach <{self.name}>: it has no parent")
        self._node.extract()
        return self

    def append_child(self, other: Element) -> Element:
        """Append `other` as the last child of this element.

        Args:
            other: A free element, either freshly created or detached.

        Returns:
            `other`.

        Raises:
            InvalidOperation: If `other` is still attached or has siblings, or
                if appending it would create a cycle.
        """
        if not isinstance(other, Element):
            raise InvalidOperation(f"can only append elements, got {type(other).__name__}")

        child = other.node
        if child.parent is not None:
            raise InvalidOperation(f"cannot append <{other.name}>: it already has a parent")
        if has_siblings(child):
            raise InvalidOperation(f"cannot append <{other.name}>: it still has siblings")
        if is_ancestor(child, self._node):
            raise InvalidOperation(f"cannot append <{other.name}> inside itself")

        self._node.append(child)
        return other


# =========================================================
# FACADE-LEVEL SELECTION
# Accepts a bs4 node or anything exposing `.node` (Element, Document).
# =========================================================

def _root_node(root: Any) -> PageElement:
    if isinstance(root, PageElement):
        return root
    return root.node


def iter_matches(root: Any, match: Match | None) -> Iterator[Element]:
    """Lazily yield outermost matches under `root` as facades."""
    for node in iter_match_nodes(_root_node(root), match):
        yield Element(node)


def find_first(root: Any, match: Match | None) -> Element | None:
    """Return the first outermost match under `root`; the walk stops there."""
    return next(iter_matches(root, match), None)


def find_all(root: Any, match: Match | None) -> list[Element]:
    """Return every outermost match under `root` in document order."""
    return list(iter_matches(root, match))


def for_each_match(root: Any, match: Match | None, visitor: Callable[[Element], Any]) -> int:
    """Call `visitor` for every outermost match under `root`.

    Matches are collected before the first call, so the visitor may detach the
    element it receives.

    Returns:
        Number of elements visited.
    """
    matched = find_all(root, match)
    for element in matched:
        visitor(element)
    return len(matched)
