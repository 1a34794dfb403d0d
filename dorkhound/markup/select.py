"""Depth-first selection of nodes that satisfy a `Match`.

Traversal strategy:
    Pre-order walk from `root` over the child lists, siblings in document order.
    Only element nodes are tested; other kinds are walked through.

Outermost-match rule:
    When a node matches, its children are not visited. A container that
    matches hides any matching container nested inside it, so the result
    contains outermost matches only. `root` itself is a candidate.

Short-circuit:
    `iter_match_nodes` is lazy, so taking the first item stops the walk at the
    first match.

Mutation:
    Changing the tree while a lazy iteration is in progress is undefined.
    Materialize the results first (`find_all_nodes`) when the caller intends
    to detach or append.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from bs4.element import PageElement

from dorkhound.markup.match import Match
from dorkhound.markup.nodes import NodeKind, children_of, kind_of

logger = logging.getLogger(__name__)


def iter_match_nodes(root: PageElement, match: Match | None) -> Iterator[PageElement]:
    """Yield outermost element nodes under `root` (inclusive) that satisfy `match`.

    Args:
        root: Node to start from.
        match: Predicate to apply. `None` yields nothing.

    Yields:
        Matching element nodes in document order.
    """
    if match is None:
        return
    if match.is_empty:
        logger.debug("Empty Match selects every outermost element under %r", getattr(root, "name", root))

    stack: list[PageElement] = [root]
    while stack:
        node = stack.pop()
        if kind_of(node) is NodeKind.ELEMENT and match.matches(node):
            yield node
            continue
        stack.extend(reversed(children_of(node)))


def find_first_node(root: PageElement, match: Match | None) -> PageElement | None:
    """Return the first outermost match, or `None`."""
    return next(iter_match_nodes(root, match), None)


def find_all_nodes(root: PageElement, match: Match | None) -> list[PageElement]:
    """Return every outermost match as a list."""
    return list(iter_match_nodes(root, match))
