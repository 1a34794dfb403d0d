"""Markup query engine.

Architectural role:
    Finds elements in a parsed markup tree with programmatic structural
    predicates, reads their text and attributes, and applies simple structural
    mutations. Search engines feed raw response bodies through `parse()` and
    pick result fields out with nested `Match` values.

Module split:
    - `nodes`: node-kind adapter over the bs4 tree.
    - `match`: the `Match` predicate.
    - `select`: depth-first, outermost-first node selection.
    - `element`: `Element` facade and facade-level selection helpers.
    - `document`: `Document` facade and `parse()`.
    - `errors`: `ParseError`, `InvalidOperation`.
"""

from dorkhound.markup.document import Document, parse
from dorkhound.markup.element import Element, find_all, find_first, for_each_match, iter_matches
from dorkhound.markup.errors import InvalidOperation, MarkupError, ParseError
from dorkhound.markup.match import Match
from dorkhound.markup.nodes import NodeKind

__all__ = [
    "Document",
    "Element",
    "InvalidOperation",
    "MarkupError",
    "Match",
    "NodeKind",
    "ParseError",
    "find_all",
    "find_first",
    "for_each_match",
    "iter_matches",
    "parse",
]
