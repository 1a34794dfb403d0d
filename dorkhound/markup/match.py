"""Structural predicates for element selection.

Architectural role:
    `Match` describes what an element must look like. It is built in code (there
    is no selector string syntax) and evaluated against one node at a time by
    `dorkhound.markup.select`.

Matching model:
    All configured fields must hold (logical AND); an unset field always holds.

    - `name`: exact tag name; non-element nodes never satisfy it.
    - `attributes`: every key must be present. An empty required value only
      checks presence. For `class` the required value must be one of the
      whitespace-separated tokens of the actual value; every other key needs
      exact string equality.
    - `parent`: nested predicate for the node's parent.
    - `first_child`: nested predicate for the node's first child, whatever its
      kind.

    Example:
        Match(
            name="h3",
            parent=Match(name="a", parent=Match(name="div", attributes={"class": "g"})),
        )

Determinism:
    Pure function of the predicate and the node. Recursion depth equals the
    nesting depth of the predicate, not the depth of the tree.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields

from bs4.element import PageElement

from dorkhound.markup.nodes import NodeKind, first_child_of, get_attribute, kind_of

CLASS_ATTRIBUTE = "class"


@dataclass(frozen=True)
class Match:
    """Compound structural predicate.

    Attributes:
        name: Required tag name (for example `div`, `a`, `h3`).
        attributes: Required attributes. `{"href": ""}` only requires presence;
            `{"class": "g"}` requires the `g` class token.
        parent: Predicate the parent node must satisfy.
        first_child: Predicate the first child node must satisfy.
    """

    name: str | None = None
    attributes: Mapping[str, str] | None = None
    parent: Match | None = None
    first_child: Match | None = None

    def __post_init__(self):
        if self.attributes is not None:
            # own copy, never the caller's dict
            object.__setattr__(self, "attributes", dict(self.attributes))

    def __hash__(self) -> int:
        attributes = None if self.attributes is None else frozenset(self.attributes.items())
        return hash((self.name, attributes, self.parent, self.first_child))

    @property
    def is_empty(self) -> bool:
        """True when no field is set, i.e. the predicate matches every node."""
        return all(getattr(self, f.name) is None for f in fields(self))

    def matches(self, node: PageElement | None) -> bool:
        """Return whether `node` satisfies every configured constraint."""
        if node is None:
            return False

        if self.name is not None:
            if kind_of(node) is not NodeKind.ELEMENT or node.name != self.name:
                return False

        if self.attributes is not None:
            for key, required in self.attributes.items():
                actual = get_attribute(node, key)
                if actual is None:
                    return False
                if required and not _attribute_value_matches(key, required, actual):
                    return False

        if self.parent is not None:
            if node.parent is None or not self.parent.matches(node.parent):
                return False

        if self.first_child is not None:
            child = first_child_of(node)
            if child is None or not self.first_child.matches(child):
                return False

        return True


def _attribute_value_matches(key: str, required: str, actual: str) -> bool:
    if key == CLASS_ATTRIBUTE:
        return required in actual.split()
    return required == actual
