"""Document facade and parse entry point.

Architectural role:
    `parse()` hands raw markup to the BeautifulSoup tree builder and wraps the
    resulting tree in a `Document`. The document owns the tree; every `Element`
    it returns is a handle into that tree.

Parsing model:
    - Tree construction is done by bs4 with the `html5lib` builder unless
      configured otherwise, so the tree follows HTML5 rules: implied
      `html`/`head`/`body`, `<p>` closed by block elements, misnested markup
      repaired. Broken markup is repaired, never rejected.
    - Whitespace-only text is kept exactly as written, at every depth
      including the top level.
    - Duplicate attributes keep their first occurrence.
    - `class` is kept as one string; the query engine does its own token split.
    - Bytes input is decoded with `UnicodeDammit` before tree building.

Failure behavior:
    `ParseError` is raised for input that is not text or bytes, for bytes
    that cannot be decoded, for an unknown or uninstalled tree builder, and
    when the builder rejects the input outright. It is the only error
    `parse()` raises.

Lifecycle:
    There is no re-parse in place. New content means a new `Document`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from typing import Any

from bs4 import BeautifulSoup, FeatureNotFound, ParserRejectedMarkup
from bs4.dammit import UnicodeDammit

from dorkhound.config import DEFAULT_MARKUP_PARSER, get_settings
from dorkhound.markup.element import Element, find_all, find_first, for_each_match, iter_matches
from dorkhound.markup.errors import ParseError
from dorkhound.markup.match import Match
from dorkhound.markup.nodes import NodeKind, children_of, kind_of, walk

logger = logging.getLogger(__name__)

HTML_PARSER = "html.parser"


class _EveryTag:
    """Tag-name set containing every name, the document root included.

    bs4 collapses whitespace-only strings unless a tag on the open-tag stack
    is in the builder's `preserve_whitespace_tags`.
    """

    def __contains__(self, name: object) -> bool:
        return True


PRESERVE_ALL_WHITESPACE = _EveryTag()


class Document:
    """Owner of a parsed markup tree."""

    def __init__(self, soup: BeautifulSoup, parser: str = DEFAULT_MARKUP_PARSER):
        self._soup = soup
        self.parser = parser

    @property
    def node(self) -> BeautifulSoup:
        """Document root node."""
        return self._soup

    @property
    def root(self) -> Element | None:
        """First top-level element (usually `<html>`), or `None` for text-only input."""
        for child in children_of(self._soup):
            if kind_of(child) is NodeKind.ELEMENT:
                return Element(child)
        return None

    def __repr__(self) -> str:
        return f"<Document parser={self.parser!r}>"

    # -----------------------------------------------------
    # Selection rooted at the document
    # -----------------------------------------------------

    def iter_matches(self, match: Match | None) -> Iterator[Element]:
        return iter_matches(self._soup, match)

    def find(self, match: Match | None) -> Element | None:
        """Return the first outermost match in the document, or `None`."""
        return find_first(self._soup, match)

    def find_all(self, match: Match | None) -> list[Element]:
        """Return every outermost match in the document."""
        return find_all(self._soup, match)

    def for_each_match(self, match: Match | None, visitor: Callable[[Element], Any]) -> int:
        """Call `visitor` for every outermost match; returns the match count."""
        return for_each_match(self._soup, match, visitor)

    # -----------------------------------------------------
    # Content and construction
    # -----------------------------------------------------

    def text(self) -> str:
        return "".join(str(node) for node in walk(self._soup) if kind_of(node) is NodeKind.TEXT)

    def to_markup(self) -> str:
        """Render the whole document, including any mutation made through facades."""
        return self._soup.decode()

    def create_element(
        self,
        name: str,
        attributes: Mapping[str, str] | None = None,
        text: str | None = None,
    ) -> Element:
        """Build a free element for use with `Element.append_child`.

        Args:
            name: Tag name.
            attributes: Attributes in insertion order.
            text: Optional text content.

        Returns:
            Facade on a parentless element without siblings.
        """
        tag = self._soup.new_tag(name, attrs=dict(attributes or {}))
        if text:
            tag.string = text
        return Element(tag)


def parse(markup: str | bytes, parser: str | None = None) -> Document:
    """Parse raw markup into a `Document`.

    Args:
        markup: Markup text or undecoded bytes.
        parser: bs4 tree builder name. Defaults to `DORKHOUND_MARKUP_PARSER`
            (`html5lib` unless configured).

    Returns:
        The parsed document.

    Raises:
        ParseError: If the input cannot be read at all.
    """
    if not isinstance(markup, (str, bytes, bytearray)):
        raise ParseError(f"cannot parse {type(markup).__name__}: expected str or bytes")

    if isinstance(markup, (bytes, bytearray)):
        markup = _decode(bytes(markup))

    parser = parser or get_settings().markup_parser
    options: dict[str, Any] = {
        "multi_valued_attributes": None,
        "preserve_whitespace_tags": PRESERVE_ALL_WHITESPACE,
    }
    if parser == HTML_PARSER:
        options["on_duplicate_attribute"] = "ignore"

    try:
        soup = BeautifulSoup(markup, parser, **options)
    except FeatureNotFound as exc:
        raise ParseError(f"markup parser {parser!r} is not available") from exc
    except ParserRejectedMarkup as exc:
        raise ParseError(f"markup rejected by {parser!r}: {exc}") from exc

    logger.debug("Parsed markup of length %d with %s", len(markup), parser)
    return Document(soup, parser)


def _decode(data: bytes) -> str:
    dammit = UnicodeDammit(data, is_html=True)
    if dammit.unicode_markup is None:
        raise ParseError("cannot decode markup: no candidate encoding fits")
    logger.debug("Decoded %d bytes as %s", len(data), dammit.original_encoding)
    return dammit.unicode_markup
