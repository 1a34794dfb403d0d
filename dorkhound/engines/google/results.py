"""Google result records picked out of the result page.

Page structure relied on:
    <div class="g">                      result container (outermost match)
      <a href="..."><h3>Title</h3></a>   link and title
      <div><span>Snippet</span></div>    description
    </div>

Every field is looked up lazily inside the container; a missing field gives
`""`, never an error.
"""

from __future__ import annotations

from dorkhound.engines.google.urls import filter_url
from dorkhound.markup import Element, Match

RESULT_CONTAINER = Match(name="div", attributes={"class": "g"})
TITLE = Match(name="h3", parent=Match(name="a"))
DESCRIPTION = Match(name="span", parent=Match(name="div"))
LINK = Match(name="a")


class GoogleResult:
    """One organic result, backed by its container element."""

    def __init__(self, element: Element):
        self.element = element

    def title(self) -> str:
        heading = self.element.find(TITLE)
        return heading.text() if heading is not None else ""

    def description(self) -> str:
        snippet = self.element.find(DESCRIPTION)
        return snippet.text() if snippet is not None else ""

    def url(self) -> str:
        link = self.element.find(LINK)
        if link is None:
            return ""
        return filter_url(link.attribute("href"))

    def to_dict(self) -> dict[str, str]:
        return {"url": self.url(), "title": self.title(), "description": self.description()}

    def __str__(self) -> str:
        return f"> {self.url()}\n{self.title()}\n{self.description()}\n"

    def __repr__(self) -> str:
        return f"<GoogleResult url={self.url()!r}>"
