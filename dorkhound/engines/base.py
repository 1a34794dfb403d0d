"""Contracts shared by search engines.

Architectural role:
    Defines the minimal interface the registry and the CLI rely on. Concrete
    engines (for example `dorkhound.engines.google`) implement it structurally;
    no base class is required.

Engine lifecycle:
    1. Constructed by the registered factory (no arguments).
    2. `start(argv)` parses engine options from command-line arguments.
    3. `search()` / `asearch()` performs the HTTP request.
    4. `parse_response(response)` turns the body into result objects.
    `parse_html(markup)` skips steps 2-3 for saved or captured pages.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

import httpx


class SearchResult(Protocol):
    """One search hit."""

    def title(self) -> str:
        """Return the result title."""
        ...

    def description(self) -> str:
        """Return the result snippet."""
        ...

    def url(self) -> str:
        """Return the target URL."""
        ...


class SearchEngine(Protocol):
    """Interface implemented by every registered engine."""

    def start(self, argv: Sequence[str]) -> None:
        """Parse engine options from command-line arguments."""
        ...

    def version(self) -> str:
        ...

    def description(self) -> str:
        ...

    def usage(self) -> str:
        """Return the engine help text."""
        ...

    def search(self) -> httpx.Response:
        """Run the configured search and return the raw response."""
        ...

    async def asearch(self) -> httpx.Response:
        ...

    def parse_response(self, response: httpx.Response) -> list[SearchResult]:
        """Parse a response returned by `search()`."""
        ...

    def parse_html(self, markup: str | bytes) -> list[SearchResult]:
        """Parse a result page that was obtained some other way."""
        ...
