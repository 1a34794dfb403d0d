"""Google search engine.

Architectural role:
    Implements the `SearchEngine` contract for Google's HTML result page:
    option parsing, request construction, and result extraction through the
    markup query engine.

Request flow (`asearch`):
    1. Normalize the tld and build the result-page URL.
    2. Without user cookies, GET the Google home page on the same client so
       its cookie jar is primed; the final home-page URL becomes `Referer`.
       Failures of this step are logged and ignored.
    3. GET the result page with browser-like headers, user headers and user
       cookies.
    4. HTTP 403 -> `SearchBlockedError`; 429/5xx are retried with exponential
       backoff; other error statuses raise `httpx.HTTPStatusError`.

Result extraction (`parse_response` / `parse_html`):
    Every outermost `<div class="g">` becomes one `GoogleResult`. Response
    bodies are passed as bytes so the parser sees the original encoding;
    `httpx` has already undone any `Content-Encoding` such as gzip.

Determinism:
    URL and header construction are deterministic for fixed options. Results
    depend on Google's live ranking and markup.

Concurrency:
    `search()` wraps `asearch()` with `asyncio.run`; call `asearch()` directly
    from code that already runs an event loop.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Sequence

import httpx

from dorkhound.config import Settings, get_settings
from dorkhound.engines.google.options import GoogleOptions, build_parser, parse_options
from dorkhound.engines.google.results import RESULT_CONTAINER, GoogleResult
from dorkhound.engines.google.urls import HOME_URL, build_search_url, normalize_tld
from dorkhound.errors import SearchBlockedError, SearchError
from dorkhound.markup import parse

logger = logging.getLogger(__name__)

VERSION = "1.1.4"

_RETRY_STATUSES = (429, 500, 502, 503, 504)


class GoogleEngine:
    """Google web search scraped from the HTML result page."""

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the engine with default options.

        Args:
            settings: Runtime settings; the process-wide settings when `None`.
            transport: Optional `httpx` transport, used by tests to serve
                canned responses.
        """
        self.settings = settings or get_settings()
        self._transport = transport
        self.options = GoogleOptions(
            user_agent=self.settings.user_agent,
            timeout=self.settings.timeout_seconds,
        )

    # =========================================================
    # ENGINE METADATA
    # =========================================================

    def start(self, argv: Sequence[str]) -> None:
        """Parse engine options from `argv`.

        Raises:
            UsageError: If options are malformed or the query is missing.
        """
        self.options = parse_options(argv, settings=self.settings)

    def version(self) -> str:
        return VERSION

    def description(self) -> str:
        return "Searches in google search engine"

    def usage(self) -> str:
        return build_parser(settings=self.settings).format_help()

    # =========================================================
    # SEARCH
    # =========================================================

    def search(self) -> httpx.Response:
        """Synchronous wrapper for `asearch`."""
        return asyncio.run(self.asearch())

    async def asearch(self) -> httpx.Response:
        """Run the configured search.

        Returns:
            The result-page response; its body has been read.

        Raises:
            SearchBlockedError: If Google answers 403.
            SearchError: If transient failures outlast the retry budget.
            httpx.HTTPStatusError: For other error statuses.
            httpx.RequestError: For transport failures after retries.
        """
        options = self.options
        tld = normalize_tld(options.tld)
        url = build_search_url(
            options.query,
            tld=tld,
            lang=options.lang,
            country=options.country,
            inurl=options.inurl,
            intext=options.intext,
            filetype=options.filetype,
            ext=options.ext,
            num=options.num,
            start=options.start,
            safe=options.safe,
        )

        async with httpx.AsyncClient(
            timeout=options.timeout,
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            headers = httpx.Headers({"User-Agent": options.user_agent})

            cookie_pairs = options.cookie_pairs
            if not cookie_pairs:
                referer = await self._prime_cookies(client, tld, headers)
                if referer:
                    headers["Referer"] = referer

            headers["DNT"] = "1"
            headers["Accept"] = "text/html"
            headers["Alt-Used"] = "www.google.com"
            headers["Host"] = f"www.google{tld}"
            for key, value in options.header_pairs:
                headers[key] = value

            for name, value in cookie_pairs:
                client.cookies.set(name, value)

            if options.verbose:
                _trace(f"|  {url}\n")
                for key, value in headers.raw:
                    _trace(f"|> {key.decode('latin-1')}: {value.decode('latin-1')}")

            response = await self._get_with_retry(client, url, headers)

        if options.verbose:
            _trace("")
            for key, value in response.headers.raw:
                _trace(f"|< {key.decode('latin-1')}: {value.decode('latin-1')}")
            _trace("")

        return response

    async def _prime_cookies(self, client: httpx.AsyncClient, tld: str, headers: httpx.Headers) -> str:
        """Visit the home page so the client's cookie jar holds Google's cookies.

        Returns:
            Final home-page URL for the `Referer` header, or `""` on failure.
        """
        home = HOME_URL.format(tld=tld)
        try:
            response = await client.get(home, headers=headers)
        except httpx.RequestError as exc:
            logger.warning("Could not fetch cookies from %s: %s", home, exc)
            return ""

        logger.debug("Fetched %d cookies from %s", len(client.cookies), home)
        return str(response.url)

    async def _get_with_retry(self, client: httpx.AsyncClient, url: str, headers: httpx.Headers) -> httpx.Response:
        """GET `url`, retrying transient statuses and transport errors.

        Retry policy:
            Statuses 429/500/502/503/504 and `httpx.RequestError` are retried up
            to `retry_attempts` times with exponential backoff.
        """
        attempts = max(1, self.settings.retry_attempts)

        for attempt in range(attempts):
            try:
                response = await client.get(url, headers=headers)
            except httpx.RequestError:
                if attempt < attempts - 1:
                    logger.debug("Request to %s failed, retrying (attempt %d)", url, attempt + 1)
                    await asyncio.sleep(self._backoff(attempt))
                    continue
                raise

            if response.status_code == 403:
                raise SearchBlockedError("google blocked. ( returns status code 403 )")

            if response.status_code in _RETRY_STATUSES:
                if attempt < attempts - 1:
                    logger.debug("Got status %d from %s, retrying", response.status_code, url)
                    await asyncio.sleep(self._backoff(attempt))
                    continue
                raise SearchError(f"HTTP retry exhausted: status={response.status_code} url={url}")

            response.raise_for_status()
            return response

        raise SearchError(f"Request failed without error details for url={url}")

    def _backoff(self, attempt: int) -> float:
        return self.settings.backoff_seconds * (2 ** attempt)

    # =========================================================
    # RESULT PARSING
    # =========================================================

    def parse_response(self, response: httpx.Response) -> list[GoogleResult]:
        """Extract results from a response returned by `search()`.

        Raises:
            ParseError: If the body cannot be read as markup.
        """
        logger.debug(
            "Parsing %d bytes (content-encoding=%s)",
            len(response.content),
            response.headers.get("Content-Encoding", "identity"),
        )
        return self.parse_html(response.content)

    def parse_html(self, markup: str | bytes) -> list[GoogleResult]:
        """Extract results from a saved or captured result page.

        Raises:
            ParseError: If the markup cannot be read.
        """
        document = parse(markup, parser=self.settings.markup_parser)
        return [GoogleResult(element) for element in document.find_all(RESULT_CONTAINER)]


def _trace(line: str) -> None:
    print(line, file=sys.stderr)
