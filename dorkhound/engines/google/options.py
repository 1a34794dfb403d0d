"""Command-line options for the Google engine.

Option groups:
    - Output: `-v` verbose request/response trace on stderr.
    - Request: `-t` timeout, `-H` headers, `-C` cookies, `-U` user agent.
    - Search: `-n` result count, `--safe`, `--start`, `--tld`, `--lang`,
      `--country`.
    - Query helpers: `--inurl`, `--intext`, `--filetype`, `--ext`, appended to
      the query as `inurl:TEXT` and so on.

Input validation behavior:
    - A missing query raises `UsageError`.
    - Malformed durations and integers raise `UsageError`.
    - `-H` and `-C` entries are split once on `:` / `=` and stripped. Entries
      without a separator are kept in the option lists but never sent.
"""

from __future__ import annotations

import argparse
import re
from collections.abc import Sequence
from dataclasses import dataclass, field

from dorkhound.config import Settings, get_settings
from dorkhound.errors import UsageError

_DURATION_PART = re.compile(r"(\d+(?:\.\d+)?)(ms|s|m|h)")
_DURATION_UNITS = {"ms": 0.001, "s": 1.0, "m": 60.0, "h": 3600.0}


@dataclass
class GoogleOptions:
    """Parsed options of one Google search."""

    query: str = ""

    verbose: bool = False

    cookies: list[list[str]] = field(default_factory=list)
    headers: list[list[str]] = field(default_factory=list)
    user_agent: str = ""
    timeout: float = 20.0

    start: int = 0
    tld: str = ".com"
    lang: str = ""
    num: int = 10
    safe: bool = False
    # Country or region to focus on; close to changing the tld, not identical.
    country: str = ""

    inurl: str = ""
    intext: str = ""
    filetype: str = ""
    ext: str = ""

    @property
    def cookie_pairs(self) -> list[tuple[str, str]]:
        return [(item[0], item[1]) for item in self.cookies if len(item) == 2]

    @property
    def header_pairs(self) -> list[tuple[str, str]]:
        return [(item[0], item[1]) for item in self.headers if len(item) == 2]


def parse_duration(value: str) -> float:
    """Convert `20s`, `1m30s`, `500ms`, `2h` or bare seconds to seconds.

    Raises:
        argparse.ArgumentTypeError: On anything else.
    """
    text = value.strip()
    try:
        return float(text)
    except ValueError:
        pass

    if not text or _DURATION_PART.sub("", text):
        raise argparse.ArgumentTypeError(f"invalid duration {value!r} (e.g. 10s, 1m, 1m30s)")

    return sum(float(amount) * _DURATION_UNITS[unit] for amount, unit in _DURATION_PART.findall(text))


def split_pair(value: str, separator: str) -> list[str]:
    """Split `value` once on `separator` and strip both parts."""
    return [part.strip() for part in value.split(separator, 1)]


class _OptionParser(argparse.ArgumentParser):
    """Argument parser that raises `UsageError` instead of exiting."""

    def error(self, message):
        raise UsageError(f"{self.prog}: {message}")


def build_parser(prog: str = "dorkhound google", settings: Settings | None = None) -> argparse.ArgumentParser:
    """Build the option parser; defaults come from `settings`."""
    settings = settings or get_settings()

    parser = _OptionParser(
        prog=prog,
        usage="%(prog)s [OPTIONS] QUERY",
        description="Searches in google search engine",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("query", nargs="*", help="search query")

    output = parser.add_argument_group("Output Options")
    output.add_argument("-v", "--verbose", action="store_true", help="set verbose")

    request = parser.add_argument_group("Request Options")
    request.add_argument(
        "-t", "--timeout",
        type=parse_duration,
        default=settings.timeout_seconds,
        metavar="DURATION",
        help="maximum time allowed for connection, e.g. 10s, 1m (default %(default)ss)",
    )
    request.add_argument(
        "-H", "--header",
        dest="headers",
        action="append",
        default=[],
        type=lambda value: split_pair(value, ":"),
        metavar="HEADER",
        help="custom header, repeatable: -H 'KEY1: VALUE1' -H 'KEY2: VALUE2'",
    )
    request.add_argument(
        "-C", "--cookie",
        dest="cookies",
        action="append",
        default=[],
        type=lambda value: split_pair(value, "="),
        metavar="COOKIE",
        help="cookie, repeatable: -C 'KEY=VALUE' (default: fetch cookies from google first)",
    )
    request.add_argument(
        "-U", "--user-agent",
        dest="user_agent",
        default=settings.user_agent,
        metavar="USER_AGENT",
        help="custom User-Agent header",
    )

    search = parser.add_argument_group("Search Options")
    search.add_argument("-n", "--num", type=int, default=10, metavar="NUMBER", help="number of results (default 10)")
    search.add_argument("--safe", action="store_true", help="safe search")
    search.add_argument("--start", type=int, default=0, metavar="NUMBER", help="start of results (default 0)")
    search.add_argument("--tld", default=".com", help="top level domain (default '.com')")
    search.add_argument("--lang", default="", metavar="LANGUAGE", help="language")
    search.add_argument("--country", default="", help="country or region to focus the search on")

    helpers = parser.add_argument_group("Query Helpers")
    helpers.add_argument("--inurl", default="", metavar="TEXT", help="... inurl:TEXT")
    helpers.add_argument("--intext", default="", metavar="TEXT", help="... intext:TEXT")
    helpers.add_argument("--filetype", default="", metavar="TEXT", help="... filetype:TEXT")
    helpers.add_argument("--ext", default="", metavar="TEXT", help="... ext:TEXT")

    return parser


def parse_options(argv: Sequence[str], settings: Settings | None = None) -> GoogleOptions:
    """Parse `argv` (engine arguments only) into `GoogleOptions`.

    Raises:
        UsageError: If arguments are malformed or the query is missing.
    """
    namespace = build_parser(settings=settings).parse_args(list(argv))

    query = " ".join(namespace.query).strip()
    if not query:
        raise UsageError("query is required. use 'dorkhound help google' to see information")

    return GoogleOptions(
        query=query,
        verbose=namespace.verbose,
        cookies=namespace.cookies,
        headers=namespace.headers,
        user_agent=namespace.user_agent,
        timeout=namespace.timeout,
        start=namespace.start,
        tld=namespace.tld,
        lang=namespace.lang,
        num=namespace.num,
        safe=namespace.safe,
        country=namespace.country,
        inurl=namespace.inurl,
        intext=namespace.intext,
        filetype=namespace.filetype,
        ext=namespace.ext,
    )
