"""URL construction and result-link cleanup for Google.

Query parameters:
    - `q`: query plus query-helper suffixes (` inurl:X`, ` intext:X`,
      ` filetype:X`, ` ext:X`).
    - `num`: requested count plus 3.
    - `safe`: `on` / `off`.
    - `lr`: `lang_<lang>` when a language is set.
    - `cr`: country when set.
    - `start`: result offset when non-zero.
    Parameters are percent-encoded once and sorted by key, so the same options
    always give the same URL.
"""

from __future__ import annotations

from urllib.parse import parse_qs, urlencode, urlparse

SEARCH_URL = "https://www.google{tld}/search"
HOME_URL = "https://www.google{tld}/"

EXTRA_RESULTS = 3


def normalize_tld(tld: str) -> str:
    """Return `tld` with a leading dot; empty means `.com`."""
    tld = (tld or "").strip()
    if not tld:
        return ".com"
    if not tld.startswith("."):
        return "." + tld
    return tld


def build_query(
    query: str,
    inurl: str = "",
    intext: str = "",
    filetype: str = "",
    ext: str = "",
) -> str:
    """Append query-helper operators to `query`."""
    for operator, value in (("inurl", inurl), ("intext", intext), ("filetype", filetype), ("ext", ext)):
        if value:
            query += f" {operator}:{value}"
    return query


def build_search_url(
    query: str,
    tld: str = ".com",
    lang: str = "",
    country: str = "",
    inurl: str = "",
    intext: str = "",
    filetype: str = "",
    ext: str = "",
    num: int = 10,
    start: int = 0,
    safe: bool = False,
) -> str:
    """Build the result-page URL for one search.

    Returns:
        Absolute URL with sorted, encoded query parameters.
    """
    params: dict[str, str] = {
        "safe": "on" if safe else "off",
        "num": str(num + EXTRA_RESULTS),
        "q": build_query(query, inurl, intext, filetype, ext),
    }
    if lang:
        params["lr"] = f"lang_{lang}"
    if country:
        params["cr"] = country
    if start:
        params["start"] = str(start)

    encoded = urlencode(sorted(params.items()))
    return f"{SEARCH_URL.format(tld=normalize_tld(tld))}?{encoded}"


def filter_url(href: str) -> str:
    """Turn a result-link `href` into the URL the user wants.

    Rules:
        - Empty `href` -> `""`.
        - Links back to `/search` (related searches, pagination) -> `""`.
        - Google Translate proxy links -> the `u` target.
        - `/url?q=...` redirect links -> the `q` (or `url`) target.
        - Anything else is returned unchanged, as is an unparseable `href`.
    """
    if not href:
        return ""

    try:
        parsed = urlparse(href)
    except ValueError:
        return href

    if parsed.path == "/search":
        return ""

    params = parse_qs(parsed.query)

    if "translate.google.com" in parsed.netloc:
        return params.get("u", [""])[0]

    if parsed.path == "/url" and _is_google_host(parsed.netloc):
        for key in ("q", "url"):
            if params.get(key):
                return params[key][0]

    return href


def _is_google_host(netloc: str) -> bool:
    # relative links on the result page have no host
    return not netloc or netloc.startswith(("www.google.", "google."))
