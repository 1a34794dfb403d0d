"""
Command-line adapter for dorkhound.

Architectural role:
- Resolves engine names through `dorkhound.registry`.
- Delegates option parsing, searching and result extraction to the engine.
- Prints result URLs, one per line.

Commands:
- `dorkhound`                        print usage
- `dorkhound list`                   print registered engines
- `dorkhound version [ENGINE]`       print program or engine version
- `dorkhound help [ENGINE]`          print usage or engine help
- `dorkhound ENGINE [OPTIONS] QUERY` run a search

Request lifecycle (engine command):
1. Resolve the engine; unknown names print a hint and exit 1.
2. `start(argv)` parses engine options.
3. `search()` performs the HTTP request.
4. `parse_response()` extracts results; each non-empty URL is printed.

Error handling strategy:
- Option, search and parsing failures print `error...: <message>` and exit 1.
- Nothing is retried here; engines own their retry policy.

Side effects:
- Configures root logging (`DORKHOUND_LOG_LEVEL`, DEBUG with engine `-v`).
- Writes results to stdout, diagnostics to stdout/stderr.
"""

from __future__ import annotations

import logging
import platform
import sys
from collections.abc import Sequence

import httpx

from dorkhound import __version__
from dorkhound import registry
from dorkhound.config import get_settings
from dorkhound.engines import google as _google  # noqa: F401 - registers the google engine
from dorkhound.errors import SearchError, UnknownEngineError, UsageError
from dorkhound.markup import ParseError

logger = logging.getLogger(__name__)

PROG = "dorkhound"

VERSION_MESSAGE = f"{PROG} v{__version__} / Python %s"

USAGE_MESSAGE = (
    f"{PROG} searches dork queries in search engines\n\n"
    "Usage:\n"
    f"\t{PROG} [list | version [engineName] | help [engineName]]\n"
    f"\t{PROG} engineName [OPTIONS]\n\n"
    "*Commands:\n"
    "\tversion [engineName]   print version, or engine version if pass engineName, and exit\n"
    "\tlist                   print list of engines and exit\n"
    "\thelp [engineName]      print this help, or print engine help if pass engineName, and exit\n"
)


# =========================================================
# OUTPUT SETUP
# =========================================================

def _configure_stdout() -> None:
    """Best-effort UTF-8 stdout so result titles never crash printing."""
    if hasattr(sys.stdout, "reconfigure"):
        try:
            sys.stdout.reconfigure(encoding="utf-8", errors="ignore")
        except (OSError, ValueError):
            pass


def _configure_logging() -> None:
    logging.basicConfig(
        level=get_settings().log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )


# =========================================================
# ENGINE RESOLUTION
# =========================================================

def _resolve(name: str) -> registry.EngineHandle | None:
    """Return the engine handle or print a hint when `name` is unknown."""
    try:
        return registry.use_without_start(name)
    except UnknownEngineError:
        print(f"Engine {name!r} not registered! use `{PROG} list` to see engines.")
        return None


# =========================================================
# COMMANDS
# =========================================================

def cmd_version(args: Sequence[str]) -> int:
    if args:
        handle = _resolve(args[0])
        if handle is None:
            return 1
        print(f"{handle.name} version: {handle.version()}")
        return 0

    print(VERSION_MESSAGE % platform.python_version())
    return 0


def cmd_list() -> int:
    print("Registered engines:")
    for name in registry.engine_names():
        print(f"\t{name}")
    return 0


def cmd_help(args: Sequence[str]) -> int:
    if args:
        handle = _resolve(args[0])
        if handle is None:
            return 1
        print(handle.usage())
        return 0

    print(USAGE_MESSAGE)
    return 0


def cmd_search(name: str, args: Sequence[str]) -> int:
    """Run one search with engine `name` and print result URLs.

    Error handling strategy:
    - `UsageError` from option parsing -> `error: ...`
    - transport/status/provider failures -> `error on search: ...`
    - unreadable response body -> `error on parsing: ...`
    """
    handle = _resolve(name)
    if handle is None:
        return 1

    try:
        handle.start(args)
    except UsageError as e:
        print(f"error: {e}")
        return 1

    options = getattr(handle.engine, "options", None)
    if getattr(options, "verbose", False):
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        response = handle.search()
    except (SearchError, httpx.HTTPError) as e:
        logger.debug("Search with %s failed", name, exc_info=True)
        print(f"error on search: {e}")
        return 1

    try:
        results = handle.parse_response(response)
    except ParseError as e:
        print(f"error on parsing: {e}")
        return 1

    for result in results:
        url = result.url()
        if url:
            print(url)

    return 0


# =========================================================
# MAIN
# =========================================================

def main(argv: Sequence[str] | None = None) -> int:
    """Dispatch `argv` (without the program name) and return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)

    _configure_stdout()
    _configure_logging()

    if not args:
        print(USAGE_MESSAGE)
        return 0

    command, rest = args[0], args[1:]

    if command == "version":
        return cmd_version(rest)
    if command == "list":
        return cmd_list()
    if command == "help":
        return cmd_help(rest)

    return cmd_search(command, rest)


if __name__ == "__main__":
    sys.exit(main())
