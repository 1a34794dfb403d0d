"""Engine registry.

Architectural role:
    Maps engine names to zero-argument factories. Engine packages register
    themselves on import (see `dorkhound.engines`); the CLI resolves names
    through `use` / `use_without_start`.

Naming rules:
    `version`, `help` and `list` are CLI commands and can never be engine
    names. Registering an existing name replaces the previous factory.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

import httpx

from dorkhound.engines.base import SearchEngine, SearchResult
from dorkhound.errors import UnknownEngineError

logger = logging.getLogger(__name__)

RESERVED_NAMES = frozenset({"version", "help", "list"})

_engines: dict[str, Callable[[], SearchEngine]] = {}


def register_engine(name: str, factory: Callable[[], SearchEngine]) -> None:
    """Register `factory` under `name`.

    Raises:
        ValueError: If `name` is empty or reserved for a CLI command.
    """
    if not name or name in RESERVED_NAMES:
        raise ValueError(
            f"{name!r} cannot be an engine name; reserved names: {', '.join(sorted(RESERVED_NAMES))}"
        )
    if name in _engines:
        logger.warning("Engine %r registered twice; replacing previous factory", name)
    _engines[name] = factory


def unregister_engine(name: str) -> None:
    _engines.pop(name, None)


def engine_names() -> list[str]:
    """Return registered engine names, sorted."""
    return sorted(_engines)


class EngineHandle:
    """A constructed engine together with the name it was registered under."""

    def __init__(self, name: str, engine: SearchEngine):
        self.name = name
        self.engine = engine

    def start(self, argv: Sequence[str]) -> None:
        self.engine.start(argv)

    def version(self) -> str:
        return self.engine.version()

    def description(self) -> str:
        return self.engine.description()

    def usage(self) -> str:
        return self.engine.usage()

    def search(self) -> httpx.Response:
        return self.engine.search()

    async def asearch(self) -> httpx.Response:
        return await self.engine.asearch()

    def parse_response(self, response: httpx.Response) -> list[SearchResult]:
        return self.engine.parse_response(response)

    def parse_html(self, markup: str | bytes) -> list[SearchResult]:
        return self.engine.parse_html(markup)

    def __str__(self) -> str:
        return f"API( {self.name} {self.version()} | {self.description()} )"


def use_without_start(name: str) -> EngineHandle:
    """Construct the engine registered as `name` without parsing options.

    Raises:
        UnknownEngineError: If nothing is registered under `name`.
    """
    factory = _engines.get(name)
    if factory is None:
        raise UnknownEngineError(f"unknown engine {name!r} (is its package imported?)")
    return EngineHandle(name, factory())


def use(name: str, argv: Sequence[str]) -> EngineHandle:
    """Construct the engine registered as `name` and start it with `argv`.

    Raises:
        UnknownEngineError: If nothing is registered under `name`.
        UsageError: If the engine rejects `argv`.
    """
    handle = use_without_start(name)
    handle.start(argv)
    return handle
