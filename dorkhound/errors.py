"""Errors raised by the search layer (registry, engines, CLI).

Failure model:
    - `UsageError`: engine options are missing or malformed.
    - `SearchBlockedError`: the provider refused the request (HTTP 403).
    - `UnknownEngineError`: no engine registered under the requested name.
    - `SearchError`: base class, also raised when transient HTTP failures
      outlast the retry budget.
    Transport errors from `httpx` are not wrapped; they propagate unchanged.
"""


class SearchError(RuntimeError):
    """Base class for search-layer failures."""


class UsageError(SearchError):
    """Raised when engine options cannot be parsed or are incomplete."""


class SearchBlockedError(SearchError):
    """Raised when a provider blocks the request."""


class UnknownEngineError(SearchError, LookupError):
    """Raised when an engine name is not registered."""
