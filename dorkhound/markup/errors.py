"""Error taxonomy for the markup query engine.

Failure model:
    - `ParseError` is raised only by `dorkhound.markup.document.parse` when the
      input cannot be read at all. Merely invalid markup is repaired by the
      tree builder and never raises.
    - `InvalidOperation` marks a structural contract violation by the caller
      (detaching a root, appending a node that is still attached). It is meant
      to surface immediately; it is never retried.
    - Absence (no match, no attribute, no text) is not an error anywhere in the
      engine.
"""


class MarkupError(Exception):
    """Base class for markup engine errors."""


class ParseError(MarkupError):
    """Raised when raw input cannot be turned into a document tree."""


class InvalidOperation(MarkupError):
    """Raised when a tree mutation would corrupt the tree."""
