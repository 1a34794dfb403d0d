"""Google search engine package.

Importing this package registers the engine as `google` with
`dorkhound.registry`.

Module split:
    - `options`: command-line options and their parsing.
    - `urls`: result-page URL construction and result-link cleanup.
    - `results`: `GoogleResult` and the predicates that locate its fields.
    - `engine`: HTTP flow and response parsing.
"""

from dorkhound.engines.google.engine import VERSION, GoogleEngine
from dorkhound.engines.google.options import GoogleOptions
from dorkhound.engines.google.results import GoogleResult
from dorkhound.registry import register_engine

register_engine("google", GoogleEngine)

__all__ = ["VERSION", "GoogleEngine", "GoogleOptions", "GoogleResult"]
