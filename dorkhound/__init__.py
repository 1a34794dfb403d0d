"""dorkhound: dork queries against web search engines.

Architectural role:
    - `markup`: document tree query engine used to pick results out of HTML.
    - `engines`: search engine implementations (`google`).
    - `registry`: engine name -> factory mapping.
    - `config`: environment-driven settings.
    - `api`: command-line adapter.
"""

__version__ = "1.1.3"
