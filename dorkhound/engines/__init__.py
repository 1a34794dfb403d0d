"""Search engine implementations.

Each engine subpackage registers itself with `dorkhound.registry` when it is
imported; importing `dorkhound.engines` alone registers nothing.

Available engines:
    - `google`: Google web search scraped from the HTML result page.
"""
