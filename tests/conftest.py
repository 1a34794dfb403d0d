"""Shared markup samples for the test suite."""

import pytest

from dorkhound.config import Settings

RESULT_CONTAINER_HTML = (
    '<div class="g"><a href="http://x.test/p"><h3>Title</h3></a>'
    "<div><span>Desc text</span></div></div>"
)

RESULT_PAGE_HTML = """<!DOCTYPE html>
<html>
<head><title>site:example.org - Google Search</title></head>
<body>
<div id="search">
  <div class="g tF2Cxc">
    <a href="https://example.org/first"><br><h3 class="LC20lb">First result</h3></a>
    <div class="VwiC3b"><span>First snippet</span></div>
  </div>
  <div class="g">
    <a href="/url?q=https://example.org/second&amp;sa=U"><h3>Second result</h3></a>
    <div><span>Second snippet</span></div>
  </div>
  <div class="g">
    <a href="https://translate.google.com/translate?u=https://example.org/third&amp;hl=en"><h3>Third</h3></a>
  </div>
  <div class="g">
    <a href="/search?q=related"><h3>Related searches</h3></a>
  </div>
  <div class="gx">
    <a href="https://example.org/not-a-result"><h3>Not a result</h3></a>
  </div>
</div>
</body>
</html>
"""


@pytest.fixture
def settings():
    return Settings(retry_attempts=1, backoff_seconds=0.0)


@pytest.fixture
def result_container_html():
    return RESULT_CONTAINER_HTML


@pytest.fixture
def result_page_html():
    return RESULT_PAGE_HTML
