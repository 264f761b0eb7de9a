"""
Fake Playwright driver for fetcher and API tests.
"""
import pytest


class FakePage:
    def __init__(self, html, goto_error=None):
        self.html = html
        self.goto_error = goto_error
        self.goto_calls = []
        self.headers = {}
        self.waited_ms = []

    async def set_extra_http_headers(self, headers):
        self.headers.update(headers)

    async def goto(self, url, wait_until=None, timeout=None):
        self.goto_calls.append({"url": url, "wait_until": wait_until, "timeout": timeout})
        if self.goto_error is not None:
            raise self.goto_error

    async def wait_for_timeout(self, ms):
        self.waited_ms.append(ms)

    async def content(self):
        return self.html


class FakeBrowser:
    def __init__(self, page):
        self.page = page
        self.page_kwargs = None
        self.closed = False

    async def new_page(self, **kwargs):
        self.page_kwargs = kwargs
        return self.page

    async def close(self):
        self.closed = True


class FakeChromium:
    def __init__(self, browser, launch_error=None):
        self.browser = browser
        self.launch_error = launch_error
        self.launch_kwargs = None

    async def launch(self, **kwargs):
        self.launch_kwargs = kwargs
        if self.launch_error is not None:
            raise self.launch_error
        return self.browser


class FakePlaywright:
    """Stands in for ``async_playwright()``: an async context manager exposing ``chromium``."""

    def __init__(self, html="<html><body></body></html>", goto_error=None, launch_error=None):
        self.page = FakePage(html, goto_error=goto_error)
        self.browser = FakeBrowser(self.page)
        self.chromium = FakeChromium(self.browser, launch_error=launch_error)
        self.entered = False
        self.exited = False

    def __call__(self):
        return self

    async def __aenter__(self):
        self.entered = True
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self.exited = True
        return False


@pytest.fixture
def fake_playwright():
    """Factory for fake drivers; pass the result as ``playwright_factory``."""
    return FakePlaywright
