"""Tests for the rendering session wrapper, using a fake browser page."""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager

import pytest
from playwright.async_api import Error as PlaywrightError

from olympics_scraper import config
from olympics_scraper.scraper import playwright_driver
from olympics_scraper.scraper.errors import RenderError
from olympics_scraper.scraper.models import FetchRequest


class FakePage:
    def __init__(self, html="<body><div id='ready'></div></body>", *, hang=False, goto_error=None):
        self.html = html
        self.hang = hang
        self.goto_error = goto_error
        self.visited = []
        self.waited_for = []
        self.timeouts = []

    def set_default_timeout(self, timeout):
        self.timeouts.append(timeout)

    def set_default_navigation_timeout(self, timeout):
        self.timeouts.append(timeout)

    async def goto(self, url, wait_until=None):
        if self.goto_error is not None:
            raise self.goto_error
        self.visited.append(url)

    async def wait_for_selector(self, selector, state=None):
        self.waited_for.append(selector)
        if self.hang:
            await asyncio.sleep(60)

    async def eval_on_selector(self, selector, expression):
        return self.html


class FakeSessions:
    """Session factory that counts how many sessions were opened and released."""

    def __init__(self, page):
        self.page = page
        self.opened = 0
        self.closed = 0

    @asynccontextmanager
    async def __call__(self):
        self.opened += 1
        try:
            yield self.page
        finally:
            self.closed += 1


def _fetch(req, sessions):
    return asyncio.run(playwright_driver.fetch_rendered(req, session_factory=sessions))


def test_fetch_rendered_returns_markup():
    page = FakePage("<body>done</body>")
    sessions = FakeSessions(page)
    req = FetchRequest(url="https://example.test/day", ready_selector="#data_list", timeout=5)

    markup = _fetch(req, sessions)

    assert markup == "<body>done</body>"
    assert page.visited == ["https://example.test/day"]
    assert page.waited_for == ["#data_list"]
    assert page.timeouts == [5000, 5000]
    assert (sessions.opened, sessions.closed) == (1, 1)


def test_readiness_timeout_raises_render_error_and_releases_session():
    sessions = FakeSessions(FakePage(hang=True))
    req = FetchRequest(url="https://example.test/slow", ready_selector="#never", timeout=0.05)

    with pytest.raises(RenderError) as excinfo:
        _fetch(req, sessions)

    assert excinfo.value.url == "https://example.test/slow"
    assert isinstance(excinfo.value.cause, asyncio.TimeoutError)
    assert (sessions.opened, sessions.closed) == (1, 1)


def test_navigation_error_raises_render_error_and_releases_session():
    cause = PlaywrightError("net::ERR_NAME_NOT_RESOLVED")
    sessions = FakeSessions(FakePage(goto_error=cause))
    req = FetchRequest(url="https://example.test/gone", ready_selector="#data_list", timeout=5)

    with pytest.raises(RenderError) as excinfo:
        _fetch(req, sessions)

    assert excinfo.value.cause is cause
    assert excinfo.value.__cause__ is cause
    assert sessions.closed == 1


def test_session_creation_failure_raises_render_error():
    @asynccontextmanager
    async def broken_session():
        raise PlaywrightError("Executable doesn't exist")
        yield  # pragma: no cover

    req = FetchRequest(url="https://example.test/", ready_selector="body", timeout=5)

    with pytest.raises(RenderError, match="Executable doesn't exist"):
        asyncio.run(playwright_driver.fetch_rendered(req, session_factory=broken_session))


def test_each_call_gets_its_own_session():
    sessions = FakeSessions(FakePage())
    req = FetchRequest(url="https://example.test/", ready_selector="#ready", timeout=5)

    _fetch(req, sessions)
    _fetch(req, sessions)

    assert (sessions.opened, sessions.closed) == (2, 2)


class FakeContext:
    def __init__(self):
        self.closed = False

    async def close(self):
        self.closed = True


class FakeBrowser:
    def __init__(self):
        self.context_kwargs = None
        self.context = FakeContext()

    async def new_context(self, **kwargs):
        self.context_kwargs = kwargs
        return self.context


def test_with_context_applies_configured_defaults():
    browser = FakeBrowser()

    async def open_and_close():
        async with playwright_driver.with_context(browser) as context:
            assert context is browser.context
            assert not context.closed

    asyncio.run(open_and_close())

    assert browser.context_kwargs == {
        "user_agent": config.PLAYWRIGHT_USER_AGENT,
        "locale": config.PLAYWRIGHT_LOCALE,
        "timezone_id": config.SITE_TIMEZONE_HINT,
        "viewport": config.PLAYWRIGHT_VIEWPORT,
    }
    assert browser.context.closed
