"""Utilities for launching Playwright browsers and rendering pages."""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable, Optional

from playwright.async_api import Browser, BrowserContext, Page, async_playwright
from playwright.async_api import Error as PlaywrightError

from olympics_scraper import config
from olympics_scraper.scraper.errors import RenderError
from olympics_scraper.scraper.models import FetchRequest

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], AsyncContextManager[Page]]


@asynccontextmanager
async def with_browser(headless: Optional[bool] = None) -> AsyncIterator[Browser]:
    """Async context manager yielding a configured Chromium browser instance."""
    async with async_playwright() as p:
        browser = await p.chromium.launch(
            headless=config.PLAYWRIGHT_HEADLESS if headless is None else headless
        )
        try:
            yield browser
        finally:
            await browser.close()


@asynccontextmanager
async def with_context(browser: Browser) -> AsyncIterator[BrowserContext]:
    """Create a new browser context with project defaults applied."""
    context = await browser.new_context(
        user_agent=config.PLAYWRIGHT_USER_AGENT,
        locale=config.PLAYWRIGHT_LOCALE,
        timezone_id=config.SITE_TIMEZONE_HINT,
        viewport=config.PLAYWRIGHT_VIEWPORT,
    )
    try:
        yield context
    finally:
        await context.close()


@asynccontextmanager
async def open_session(headless: Optional[bool] = None) -> AsyncIterator[Page]:
    """One browser, context and page, all closed when the block exits."""
    async with with_browser(headless) as browser:
        async with with_context(browser) as context:
            page = await context.new_page()
            try:
                yield page
            finally:
                await page.close()


async def fetch_rendered(
    req: FetchRequest,
    *,
    session_factory: SessionFactory = open_session,
) -> str:
    """Render ``req.url`` and return the serialized document body.

    The timeout covers the whole call, browser launch included. Any failure
    is reported as RenderError; the session is torn down either way.
    """
    try:
        return await asyncio.wait_for(_render(req, session_factory), timeout=req.timeout)
    except asyncio.TimeoutError as exc:
        raise RenderError(req.url, exc) from exc
    except (PlaywrightError, OSError) as exc:
        raise RenderError(req.url, exc) from exc


async def _render(req: FetchRequest, session_factory: SessionFactory) -> str:
    timeout_ms = req.timeout * 1000
    async with session_factory() as page:
        page.set_default_timeout(timeout_ms)
        page.set_default_navigation_timeout(timeout_ms)
        logger.debug(f"Navigating to {req.url}")
        await page.goto(req.url, wait_until="domcontentloaded")
        await page.wait_for_selector(req.ready_selector, state="attached")
        return await page.eval_on_selector(config.DOCUMENT_SEL, "el => el.outerHTML")
