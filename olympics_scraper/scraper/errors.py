"""Error types raised by the rendering and extraction steps."""

from __future__ import annotations

from typing import Optional


class ScraperError(Exception):
    """Base class for scraper failures."""


class RenderError(ScraperError):
    """The page could not be rendered and serialized within its budget."""

    def __init__(self, url: str, cause: Optional[BaseException] = None) -> None:
        self.url = url
        self.cause = cause
        detail = f"{type(cause).__name__}: {cause}" if cause is not None else "unknown error"
        super().__init__(f"Failed to render {url}: {detail}")


class ParseError(ScraperError):
    """Markup could not be parsed into a document."""
