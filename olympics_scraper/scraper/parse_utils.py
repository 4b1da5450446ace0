"""Parsing helpers for cells and links in the results tables."""

from __future__ import annotations

from typing import Optional


def clean_text(value: Optional[str]) -> str:
    """Strip leading/trailing whitespace, keeping inner spacing as-is."""
    if value is None:
        return ""
    return value.strip()


def derive_id(link: Optional[str], param: str) -> str:
    """Return the value of ``param`` embedded in a link, or "" when absent.

    Only the first ``param=`` occurrence counts; the value runs up to the
    next ``&``.
    """
    if not link:
        return ""
    parts = link.split(f"{param}=", 1)
    if len(parts) < 2:
        return ""
    return parts[1].split("&", 1)[0]
