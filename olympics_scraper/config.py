"""Configuration constants and selectors for the Paris 2024 scraper."""

from __future__ import annotations

import os
from datetime import date
from pathlib import Path

# ---------------------------------------------------------------------------
# Project metadata
# ---------------------------------------------------------------------------

PROJECT_ROOT = Path(__file__).resolve().parent

# ---------------------------------------------------------------------------
# Target pages
# ---------------------------------------------------------------------------

MEDAL_URL = (
    "https://sports.cctv.cn/Paris2024/medal_list/index.shtml"
    "?spm=C73465.PkN5JcjBF6mp.E6mpRwlrGbbT.1"
)
# {date} is the compact YYYYMMDD key
SCHEDULE_URL_TEMPLATE = "https://sports.cctv.cn/Paris2024/schedule/date/index.shtml?date={date}"

SCHEDULE_START = date(2024, 7, 24)
SCHEDULE_END = date(2024, 8, 11)

# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------

MEDAL_READY_SEL = "#medal_list1"
MEDAL_ROW_SEL = "#medal_list1 tr"
MEDAL_COUNTRY_LINK_SEL = "td.country a"
MEDAL_COUNTRY_PARAM = "countryid"

SCHEDULE_READY_SEL = "#data_list"
SCHEDULE_ROW_SEL = "#data_list tr"

# Element serialized once the ready selector is present
DOCUMENT_SEL = "body"

# ---------------------------------------------------------------------------
# Playwright settings
# ---------------------------------------------------------------------------

FETCH_TIMEOUT_SECONDS = 60.0
PLAYWRIGHT_HEADLESS = True
PLAYWRIGHT_VIEWPORT = {"width": 1440, "height": 900}
PLAYWRIGHT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/123.0.0.0 Safari/537.36"
)
PLAYWRIGHT_LOCALE = "zh-CN"
SITE_TIMEZONE_HINT = "Europe/Paris"

# Days fetched at once when running the schedule concurrently
DEFAULT_CONCURRENCY = 1

# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

OUTPUT_DIR = Path(os.getenv("OLYMPICS_OUTPUT_DIR", str(PROJECT_ROOT / "output")))

MEDAL_ARTIFACT_KEY = "medal_data"
SCHEDULE_ARTIFACT_SUFFIX = "_data"
ARTIFACT_EXTENSION = ".json"
JSON_INDENT = 2
