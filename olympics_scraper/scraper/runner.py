"""Medal snapshot and day-by-day schedule runs."""

from __future__ import annotations

import asyncio
import logging
from datetime import date
from pathlib import Path
from typing import Awaitable, Callable, List, Optional, Sequence

from olympics_scraper import config
from olympics_scraper.io import save_json
from olympics_scraper.scraper import playwright_driver, table_dom
from olympics_scraper.scraper.errors import ParseError, RenderError
from olympics_scraper.scraper.models import (
    DateRange,
    DayResult,
    FetchRequest,
    MedalRecord,
    Record,
    RunReport,
)

module_logger = logging.getLogger(__name__)

FetchFn = Callable[[FetchRequest], Awaitable[str]]
WriteFn = Callable[[Sequence[Record], str, Optional[Path]], Path]


def schedule_request(day: date, timeout: float = config.FETCH_TIMEOUT_SECONDS) -> FetchRequest:
    return FetchRequest(
        url=config.SCHEDULE_URL_TEMPLATE.format(date=DateRange.compact_key(day)),
        ready_selector=config.SCHEDULE_READY_SEL,
        timeout=timeout,
    )


def medal_request(timeout: float = config.FETCH_TIMEOUT_SECONDS) -> FetchRequest:
    return FetchRequest(
        url=config.MEDAL_URL,
        ready_selector=config.MEDAL_READY_SEL,
        timeout=timeout,
    )


def schedule_key(day: date) -> str:
    return f"{DateRange.compact_key(day)}{config.SCHEDULE_ARTIFACT_SUFFIX}"


async def run_medals(
    *,
    fetch: FetchFn = playwright_driver.fetch_rendered,
    write: WriteFn = save_json.write_records,
    logger: logging.Logger = module_logger,
    output_dir: Optional[Path] = None,
    timeout: float = config.FETCH_TIMEOUT_SECONDS,
) -> List[MedalRecord]:
    """Fetch, extract and save the medal table. Every failure propagates."""
    markup = await fetch(medal_request(timeout))
    records = table_dom.extract_medals(markup)
    output_path = write(records, config.MEDAL_ARTIFACT_KEY, output_dir)
    logger.info(f"Saved {len(records)} medal rows to {output_path}")
    return records


async def process_day(
    day: date,
    *,
    fetch: FetchFn = playwright_driver.fetch_rendered,
    write: WriteFn = save_json.write_records,
    logger: logging.Logger = module_logger,
    output_dir: Optional[Path] = None,
    timeout: float = config.FETCH_TIMEOUT_SECONDS,
) -> DayResult:
    """Fetch, extract and save one day; failures end up in the result."""
    key = schedule_key(day)
    date_str = DateRange.compact_key(day)

    try:
        markup = await fetch(schedule_request(day, timeout))
    except RenderError as exc:
        logger.error(f"Failed to fetch data for date {date_str}: {exc}")
        return DayResult(day=day, key=key, error=exc)

    try:
        records = table_dom.extract_schedule(markup)
    except ParseError as exc:
        logger.error(f"Failed to parse data for date {date_str}: {exc}")
        return DayResult(day=day, key=key, error=exc)

    try:
        output_path = write(records, key, output_dir)
    except OSError as exc:
        logger.error(f"Failed to save data for date {date_str}: {exc}")
        return DayResult(day=day, key=key, records=records, error=exc)

    logger.info(f"Saved {len(records)} events for {date_str} to {output_path}")
    return DayResult(day=day, key=key, records=records)


async def run_schedule(
    date_range: DateRange,
    *,
    fetch: FetchFn = playwright_driver.fetch_rendered,
    write: WriteFn = save_json.write_records,
    logger: logging.Logger = module_logger,
    output_dir: Optional[Path] = None,
    timeout: float = config.FETCH_TIMEOUT_SECONDS,
    concurrency: int = config.DEFAULT_CONCURRENCY,
) -> RunReport:
    """Process every day in the range exactly once.

    With ``concurrency`` of 1 days run strictly in order; above that, at most
    ``concurrency`` days hold a browser session at the same time. Either way
    the report lists days in calendar order.
    """
    if concurrency < 1:
        raise ValueError(f"concurrency must be at least 1, got {concurrency}")

    kwargs = dict(fetch=fetch, write=write, logger=logger, output_dir=output_dir, timeout=timeout)
    report = RunReport()

    if concurrency == 1:
        for day in date_range.days():
            report.results.append(await process_day(day, **kwargs))
    else:
        semaphore = asyncio.Semaphore(concurrency)

        async def bounded(day: date) -> DayResult:
            async with semaphore:
                return await process_day(day, **kwargs)

        report.results.extend(
            await asyncio.gather(*(bounded(day) for day in date_range.days()))
        )

    logger.info(
        f"Schedule run finished: {len(report.succeeded)} saved, "
        f"{len(report.failed)} failed out of {len(report.results)} days"
    )
    return report
