"""CLI orchestrator for the Paris 2024 schedule and medal scraper."""

from __future__ import annotations

import argparse
import asyncio
import functools
import logging
from datetime import date
from pathlib import Path
from typing import Iterable, Optional

from dateutil import parser as date_parser

from olympics_scraper import config
from olympics_scraper.io import parse_output, save_json
from olympics_scraper.scraper import playwright_driver, runner
from olympics_scraper.scraper.errors import ScraperError
from olympics_scraper.scraper.models import DateRange

logger = logging.getLogger(__name__)

MODES = ("all", "medals", "schedule", "summary")


def _parse_date(value: str) -> date:
    try:
        return date_parser.parse(value).date()
    except (ValueError, OverflowError) as exc:
        raise argparse.ArgumentTypeError(f"Invalid date: {value!r}") from exc


def _make_fetch(args: argparse.Namespace):
    if not args.headful:
        return playwright_driver.fetch_rendered
    session_factory = functools.partial(playwright_driver.open_session, headless=False)
    return functools.partial(playwright_driver.fetch_rendered, session_factory=session_factory)


async def main_async(args: argparse.Namespace) -> int:
    fetch = _make_fetch(args)
    output_dir: Path = args.output_dir

    if args.mode in ("all", "medals"):
        try:
            await runner.run_medals(fetch=fetch, output_dir=output_dir, timeout=args.timeout)
        except (ScraperError, OSError) as exc:
            logger.error(f"Medal snapshot failed: {exc}")
            return 1

    if args.mode in ("all", "schedule"):
        date_range = DateRange(args.start, args.end)
        report = await runner.run_schedule(
            date_range,
            fetch=fetch,
            output_dir=output_dir,
            timeout=args.timeout,
            concurrency=args.concurrency,
        )
        if report.failed:
            logger.warning(
                f"{len(report.failed)} of {len(report.results)} schedule day(s) failed"
            )

    return 0


def print_summary(output_dir: Path) -> None:
    """Print a summary of the saved schedule and medal artifacts."""
    print("=" * 60)
    print("Schedule Files")
    print("=" * 60)
    schedule_df = parse_output.parse_schedule_json(output_dir)
    summary = parse_output.get_schedule_summary(schedule_df)
    print(f"  Events: {summary['total_events']} across {summary['days']} day(s)")
    if summary["date_range"]:
        print(f"  Date Range: {summary['date_range']['start']} to {summary['date_range']['end']}")
    print(f"  Venues: {summary['venues']}")
    for sport, count in list(summary["sports"].items())[:10]:
        print(f"    - {sport}: {count}")

    print("\n" + "=" * 60)
    print("Medal Table")
    print("=" * 60)
    try:
        medal_df = parse_output.parse_medal_json(
            save_json.artifact_path(config.MEDAL_ARTIFACT_KEY, output_dir)
        )
    except FileNotFoundError as exc:
        print(f"  {exc}")
        return
    medals = parse_output.get_medal_summary(medal_df)
    print(f"  Countries: {medals['countries']}")
    print(
        f"  Medals: {medals['medals']['gold']} gold, {medals['medals']['silver']} silver, "
        f"{medals['medals']['bronze']} bronze ({medals['medals']['total']} total)"
    )
    if medals["leader"]:
        leader = medals["leader"]
        print(f"  Leader: {leader['country_code']} ({leader['gold']} gold, {leader['total']} total)")


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--mode",
        choices=MODES,
        default="all",
        help="What to run: medal snapshot then schedule (all), one of them, or a summary of saved files.",
    )
    parser.add_argument(
        "--start",
        type=_parse_date,
        default=config.SCHEDULE_START,
        help="First schedule day (inclusive).",
    )
    parser.add_argument(
        "--end",
        type=_parse_date,
        default=config.SCHEDULE_END,
        help="Last schedule day (inclusive).",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=config.FETCH_TIMEOUT_SECONDS,
        help="Seconds allowed for each page render.",
    )
    parser.add_argument(
        "--concurrency",
        type=int,
        default=config.DEFAULT_CONCURRENCY,
        help="Maximum number of days rendered at the same time.",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=config.OUTPUT_DIR,
        help="Directory for JSON artifacts.",
    )
    parser.add_argument(
        "--headful",
        action="store_true",
        help="Show the browser window.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output",
    )
    args = parser.parse_args(argv)
    if args.end < args.start:
        parser.error(f"--end {args.end} is before --start {args.start}")
    if args.concurrency < 1:
        parser.error("--concurrency must be at least 1")
    return args


def main(argv: Optional[Iterable[str]] = None) -> None:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.mode == "summary":
        print_summary(args.output_dir)
        return

    exit_code = asyncio.run(main_async(args))
    if exit_code:
        raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
