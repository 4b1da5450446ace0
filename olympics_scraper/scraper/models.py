"""Shared data models for the Paris 2024 scraper."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Iterator, List, Optional, Sequence, Union

from olympics_scraper import config


@dataclass(frozen=True, slots=True)
class ScheduleRecord:
    """One scheduled event on one day, in table column order."""

    time: str
    sport: str
    name: str
    venue: str


@dataclass(frozen=True, slots=True)
class MedalRecord:
    """One country's row of the medal table.

    ``country_code`` comes from the ``countryid`` parameter of the row's
    country link rather than the visible (localised) country name.
    """

    rank: str
    country_code: str
    gold: str
    silver: str
    bronze: str
    total: str


Record = Union[ScheduleRecord, MedalRecord]


@dataclass(frozen=True, slots=True)
class FetchRequest:
    """A single rendering attempt."""

    url: str
    ready_selector: str
    timeout: float = config.FETCH_TIMEOUT_SECONDS


@dataclass(frozen=True, slots=True)
class DateRange:
    """Inclusive range of calendar days; empty when ``end`` precedes ``start``."""

    start: date
    end: date

    def days(self) -> Iterator[date]:
        current = self.start
        while current <= self.end:
            yield current
            current += timedelta(days=1)

    def __len__(self) -> int:
        return max((self.end - self.start).days + 1, 0)

    @staticmethod
    def iso_key(day: date) -> str:
        return day.strftime("%Y-%m-%d")

    @staticmethod
    def compact_key(day: date) -> str:
        return day.strftime("%Y%m%d")


@dataclass(slots=True)
class DayResult:
    """Outcome of processing one day: records on success, the cause on failure."""

    day: date
    key: str
    records: List[ScheduleRecord] = field(default_factory=list)
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(slots=True)
class RunReport:
    """Per-day results of a schedule run, ordered by date."""

    results: List[DayResult] = field(default_factory=list)

    @property
    def succeeded(self) -> Sequence[DayResult]:
        return [result for result in self.results if result.ok]

    @property
    def failed(self) -> Sequence[DayResult]:
        return [result for result in self.results if not result.ok]

    @property
    def days(self) -> List[date]:
        return [result.day for result in self.results]
