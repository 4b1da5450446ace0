"""Table extraction for the rendered schedule and medal pages."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, TypeVar

from bs4 import BeautifulSoup, ParserRejectedMarkup

from olympics_scraper import config
from olympics_scraper.scraper import parse_utils
from olympics_scraper.scraper.errors import ParseError
from olympics_scraper.scraper.models import MedalRecord, ScheduleRecord

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class ColumnSpec:
    """Where one output field lives inside a table row.

    ``index`` picks the N-th ``td`` of the row. ``selector`` then narrows to a
    nested node, inside that cell when ``index`` is set and inside the row
    otherwise. ``attribute`` reads an attribute instead of the text, and
    ``derive_param`` pulls a query parameter out of that attribute value.
    """

    field: str
    index: Optional[int] = None
    selector: Optional[str] = None
    attribute: Optional[str] = None
    derive_param: Optional[str] = None


SCHEDULE_COLUMNS = (
    ColumnSpec("time", index=0),
    ColumnSpec("sport", index=2),
    ColumnSpec("name", index=3),
    ColumnSpec("venue", index=4),
)

MEDAL_COLUMNS = (
    ColumnSpec("rank", index=0),
    ColumnSpec(
        "country_code",
        selector=config.MEDAL_COUNTRY_LINK_SEL,
        attribute="href",
        derive_param=config.MEDAL_COUNTRY_PARAM,
    ),
    ColumnSpec("gold", index=2),
    ColumnSpec("silver", index=3),
    ColumnSpec("bronze", index=4),
    ColumnSpec("total", index=5),
)


def parse_document(markup: str) -> BeautifulSoup:
    """Parse rendered markup, raising ParseError when it is unusable."""
    if not isinstance(markup, (str, bytes)):
        raise ParseError(f"Expected markup text, got {type(markup).__name__}")
    if not markup.strip():
        raise ParseError("Markup is empty")
    try:
        return BeautifulSoup(markup, "lxml")
    except ParserRejectedMarkup as exc:
        raise ParseError(f"Markup rejected by parser: {exc}") from exc


def extract_rows(
    markup: str,
    row_selector: str,
    columns: Sequence[ColumnSpec],
    record_type: Callable[..., T],
) -> List[T]:
    """Map each row under ``row_selector`` to a record, in document order.

    The first column is the validity field: rows where it is empty after
    cleaning (header rows, spacer rows) are skipped.
    """
    if not columns:
        raise ValueError("At least one column is required")

    soup = parse_document(markup)
    records: List[T] = []
    for tr in soup.select(row_selector):
        values = {spec.field: _resolve(tr, spec) for spec in columns}
        if not values[columns[0].field]:
            continue
        records.append(record_type(**values))

    logger.debug(f"Extracted {len(records)} rows from '{row_selector}'")
    return records


def extract_schedule(markup: str) -> List[ScheduleRecord]:
    return extract_rows(markup, config.SCHEDULE_ROW_SEL, SCHEDULE_COLUMNS, ScheduleRecord)


def extract_medals(markup: str) -> List[MedalRecord]:
    return extract_rows(markup, config.MEDAL_ROW_SEL, MEDAL_COLUMNS, MedalRecord)


def _resolve(tr, spec: ColumnSpec) -> str:
    node = tr
    if spec.index is not None:
        node = _safe_get_cell(tr, spec.index)
    if node is not None and spec.selector:
        node = node.select_one(spec.selector)
    if node is None:
        return ""

    if spec.attribute is None:
        raw = node.get_text()
    else:
        raw = node.get(spec.attribute) or ""
        if isinstance(raw, list):
            raw = " ".join(raw)

    if spec.derive_param:
        raw = parse_utils.derive_id(raw, spec.derive_param)
    return parse_utils.clean_text(raw)


def _safe_get_cell(tr, index: int):
    cells = tr.find_all("td")
    if 0 <= index < len(cells):
        return cells[index]
    return None
