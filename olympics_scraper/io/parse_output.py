"""Parser for saved schedule and medal JSON artifacts."""

from __future__ import annotations

import logging
import re
from dataclasses import fields
from pathlib import Path
from typing import List, Optional

import pandas as pd

from olympics_scraper import config
from olympics_scraper.io import save_json
from olympics_scraper.scraper.models import MedalRecord, ScheduleRecord

logger = logging.getLogger(__name__)

_SCHEDULE_FILE_PATTERN = re.compile(r"^(\d{8})_data\.json$")

SCHEDULE_FIELDS = [f.name for f in fields(ScheduleRecord)]
MEDAL_FIELDS = [f.name for f in fields(MedalRecord)]
MEDAL_COUNT_FIELDS = ["gold", "silver", "bronze", "total"]


def list_schedule_files(output_dir: Optional[Path] = None) -> List[Path]:
    """Return per-day schedule artifacts sorted by date."""
    output_dir = output_dir or config.OUTPUT_DIR
    if not output_dir.exists():
        return []
    return sorted(
        path for path in output_dir.glob("*_data.json")
        if _SCHEDULE_FILE_PATTERN.match(path.name)
    )


def parse_schedule_json(output_dir: Optional[Path] = None) -> pd.DataFrame:
    """Load every day artifact into one DataFrame with a ``date`` column.

    Args:
        output_dir: Directory holding the artifacts. Defaults to the configured output dir.

    Returns:
        DataFrame with ``date`` followed by the schedule fields.
    """
    frames = []
    for path in list_schedule_files(output_dir):
        day = _SCHEDULE_FILE_PATTERN.match(path.name).group(1)
        rows = save_json.load_records(path)
        frame = pd.DataFrame(rows, columns=SCHEDULE_FIELDS)
        frame.insert(0, "date", day)
        frames.append(frame)

    if not frames:
        return pd.DataFrame(columns=["date", *SCHEDULE_FIELDS])

    df = pd.concat(frames, ignore_index=True)
    df["date"] = pd.to_datetime(df["date"], format="%Y%m%d")
    logger.info(f"Parsed {len(df)} schedule entries from {len(frames)} files")
    return df


def get_schedule_summary(df: pd.DataFrame) -> dict:
    """Get summary statistics from a schedule DataFrame."""
    summary = {
        "total_events": len(df),
        "days": 0,
        "date_range": None,
        "events_per_day": {},
        "sports": {},
        "venues": 0,
    }
    if df.empty:
        return summary

    dates = df["date"].dt.strftime("%Y-%m-%d")
    summary["days"] = int(dates.nunique())
    summary["date_range"] = {"start": dates.min(), "end": dates.max()}
    summary["events_per_day"] = {k: int(v) for k, v in dates.value_counts().sort_index().items()}
    summary["sports"] = {k: int(v) for k, v in df["sport"].value_counts().items() if k}
    summary["venues"] = int(df.loc[df["venue"] != "", "venue"].nunique())
    return summary


def parse_medal_json(file_path: Optional[Path] = None) -> pd.DataFrame:
    """Load the medal snapshot with medal counts as integers."""
    if file_path is None:
        file_path = save_json.artifact_path(config.MEDAL_ARTIFACT_KEY)
    if not file_path.exists():
        raise FileNotFoundError(f"Medal file not found: {file_path}")

    df = pd.DataFrame(save_json.load_records(file_path), columns=MEDAL_FIELDS)
    for column in MEDAL_COUNT_FIELDS:
        df[column] = pd.to_numeric(df[column], errors="coerce").fillna(0).astype(int)

    logger.info(f"Parsed {len(df)} medal rows from {file_path.name}")
    return df


def get_medal_summary(df: pd.DataFrame) -> dict:
    """Get summary statistics from a medal DataFrame."""
    summary = {
        "countries": len(df),
        "medals": {column: 0 for column in MEDAL_COUNT_FIELDS},
        "leader": None,
    }
    if df.empty:
        return summary

    summary["medals"] = {column: int(df[column].sum()) for column in MEDAL_COUNT_FIELDS}
    leader = df.iloc[0]
    summary["leader"] = {
        "country_code": leader["country_code"],
        "gold": int(leader["gold"]),
        "total": int(leader["total"]),
    }
    return summary
