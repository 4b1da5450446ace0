"""JSON output helpers for schedule and medal records."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import asdict
from pathlib import Path
from typing import Iterable, List, Optional

from olympics_scraper import config
from olympics_scraper.scraper.models import Record

logger = logging.getLogger(__name__)


def artifact_path(key: str, output_dir: Optional[Path] = None) -> Path:
    return (output_dir or config.OUTPUT_DIR) / f"{key}{config.ARTIFACT_EXTENSION}"


def write_records(
    records: Iterable[Record],
    key: str,
    output_dir: Optional[Path] = None,
) -> Path:
    """Persist records as an indented JSON array, replacing any existing artifact.

    The payload goes to a temporary file first and is renamed into place, so
    readers never see a half-written artifact. Raises OSError on failure.
    """
    output_path = artifact_path(key, output_dir)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    payload = [asdict(record) for record in records]
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{key}.", suffix=".tmp", dir=output_path.parent
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=config.JSON_INDENT, ensure_ascii=False)
            f.write("\n")
        os.replace(tmp_name, output_path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise

    logger.debug(f"Wrote {len(payload)} records to {output_path}")
    return output_path


def load_records(path: Path) -> List[dict]:
    """Read an artifact back as a list of dicts, keys in stored order."""
    with open(path, encoding="utf-8") as f:
        return json.load(f)
