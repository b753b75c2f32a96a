"""Decoding of the raw country-region dataset into ordered records."""
import logging
import math
import os
from dataclasses import dataclass
from typing import Any, Optional

import pandas as pd

from jurisdiction.config import COMPILER_CFG, FEED_CFG, FeedConfig
from jurisdiction.exceptions import FeedError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Record:
    """One raw jurisdiction row, every field still in its textual form."""

    name: str
    alpha2: str
    alpha3: str
    country_code: str
    iso_3166_2: str
    region: str
    sub_region: str
    intermediate_region: str
    region_code: str
    sub_region_code: str
    intermediate_region_code: str


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        if value.is_integer():
            return str(int(value))
    return str(value).strip()


def load_feed(
    path: str,
    feed_cfg: Optional[FeedConfig] = None,
    encoding: str = COMPILER_CFG["encoding"],
) -> list[Record]:
    """
    Read the country-region dataset at ``path`` into records, in file order.

    CSV and JSON (a list of objects) are supported. Every cell is kept as
    text; pandas' NA detection is disabled so that codes such as "NA"
    (Namibia) survive.

    Args:
        path: Path to a ``.csv`` or ``.json`` dataset
        feed_cfg: Mapping of record fields to dataset column names
        encoding: Text encoding of the dataset

    Raises:
        FeedError: If the file is missing, unreadable or lacks a column
    """
    feed_cfg = feed_cfg or FEED_CFG

    if not os.path.exists(path):
        raise FeedError(f"Record feed not found: {path}")

    extension = os.path.splitext(path)[1].lower()
    if extension not in (".csv", ".json"):
        raise FeedError(f"Unsupported record feed format '{extension}': {path}")

    try:
        if extension == ".csv":
            frame = pd.read_csv(
                path, dtype=str, keep_default_na=False, encoding=encoding
            )
        else:
            frame = pd.read_json(
                path,
                orient="records",
                dtype=False,
                convert_dates=False,
                encoding=encoding,
            )
    except pd.errors.EmptyDataError as exc:
        raise FeedError(f"The record feed is empty: {path}") from exc
    except (pd.errors.ParserError, ValueError) as exc:
        raise FeedError(f"Failed to parse record feed: {path}") from exc
    except OSError as exc:
        raise FeedError(f"IO error occurred while reading record feed: {path}") from exc

    missing = [column for column in feed_cfg.values() if column not in frame.columns]
    if missing:
        raise FeedError(
            f"Record feed {path} is missing columns: {', '.join(missing)}"
        )

    records = [
        Record(**{field: _cell(row[column]) for field, column in feed_cfg.items()})
        for row in frame.to_dict(orient="records")
    ]

    logger.info("Loaded %s records from %s", len(records), path)
    return records
