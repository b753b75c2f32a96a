"""Shared fixtures for the jurisdiction tests."""
import csv

import pytest

from jurisdiction.config import COMPILER_CFG, FEED_CFG
from jurisdiction.feed import Record, load_feed

NORWAY = {
    "name": "Norway",
    "alpha2": "NO",
    "alpha3": "NOR",
    "country_code": "578",
    "iso_3166_2": "ISO 3166-2:NO",
    "region": "Europe",
    "sub_region": "Northern Europe",
    "intermediate_region": "",
    "region_code": "150",
    "sub_region_code": "154",
    "intermediate_region_code": "",
}

GUERNSEY = {
    "name": "Guernsey",
    "alpha2": "GG",
    "alpha3": "GGY",
    "country_code": "831",
    "iso_3166_2": "ISO 3166-2:GG",
    "region": "Europe",
    "sub_region": "Northern Europe",
    "intermediate_region": "Channel Islands",
    "region_code": "150",
    "sub_region_code": "154",
    "intermediate_region_code": "830",
}

ANTARCTICA = {
    "name": "Antarctica",
    "alpha2": "AQ",
    "alpha3": "ATA",
    "country_code": "010",
    "iso_3166_2": "ISO 3166-2:AQ",
    "region": "",
    "sub_region": "",
    "intermediate_region": "",
    "region_code": "",
    "sub_region_code": "",
    "intermediate_region_code": "",
}


@pytest.fixture
def make_record():
    """Build a Record from Norway's row with selected fields replaced."""

    def _make(**overrides) -> Record:
        return Record(**{**NORWAY, **overrides})

    return _make


@pytest.fixture
def sample_records() -> list[Record]:
    return [Record(**NORWAY), Record(**GUERNSEY), Record(**ANTARCTICA)]


@pytest.fixture
def write_feed(tmp_path):
    """Write rows (record field -> value) as a dataset CSV and return its path."""

    def _write(rows, filename="country-region.csv") -> str:
        path = tmp_path / filename
        with open(path, "w", encoding="utf-8", newline="") as file:
            writer = csv.writer(file)
            writer.writerow(FEED_CFG.values())
            for row in rows:
                writer.writerow(row[field] for field in FEED_CFG)
        return str(path)

    return _write


@pytest.fixture(scope="session")
def bundled_records() -> list[Record]:
    return load_feed(COMPILER_CFG["dataset_path"])


@pytest.fixture
def sample_rows() -> list[dict[str, str]]:
    return [dict(NORWAY), dict(GUERNSEY), dict(ANTARCTICA)]
