"""Tests for decoding the record feed."""
import json

import pytest

from jurisdiction.config import FEED_CFG
from jurisdiction.exceptions import FeedError
from jurisdiction.feed import Record, load_feed


class TestLoadCsv:
    def test_rows_in_order(self, write_feed, sample_rows):
        records = load_feed(write_feed(sample_rows))

        assert [record.alpha2 for record in records] == ["NO", "GG", "AQ"]
        assert records[0] == Record(**sample_rows[0])

    def test_cells_stay_text(self, write_feed, sample_rows):
        antarctica = load_feed(write_feed(sample_rows))[2]

        assert antarctica.country_code == "010"
        assert antarctica.region == ""
        assert antarctica.intermediate_region_code == ""

    def test_na_is_a_code_not_missing_data(self, write_feed, sample_rows):
        namibia = dict(sample_rows[0], name="Namibia", alpha2="NA", alpha3="NAM")
        assert load_feed(write_feed([namibia]))[0].alpha2 == "NA"

    def test_bundled_dataset(self, bundled_records):
        assert len(bundled_records) == 249
        norway = next(record for record in bundled_records if record.alpha2 == "NO")
        assert norway.alpha3 == "NOR"
        assert norway.sub_region == "Northern Europe"
        assert any(record.alpha2 == "NA" for record in bundled_records)


class TestLoadJson:
    def test_records(self, tmp_path, sample_rows):
        rows = [{FEED_CFG[field]: value for field, value in row.items()} for row in sample_rows]
        rows[0][FEED_CFG["country_code"]] = 578
        rows[0][FEED_CFG["intermediate_region_code"]] = None
        path = tmp_path / "country-region.json"
        path.write_text(json.dumps(rows), encoding="utf-8")

        records = load_feed(str(path))

        assert [record.alpha3 for record in records] == ["NOR", "GGY", "ATA"]
        assert records[0].country_code == "578"
        assert records[0].intermediate_region_code == ""


class TestLoadFailures:
    def test_missing_file(self, tmp_path):
        with pytest.raises(FeedError, match="not found"):
            load_feed(str(tmp_path / "missing.csv"))

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "country-region.xml"
        path.write_text("<countries/>", encoding="utf-8")
        with pytest.raises(FeedError, match="Unsupported"):
            load_feed(str(path))

    def test_empty_file(self, tmp_path):
        path = tmp_path / "country-region.csv"
        path.write_text("", encoding="utf-8")
        with pytest.raises(FeedError, match="empty"):
            load_feed(str(path))

    def test_missing_column(self, tmp_path):
        path = tmp_path / "country-region.csv"
        path.write_text("name,alpha-2\nNorway,NO\n", encoding="utf-8")
        with pytest.raises(FeedError, match="alpha-3"):
            load_feed(str(path))

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "country-region.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(FeedError):
            load_feed(str(path))
