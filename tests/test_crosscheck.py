"""Tests for the pycountry cross-check."""
from jurisdiction.crosscheck import Discrepancy, cross_check


class TestCrossCheck:
    def test_consistent_records(self, sample_records):
        assert cross_check(sample_records) == []

    def test_wrong_alpha3(self, make_record):
        assert cross_check([make_record(alpha3="NRW")]) == [
            Discrepancy("NO", "alpha-3", "NOR", "NRW")
        ]

    def test_wrong_numeric_code(self, make_record):
        assert cross_check([make_record(country_code="579")]) == [
            Discrepancy("NO", "country-code", "578", "579")
        ]

    def test_numeric_code_padding_is_ignored(self, make_record):
        assert cross_check([make_record(alpha2="AQ", alpha3="ATA", country_code="10")]) == []

    def test_unknown_alpha2(self, make_record):
        discrepancies = cross_check([make_record(alpha2="XZ")])
        assert [d.field for d in discrepancies] == ["alpha-2"]

    def test_warnings_are_logged(self, make_record, caplog):
        cross_check([make_record(alpha3="NRW")])
        assert "NRW" in caplog.text
