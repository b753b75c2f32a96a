"""Tests for the alpha code enumerations and their text codec."""
import json

import pytest

from jurisdiction import Alpha2, Alpha3, Jurisdiction
from jurisdiction.alpha import format_alpha, parse_alpha2, parse_alpha3


class TestAlphaCodec:
    def test_display(self):
        assert str(Alpha2.NO) == "NO"
        assert str(Alpha3.NOR) == "NOR"
        assert f"{Alpha2.NO}" == "NO"
        assert format_alpha(Alpha3.NOR) == "NOR"

    def test_parse(self):
        assert parse_alpha2("NO") is Alpha2.NO
        assert parse_alpha3("NOR") is Alpha3.NOR

    @pytest.mark.parametrize("text", ["no", "No", " NO", "NO\n", "NOR", "", "N0"])
    def test_alpha2_parse_is_exact(self, text):
        with pytest.raises(ValueError):
            parse_alpha2(text)

    @pytest.mark.parametrize("text", ["nor", "NO", "NORW", " NOR"])
    def test_alpha3_parse_is_exact(self, text):
        with pytest.raises(ValueError):
            parse_alpha3(text)

    def test_parse_rejects_non_text(self):
        with pytest.raises(ValueError):
            Alpha2.parse(578)

    def test_every_alpha2_round_trips(self):
        for code in Alpha2:
            text = str(code)
            assert str(Jurisdiction.from_str(text).alpha2) == text
            assert Alpha2.parse(text) is code

    def test_every_alpha3_round_trips(self):
        for code in Alpha3:
            text = str(code)
            assert str(Jurisdiction.from_str(text).alpha3) == text
            assert Alpha3.parse(text) is code

    def test_json_serialises_as_code_text(self):
        assert json.dumps({"jurisdiction": Alpha2.NO}) == '{"jurisdiction": "NO"}'

    def test_enumerations_are_closed(self):
        assert len(Alpha2) == len(Alpha3) == 249
        assert all(code.name == code.value for code in Alpha2)
