"""Tests for the UN M49 hierarchy enumerations."""
from jurisdiction import IntermediateRegion, Region, SubRegion


class TestHierarchyEnumerations:
    def test_undefined_is_always_present(self):
        for enum in (Region, SubRegion, IntermediateRegion):
            assert enum.Undefined.value == ""
            assert enum.Undefined.is_undefined
            assert list(enum)[-1] is enum.Undefined

    def test_regions(self):
        assert {region.name for region in Region} == {
            "Africa",
            "Americas",
            "Asia",
            "Europe",
            "Oceania",
            "Undefined",
        }

    def test_labels_are_display_names(self):
        assert SubRegion.SubSaharanAfrica.value == "Sub-Saharan Africa"
        assert SubRegion.SouthEasternAsia.value == "South-eastern Asia"
        assert str(SubRegion.LatinAmericaAndTheCaribbean) == "Latin America and the Caribbean"

    def test_parse_label(self):
        assert SubRegion.parse("Northern Europe") is SubRegion.NorthernEurope
        assert IntermediateRegion.parse("Channel Islands") is IntermediateRegion.ChannelIslands

    def test_unknown_label_falls_back_to_undefined(self):
        assert Region.parse("Atlantis") is Region.Undefined
        assert Region.parse("") is Region.Undefined
        assert not Region.Europe.is_undefined
