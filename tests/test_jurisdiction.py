"""Tests for the Jurisdiction handle."""
import pickle

import pytest

from jurisdiction import (
    Alpha2,
    Alpha3,
    IntermediateRegion,
    Jurisdiction,
    Region,
    SubRegion,
    UnrecognizedCodeError,
)
from jurisdiction.generated import DEFINITIONS


class TestConstruction:
    """Tests for building handles from codes and text."""

    def test_from_alpha2(self):
        assert Jurisdiction(Alpha2.NO).name == "Norway"

    def test_from_alpha3(self):
        assert Jurisdiction(Alpha3.NOR).name == "Norway"

    def test_from_str_alpha2(self):
        assert Jurisdiction.from_str("NO") == Alpha2.NO

    def test_from_str_alpha3(self):
        assert Jurisdiction.from_str("NOR") == Alpha3.NOR

    def test_from_str_namibia_is_not_missing_data(self):
        assert Jurisdiction.from_str("NA").name == "Namibia"

    @pytest.mark.parametrize("text", ["rofl", "ZZZ_not_a_code", "no", " NO", "NOR ", ""])
    def test_from_str_unknown(self, text):
        with pytest.raises(UnrecognizedCodeError) as excinfo:
            Jurisdiction.from_str(text)
        assert excinfo.value.text == text

    def test_unrecognized_code_is_value_error(self):
        with pytest.raises(ValueError):
            Jurisdiction.from_str("rofl")

    def test_rejects_plain_strings(self):
        with pytest.raises(TypeError):
            Jurisdiction("NO")


class TestAccessors:
    """Tests for the field accessors."""

    def test_norway(self):
        for norway in (Jurisdiction.from_str("NO"), Jurisdiction.from_str("NOR")):
            assert norway.name == "Norway"
            assert norway.alpha2 is Alpha2.NO
            assert norway.alpha3 is Alpha3.NOR
            assert norway.country_code == 578
            assert norway.subdivision_prefix == "ISO 3166-2:NO"
            assert norway.region is Region.Europe
            assert norway.sub_region is SubRegion.NorthernEurope
            assert norway.intermediate_region is IntermediateRegion.Undefined
            assert norway.region_code == 150
            assert norway.sub_region_code == 154
            assert norway.intermediate_region_code is None

    def test_intermediate_region_code_present(self):
        jersey = Jurisdiction(Alpha2.JE)
        assert jersey.intermediate_region is IntermediateRegion.ChannelIslands
        assert jersey.intermediate_region_code == 830

    def test_antarctica_has_no_region(self):
        antarctica = Jurisdiction(Alpha3.ATA)
        assert antarctica.region is Region.Undefined
        assert antarctica.sub_region is SubRegion.Undefined
        assert antarctica.region_code == 0
        assert antarctica.sub_region_code == 0
        assert antarctica.intermediate_region_code is None

    def test_every_definition_is_reachable(self):
        for definition in DEFINITIONS:
            jurisdiction = Jurisdiction(definition.alpha2)
            assert jurisdiction.country_code == definition.country_code
            assert jurisdiction.alpha3 is definition.alpha3
            assert jurisdiction.region is definition.region
            assert jurisdiction.sub_region is definition.sub_region
            assert jurisdiction.intermediate_region is definition.intermediate_region
            assert jurisdiction.intermediate_region_code == definition.intermediate_region_code

    def test_handle_references_definition(self):
        first = Jurisdiction(Alpha2.NO)
        second = Jurisdiction(Alpha3.NOR)
        assert first._definition is second._definition


class TestEquality:
    """Tests for comparison, hashing and text forms."""

    def test_alpha2_and_alpha3_handles_are_equal(self):
        assert Jurisdiction(Alpha2.NO) == Jurisdiction(Alpha3.NOR)

    def test_different_jurisdictions_differ(self):
        assert Jurisdiction(Alpha2.NO) != Jurisdiction(Alpha2.SE)

    def test_compare_with_codes(self):
        norway = Jurisdiction(Alpha2.NO)
        assert norway == Alpha2.NO
        assert norway == Alpha3.NOR
        assert Alpha2.NO == norway
        assert norway != Alpha2.SE
        assert norway != Alpha3.SWE

    def test_not_equal_to_plain_text(self):
        assert Jurisdiction(Alpha2.NO) != "NO"

    def test_hash_follows_country_code(self):
        handles = {Jurisdiction(Alpha2.NO), Jurisdiction(Alpha3.NOR), Jurisdiction(Alpha2.DK)}
        assert len(handles) == 2

    def test_text_forms(self):
        norway = Jurisdiction(Alpha2.NO)
        assert str(norway) == "NO"
        assert repr(norway) == "Jurisdiction(NO: Norway)"

    def test_pickle_resolves_to_registry_definition(self):
        norway = Jurisdiction(Alpha2.NO)
        restored = pickle.loads(pickle.dumps(norway))
        assert restored == norway
        assert restored._definition is norway._definition


class TestHierarchyQueries:
    """Tests for the reverse hierarchy lookups."""

    def test_in_region(self):
        europe = Jurisdiction.in_region(Region.Europe)
        assert Jurisdiction(Alpha2.NO) in europe

        undefined = Jurisdiction.in_region(Region.Undefined)
        assert len(undefined) == 1
        assert Jurisdiction(Alpha3.ATA) in undefined

    def test_in_sub_region(self):
        assert Jurisdiction(Alpha2.AO) in Jurisdiction.in_sub_region(SubRegion.SubSaharanAfrica)

    def test_in_intermediate_region(self):
        channel_islands = Jurisdiction.in_intermediate_region(IntermediateRegion.ChannelIslands)
        assert set(channel_islands) == {Jurisdiction(Alpha2.GG), Jurisdiction(Alpha2.JE)}

    @pytest.mark.parametrize(
        "enum, attribute",
        [
            (Region, "region"),
            (SubRegion, "sub_region"),
            (IntermediateRegion, "intermediate_region"),
        ],
    )
    def test_buckets_match_definitions(self, enum, attribute):
        for value in enum:
            members = Jurisdiction.jurisdictions_in(value)
            expected = [d for d in DEFINITIONS if getattr(d, attribute) is value]
            assert len(members) == len(expected)
            assert all(getattr(member, attribute) is value for member in members)

    def test_buckets_cover_every_jurisdiction_once(self):
        codes = [j.country_code for region in Region for j in Jurisdiction.jurisdictions_in(region)]
        assert sorted(codes) == sorted(d.country_code for d in DEFINITIONS)

    def test_rejects_non_hierarchy_values(self):
        with pytest.raises(TypeError):
            Jurisdiction.jurisdictions_in("Europe")
        with pytest.raises(TypeError):
            Jurisdiction.jurisdictions_in(Alpha2.NO)
