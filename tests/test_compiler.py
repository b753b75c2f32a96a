"""Tests for the classification compiler."""
import pytest

from jurisdiction import generated
from jurisdiction.compiler import (
    UNDEFINED,
    compile_records,
    label_identifier,
    load_module,
    render_module,
    verify_module,
    write_module,
)
from jurisdiction.exceptions import CompilationError


class TestLabelIdentifier:
    @pytest.mark.parametrize(
        "label, identifier",
        [
            ("Europe", "Europe"),
            ("Northern Europe", "NorthernEurope"),
            ("Sub-Saharan Africa", "SubSaharanAfrica"),
            ("South-eastern Asia", "SouthEasternAsia"),
            ("Latin America and the Caribbean", "LatinAmericaAndTheCaribbean"),
        ],
    )
    def test_identifier(self, label, identifier):
        assert label_identifier(label) == identifier


class TestCompileRecords:
    def test_enumerations_preserve_feed_order(self, sample_records):
        compiled = compile_records(sample_records)

        assert compiled.alpha2 == ["NO", "GG", "AQ"]
        assert compiled.alpha3 == ["NOR", "GGY", "ATA"]
        assert [v.identifier for v in compiled.regions] == ["Europe", UNDEFINED]
        assert [v.identifier for v in compiled.sub_regions] == ["NorthernEurope", UNDEFINED]
        assert [v.identifier for v in compiled.intermediate_regions] == [
            "ChannelIslands",
            UNDEFINED,
        ]

    def test_undefined_present_even_if_unused(self, make_record):
        compiled = compile_records(
            [make_record(intermediate_region="Caribbean", intermediate_region_code="029")]
        )
        assert compiled.regions[-1].identifier == UNDEFINED
        assert compiled.region_index[UNDEFINED] == []
        assert compiled.intermediate_region_index[UNDEFINED] == []

    def test_definition_fields(self, sample_records):
        norway, guernsey, antarctica = compile_records(sample_records).definitions

        assert norway.country_code == 578
        assert norway.name == "Norway"
        assert norway.region == "Europe"
        assert norway.sub_region == "NorthernEurope"
        assert norway.intermediate_region == UNDEFINED
        assert norway.region_code == 150
        assert norway.sub_region_code == 154
        assert norway.intermediate_region_code is None

        assert guernsey.intermediate_region == "ChannelIslands"
        assert guernsey.intermediate_region_code == 830

        assert antarctica.country_code == 10
        assert antarctica.region == UNDEFINED
        assert antarctica.region_code == 0
        assert antarctica.sub_region_code == 0

    @pytest.mark.parametrize("code, expected", [("", None), ("0", None), ("000", None), ("911", 911)])
    def test_intermediate_region_sentinel(self, make_record, code, expected):
        compiled = compile_records([make_record(intermediate_region_code=code)])
        assert compiled.definitions[0].intermediate_region_code == expected

    def test_reverse_indices(self, sample_records):
        compiled = compile_records(sample_records)

        assert compiled.region_index == {"Europe": [578, 831], UNDEFINED: [10]}
        assert compiled.sub_region_index == {"NorthernEurope": [578, 831], UNDEFINED: [10]}
        assert compiled.intermediate_region_index == {
            "ChannelIslands": [831],
            UNDEFINED: [578, 10],
        }

    def test_reverse_indices_agree_with_definitions(self, bundled_records):
        compiled = compile_records(bundled_records)
        by_code = {d.country_code: d for d in compiled.definitions}
        for attribute, index in (
            ("region", compiled.region_index),
            ("sub_region", compiled.sub_region_index),
            ("intermediate_region", compiled.intermediate_region_index),
        ):
            assert sum(len(codes) for codes in index.values()) == len(by_code)
            for identifier, codes in index.items():
                assert all(getattr(by_code[code], attribute) == identifier for code in codes)


class TestCompileFailures:
    @pytest.mark.parametrize(
        "overrides",
        [
            {"alpha2": "GG"},
            {"alpha3": "GGY"},
            {"country_code": "831"},
            {"country_code": "0831"},
        ],
    )
    def test_duplicates_abort(self, make_record, sample_records, overrides):
        fields = {"alpha2": "XA", "alpha3": "XAA", "country_code": "900", **overrides}
        records = sample_records + [make_record(**fields)]
        with pytest.raises(CompilationError, match="duplicate"):
            compile_records(records)

    @pytest.mark.parametrize("code", ["", "abc", "-1", "70000", "5.0", "0", "1000"])
    def test_bad_country_code_aborts(self, make_record, code):
        with pytest.raises(CompilationError):
            compile_records([make_record(country_code=code)])

    @pytest.mark.parametrize(
        "field", ["region_code", "sub_region_code", "intermediate_region_code"]
    )
    @pytest.mark.parametrize("code", ["x", "65536", "1e3"])
    def test_bad_hierarchy_code_aborts(self, make_record, field, code):
        with pytest.raises(CompilationError):
            compile_records([make_record(**{field: code})])

    @pytest.mark.parametrize(
        "overrides",
        [{"alpha2": "no"}, {"alpha2": "N"}, {"alpha2": "N0"}, {"alpha3": "NO"}, {"alpha3": "Nor"}],
    )
    def test_bad_alpha_codes_abort(self, make_record, overrides):
        with pytest.raises(CompilationError):
            compile_records([make_record(**overrides)])

    def test_empty_name_aborts(self, make_record):
        with pytest.raises(CompilationError):
            compile_records([make_record(name="")])

    def test_conflicting_hierarchy_code_aborts(self, make_record):
        records = [
            make_record(),
            make_record(alpha2="SE", alpha3="SWE", country_code="752", region_code="151"),
        ]
        with pytest.raises(CompilationError, match="Region 'Europe'"):
            compile_records(records)

    def test_colliding_identifiers_abort(self, make_record):
        records = [
            make_record(),
            make_record(
                alpha2="SE", alpha3="SWE", country_code="752", sub_region="Northern-Europe"
            ),
        ]
        with pytest.raises(CompilationError, match="collides"):
            compile_records(records)

    @pytest.mark.parametrize("label", ["Undefined", "---", "none"])
    def test_unusable_labels_abort(self, make_record, label):
        with pytest.raises(CompilationError):
            compile_records([make_record(region=label)])


class TestGeneratedModule:
    def test_bundled_module_is_in_sync(self, bundled_records):
        assert verify_module(compile_records(bundled_records), generated) == []

    def test_rendered_module_round_trips(self, sample_records, make_record, tmp_path):
        records = sample_records + [
            make_record(
                name="Côte d'Ivoire",
                alpha2="CI",
                alpha3="CIV",
                country_code="384",
                region="Africa",
                sub_region="Sub-Saharan Africa",
                intermediate_region="Western Africa",
                region_code="002",
                sub_region_code="202",
                intermediate_region_code="911",
            )
        ]
        compiled = compile_records(records)
        output = tmp_path / "generated.py"
        write_module(compiled, str(output))

        module = load_module(str(output))

        assert verify_module(compiled, module) == []
        ivory_coast = module.DEFINITIONS[-1]
        assert ivory_coast.name == "Côte d'Ivoire"
        assert ivory_coast.intermediate_region_code == 911
        assert ivory_coast.sub_region is module.SubRegion.SubSaharanAfrica
        assert module.ALPHA3_INDEX[module.Alpha3.CIV] == 384
        assert module.INTERMEDIATE_REGION_INDEX[module.IntermediateRegion.Undefined] == (578, 10)

    def test_render_is_deterministic(self, sample_records):
        assert render_module(compile_records(sample_records)) == render_module(
            compile_records(sample_records)
        )

    def test_verify_reports_differences(self, sample_records, make_record):
        sweden = make_record(alpha2="SE", alpha3="SWE", country_code="752", name="Sweden")
        compiled = compile_records(sample_records + [sweden])
        differences = verify_module(compiled, generated)
        assert differences
        assert any(difference.startswith("Alpha2") for difference in differences)

    def test_load_module_failure(self, tmp_path):
        broken = tmp_path / "broken.py"
        broken.write_text("class Alpha2(:\n", encoding="utf-8")
        with pytest.raises(CompilationError):
            load_module(str(broken))
        with pytest.raises(CompilationError):
            load_module(str(tmp_path / "missing.py"))
