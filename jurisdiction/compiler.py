"""
Classification compiler.

Turns the ordered country-region record feed into the closed enumerations,
the dense definition table and the per-level reverse indices, and emits them
as the Python source of :mod:`jurisdiction.generated`.

Usage:
    python -m jurisdiction.compiler
    python -m jurisdiction.compiler --check --cross-check
"""
import argparse
import importlib.util
import keyword
import logging
import re
import sys
import uuid
from dataclasses import dataclass, field
from types import ModuleType
from typing import Iterable, Optional, Sequence

from rich.console import Console
from rich.table import Table
from tqdm import tqdm

from jurisdiction.config import COMPILER_CFG
from jurisdiction.crosscheck import Discrepancy, cross_check
from jurisdiction.exceptions import CompilationError, JurisdictionError
from jurisdiction.feed import Record, load_feed

logger = logging.getLogger(__name__)

UNDEFINED = "Undefined"
U16_MAX = 0xFFFF
COUNTRY_CODE_RANGE = (1, 999)

ALPHA2_PATTERN = re.compile(r"[A-Z]{2}")
ALPHA3_PATTERN = re.compile(r"[A-Z]{3}")

console = Console()


@dataclass(frozen=True)
class ClassVariant:
    """One member of a compiled hierarchy enumeration."""

    identifier: str
    label: str
    code: Optional[int] = None


@dataclass(frozen=True)
class CompiledDefinition:
    country_code: int
    name: str
    alpha2: str
    alpha3: str
    iso_3166_2: str
    region: str
    sub_region: str
    intermediate_region: str
    region_code: int
    sub_region_code: int
    intermediate_region_code: Optional[int]


@dataclass
class CompiledClassification:
    """Everything the generated module is rendered from.

    Hierarchy fields of the definitions and the index keys are enum member
    identifiers, not display labels.
    """

    alpha2: list[str]
    alpha3: list[str]
    regions: list[ClassVariant]
    sub_regions: list[ClassVariant]
    intermediate_regions: list[ClassVariant]
    definitions: list[CompiledDefinition]
    region_index: dict[str, list[int]] = field(default_factory=dict)
    sub_region_index: dict[str, list[int]] = field(default_factory=dict)
    intermediate_region_index: dict[str, list[int]] = field(default_factory=dict)


def label_identifier(label: str) -> str:
    """
    Build the enum member name for a hierarchy label.

    Examples:
        'Northern Europe' -> 'NorthernEurope'
        'Sub-Saharan Africa' -> 'SubSaharanAfrica'
        'South-eastern Asia' -> 'SouthEasternAsia'
    """
    words = re.findall(r"[A-Za-z0-9]+", label)
    return "".join(word[0].upper() + word[1:] for word in words)


def _parse_u16(text: str, column: str, row: int) -> int:
    if not (text.isascii() and text.isdigit()):
        raise CompilationError(
            f"Row {row}: {column} {text!r} is not an unsigned integer"
        )
    value = int(text)
    if value > U16_MAX:
        raise CompilationError(
            f"Row {row}: {column} {value} is not representable as u16"
        )
    return value


def _parse_hierarchy_code(text: str, column: str, row: int) -> Optional[int]:
    """Blank means unassigned; anything else must be a valid u16."""
    if not text:
        return None
    return _parse_u16(text, column, row)


class _HierarchyLevel:
    """Collects the distinct labels of one hierarchy level in first-seen order."""

    def __init__(self, enum_name: str):
        self.enum_name = enum_name
        self._variants: dict[str, ClassVariant] = {}
        self._identifiers: dict[str, str] = {}

    def add(self, label: str, code: Optional[int], row: int) -> str:
        if not label:
            return UNDEFINED

        variant = self._variants.get(label)
        if variant is not None:
            if variant.code != code:
                raise CompilationError(
                    f"Row {row}: {self.enum_name} {label!r} has code {code}, "
                    f"previously {variant.code}"
                )
            return variant.identifier

        identifier = label_identifier(label)
        if not identifier.isidentifier() or keyword.iskeyword(identifier):
            raise CompilationError(
                f"Row {row}: {self.enum_name} {label!r} yields no usable identifier"
            )
        if identifier == UNDEFINED:
            raise CompilationError(
                f"Row {row}: {self.enum_name} {label!r} collides with {UNDEFINED}"
            )
        if identifier in self._identifiers:
            raise CompilationError(
                f"Row {row}: {self.enum_name} {label!r} collides with "
                f"{self._identifiers[identifier]!r} as {identifier}"
            )

        self._identifiers[identifier] = label
        self._variants[label] = ClassVariant(identifier, label, code)
        return identifier

    def variants(self) -> list[ClassVariant]:
        return [*self._variants.values(), ClassVariant(UNDEFINED, "")]


def _group(
    definitions: Sequence[CompiledDefinition],
    variants: Sequence[ClassVariant],
    attribute: str,
) -> dict[str, list[int]]:
    index: dict[str, list[int]] = {variant.identifier: [] for variant in variants}
    for definition in definitions:
        index[getattr(definition, attribute)].append(definition.country_code)
    return index


def compile_records(
    records: Iterable[Record], show_progress: bool = False
) -> CompiledClassification:
    """
    Compile the ordered record feed into the classification tables.

    Args:
        records: Raw records in feed order
        show_progress: Display a progress bar while compiling

    Returns:
        CompiledClassification: Enumerations, definitions and reverse indices

    Raises:
        CompilationError: If any record is malformed or conflicts with another
    """
    regions = _HierarchyLevel("Region")
    sub_regions = _HierarchyLevel("SubRegion")
    intermediate_regions = _HierarchyLevel("IntermediateRegion")

    seen_alpha2: dict[str, int] = {}
    seen_alpha3: dict[str, int] = {}
    seen_country_codes: dict[int, int] = {}
    definitions: list[CompiledDefinition] = []

    for row, record in enumerate(
        tqdm(records, desc="Compiling records", disable=not show_progress), 1
    ):
        if not record.name:
            raise CompilationError(f"Row {row}: name is empty")
        if not ALPHA2_PATTERN.fullmatch(record.alpha2):
            raise CompilationError(f"Row {row}: invalid alpha-2 code {record.alpha2!r}")
        if not ALPHA3_PATTERN.fullmatch(record.alpha3):
            raise CompilationError(f"Row {row}: invalid alpha-3 code {record.alpha3!r}")

        country_code = _parse_u16(record.country_code, "country code", row)
        low, high = COUNTRY_CODE_RANGE
        if not low <= country_code <= high:
            raise CompilationError(
                f"Row {row}: country code {country_code} outside [{low}, {high}]"
            )

        for value, seen, label in (
            (record.alpha2, seen_alpha2, "alpha-2 code"),
            (record.alpha3, seen_alpha3, "alpha-3 code"),
            (country_code, seen_country_codes, "country code"),
        ):
            if value in seen:
                raise CompilationError(
                    f"Row {row}: duplicate {label} {value!r}, first seen in row {seen[value]}"
                )
            seen[value] = row

        region_code = _parse_hierarchy_code(record.region_code, "region code", row)
        sub_region_code = _parse_hierarchy_code(
            record.sub_region_code, "sub-region code", row
        )
        intermediate_region_code = _parse_hierarchy_code(
            record.intermediate_region_code, "intermediate-region code", row
        )

        definitions.append(
            CompiledDefinition(
                country_code=country_code,
                name=record.name,
                alpha2=record.alpha2,
                alpha3=record.alpha3,
                iso_3166_2=record.iso_3166_2,
                region=regions.add(record.region, region_code, row),
                sub_region=sub_regions.add(record.sub_region, sub_region_code, row),
                intermediate_region=intermediate_regions.add(
                    record.intermediate_region, intermediate_region_code, row
                ),
                region_code=region_code or 0,
                sub_region_code=sub_region_code or 0,
                # 0 is the "not applicable" sentinel of the dataset
                intermediate_region_code=intermediate_region_code or None,
            )
        )

    compiled = CompiledClassification(
        alpha2=[definition.alpha2 for definition in definitions],
        alpha3=[definition.alpha3 for definition in definitions],
        regions=regions.variants(),
        sub_regions=sub_regions.variants(),
        intermediate_regions=intermediate_regions.variants(),
        definitions=definitions,
    )
    compiled.region_index = _group(definitions, compiled.regions, "region")
    compiled.sub_region_index = _group(definitions, compiled.sub_regions, "sub_region")
    compiled.intermediate_region_index = _group(
        definitions, compiled.intermediate_regions, "intermediate_region"
    )

    logger.info(
        "Compiled %s definitions: %s regions, %s sub-regions, %s intermediate regions",
        len(definitions),
        len(compiled.regions),
        len(compiled.sub_regions),
        len(compiled.intermediate_regions),
    )
    return compiled


_HEADER = '''\
# This file is generated by `python -m jurisdiction.compiler`. Do not edit.
"""Compiled ISO 3166 and UN M49 classification tables."""
from jurisdiction.codes import AlphaCode, HierarchyClass
from jurisdiction.definition import Definition
'''

_ENUM_DOCS = {
    "Alpha2": "Two alpha character ISO 3166 country code.",
    "Alpha3": "Three alpha character ISO 3166 country code.",
    "Region": "The high level UN M49 region a jurisdiction zones to.",
    "SubRegion": "A subdivision within a Region.",
    "IntermediateRegion": "A subdivision within a SubRegion.",
}


def _render_enum(name: str, base: str, members: Iterable[tuple[str, str]]) -> list[str]:
    lines = ["", "", f"class {name}({base}):", f'    """{_ENUM_DOCS[name]}"""', ""]
    lines.extend(f"    {identifier} = {label!r}" for identifier, label in members)
    return lines


def _render_index(
    name: str, enum_name: str, index: dict[str, list[int]]
) -> list[str]:
    lines = ["", f"{name}: dict[{enum_name}, tuple[int, ...]] = {{"]
    for identifier, codes in index.items():
        body = ", ".join(str(code) for code in codes)
        if len(codes) == 1:
            body += ","
        lines.append(f"    {enum_name}.{identifier}: ({body}),")
    lines.append("}")
    return lines


def render_module(compiled: CompiledClassification) -> str:
    """Render the compiled classification as the source of the generated module."""
    lines = _HEADER.splitlines()
    lines += _render_enum("Alpha2", "AlphaCode", ((a, a) for a in compiled.alpha2))
    lines += _render_enum("Alpha3", "AlphaCode", ((a, a) for a in compiled.alpha3))
    for enum_name, variants in (
        ("Region", compiled.regions),
        ("SubRegion", compiled.sub_regions),
        ("IntermediateRegion", compiled.intermediate_regions),
    ):
        lines += _render_enum(
            enum_name, "HierarchyClass", ((v.identifier, v.label) for v in variants)
        )

    lines += ["", "", "DEFINITIONS: tuple[Definition, ...] = ("]
    for d in compiled.definitions:
        lines.append(
            f"    Definition({d.country_code}, {d.name!r}, Alpha2.{d.alpha2}, "
            f"Alpha3.{d.alpha3}, {d.iso_3166_2!r}, Region.{d.region}, "
            f"SubRegion.{d.sub_region}, IntermediateRegion.{d.intermediate_region}, "
            f"{d.region_code}, {d.sub_region_code}, {d.intermediate_region_code!r}),"
        )
    lines.append(")")

    for name, enum_name, attribute in (
        ("ALPHA2_INDEX", "Alpha2", "alpha2"),
        ("ALPHA3_INDEX", "Alpha3", "alpha3"),
    ):
        lines += ["", f"{name}: dict[{enum_name}, int] = {{"]
        lines.extend(
            f"    {enum_name}.{getattr(d, attribute)}: {d.country_code},"
            for d in compiled.definitions
        )
        lines.append("}")

    lines += _render_index("REGION_INDEX", "Region", compiled.region_index)
    lines += _render_index("SUB_REGION_INDEX", "SubRegion", compiled.sub_region_index)
    lines += _render_index(
        "INTERMEDIATE_REGION_INDEX",
        "IntermediateRegion",
        compiled.intermediate_region_index,
    )
    return "\n".join(lines) + "\n"


def write_module(compiled: CompiledClassification, output_path: str) -> None:
    source = render_module(compiled)
    with open(output_path, "w", encoding=COMPILER_CFG["encoding"]) as file:
        file.write(source)
    logger.info("Wrote %s definitions to %s", len(compiled.definitions), output_path)


def load_module(path: str) -> ModuleType:
    """Import a generated module from an arbitrary file path."""
    spec = importlib.util.spec_from_file_location(
        f"jurisdiction._generated_{uuid.uuid4().hex}", path
    )
    if spec is None or spec.loader is None:
        raise CompilationError(f"Cannot load generated module: {path}")
    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except (OSError, SyntaxError, ImportError) as exc:
        raise CompilationError(f"Cannot load generated module: {path}") from exc
    return module


def verify_module(
    compiled: CompiledClassification, module: ModuleType
) -> list[str]:
    """
    Compare a compiled classification with a generated module.

    Returns:
        list[str]: Human readable differences, empty when the module is in sync
    """
    differences: list[str] = []

    def compare(what: str, expected, actual) -> None:
        if expected != actual:
            differences.append(f"{what}: expected {expected!r}, found {actual!r}")

    try:
        compare("Alpha2", compiled.alpha2, [m.value for m in module.Alpha2])
        compare("Alpha3", compiled.alpha3, [m.value for m in module.Alpha3])
        for enum_name, variants, index, generated_index in (
            ("Region", compiled.regions, compiled.region_index, module.REGION_INDEX),
            (
                "SubRegion",
                compiled.sub_regions,
                compiled.sub_region_index,
                module.SUB_REGION_INDEX,
            ),
            (
                "IntermediateRegion",
                compiled.intermediate_regions,
                compiled.intermediate_region_index,
                module.INTERMEDIATE_REGION_INDEX,
            ),
        ):
            compare(
                enum_name,
                [(v.identifier, v.label) for v in variants],
                [(m.name, m.value) for m in getattr(module, enum_name)],
            )
            compare(
                f"{enum_name} index",
                index,
                {member.name: list(codes) for member, codes in generated_index.items()},
            )

        compare(
            "ALPHA2_INDEX",
            {d.alpha2: d.country_code for d in compiled.definitions},
            {member.value: code for member, code in module.ALPHA2_INDEX.items()},
        )
        compare(
            "ALPHA3_INDEX",
            {d.alpha3: d.country_code for d in compiled.definitions},
            {member.value: code for member, code in module.ALPHA3_INDEX.items()},
        )

        compare("definition count", len(compiled.definitions), len(module.DEFINITIONS))
        for expected, actual in zip(compiled.definitions, module.DEFINITIONS):
            compare(
                f"definition {expected.alpha2}",
                expected,
                CompiledDefinition(
                    country_code=actual.country_code,
                    name=actual.name,
                    alpha2=actual.alpha2.value,
                    alpha3=actual.alpha3.value,
                    iso_3166_2=actual.iso_3166_2,
                    region=actual.region.name,
                    sub_region=actual.sub_region.name,
                    intermediate_region=actual.intermediate_region.name,
                    region_code=actual.region_code,
                    sub_region_code=actual.sub_region_code,
                    intermediate_region_code=actual.intermediate_region_code,
                ),
            )
    except AttributeError as exc:
        differences.append(f"generated module is incomplete: {exc}")

    return differences


def display_summary(compiled: CompiledClassification) -> None:
    table = Table(title="Compiled Classification")
    table.add_column("Level", style="cyan")
    table.add_column("Variant", style="green")
    table.add_column("Code", style="yellow")
    table.add_column("Jurisdictions", justify="right")

    for level, variants, index in (
        ("Region", compiled.regions, compiled.region_index),
        ("SubRegion", compiled.sub_regions, compiled.sub_region_index),
        (
            "IntermediateRegion",
            compiled.intermediate_regions,
            compiled.intermediate_region_index,
        ),
    ):
        for variant in variants:
            code = "" if variant.code is None else f"{variant.code:03d}"
            table.add_row(
                level, variant.identifier, code, str(len(index[variant.identifier]))
            )

    console.print(table)
    console.print(f"Definitions: {len(compiled.definitions)}")
    console.print(f"Alpha-2 codes: {len(compiled.alpha2)}")
    console.print(f"Alpha-3 codes: {len(compiled.alpha3)}")


def display_discrepancies(discrepancies: list[Discrepancy]) -> None:
    if not discrepancies:
        console.print("All records agree with the ISO 3166 reference data.")
        return

    table = Table(title="ISO 3166 Discrepancies")
    table.add_column("Alpha-2", style="cyan")
    table.add_column("Field", style="yellow")
    table.add_column("Dataset", style="red")
    table.add_column("Reference", style="green")
    for discrepancy in discrepancies:
        table.add_row(
            discrepancy.alpha2,
            discrepancy.field,
            discrepancy.actual,
            discrepancy.expected,
        )
    console.print(table)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """
    Entry point for the classification compiler.

    Command-line arguments:
        - --input: Path to the country-region dataset (CSV or JSON)
        - --output: Path of the generated module
        - --check: Verify the generated module instead of rewriting it
        - --cross-check: Compare records with pycountry's ISO 3166 data
        - --log_level: Logging level (default: INFO)
    """
    parser = argparse.ArgumentParser(
        description="Compile the country-region dataset into jurisdiction lookup tables."
    )
    parser.add_argument(
        "--input",
        type=str,
        default=COMPILER_CFG["dataset_path"],
        help="The country-region dataset path.",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=COMPILER_CFG["output_path"],
        help="The generated module path.",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Fail if the generated module is out of date instead of rewriting it.",
    )
    parser.add_argument(
        "--cross-check",
        action="store_true",
        help="Report records that disagree with pycountry's ISO 3166 data.",
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging level (default: INFO)",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level, format="%(asctime)s - %(levelname)s - %(message)s"
    )

    try:
        records = load_feed(args.input)
        compiled = compile_records(
            records, show_progress=COMPILER_CFG["show_progress"]
        )

        if args.cross_check:
            display_discrepancies(cross_check(records))

        if args.check:
            differences = verify_module(compiled, load_module(args.output))
            if differences:
                for difference in differences:
                    logger.error("Stale generated module: %s", difference)
                sys.exit(1)
            logger.info("Generated module %s is up to date", args.output)
        else:
            write_module(compiled, args.output)

        display_summary(compiled)
    except JurisdictionError as e:
        logger.error("Compilation failed: %s", e)
        sys.exit(1)
    except OSError as e:
        logger.error("File system error: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
