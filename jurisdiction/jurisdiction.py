"""The lightweight handle used to identify a jurisdiction and its metadata."""
from typing import Optional, Union

from jurisdiction import registry
from jurisdiction.definition import Definition
from jurisdiction.exceptions import UnrecognizedCodeError
from jurisdiction.generated import (
    ALPHA2_INDEX,
    ALPHA3_INDEX,
    INTERMEDIATE_REGION_INDEX,
    REGION_INDEX,
    SUB_REGION_INDEX,
    Alpha2,
    Alpha3,
    IntermediateRegion,
    Region,
    SubRegion,
)

HierarchyValue = Union[Region, SubRegion, IntermediateRegion]

_HIERARCHY_INDEXES = {
    Region: REGION_INDEX,
    SubRegion: SUB_REGION_INDEX,
    IntermediateRegion: INTERMEDIATE_REGION_INDEX,
}


class Jurisdiction:
    """
    A reference sized handle on a country or area of the world.

    The handle only holds a reference to the compiled definition in the
    registry; every accessor is a plain attribute read. Two handles are equal
    when their numeric country codes are equal.

    Examples:
        >>> norway = Jurisdiction.from_str("NO")
        >>> norway == Alpha3.NOR
        True
        >>> norway.country_code
        578
    """

    __slots__ = ("_definition",)

    def __init__(self, code: Union[Alpha2, Alpha3]):
        if isinstance(code, Alpha2):
            country_code = ALPHA2_INDEX[code]
        elif isinstance(code, Alpha3):
            country_code = ALPHA3_INDEX[code]
        else:
            raise TypeError(
                f"Jurisdiction expects an Alpha2 or Alpha3 code, got {type(code).__name__}"
            )
        self._definition: Definition = registry.lookup(country_code)

    @classmethod
    def _from_country_code(cls, country_code: int) -> "Jurisdiction":
        jurisdiction = cls.__new__(cls)
        jurisdiction._definition = registry.lookup(country_code)
        return jurisdiction

    @classmethod
    def from_str(cls, text: str) -> "Jurisdiction":
        """
        Parse an exact alpha-2 or alpha-3 code, trying alpha-2 first.

        Raises:
            UnrecognizedCodeError: If ``text`` is neither code
        """
        for alpha in (Alpha2, Alpha3):
            try:
                code = alpha.parse(text)
            except ValueError:
                continue
            return cls(code)
        raise UnrecognizedCodeError(text)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Jurisdiction):
            return self._definition.country_code == other._definition.country_code
        if isinstance(other, Alpha2):
            return self._definition.alpha2 is other
        if isinstance(other, Alpha3):
            return self._definition.alpha3 is other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._definition.country_code)

    def __repr__(self) -> str:
        return f"Jurisdiction({self._definition.alpha2.value}: {self._definition.name})"

    def __str__(self) -> str:
        return self._definition.alpha2.value

    def __reduce__(self):
        return (Jurisdiction, (self._definition.alpha2,))

    @property
    def name(self) -> str:
        """The English name of this jurisdiction."""
        return self._definition.name

    @property
    def country_code(self) -> int:
        """The ISO 3166 numeric country code."""
        return self._definition.country_code

    @property
    def alpha2(self) -> Alpha2:
        """The ISO 3166 two letter code."""
        return self._definition.alpha2

    @property
    def alpha3(self) -> Alpha3:
        """The ISO 3166 three letter code."""
        return self._definition.alpha3

    @property
    def subdivision_prefix(self) -> str:
        """The ISO 3166-2 prefix of this jurisdiction's subdivision codes."""
        return self._definition.iso_3166_2

    @property
    def region(self) -> Region:
        """The UN M49 region this jurisdiction is situated in."""
        return self._definition.region

    @property
    def sub_region(self) -> SubRegion:
        """The UN M49 sub-region of the region this jurisdiction is situated in."""
        return self._definition.sub_region

    @property
    def intermediate_region(self) -> IntermediateRegion:
        """
        The UN M49 intermediate region of the sub-region.

        Most jurisdictions have none and return ``IntermediateRegion.Undefined``.
        """
        return self._definition.intermediate_region

    @property
    def region_code(self) -> int:
        return self._definition.region_code

    @property
    def sub_region_code(self) -> int:
        return self._definition.sub_region_code

    @property
    def intermediate_region_code(self) -> Optional[int]:
        """None when the jurisdiction has no intermediate region."""
        return self._definition.intermediate_region_code

    @classmethod
    def jurisdictions_in(cls, classification: HierarchyValue) -> list["Jurisdiction"]:
        """Return every jurisdiction zoning to a region, sub-region or intermediate region."""
        index = _HIERARCHY_INDEXES.get(type(classification))
        if index is None:
            raise TypeError(
                f"expected Region, SubRegion or IntermediateRegion, "
                f"got {type(classification).__name__}"
            )
        return [cls._from_country_code(code) for code in index[classification]]

    @classmethod
    def in_region(cls, region: Region) -> list["Jurisdiction"]:
        return cls.jurisdictions_in(region)

    @classmethod
    def in_sub_region(cls, sub_region: SubRegion) -> list["Jurisdiction"]:
        return cls.jurisdictions_in(sub_region)

    @classmethod
    def in_intermediate_region(
        cls, intermediate_region: IntermediateRegion
    ) -> list["Jurisdiction"]:
        return cls.jurisdictions_in(intermediate_region)
