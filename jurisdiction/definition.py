from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from jurisdiction.generated import (
        Alpha2,
        Alpha3,
        IntermediateRegion,
        Region,
        SubRegion,
    )


@dataclass(frozen=True)
class Definition:
    """Static classification data for one jurisdiction.

    Instances only exist inside the compiled table; they are referenced,
    never built, at runtime.
    """

    country_code: int
    name: str
    alpha2: "Alpha2"
    alpha3: "Alpha3"
    iso_3166_2: str
    region: "Region"
    sub_region: "SubRegion"
    intermediate_region: "IntermediateRegion"
    region_code: int
    sub_region_code: int
    intermediate_region_code: Optional[int]
