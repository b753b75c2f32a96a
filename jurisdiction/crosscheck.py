"""Cross-check of dataset records against pycountry's ISO 3166-1 database."""
import logging
from dataclasses import dataclass
from typing import Iterable

import pycountry

from jurisdiction.feed import Record

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Discrepancy:
    alpha2: str
    field: str
    expected: str
    actual: str


def _reference_country(alpha2: str):
    try:
        return pycountry.countries.get(alpha_2=alpha2)
    except LookupError:
        return None


def cross_check(records: Iterable[Record]) -> list[Discrepancy]:
    """
    Compare each record's codes with the ISO 3166-1 reference data.

    Discrepancies are reported, never raised: the dataset remains the
    authority for what gets compiled.

    Returns:
        list[Discrepancy]: One entry per disagreeing field, in feed order
    """
    discrepancies: list[Discrepancy] = []

    for record in records:
        country = _reference_country(record.alpha2)
        if country is None:
            discrepancies.append(Discrepancy(record.alpha2, "alpha-2", "", record.alpha2))
            continue

        if country.alpha_3 != record.alpha3:
            discrepancies.append(
                Discrepancy(record.alpha2, "alpha-3", country.alpha_3, record.alpha3)
            )
        if country.numeric != record.country_code.zfill(3):
            discrepancies.append(
                Discrepancy(
                    record.alpha2, "country-code", country.numeric, record.country_code
                )
            )

    for discrepancy in discrepancies:
        logger.warning(
            "%s: %s is %r in the dataset but %r in ISO 3166",
            discrepancy.alpha2,
            discrepancy.field,
            discrepancy.actual,
            discrepancy.expected,
        )
    return discrepancies
