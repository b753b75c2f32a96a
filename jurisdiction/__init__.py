"""
Lightweight static jurisdiction information.

Jurisdictions are identified by ISO 3166 alpha-2, alpha-3 and numeric codes
and classified by the UN M49 region hierarchy. All data is compiled ahead of
time into :mod:`jurisdiction.generated` by :mod:`jurisdiction.compiler`.
"""
from jurisdiction.alpha import Alpha2, Alpha3
from jurisdiction.exceptions import (
    CompilationError,
    FeedError,
    JurisdictionError,
    RegistryInvariantError,
    UnrecognizedCodeError,
)
from jurisdiction.jurisdiction import Jurisdiction
from jurisdiction.region import IntermediateRegion, Region, SubRegion

__all__ = [
    "Alpha2",
    "Alpha3",
    "CompilationError",
    "FeedError",
    "IntermediateRegion",
    "Jurisdiction",
    "JurisdictionError",
    "Region",
    "RegistryInvariantError",
    "SubRegion",
    "UnrecognizedCodeError",
]
