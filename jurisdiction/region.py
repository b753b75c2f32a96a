"""
UN M49 region definitions.

The hierarchy is taken from the UN methodology on standard country or area
codes for statistical use (M49): region, sub-region and intermediate region.
Each level has an ``Undefined`` member for jurisdictions without an
assignment at that level.
"""
from jurisdiction.generated import IntermediateRegion, Region, SubRegion

__all__ = ["IntermediateRegion", "Region", "SubRegion"]
