# config.py
import os
from typing import TypedDict

PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))


class FeedConfig(TypedDict):
    name: str
    alpha2: str
    alpha3: str
    country_code: str
    iso_3166_2: str
    region: str
    sub_region: str
    intermediate_region: str
    region_code: str
    sub_region_code: str
    intermediate_region_code: str


class CompilerConfig(TypedDict):
    dataset_path: str
    output_path: str
    encoding: str
    show_progress: bool


# Column headers of the ISO 3166 / UN M49 country-region dataset
FEED_CFG: FeedConfig = {
    "name": "name",
    "alpha2": "alpha-2",
    "alpha3": "alpha-3",
    "country_code": "country-code",
    "iso_3166_2": "iso_3166-2",
    "region": "region",
    "sub_region": "sub-region",
    "intermediate_region": "intermediate-region",
    "region_code": "region-code",
    "sub_region_code": "sub-region-code",
    "intermediate_region_code": "intermediate-region-code",
}

COMPILER_CFG: CompilerConfig = {
    "dataset_path": os.path.join(PACKAGE_DIR, "data", "country-region.csv"),
    "output_path": os.path.join(PACKAGE_DIR, "generated.py"),
    "encoding": "utf-8",
    "show_progress": True,
}
