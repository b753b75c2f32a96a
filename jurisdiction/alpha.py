"""ISO 3166 alpha code enumerations and their canonical text form."""
from typing import Union

from jurisdiction.generated import Alpha2, Alpha3

__all__ = ["Alpha2", "Alpha3", "format_alpha", "parse_alpha2", "parse_alpha3"]


def parse_alpha2(text: str) -> Alpha2:
    """Parse exact uppercase alpha-2 text; raises ValueError otherwise."""
    return Alpha2.parse(text)


def parse_alpha3(text: str) -> Alpha3:
    """Parse exact uppercase alpha-3 text; raises ValueError otherwise."""
    return Alpha3.parse(text)


def format_alpha(code: Union[Alpha2, Alpha3]) -> str:
    return str(code)
