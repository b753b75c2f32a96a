"""Base classes for the compiled code and hierarchy enumerations.

The concrete enumerations live in :mod:`jurisdiction.generated`; they are
emitted by the compiler and subclass the bases defined here.
"""
from enum import Enum


class AlphaCode(str, Enum):
    """A closed ISO 3166 alpha code enumeration.

    Member values are the canonical uppercase code text. Parsing is exact:
    no case folding and no whitespace trimming.
    """

    def __str__(self) -> str:
        return self.value

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec)

    @classmethod
    def parse(cls, text: str):
        """Return the member whose code is exactly ``text``.

        Raises:
            ValueError: If ``text`` is not a code of this enumeration
        """
        if not isinstance(text, str):
            raise ValueError(f"{text!r} is not a valid {cls.__name__}")
        return cls(text)


class HierarchyClass(str, Enum):
    """A closed UN M49 hierarchy enumeration with an ``Undefined`` catch-all."""

    def __str__(self) -> str:
        return self.value

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec)

    @classmethod
    def _missing_(cls, value):
        return cls.__members__.get("Undefined")

    @classmethod
    def parse(cls, text: str):
        """Return the member named by ``text``, or ``Undefined`` if none is."""
        return cls(text)

    @property
    def is_undefined(self) -> bool:
        return self.name == "Undefined"
