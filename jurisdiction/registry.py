"""Process-wide mapping from numeric country code to compiled definition."""
import logging
import threading
from typing import Iterable, Optional

from jurisdiction.definition import Definition
from jurisdiction.exceptions import RegistryInvariantError

logger = logging.getLogger(__name__)


class ClassificationRegistry:
    """Thread-safe, lazily built singleton over the compiled definitions."""

    _instance: Optional["ClassificationRegistry"] = None
    _lock = threading.Lock()

    def __init__(self, definitions: Iterable[Definition]):
        self._definitions: dict[int, Definition] = {}

        for definition in definitions:
            if definition.country_code in self._definitions:
                raise RegistryInvariantError(
                    f"country code {definition.country_code} is defined twice"
                )
            self._definitions[definition.country_code] = definition

    @classmethod
    def get_instance(cls) -> "ClassificationRegistry":
        """Get or create the singleton instance."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    from jurisdiction.generated import DEFINITIONS

                    cls._instance = cls(DEFINITIONS)
                    logger.debug(
                        "Classification registry built with %s definitions",
                        len(DEFINITIONS),
                    )
        return cls._instance

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, country_code: int) -> bool:
        return country_code in self._definitions

    def lookup(self, country_code: int) -> Definition:
        try:
            return self._definitions[country_code]
        except KeyError as exc:
            raise RegistryInvariantError(
                f"country code {country_code} is not defined in the registry"
            ) from exc


def lookup(country_code: int) -> Definition:
    """
    Return the definition for a country code taken from the closed enumerations.

    Raises:
        RegistryInvariantError: If the code is unknown, which means the
            compiled tables are inconsistent
    """
    return ClassificationRegistry.get_instance().lookup(country_code)
