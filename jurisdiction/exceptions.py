class JurisdictionError(Exception):
    """Base class for all errors raised by the jurisdiction package."""


class UnrecognizedCodeError(JurisdictionError, ValueError):
    """Text matched neither an alpha-2 nor an alpha-3 code."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"unrecognized ISO 3166 alpha country code: {text!r}")


class FeedError(JurisdictionError):
    """The record feed could not be read or decoded."""


class CompilationError(JurisdictionError):
    """The record feed is malformed or inconsistent and cannot be compiled."""


class RegistryInvariantError(JurisdictionError, RuntimeError):
    """The compiled tables and the registry disagree.

    This is a defect in the compiled artifact, never a user error.
    """
