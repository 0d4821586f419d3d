"""
Exception hierarchy for SimpleNEM12 parsing.

Every exception here is fatal: it aborts the whole parse and no partial
result is returned. Per-record problems that only skip a single line
(bad dates, unknown record types, short records) are logged instead of
raised.

All errors derive from ValueError so callers that only care about bad
input can keep catching that.
"""


class SimpleNem12Error(ValueError):
    """Base exception for all SimpleNEM12 parse failures."""


class MalformedStreamError(SimpleNem12Error):
    """Raised when the file does not contain exactly one 100 and one 900 record."""

    def __init__(self, message: str = "Beginning/End of record not found.") -> None:
        super().__init__(message)


class InvalidNmiError(SimpleNem12Error):
    """Raised when a 200 record carries an empty or too short NMI."""

    def __init__(self, message: str = "Invalid NMI encountered") -> None:
        super().__init__(message)


class InvalidUnitError(SimpleNem12Error):
    """Raised when a 200 record carries an unknown energy unit code."""


class InvalidQualityError(SimpleNem12Error):
    """Raised when a 300 record carries an unknown quality code."""


class InvalidVolumeError(SimpleNem12Error):
    """Raised when a 300 record volume is not a decimal number."""


class VolumeBeforeHeaderError(SimpleNem12Error):
    """Raised when a 300 record appears before any 200 record."""

    def __init__(self, message: str = "Volume record encountered before any NMI record") -> None:
        super().__init__(message)
