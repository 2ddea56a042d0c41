"""
TLE Decoding Errors

All decoding failures derive from ``ParseError`` (a ``ValueError``), so callers
that already guard TLE handling with ``except ValueError`` keep working.
A failure is terminal for the TLE pair being decoded: no partial record is
ever returned.
"""


class ParseError(ValueError):
    """Base class for errors raised while decoding a TLE pair."""


class FormatError(ParseError):
    """A TLE line is too short to hold every fixed-column field."""

    def __init__(self, line_number: int, line: str, minimum: int):
        self.line_number = line_number
        self.line = line
        self.minimum = minimum
        super().__init__(
            f"Line {line_number} '{line}' too short "
            f"({len(line)} chars, need at least {minimum})"
        )


class FieldParseError(ParseError):
    """A fixed-column field could not be converted to a number."""

    def __init__(self, field: str, raw: str):
        self.field = field
        self.raw = raw
        super().__init__(f"Cannot parse field '{field}' from {raw!r}")


class UnknownGravityModelError(ValueError):
    """The requested gravity model name is not one of the supported models."""
