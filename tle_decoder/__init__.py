"""
TLE Decoder Package

Decodes Two-Line Element (TLE) sets into normalized orbital records and
initializes the sgp4 library's propagator on them.

Modules:
    field_lexer: Fixed-column field table and numeric decode rules
    line_validator: Minimum line length gate
    epoch_resolver: Two-digit year expansion and Julian date of the epoch
    unit_normalizer: TLE units to SGP4 internal units
    gravity: Gravity model selection
    record: OrbitalRecord and Elements data model
    tle_parser: parse_tle and tle_to_record entry points

References:
    Vallado, D. A., Crawford, P., Hujsak, R., & Kelso, T. S. (2006).
    Revisiting Spacetrack Report #3. AIAA 2006-6753.
"""

from tle_decoder.errors import (
    FieldParseError,
    FormatError,
    ParseError,
    UnknownGravityModelError,
)
from tle_decoder.gravity import GravityModel, select_gravity_model
from tle_decoder.record import Elements, OrbitalRecord
from tle_decoder.tle_parser import initialize_record, parse_tle, tle_to_record
from tle_decoder.unit_normalizer import normalize_units

__version__ = "1.0.0"

__all__ = [
    "Elements",
    "FieldParseError",
    "FormatError",
    "GravityModel",
    "OrbitalRecord",
    "ParseError",
    "UnknownGravityModelError",
    "initialize_record",
    "normalize_units",
    "parse_tle",
    "select_gravity_model",
    "tle_to_record",
]
