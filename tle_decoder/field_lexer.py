"""
TLE Numeric Field Lexer

Extracts the fixed-column fields of a Two-Line Element set and converts them
to numbers. The column layout lives in a single table, ``TLE_FIELDS``, that
maps each field name to its line, its half-open column range and its decode
rule. Columns are 0-based and end-exclusive:

    Field                     Line  Columns  Encoding
    catalog_number              1    2:7     trimmed integer
    epoch_year                  1   18:20    two-digit integer
    epoch_days                  1   20:32    fractional day of year
    mean_motion_dot             1   33:43    signed float, spaces removed
    mean_motion_ddot            1   44:52    sign + mantissa + exponent
    bstar                       1   53:61    sign + mantissa + exponent
    inclination                 2    8:16    degrees
    right_ascension             2   17:25    degrees
    eccentricity                2   26:33    digits, implied leading "0."
    argument_of_perigee         2   34:42    degrees
    mean_anomaly                2   43:51    degrees
    mean_motion                 2   52:63    revolutions per day

Every decode rule fails with ``FieldParseError`` on text that is not a number.
There is no default value for a blank field.

References:
    Kelso, T.S. "CelesTrak TLE Format Documentation"
    https://celestrak.org/columns/v04n03/
"""

import math
import re
from typing import Callable, Dict, NamedTuple, Optional, Tuple, Union

from tle_decoder.errors import FieldParseError

Number = Union[int, float]

# Plain decimal text: optional sign, digits with an optional point, optional exponent.
_INTEGER_RE = re.compile(r"[+-]?[0-9]+\Z")
_DECIMAL_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?\Z")
_DIGITS_RE = re.compile(r"[0-9]+\Z")

# Sign-padding blanks removed from signed fields before parsing
MAX_SPACE_REMOVALS = 2


class FieldSpec(NamedTuple):
    """One fixed-column TLE field and the rule that decodes it."""

    name: str
    line: int
    start: int
    end: int
    decode: Callable[[str, str], Number]


def extract(line: str, start: int, end: int) -> str:
    """Return the half-open column range ``[start, end)`` of a line."""
    return line[start:end]


def parse_integer(field: str, text: str, raw: Optional[str] = None) -> int:
    """Parse decimal integer text, reporting failures against ``field``."""
    if not _INTEGER_RE.match(text):
        raise FieldParseError(field, text if raw is None else raw)
    return int(text)


def parse_decimal(field: str, text: str, raw: Optional[str] = None) -> float:
    """Parse decimal float text, reporting failures against ``field``.

    Text whose value overflows a float is rejected like malformed text.
    """
    if not _DECIMAL_RE.match(text):
        raise FieldParseError(field, text if raw is None else raw)
    value = float(text)
    if not math.isfinite(value):
        raise FieldParseError(field, text if raw is None else raw)
    return value


def remove_sign_padding(text: str) -> str:
    """Drop up to two blanks, the ones left by optional sign characters."""
    return text.replace(" ", "", MAX_SPACE_REMOVALS)


def implied_exponent(sign: str, mantissa: str, exponent: str) -> str:
    """
    Rebuild decimal text from the TLE implied-decimal/exponent encoding.

    The encoded field ``-12345-4`` stands for ``-0.12345e-4``: a sign column
    (blank for positive), a mantissa with an implied leading decimal point,
    and a signed single-digit power of ten.

    Args:
        sign: Sign column, ``"-"``, ``"+"`` or blank
        mantissa: Digits that follow the implied decimal point
        exponent: Signed power-of-ten column pair

    Returns:
        Text in ``sign.mantissaEexponent`` form with sign padding removed
    """
    return remove_sign_padding(sign + "." + mantissa + "e" + exponent)


def decode_int(field: str, raw: str) -> int:
    return parse_integer(field, raw.strip(), raw)


def decode_float(field: str, raw: str) -> float:
    return parse_decimal(field, raw.strip(), raw)


def decode_signed_float(field: str, raw: str) -> float:
    return parse_decimal(field, remove_sign_padding(raw), raw)


def decode_implied_exponent(field: str, raw: str) -> float:
    """Decode an 8-column ``s mmmmm ee`` field such as the drag term."""
    sign, mantissa, exponent = raw[0:1], raw[1:6], raw[6:8]
    return parse_decimal(field, implied_exponent(sign, mantissa, exponent), raw)


def decode_implied_decimal(field: str, raw: str) -> float:
    """Decode a digits-only field whose leading ``0.`` is implied."""
    if not _DIGITS_RE.match(raw):
        raise FieldParseError(field, raw)
    return parse_decimal(field, "0." + raw, raw)


TLE_FIELDS: Tuple[FieldSpec, ...] = (
    # Line 1
    FieldSpec("catalog_number", 1, 2, 7, decode_int),
    FieldSpec("epoch_year", 1, 18, 20, decode_int),
    FieldSpec("epoch_days", 1, 20, 32, decode_float),
    FieldSpec("mean_motion_dot", 1, 33, 43, decode_signed_float),
    FieldSpec("mean_motion_ddot", 1, 44, 52, decode_implied_exponent),
    FieldSpec("bstar", 1, 53, 61, decode_implied_exponent),
    # Line 2
    FieldSpec("inclination", 2, 8, 16, decode_float),
    FieldSpec("right_ascension", 2, 17, 25, decode_float),
    FieldSpec("eccentricity", 2, 26, 33, decode_implied_decimal),
    FieldSpec("argument_of_perigee", 2, 34, 42, decode_float),
    FieldSpec("mean_anomaly", 2, 43, 51, decode_float),
    FieldSpec("mean_motion", 2, 52, 63, decode_float),
)


def decode_field(spec: FieldSpec, line1: str, line2: str) -> Number:
    """Slice and decode a single field of a TLE pair."""
    line = line1 if spec.line == 1 else line2
    return spec.decode(spec.name, extract(line, spec.start, spec.end))


def decode_fields(line1: str, line2: str) -> Dict[str, Number]:
    """
    Decode every field of a TLE pair in table order.

    The lines must already have passed ``validate_lines``. Decoding stops at
    the first field that fails; its ``FieldParseError`` propagates.

    Args:
        line1: First line of TLE
        line2: Second line of TLE

    Returns:
        Dictionary mapping field name to value, in the TLE's external units
    """
    return {spec.name: decode_field(spec, line1, line2) for spec in TLE_FIELDS}
