"""
TLE Unit Normalizer

Rescales decoded TLE fields from the units the format is written in into the
units the SGP4 initializer expects:

    mean_motion          rev/day     -> rad/min      (/ XPDOTP)
    mean_motion_dot      rev/day^2   -> rad/min^2    (/ (XPDOTP * 1440))
    mean_motion_ddot     rev/day^3   -> rad/min^3    (/ (XPDOTP * 1440^2))
    inclination, right_ascension,
    argument_of_perigee, mean_anomaly
                         degrees     -> radians      (* DEG2RAD)

Eccentricity and the drag term (bstar) are dimensionless in both
representations and pass through untouched.
"""

import logging
from typing import TYPE_CHECKING, Dict, Mapping

from config import DEG2RAD, MINUTES_PER_DAY, XPDOTP

if TYPE_CHECKING:
    from tle_decoder.record import OrbitalRecord

logger = logging.getLogger(__name__)

# Divisors taking the mean motion terms from rev/day^k to rad/min^k
RATE_DIVISORS: Dict[str, float] = {
    "mean_motion": XPDOTP,
    "mean_motion_dot": XPDOTP * MINUTES_PER_DAY,
    "mean_motion_ddot": XPDOTP * MINUTES_PER_DAY * MINUTES_PER_DAY,
}

# Fields carried in degrees by the TLE and in radians by SGP4
ANGLE_FIELDS = ("inclination", "right_ascension", "argument_of_perigee", "mean_anomaly")


def to_internal_units(values: Mapping[str, float]) -> Dict[str, float]:
    """
    Rescale external TLE units to internal SGP4 units.

    Args:
        values: Mapping holding the three mean motion terms and the four angles

    Returns:
        New dictionary with only the rescaled fields
    """
    internal = {name: values[name] / divisor for name, divisor in RATE_DIVISORS.items()}
    for name in ANGLE_FIELDS:
        internal[name] = values[name] * DEG2RAD
    return internal


def to_external_units(values: Mapping[str, float]) -> Dict[str, float]:
    """Inverse of ``to_internal_units``: radians and rad/min back to TLE units."""
    external = {name: values[name] * divisor for name, divisor in RATE_DIVISORS.items()}
    for name in ANGLE_FIELDS:
        external[name] = values[name] / DEG2RAD
    return external


def normalize_units(record: "OrbitalRecord") -> "OrbitalRecord":
    """
    Convert an OrbitalRecord's fields to internal units, in place.

    Must run exactly once per record. A second call rescales the already
    internal values again and silently corrupts the record; nothing here
    checks ``record.normalized`` to prevent that.

    Args:
        record: OrbitalRecord freshly returned by ``parse_tle``

    Returns:
        The same record, with ``normalized`` set
    """
    for name, value in to_internal_units(vars(record)).items():
        setattr(record, name, value)
    record.normalized = True

    logger.debug(
        f"Normalized units for catalog {record.catalog_number}: "
        f"n={record.mean_motion:.10f} rad/min"
    )
    return record
