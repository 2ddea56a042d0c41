"""
TLE Decoder Configuration and Constants

This module contains the fixed constants used to decode Two-Line Element sets
and to hand the decoded records to the SGP4 initializer.

Constants:
    Unit conversion factors used to move TLE fields from their external units
    (degrees, revolutions/day) into the internal SGP4 units (radians,
    radians/minute), as in Vallado et al. (2006, AAS 06-675).

Sample TLE Data:
    Hardcoded ISS TLE used by the module demonstration.

References:
    Vallado, D. A., Crawford, P., Hujsak, R., & Kelso, T. S. (2006).
    Revisiting Spacetrack Report #3. AIAA 2006-6753.
"""

import math
from typing import Dict, Any

# Unit conversion
TWOPI: float = 2.0 * math.pi
DEG2RAD: float = math.pi / 180.0
MINUTES_PER_DAY: float = 1440.0
XPDOTP: float = MINUTES_PER_DAY / TWOPI  # rev/day to rad/min (229.1831180523293)

# Minimum line lengths checked before any column is read
MIN_LINE1_LENGTH: int = 61
MIN_LINE2_LENGTH: int = 63

# Two-digit epoch years below this value belong to the 2000s
EPOCH_YEAR_PIVOT: int = 57

# Julian date of 1949 December 31 00:00 UT, the SGP4 initializer's epoch origin
SGP4_EPOCH_JD: float = 2433281.5

# SGP4 defaults
DEFAULT_GRAVITY_MODEL: str = "wgs72"
DEFAULT_OPSMODE: str = "i"  # 'i' = improved, 'a' = AFSPC compatibility

# Sample ISS TLE for demonstrations
SAMPLE_ISS_TLE: Dict[str, Any] = {
    'name': 'ISS (ZARYA)',
    'norad_id': 25544,
    'line1': '1 25544U 98067A   23259.57580000  .00012022  00000-0  21844-3 0  9995',
    'line2': '2 25544  51.6416 220.9944 0004263 122.0101 312.2755 15.49541986415598',
}
