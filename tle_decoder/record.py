"""
Orbital Record

The decoded form of one TLE pair. A record is created by ``parse_tle`` with
the angles in degrees and the mean motion in revolutions/day; ``tle_to_record``
additionally rescales it to radians and radians/minute and initializes SGP4
on it. Only the initializer writes ``error`` and ``satrec`` after that.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, NamedTuple, Optional, Tuple

import numpy as np

from tle_decoder.gravity import GravityModel


# SGP4 error code meanings (Vallado et al. 2006)
SGP4_ERROR_CODES = {
    0: "No error",
    1: "Mean eccentricity < 0.0 or >= 1.0, or semi-major axis < 0.95 earth radii",
    2: "Mean motion < 0.0",
    3: "Perturbed eccentricity < 0.0 or > 1.0",
    4: "Semi-latus rectum < 0.0",
    5: "Epoch elements are sub-orbital",
    6: "Satellite has decayed",
}


class Elements(NamedTuple):
    """Summary of the orbit in TLE units, captured before normalization."""

    mean_motion: float  # rev/day
    eccentricity: float
    inclination: float  # degrees


@dataclass
class OrbitalRecord:
    """
    Orbital state decoded from a Two-Line Element set.

    Attributes:
        line1, line2: Source TLE lines
        catalog_number: NORAD catalog number
        epoch_year: Four-digit epoch year
        epoch_days: Fractional day of year (1.0 = Jan 1 00:00 UTC)
        julian_epoch: Julian date of the epoch
        epoch_datetime: Epoch as a UTC datetime
        mean_motion_dot: First derivative of mean motion (rev/day^2 or rad/min^2)
        mean_motion_ddot: Second derivative of mean motion (rev/day^3 or rad/min^3)
        bstar: Drag term (1/earth radii)
        inclination, right_ascension, argument_of_perigee, mean_anomaly:
            Angles in degrees, or radians once normalized
        eccentricity: Eccentricity in [0, 1)
        mean_motion: Mean motion (rev/day, or rad/min once normalized)
        gravity_model: Gravity model handed to the SGP4 initializer
        elements: Snapshot of mean motion, eccentricity and inclination in
            TLE units, unaffected by normalization
        normalized: True once the unit normalizer has run
        error: SGP4 initializer error code (0 = no error)
        satrec: Initialized sgp4 satellite, or None if only parsed
    """

    line1: str
    line2: str
    catalog_number: int
    epoch_year: int
    epoch_days: float
    julian_epoch: float
    epoch_datetime: datetime
    mean_motion_dot: float
    mean_motion_ddot: float
    bstar: float
    inclination: float
    right_ascension: float
    eccentricity: float
    argument_of_perigee: float
    mean_anomaly: float
    mean_motion: float
    gravity_model: GravityModel
    elements: Elements
    normalized: bool = False
    error: int = 0
    satrec: Optional[Any] = field(default=None, repr=False, compare=False)

    @property
    def error_message(self) -> str:
        return SGP4_ERROR_CODES.get(self.error, f"Unknown error code {self.error}")

    @property
    def is_initialized(self) -> bool:
        return self.satrec is not None

    def propagate(self, tsince_minutes: float) -> Tuple[int, np.ndarray, np.ndarray]:
        """
        Propagate the initialized satellite.

        Args:
            tsince_minutes: Time since epoch in minutes

        Returns:
            Tuple of (error_code, position_km, velocity_km_s), positions and
            velocities in the TEME frame

        Raises:
            RuntimeError: If the record was parsed but never initialized
        """
        if self.satrec is None:
            raise RuntimeError(
                f"Satellite {self.catalog_number} is not initialized; "
                f"build it with tle_to_record()"
            )

        error, r_teme, v_teme = self.satrec.sgp4_tsince(tsince_minutes)
        return error, np.array(r_teme), np.array(v_teme)
