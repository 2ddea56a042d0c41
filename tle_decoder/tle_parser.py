"""
TLE Parser Module

Assembles OrbitalRecords from Two-Line Element sets and hands them to the
SGP4 initializer of the sgp4 library.

Pipeline for one TLE pair:
    validate line lengths -> decode fixed-column fields -> resolve epoch
    -> snapshot summary elements -> normalize units -> initialize SGP4

``parse_tle`` stops after the snapshot and leaves the record in TLE units;
``tle_to_record`` runs the whole pipeline. Any decoding failure raises and no
record is returned.
"""

import logging
from typing import Union

from sgp4.api import Satrec

from config import DEFAULT_GRAVITY_MODEL, DEFAULT_OPSMODE, SGP4_EPOCH_JD
from tle_decoder.epoch_resolver import resolve_epoch
from tle_decoder.field_lexer import decode_fields
from tle_decoder.gravity import GravityModel, select_gravity_model
from tle_decoder.line_validator import validate_lines
from tle_decoder.record import Elements, OrbitalRecord
from tle_decoder.unit_normalizer import normalize_units

logger = logging.getLogger(__name__)


def parse_tle(
    line1: str,
    line2: str,
    gravity_model: Union[str, GravityModel] = DEFAULT_GRAVITY_MODEL,
) -> OrbitalRecord:
    """
    Decode a TLE pair into an OrbitalRecord in TLE units.

    Angles stay in degrees and mean motion in revolutions/day. The epoch is
    resolved to a four-digit year and a Julian date.

    Args:
        line1: First line of TLE
        line2: Second line of TLE
        gravity_model: Gravity model name ("wgs72old", "wgs72", "wgs84")

    Returns:
        Decoded OrbitalRecord

    Raises:
        FormatError: If a line is too short
        FieldParseError: If a field is not a valid number
        UnknownGravityModelError: If the gravity model name is not supported
    """
    validate_lines(line1, line2)
    model = select_gravity_model(gravity_model)

    fields = decode_fields(line1, line2)

    epoch = resolve_epoch(fields["epoch_year"], fields["epoch_days"])

    record = OrbitalRecord(
        line1=line1,
        line2=line2,
        catalog_number=fields["catalog_number"],
        epoch_year=epoch.year,
        epoch_days=fields["epoch_days"],
        julian_epoch=epoch.julian_date,
        epoch_datetime=epoch.to_datetime(),
        mean_motion_dot=fields["mean_motion_dot"],
        mean_motion_ddot=fields["mean_motion_ddot"],
        bstar=fields["bstar"],
        inclination=fields["inclination"],
        right_ascension=fields["right_ascension"],
        eccentricity=fields["eccentricity"],
        argument_of_perigee=fields["argument_of_perigee"],
        mean_anomaly=fields["mean_anomaly"],
        mean_motion=fields["mean_motion"],
        gravity_model=model,
        elements=Elements(
            mean_motion=fields["mean_motion"],
            eccentricity=fields["eccentricity"],
            inclination=fields["inclination"],
        ),
    )

    logger.debug(
        f"Decoded TLE for catalog {record.catalog_number}, "
        f"epoch {record.epoch_datetime.isoformat()} (JD {record.julian_epoch:.8f})"
    )
    return record


def initialize_record(record: OrbitalRecord, opsmode: str = DEFAULT_OPSMODE) -> OrbitalRecord:
    """
    Run the SGP4 initializer on a normalized record.

    The initializer receives the record's elements in internal units and the
    epoch as days since 1949 December 31 00:00 UT. Its error code is copied
    to ``record.error`` as is; a non-zero code is logged, not raised.

    Args:
        record: OrbitalRecord that has been through ``normalize_units``
        opsmode: 'i' for improved mode, 'a' for AFSPC compatibility mode

    Returns:
        The same record with ``satrec`` and ``error`` set
    """
    satrec = Satrec()
    satrec.sgp4init(
        record.gravity_model.value,
        opsmode,
        record.catalog_number,
        record.julian_epoch - SGP4_EPOCH_JD,
        record.bstar,
        record.mean_motion_dot,
        record.mean_motion_ddot,
        record.eccentricity,
        record.argument_of_perigee,
        record.inclination,
        record.mean_anomaly,
        record.mean_motion,
        record.right_ascension,
    )

    record.satrec = satrec
    record.error = satrec.error

    if record.error != 0:
        logger.warning(
            f"SGP4 initialization of catalog {record.catalog_number} "
            f"returned error {record.error}: {record.error_message}"
        )
    return record


def tle_to_record(
    line1: str,
    line2: str,
    gravity_model: Union[str, GravityModel] = DEFAULT_GRAVITY_MODEL,
    opsmode: str = DEFAULT_OPSMODE,
) -> OrbitalRecord:
    """
    Decode, normalize and initialize a TLE pair.

    Args:
        line1: First line of TLE
        line2: Second line of TLE
        gravity_model: Gravity model name ("wgs72old", "wgs72", "wgs84")
        opsmode: 'i' for improved mode, 'a' for AFSPC compatibility mode

    Returns:
        Initialized OrbitalRecord in internal units. Check ``record.error``
        for the initializer's verdict.
    """
    record = parse_tle(line1, line2, gravity_model)
    normalize_units(record)
    return initialize_record(record, opsmode)


if __name__ == "__main__":
    from config import SAMPLE_ISS_TLE
    from logging_config import configure_logging, get_logger

    configure_logging(logging.DEBUG)
    demo_logger = get_logger("tle_decoder.demo")

    record = tle_to_record(SAMPLE_ISS_TLE["line1"], SAMPLE_ISS_TLE["line2"])
    demo_logger.info(f"Decoded {SAMPLE_ISS_TLE['name']} (NORAD {record.catalog_number})")
    demo_logger.info(f"Epoch: {record.epoch_datetime.isoformat()}  JD {record.julian_epoch:.8f}")
    demo_logger.info(f"Summary elements: {record.elements}")
    demo_logger.info(f"Initializer error: {record.error} ({record.error_message})")

    error, r, v = record.propagate(0.0)
    demo_logger.info(f"Position at epoch: [{r[0]:.3f}, {r[1]:.3f}, {r[2]:.3f}] km")
    demo_logger.info(f"Velocity at epoch: [{v[0]:.6f}, {v[1]:.6f}, {v[2]:.6f}] km/s")
