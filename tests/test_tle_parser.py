"""
Tests for the TLE Parser Entry Points

Checks parse_tle and tle_to_record end to end, and cross-validates the
normalized and initialized records against the sgp4 library's own TLE reader.

Run with:
    python -m pytest tests/test_tle_parser.py -v
"""

import math
import unittest
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone

import numpy as np
from sgp4.api import WGS84, Satrec

from tle_decoder import (
    FieldParseError,
    FormatError,
    GravityModel,
    OrbitalRecord,
    UnknownGravityModelError,
    parse_tle,
    tle_to_record,
)


# ISS (September 2023) and Vanguard 2 (Vallado et al. 2006 test case)
ISS_LINE1 = "1 25544U 98067A   23259.57580000  .00012022  00000-0  21844-3 0  9995"
ISS_LINE2 = "2 25544  51.6416 220.9944 0004263 122.0101 312.2755 15.49541986415598"
VANGUARD_LINE1 = "1 00005U 58002B   00179.78495062  .00000023  00000-0  28098-4 0  4753"
VANGUARD_LINE2 = "2 00005  34.2682 348.7242 1859667 331.7664  19.3264 10.82419157413667"


class TestParseTLE(unittest.TestCase):
    """Decoding without normalization."""

    def test_iss_record(self):
        """ISS TLE decodes to the expected record."""
        record = parse_tle(ISS_LINE1, ISS_LINE2, "wgs72")

        self.assertIsInstance(record, OrbitalRecord)
        self.assertEqual(record.catalog_number, 25544)
        self.assertEqual(record.epoch_year, 2023)
        self.assertAlmostEqual(record.epoch_days, 259.5758, places=10)
        self.assertAlmostEqual(record.inclination, 51.6416, places=10)
        self.assertAlmostEqual(record.right_ascension, 220.9944, places=10)
        self.assertAlmostEqual(record.eccentricity, 0.0004263, places=15)
        self.assertAlmostEqual(record.mean_motion, 15.49541986, places=10)
        self.assertAlmostEqual(record.bstar, 0.00021844, places=15)
        self.assertIs(record.gravity_model, GravityModel.WGS72)
        self.assertEqual(record.line1, ISS_LINE1)
        self.assertEqual(record.line2, ISS_LINE2)

    def test_parsed_record_is_not_initialized(self):
        """parse_tle leaves the record unnormalized and uninitialized."""
        record = parse_tle(ISS_LINE1, ISS_LINE2)

        self.assertFalse(record.normalized)
        self.assertFalse(record.is_initialized)
        self.assertEqual(record.error, 0)
        self.assertEqual(record.error_message, "No error")
        with self.assertRaises(RuntimeError):
            record.propagate(0.0)

    def test_summary_elements(self):
        """Summary elements mirror the decoded fields."""
        record = parse_tle(ISS_LINE1, ISS_LINE2)

        self.assertEqual(record.elements.mean_motion, record.mean_motion)
        self.assertEqual(record.elements.eccentricity, record.eccentricity)
        self.assertEqual(record.elements.inclination, record.inclination)

    def test_deterministic(self):
        """Same lines give equal records."""
        self.assertEqual(parse_tle(ISS_LINE1, ISS_LINE2), parse_tle(ISS_LINE1, ISS_LINE2))

    def test_two_digit_year_pivot(self):
        """Epoch years 56 and 57 resolve to 2056 and 1957."""
        line1_56 = ISS_LINE1[:18] + "56" + ISS_LINE1[20:]
        line1_57 = ISS_LINE1[:18] + "57" + ISS_LINE1[20:]

        self.assertEqual(parse_tle(line1_56, ISS_LINE2).epoch_year, 2056)
        self.assertEqual(parse_tle(line1_57, ISS_LINE2).epoch_year, 1957)

    def test_first_day_of_2024(self):
        """Epoch 24001.0 resolves to 2024-01-01 00:00 UTC."""
        line1 = ISS_LINE1[:18] + "24001.00000000" + ISS_LINE1[32:]
        record = parse_tle(line1, ISS_LINE2)

        self.assertEqual(record.epoch_year, 2024)
        self.assertEqual(record.epoch_datetime, datetime(2024, 1, 1, tzinfo=timezone.utc))
        self.assertAlmostEqual(record.julian_epoch, 2460310.5, places=8)

    def test_blank_field_names_the_field(self):
        """A blank field fails with its name and raw text."""
        line2 = ISS_LINE2[:34] + " " * 8 + ISS_LINE2[42:]

        with self.assertRaises(FieldParseError) as ctx:
            parse_tle(ISS_LINE1, line2)
        self.assertEqual(ctx.exception.field, "argument_of_perigee")
        self.assertEqual(ctx.exception.raw, " " * 8)

    def test_overflowing_mean_motion_rejected(self):
        """Overflowing mean motion raises FieldParseError."""
        line2 = ISS_LINE2[:52] + "    1e99999" + ISS_LINE2[63:]

        with self.assertRaises(FieldParseError) as ctx:
            parse_tle(ISS_LINE1, line2)
        self.assertEqual(ctx.exception.field, "mean_motion")

    def test_overflowing_eccentricity_rejected(self):
        """Exponent text in eccentricity raises FieldParseError."""
        line2 = ISS_LINE2[:26] + "1e99999" + ISS_LINE2[33:]

        with self.assertRaises(FieldParseError) as ctx:
            parse_tle(ISS_LINE1, line2)
        self.assertEqual(ctx.exception.field, "eccentricity")

    def test_short_lines(self):
        """Short lines raise FormatError."""
        with self.assertRaises(FormatError):
            parse_tle(ISS_LINE1[:60], ISS_LINE2)
        with self.assertRaises(FormatError):
            parse_tle(ISS_LINE1, ISS_LINE2[:62])

    def test_short_line_wins_over_unknown_gravity_model(self):
        """Line length is checked before the gravity model name."""
        with self.assertRaises(FormatError):
            parse_tle(ISS_LINE1[:10], ISS_LINE2, "egm96")
        with self.assertRaises(FormatError):
            tle_to_record(ISS_LINE1, ISS_LINE2[:10], "egm96")

    def test_unknown_gravity_model(self):
        """Unsupported gravity model names are rejected."""
        with self.assertRaises(UnknownGravityModelError):
            parse_tle(ISS_LINE1, ISS_LINE2, "wgs99")


class TestTLEToRecord(unittest.TestCase):
    """Full pipeline cross-checked against Satrec.twoline2rv."""

    def assert_matches_reference(self, record, reference):
        pairs = [
            ("inclination", "inclo"),
            ("right_ascension", "nodeo"),
            ("argument_of_perigee", "argpo"),
            ("mean_anomaly", "mo"),
            ("eccentricity", "ecco"),
            ("mean_motion", "no_kozai"),
            ("mean_motion_dot", "ndot"),
            ("mean_motion_ddot", "nddot"),
            ("bstar", "bstar"),
        ]
        for ours, theirs in pairs:
            with self.subTest(field=ours):
                self.assertTrue(
                    math.isclose(getattr(record, ours), getattr(reference, theirs),
                                 rel_tol=1e-12, abs_tol=1e-18),
                    f"{ours}: {getattr(record, ours)!r} != {getattr(reference, theirs)!r}",
                )
        self.assertAlmostEqual(
            record.julian_epoch, reference.jdsatepoch + reference.jdsatepochF, places=8
        )

    def test_iss_matches_sgp4_reader(self):
        """Normalized ISS record matches Satrec.twoline2rv."""
        record = tle_to_record(ISS_LINE1, ISS_LINE2)
        reference = Satrec.twoline2rv(ISS_LINE1, ISS_LINE2)

        self.assertTrue(record.normalized)
        self.assert_matches_reference(record, reference)

    def test_vanguard_matches_sgp4_reader(self):
        """Normalized Vanguard 2 record matches Satrec.twoline2rv."""
        record = tle_to_record(VANGUARD_LINE1, VANGUARD_LINE2)
        reference = Satrec.twoline2rv(VANGUARD_LINE1, VANGUARD_LINE2)

        self.assertEqual(record.epoch_year, 2000)
        self.assert_matches_reference(record, reference)

    def test_initialized_state(self):
        """tle_to_record attaches an initialized Satrec."""
        record = tle_to_record(ISS_LINE1, ISS_LINE2)

        self.assertTrue(record.is_initialized)
        self.assertEqual(record.error, 0)
        self.assertEqual(record.satrec.satnum, 25544)

    def test_propagation_matches_reference(self):
        """Propagated states match the sgp4 reader's satellite."""
        for line1, line2 in ((ISS_LINE1, ISS_LINE2), (VANGUARD_LINE1, VANGUARD_LINE2)):
            record = tle_to_record(line1, line2)
            reference = Satrec.twoline2rv(line1, line2)

            for tsince in (0.0, 60.0, 1440.0):
                with self.subTest(satellite=record.catalog_number, tsince=tsince):
                    error, r, v = record.propagate(tsince)
                    ref_error, r_ref, v_ref = reference.sgp4_tsince(tsince)

                    self.assertEqual(error, ref_error)
                    np.testing.assert_allclose(r, r_ref, atol=1e-6)
                    np.testing.assert_allclose(v, v_ref, atol=1e-9)

    def test_propagation_output(self):
        """Propagation returns 3-vectors at a plausible ISS radius."""
        record = tle_to_record(ISS_LINE1, ISS_LINE2)
        error, r, v = record.propagate(0.0)

        self.assertEqual(error, 0)
        self.assertEqual(r.shape, (3,))
        self.assertEqual(v.shape, (3,))
        # ISS should be at ~400km altitude (6778km from Earth center)
        self.assertGreater(np.linalg.norm(r), 6700)
        self.assertLess(np.linalg.norm(r), 6900)

    def test_gravity_model_reaches_initializer(self):
        """The selected gravity model is used by the initializer."""
        record = tle_to_record(ISS_LINE1, ISS_LINE2, "wgs84")
        reference = Satrec.twoline2rv(ISS_LINE1, ISS_LINE2, WGS84)

        self.assertIs(record.gravity_model, GravityModel.WGS84)
        _, r, _ = record.propagate(30.0)
        _, r_ref, _ = reference.sgp4_tsince(30.0)
        np.testing.assert_allclose(r, r_ref, atol=1e-6)

    def test_afspc_mode(self):
        """AFSPC compatibility mode initializes cleanly."""
        record = tle_to_record(ISS_LINE1, ISS_LINE2, opsmode="a")
        self.assertEqual(record.error, 0)

    def test_summary_elements_survive_normalization(self):
        """Summary elements stay in TLE units after normalization."""
        record = tle_to_record(ISS_LINE1, ISS_LINE2)

        self.assertAlmostEqual(record.elements.mean_motion, 15.49541986, places=10)
        self.assertAlmostEqual(record.elements.inclination, 51.6416, places=10)
        self.assertAlmostEqual(record.mean_motion, 15.49541986 * 2 * math.pi / 1440.0, places=12)

    def test_initializer_error_is_surfaced_not_raised(self):
        """A non-zero initializer code is stored and logged."""
        # 25 rev/day puts the orbit below the Earth's surface
        line2 = ISS_LINE2[:52] + "25.00000000" + ISS_LINE2[63:]

        with self.assertLogs("tle_decoder.tle_parser", level="WARNING"):
            record = tle_to_record(ISS_LINE1, line2)

        self.assertNotEqual(record.error, 0)
        self.assertIsNotNone(record.satrec)
        self.assertNotEqual(record.error_message, "No error")

    def test_concurrent_decoding(self):
        """Parallel decoding gives the same records as serial decoding."""
        pairs = [(ISS_LINE1, ISS_LINE2), (VANGUARD_LINE1, VANGUARD_LINE2)] * 8

        with ThreadPoolExecutor(max_workers=4) as executor:
            records = list(executor.map(lambda pair: parse_tle(*pair), pairs))

        for (line1, line2), record in zip(pairs, records):
            self.assertEqual(record, parse_tle(line1, line2))


if __name__ == "__main__":
    unittest.main()
