"""
TLE Line Validator

Length gate that runs before any column of a TLE pair is read. Only the line
lengths are checked: a malformed character inside a column is reported later,
by the numeric field parse for that column.
"""

import logging

from config import MIN_LINE1_LENGTH, MIN_LINE2_LENGTH
from tle_decoder.errors import FormatError

logger = logging.getLogger(__name__)


def validate_lines(line1: str, line2: str) -> None:
    """
    Check that both TLE lines are long enough to slice every field.

    Args:
        line1: First line of TLE
        line2: Second line of TLE

    Raises:
        FormatError: If line 1 is shorter than 61 characters or line 2 is
            shorter than 63 characters
    """
    if len(line1) < MIN_LINE1_LENGTH:
        logger.debug(f"Rejecting line 1 of length {len(line1)}")
        raise FormatError(1, line1, MIN_LINE1_LENGTH)

    if len(line2) < MIN_LINE2_LENGTH:
        logger.debug(f"Rejecting line 2 of length {len(line2)}")
        raise FormatError(2, line2, MIN_LINE2_LENGTH)
