"""
TLE Epoch Resolver

Turns the two-digit epoch year and fractional day of year of a TLE into a
four-digit year, a calendar date and a Julian date. The calendar arithmetic
is delegated to the sgp4 library (``days2mdhms`` and ``jday``), the same
routines its own TLE reader uses, so decoded epochs line up exactly with
``Satrec.twoline2rv``.
"""

from datetime import datetime, timedelta, timezone
from typing import NamedTuple

from sgp4.functions import days2mdhms, jday

from config import EPOCH_YEAR_PIVOT


class ResolvedEpoch(NamedTuple):
    """Calendar breakdown and Julian date of a TLE epoch (UTC)."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: float
    julian_date: float

    def to_datetime(self) -> datetime:
        """Return the epoch as a timezone-aware UTC datetime."""
        dt = datetime(self.year, self.month, self.day, self.hour, self.minute,
                      tzinfo=timezone.utc)
        return dt + timedelta(seconds=self.second)


def resolve_year(two_digit_year: int) -> int:
    """
    Expand a two-digit TLE epoch year.

    Years 57-99 belong to the 1900s and 00-56 to the 2000s; the first
    artificial satellite was launched in 1957.
    """
    if two_digit_year < EPOCH_YEAR_PIVOT:
        return 2000 + two_digit_year
    return 1900 + two_digit_year


def resolve_epoch(two_digit_year: int, epoch_days: float) -> ResolvedEpoch:
    """
    Resolve a TLE epoch to a calendar date and Julian date.

    Args:
        two_digit_year: Epoch year as written in the TLE
        epoch_days: Day of year with fractional part (1.0 = Jan 1 00:00)

    Returns:
        ResolvedEpoch with the four-digit year and Julian date
    """
    year = resolve_year(two_digit_year)

    month, day, hour, minute, second = days2mdhms(year, epoch_days)
    # Fractional seconds are kept, not truncated to whole seconds, so the
    # Julian date matches Satrec.twoline2rv to the sub-second.
    jd, fraction = jday(year, month, day, hour, minute, second)

    return ResolvedEpoch(
        year=year,
        month=int(month),
        day=int(day),
        hour=int(hour),
        minute=int(minute),
        second=second,
        julian_date=jd + fraction,
    )
