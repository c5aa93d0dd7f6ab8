"""Birth date, gender and place code extraction from the canonical form.

Only called on codes that passed the checksum; all digit-bearing
positions are guaranteed numeric here.
"""

from __future__ import annotations

import calendar
import logging
from dataclasses import dataclass
from datetime import date

from fiscalcode.decoders.errors import InvalidDay, InvalidMonth
from fiscalcode.decoders.tables import FEMALE_DAY_OFFSET, MONTH_LETTERS, MONTH_POSITION
from fiscalcode.models.enums import Gender

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CenturyPolicy:
    """How a two-digit birth year is placed in a century.

    The code stores only the last two digits of the year, so 1925 and 2025
    look identical. With ``century`` set (e.g. 1900) that century is always
    used. Otherwise the most recent year whose birth date does not fall
    after ``reference_date`` is chosen; ``reference_date`` defaults to the
    day the code is decoded.
    """

    reference_date: date | None = None
    century: int | None = None

    def __post_init__(self) -> None:
        century = self.century
        if century is not None and (century % 100 != 0 or not 100 <= century <= 9900):
            msg = f"century must be a multiple of 100 between 100 and 9900, got {century}"
            raise ValueError(msg)

    def resolve(self, two_digit_year: int, month: int, day: int) -> int:
        if self.century is not None:
            return self.century + two_digit_year
        ref = self.reference_date or date.today()
        year = ref.year // 100 * 100 + two_digit_year
        if (year, month, day) > (ref.year, ref.month, ref.day):
            year -= 100
        return year


@dataclass(frozen=True)
class BirthFields:
    """Fields read from the canonical code, before place resolution."""

    born_on: date
    gender: Gender
    place_code: str
    calendar_adjusted: bool = False


def decode_month(canonical: str) -> int:
    """Month number (1–12) from position 9."""
    letter = canonical[MONTH_POSITION]
    month = MONTH_LETTERS.get(letter)
    if month is None:
        raise InvalidMonth(letter)
    return month


def decode_day(canonical: str) -> tuple[int, Gender]:
    """Day of month and gender from positions 10–11 (women store day + 40)."""
    value = int(canonical[9:11])
    if 1 <= value <= 31:
        return value, Gender.MALE
    if FEMALE_DAY_OFFSET + 1 <= value <= FEMALE_DAY_OFFSET + 31:
        return value - FEMALE_DAY_OFFSET, Gender.FEMALE
    raise InvalidDay(f"Invalid day of birth value: {value:02d}", value)


def decode_birth_date(
    canonical: str,
    policy: CenturyPolicy | None = None,
    strict_calendar: bool = False,
) -> tuple[date, bool]:
    """Birth date from positions 7–11.

    Days 1–31 are accepted in every month. If the day does not exist in the
    resolved month (e.g. 30 February) the date is clamped to the last day
    of the month and the second element of the result is True; with
    ``strict_calendar`` such dates raise ``InvalidDay`` instead.

    Returns:
        (birth date, whether the day was clamped)
    """
    policy = policy or CenturyPolicy()
    month = decode_month(canonical)
    day, _ = decode_day(canonical)
    year = policy.resolve(int(canonical[6:8]), month, day)

    last_day = calendar.monthrange(year, month)[1]
    if day <= last_day:
        return date(year, month, day), False
    if strict_calendar:
        raise InvalidDay(f"Invalid birth date: {year}-{month:02d}-{day:02d}", day)
    logger.debug("Clamping %d-%02d-%02d to day %d", year, month, day, last_day)
    return date(year, month, last_day), True


def decode_place_code(canonical: str) -> str:
    return canonical[11:15]


def extract_fields(
    canonical: str,
    policy: CenturyPolicy | None = None,
    strict_calendar: bool = False,
) -> BirthFields:
    """Decode every positional field of a checksum-validated canonical code."""
    born_on, adjusted = decode_birth_date(canonical, policy, strict_calendar)
    _, gender = decode_day(canonical)
    return BirthFields(
        born_on=born_on,
        gender=gender,
        place_code=decode_place_code(canonical),
        calendar_adjusted=adjusted,
    )
