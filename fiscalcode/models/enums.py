"""Domain enums used across decoders and Pydantic schemas.

All enums use str mixin for JSON serialization.
"""

from __future__ import annotations

from enum import Enum


class Gender(str, Enum):
    """Gender encoded in the day-of-birth field (+40 for women)."""

    MALE = "male"
    FEMALE = "female"

    @property
    def code(self) -> str:
        """Single-letter form used on Italian documents ("M" / "F")."""
        return "M" if self is Gender.MALE else "F"


class ErrorKind(str, Enum):
    """Why a codice fiscale was rejected — lets callers tell garbage from incomplete data."""

    SHAPE = "shape_error"
    CHECKSUM = "checksum_mismatch"
    MONTH = "invalid_month"
    DAY = "invalid_day"
    PLACE = "unknown_place_code"
