"""Pydantic schemas for the codice fiscale decoder.

Pure data classes — no I/O. Used as outputs of the decoding pipeline and
as the JSON shape of the HTTP API.
"""

from __future__ import annotations

from datetime import date

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from fiscalcode.models.enums import ErrorKind, Gender

# ---------------------------------------------------------------------------
# Place of birth
# ---------------------------------------------------------------------------


class PlaceOfBirth(BaseModel):
    """One entry of the place-of-birth table, keyed by Belfiore code.

    Accepts the camelCase keys of the reference JSON file as well as
    field names. Foreign countries have no city or state.
    """

    model_config = ConfigDict(frozen=True)

    country_code: str = Field(validation_alias=AliasChoices("country_code", "countryCode"))
    country_name: str = Field(validation_alias=AliasChoices("country_name", "countryName"))
    city: str | None = None
    state: str | None = None   # province abbreviation, e.g. "RM"

    def __str__(self) -> str:
        return (
            f"Country: {self.country_name} ({self.country_code})\n"
            f"\tCity: {self.city or 'N/A'} ({self.state or 'N/A'})"
        )


# ---------------------------------------------------------------------------
# Decoder output
# ---------------------------------------------------------------------------


class DecodedIdentity(BaseModel):
    """Data extracted from a codice fiscale that passed every check."""

    model_config = ConfigDict(frozen=True)

    code: str                     # as given, uppercased
    canonical_code: str           # omocodia reversed
    born_on: date
    gender: Gender
    place_code: str               # Belfiore code, e.g. "H501"
    place_of_birth: PlaceOfBirth
    is_omocode: bool = False
    calendar_adjusted: bool = False   # day clamped to the month's last day


class CfResult(BaseModel):
    """Non-raising decode result, for callers cleaning records in bulk."""

    valid: bool
    codice_fiscale: str
    identity: DecodedIdentity | None = None
    error_kind: ErrorKind | None = None
    error: str | None = None
