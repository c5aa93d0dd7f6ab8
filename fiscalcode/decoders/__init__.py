"""Deterministic codice fiscale decoders."""

from fiscalcode.decoders.codice_fiscale import (
    FiscalCode,
    FiscalCodeDecoder,
    decode_cf,
    extract,
    validate,
    validate_or_error,
)
from fiscalcode.decoders.errors import (
    ChecksumMismatch,
    FiscalCodeError,
    InvalidDay,
    InvalidMonth,
    ShapeError,
    UnknownPlaceCode,
)
from fiscalcode.decoders.fields import CenturyPolicy
from fiscalcode.decoders.places import PlaceOfBirthResolver, load_place_table

__all__ = [
    "CenturyPolicy",
    "ChecksumMismatch",
    "FiscalCode",
    "FiscalCodeDecoder",
    "FiscalCodeError",
    "InvalidDay",
    "InvalidMonth",
    "PlaceOfBirthResolver",
    "ShapeError",
    "UnknownPlaceCode",
    "decode_cf",
    "extract",
    "load_place_table",
    "validate",
    "validate_or_error",
]
