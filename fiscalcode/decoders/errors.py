"""Typed failures raised while decoding a codice fiscale.

Every failure is local to one code: callers decide whether to skip, log or
abort. ``user_message`` is the Italian text shown to end users.
"""

from __future__ import annotations

from fiscalcode.models.enums import ErrorKind


class FiscalCodeError(Exception):
    """Base class for every per-code decoding failure."""

    kind: ErrorKind

    def __init__(self, message: str, user_message: str) -> None:
        super().__init__(message)
        self.user_message = user_message


class ShapeError(FiscalCodeError):
    """Wrong length, characters outside A–Z/0–9, or a letter where a digit belongs."""

    kind = ErrorKind.SHAPE


class ChecksumMismatch(FiscalCodeError):
    """The check character does not match the one computed from the first 15."""

    kind = ErrorKind.CHECKSUM

    def __init__(self, expected: str, found: str) -> None:
        super().__init__(
            f"Invalid check character: found {found}, expected {expected}",
            user_message="Carattere di controllo non valido",
        )
        self.expected = expected
        self.found = found


class InvalidMonth(FiscalCodeError):
    """Month position holds a letter outside the twelve month letters."""

    kind = ErrorKind.MONTH

    def __init__(self, letter: str) -> None:
        super().__init__(
            f"Invalid birth month letter: {letter}",
            user_message=f"Lettera mese non valida: {letter}",
        )
        self.letter = letter


class InvalidDay(FiscalCodeError):
    """Day value is outside 1–31 / 41–71, or not a real date in strict mode."""

    kind = ErrorKind.DAY

    def __init__(self, message: str, value: int) -> None:
        super().__init__(message, user_message=f"Giorno di nascita non valido: {value}")
        self.value = value


class UnknownPlaceCode(FiscalCodeError):
    """Well-formed code whose place of birth is missing from the lookup table."""

    kind = ErrorKind.PLACE

    def __init__(self, place_code: str) -> None:
        super().__init__(
            f"Unknown place of birth code: {place_code}",
            user_message=f"Codice del luogo di nascita sconosciuto: {place_code}",
        )
        self.place_code = place_code


class PlaceTableError(Exception):
    """Raised when the place-of-birth reference file cannot be loaded."""
