"""Italian Codice Fiscale (CF) decoder.

Pure Python — no I/O beyond the place table. Validates the 16-character
Italian tax code and extracts birth date, gender and place of birth.

CF format: AAABBB 00C00 D000 E
  - AAA:  surname consonants (then vowels, then X)
  - BBB:  name consonants (then vowels, then X)
  - 00:   year of birth (last 2 digits)
  - C:    month of birth (letter A–T, non-sequential)
  - 00:   day of birth (1–31 male, 41–71 female)
  - D000: birthplace code (codice catastale / Belfiore)
  - E:    check character

Omocodia codes replace digits with letters (0 → L … 9 → V) in the seven
numeric positions. The check character is computed on the code as written;
every other field is read from the canonical (digit-restored) form.

Reference: DPR 605/1973, Decreto MEF 12/03/1974.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import lru_cache

from fiscalcode.config import settings
from fiscalcode.decoders.checksum import verify_checksum, verify_temporary
from fiscalcode.decoders.errors import FiscalCodeError, ShapeError
from fiscalcode.decoders.fields import CenturyPolicy, extract_fields
from fiscalcode.decoders.omocodia import is_omocode, normalize
from fiscalcode.decoders.places import PlaceOfBirthResolver, default_place_table
from fiscalcode.decoders.tables import ALPHABET, CHECK_POSITION, CODE_LENGTH
from fiscalcode.schemas.fiscal_code import CfResult, DecodedIdentity

logger = logging.getLogger(__name__)

_CANONICAL_PATTERN = re.compile(r"^[A-Z]{6}[0-9]{2}[A-Z][0-9]{2}[A-Z][0-9]{3}[A-Z]$")

_FORMAT_MESSAGE = "Formato non valido: il codice fiscale deve essere di 16 caratteri alfanumerici"


def _mask(code: str) -> str:
    """Keep only the name-derived prefix for logs."""
    return code[:6] + "*" * max(len(code) - 6, 0)


# ---------------------------------------------------------------------------
# Value object
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FiscalCode:
    """A structurally valid 16-character code and its canonical form.

    Build with ``FiscalCode.parse``; the checksum is not verified here.
    """

    value: str
    canonical: str

    @classmethod
    def parse(cls, code: str) -> FiscalCode:
        """Strip, uppercase, check shape and reverse omocodia.

        Raises:
            ShapeError: If the code cannot be a codice fiscale.
        """
        stripped = code.strip()
        if not stripped.isascii():
            raise ShapeError("Invalid characters in code", user_message=_FORMAT_MESSAGE)
        cleaned = stripped.upper()
        if len(cleaned) != CODE_LENGTH:
            raise ShapeError(f"Invalid length: {len(cleaned)}", user_message=_FORMAT_MESSAGE)
        if not set(cleaned) <= ALPHABET:
            raise ShapeError("Invalid characters in code", user_message=_FORMAT_MESSAGE)

        canonical = normalize(cleaned)
        if not _CANONICAL_PATTERN.match(canonical):
            raise ShapeError("Invalid fiscal code format", user_message=_FORMAT_MESSAGE)
        return cls(value=cleaned, canonical=canonical)

    @property
    def is_omocode(self) -> bool:
        return is_omocode(self.value)

    @property
    def check_character(self) -> str:
        return self.value[CHECK_POSITION]

    def __str__(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# Decoder
# ---------------------------------------------------------------------------


class FiscalCodeDecoder:
    """Validation and extraction with explicit collaborators.

    Args:
        resolver: Place of birth lookup. Defaults to the configured table,
            loaded on first use.
        century_policy: How two-digit years are placed in a century.
        strict_calendar: Reject days that do not exist in their month
            instead of clamping them.
    """

    def __init__(
        self,
        resolver: PlaceOfBirthResolver | None = None,
        century_policy: CenturyPolicy | None = None,
        strict_calendar: bool = False,
    ) -> None:
        self._resolver = resolver
        self.century_policy = century_policy or CenturyPolicy()
        self.strict_calendar = strict_calendar

    @property
    def resolver(self) -> PlaceOfBirthResolver:
        if self._resolver is None:
            self._resolver = PlaceOfBirthResolver(default_place_table())
        return self._resolver

    def extract(self, code: str) -> DecodedIdentity:
        """Decode a codice fiscale.

        Steps:
        1. Shape check and omocodia reversal
        2. Checksum on the code as written
        3. Birth date and gender from the canonical form
        4. Place of birth lookup

        Raises:
            ShapeError, ChecksumMismatch, InvalidMonth, InvalidDay, UnknownPlaceCode
        """
        fiscal_code = FiscalCode.parse(code)
        verify_checksum(fiscal_code.value)

        fields = extract_fields(fiscal_code.canonical, self.century_policy, self.strict_calendar)
        place = self.resolver.resolve(fields.place_code)

        if fiscal_code.is_omocode:
            logger.debug("Omocodia reversed for %s", _mask(fiscal_code.value))

        return DecodedIdentity(
            code=fiscal_code.value,
            canonical_code=fiscal_code.canonical,
            born_on=fields.born_on,
            gender=fields.gender,
            place_code=fields.place_code,
            place_of_birth=place,
            is_omocode=fiscal_code.is_omocode,
            calendar_adjusted=fields.calendar_adjusted,
        )

    def validate_or_error(self, code: str) -> None:
        """Same checks as ``extract``; raises the specific error on failure."""
        self.extract(code)

    def validate(self, code: str, allow_temporary: bool = False) -> bool:
        """True iff ``code`` is a valid codice fiscale. Never raises.

        With ``allow_temporary`` an 11-digit temporary code with a correct
        check digit is also accepted.
        """
        if allow_temporary and verify_temporary(code):
            return True
        try:
            self.extract(code)
        except FiscalCodeError as exc:
            logger.debug("Rejected %s: %s", _mask(code.strip().upper()), exc)
            return False
        return True

    def decode(self, code: str) -> CfResult:
        """Decode without raising; the failure kind is reported in the result."""
        cleaned = code.strip().upper()
        try:
            identity = self.extract(code)
        except FiscalCodeError as exc:
            return CfResult(
                valid=False,
                codice_fiscale=cleaned,
                error_kind=exc.kind,
                error=exc.user_message,
            )
        return CfResult(valid=True, codice_fiscale=cleaned, identity=identity)


# ---------------------------------------------------------------------------
# Public API — module-level functions backed by the configured decoder
# ---------------------------------------------------------------------------


@lru_cache(maxsize=1)
def default_decoder() -> FiscalCodeDecoder:
    """Decoder built from ``settings.decoder``."""
    cfg = settings.decoder
    return FiscalCodeDecoder(
        century_policy=CenturyPolicy(reference_date=cfg.century_reference_date, century=cfg.century),
        strict_calendar=cfg.strict_calendar,
    )


def validate(code: str, allow_temporary: bool | None = None) -> bool:
    """Check if the string is a valid Italian codice fiscale."""
    if allow_temporary is None:
        allow_temporary = settings.decoder.allow_temporary_codes
    return default_decoder().validate(code, allow_temporary=allow_temporary)


def validate_or_error(code: str) -> None:
    default_decoder().validate_or_error(code)


def extract(code: str) -> DecodedIdentity:
    """Decode a codice fiscale into birth date, gender and place of birth.

    Args:
        code: The 16-character codice fiscale (case-insensitive, surrounding
            whitespace ignored).

    Returns:
        DecodedIdentity for a code that passed every check.

    Raises:
        FiscalCodeError: The specific subclass tells which check failed.
    """
    return default_decoder().extract(code)


def decode_cf(code: str) -> CfResult:
    """Decode a codice fiscale, reporting failures in the result instead of raising."""
    return default_decoder().decode(code)
