"""Check character computation.

The 16th character is derived from the first 15 exactly as written: the
odd/even tables cover all 36 characters, so omocodia letters are summed
as letters and no normalization is needed first.
"""

from __future__ import annotations

from fiscalcode.decoders.errors import ChecksumMismatch, ShapeError
from fiscalcode.decoders.tables import (
    CHECK_CHARACTERS,
    CHECK_POSITION,
    CODE_LENGTH,
    EVEN_VALUES,
    ODD_VALUES,
    TEMPORARY_CODE_LENGTH,
)


def compute_check_character(code: str) -> str:
    """Compute the check character from the first 15 characters of ``code``.

    Args:
        code: Uppercased code; only the first 15 characters are read.

    Raises:
        ShapeError: If fewer than 15 characters are given or one falls
            outside A–Z/0–9.
    """
    if len(code) < CHECK_POSITION:
        raise ShapeError(
            f"Need {CHECK_POSITION} characters to compute the check character, got {len(code)}",
            user_message="Formato non valido: il codice fiscale deve essere di 16 caratteri alfanumerici",
        )
    total = 0
    for i, char in enumerate(code[:CHECK_POSITION]):
        table = ODD_VALUES if i % 2 == 0 else EVEN_VALUES  # i is 0-based, parity is 1-based
        value = table.get(char)
        if value is None:
            raise ShapeError(
                f"Invalid character {char!r} at position {i + 1}",
                user_message="Formato non valido: caratteri non ammessi",
            )
        total += value
    return CHECK_CHARACTERS[total % 26]


def verify_checksum(code: str) -> None:
    """Compare the 16th character, as written, with the computed one.

    Raises:
        ShapeError: If ``code`` is not 16 characters long.
        ChecksumMismatch: If the check character does not match.
    """
    if len(code) != CODE_LENGTH:
        raise ShapeError(
            f"Invalid length: {len(code)}",
            user_message="Formato non valido: il codice fiscale deve essere di 16 caratteri alfanumerici",
        )
    expected = compute_check_character(code)
    found = code[CHECK_POSITION]
    if found != expected:
        raise ChecksumMismatch(expected=expected, found=found)


# ---------------------------------------------------------------------------
# Temporary (provisional) codes — 11 digits, Luhn-style check digit
# ---------------------------------------------------------------------------


def compute_temporary_check_digit(digits: str) -> str:
    """Check digit for the first 10 digits of a temporary code."""
    values = [int(d) for d in digits[:TEMPORARY_CODE_LENGTH - 1]]
    odd_sum = sum(values[0::2])
    even_sum = 0
    for value in values[1::2]:
        doubled = value * 2
        even_sum += doubled - 9 if doubled >= 10 else doubled
    return str((10 - (odd_sum + even_sum) % 10) % 10)


def verify_temporary(code: str) -> bool:
    """True iff ``code`` is an 11-digit temporary code with a matching check digit."""
    code = code.strip()
    if len(code) != TEMPORARY_CODE_LENGTH or not code.isascii() or not code.isdigit():
        return False
    return code[-1] == compute_temporary_check_digit(code)
