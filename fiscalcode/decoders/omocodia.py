"""Omocodia reversal.

When two people would share a code, the Agenzia delle Entrate replaces
digits with letters, right to left, in the seven digit-bearing positions
(0 → L, 1 → M, … 9 → V). Reversing the substitution yields the canonical
code from which birth date and place are read.
"""

from __future__ import annotations

from string import digits as DIGITS

from fiscalcode.decoders.errors import ShapeError
from fiscalcode.decoders.tables import CODE_LENGTH, DIGIT_POSITIONS, OMOCODIA_DIGITS


def _canonical_digit(char: str, position: int) -> str:
    if char in DIGITS:
        return char
    digit = OMOCODIA_DIGITS.get(char)
    if digit is None:
        raise ShapeError(
            f"Character {char!r} at position {position + 1} is neither a digit nor an omocodia letter",
            user_message="Formato non valido: carattere non ammesso in una posizione numerica",
        )
    return digit


def normalize(code: str) -> str:
    """Return the canonical form of an uppercased 16-character code.

    Raises:
        ShapeError: If the length is wrong or a digit-bearing position holds
            a letter outside the omocodia table.
    """
    if len(code) != CODE_LENGTH:
        raise ShapeError(
            f"Invalid length: {len(code)}",
            user_message="Formato non valido: il codice fiscale deve essere di 16 caratteri alfanumerici",
        )
    chars = list(code)
    for i in DIGIT_POSITIONS:
        chars[i] = _canonical_digit(chars[i], i)
    return "".join(chars)


def substituted_positions(code: str) -> tuple[int, ...]:
    """1-based positions holding an omocodia letter instead of a digit."""
    return tuple(i + 1 for i in DIGIT_POSITIONS if i < len(code) and code[i] in OMOCODIA_DIGITS)


def is_omocode(code: str) -> bool:
    return bool(substituted_positions(code))
