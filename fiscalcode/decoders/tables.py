"""Static character tables for the codice fiscale.

Checksum tables per Decreto MEF 12/03/1974; omocodia substitutions per
DM 23/12/1976. All mappings are read-only views.
"""

from __future__ import annotations

import string
from types import MappingProxyType

CODE_LENGTH = 16
TEMPORARY_CODE_LENGTH = 11

ALPHABET = frozenset(string.ascii_uppercase + string.digits)

# 0-based indexes of the characters that are digits in the canonical form:
# year (6, 7), day (9, 10), place code digits (12, 13, 14).
DIGIT_POSITIONS: tuple[int, ...] = (6, 7, 9, 10, 12, 13, 14)

# 0-based indexes that are always letters: surname, name, month, place letter, check.
LETTER_POSITIONS: tuple[int, ...] = (0, 1, 2, 3, 4, 5, 8, 11, 15)

MONTH_POSITION = 8
CHECK_POSITION = 15

MONTH_LETTERS = MappingProxyType({
    "A": 1, "B": 2, "C": 3, "D": 4, "E": 5, "H": 6,
    "L": 7, "M": 8, "P": 9, "R": 10, "S": 11, "T": 12,
})

ODD_VALUES = MappingProxyType({
    "0": 1, "1": 0, "2": 5, "3": 7, "4": 9, "5": 13, "6": 15,
    "7": 17, "8": 19, "9": 21,
    "A": 1, "B": 0, "C": 5, "D": 7, "E": 9, "F": 13, "G": 15,
    "H": 17, "I": 19, "J": 21, "K": 2, "L": 4, "M": 18, "N": 20,
    "O": 11, "P": 3, "Q": 6, "R": 8, "S": 12, "T": 14, "U": 16,
    "V": 10, "W": 22, "X": 25, "Y": 24, "Z": 23,
})

EVEN_VALUES = MappingProxyType({
    "0": 0, "1": 1, "2": 2, "3": 3, "4": 4, "5": 5, "6": 6,
    "7": 7, "8": 8, "9": 9,
    "A": 0, "B": 1, "C": 2, "D": 3, "E": 4, "F": 5, "G": 6,
    "H": 7, "I": 8, "J": 9, "K": 10, "L": 11, "M": 12, "N": 13,
    "O": 14, "P": 15, "Q": 16, "R": 17, "S": 18, "T": 19, "U": 20,
    "V": 21, "W": 22, "X": 23, "Y": 24, "Z": 25,
})

# Remainder of (sum mod 26) → check character
CHECK_CHARACTERS = MappingProxyType(dict(enumerate(string.ascii_uppercase)))

OMOCODIA_LETTERS = MappingProxyType({
    "0": "L", "1": "M", "2": "N", "3": "P", "4": "Q",
    "5": "R", "6": "S", "7": "T", "8": "U", "9": "V",
})

OMOCODIA_DIGITS = MappingProxyType({letter: digit for digit, letter in OMOCODIA_LETTERS.items()})

# Female day of birth is stored as day + 40
FEMALE_DAY_OFFSET = 40
