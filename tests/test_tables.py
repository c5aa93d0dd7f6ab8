"""Tests for the static codice fiscale tables."""

from __future__ import annotations

import string

import pytest

from fiscalcode.decoders.tables import (
    CHECK_CHARACTERS,
    DIGIT_POSITIONS,
    EVEN_VALUES,
    LETTER_POSITIONS,
    MONTH_LETTERS,
    ODD_VALUES,
    OMOCODIA_DIGITS,
    OMOCODIA_LETTERS,
)

ALL_CHARACTERS = set(string.ascii_uppercase + string.digits)


class TestChecksumTables:
    def test_odd_table_covers_every_character(self) -> None:
        assert set(ODD_VALUES) == ALL_CHARACTERS

    def test_even_table_covers_every_character(self) -> None:
        assert set(EVEN_VALUES) == ALL_CHARACTERS

    def test_digits_and_letters_share_even_values(self) -> None:
        """Even positions value digit n like the n-th letter (0 ↔ A)."""
        for n, digit in enumerate(string.digits):
            assert EVEN_VALUES[digit] == EVEN_VALUES[string.ascii_uppercase[n]] == n

    def test_check_characters_bijective(self) -> None:
        """Every remainder 0–25 maps to a distinct letter."""
        assert set(CHECK_CHARACTERS) == set(range(26))
        assert sorted(CHECK_CHARACTERS.values()) == list(string.ascii_uppercase)

    def test_tables_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            ODD_VALUES["A"] = 0  # type: ignore[index]


class TestMonthLetters:
    def test_twelve_distinct_months(self) -> None:
        assert set(MONTH_LETTERS.values()) == set(range(1, 13))

    @pytest.mark.parametrize(
        ("letter", "month"),
        [("A", 1), ("B", 2), ("C", 3), ("D", 4), ("E", 5), ("H", 6),
         ("L", 7), ("M", 8), ("P", 9), ("R", 10), ("S", 11), ("T", 12)],
    )
    def test_letter_to_month(self, letter: str, month: int) -> None:
        assert MONTH_LETTERS[letter] == month

    def test_skipped_letters_absent(self) -> None:
        for letter in "FGIJKNOQUVWXYZ":
            assert letter not in MONTH_LETTERS


class TestOmocodiaTable:
    def test_ten_substitutions(self) -> None:
        assert "".join(OMOCODIA_LETTERS[d] for d in string.digits) == "LMNPQRSTUV"

    def test_inverse(self) -> None:
        for digit, letter in OMOCODIA_LETTERS.items():
            assert OMOCODIA_DIGITS[letter] == digit


class TestPositions:
    def test_positions_partition_the_code(self) -> None:
        assert len(DIGIT_POSITIONS) == 7
        assert sorted(DIGIT_POSITIONS + LETTER_POSITIONS) == list(range(16))
