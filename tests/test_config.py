"""Tests for settings validation.

Tests cover:
- Century hint bounds
- Log level normalization
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fiscalcode.config import DecoderSettings, Settings


class TestDecoderSettings:
    def test_century_accepted(self) -> None:
        assert DecoderSettings(century=1900).century == 1900
        assert DecoderSettings().century is None

    @pytest.mark.parametrize("century", [1950, 0, -100, 10000])
    def test_century_rejected(self, century: int) -> None:
        with pytest.raises(ValidationError):
            DecoderSettings(century=century)


class TestSettings:
    def test_log_level_uppercased(self) -> None:
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level(self) -> None:
        with pytest.raises(ValidationError):
            Settings(log_level="verbose")
