"""Tests for the command line entry point."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from fiscalcode.main import main


def _places(tmp_path: Path) -> Path:
    path = tmp_path / "places.json"
    path.write_text(json.dumps({
        "H501": {"countryCode": "IT", "countryName": "Italia", "city": "Roma", "state": "RM"},
    }), encoding="utf-8")
    return path


class TestCodesAsArguments:
    def test_valid_code(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--reference-date", "2026-10-16", "GNTMTT99C27H501F"]) == 0
        out = capsys.readouterr().out
        assert "Code is valid" in out
        assert "Born on: 1999-03-27" in out
        assert "Gender: male" in out
        assert "Country: Italia (IT)" in out
        assert "City: Roma (RM)" in out

    def test_omocode_shows_canonical(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["GNTMTT99C27HR0MS"]) == 0
        assert "Canonical code: GNTMTT99C27H501S" in capsys.readouterr().out

    def test_invalid_code(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["GNTMTT99C27H501F", "RSSMRA85M01H501Z"]) == 1
        assert "checksum_mismatch" in capsys.readouterr().out

    def test_custom_places(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--places", str(_places(tmp_path)), "MKSKRS92L65Z219S"]) == 1
        assert "unknown_place_code" in capsys.readouterr().out

    def test_missing_places_file(self, tmp_path: Path) -> None:
        assert main(["--places", str(tmp_path / "missing.json"), "GNTMTT99C27H501F"]) == 2

    def test_century_out_of_range(self) -> None:
        assert main(["--century", "0", "GNTMTT99C27H501F"]) == 2

    def test_century_hint(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--century", "1900", "FCKTSS05C01Z122F"]) == 0
        assert "Born on: 1905-03-01" in capsys.readouterr().out

    def test_strict_calendar(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["GNTMTT99B30H501L"]) == 0
        assert "clamped" in capsys.readouterr().out
        assert main(["--strict-calendar", "GNTMTT99B30H501L"]) == 1
        assert "invalid_day" in capsys.readouterr().out

    def test_temporary(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--allow-temporary", "12345678903"]) == 0
        assert "temporary code" in capsys.readouterr().out

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--log-level", "verbose", "GNTMTT99C27H501F"])
        assert exc_info.value.code == 2

    def test_log_level_case_insensitive(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--log-level", "debug", "GNTMTT99C27H501F"]) == 0
        assert "Code is valid" in capsys.readouterr().out


class TestInteractive:
    def test_prompts_until_eof(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        answers = iter(["GNTMTT99C27H501F", "", "INVALIDCODE"])

        def fake_input(prompt: str) -> str:
            try:
                return next(answers)
            except StopIteration:
                raise EOFError from None

        monkeypatch.setattr("builtins.input", fake_input)
        assert main([]) == 0
        out = capsys.readouterr().out
        assert out.count("Code is valid") == 1
        assert "Code is invalid (shape_error)" in out
