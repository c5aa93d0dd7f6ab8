"""Tests for the HTTP API.

Covers:
- Health check
- Validity endpoint (plain, omocodia, temporary)
- Decode endpoint: identity JSON, 422 with error kind on failure
"""

from __future__ import annotations

from datetime import date

import pytest
from fastapi.testclient import TestClient

from fiscalcode.api import create_app
from fiscalcode.decoders import CenturyPolicy, FiscalCodeDecoder, PlaceOfBirthResolver
from fiscalcode.schemas.fiscal_code import PlaceOfBirth


@pytest.fixture()
def client() -> TestClient:
    decoder = FiscalCodeDecoder(
        resolver=PlaceOfBirthResolver({
            "H501": PlaceOfBirth(country_code="IT", country_name="Italia", city="Roma", state="RM"),
        }),
        century_policy=CenturyPolicy(reference_date=date(2026, 10, 16)),
    )
    return TestClient(create_app(decoder))


class TestHealth:
    def test_ok(self, client: TestClient) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"


class TestValidity:
    def test_valid(self, client: TestClient) -> None:
        resp = client.get("/codes/gntmtt99c27h501f/validity")
        assert resp.status_code == 200
        assert resp.json() == {"code": "GNTMTT99C27H501F", "valid": True}

    def test_omocodia(self, client: TestClient) -> None:
        assert client.get("/codes/GNTMTT99C27HR0MS/validity").json()["valid"] is True

    def test_invalid(self, client: TestClient) -> None:
        assert client.get("/codes/RSSMRA85M01H501Z/validity").json()["valid"] is False

    def test_temporary(self, client: TestClient) -> None:
        assert client.get("/codes/12345678903/validity").json()["valid"] is False
        resp = client.get("/codes/12345678903/validity", params={"allow_temporary": True})
        assert resp.json()["valid"] is True


class TestDecode:
    def test_identity(self, client: TestClient) -> None:
        resp = client.get("/codes/GNTMTT99C27H501F")
        assert resp.status_code == 200
        body = resp.json()
        assert body["born_on"] == "1999-03-27"
        assert body["gender"] == "male"
        assert body["place_code"] == "H501"
        assert body["place_of_birth"] == {
            "country_code": "IT",
            "country_name": "Italia",
            "city": "Roma",
            "state": "RM",
        }

    @pytest.mark.parametrize(
        ("code", "kind"),
        [
            ("GNTMTT99C27H501", "shape_error"),
            ("RSSMRA85M01H501Z", "checksum_mismatch"),
            ("GNTMTT99C72H501Y", "invalid_day"),
            ("RSSMRA85H52Z999D", "unknown_place_code"),
        ],
    )
    def test_error_kind(self, client: TestClient, code: str, kind: str) -> None:
        resp = client.get(f"/codes/{code}")
        assert resp.status_code == 422
        assert resp.json()["error_kind"] == kind
        assert resp.json()["detail"]
