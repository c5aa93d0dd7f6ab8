"""Pydantic schemas."""

from fiscalcode.schemas.fiscal_code import CfResult, DecodedIdentity, PlaceOfBirth

__all__ = ["CfResult", "DecodedIdentity", "PlaceOfBirth"]
