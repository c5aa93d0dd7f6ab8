"""HTTP API — FastAPI app exposing validation and decoding.

Read-only endpoints; every request is answered from the in-memory place table.
"""
# ruff: noqa: B008  — Depends() in function defaults is standard FastAPI

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, FastAPI, Query, Request
from fastapi.responses import JSONResponse

from fiscalcode import __version__
from fiscalcode.decoders.codice_fiscale import FiscalCodeDecoder, default_decoder
from fiscalcode.decoders.errors import FiscalCodeError
from fiscalcode.schemas.fiscal_code import DecodedIdentity

logger = logging.getLogger(__name__)

router = APIRouter(tags=["codice-fiscale"])


def get_decoder(request: Request) -> FiscalCodeDecoder:
    return request.app.state.decoder


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "version": __version__}


@router.get("/codes/{code}/validity")
async def code_validity(
    code: str,
    allow_temporary: bool = Query(default=False),
    decoder: FiscalCodeDecoder = Depends(get_decoder),
) -> dict[str, str | bool]:
    """Boolean validity, collapsing every failure kind."""
    return {"code": code.strip().upper(), "valid": decoder.validate(code, allow_temporary=allow_temporary)}


@router.get("/codes/{code}", response_model=DecodedIdentity)
async def decode_code(
    code: str,
    decoder: FiscalCodeDecoder = Depends(get_decoder),
) -> DecodedIdentity:
    """Decoded identity; failures become 422 with the error kind."""
    return decoder.extract(code)


async def _fiscal_code_error_handler(request: Request, exc: FiscalCodeError) -> JSONResponse:
    logger.info("Rejected code (%s) on %s", exc.kind.value, request.method)
    return JSONResponse(
        status_code=422,
        content={"error_kind": exc.kind.value, "detail": exc.user_message},
    )


def create_app(decoder: FiscalCodeDecoder | None = None) -> FastAPI:
    """Build the API around ``decoder`` (default: the configured decoder)."""
    app = FastAPI(title="fiscalcode", version=__version__)
    app.state.decoder = decoder or default_decoder()
    app.add_exception_handler(FiscalCodeError, _fiscal_code_error_handler)
    app.include_router(router)
    return app
