"""Command line entry point.

Usage:
    python -m fiscalcode.main RSSMRA85M01H501Q [...]   # check the given codes
    python -m fiscalcode.main                           # prompt for codes
    python -m fiscalcode.main --serve                   # start the HTTP API
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

import structlog

from fiscalcode.config import settings
from fiscalcode.decoders.checksum import verify_temporary
from fiscalcode.decoders.codice_fiscale import FiscalCodeDecoder
from fiscalcode.decoders.errors import FiscalCodeError, PlaceTableError
from fiscalcode.decoders.fields import CenturyPolicy
from fiscalcode.decoders.places import PlaceOfBirthResolver, default_place_table, load_place_table
from fiscalcode.schemas.fiscal_code import DecodedIdentity

logger = logging.getLogger(__name__)

# ── Logging setup ────────────────────────────────────────────────────


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)-8s %(name)s — %(message)s",
        stream=sys.stderr,
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


# ── Arguments ────────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fiscalcode",
        description="Validate and decode Italian codici fiscali",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("codes", nargs="*", help="Codes to check; prompts interactively when omitted")
    parser.add_argument(
        "--places",
        type=Path,
        default=settings.decoder.places_path,
        help="JSON place of birth table",
    )
    parser.add_argument(
        "--reference-date",
        type=date.fromisoformat,
        default=settings.decoder.century_reference_date,
        help="Resolve two-digit years to the latest year not after this date (YYYY-MM-DD)",
    )
    parser.add_argument(
        "--century",
        type=int,
        default=settings.decoder.century,
        help="Force every two-digit year into this century, e.g. 1900",
    )
    parser.add_argument(
        "--strict-calendar",
        action="store_true",
        default=settings.decoder.strict_calendar,
        help="Reject days that do not exist in the month",
    )
    parser.add_argument(
        "--allow-temporary",
        action="store_true",
        default=settings.decoder.allow_temporary_codes,
        help="Accept 11-digit temporary codes",
    )
    parser.add_argument("--serve", action="store_true", help="Start the HTTP API")
    parser.add_argument("--host", default=settings.api.api_host)
    parser.add_argument("--port", type=int, default=settings.api.api_port)
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    )
    return parser


def build_decoder(args: argparse.Namespace) -> FiscalCodeDecoder:
    if args.places == settings.decoder.places_path:
        table = default_place_table()
    else:
        table = load_place_table(args.places)
    return FiscalCodeDecoder(
        resolver=PlaceOfBirthResolver(table),
        century_policy=CenturyPolicy(reference_date=args.reference_date, century=args.century),
        strict_calendar=args.strict_calendar,
    )


# ── Output ───────────────────────────────────────────────────────────


def describe(identity: DecodedIdentity) -> str:
    lines = [
        "Info:",
        f"\tBorn on: {identity.born_on.isoformat()}",
        f"\tGender: {identity.gender.value}",
        f"\t{identity.place_of_birth}",
    ]
    if identity.is_omocode:
        lines.append(f"\tCanonical code: {identity.canonical_code}")
    if identity.calendar_adjusted:
        lines.append("\tNote: day of birth does not exist in that month, clamped to the last day")
    return "\n".join(lines)


def check_code(decoder: FiscalCodeDecoder, code: str, allow_temporary: bool = False) -> bool:
    """Print the verdict for one code. Returns True if it is valid."""
    if allow_temporary and verify_temporary(code):
        print("Code is valid (temporary code)")
        return True
    try:
        identity = decoder.extract(code)
    except FiscalCodeError as exc:
        print(f"Code is invalid ({exc.kind.value}): {exc}")
        return False
    print("Code is valid")
    print(describe(identity))
    return True


def interactive_loop(decoder: FiscalCodeDecoder, allow_temporary: bool = False) -> None:
    while True:
        try:
            code = input("Insert code to validate: ")
        except (EOFError, KeyboardInterrupt):
            print()
            return
        if code.strip():
            check_code(decoder, code, allow_temporary)


# ── Entry point ──────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        decoder = build_decoder(args)
    except (PlaceTableError, ValueError) as exc:
        logger.error("Cannot start decoder: %s", exc)
        return 2

    if args.serve:
        import uvicorn

        from fiscalcode.api import create_app

        logger.info("Starting API on %s:%d (env=%s)", args.host, args.port, settings.environment)
        uvicorn.run(create_app(decoder), host=args.host, port=args.port)
        return 0

    if not args.codes:
        interactive_loop(decoder, args.allow_temporary)
        return 0

    results = [check_code(decoder, code, args.allow_temporary) for code in args.codes]
    return 0 if all(results) else 1


if __name__ == "__main__":
    sys.exit(main())
