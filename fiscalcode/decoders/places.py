"""Place of birth lookup by Belfiore code (codice catastale).

The table itself is reference data owned by the caller: any read-only
mapping from 4-character code to ``PlaceOfBirth`` can be injected. The
loader below reads the JSON reference file format:

    {"H501": {"countryCode": "IT", "countryName": "Italia", "city": "Roma", "state": "RM"}, ...}
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

from pydantic import TypeAdapter, ValidationError

from fiscalcode.config import settings
from fiscalcode.decoders.errors import PlaceTableError, UnknownPlaceCode
from fiscalcode.schemas.fiscal_code import PlaceOfBirth

logger = logging.getLogger(__name__)

_TABLE_ADAPTER = TypeAdapter(dict[str, PlaceOfBirth])


# ---------------------------------------------------------------------------
# Table loading
# ---------------------------------------------------------------------------


def load_place_table(path: Path) -> Mapping[str, PlaceOfBirth]:
    """Load a place table from JSON into a read-only mapping.

    Raises:
        PlaceTableError: If the file is missing, not JSON, or has malformed entries.
    """
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise PlaceTableError(f"Cannot read place table {path}: {exc}") from exc

    try:
        table = _TABLE_ADAPTER.validate_python(raw)
    except ValidationError as exc:
        raise PlaceTableError(f"Malformed place table {path}: {exc}") from exc

    logger.info("Loaded %d place of birth codes from %s", len(table), path)
    return MappingProxyType({code.upper(): place for code, place in table.items()})


@lru_cache(maxsize=1)
def default_place_table() -> Mapping[str, PlaceOfBirth]:
    """Place table from ``settings.decoder.places_path``, loaded once."""
    return load_place_table(settings.decoder.places_path)


# ---------------------------------------------------------------------------
# Resolver
# ---------------------------------------------------------------------------


class PlaceOfBirthResolver:
    """Thin adapter over an injected place table."""

    def __init__(self, table: Mapping[str, PlaceOfBirth]) -> None:
        self._table = table

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, place_code: object) -> bool:
        return place_code in self._table

    def resolve(self, place_code: str) -> PlaceOfBirth:
        """Return the record for ``place_code`` verbatim.

        Raises:
            UnknownPlaceCode: If the code is absent from the table.
        """
        place = self._table.get(place_code)
        if place is None:
            raise UnknownPlaceCode(place_code)
        return place
