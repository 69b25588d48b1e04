"""
Destinations catalog: a JSON array of opaque records.

The catalog is loaded ONCE at application startup via the lifespan context
manager and served from memory afterwards. Records are passed through as-is;
the only shape enforced is "array of JSON objects".
"""
import copy
import json
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from fastapi import FastAPI

from destinations_api.config import get_destinations_file


class CatalogError(ValueError):
    """Raised when the catalog file is missing or malformed."""


# ---------------------------------------------------------------------------
# Module-level state: populated once at startup, never modified per-request
# ---------------------------------------------------------------------------

_state: dict[str, Any] = {
    "destinations": [],
    "source": None,
    "catalog_loaded": False,
}


def load_destinations(path: str | Path) -> list[dict[str, Any]]:
    """Read and validate a destinations catalog file.

    Args:
        path: Location of a UTF-8 JSON file holding an array of objects.

    Returns:
        The records, in file order.

    Raises:
        CatalogError: if the file cannot be read, is not valid JSON, is not
            an array, or holds anything other than objects.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CatalogError(f"Cannot read destinations catalog {path}: {exc}") from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise CatalogError(f"Destinations catalog {path} is not valid JSON: {exc}") from exc

    if not isinstance(data, list):
        raise CatalogError(
            f"Destinations catalog {path} must be a JSON array, got {type(data).__name__}"
        )
    for index, record in enumerate(data):
        if not isinstance(record, dict):
            raise CatalogError(
                f"Destinations catalog {path}: item {index} must be an object, "
                f"got {type(record).__name__}"
            )
    return data


# ---------------------------------------------------------------------------
# Lifespan: imported and used by api/main.py
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the catalog once at startup; release on shutdown."""
    destinations_file = get_destinations_file()
    _state["source"] = str(destinations_file)

    try:
        _state["destinations"] = load_destinations(destinations_file)
        _state["catalog_loaded"] = True
    except CatalogError as exc:
        # catalog_loaded stays False, so the endpoint returns 503
        print(f"Destinations catalog not loaded: {exc}")
        _state["destinations"] = []
        _state["catalog_loaded"] = False

    yield

    _state["destinations"] = []
    _state["source"] = None
    _state["catalog_loaded"] = False


def is_catalog_loaded() -> bool:
    """Return True if the catalog is ready to be served."""
    return _state["catalog_loaded"]


def get_destinations() -> list[dict[str, Any]]:
    """Return a copy of the cached records so callers cannot mutate the cache."""
    return copy.deepcopy(_state["destinations"])


def destination_count() -> int:
    """Number of cached records, without copying them."""
    return len(_state["destinations"])
