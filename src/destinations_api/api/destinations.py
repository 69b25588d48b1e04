"""
GET /api/destinations: the destinations catalog.

Serves the records loaded at startup by destinations_api.catalog.lifespan.
"""
from typing import Any

from fastapi import APIRouter, HTTPException

from destinations_api.catalog import get_destinations, is_catalog_loaded

from .schemas import ErrorResponse

router = APIRouter(prefix="/api")


@router.get(
    "/destinations",
    response_model=list[dict[str, Any]],
    responses={503: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="List all destinations",
)
async def list_destinations() -> list[dict[str, Any]]:
    """
    Return every destination in the catalog, in catalog order.

    Records are opaque JSON objects and are returned unchanged.
    """
    if not is_catalog_loaded():
        raise HTTPException(
            status_code=503,
            detail="Destinations catalog not loaded, service is not ready.",
        )

    try:
        return get_destinations()
    except Exception:
        raise HTTPException(
            status_code=500,
            detail="Listing destinations failed due to an internal error.",
        )
