"""
Shared FastAPI dependencies for the Raster Tone system.
Centralizes common dependencies to eliminate code duplication.
"""

import logging

from fastapi import Depends, HTTPException, Request

from core.constants import HistogramConstants
from core.raster_store import RasterStore
from services.edit_service import EditService

logger = logging.getLogger(__name__)


def get_raster_store(request: Request) -> RasterStore:
    """
    Get the raster store from app state.

    Raises:
        HTTPException: If the store is not initialized
    """
    try:
        return request.app.state.raster_store
    except AttributeError as e:
        logger.error(f"Raster store not initialized in app state: {e}")
        raise HTTPException(
            status_code=500, detail="Internal server error: Raster store not initialized"
        )


def get_edit_service(
    request: Request, raster_store: RasterStore = Depends(get_raster_store)
) -> EditService:
    """Get EditService bound to the app's raster store."""
    settings = getattr(request.app.state, "config", {}) or {}
    workers = settings.get("processing", {}).get("histogram_workers", 1)
    return EditService(raster_store=raster_store, histogram_workers=workers)


def get_default_bin_count(request: Request) -> int:
    """Configured default bin count for histogram binning."""
    settings = getattr(request.app.state, "config", {}) or {}
    return settings.get("processing", {}).get(
        "default_bin_count", HistogramConstants.DEFAULT_BIN_COUNT
    )
