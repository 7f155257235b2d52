"""
System API Router - Status and configuration
"""

import logging
import time
from datetime import datetime

from fastapi import APIRouter, Depends, Request

from api.dependencies import get_raster_store
from api.exceptions import safe_endpoint
from core.raster_store import RasterStore
from schemas import DebugSettings, SystemStatus

logger = logging.getLogger(__name__)

router = APIRouter()

START_TIME = time.time()


@router.get("/status")
@safe_endpoint
async def get_status(raster_store: RasterStore = Depends(get_raster_store)) -> SystemStatus:
    """Uptime and raster store usage"""
    stats = raster_store.get_stats()
    status = "full" if stats["count"] >= stats["max_rasters"] else "healthy"
    return SystemStatus(status=status, uptime=round(time.time() - START_TIME, 3), store=stats)


@router.post("/debug/{enable}")
@safe_endpoint
async def set_debug_mode(enable: bool, request: Request) -> DebugSettings:
    """Switch the root logger between DEBUG (per-transform timings) and INFO"""
    request.app.state.config.setdefault("system", {})["debug"] = enable
    request.app.state.debug = enable

    level = logging.DEBUG if enable else logging.INFO
    logging.getLogger().setLevel(level)
    logger.info(f"Log level set to {logging.getLevelName(level)}")

    return DebugSettings(enabled=enable, log_level=logging.getLevelName(level))


@router.get("/config")
@safe_endpoint
async def get_config(request: Request) -> dict:
    """Active settings"""
    return request.app.state.config


@router.get("/health")
async def health_check() -> dict:
    return {"status": "healthy", "timestamp": datetime.now().isoformat()}
