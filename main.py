"""
Raster Tone - Main FastAPI Application
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Add parent directory to path
sys.path.append(str(Path(__file__).parent))

from api.exceptions import register_exception_handlers  # noqa: E402
from api.routers import analysis, raster, system, transform  # noqa: E402
from config import get_settings  # noqa: E402
from core.constants import SystemConstants  # noqa: E402
from core.enums import Channel, TransformOperation  # noqa: E402
from core.raster_store import RasterStore  # noqa: E402

VERSION = "1.0.0"

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.system.log_level),
    format=SystemConstants.LOG_FORMAT,
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the raster store on startup and drop all rasters on shutdown"""
    logger.info(
        f"Raster Tone {VERSION} starting ({settings.environment}, "
        f"max_rasters={settings.store.max_rasters}, "
        f"histogram_workers={settings.processing.histogram_workers})"
    )

    app.state.raster_store = RasterStore(max_rasters=settings.store.max_rasters)
    app.state.config = settings.to_dict()
    app.state.debug = settings.system.debug

    yield

    stats = app.state.raster_store.get_stats()
    app.state.raster_store.clear()
    logger.info(f"Raster Tone stopped, released {stats['count']} rasters")


app = FastAPI(
    title="Raster Tone",
    description="Pixel transform and histogram engine for RGBA rasters",
    version=VERSION,
    lifespan=lifespan,
)

if settings.api.cors_enabled:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

register_exception_handlers(app)

app.include_router(raster.router, prefix="/api/raster", tags=["Raster"])
app.include_router(transform.router, prefix="/api/transform", tags=["Transform"])
app.include_router(analysis.router, prefix="/api/analysis", tags=["Analysis"])
app.include_router(system.router, prefix="/api/system", tags=["System"])


@app.get("/")
async def root():
    """Service overview: routes, operations and histogram channels"""
    return {
        "name": "Raster Tone",
        "version": VERSION,
        "routes": {
            "raster": "/api/raster",
            "transform": "/api/transform",
            "analysis": "/api/analysis",
            "system": "/api/system",
            "docs": "/docs",
        },
        "operations": [op.value for op in TransformOperation],
        "histogram_channels": [c.value for c in Channel if c is not Channel.ALPHA],
    }


@app.get("/health")
async def health_check():
    store = getattr(app.state, "raster_store", None)
    return {
        "status": "healthy" if store is not None else "starting",
        "services": {"raster_store": store is not None},
        "rasters": store.get_stats()["count"] if store is not None else 0,
    }


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"detail": f"Internal server error: {str(exc)}"})


def main():
    """Run the API server"""
    logger.info(f"Listening on {settings.api.host}:{settings.api.port}")
    try:
        uvicorn.run(
            "main:app",
            host=settings.api.host,
            port=settings.api.port,
            reload=settings.system.debug,
            log_level=settings.system.log_level.lower(),
        )
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")


if __name__ == "__main__":
    main()
