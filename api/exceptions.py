"""
Exception handling for the HTTP API.

Maps raster engine errors to HTTP responses and provides the
safe_endpoint decorator used by every router.
"""

import functools
import logging
from typing import Dict, Type

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from core.exceptions import (
    DegenerateBinWindow,
    EmptyRegion,
    InvalidDimensions,
    InvalidRegion,
    ParameterOutOfRange,
    RasterError,
    RasterNotFoundError,
)

logger = logging.getLogger(__name__)

STATUS_CODES: Dict[Type[RasterError], int] = {
    RasterNotFoundError: 404,
    InvalidDimensions: 400,
    InvalidRegion: 400,
    EmptyRegion: 400,
    DegenerateBinWindow: 400,
    ParameterOutOfRange: 400,
}


def status_code_for(exc: RasterError) -> int:
    for exc_type in type(exc).__mro__:
        if exc_type in STATUS_CODES:
            return STATUS_CODES[exc_type]
    return 400


def safe_endpoint(func):
    """
    Decorator for async endpoints.

    HTTPException and RasterError pass through to the registered handlers;
    anything else is logged and turned into a 500.
    """

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except (HTTPException, RasterError):
            raise
        except Exception as e:
            logger.error(f"Unhandled error in {func.__name__}: {e}", exc_info=True)
            raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")

    return wrapper


async def raster_error_handler(request: Request, exc: RasterError) -> JSONResponse:
    status_code = status_code_for(exc)
    logger.warning(f"{request.method} {request.url.path} -> {status_code}: {exc.message}")
    return JSONResponse(status_code=status_code, content=exc.to_dict())


def register_exception_handlers(app: FastAPI):
    """Register raster error handlers on the app."""
    app.add_exception_handler(RasterError, raster_error_handler)
