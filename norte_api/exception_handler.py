# norte_api/exception_handler.py
"""One place that turns failures into HTTP responses."""
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

from .errors import AssetMissing, StoreFailure
from .utils import logger


def setup_exception_handlers(app: FastAPI):

    @app.exception_handler(AssetMissing)
    async def asset_missing_handler(request: Request, exc: AssetMissing):
        # a missing shell means a broken deployment, not a transient error
        logger.error("%s (%s %s)", exc, request.method, request.url.path)
        return PlainTextResponse(f"Client bundle unavailable: {exc}", status_code=500)

    @app.exception_handler(StoreFailure)
    async def store_failure_handler(request: Request, exc: StoreFailure):
        logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse({"detail": "Database error"}, status_code=500)

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse({"detail": "Database error"}, status_code=500)
