"""Exception handlers mapping request and storage failures to JSON responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


def _describe(errors) -> str:
    parts = []
    for err in errors:
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "query")
        parts.append(f"{loc}: {err.get('msg')}" if loc else err.get("msg", ""))
    return "; ".join(parts) or "Invalid request"


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Missing or malformed parameters are a client error (400)."""
    return JSONResponse(
        status_code=400,
        content={
            "detail": _describe(exc.errors()),
            "errors": jsonable_encoder(exc.errors()),
        },
    )


async def storage_exception_handler(request: Request, exc: SQLAlchemyError):
    """Any database failure becomes a generic 500; the caller may retry."""
    logger.error(
        "Storage error on %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return JSONResponse(status_code=500, content={"detail": "Storage error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, storage_exception_handler)
