"""Map pipeline errors onto HTTP statuses and the JSON envelope."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from pdf_enhancer.domain.errors import (
    ExtractionFailure,
    PipelineError,
    ProviderError,
    ProviderUnavailable,
    RenderFailure,
    ValidationError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: dict[type[PipelineError], int] = {
    ValidationError: 400,
    ExtractionFailure: 422,
    ProviderUnavailable: 503,
    ProviderError: 502,
    RenderFailure: 500,
}


def status_for(exc: PipelineError) -> int:
    for error_type in type(exc).__mro__:
        if error_type in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[error_type]
    return 500


def error_envelope(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


async def pipeline_error_handler(request: Request, exc: PipelineError) -> JSONResponse:
    status_code = status_for(exc)
    log = logger.error if status_code >= 500 else logger.warning
    log(
        "%s %s failed at stage=%s provider=%s: %s",
        request.method,
        request.url.path,
        exc.stage,
        exc.provider or "-",
        exc.message,
    )
    return error_envelope(exc.message, status_code)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    message = "Invalid request: " + "; ".join(parts)
    logger.warning("%s %s rejected: %s", request.method, request.url.path, message)
    return error_envelope(message, 400)


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_envelope("Internal server error", 500)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PipelineError, pipeline_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
