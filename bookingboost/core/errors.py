from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel


class ErrorDetail(BaseModel):
    code: str
    message: str
    details: Optional[Dict[str, Any]] = None


class ErrorEnvelope(BaseModel):
    error: ErrorDetail


class AppError(Exception):
    """Base for failures that map onto an HTTP status and an error envelope."""

    code = "bad_request"
    status_code = 400

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class BadRequestError(AppError):
    code = "bad_request"
    status_code = 400


class NotFoundError(AppError):
    code = "not_found"
    status_code = 404

    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message)


class UpstreamError(AppError):
    """The Supabase REST API failed or was unreachable."""

    code = "upstream_error"
    status_code = 502

    def __init__(self, message: str = "Upstream request failed", source: Optional[str] = None) -> None:
        super().__init__(message, details={"source": source} if source else None)


def _error_response(
    status_code: int, code: str, message: str, details: Optional[Dict[str, Any]] = None
) -> JSONResponse:
    envelope = ErrorEnvelope(error=ErrorDetail(code=code, message=message, details=details))
    return JSONResponse(status_code=status_code, content=envelope.model_dump())


def app_error_handler(_: Request, exc: AppError) -> JSONResponse:
    return _error_response(exc.status_code, exc.code, exc.message, exc.details)


def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    return _error_response(
        422,
        "validation_error",
        "Validation error",
        {"errors": jsonable_encoder(exc.errors())},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
