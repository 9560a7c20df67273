"""Problem-details error responses.

Every error leaving the API is rendered as a JSON object with ``title``,
``status``, ``detail`` and ``instance``, plus ``fields`` for malformed
request bodies and whatever structured details the error carried.
"""

from http import HTTPStatus
from typing import Any

import logfire
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict

from accounts.domain.error import DomainError, ErrorKind, ValidationError

STATUS_BY_KIND: dict[ErrorKind, HTTPStatus] = {
    ErrorKind.VALIDATION: HTTPStatus.BAD_REQUEST,
    ErrorKind.MATCHING: HTTPStatus.BAD_REQUEST,
    ErrorKind.ENTITY_NOT_FOUND: HTTPStatus.NOT_FOUND,
    ErrorKind.INVALID_STATE: HTTPStatus.CONFLICT,
    ErrorKind.DUPLICATE_EMAIL: HTTPStatus.CONFLICT,
}

# Detail keys that must never reach a client
FORBIDDEN_DETAIL_KEYS = frozenset({"id", "password", "token", "email"})


class FieldViolation(BaseModel):
    """One invalid field of a request body."""

    name: str
    message: str


class ProblemDetails(BaseModel):
    """Error response body. Extra keys carry the error's details."""

    model_config = ConfigDict(extra="allow")

    title: str
    status: int
    detail: str
    instance: str | None = None
    fields: list[FieldViolation] | None = None

    @classmethod
    def build(
        cls,
        status: HTTPStatus,
        detail: str,
        instance: str | None = None,
        fields: list[FieldViolation] | None = None,
        details: dict[str, Any] | None = None,
    ) -> "ProblemDetails":
        reserved = cls.model_fields.keys()
        extra = {k: v for k, v in (details or {}).items() if k not in reserved}
        return cls(
            title=status.phrase,
            status=status.value,
            detail=detail,
            instance=instance,
            fields=fields,
            **extra,
        )

    def to_response(self) -> JSONResponse:
        return JSONResponse(
            status_code=self.status,
            content=jsonable_encoder(self.model_dump(exclude_none=True)),
        )


def sanitize(details: dict[str, Any]) -> dict[str, Any]:
    """Drop detail entries that could leak credentials or personal data."""
    clean = {k: v for k, v in details.items() if k not in FORBIDDEN_DETAIL_KEYS}
    if clean.get("identifier_type") == "email":
        clean.pop("identifier", None)
    return clean


def status_for(exc: DomainError) -> HTTPStatus:
    return STATUS_BY_KIND.get(exc.kind, HTTPStatus.INTERNAL_SERVER_ERROR)


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    status = status_for(exc)
    details = sanitize(exc.details)
    if isinstance(exc, ValidationError) and exc.field:
        details["field"] = exc.field
    logfire.info(
        "Request failed",
        kind=exc.kind.value,
        status=status.value,
        path=request.url.path,
    )
    return ProblemDetails.build(
        status, exc.message, request.url.path, details=details
    ).to_response()


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    fields = [
        FieldViolation(
            name=".".join(str(part) for part in err["loc"] if part != "body"),
            message=err["msg"],
        )
        for err in exc.errors()
    ]
    return ProblemDetails.build(
        HTTPStatus.BAD_REQUEST,
        "One or more fields validation failed.",
        request.url.path,
        fields=fields,
    ).to_response()


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logfire.error("Unhandled error", path=request.url.path, _exc_info=exc)
    return ProblemDetails.build(
        HTTPStatus.INTERNAL_SERVER_ERROR,
        "An unexpected internal error occurred.",
        request.url.path,
    ).to_response()


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the problem-details handlers to ``app``."""
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
