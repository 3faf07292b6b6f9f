from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..services.timewords import InvalidInput

LOGGER = logging.getLogger(__name__)


class ErrorEnvelope(JSONResponse):
    def __init__(
        self,
        *,
        status_code: int,
        code: str,
        message: str,
        details: Any | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        payload: dict[str, Any] = {"code": code, "message": message}
        if details is not None:
            payload["details"] = details
        super().__init__(payload, status_code=status_code, headers=headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    detail = exc.detail
    message = detail if isinstance(detail, str) else status_phrase(exc.status_code)
    details = detail if isinstance(detail, dict) else None
    return ErrorEnvelope(
        status_code=exc.status_code,
        code="http_error",
        message=message,
        details=details,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return ErrorEnvelope(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        code="validation_error",
        message="Validation failed",
        details={"errors": jsonable_errors(exc)},
    )


async def invalid_input_handler(request: Request, exc: InvalidInput):
    LOGGER.info(
        "time_words.rejected",
        extra={"extra_data": {"path": request.url.path, "reason": exc.message}},
    )
    return ErrorEnvelope(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        code="invalid_input",
        message=exc.message,
        details={"value": exc.value if isinstance(exc.value, str) else repr(exc.value)},
    )


def status_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def jsonable_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    # ``ctx`` may hold exception instances which JSONResponse cannot encode
    errors = []
    for error in exc.errors():
        item = {key: value for key, value in error.items() if key != "ctx"}
        if "ctx" in error:
            item["ctx"] = {key: str(value) for key, value in error["ctx"].items()}
        errors.append(item)
    return errors
