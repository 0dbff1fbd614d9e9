# core/exceptions.py
from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

log = logging.getLogger("customer")

INTERNAL_ERROR_MESSAGE = "internal server error"


class CustomerQueryError(Exception):
    """고객 조회 실패의 공통 부모."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidQueryParameter(CustomerQueryError):
    """호출자가 잘못된 page/limit 등을 넘긴 경우 (400)."""


class StorageError(CustomerQueryError):
    """DB 조회/카운트 도중 발생한 오류 (500). 원인은 로그에만 남긴다."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(message: str, status_code: int) -> PlainTextResponse:
    return PlainTextResponse(f"Error: {message}", status_code=status_code)


def _describe_validation(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "query")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "invalid request"


async def customer_query_error_handler(request: Request, exc: CustomerQueryError):
    return error_response(exc.message, exc.status_code)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    message = _describe_validation(exc)
    log.info("rejected %s %s: %s", request.method, request.url.path, message)
    return error_response(message, status.HTTP_400_BAD_REQUEST)


async def unhandled_error_handler(request: Request, exc: Exception):
    log.exception("unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(INTERNAL_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CustomerQueryError, customer_query_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
