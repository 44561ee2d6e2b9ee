"""커스텀 HTTP 예외 클래스 및 예외 핸들러 모듈.

Custom HTTP exception classes and exception handlers.
Provides pre-configured HTTPException subclasses for the API's error taxonomy
and the handlers that render every error body as ``{"message": str}``.

Usage:
    from app.utils.exceptions import NotFoundError
    raise NotFoundError("Issue not found")
"""

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


class ValidationError(HTTPException):
    """400 Bad Request 예외 — 필수 필드 누락 또는 잘못된 값.

    Raised when a required field is missing or holds an invalid value.

    Args:
        detail: 오류 메시지 (Error message, default: "Validation failed")
    """

    def __init__(self, detail: str = "Validation failed") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    Raised when a requested resource (e.g. an issue by business id) does not exist.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class RouteNotFoundError(HTTPException):
    """404 — 정의되지 않은 경로 (No route matches the request path)."""

    def __init__(self, detail: str = "Route not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class StoreUnavailableError(HTTPException):
    """500 예외 — 데이터 저장소 연결/쿼리 실패.

    Raised when the issue store cannot be reached or a query fails.
    Distinguishes "query failed" from "no data": callers never get an empty payload instead.

    Args:
        detail: 오류 메시지 (Error message, default: "Issue store unavailable")
    """

    def __init__(self, detail: str = "Issue store unavailable") -> None:
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


_APP_ERRORS = (ValidationError, NotFoundError, RouteNotFoundError, StoreUnavailableError)


def _format_validation_errors(exc: RequestValidationError) -> str:
    """pydantic 오류 목록을 한 줄 메시지로 변환 — e.g. "body.title: Field required"."""
    parts: list[str] = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts) or "Validation failed"


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """요청 검증 실패를 ValidationError(400)로 변환합니다."""
    return await http_exception_handler(request, ValidationError(_format_validation_errors(exc)))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """HTTP 예외를 {message} 형태로 변환합니다.

    Framework-raised 404s (no matching route) become RouteNotFoundError;
    application errors keep their own status and detail.
    """
    if not isinstance(exc, _APP_ERRORS) and exc.status_code == status.HTTP_404_NOT_FOUND:
        exc = RouteNotFoundError()
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """앱에 예외 핸들러를 등록합니다 (Register all error handlers on the app)."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
