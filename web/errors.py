"""
API 오류 처리

LedgerError → HTTP 상태 코드 + 공통 오류 본문 변환.

오류 본문 형식:
    {"error": {"code": "VALIDATION_ERROR", "message": "amount must be a number"}}
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.ledger.result import LedgerError
from core.ledger.types import ErrorMessages
from core.types import ErrorCode

logger = logging.getLogger(__name__)


STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.UNAUTHORIZED: 401,
    ErrorCode.FORBIDDEN: 403,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.INTERNAL_ERROR: 500,
}


class ApiError(Exception):
    """라우트/의존성에서 발생시키는 API 오류

    Args:
        error: 원장 연산 오류 결과
    """

    def __init__(self, error: LedgerError):
        super().__init__(error.message)
        self.error = error

    @property
    def status_code(self) -> int:
        return STATUS_BY_CODE.get(self.error.code, 500)


def error_body(code: ErrorCode, message: str) -> dict:
    """공통 오류 본문 생성"""
    return {"error": {"code": code.value, "message": message}}


def error_response(error: LedgerError) -> JSONResponse:
    """LedgerError → JSONResponse"""
    return JSONResponse(
        status_code=STATUS_BY_CODE.get(error.code, 500),
        content=error_body(error.code, error.message),
    )


def _describe_validation_error(exc: RequestValidationError) -> str:
    """요청 검증 오류 첫 항목을 한 줄로 요약"""
    errors = exc.errors()
    if not errors:
        return "Invalid request"

    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "invalid value")
    return f"{location}: {message}" if location else message


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return error_response(exc.error)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """본문 파싱/스키마 오류 → 400 VALIDATION_ERROR"""
    return JSONResponse(
        status_code=400,
        content=error_body(ErrorCode.VALIDATION_ERROR, _describe_validation_error(exc)),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """라우트 미존재 등 프레임워크 HTTP 오류"""
    if exc.status_code == 404:
        return JSONResponse(
            status_code=404,
            content=error_body(
                ErrorCode.NOT_FOUND,
                f"Route {request.method} {request.url.path} not found",
            ),
        )

    code = next(
        (c for c, status in STATUS_BY_CODE.items() if status == exc.status_code),
        ErrorCode.VALIDATION_ERROR if 400 <= exc.status_code < 500 else ErrorCode.INTERNAL_ERROR,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(code, str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """예상치 못한 예외 → 500 (내부 오류 문구는 로그에만)"""
    logger.exception(f"Unhandled error: {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content=error_body(ErrorCode.INTERNAL_ERROR, ErrorMessages.UNEXPECTED_ERROR),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """앱에 오류 핸들러 등록"""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
