"""
의존성 주입

FastAPI의 Depends를 사용한 의존성 관리.
"""

from typing import AsyncGenerator

import jwt
from fastapi import Depends, Header

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.config.loader import Settings, get_settings
from core.constants import Defaults
from core.ledger.result import LedgerError
from core.types import ErrorCode
from web.errors import ApiError

BEARER_PREFIX = "Bearer "


def get_app_settings() -> Settings:
    """애플리케이션 설정 반환"""
    return get_settings()


async def get_db() -> AsyncGenerator[SQLiteAdapter, None]:
    """DB 세션 반환 (읽기 전용)

    거래 내역, 계좌 조회 등 읽기 작업용.
    """
    settings = get_settings()
    async with SQLiteAdapter(settings.db_path, readonly=True) as db:
        yield db


async def get_db_write() -> AsyncGenerator[SQLiteAdapter, None]:
    """DB 세션 반환 (쓰기 가능)

    입금, 계좌 생성 시 사용.
    """
    settings = get_settings()
    async with SQLiteAdapter(settings.db_path, readonly=False) as db:
        yield db


# =========================================================================
# 인증 가드 (Bearer JWT → user_id)
# =========================================================================


def _unauthorized(message: str) -> ApiError:
    return ApiError(LedgerError(ErrorCode.UNAUTHORIZED, message))


def get_current_user_id(
    authorization: str | None = Header(default=None),
    settings: Settings = Depends(get_app_settings),
) -> str:
    """호출자 식별

    토큰 발급은 외부 IdP 담당. 여기서는 서명/만료만 검증하고
    userId 클레임을 신뢰하여 원장 연산에 전달.

    Raises:
        ApiError: 401 (헤더 누락/형식 오류, 토큰 검증 실패)
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise _unauthorized("Missing or invalid authorization header")

    token = authorization[len(BEARER_PREFIX):].strip()

    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.token_algorithm],
        )
    except jwt.PyJWTError:
        raise _unauthorized("Invalid or expired token")

    user_id = payload.get(Defaults.TOKEN_USER_CLAIM)
    if not isinstance(user_id, str) or not user_id:
        raise _unauthorized("Invalid or expired token")

    return user_id
