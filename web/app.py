"""
FastAPI 애플리케이션

라우터 등록 및 앱 설정.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from core.config.loader import get_settings
from core.constants import SERVICE_NAME, SERVICE_VERSION
from core.logging import ACCESS_LOGGER, setup_logging

# 로깅 설정 (콘솔 + 파일)
setup_logging("web")

from web.errors import register_exception_handlers
from web.routes import (
    accounts,
    deposits,
    health,
    me,
    transactions,
)

logger = logging.getLogger(__name__)
access_logger = logging.getLogger(ACCESS_LOGGER)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 생명주기 관리"""
    from adapters.db.sqlite_adapter import SQLiteAdapter, init_schema

    settings = get_settings()

    # 시작 시 - DB 스키마 자동 초기화
    async with SQLiteAdapter(settings.db_path) as db:
        await init_schema(db)

    logger.info(f"{SERVICE_NAME} 시작: mode={settings.mode.value} db={settings.db_path}")

    yield

    logger.info(f"{SERVICE_NAME} 종료")


app = FastAPI(
    title=SERVICE_NAME,
    description="계좌 입금 및 거래 내역 API",
    version=SERVICE_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """요청 로그 (METHOD path -> status)"""
    response = await call_next(request)
    access_logger.info(f"{request.method} {request.url.path} -> {response.status_code}")
    return response


register_exception_handlers(app)

# =========================================================================
# API 라우터 등록
# =========================================================================

app.include_router(health.router)
app.include_router(me.router)
app.include_router(accounts.router)
app.include_router(deposits.router)
app.include_router(transactions.router)
