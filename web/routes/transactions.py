"""
거래 내역 라우트

GET /transactions?accountId=&page=&limit= - 계좌 거래 내역 (최신순)
"""

from fastapi import APIRouter, Depends, Query

from adapters.db.sqlite_adapter import SQLiteAdapter
from web.dependencies import get_current_user_id, get_db
from web.models.responses import TransactionListResponse
from web.services.transaction_service import TransactionService

router = APIRouter(prefix="/transactions", tags=["Transactions"])


@router.get("", response_model=TransactionListResponse)
async def get_transactions(
    accountId: str | None = Query(default=None, description="계좌 ID"),
    page: str | None = Query(default=None, description="페이지 번호 (기본값: 1)"),
    limit: str | None = Query(default=None, description="페이지 크기 (기본값: 20, 최대 100)"),
    user_id: str = Depends(get_current_user_id),
    db: SQLiteAdapter = Depends(get_db),
) -> TransactionListResponse:
    """거래 내역 목록 조회

    page/limit은 문자열로 받아 core에서 검증 (오류 메시지 일관성).
    """
    service = TransactionService(db)
    result = await service.get_transactions(user_id, accountId, page, limit)
    return TransactionListResponse(**result)
