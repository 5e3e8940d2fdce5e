"""
입금 라우트

POST /deposits - 입금 (원장 항목 추가 + 잔액 증가, 원자적)
"""

from fastapi import APIRouter, Depends

from adapters.db.sqlite_adapter import SQLiteAdapter
from web.dependencies import get_current_user_id, get_db_write
from web.models.requests import DepositRequest
from web.models.responses import DepositResponse
from web.services.transaction_service import TransactionService

router = APIRouter(prefix="/deposits", tags=["Deposits"])


@router.post("", response_model=DepositResponse, status_code=201)
async def create_deposit(
    request: DepositRequest,
    user_id: str = Depends(get_current_user_id),
    db: SQLiteAdapter = Depends(get_db_write),
) -> DepositResponse:
    """입금

    멱등성 없음: 같은 요청을 두 번 보내면 두 번 입금됨.
    """
    service = TransactionService(db)
    receipt = await service.deposit(
        user_id=user_id,
        account_id=request.accountId,
        amount=request.amount,
        reference=request.reference,
    )
    return DepositResponse(**receipt)
