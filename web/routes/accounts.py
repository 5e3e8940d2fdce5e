"""
계좌 라우트

POST /accounts       - 계좌 생성
GET  /accounts       - 호출자 계좌 목록
GET  /accounts/{id}  - 계좌 단건 조회
"""

from fastapi import APIRouter, Depends, Path

from adapters.db.sqlite_adapter import SQLiteAdapter
from web.dependencies import get_current_user_id, get_db, get_db_write
from web.models.requests import AccountCreateRequest
from web.models.responses import AccountListResponse, AccountResponse
from web.services.account_service import AccountService

router = APIRouter(prefix="/accounts", tags=["Accounts"])


@router.post("", response_model=AccountResponse, status_code=201)
async def create_account(
    request: AccountCreateRequest,
    user_id: str = Depends(get_current_user_id),
    db: SQLiteAdapter = Depends(get_db_write),
) -> AccountResponse:
    """계좌 생성

    잔액 0.00으로 시작. 통화는 EUR 또는 USD.
    """
    service = AccountService(db)
    return AccountResponse(**await service.open_account(user_id, request.currency))


@router.get("", response_model=AccountListResponse)
async def list_accounts(
    user_id: str = Depends(get_current_user_id),
    db: SQLiteAdapter = Depends(get_db),
) -> AccountListResponse:
    """호출자 계좌 목록 (생성 순)"""
    service = AccountService(db)
    accounts = await service.list_accounts(user_id)
    return AccountListResponse(accounts=[AccountResponse(**a) for a in accounts])


@router.get("/{account_id}", response_model=AccountResponse)
async def get_account(
    account_id: str = Path(..., description="계좌 ID"),
    user_id: str = Depends(get_current_user_id),
    db: SQLiteAdapter = Depends(get_db),
) -> AccountResponse:
    """계좌 단건 조회 (미존재 또는 타인 소유 시 404)"""
    service = AccountService(db)
    return AccountResponse(**await service.get_account(account_id, user_id))
