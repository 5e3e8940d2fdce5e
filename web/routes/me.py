"""
호출자 정보 라우트

GET /me - 토큰의 userId에 해당하는 사용자
"""

from fastapi import APIRouter, Depends

from adapters.db.sqlite_adapter import SQLiteAdapter
from web.dependencies import get_current_user_id, get_db
from web.models.responses import UserResponse
from web.services.account_service import AccountService

router = APIRouter(tags=["Users"])


@router.get("/me", response_model=UserResponse)
async def get_me(
    user_id: str = Depends(get_current_user_id),
    db: SQLiteAdapter = Depends(get_db),
) -> UserResponse:
    """호출자 사용자 정보 조회 (미존재 시 404)"""
    service = AccountService(db)
    return UserResponse(**await service.get_me(user_id))
