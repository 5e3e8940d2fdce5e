"""
계좌 서비스

계좌 생성/조회 및 호출자 정보.
"""

from typing import Any

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.ledger.result import not_found
from core.ledger.types import ErrorMessages
from core.storage.account_store import AccountStore
from core.storage.user_store import UserStore
from core.types import ErrorCode
from web.errors import ApiError


class AccountService:
    """계좌 서비스

    core 결과(Ok/LedgerError)를 응답 dict로 변환.
    오류 결과는 ApiError로 발생시켜 공통 오류 핸들러에서 처리.
    """

    def __init__(self, db: SQLiteAdapter):
        self.db = db
        self.account_store = AccountStore(db)
        self.user_store = UserStore(db)

    async def get_me(self, user_id: str) -> dict[str, Any]:
        """호출자 사용자 정보"""
        user = await self.user_store.get_user(user_id)
        if user is None:
            raise ApiError(not_found(ErrorMessages.USER_NOT_FOUND))
        return user.to_dict()

    async def open_account(self, user_id: str, currency: Any) -> dict[str, Any]:
        """계좌 생성 (잔액 0.00)"""
        result = await self.account_store.open_account(user_id, currency)
        if not result.ok:
            raise ApiError(result)
        return result.value.to_dict()

    async def list_accounts(self, user_id: str) -> list[dict[str, Any]]:
        """호출자 계좌 목록"""
        accounts = await self.account_store.list_accounts(user_id)
        return [account.to_dict() for account in accounts]

    async def get_account(self, account_id: str, user_id: str) -> dict[str, Any]:
        """계좌 단건 조회

        타인 소유 계좌는 존재 자체를 숨기기 위해 404로 응답.
        """
        result = await self.account_store.get_owned_account(account_id, user_id)
        if not result.ok:
            if result.code == ErrorCode.FORBIDDEN:
                raise ApiError(not_found(ErrorMessages.ACCOUNT_NOT_FOUND))
            raise ApiError(result)
        return result.value.to_dict()
