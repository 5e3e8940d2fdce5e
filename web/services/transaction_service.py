"""
거래 서비스

입금 및 거래 내역 조회.
"""

from typing import Any

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.ledger.reader import TransactionReader
from core.ledger.writer import LedgerWriter
from web.errors import ApiError


class TransactionService:
    """거래 서비스

    LedgerWriter / TransactionReader 결과를 응답 dict로 변환.
    """

    def __init__(self, db: SQLiteAdapter):
        self.db = db
        self.writer = LedgerWriter(db)
        self.reader = TransactionReader(db)

    async def deposit(
        self,
        user_id: str,
        account_id: Any,
        amount: Any,
        reference: str | None = None,
    ) -> dict[str, Any]:
        """입금

        Returns:
            transactionId, newBalance, entry 포함 응답
        """
        result = await self.writer.deposit(account_id, amount, user_id, reference)
        if not result.ok:
            raise ApiError(result)
        return result.value.to_dict()

    async def get_transactions(
        self,
        user_id: str,
        account_id: Any,
        page: Any = None,
        limit: Any = None,
    ) -> dict[str, Any]:
        """거래 내역 조회 (최신순)

        Returns:
            items, page, limit, total 포함 응답
        """
        result = await self.reader.list_transactions(account_id, user_id, page, limit)
        if not result.ok:
            raise ApiError(result)
        return result.value.to_dict()
