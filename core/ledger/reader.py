"""
Transaction Reader

계좌 원장 항목의 페이지 조회 (읽기 전용).
"""

import logging
from typing import Any

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.domain.models import LedgerEntry, TransactionPage
from core.ledger.result import Ok, Result, internal_error
from core.ledger.types import ErrorMessages
from core.ledger.validation import parse_limit, parse_page, require_account_id
from core.storage.account_store import AccountStore

logger = logging.getLogger(__name__)


class TransactionReader:
    """거래 내역 조회기

    정렬: created_at DESC, seq DESC (같은 시각이면 나중에 삽입된 항목이 먼저).
    마지막 페이지 이후는 오류가 아닌 빈 목록.

    Args:
        adapter: SQLite 어댑터 (읽기 전용 가능)
    """

    def __init__(self, adapter: SQLiteAdapter):
        self.adapter = adapter
        self.accounts = AccountStore(adapter)

    async def list_transactions(
        self,
        account_id: Any,
        user_id: str,
        page: Any = None,
        limit: Any = None,
    ) -> Result[TransactionPage]:
        """거래 내역 페이지 조회

        검증 순서: accountId → page → limit → limit 상한 → 계좌 존재 → 소유권

        Args:
            account_id: 계좌 ID
            user_id: 인증된 호출자 ID
            page: 페이지 번호 (1부터, None이면 1)
            limit: 페이지 크기 (1~100, None이면 20)

        Returns:
            Ok(TransactionPage) 또는 LedgerError
        """
        checked = require_account_id(account_id)
        if not checked.ok:
            return checked

        page_result = parse_page(page)
        if not page_result.ok:
            return page_result

        limit_result = parse_limit(limit)
        if not limit_result.ok:
            return limit_result

        page_num = page_result.value
        limit_num = limit_result.value
        offset = (page_num - 1) * limit_num

        try:
            async with self.adapter.snapshot():
                owned = await self.accounts.get_owned_account(checked.value, user_id)
                if not owned.ok:
                    return owned

                count_row = await self.adapter.fetchone(
                    "SELECT COUNT(*) FROM transactions WHERE account_id = ?",
                    (checked.value,),
                )
                total = count_row[0] if count_row else 0

                # 마지막 페이지 이후 (SQLite INTEGER 범위를 넘는 offset 포함)
                if offset >= total:
                    rows = []
                else:
                    rows = await self.adapter.fetchall(
                        """
                        SELECT seq, id, account_id, type, amount, reference, created_at
                        FROM transactions
                        WHERE account_id = ?
                        ORDER BY created_at DESC, seq DESC
                        LIMIT ? OFFSET ?
                        """,
                        (checked.value, limit_num, offset),
                    )
        except Exception:
            logger.exception(f"거래 내역 조회 실패: account={checked.value}")
            return internal_error(ErrorMessages.LISTING_FAILED)

        return Ok(
            TransactionPage(
                items=[LedgerEntry.from_row(row) for row in rows],
                page=page_num,
                limit=limit_num,
                total=total,
            )
        )
