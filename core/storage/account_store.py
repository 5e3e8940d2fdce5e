"""
Account Store

계좌 생성/조회/삭제 및 소유권 확인.
잔액 변경은 LedgerWriter만 수행 (update_balance는 원장 트랜잭션 내부에서만 호출).
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable
from uuid import uuid4

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.constants import Money
from core.domain.models import Account
from core.ledger.result import Ok, Result, forbidden, internal_error, not_found, validation_error
from core.ledger.types import ErrorMessages
from core.types import Currency
from core.utils.money import format_money
from core.utils.timezone import now_utc, to_db_ts

logger = logging.getLogger(__name__)

_ACCOUNT_COLUMNS = "id, user_id, currency, balance, created_at"


def check_ownership(account: Account | None, user_id: str) -> Result[Account]:
    """계좌 존재 및 소유권 확인

    미존재 → NOT_FOUND, 타인 소유 → FORBIDDEN
    """
    if account is None:
        return not_found(ErrorMessages.ACCOUNT_NOT_FOUND)

    if not account.is_owned_by(user_id):
        return forbidden(ErrorMessages.ACCOUNT_FORBIDDEN)

    return Ok(account)


class AccountStore:
    """계좌 저장소

    Args:
        adapter: SQLite 어댑터
        clock: 현재 시각 함수 (테스트에서 고정 시각 주입)

    사용 예시:
    ```python
    store = AccountStore(adapter)

    result = await store.open_account(user_id, "EUR")
    if result.ok:
        account = result.value  # balance == Decimal("0.00")
    ```
    """

    def __init__(self, adapter: SQLiteAdapter, clock: Callable[[], datetime] = now_utc):
        self.adapter = adapter
        self.clock = clock

    async def open_account(self, user_id: str, currency: Any) -> Result[Account]:
        """계좌 생성 (잔액 0.00)

        Args:
            user_id: 소유자 ID
            currency: 통화 코드 (EUR/USD)

        Returns:
            Ok(Account) 또는 VALIDATION_ERROR / NOT_FOUND / INTERNAL_ERROR
        """
        if not currency:
            return validation_error(ErrorMessages.CURRENCY_REQUIRED)

        if not isinstance(currency, str) or currency not in {c.value for c in Currency}:
            return validation_error(ErrorMessages.CURRENCY_INVALID)

        account = Account(
            id=str(uuid4()),
            user_id=user_id,
            currency=Currency(currency),
            balance=Money.ZERO,
            created_at=self.clock(),
        )

        try:
            async with self.adapter.transaction():
                owner = await self.adapter.fetchone(
                    "SELECT 1 FROM users WHERE id = ?",
                    (user_id,),
                )
                if owner is None:
                    return not_found(ErrorMessages.USER_NOT_FOUND)

                await self.adapter.execute(
                    f"INSERT INTO accounts ({_ACCOUNT_COLUMNS}) VALUES (?, ?, ?, ?, ?)",
                    (
                        account.id,
                        account.user_id,
                        account.currency.value,
                        format_money(account.balance),
                        to_db_ts(account.created_at),
                    ),
                )
        except Exception:
            logger.exception(f"계좌 생성 실패: user={user_id}")
            return internal_error(ErrorMessages.UNEXPECTED_ERROR)

        logger.info(f"계좌 생성: {account.id} ({account.currency.value}) user={user_id}")
        return Ok(account)

    async def get_account(self, account_id: str) -> Account | None:
        """계좌 단건 조회"""
        row = await self.adapter.fetchone(
            f"SELECT {_ACCOUNT_COLUMNS} FROM accounts WHERE id = ?",
            (account_id,),
        )
        return Account.from_row(row) if row else None

    async def get_owned_account(self, account_id: str, user_id: str) -> Result[Account]:
        """소유권 확인을 포함한 계좌 조회"""
        account = await self.get_account(account_id)
        return check_ownership(account, user_id)

    async def list_accounts(self, user_id: str) -> list[Account]:
        """사용자 계좌 목록 (생성 순)"""
        rows = await self.adapter.fetchall(
            f"""
            SELECT {_ACCOUNT_COLUMNS} FROM accounts
            WHERE user_id = ?
            ORDER BY created_at ASC, id ASC
            """,
            (user_id,),
        )
        return [Account.from_row(row) for row in rows]

    async def list_all_accounts(self) -> list[Account]:
        """전체 계좌 (최신 생성 순, 관리 스크립트용)"""
        rows = await self.adapter.fetchall(
            f"SELECT {_ACCOUNT_COLUMNS} FROM accounts ORDER BY created_at DESC, id ASC"
        )
        return [Account.from_row(row) for row in rows]

    async def update_balance(self, account_id: str, balance: Decimal) -> None:
        """잔액 저장

        주의: 원장 항목 삽입과 같은 트랜잭션 안에서만 호출 (LedgerWriter 전용).
        """
        cursor = await self.adapter.execute(
            "UPDATE accounts SET balance = ? WHERE id = ?",
            (format_money(balance), account_id),
        )
        if cursor.rowcount != 1:
            raise RuntimeError(f"Balance update affected {cursor.rowcount} rows")

    async def delete_account(self, account_id: str) -> bool:
        """계좌 삭제 (원장 항목 CASCADE)

        관리/테스트 정리용. 일반 흐름에서는 호출하지 않음.

        Returns:
            True: 삭제됨, False: 존재하지 않음
        """
        async with self.adapter.transaction():
            cursor = await self.adapter.execute(
                "DELETE FROM accounts WHERE id = ?",
                (account_id,),
            )

        deleted = cursor.rowcount > 0
        if deleted:
            logger.info(f"계좌 삭제: {account_id}")
        return deleted
