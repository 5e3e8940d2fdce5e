"""
Ledger Writer

입금 원장 항목 기록 + 계좌 잔액 갱신을 하나의 트랜잭션으로 처리.
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable
from uuid import uuid4

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.domain.models import Account, DepositReceipt, LedgerEntry
from core.ledger.result import Ok, Result, internal_error
from core.ledger.types import ErrorMessages
from core.ledger.validation import parse_amount, require_account_id
from core.storage.account_store import AccountStore
from core.types import TransactionKind
from core.utils.money import format_money
from core.utils.timezone import now_utc, to_db_ts

logger = logging.getLogger(__name__)


class LedgerWriter:
    """원장 기록기

    잔액을 변경할 수 있는 유일한 경로.
    항목 삽입과 잔액 갱신은 BEGIN IMMEDIATE 트랜잭션 안에서 수행되어
    같은 계좌에 대한 동시 입금이 직렬화됨 (lost update 없음).

    멱등하지 않음: 같은 요청을 두 번 보내면 항목 2개, 잔액 2배 증가.

    Args:
        adapter: SQLite 어댑터 (쓰기 가능)
        clock: 현재 시각 함수 (테스트에서 단조 증가 시각 주입)

    사용 예시:
    ```python
    writer = LedgerWriter(adapter)

    result = await writer.deposit(account_id, Decimal("100.50"), user_id, reference="first")
    if result.ok:
        print(result.value.entry_id, result.value.new_balance)
    else:
        print(result.code, result.message)
    ```
    """

    def __init__(self, adapter: SQLiteAdapter, clock: Callable[[], datetime] = now_utc):
        self.adapter = adapter
        self.accounts = AccountStore(adapter)
        self.clock = clock

    async def deposit(
        self,
        account_id: Any,
        amount: Any,
        user_id: str,
        reference: str | None = None,
    ) -> Result[DepositReceipt]:
        """입금

        검증 순서 (첫 번째 실패 반환):
        1. amount 숫자 여부
        2. amount > 0
        3. accountId 필수
        4. 계좌 존재
        5. 소유자 == 호출자

        Args:
            account_id: 계좌 ID
            amount: 입금 금액 (int, float, Decimal)
            user_id: 인증된 호출자 ID
            reference: 메모 (해석하지 않음, 빈 문자열은 None)

        Returns:
            Ok(DepositReceipt) 또는 LedgerError
        """
        parsed = parse_amount(amount)
        if not parsed.ok:
            logger.info(f"입금 검증 실패: {parsed.message} (amount={amount!r})")
            return parsed

        checked = require_account_id(account_id)
        if not checked.ok:
            logger.info(f"입금 검증 실패: {checked.message}")
            return checked

        try:
            async with self.adapter.transaction(immediate=True):
                owned = await self.accounts.get_owned_account(checked.value, user_id)
                if not owned.ok:
                    logger.info(
                        f"입금 거부: {owned.code.value} account={checked.value} user={user_id}"
                    )
                    return owned

                account = owned.value
                entry = await self._insert_entry(account, parsed.value, reference or None)
                new_balance = account.balance + entry.amount
                await self._apply_balance(account, new_balance)
        except Exception:
            logger.exception(f"입금 처리 실패 (롤백됨): account={checked.value}")
            return internal_error(ErrorMessages.DEPOSIT_FAILED)

        logger.info(
            f"입금 완료: account={account.id} amount={format_money(entry.amount)} "
            f"balance={format_money(new_balance)} entry={entry.id}"
        )
        return Ok(DepositReceipt(entry=entry, new_balance=new_balance))

    async def _insert_entry(
        self,
        account: Account,
        amount: Decimal,
        reference: str | None,
    ) -> LedgerEntry:
        """원장 항목 삽입 (트랜잭션 내부)"""
        entry_id = str(uuid4())
        created_at = self.clock()

        cursor = await self.adapter.execute(
            """
            INSERT INTO transactions (id, account_id, type, amount, reference, created_at)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (
                entry_id,
                account.id,
                TransactionKind.DEPOSIT.value,
                format_money(amount),
                reference,
                to_db_ts(created_at),
            ),
        )

        return LedgerEntry(
            id=entry_id,
            seq=cursor.lastrowid,
            account_id=account.id,
            kind=TransactionKind.DEPOSIT,
            amount=amount,
            reference=reference,
            created_at=created_at,
        )

    async def _apply_balance(self, account: Account, new_balance: Decimal) -> None:
        """잔액 갱신 (트랜잭션 내부)"""
        await self.accounts.update_balance(account.id, new_balance)
