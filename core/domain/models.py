"""
도메인 모델

User / Account / LedgerEntry 및 원장 연산 결과 타입.
DB 행(tuple)에서 생성하는 from_row()와 API 직렬화용 to_dict() 제공.
"""

import math
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any

from core.types import Currency, TransactionKind
from core.utils.money import format_money, parse_money
from core.utils.timezone import from_db_ts


@dataclass(frozen=True)
class User:
    """사용자 (계좌 소유자)"""

    id: str
    email: str
    created_at: datetime

    @staticmethod
    def from_row(row: tuple[Any, ...]) -> "User":
        """(id, email, created_at) 행에서 생성"""
        return User(id=row[0], email=row[1], created_at=from_db_ts(row[2]))

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "email": self.email}


@dataclass(frozen=True)
class Account:
    """계좌

    잔액은 원장 항목 합계와 항상 일치해야 하며 음수 불가.
    통화와 소유자는 생성 후 변경되지 않음.
    """

    id: str
    user_id: str
    currency: Currency
    balance: Decimal
    created_at: datetime

    @staticmethod
    def from_row(row: tuple[Any, ...]) -> "Account":
        """(id, user_id, currency, balance, created_at) 행에서 생성"""
        return Account(
            id=row[0],
            user_id=row[1],
            currency=Currency(row[2]),
            balance=parse_money(row[3]),
            created_at=from_db_ts(row[4]),
        )

    def is_owned_by(self, user_id: str) -> bool:
        return self.user_id == user_id

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "currency": self.currency.value,
            "balance": format_money(self.balance),
        }


@dataclass(frozen=True)
class LedgerEntry:
    """원장 항목 (거래)

    생성 후 불변. INSERT만 존재하고 UPDATE는 없음.
    seq는 DB 삽입 순번으로, 같은 created_at 사이의 정렬 기준.
    """

    id: str
    seq: int
    account_id: str
    kind: TransactionKind
    amount: Decimal
    reference: str | None
    created_at: datetime

    @staticmethod
    def from_row(row: tuple[Any, ...]) -> "LedgerEntry":
        """(seq, id, account_id, type, amount, reference, created_at) 행에서 생성"""
        return LedgerEntry(
            seq=row[0],
            id=row[1],
            account_id=row[2],
            kind=TransactionKind(row[3]),
            amount=parse_money(row[4]),
            reference=row[5],
            created_at=from_db_ts(row[6]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "account_id": self.account_id,
            "type": self.kind.value,
            "amount": format_money(self.amount),
            "reference": self.reference,
            "created_at": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class DepositReceipt:
    """입금 결과 (새 원장 항목 + 반영 후 잔액)"""

    entry: LedgerEntry
    new_balance: Decimal

    @property
    def entry_id(self) -> str:
        return self.entry.id

    def to_dict(self) -> dict[str, Any]:
        return {
            "transactionId": self.entry.id,
            "newBalance": format_money(self.new_balance),
            "entry": self.entry.to_dict(),
        }


@dataclass(frozen=True)
class TransactionPage:
    """거래 내역 페이지

    total은 계좌 전체 항목 수 (클라이언트 페이지 수 계산용).
    """

    items: list[LedgerEntry]
    page: int
    limit: int
    total: int

    @property
    def pages(self) -> int:
        """전체 페이지 수 (항목이 없으면 0)"""
        return math.ceil(self.total / self.limit) if self.total else 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "items": [item.to_dict() for item in self.items],
            "page": self.page,
            "limit": self.limit,
            "total": self.total,
        }
