"""
원장 무결성 검증

DB 전체를 스캔하여 불변식 위반을 보고.
- 잔액 == 원장 항목 합계
- 잔액 >= 0, 항목 금액 > 0
- 고아 계좌/항목, 허용되지 않은 통화/유형, 중복 이메일

금액은 TEXT로 저장되므로 합계는 SQL SUM(REAL)이 아닌 Python Decimal로 계산.
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.constants import Money
from core.types import Currency, IssueSeverity, TransactionKind
from core.utils.money import format_money

logger = logging.getLogger(__name__)

REQUIRED_TABLES = ("users", "accounts", "transactions")


@dataclass(frozen=True)
class IntegrityIssue:
    """무결성 위반 항목"""

    type: str
    severity: IssueSeverity
    message: str
    details: list[dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "severity": self.severity.value,
            "message": self.message,
            "details": self.details,
        }


@dataclass
class IntegrityReport:
    """무결성 검증 결과"""

    issues: list[IntegrityIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[IntegrityIssue]:
        return [i for i in self.issues if i.severity == IssueSeverity.ERROR]

    @property
    def warnings(self) -> list[IntegrityIssue]:
        return [i for i in self.issues if i.severity == IssueSeverity.WARNING]

    @property
    def ok(self) -> bool:
        """ERROR가 없으면 True (WARNING은 허용)"""
        return not self.errors

    def issue_types(self) -> set[str]:
        return {i.type for i in self.issues}


def _to_decimal(value: str | None) -> Decimal | None:
    """DB TEXT 금액 → Decimal (파싱 불가면 None)"""
    if value is None:
        return None
    try:
        return Decimal(value)
    except InvalidOperation:
        return None


class IntegrityChecker:
    """DB 무결성 검사기

    Args:
        adapter: SQLite 어댑터 (읽기 전용 가능)

    사용 예시:
    ```python
    async with SQLiteAdapter(db_path, readonly=True) as db:
        report = await IntegrityChecker(db).verify()
        if not report.ok:
            for issue in report.errors:
                print(issue.type, issue.message)
    ```
    """

    def __init__(self, adapter: SQLiteAdapter):
        self.adapter = adapter

    async def missing_tables(self) -> list[str]:
        """스키마 누락 테이블 (init_db.py 실행 전 DB 등)"""
        return [t for t in REQUIRED_TABLES if not await self.adapter.table_exists(t)]

    async def verify(self) -> IntegrityReport:
        """전체 검사 실행"""
        report = IntegrityReport()

        checks = [
            self._check_orphaned_accounts,
            self._check_orphaned_transactions,
            self._check_negative_balances,
            self._check_balance_mismatch,
            self._check_invalid_currencies,
            self._check_invalid_transaction_types,
            self._check_invalid_amounts,
            self._check_duplicate_emails,
            self._check_users_without_accounts,
            self._check_balance_without_transactions,
        ]

        for check in checks:
            issue = await check()
            if issue is not None:
                report.issues.append(issue)

        logger.info(
            f"무결성 검사 완료: errors={len(report.errors)} warnings={len(report.warnings)}"
        )
        return report

    # -------------------------------------------------------------------------
    # 개별 검사
    # -------------------------------------------------------------------------

    async def _check_orphaned_accounts(self) -> IntegrityIssue | None:
        rows = await self.adapter.fetchall("""
            SELECT a.id, a.currency, a.balance
            FROM accounts a
            LEFT JOIN users u ON a.user_id = u.id
            WHERE u.id IS NULL
        """)
        if not rows:
            return None
        return IntegrityIssue(
            type="ORPHANED_ACCOUNTS",
            severity=IssueSeverity.ERROR,
            message=f"Found {len(rows)} accounts without valid users",
            details=[{"id": r[0], "currency": r[1], "balance": r[2]} for r in rows],
        )

    async def _check_orphaned_transactions(self) -> IntegrityIssue | None:
        rows = await self.adapter.fetchall("""
            SELECT t.id, t.type, t.amount
            FROM transactions t
            LEFT JOIN accounts a ON t.account_id = a.id
            WHERE a.id IS NULL
        """)
        if not rows:
            return None
        return IntegrityIssue(
            type="ORPHANED_TRANSACTIONS",
            severity=IssueSeverity.ERROR,
            message=f"Found {len(rows)} transactions without valid accounts",
            details=[{"id": r[0], "type": r[1], "amount": r[2]} for r in rows],
        )

    async def _check_negative_balances(self) -> IntegrityIssue | None:
        rows = await self.adapter.fetchall("SELECT id, currency, balance FROM accounts")
        negative = []
        for account_id, currency, raw in rows:
            balance = _to_decimal(raw)
            if balance is not None and balance < 0:
                negative.append({"id": account_id, "currency": currency, "balance": raw})
        if not negative:
            return None
        return IntegrityIssue(
            type="NEGATIVE_BALANCES",
            severity=IssueSeverity.ERROR,
            message=f"Found {len(negative)} accounts with negative balances",
            details=negative,
        )

    async def _check_balance_mismatch(self) -> IntegrityIssue | None:
        sums = await self._entry_sums()
        rows = await self.adapter.fetchall("SELECT id, balance FROM accounts")

        mismatches = []
        for account_id, stored in rows:
            stored_balance = _to_decimal(stored)
            calculated = sums.get(account_id, Money.ZERO)
            if stored_balance is None or stored_balance != calculated:
                mismatches.append({
                    "account_id": account_id,
                    "stored_balance": stored,
                    "calculated_balance": format_money(calculated),
                    "difference": (
                        format_money(stored_balance - calculated)
                        if stored_balance is not None
                        else None
                    ),
                })

        if not mismatches:
            return None
        return IntegrityIssue(
            type="BALANCE_MISMATCH",
            severity=IssueSeverity.ERROR,
            message=f"Found {len(mismatches)} accounts with incorrect balances",
            details=mismatches,
        )

    async def _check_invalid_currencies(self) -> IntegrityIssue | None:
        valid = tuple(c.value for c in Currency)
        placeholders = ", ".join("?" for _ in valid)
        rows = await self.adapter.fetchall(
            f"SELECT id, currency FROM accounts WHERE currency NOT IN ({placeholders})",
            valid,
        )
        if not rows:
            return None
        return IntegrityIssue(
            type="INVALID_CURRENCIES",
            severity=IssueSeverity.ERROR,
            message=f"Found {len(rows)} accounts with invalid currencies",
            details=[{"id": r[0], "currency": r[1]} for r in rows],
        )

    async def _check_invalid_transaction_types(self) -> IntegrityIssue | None:
        valid = tuple(k.value for k in TransactionKind)
        placeholders = ", ".join("?" for _ in valid)
        rows = await self.adapter.fetchall(
            f"SELECT id, type FROM transactions WHERE type NOT IN ({placeholders})",
            valid,
        )
        if not rows:
            return None
        return IntegrityIssue(
            type="INVALID_TRANSACTION_TYPES",
            severity=IssueSeverity.ERROR,
            message=f"Found {len(rows)} transactions with invalid types",
            details=[{"id": r[0], "type": r[1]} for r in rows],
        )

    async def _check_invalid_amounts(self) -> IntegrityIssue | None:
        rows = await self.adapter.fetchall("SELECT id, type, amount FROM transactions")
        invalid = []
        for entry_id, kind, raw in rows:
            amount = _to_decimal(raw)
            if amount is None or amount <= 0:
                invalid.append({"id": entry_id, "type": kind, "amount": raw})
        if not invalid:
            return None
        return IntegrityIssue(
            type="INVALID_AMOUNTS",
            severity=IssueSeverity.ERROR,
            message=f"Found {len(invalid)} transactions with zero or negative amounts",
            details=invalid,
        )

    async def _check_duplicate_emails(self) -> IntegrityIssue | None:
        rows = await self.adapter.fetchall("""
            SELECT email, COUNT(*) AS cnt
            FROM users
            GROUP BY email
            HAVING COUNT(*) > 1
        """)
        if not rows:
            return None
        return IntegrityIssue(
            type="DUPLICATE_EMAILS",
            severity=IssueSeverity.ERROR,
            message=f"Found {len(rows)} duplicate email addresses",
            details=[{"email": r[0], "count": r[1]} for r in rows],
        )

    async def _check_users_without_accounts(self) -> IntegrityIssue | None:
        rows = await self.adapter.fetchall("""
            SELECT u.id, u.email
            FROM users u
            LEFT JOIN accounts a ON u.id = a.user_id
            WHERE a.id IS NULL
        """)
        if not rows:
            return None
        return IntegrityIssue(
            type="USERS_WITHOUT_ACCOUNTS",
            severity=IssueSeverity.WARNING,
            message=f"Found {len(rows)} users without any accounts",
            details=[{"id": r[0], "email": r[1]} for r in rows],
        )

    async def _check_balance_without_transactions(self) -> IntegrityIssue | None:
        rows = await self.adapter.fetchall("""
            SELECT a.id, a.currency, a.balance
            FROM accounts a
            LEFT JOIN transactions t ON a.id = t.account_id
            WHERE t.id IS NULL
        """)
        flagged = [
            {"id": r[0], "currency": r[1], "balance": r[2]}
            for r in rows
            if _to_decimal(r[2]) != 0
        ]
        if not flagged:
            return None
        return IntegrityIssue(
            type="BALANCE_WITHOUT_TRANSACTIONS",
            severity=IssueSeverity.ERROR,
            message=f"Found {len(flagged)} accounts with balance but no transactions",
            details=flagged,
        )

    # -------------------------------------------------------------------------
    # 통계
    # -------------------------------------------------------------------------

    async def _entry_sums(self) -> dict[str, Decimal]:
        """계좌별 원장 항목 합계 (파싱 불가 금액은 제외)"""
        rows = await self.adapter.fetchall("SELECT account_id, amount FROM transactions")
        sums: dict[str, Decimal] = {}
        for account_id, amount in rows:
            value = _to_decimal(amount)
            if value is not None:
                sums[account_id] = sums.get(account_id, Money.ZERO) + value
        return sums

    async def collect_stats(self) -> dict[str, Any]:
        """DB 통계 (사용자/계좌/거래 수, 통화별 잔액 합계)"""
        user_row = await self.adapter.fetchone("SELECT COUNT(*) FROM users")

        account_rows = await self.adapter.fetchall("SELECT currency, balance FROM accounts")
        by_currency: dict[str, dict[str, Any]] = {
            c.value: {"accounts": 0, "total_balance": Money.ZERO} for c in Currency
        }
        for currency, balance in account_rows:
            bucket = by_currency.setdefault(
                currency, {"accounts": 0, "total_balance": Money.ZERO}
            )
            bucket["accounts"] += 1
            bucket["total_balance"] += _to_decimal(balance) or Money.ZERO

        tx_rows = await self.adapter.fetchall("SELECT account_id, amount FROM transactions")
        amounts = []
        for _, raw in tx_rows:
            value = _to_decimal(raw)
            if value is not None:
                amounts.append(value)
        total_amount = sum(amounts, Money.ZERO)

        return {
            "users": user_row[0] if user_row else 0,
            "accounts": len(account_rows),
            "accounts_by_currency": {
                currency: {
                    "accounts": bucket["accounts"],
                    "total_balance": format_money(bucket["total_balance"]),
                }
                for currency, bucket in by_currency.items()
            },
            "transactions": len(tx_rows),
            "accounts_with_transactions": len({account_id for account_id, _ in tx_rows}),
            "total_amount": format_money(total_amount),
            "average_amount": (
                format_money(total_amount / len(amounts)) if amounts else format_money(Money.ZERO)
            ),
        }
