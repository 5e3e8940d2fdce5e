#!/usr/bin/env python3
"""계좌 상세 및 원장 항목 확인 스크립트

사용법:
    python scripts/check_account.py <account_id> --mode development
"""

import argparse
import asyncio
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from adapters.db.sqlite_adapter import SQLiteAdapter, get_db_path
from core.constants import Money
from core.logging import setup_logging
from core.storage.account_store import AccountStore
from core.types import AppMode
from core.utils.money import format_money, parse_money


async def main(db_path: Path, account_id: str) -> int:
    async with SQLiteAdapter(db_path, readonly=True) as db:
        account = await AccountStore(db).get_account(account_id)
        if account is None:
            print(f"Account not found: {account_id}")
            return 1

        rows = await db.fetchall(
            """
            SELECT id, type, amount, reference, created_at
            FROM transactions
            WHERE account_id = ?
            ORDER BY created_at DESC, seq DESC
            """,
            (account_id,),
        )

    print(f"ID: {account.id}")
    print(f"Owner: {account.user_id}")
    print(f"Currency: {account.currency.value}")
    print(f"Balance: {format_money(account.balance)}")
    print(f"Created: {account.created_at.isoformat()}")

    print(f"\nTransactions ({len(rows)}):")
    total = Money.ZERO
    for entry_id, kind, amount, reference, created_at in rows:
        total += parse_money(amount)
        print(f"  - {created_at} | {kind} | {amount:>15} | {reference or '(none)'} | {entry_id}")

    if total != account.balance:
        print(f"\nMISMATCH: balance {format_money(account.balance)} != sum {format_money(total)}")
        return 1

    print(f"\nBalance matches sum of entries ({format_money(total)})")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="계좌 상세 확인")
    parser.add_argument("account_id", help="계좌 ID")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in AppMode],
        default=AppMode.DEVELOPMENT.value,
        help="실행 모드 (기본값: development)",
    )
    parser.add_argument("--db", type=Path, default=None, help="DB 파일 경로 (mode보다 우선)")
    args = parser.parse_args()

    setup_logging("scripts")
    sys.exit(asyncio.run(main(args.db or get_db_path(args.mode), args.account_id)))
