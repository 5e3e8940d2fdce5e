#!/usr/bin/env python3
"""전체 계좌 확인 스크립트

계좌별 소유자/잔액과 통화별 합계 출력.

사용법:
    python scripts/check_accounts.py --mode development
"""

import argparse
import asyncio
import logging
import sys
from decimal import Decimal
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from adapters.db.sqlite_adapter import SQLiteAdapter, get_db_path
from core.constants import Money
from core.logging import setup_logging
from core.storage.account_store import AccountStore
from core.storage.user_store import UserStore
from core.types import AppMode, Currency
from core.utils.money import format_money

logger = logging.getLogger(__name__)


async def main(db_path: Path) -> int:
    if not db_path.exists():
        logger.error(f"DB 파일이 없습니다: {db_path}")
        return 1

    async with SQLiteAdapter(db_path, readonly=True) as db:
        accounts = await AccountStore(db).list_all_accounts()
        emails = {user.id: user.email for user in await UserStore(db).list_users()}

    print("=== 전체 계좌 ===\n")
    if not accounts:
        print("계좌가 없습니다 (POST /accounts로 생성)")
        return 0

    counts = {c.value: 0 for c in Currency}
    totals: dict[str, Decimal] = {c.value: Money.ZERO for c in Currency}
    for index, account in enumerate(accounts, start=1):
        currency = account.currency.value
        counts[currency] += 1
        totals[currency] += account.balance

        print(f"Account #{index}")
        print(f"  ID: {account.id}")
        print(f"  Currency: {currency}")
        print(f"  Balance: {format_money(account.balance)}")
        print(f"  Owner: {emails.get(account.user_id, '(unknown)')} ({account.user_id})")
        print(f"  Created: {account.created_at.isoformat()}\n")

    print(f"Total accounts: {len(accounts)}")
    for currency in counts:
        print(f"  {currency} accounts: {counts[currency]} (Total: {format_money(totals[currency])})")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="전체 계좌 확인")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in AppMode],
        default=AppMode.DEVELOPMENT.value,
        help="실행 모드 (기본값: development)",
    )
    parser.add_argument("--db", type=Path, default=None, help="DB 파일 경로 (mode보다 우선)")
    args = parser.parse_args()

    setup_logging("scripts")
    sys.exit(asyncio.run(main(args.db or get_db_path(args.mode))))
