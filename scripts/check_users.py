#!/usr/bin/env python3
"""사용자 확인 스크립트

인자가 없으면 전체 사용자 목록, 이메일 또는 ID를 주면 해당 사용자와 계좌 상세.

사용법:
    python scripts/check_users.py --mode development
    python scripts/check_users.py demo@qa.com
    python scripts/check_users.py <user_id> --db data/qabank_dev.db
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
from core.domain.models import Account, User
from core.logging import setup_logging
from core.storage.account_store import AccountStore
from core.storage.user_store import UserStore
from core.types import AppMode
from core.utils.money import format_money

logger = logging.getLogger(__name__)


async def find_user(users: UserStore, key: str) -> User | None:
    """이메일 또는 ID로 사용자 조회"""
    if "@" in key:
        return await users.get_user_by_email(key)
    return await users.get_user(key)


def print_users(users: list[User]) -> None:
    print("=== 전체 사용자 ===\n")
    if not users:
        print("사용자가 없습니다 (scripts/seed_demo.py로 데모 사용자 생성)")
        return

    for index, user in enumerate(users, start=1):
        print(f"User #{index}")
        print(f"  ID: {user.id}")
        print(f"  Email: {user.email}")
        print(f"  Created: {user.created_at.isoformat()}\n")

    print(f"Total users: {len(users)}")


def print_user_detail(user: User, accounts: list[Account]) -> None:
    print(f"=== 사용자: {user.email} ===\n")
    print(f"  ID: {user.id}")
    print(f"  Email: {user.email}")
    print(f"  Created: {user.created_at.isoformat()}\n")

    print("Accounts:")
    if not accounts:
        print("  계좌 없음")
        return

    totals: dict[str, Decimal] = {}
    for index, account in enumerate(accounts, start=1):
        currency = account.currency.value
        totals[currency] = totals.get(currency, Money.ZERO) + account.balance
        print(f"  Account #{index}: {account.id} | {currency} | {format_money(account.balance):>15}")

    print(f"\n  Total accounts: {len(accounts)}")
    for currency, total in totals.items():
        print(f"  Total {currency}: {format_money(total)}")


async def main(db_path: Path, user_key: str | None = None) -> int:
    if not db_path.exists():
        logger.error(f"DB 파일이 없습니다: {db_path}")
        return 1

    async with SQLiteAdapter(db_path, readonly=True) as db:
        users = UserStore(db)
        if user_key is None:
            print_users(await users.list_users())
            return 0

        user = await find_user(users, user_key)
        if user is None:
            print(f"User not found: {user_key}")
            return 1

        accounts = await AccountStore(db).list_accounts(user.id)

    print_user_detail(user, accounts)
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="사용자 확인")
    parser.add_argument("user", nargs="?", default=None, help="이메일 또는 사용자 ID (생략 시 전체 목록)")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in AppMode],
        default=AppMode.DEVELOPMENT.value,
        help="실행 모드 (기본값: development)",
    )
    parser.add_argument("--db", type=Path, default=None, help="DB 파일 경로 (mode보다 우선)")
    args = parser.parse_args()

    setup_logging("scripts")
    sys.exit(asyncio.run(main(args.db or get_db_path(args.mode), args.user)))
