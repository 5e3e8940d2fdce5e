"""
DB 통계 출력

사용법:
    python scripts/db_stats.py --mode development
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# 프로젝트 루트를 Python 경로에 추가
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from adapters.db.sqlite_adapter import SQLiteAdapter, get_db_path
from core.ledger.integrity import IntegrityChecker
from core.logging import setup_logging
from core.types import AppMode

logger = logging.getLogger(__name__)


async def main(db_path: Path) -> int:
    if not db_path.exists():
        logger.error(f"DB 파일이 없습니다: {db_path}")
        return 1

    async with SQLiteAdapter(db_path, readonly=True) as db:
        checker = IntegrityChecker(db)
        missing = await checker.missing_tables()
        if missing:
            logger.error(f"스키마가 초기화되지 않았습니다 (누락: {', '.join(missing)})")
            return 1
        stats = await checker.collect_stats()

    print(f"DB Path: {db_path}")
    print(f"\n[1] 사용자: {stats['users']}")
    print(f"\n[2] 계좌: {stats['accounts']}")
    for currency, bucket in stats["accounts_by_currency"].items():
        print(f"  {currency:4} | {bucket['accounts']:>5}개 | 잔액 합계 {bucket['total_balance']:>15}")

    print(f"\n[3] 거래: {stats['transactions']}")
    print(f"  거래가 있는 계좌: {stats['accounts_with_transactions']}")
    print(f"  총 입금액: {stats['total_amount']}")
    print(f"  평균 입금액: {stats['average_amount']}")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="DB 통계 출력")
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
