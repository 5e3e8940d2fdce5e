"""
DB 무결성 검증

잔액 == 원장 합계, 고아 레코드, 허용되지 않은 값 등을 검사.
ERROR가 하나라도 있으면 종료 코드 1.

사용법:
    python scripts/verify_integrity.py --mode production
    python scripts/verify_integrity.py --db data/qabank_dev.db --verbose
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
from core.ledger.integrity import IntegrityChecker, IntegrityReport
from core.logging import setup_logging
from core.types import AppMode

logger = logging.getLogger(__name__)


def print_report(report: IntegrityReport, verbose: bool = False) -> None:
    print("=" * 60)
    print("=== DB 무결성 검증 ===")
    print("=" * 60)

    if not report.issues:
        print("\n모든 검사 통과")
        return

    for issue in report.issues:
        print(f"\n[{issue.severity.value}] {issue.type}: {issue.message}")
        if verbose:
            for detail in issue.details:
                print(f"    {detail}")

    print(f"\n오류: {len(report.errors)}, 경고: {len(report.warnings)}")


async def main(db_path: Path, verbose: bool) -> int:
    if not db_path.exists():
        logger.error(f"DB 파일이 없습니다: {db_path}")
        return 1

    async with SQLiteAdapter(db_path, readonly=True) as db:
        checker = IntegrityChecker(db)
        missing = await checker.missing_tables()
        if missing:
            logger.error(f"스키마가 초기화되지 않았습니다 (누락: {', '.join(missing)}). scripts/init_db.py 먼저 실행")
            return 1
        report = await checker.verify()

    print_report(report, verbose)
    return 0 if report.ok else 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="DB 무결성 검증")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in AppMode],
        default=AppMode.DEVELOPMENT.value,
        help="실행 모드 (기본값: development)",
    )
    parser.add_argument("--db", type=Path, default=None, help="DB 파일 경로 (mode보다 우선)")
    parser.add_argument("--verbose", "-v", action="store_true", help="위반 항목 상세 출력")
    args = parser.parse_args()

    setup_logging("scripts")
    sys.exit(asyncio.run(main(args.db or get_db_path(args.mode), args.verbose)))
