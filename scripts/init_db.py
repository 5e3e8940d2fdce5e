"""
DB 스키마 초기화

사용법:
    python scripts/init_db.py --mode development
    python scripts/init_db.py --db data/custom.db
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# 프로젝트 루트를 Python 경로에 추가
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from adapters.db.sqlite_adapter import SQLiteAdapter, get_db_path, init_schema
from core.logging import setup_logging
from core.types import AppMode

logger = logging.getLogger(__name__)


async def main(db_path: Path) -> None:
    async with SQLiteAdapter(db_path) as db:
        await init_schema(db)

        for table in ("users", "accounts", "transactions"):
            columns = await db.get_table_info(table)
            logger.info(f"  {table}: {', '.join(c['name'] for c in columns)}")

    logger.info(f"DB 초기화 완료: {db_path}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="DB 스키마 초기화")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in AppMode],
        default=AppMode.DEVELOPMENT.value,
        help="실행 모드 (기본값: development)",
    )
    parser.add_argument("--db", type=Path, default=None, help="DB 파일 경로 (mode보다 우선)")
    args = parser.parse_args()

    setup_logging("scripts")
    asyncio.run(main(args.db or get_db_path(args.mode)))
