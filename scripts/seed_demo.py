"""
데모 사용자 생성

이미 존재하는 이메일은 건너뜀 (반복 실행 안전).

사용법:
    python scripts/seed_demo.py --mode development
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
from core.storage.user_store import UserStore
from core.types import AppMode

logger = logging.getLogger(__name__)

DEMO_EMAILS = ["demo@qa.com", "second-demo@qa.com"]


async def seed(db: SQLiteAdapter) -> list[str]:
    """데모 사용자 생성

    Returns:
        새로 생성된 사용자 ID 목록
    """
    users = UserStore(db)
    created = []

    for email in DEMO_EMAILS:
        existing = await users.get_user_by_email(email)
        if existing is not None:
            logger.info(f"  {email} 이미 존재, 건너뜀 (id={existing.id})")
            continue

        user = await users.create_user(email)
        created.append(user.id)
        logger.info(f"  데모 사용자 생성: {user.email} (id={user.id})")

    return created


async def main(db_path: Path) -> None:
    async with SQLiteAdapter(db_path) as db:
        await init_schema(db)
        created = await seed(db)

    logger.info(f"시드 완료: {len(created)}명 생성")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="데모 사용자 생성")
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
