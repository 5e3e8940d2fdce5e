"""
User Store

계좌 소유자 레코드 관리.
사용자 관리 자체(가입, 인증)는 범위 밖이며 시드/테스트/`/me` 조회용.
"""

import logging
from datetime import datetime
from typing import Callable
from uuid import uuid4

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.domain.models import User
from core.utils.timezone import now_utc, to_db_ts

logger = logging.getLogger(__name__)


class UserStore:
    """사용자 저장소

    Args:
        adapter: SQLite 어댑터
        clock: 현재 시각 함수 (테스트에서 고정 시각 주입)
    """

    def __init__(self, adapter: SQLiteAdapter, clock: Callable[[], datetime] = now_utc):
        self.adapter = adapter
        self.clock = clock

    async def create_user(self, email: str) -> User:
        """사용자 생성

        Raises:
            aiosqlite.IntegrityError: 이메일 중복
        """
        user = User(id=str(uuid4()), email=email, created_at=self.clock())

        async with self.adapter.transaction():
            await self.adapter.execute(
                "INSERT INTO users (id, email, created_at) VALUES (?, ?, ?)",
                (user.id, user.email, to_db_ts(user.created_at)),
            )

        logger.info(f"사용자 생성: {user.email} ({user.id})")
        return user

    async def get_user(self, user_id: str) -> User | None:
        row = await self.adapter.fetchone(
            "SELECT id, email, created_at FROM users WHERE id = ?",
            (user_id,),
        )
        return User.from_row(row) if row else None

    async def get_user_by_email(self, email: str) -> User | None:
        row = await self.adapter.fetchone(
            "SELECT id, email, created_at FROM users WHERE email = ?",
            (email,),
        )
        return User.from_row(row) if row else None

    async def delete_user(self, user_id: str) -> bool:
        """사용자 삭제 (계좌 및 원장 항목까지 CASCADE)

        관리/테스트 정리용.

        Returns:
            True: 삭제됨, False: 존재하지 않음
        """
        async with self.adapter.transaction():
            cursor = await self.adapter.execute(
                "DELETE FROM users WHERE id = ?",
                (user_id,),
            )

        deleted = cursor.rowcount > 0
        if deleted:
            logger.info(f"사용자 삭제: {user_id}")
        return deleted

    async def list_users(self) -> list[User]:
        """전체 사용자 (최신 가입 순)"""
        rows = await self.adapter.fetchall(
            "SELECT id, email, created_at FROM users ORDER BY created_at DESC, id ASC"
        )
        return [User.from_row(row) for row in rows]
