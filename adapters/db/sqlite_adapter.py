"""
SQLite 어댑터

WAL 모드로 SQLite 연결 관리.
Web 요청과 관리 스크립트가 동시에 접근 가능하도록 설정.

주의: 금액은 TEXT(Decimal 문자열), 시각은 고정 자릿수 UTC ISO-8601 문자열로 저장
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator

import aiosqlite

from core.constants import Paths
from core.types import AppMode

logger = logging.getLogger(__name__)


def get_db_path(mode: AppMode | str) -> Path:
    """모드에 따른 DB 경로 반환

    Args:
        mode: 실행 모드 (PRODUCTION/DEVELOPMENT)

    Returns:
        DB 파일 경로 (Path 타입)
    """
    if isinstance(mode, str):
        mode = AppMode(mode.lower())

    if mode == AppMode.PRODUCTION:
        return Paths.PROD_DB
    return Paths.DEV_DB


async def create_connection(
    db_path: Path | str,
    readonly: bool = False,
) -> aiosqlite.Connection:
    """SQLite 연결 생성 (WAL 모드)

    Args:
        db_path: DB 파일 경로
        readonly: 읽기 전용 여부

    Returns:
        aiosqlite 연결 객체
    """
    db_path_str = str(db_path)

    # 디렉토리가 없으면 생성
    db_dir = Path(db_path).parent
    db_dir.mkdir(parents=True, exist_ok=True)

    if readonly:
        conn = await aiosqlite.connect(f"file:{db_path_str}?mode=ro", uri=True)
    else:
        conn = await aiosqlite.connect(db_path_str)

    # WAL 모드 설정 (읽기 전용 연결은 기존 모드 유지)
    if not readonly:
        await conn.execute("PRAGMA journal_mode=WAL")

    # 동시 접근 설정
    await conn.execute("PRAGMA busy_timeout=30000")  # 30초 대기

    # 외래 키 제약 활성화 (계좌 삭제 시 원장 CASCADE)
    await conn.execute("PRAGMA foreign_keys=ON")

    logger.debug(
        "SQLite 연결 생성",
        extra={"db_path": db_path_str, "readonly": readonly},
    )

    return conn


class SQLiteAdapter:
    """SQLite 어댑터

    WAL 모드로 SQLite 연결 관리.
    트랜잭션 컨텍스트 매니저 제공.

    Args:
        db_path: DB 파일 경로
        readonly: 읽기 전용 여부 (조회 API용)

    사용 예시:
    ```python
    adapter = SQLiteAdapter(db_path)
    await adapter.connect()

    async with adapter.transaction(immediate=True):
        await adapter.execute("UPDATE accounts SET ...")

    await adapter.close()
    ```
    """

    def __init__(self, db_path: Path | str, readonly: bool = False):
        self.db_path = Path(db_path)
        self.readonly = readonly
        self._conn: aiosqlite.Connection | None = None

    @property
    def is_connected(self) -> bool:
        """연결 상태 확인"""
        return self._conn is not None

    async def connect(self) -> None:
        """연결 생성"""
        if self._conn is not None:
            return

        self._conn = await create_connection(self.db_path, self.readonly)

    async def close(self) -> None:
        """연결 종료"""
        if self._conn is not None:
            await self._conn.close()
            self._conn = None
            logger.debug("SQLite 연결 종료")

    async def execute(
        self,
        sql: str,
        parameters: tuple[Any, ...] | None = None,
    ) -> aiosqlite.Cursor:
        """SQL 실행"""
        if self._conn is None:
            raise RuntimeError("Not connected to database")

        if parameters:
            return await self._conn.execute(sql, parameters)
        return await self._conn.execute(sql)

    async def fetchone(
        self,
        sql: str,
        parameters: tuple[Any, ...] | None = None,
    ) -> tuple[Any, ...] | None:
        """단일 행 조회"""
        cursor = await self.execute(sql, parameters)
        return await cursor.fetchone()

    async def fetchall(
        self,
        sql: str,
        parameters: tuple[Any, ...] | None = None,
    ) -> list[tuple[Any, ...]]:
        """전체 행 조회"""
        cursor = await self.execute(sql, parameters)
        return list(await cursor.fetchall())

    async def commit(self) -> None:
        """커밋"""
        if self._conn is not None:
            await self._conn.commit()

    async def rollback(self) -> None:
        """롤백"""
        if self._conn is not None:
            await self._conn.rollback()

    @asynccontextmanager
    async def transaction(self, immediate: bool = False) -> AsyncIterator[aiosqlite.Connection]:
        """트랜잭션 컨텍스트 매니저

        성공 시 자동 커밋, 그 외 모든 종료 경로(예외, 태스크 취소)에서 자동 롤백.

        Args:
            immediate: True면 BEGIN IMMEDIATE로 시작하여 쓰기 잠금을 먼저 획득.
                같은 행을 읽고-수정-쓰는 작업(잔액 갱신)이 다른 writer와 직렬화됨.

        사용 예시:
        ```python
        async with adapter.transaction(immediate=True):
            row = await adapter.fetchone("SELECT balance FROM accounts WHERE id = ?", (account_id,))
            await adapter.execute("UPDATE accounts SET balance = ? WHERE id = ?", (...))
            # 성공 시 자동 커밋
        ```
        """
        if self._conn is None:
            raise RuntimeError("Not connected to database")

        if immediate:
            await self._conn.execute("BEGIN IMMEDIATE")

        try:
            yield self._conn
            await self._conn.commit()
        except BaseException:
            await self._conn.rollback()
            raise

    @asynccontextmanager
    async def snapshot(self) -> AsyncIterator[aiosqlite.Connection]:
        """읽기 트랜잭션 컨텍스트 매니저

        BEGIN부터 종료까지의 조회는 모두 같은 시점의 커밋 상태를 봄
        (WAL 모드에서 동시 writer를 막지 않음). 종료 시 항상 롤백 (쓰기 없음).

        사용 예시:
        ```python
        async with adapter.snapshot():
            total = await adapter.fetchone("SELECT COUNT(*) FROM transactions WHERE account_id = ?", ...)
            rows = await adapter.fetchall("SELECT ... LIMIT ? OFFSET ?", ...)
        ```
        """
        if self._conn is None:
            raise RuntimeError("Not connected to database")

        await self._conn.execute("BEGIN")
        try:
            yield self._conn
        finally:
            await self._conn.rollback()

    async def table_exists(self, table_name: str) -> bool:
        """테이블 존재 여부 확인"""
        result = await self.fetchone(
            "SELECT name FROM sqlite_master WHERE type='table' AND name=?",
            (table_name,),
        )
        return result is not None

    async def get_table_info(self, table_name: str) -> list[dict[str, Any]]:
        """테이블 정보 조회"""
        rows = await self.fetchall(f"PRAGMA table_info({table_name})")

        columns = []
        for row in rows:
            columns.append({
                "cid": row[0],
                "name": row[1],
                "type": row[2],
                "notnull": bool(row[3]),
                "default_value": row[4],
                "pk": bool(row[5]),
            })

        return columns

    # -------------------------------------------------------------------------
    # 컨텍스트 매니저
    # -------------------------------------------------------------------------

    async def __aenter__(self) -> "SQLiteAdapter":
        await self.connect()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()


async def init_schema(adapter: SQLiteAdapter) -> None:
    """스키마 초기화 (테이블 생성)

    Args:
        adapter: 연결된 SQLiteAdapter

    주의: 앱 시작(lifespan)과 scripts/init_db.py에서 호출. 반복 호출해도 안전.
    """
    # users (사용자 관리 자체는 범위 밖, 소유권 참조용)
    await adapter.execute("""
        CREATE TABLE IF NOT EXISTS users (
            id               TEXT PRIMARY KEY,
            email            TEXT NOT NULL UNIQUE,
            created_at       TEXT NOT NULL
        )
    """)

    # accounts (잔액의 단일 진실 공급원)
    await adapter.execute("""
        CREATE TABLE IF NOT EXISTS accounts (
            id               TEXT PRIMARY KEY,
            user_id          TEXT NOT NULL REFERENCES users(id) ON DELETE CASCADE,
            currency         TEXT NOT NULL CHECK (currency IN ('EUR', 'USD')),
            balance          TEXT NOT NULL DEFAULT '0.00'
                             CHECK (CAST(balance AS REAL) >= 0),
            created_at       TEXT NOT NULL
        )
    """)

    # transactions (불변 원장 항목, INSERT만 허용)
    await adapter.execute("""
        CREATE TABLE IF NOT EXISTS transactions (
            seq              INTEGER PRIMARY KEY AUTOINCREMENT,
            id               TEXT NOT NULL UNIQUE,
            account_id       TEXT NOT NULL REFERENCES accounts(id) ON DELETE CASCADE,
            type             TEXT NOT NULL CHECK (type IN ('deposit')),
            amount           TEXT NOT NULL CHECK (CAST(amount AS REAL) > 0),
            reference        TEXT,
            created_at       TEXT NOT NULL
        )
    """)

    # 인덱스 생성
    await adapter.execute("""
        CREATE INDEX IF NOT EXISTS ix_accounts_user
        ON accounts(user_id)
    """)

    # 페이지네이션용 (account_id, created_at DESC, seq DESC)
    await adapter.execute("""
        CREATE INDEX IF NOT EXISTS ix_transactions_account_created
        ON transactions(account_id, created_at DESC, seq DESC)
    """)

    await adapter.commit()

    logger.info("스키마 초기화 완료")
