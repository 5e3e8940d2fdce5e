"""
pytest 공통 fixture 정의

설정 파일, 임시 DB, 테스트용 사용자/계좌, 고정 시계
"""

import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
import pytest_asyncio

from adapters.db.sqlite_adapter import SQLiteAdapter, init_schema
from core.domain.models import Account, User
from core.storage.account_store import AccountStore
from core.storage.user_store import UserStore

TEST_SECRET_KEY = "test_jwt_secret_key_xyz_0123456789abcdef"


class StepClock:
    """호출할 때마다 일정 간격씩 증가하는 시계

    created_at 순서를 결정적으로 만들기 위해 사용.
    step=0이면 항상 같은 시각 (동일 타임스탬프 tie-break 검증용).
    """

    def __init__(
        self,
        start: datetime = datetime(2025, 1, 1, tzinfo=timezone.utc),
        step: timedelta = timedelta(seconds=1),
    ):
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + self.step
        return value


@pytest.fixture
def temp_dir() -> Path:
    """OS 독립적인 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_settings_file(temp_dir: Path) -> Path:
    """테스트용 settings.yaml 파일 생성 (DB 경로는 임시 디렉토리)"""
    settings_content = f"""# 테스트용 settings.yaml
mode: development

web:
  secret_key: "{TEST_SECRET_KEY}"

database:
  path: "{(temp_dir / 'qabank_test.db').as_posix()}"
"""
    settings_path = temp_dir / "settings.yaml"
    settings_path.write_text(settings_content, encoding="utf-8")
    return settings_path


@pytest.fixture
def temp_settings_file_production(temp_dir: Path) -> Path:
    """테스트용 settings.yaml 파일 생성 (production 모드, DB 경로 기본값)"""
    settings_content = """mode: production

web:
  secret_key: "prod_jwt_secret_key_xyz_0123456789abcdef"
  token_algorithm: HS512
"""
    settings_path = temp_dir / "settings_prod.yaml"
    settings_path.write_text(settings_content, encoding="utf-8")
    return settings_path


@pytest.fixture
def temp_settings_file_invalid_mode(temp_dir: Path) -> Path:
    """잘못된 모드의 settings.yaml 파일 생성"""
    settings_content = """mode: testnet

web:
  secret_key: "jwt_secret"
"""
    settings_path = temp_dir / "settings_invalid.yaml"
    settings_path.write_text(settings_content, encoding="utf-8")
    return settings_path


@pytest.fixture
def clock() -> StepClock:
    """1초씩 증가하는 시계"""
    return StepClock()


@pytest.fixture
def frozen_clock() -> StepClock:
    """항상 같은 시각을 반환하는 시계"""
    return StepClock(step=timedelta(0))


@pytest_asyncio.fixture
async def db(tmp_path: Path) -> SQLiteAdapter:
    """스키마가 초기화된 임시 DB"""
    adapter = SQLiteAdapter(tmp_path / "ledger_test.db")
    await adapter.connect()
    await init_schema(adapter)
    yield adapter
    await adapter.close()


@pytest_asyncio.fixture
async def user(db: SQLiteAdapter, clock: StepClock) -> User:
    """계좌 소유자"""
    return await UserStore(db, clock=clock).create_user("owner@qa.com")


@pytest_asyncio.fixture
async def other_user(db: SQLiteAdapter, clock: StepClock) -> User:
    """다른 사용자 (소유권 검증용)"""
    return await UserStore(db, clock=clock).create_user("other@qa.com")


@pytest_asyncio.fixture
async def account(db: SQLiteAdapter, user: User, clock: StepClock) -> Account:
    """잔액 0.00 EUR 계좌"""
    result = await AccountStore(db, clock=clock).open_account(user.id, "EUR")
    assert result.ok
    return result.value
