"""
Web API 테스트용 fixture

임시 settings.yaml + 임시 DB에 데모 사용자 2명을 만들고
TestClient로 앱(lifespan 포함)을 띄움.
"""

import asyncio
from datetime import datetime, timedelta, timezone
from typing import Callable

import jwt
import pytest
from fastapi.testclient import TestClient

from adapters.db.sqlite_adapter import SQLiteAdapter, init_schema
from core.config.loader import Settings, get_settings
from core.domain.models import User
from core.storage.user_store import UserStore


async def _seed_users(settings: Settings) -> tuple[User, User]:
    async with SQLiteAdapter(settings.db_path) as db:
        await init_schema(db)
        users = UserStore(db)
        owner = await users.create_user("demo@qa.com")
        other = await users.create_user("second-demo@qa.com")
    return owner, other


@pytest.fixture
def settings(temp_settings_file) -> Settings:
    """임시 설정으로 싱글턴 초기화"""
    Settings.reset()
    settings = get_settings(temp_settings_file)
    yield settings
    Settings.reset()


@pytest.fixture
def demo_users(settings: Settings) -> tuple[User, User]:
    """(owner, other) 데모 사용자"""
    return asyncio.run(_seed_users(settings))


@pytest.fixture
def client(settings: Settings, demo_users) -> TestClient:
    from web.app import app

    with TestClient(app) as client:
        yield client


@pytest.fixture
def make_token(settings: Settings) -> Callable[..., str]:
    """테스트용 JWT 생성 함수"""

    def _make_token(
        user_id: str | None,
        secret: str | None = None,
        expires_in: timedelta = timedelta(hours=1),
    ) -> str:
        payload: dict = {"exp": datetime.now(timezone.utc) + expires_in}
        if user_id is not None:
            payload["userId"] = user_id
        return jwt.encode(payload, secret or settings.secret_key, algorithm="HS256")

    return _make_token


@pytest.fixture
def auth_headers(demo_users, make_token) -> dict[str, str]:
    """owner 인증 헤더"""
    owner, _ = demo_users
    return {"Authorization": f"Bearer {make_token(owner.id)}"}


@pytest.fixture
def other_headers(demo_users, make_token) -> dict[str, str]:
    """other 인증 헤더"""
    _, other = demo_users
    return {"Authorization": f"Bearer {make_token(other.id)}"}


@pytest.fixture
def eur_account(client: TestClient, auth_headers) -> dict:
    """owner의 EUR 계좌"""
    response = client.post("/accounts", json={"currency": "EUR"}, headers=auth_headers)
    assert response.status_code == 201
    return response.json()
