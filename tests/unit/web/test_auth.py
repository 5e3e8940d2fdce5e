"""
인증 가드 / GET /me 테스트
"""

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient


class TestAuthGuard:
    """Bearer JWT 검증"""

    @pytest.mark.parametrize(
        "headers",
        [
            {},
            {"Authorization": "token abc"},
            {"Authorization": "Basic dXNlcjpwYXNz"},
        ],
    )
    def test_missing_or_malformed_header(self, client: TestClient, headers: dict) -> None:
        response = client.get("/me", headers=headers)

        assert response.status_code == 401
        assert response.json() == {
            "error": {
                "code": "UNAUTHORIZED",
                "message": "Missing or invalid authorization header",
            }
        }

    def test_wrong_secret(self, client: TestClient, demo_users, make_token) -> None:
        owner, _ = demo_users
        token = make_token(owner.id, secret="not-the-secret-0123456789abcdef-0123456789")

        response = client.get("/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json()["error"]["message"] == "Invalid or expired token"

    def test_expired(self, client: TestClient, demo_users, make_token) -> None:
        owner, _ = demo_users
        token = make_token(owner.id, expires_in=timedelta(seconds=-10))

        response = client.get("/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json()["error"]["message"] == "Invalid or expired token"

    def test_garbage_token(self, client: TestClient) -> None:
        response = client.get("/me", headers={"Authorization": "Bearer not.a.jwt"})

        assert response.status_code == 401

    def test_missing_user_claim(self, client: TestClient, make_token) -> None:
        response = client.get("/me", headers={"Authorization": f"Bearer {make_token(None)}"})

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "UNAUTHORIZED"

    def test_all_protected_routes(self, client: TestClient) -> None:
        """보호된 엔드포인트는 모두 401"""
        assert client.get("/accounts").status_code == 401
        assert client.post("/accounts", json={"currency": "EUR"}).status_code == 401
        assert client.post("/deposits", json={"accountId": "x", "amount": 1}).status_code == 401
        assert client.get("/transactions", params={"accountId": "x"}).status_code == 401


class TestMe:
    """GET /me"""

    def test_me(self, client: TestClient, demo_users, auth_headers) -> None:
        owner, _ = demo_users

        response = client.get("/me", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"id": owner.id, "email": "demo@qa.com"}

    def test_unknown_user(self, client: TestClient, make_token) -> None:
        """서명은 유효하지만 DB에 없는 사용자"""
        response = client.get("/me", headers={"Authorization": f"Bearer {make_token('ghost')}"})

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"
