"""
POST /deposits API 테스트
"""

import pytest
from fastapi.testclient import TestClient


def deposit(client: TestClient, headers: dict, **body):
    return client.post("/deposits", json=body, headers=headers)


class TestDeposit:
    """정상 입금"""

    def test_scenario(self, client: TestClient, auth_headers, eur_account: dict) -> None:
        """100.50 → 150.50, 목록 최신 1건은 second"""
        account_id = eur_account["id"]

        first = deposit(client, auth_headers, accountId=account_id, amount=100.50, reference="first")
        assert first.status_code == 201
        body = first.json()
        assert body["newBalance"] == "100.50"
        assert body["entry"]["amount"] == "100.50"
        assert body["entry"]["reference"] == "first"
        assert body["entry"]["type"] == "deposit"
        assert body["transactionId"] == body["entry"]["id"]

        second = deposit(client, auth_headers, accountId=account_id, amount=50.00, reference="second")
        assert second.json()["newBalance"] == "150.50"

        account = client.get(f"/accounts/{account_id}", headers=auth_headers).json()
        assert account["balance"] == "150.50"

        listing = client.get(
            "/transactions",
            params={"accountId": account_id, "page": 1, "limit": 1},
            headers=auth_headers,
        ).json()
        assert [item["reference"] for item in listing["items"]] == ["second"]
        assert listing["total"] == 2

    def test_not_idempotent(self, client: TestClient, auth_headers, eur_account: dict) -> None:
        """같은 요청 두 번 → 두 건"""
        for _ in range(2):
            deposit(client, auth_headers, accountId=eur_account["id"], amount=10, reference="dup")

        account = client.get(f"/accounts/{eur_account['id']}", headers=auth_headers).json()
        assert account["balance"] == "20.00"


class TestDepositErrors:
    """오류 응답"""

    @pytest.mark.parametrize(
        "amount, message",
        [
            (0, "amount must be greater than 0"),
            (-5, "amount must be greater than 0"),
            ("abc", "amount must be a number"),
            ("100", "amount must be a number"),
            (None, "amount must be a number"),
        ],
    )
    def test_invalid_amount(
        self, client: TestClient, auth_headers, eur_account: dict, amount, message: str
    ) -> None:
        response = deposit(client, auth_headers, accountId=eur_account["id"], amount=amount)

        assert response.status_code == 400
        assert response.json() == {"error": {"code": "VALIDATION_ERROR", "message": message}}

        account = client.get(f"/accounts/{eur_account['id']}", headers=auth_headers).json()
        assert account["balance"] == "0.00"

    def test_missing_account_id(self, client: TestClient, auth_headers) -> None:
        response = deposit(client, auth_headers, amount=10)

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "accountId is required"

    def test_unknown_account(self, client: TestClient, auth_headers) -> None:
        response = deposit(client, auth_headers, accountId="does-not-exist", amount=10)

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    def test_foreign_account(
        self, client: TestClient, auth_headers, other_headers, eur_account: dict
    ) -> None:
        """타인 계좌 → 403, 잔액 변화 없음"""
        response = deposit(client, other_headers, accountId=eur_account["id"], amount=10)

        assert response.status_code == 403
        assert response.json() == {
            "error": {"code": "FORBIDDEN", "message": "caller does not own this account"}
        }

        account = client.get(f"/accounts/{eur_account['id']}", headers=auth_headers).json()
        assert account["balance"] == "0.00"

    def test_missing_body(self, client: TestClient, auth_headers) -> None:
        response = client.post("/deposits", headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"
