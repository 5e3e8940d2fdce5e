"""AccountStore / UserStore 통합 테스트"""

from decimal import Decimal

import aiosqlite
import pytest

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.domain.models import Account, User
from core.ledger.writer import LedgerWriter
from core.storage.account_store import AccountStore, check_ownership
from core.storage.user_store import UserStore
from core.types import Currency, ErrorCode

pytestmark = pytest.mark.integration


class TestOpenAccount:
    """open_account 테스트"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("currency", ["EUR", "USD"])
    async def test_zero_balance(self, db: SQLiteAdapter, user: User, currency: str) -> None:
        """새 계좌는 정확히 0.00"""
        result = await AccountStore(db).open_account(user.id, currency)

        assert result.ok
        assert result.value.currency == Currency(currency)
        assert result.value.balance == Decimal("0.00")

        row = await db.fetchone("SELECT balance FROM accounts WHERE id = ?", (result.value.id,))
        assert row[0] == "0.00"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("currency", [None, ""])
    async def test_currency_required(self, db: SQLiteAdapter, user: User, currency) -> None:
        result = await AccountStore(db).open_account(user.id, currency)

        assert result.code == ErrorCode.VALIDATION_ERROR
        assert result.message == "Currency is required"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("currency", ["GBP", "eur", 978, ["EUR"]])
    async def test_currency_invalid(self, db: SQLiteAdapter, user: User, currency) -> None:
        result = await AccountStore(db).open_account(user.id, currency)

        assert result.code == ErrorCode.VALIDATION_ERROR
        assert result.message == "Currency must be EUR or USD"

    @pytest.mark.asyncio
    async def test_unknown_user(self, db: SQLiteAdapter) -> None:
        result = await AccountStore(db).open_account("ghost", "EUR")

        assert result.code == ErrorCode.NOT_FOUND
        assert (await db.fetchone("SELECT COUNT(*) FROM accounts"))[0] == 0


class TestLookup:
    """조회 / 소유권"""

    @pytest.mark.asyncio
    async def test_get_account(self, db: SQLiteAdapter, account: Account) -> None:
        store = AccountStore(db)

        assert await store.get_account(account.id) == account
        assert await store.get_account("missing") is None

    @pytest.mark.asyncio
    async def test_get_owned_account(
        self, db: SQLiteAdapter, user: User, other_user: User, account: Account
    ) -> None:
        store = AccountStore(db)

        assert (await store.get_owned_account(account.id, user.id)).value == account

        forbidden = await store.get_owned_account(account.id, other_user.id)
        assert forbidden.code == ErrorCode.FORBIDDEN
        assert forbidden.message == "caller does not own this account"

        missing = await store.get_owned_account("missing", user.id)
        assert missing.code == ErrorCode.NOT_FOUND
        assert missing.message == "account not found"

    def test_check_ownership_none(self) -> None:
        assert check_ownership(None, "u-1").code == ErrorCode.NOT_FOUND

    @pytest.mark.asyncio
    async def test_list_accounts(
        self, db: SQLiteAdapter, user: User, other_user: User, account: Account, clock
    ) -> None:
        """본인 계좌만, 생성 순"""
        store = AccountStore(db, clock=clock)
        usd = (await store.open_account(user.id, "USD")).value
        await store.open_account(other_user.id, "EUR")

        accounts = await store.list_accounts(user.id)

        assert [a.id for a in accounts] == [account.id, usd.id]

    @pytest.mark.asyncio
    async def test_list_all_accounts(
        self, db: SQLiteAdapter, user: User, other_user: User, account: Account, clock
    ) -> None:
        """모든 소유자의 계좌, 최신 생성 순"""
        store = AccountStore(db, clock=clock)
        foreign = (await store.open_account(other_user.id, "USD")).value

        accounts = await store.list_all_accounts()

        assert [a.id for a in accounts] == [foreign.id, account.id]

    @pytest.mark.asyncio
    async def test_update_balance_missing_row(self, db: SQLiteAdapter) -> None:
        """존재하지 않는 계좌 잔액 갱신은 예외"""
        with pytest.raises(RuntimeError):
            await AccountStore(db).update_balance("missing", Decimal("1.00"))


class TestDelete:
    """삭제 CASCADE"""

    @pytest.mark.asyncio
    async def test_delete_account_cascades(self, db: SQLiteAdapter, user: User, account: Account) -> None:
        await LedgerWriter(db).deposit(account.id, 10, user.id)

        assert await AccountStore(db).delete_account(account.id) is True
        assert await AccountStore(db).delete_account(account.id) is False
        assert (await db.fetchone("SELECT COUNT(*) FROM transactions"))[0] == 0

    @pytest.mark.asyncio
    async def test_delete_user_cascades(self, db: SQLiteAdapter, user: User, account: Account) -> None:
        await LedgerWriter(db).deposit(account.id, 10, user.id)

        assert await UserStore(db).delete_user(user.id) is True
        assert await AccountStore(db).get_account(account.id) is None
        assert (await db.fetchone("SELECT COUNT(*) FROM transactions"))[0] == 0


class TestUserStore:
    """UserStore 테스트"""

    @pytest.mark.asyncio
    async def test_create_and_get(self, db: SQLiteAdapter) -> None:
        store = UserStore(db)

        created = await store.create_user("demo@qa.com")

        assert await store.get_user(created.id) == created
        assert await store.get_user_by_email("demo@qa.com") == created
        assert await store.get_user("missing") is None

    @pytest.mark.asyncio
    async def test_duplicate_email(self, db: SQLiteAdapter, user: User) -> None:
        with pytest.raises(aiosqlite.IntegrityError):
            await UserStore(db).create_user(user.email)

    @pytest.mark.asyncio
    async def test_list_users(self, db: SQLiteAdapter, clock) -> None:
        """최신 가입 순"""
        store = UserStore(db, clock=clock)
        first = await store.create_user("first@qa.com")
        second = await store.create_user("second@qa.com")

        assert await store.list_users() == [second, first]
