"""Unit tests for BalanceRepository using MagicMock AsyncSession."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from src.fm_balance.infrastructure.persistence import BalanceRepository
from src.fm_common.enums import ProfileType
from src.fm_common.errors import InternalError


def _make_profile_row(**kwargs):
    row = MagicMock()
    row.id = kwargs.get("id", 1)
    row.first_name = "Harry"
    row.last_name = "Potter"
    row.profession = "Wizard"
    row.type = kwargs.get("type", "client")
    row.balance_cents = kwargs.get("balance_cents", 115000)
    row.created_at = None
    row.updated_at = None
    return row


@pytest.fixture
def db():
    return MagicMock()


class TestLockProfile:
    async def test_returns_profile(self, db) -> None:
        result_mock = MagicMock()
        result_mock.fetchone.return_value = _make_profile_row(id=3, type="client")
        db.execute = AsyncMock(return_value=result_mock)

        profile = await BalanceRepository().lock_profile(db, 3)

        assert profile is not None
        assert profile.id == 3
        assert profile.type is ProfileType.CLIENT
        sql = str(db.execute.await_args.args[0])
        assert "FOR UPDATE" in sql

    async def test_returns_none_when_missing(self, db) -> None:
        result_mock = MagicMock()
        result_mock.fetchone.return_value = None
        db.execute = AsyncMock(return_value=result_mock)

        assert await BalanceRepository().lock_profile(db, 404) is None


class TestSumUnpaid:
    async def test_filters_in_progress_and_unpaid(self, db) -> None:
        result_mock = MagicMock()
        result_mock.scalar_one.return_value = 40300
        db.execute = AsyncMock(return_value=result_mock)

        total = await BalanceRepository().sum_unpaid_job_prices(db, 1)

        assert total == 40300
        stmt, params = db.execute.await_args.args
        assert "paid IS NOT TRUE" in str(stmt)
        assert params == {"client_id": 1, "status": "in_progress"}


class TestCreditBalance:
    async def test_returns_new_balance(self, db) -> None:
        result_mock = MagicMock()
        result_mock.fetchone.return_value = MagicMock(balance_cents=5000)
        db.execute = AsyncMock(return_value=result_mock)

        assert await BalanceRepository().credit_balance(db, 1, 5000) == 5000

    async def test_missing_row_is_internal_error(self, db) -> None:
        result_mock = MagicMock()
        result_mock.fetchone.return_value = None
        db.execute = AsyncMock(return_value=result_mock)

        with pytest.raises(InternalError):
            await BalanceRepository().credit_balance(db, 1, 5000)
