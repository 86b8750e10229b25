# tests/unit/test_admin_reports.py
"""Unit tests for AdminService earnings reports."""
from datetime import UTC, date, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.fm_admin.application.service import AdminService
from src.fm_common.errors import InvalidDateRangeError, ReportEmptyError


def _result(fetchone=None, fetchall=None) -> MagicMock:
    result_mock = MagicMock()
    result_mock.fetchone.return_value = fetchone
    result_mock.fetchall.return_value = fetchall or []
    return result_mock


@pytest.mark.asyncio
async def test_best_profession_returns_top_earner() -> None:
    db = AsyncMock()
    db.execute.return_value = _result(
        fetchone=MagicMock(profession="Programmer", total_earned=262600)
    )
    result = await AdminService().best_profession(date(2020, 1, 1), date(2020, 12, 31), db)
    assert result == {
        "profession": "Programmer",
        "total_earned_cents": 262600,
        "total_earned_display": "$2,626.00",
    }
    params = db.execute.await_args.args[1]
    assert params["profile_type"] == "contractor"
    assert params["start_at"] == datetime(2020, 1, 1, tzinfo=UTC)
    # end day is inclusive
    assert params["end_before"] == datetime(2021, 1, 1, tzinfo=UTC)


@pytest.mark.asyncio
async def test_best_profession_empty_range_is_404() -> None:
    db = AsyncMock()
    db.execute.return_value = _result(fetchone=None)
    with pytest.raises(ReportEmptyError) as exc_info:
        await AdminService().best_profession(date(2000, 1, 1), date(2000, 1, 2), db)
    assert exc_info.value.http_status == 404


@pytest.mark.asyncio
async def test_start_after_end_rejected_before_query() -> None:
    db = AsyncMock()
    with pytest.raises(InvalidDateRangeError):
        await AdminService().best_clients(date(2020, 2, 1), date(2020, 1, 1), 2, db)
    db.execute.assert_not_awaited()


@pytest.mark.asyncio
async def test_best_clients_formats_rows() -> None:
    db = AsyncMock()
    db.execute.return_value = _result(
        fetchall=[
            MagicMock(id=4, first_name="Ash", last_name="Kethcum", total_paid=202000),
            MagicMock(id=2, first_name="Mr", last_name="Robot", total_paid=44200),
        ]
    )
    result = await AdminService().best_clients(date(2020, 1, 1), date(2020, 12, 31), 2, db)
    assert [r["id"] for r in result] == [4, 2]
    assert result[0]["full_name"] == "Ash Kethcum"
    assert result[0]["paid_display"] == "$2,020.00"
    assert db.execute.await_args.args[1]["limit"] == 2


@pytest.mark.asyncio
async def test_best_clients_empty_range_is_404() -> None:
    db = AsyncMock()
    db.execute.return_value = _result(fetchall=[])
    with pytest.raises(ReportEmptyError):
        await AdminService().best_clients(date(2000, 1, 1), date(2000, 1, 2), 2, db)
