"""Admin reporting service — earnings aggregates over paid jobs.

Read-only: no commit/rollback needed. Date ranges are inclusive of the
whole `end` day (UTC).
"""
from datetime import date
from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.fm_common.cents import cents_to_display
from src.fm_common.datetime_utils import start_of_day, start_of_next_day
from src.fm_common.enums import ProfileType
from src.fm_common.errors import InvalidDateRangeError, ReportEmptyError

_BEST_PROFESSION_SQL = text("""
    SELECT p.profession, SUM(j.price_cents) AS total_earned
    FROM jobs j
    JOIN contracts c ON c.id = j.contract_id
    JOIN profiles p ON p.id = c.contractor_id
    WHERE j.paid IS TRUE
      AND p.type = :profile_type
      AND j.payment_date >= :start_at
      AND j.payment_date < :end_before
    GROUP BY p.profession
    ORDER BY total_earned DESC
    LIMIT 1
""")

_BEST_CLIENTS_SQL = text("""
    SELECT p.id, p.first_name, p.last_name, SUM(j.price_cents) AS total_paid
    FROM jobs j
    JOIN contracts c ON c.id = j.contract_id
    JOIN profiles p ON p.id = c.client_id
    WHERE j.paid IS TRUE
      AND p.type = :profile_type
      AND j.payment_date >= :start_at
      AND j.payment_date < :end_before
    GROUP BY p.id, p.first_name, p.last_name
    ORDER BY total_paid DESC, p.id
    LIMIT :limit
""")


def _range_params(start: date, end: date) -> dict[str, Any]:
    if start > end:
        raise InvalidDateRangeError(f"start {start} is after end {end}")
    return {"start_at": start_of_day(start), "end_before": start_of_next_day(end)}


class AdminService:
    async def best_profession(
        self, start: date, end: date, db: AsyncSession
    ) -> dict[str, Any]:
        params = _range_params(start, end)
        params["profile_type"] = ProfileType.CONTRACTOR.value
        row = (await db.execute(_BEST_PROFESSION_SQL, params)).fetchone()
        if row is None:
            raise ReportEmptyError("No professions found with earnings in the given date range")
        total = int(row.total_earned)
        return {
            "profession": row.profession,
            "total_earned_cents": total,
            "total_earned_display": cents_to_display(total),
        }

    async def best_clients(
        self, start: date, end: date, limit: int, db: AsyncSession
    ) -> list[dict[str, Any]]:
        params = _range_params(start, end)
        params["profile_type"] = ProfileType.CLIENT.value
        params["limit"] = limit
        rows = (await db.execute(_BEST_CLIENTS_SQL, params)).fetchall()
        if not rows:
            raise ReportEmptyError("No clients found with payments in the given date range")
        return [
            {
                "id": r.id,
                "full_name": f"{r.first_name} {r.last_name}",
                "paid_cents": int(r.total_paid),
                "paid_display": cents_to_display(int(r.total_paid)),
            }
            for r in rows
        ]
