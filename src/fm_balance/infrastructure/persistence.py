"""BalanceRepository — concrete implementation of BalanceRepositoryProtocol.

The client's profile row is locked with SELECT ... FOR UPDATE before the
unpaid total is read, so concurrent deposits (and payments) for the same
client serialise on that row and each one sees the previous commit.

Transaction ownership: the CALLER (application service) commits or rolls back.
"""

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.fm_common.enums import ContractStatus
from src.fm_common.errors import InternalError
from src.fm_profile.domain.models import Profile
from src.fm_profile.infrastructure.persistence import row_to_profile

_LOCK_PROFILE_SQL = text("""
    SELECT id, first_name, last_name, profession, type, balance_cents,
           created_at, updated_at
    FROM profiles
    WHERE id = :profile_id
    FOR UPDATE
""")

# paid IS NOT TRUE matches both FALSE and NULL (legacy unpaid)
_SUM_UNPAID_SQL = text("""
    SELECT COALESCE(SUM(j.price_cents), 0)
    FROM jobs j
    JOIN contracts c ON c.id = j.contract_id
    WHERE c.client_id = :client_id
      AND c.status = :status
      AND j.paid IS NOT TRUE
""")

_CREDIT_SQL = text("""
    UPDATE profiles
    SET balance_cents = balance_cents + :amount,
        updated_at = NOW()
    WHERE id = :profile_id
    RETURNING balance_cents
""")


class BalanceRepository:
    async def lock_profile(self, db: AsyncSession, profile_id: int) -> Profile | None:
        result = await db.execute(_LOCK_PROFILE_SQL, {"profile_id": profile_id})
        row = result.fetchone()
        return row_to_profile(row) if row else None

    async def sum_unpaid_job_prices(self, db: AsyncSession, client_id: int) -> int:
        result = await db.execute(
            _SUM_UNPAID_SQL,
            {"client_id": client_id, "status": ContractStatus.IN_PROGRESS.value},
        )
        return int(result.scalar_one())

    async def credit_balance(self, db: AsyncSession, profile_id: int, amount: int) -> int:
        result = await db.execute(_CREDIT_SQL, {"profile_id": profile_id, "amount": amount})
        row = result.fetchone()
        if row is None:
            raise InternalError(f"Profile {profile_id} vanished while locked")
        return int(row.balance_cents)
