"""Repository Protocol for the deposit path.

All methods run inside the caller's transaction; the caller commits or rolls back.
"""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.fm_profile.domain.models import Profile


class BalanceRepositoryProtocol(Protocol):
    async def lock_profile(self, db: AsyncSession, profile_id: int) -> Profile | None: ...

    async def sum_unpaid_job_prices(self, db: AsyncSession, client_id: int) -> int: ...

    async def credit_balance(self, db: AsyncSession, profile_id: int, amount: int) -> int: ...
