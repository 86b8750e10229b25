"""Repository Protocol for job settlement and job queries.

Mutating methods run inside the caller's transaction; the caller commits or rolls back.
"""

from datetime import datetime
from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.fm_jobs.domain.models import JobListing, JobWithContract
from src.fm_profile.domain.models import Profile


class JobRepositoryProtocol(Protocol):
    async def lock_job_for_settlement(
        self, db: AsyncSession, job_id: int
    ) -> JobWithContract | None: ...

    async def lock_profiles(
        self, db: AsyncSession, profile_ids: list[int]
    ) -> dict[int, Profile]: ...

    async def debit_balance(
        self, db: AsyncSession, profile_id: int, amount: int
    ) -> int | None: ...

    async def credit_balance(
        self, db: AsyncSession, profile_id: int, amount: int
    ) -> int: ...

    async def mark_job_paid(
        self, db: AsyncSession, job_id: int, paid_at: datetime
    ) -> datetime | None: ...

    async def list_unpaid_jobs(
        self, db: AsyncSession, profile_id: int
    ) -> list[JobWithContract]: ...

    async def list_jobs(
        self, db: AsyncSession, profile_id: int
    ) -> list[JobListing]: ...
