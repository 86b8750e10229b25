"""JobRepository — concrete implementation of JobRepositoryProtocol.

Lock order for settlement is fixed: job row first, then the linked profile
rows in ascending id order. Deposits only lock a single profile row, so no
lock cycle can form between the two paths.

Balance and paid-flag writes are conditional UPDATE ... RETURNING. A result
of 0 rows means a business constraint was violated (insufficient funds,
job already paid) even though the locked read said otherwise.

Transaction ownership: the CALLER (application service) commits or rolls back.
"""

from datetime import datetime

from sqlalchemy import bindparam, text
from sqlalchemy.ext.asyncio import AsyncSession

from src.fm_common.enums import ContractStatus, JobPaymentStatus
from src.fm_common.errors import InternalError
from src.fm_jobs.domain.models import JobListing, JobWithContract
from src.fm_profile.domain.models import Contract, Job, Profile
from src.fm_profile.infrastructure.persistence import row_to_profile

# ---------------------------------------------------------------------------
# SQL: settlement
# ---------------------------------------------------------------------------

_LOCK_JOB_SQL = text("""
    SELECT j.id, j.description, j.price_cents, j.paid, j.payment_date, j.contract_id,
           c.terms, c.status AS contract_status, c.client_id, c.contractor_id
    FROM jobs j
    JOIN contracts c ON c.id = j.contract_id
    WHERE j.id = :job_id
    FOR UPDATE OF j
""")

_LOCK_PROFILES_SQL = text("""
    SELECT id, first_name, last_name, profession, type, balance_cents,
           created_at, updated_at
    FROM profiles
    WHERE id IN :profile_ids
    ORDER BY id
    FOR UPDATE
""").bindparams(bindparam("profile_ids", expanding=True))

_DEBIT_SQL = text("""
    UPDATE profiles
    SET balance_cents = balance_cents - :amount,
        updated_at = NOW()
    WHERE id = :profile_id AND balance_cents >= :amount
    RETURNING balance_cents
""")

_CREDIT_SQL = text("""
    UPDATE profiles
    SET balance_cents = balance_cents + :amount,
        updated_at = NOW()
    WHERE id = :profile_id
    RETURNING balance_cents
""")

_MARK_PAID_SQL = text("""
    UPDATE jobs
    SET paid = TRUE,
        payment_date = :paid_at,
        updated_at = NOW()
    WHERE id = :job_id AND paid IS NOT TRUE
    RETURNING payment_date
""")

# ---------------------------------------------------------------------------
# SQL: queries
# ---------------------------------------------------------------------------

_LIST_UNPAID_SQL = text("""
    SELECT j.id, j.description, j.price_cents, j.paid, j.payment_date, j.contract_id,
           c.terms, c.status AS contract_status, c.client_id, c.contractor_id
    FROM jobs j
    JOIN contracts c ON c.id = j.contract_id
    WHERE c.status = :status
      AND (c.client_id = :profile_id OR c.contractor_id = :profile_id)
      AND j.paid IS NOT TRUE
    ORDER BY j.id
""")

_LIST_JOBS_SQL = text("""
    SELECT j.id, j.description, j.price_cents, j.paid, j.payment_date, j.contract_id,
           c.terms, c.status AS contract_status, c.client_id, c.contractor_id,
           cl.first_name AS client_first_name, cl.last_name AS client_last_name,
           co.first_name AS contractor_first_name, co.last_name AS contractor_last_name
    FROM jobs j
    JOIN contracts c ON c.id = j.contract_id
    JOIN profiles cl ON cl.id = c.client_id
    JOIN profiles co ON co.id = c.contractor_id
    WHERE c.status = :status
      AND (c.client_id = :profile_id OR c.contractor_id = :profile_id)
    ORDER BY j.id
""")


def _row_to_job_with_contract(row: object) -> JobWithContract:
    return JobWithContract(
        job=Job(
            id=row.id,  # type: ignore[attr-defined]
            description=row.description,  # type: ignore[attr-defined]
            price_cents=row.price_cents,  # type: ignore[attr-defined]
            payment_status=JobPaymentStatus.from_db(row.paid),  # type: ignore[attr-defined]
            payment_date=row.payment_date,  # type: ignore[attr-defined]
            contract_id=row.contract_id,  # type: ignore[attr-defined]
        ),
        contract=Contract(
            id=row.contract_id,  # type: ignore[attr-defined]
            terms=row.terms,  # type: ignore[attr-defined]
            status=ContractStatus(row.contract_status),  # type: ignore[attr-defined]
            client_id=row.client_id,  # type: ignore[attr-defined]
            contractor_id=row.contractor_id,  # type: ignore[attr-defined]
        ),
    )


class JobRepository:
    async def lock_job_for_settlement(
        self, db: AsyncSession, job_id: int
    ) -> JobWithContract | None:
        result = await db.execute(_LOCK_JOB_SQL, {"job_id": job_id})
        row = result.fetchone()
        return _row_to_job_with_contract(row) if row else None

    async def lock_profiles(
        self, db: AsyncSession, profile_ids: list[int]
    ) -> dict[int, Profile]:
        result = await db.execute(
            _LOCK_PROFILES_SQL, {"profile_ids": sorted(set(profile_ids))}
        )
        return {p.id: p for p in (row_to_profile(row) for row in result.fetchall())}

    async def debit_balance(
        self, db: AsyncSession, profile_id: int, amount: int
    ) -> int | None:
        result = await db.execute(_DEBIT_SQL, {"profile_id": profile_id, "amount": amount})
        row = result.fetchone()
        return int(row.balance_cents) if row else None

    async def credit_balance(
        self, db: AsyncSession, profile_id: int, amount: int
    ) -> int:
        result = await db.execute(_CREDIT_SQL, {"profile_id": profile_id, "amount": amount})
        row = result.fetchone()
        if row is None:
            raise InternalError(f"Profile {profile_id} vanished while locked")
        return int(row.balance_cents)

    async def mark_job_paid(
        self, db: AsyncSession, job_id: int, paid_at: datetime
    ) -> datetime | None:
        result = await db.execute(_MARK_PAID_SQL, {"job_id": job_id, "paid_at": paid_at})
        row = result.fetchone()
        return row.payment_date if row else None

    async def list_unpaid_jobs(
        self, db: AsyncSession, profile_id: int
    ) -> list[JobWithContract]:
        result = await db.execute(
            _LIST_UNPAID_SQL,
            {"profile_id": profile_id, "status": ContractStatus.IN_PROGRESS.value},
        )
        return [_row_to_job_with_contract(row) for row in result.fetchall()]

    async def list_jobs(
        self, db: AsyncSession, profile_id: int
    ) -> list[JobListing]:
        result = await db.execute(
            _LIST_JOBS_SQL,
            {"profile_id": profile_id, "status": ContractStatus.IN_PROGRESS.value},
        )
        listings = []
        for row in result.fetchall():
            jc = _row_to_job_with_contract(row)
            listings.append(
                JobListing(
                    job=jc.job,
                    contract=jc.contract,
                    client_name=f"{row.client_first_name} {row.client_last_name}",
                    contractor_name=f"{row.contractor_first_name} {row.contractor_last_name}",
                )
            )
        return listings
