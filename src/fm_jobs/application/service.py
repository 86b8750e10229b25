"""JobApplicationService — the job settlement engine plus read-only job queries.

pay_job() owns one unit of work on the caller-supplied session. All checks
run against rows locked inside that transaction; the debit, the credit and
the paid flag are committed together or not at all.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.fm_common.cents import cents_to_display
from src.fm_common.datetime_utils import utc_now
from src.fm_common.errors import (
    AppError,
    InsufficientFundsError,
    InternalError,
    JobAlreadyPaidError,
    JobNotFoundError,
)
from src.fm_jobs.application.schemas import (
    JobItem,
    JobListResponse,
    PaymentResponse,
    UnpaidJobItem,
    UnpaidJobsResponse,
)
from src.fm_jobs.domain.models import SettlementResult
from src.fm_jobs.domain.repository import JobRepositoryProtocol
from src.fm_jobs.domain.settlement import ensure_payable_by, plan_settlement, verify_conservation
from src.fm_jobs.infrastructure.persistence import JobRepository

logger = logging.getLogger(__name__)


class JobApplicationService:
    def __init__(self, repo: JobRepositoryProtocol | None = None) -> None:
        self._repo: JobRepositoryProtocol = repo or JobRepository()

    async def pay_job(
        self, db: AsyncSession, job_id: int, paying_client_id: int
    ) -> PaymentResponse:
        try:
            result = await self._settle(db, job_id, paying_client_id)
            await db.commit()
        except AppError as exc:
            await db.rollback()
            logger.info(
                "Payment rejected: job=%s client=%s code=%d", job_id, paying_client_id, exc.code
            )
            raise
        except (SQLAlchemyError, AssertionError) as exc:
            await db.rollback()
            logger.exception("Payment failed: job=%s client=%s", job_id, paying_client_id)
            raise InternalError("Payment could not be completed") from exc

        logger.info(
            "Job paid: job=%s client=%s contractor=%s amount=%d",
            result.job_id,
            result.client_id,
            result.contractor_id,
            result.amount,
        )
        return PaymentResponse.from_result(result)

    async def _settle(
        self, db: AsyncSession, job_id: int, paying_client_id: int
    ) -> SettlementResult:
        # Step 1: Lock the job (and read its contract)
        target = await self._repo.lock_job_for_settlement(db, job_id)
        if target is None:
            raise JobNotFoundError(job_id)
        ensure_payable_by(target, paying_client_id)

        # Step 2: Lock both parties, ascending id order
        contract = target.contract
        profiles = await self._repo.lock_profiles(
            db, [contract.client_id, contract.contractor_id]
        )
        client = profiles.get(contract.client_id)
        contractor = profiles.get(contract.contractor_id)
        if client is None or contractor is None:
            raise InternalError(f"Contract {contract.id} references a missing profile")

        # Step 3: Decide against the locked snapshot
        plan = plan_settlement(target, client, contractor, paying_client_id)

        # Step 4: Apply — conditional writes double-check the locked reads
        client_balance = await self._repo.debit_balance(db, plan.client_id, plan.amount)
        if client_balance is None:
            raise InsufficientFundsError(plan.amount, client.balance_cents)
        contractor_balance = await self._repo.credit_balance(
            db, plan.contractor_id, plan.amount
        )
        payment_date = await self._repo.mark_job_paid(db, plan.job_id, utc_now())
        if payment_date is None:
            raise JobAlreadyPaidError(plan.job_id)

        verify_conservation(plan, client_balance, contractor_balance)
        return SettlementResult(
            job_id=plan.job_id,
            client_id=plan.client_id,
            contractor_id=plan.contractor_id,
            amount=plan.amount,
            client_balance=client_balance,
            contractor_balance=contractor_balance,
            payment_date=payment_date,
        )

    async def list_unpaid_jobs(
        self, db: AsyncSession, profile_id: int
    ) -> UnpaidJobsResponse:
        jobs = await self._repo.list_unpaid_jobs(db, profile_id)
        total = sum(jc.job.price_cents for jc in jobs)
        return UnpaidJobsResponse(
            items=[UnpaidJobItem.from_domain(jc) for jc in jobs],
            total_unpaid_cents=total,
            total_unpaid_display=cents_to_display(total),
        )

    async def list_jobs(self, db: AsyncSession, profile_id: int) -> JobListResponse:
        """Paid and unpaid jobs on the caller's in-progress contracts, either side."""
        listings = await self._repo.list_jobs(db, profile_id)
        return JobListResponse(items=[JobItem.from_domain(listing) for listing in listings])
