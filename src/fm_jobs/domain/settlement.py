"""Settlement rules — decide whether a locked job can be paid by a client.

Pure functions over state the caller has already read (and locked) inside
its transaction. Checks run in a fixed order so the reported reason is
deterministic: already paid → wrong owner → wrong role → insufficient funds.
"""

from src.fm_common.errors import (
    ForbiddenError,
    InsufficientFundsError,
    JobAlreadyPaidError,
)
from src.fm_jobs.domain.models import JobWithContract, SettlementPlan
from src.fm_profile.domain.models import Profile


def ensure_payable_by(target: JobWithContract, paying_client_id: int) -> None:
    """Job-level checks, before any profile row is locked."""
    if target.job.is_paid:
        raise JobAlreadyPaidError(target.job.id)
    if target.contract.client_id != paying_client_id:
        raise ForbiddenError("you are not the client for this job")


def plan_settlement(
    target: JobWithContract,
    client: Profile,
    contractor: Profile,
    paying_client_id: int,
) -> SettlementPlan:
    ensure_payable_by(target, paying_client_id)
    if not client.is_client:
        raise ForbiddenError("only clients can pay for jobs")

    price = target.job.price_cents
    if client.balance_cents < price:
        raise InsufficientFundsError(price, client.balance_cents)

    return SettlementPlan(
        job_id=target.job.id,
        client_id=client.id,
        contractor_id=contractor.id,
        amount=price,
        client_balance_after=client.balance_cents - price,
        contractor_balance_after=contractor.balance_cents + price,
    )


def verify_conservation(plan: SettlementPlan, client_balance: int, contractor_balance: int) -> None:
    """Raises AssertionError if the balances written differ from the plan."""
    assert client_balance == plan.client_balance_after, (
        f"Client balance drift on job {plan.job_id}: "
        f"expected {plan.client_balance_after}, got {client_balance}"
    )
    assert contractor_balance == plan.contractor_balance_after, (
        f"Contractor balance drift on job {plan.job_id}: "
        f"expected {plan.contractor_balance_after}, got {contractor_balance}"
    )
