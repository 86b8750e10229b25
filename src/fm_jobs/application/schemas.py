"""Pydantic schemas for fm_jobs API."""

from pydantic import BaseModel

from src.fm_common.cents import cents_to_display
from src.fm_jobs.domain.models import JobListing, JobWithContract, SettlementResult


class PaymentResponse(BaseModel):
    job_id: int
    client_id: int
    contractor_id: int
    amount_cents: int
    amount_display: str
    client_balance_cents: int
    client_balance_display: str
    payment_date: str  # ISO8601 string

    @classmethod
    def from_result(cls, r: SettlementResult) -> "PaymentResponse":
        # Only the payer's balance is exposed; the contractor's is not theirs to see
        return cls(
            job_id=r.job_id,
            client_id=r.client_id,
            contractor_id=r.contractor_id,
            amount_cents=r.amount,
            amount_display=cents_to_display(r.amount),
            client_balance_cents=r.client_balance,
            client_balance_display=cents_to_display(r.client_balance),
            payment_date=r.payment_date.isoformat(),
        )


class UnpaidJobItem(BaseModel):
    id: int
    description: str
    price_cents: int
    price_display: str
    contract_id: int
    contract_status: str
    client_id: int
    contractor_id: int

    @classmethod
    def from_domain(cls, jc: JobWithContract) -> "UnpaidJobItem":
        return cls(
            id=jc.job.id,
            description=jc.job.description,
            price_cents=jc.job.price_cents,
            price_display=cents_to_display(jc.job.price_cents),
            contract_id=jc.contract.id,
            contract_status=jc.contract.status.value,
            client_id=jc.contract.client_id,
            contractor_id=jc.contract.contractor_id,
        )


class UnpaidJobsResponse(BaseModel):
    items: list[UnpaidJobItem]
    total_unpaid_cents: int
    total_unpaid_display: str


class JobItem(BaseModel):
    id: int
    description: str
    price_cents: int
    price_display: str
    payment_status: str
    payment_date: str | None  # ISO8601 string
    contract_id: int
    client_id: int
    client_name: str
    contractor_id: int
    contractor_name: str

    @classmethod
    def from_domain(cls, listing: JobListing) -> "JobItem":
        job = listing.job
        return cls(
            id=job.id,
            description=job.description,
            price_cents=job.price_cents,
            price_display=cents_to_display(job.price_cents),
            payment_status=job.payment_status.value,
            payment_date=job.payment_date.isoformat() if job.payment_date else None,
            contract_id=listing.contract.id,
            client_id=listing.contract.client_id,
            client_name=listing.client_name,
            contractor_id=listing.contract.contractor_id,
            contractor_name=listing.contractor_name,
        )


class JobListResponse(BaseModel):
    items: list[JobItem]
