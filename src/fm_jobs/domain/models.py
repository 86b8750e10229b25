"""Domain models for fm_jobs — pure dataclasses, no SQLAlchemy dependency."""

from dataclasses import dataclass
from datetime import datetime

from src.fm_profile.domain.models import Contract, Job


@dataclass
class JobWithContract:
    """A job joined with the contract that owns it."""

    job: Job
    contract: Contract


@dataclass
class JobListing:
    """A job on an active contract with both parties' display names."""

    job: Job
    contract: Contract
    client_name: str
    contractor_name: str


@dataclass(frozen=True)
class SettlementPlan:
    job_id: int
    client_id: int
    contractor_id: int
    amount: int                      # cents
    client_balance_after: int        # cents
    contractor_balance_after: int    # cents


@dataclass
class SettlementResult:
    job_id: int
    client_id: int
    contractor_id: int
    amount: int
    client_balance: int
    contractor_balance: int
    payment_date: datetime
