"""Domain models for profiles, contracts and jobs — pure dataclasses, no SQLAlchemy dependency."""

from dataclasses import dataclass
from datetime import datetime

from src.fm_common.enums import ContractStatus, JobPaymentStatus, ProfileType


@dataclass
class Profile:
    id: int
    first_name: str
    last_name: str
    profession: str
    type: ProfileType
    balance_cents: int
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def is_client(self) -> bool:
        return self.type == ProfileType.CLIENT


@dataclass
class Contract:
    id: int
    terms: str
    status: ContractStatus
    client_id: int
    contractor_id: int


@dataclass
class Job:
    id: int
    description: str
    price_cents: int
    payment_status: JobPaymentStatus
    payment_date: datetime | None
    contract_id: int

    @property
    def is_paid(self) -> bool:
        return self.payment_status == JobPaymentStatus.PAID
