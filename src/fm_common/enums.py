"""Global enums — must match DB CHECK constraints exactly."""

from enum import Enum


class ProfileType(str, Enum):
    CLIENT = "client"
    CONTRACTOR = "contractor"


class ContractStatus(str, Enum):
    NEW = "new"
    IN_PROGRESS = "in_progress"
    TERMINATED = "terminated"


class JobPaymentStatus(str, Enum):
    """Two-valued view of the legacy nullable `jobs.paid` column."""

    UNPAID = "UNPAID"
    PAID = "PAID"

    @classmethod
    def from_db(cls, paid: bool | None) -> "JobPaymentStatus":
        # NULL and FALSE both mean "not yet paid"
        return cls.PAID if paid is True else cls.UNPAID
