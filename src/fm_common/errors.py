"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Identity/Profile
  2xxx: Balance
  3xxx: Job
  4xxx: Reports
  9xxx: System
"""

from typing import Any


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
        data: dict[str, Any] | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        self.data = data
        super().__init__(message)


# --- 1xxx: Identity/Profile ---

class ForbiddenError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(1002, f"Forbidden: {detail}", 403)


class ProfileNotFoundError(AppError):
    def __init__(self, profile_id: int) -> None:
        super().__init__(1003, f"Profile not found: {profile_id}", 404)


# --- 2xxx: Balance ---

class InsufficientFundsError(AppError):
    def __init__(self, required: int, available: int) -> None:
        super().__init__(
            2001,
            f"Insufficient balance: required {required} cents, available {available} cents",
            422,
        )


class InvalidAmountError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(2002, f"Invalid amount: {detail}", 422)


class DepositLimitExceededError(AppError):
    def __init__(self, requested: int, max_allowed: int, max_allowed_display: str) -> None:
        super().__init__(
            2003,
            f"Deposit limit exceeded: at most {max_allowed_display} "
            "can be deposited against your unpaid jobs",
            422,
            data={
                "requested_cents": requested,
                "max_deposit_cents": max_allowed,
                "max_deposit_display": max_allowed_display,
            },
        )
        self.max_allowed = max_allowed


# --- 3xxx: Job ---

class JobNotFoundError(AppError):
    def __init__(self, job_id: int) -> None:
        super().__init__(3001, f"Job not found: {job_id}", 404)


class JobAlreadyPaidError(AppError):
    def __init__(self, job_id: int) -> None:
        super().__init__(3002, f"Job has already been paid: {job_id}", 409)


# --- 4xxx: Reports ---

class InvalidDateRangeError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(4001, f"Invalid date range: {detail}", 422)


class ReportEmptyError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(4002, detail, 404)


# --- 9xxx: System ---

class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(9002, detail, 500)
