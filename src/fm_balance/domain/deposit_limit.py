"""Deposit cap rule — pure functions, no I/O.

A client may deposit at most DEPOSIT_CAP_BPS basis points of the total price
of their unpaid jobs on in-progress contracts, recomputed on every request.
With no outstanding work the cap is 0, so every deposit is rejected.
"""

from dataclasses import dataclass

from src.fm_common.cents import apply_bps

DEFAULT_DEPOSIT_CAP_BPS: int = 2500  # 25%


@dataclass(frozen=True)
class DepositDecision:
    requested_cents: int
    total_unpaid_cents: int
    max_deposit_cents: int

    @property
    def approved(self) -> bool:
        return self.requested_cents <= self.max_deposit_cents


def max_deposit_cents(total_unpaid_cents: int, cap_bps: int = DEFAULT_DEPOSIT_CAP_BPS) -> int:
    """Largest whole-cent deposit allowed for the given unpaid total.

    Floor is exact here: for an integer amount x, x <= U * bps / 10000 iff
    x <= floor(U * bps / 10000).
    """
    if total_unpaid_cents < 0:
        raise ValueError(f"Unpaid total cannot be negative, got {total_unpaid_cents}")
    return apply_bps(total_unpaid_cents, cap_bps)


def evaluate_deposit(
    requested_cents: int,
    total_unpaid_cents: int,
    cap_bps: int = DEFAULT_DEPOSIT_CAP_BPS,
) -> DepositDecision:
    return DepositDecision(
        requested_cents=requested_cents,
        total_unpaid_cents=total_unpaid_cents,
        max_deposit_cents=max_deposit_cents(total_unpaid_cents, cap_bps),
    )
