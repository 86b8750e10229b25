"""Pydantic schemas for fm_balance API."""

from decimal import Decimal

from pydantic import BaseModel, Field

from src.fm_common.cents import cents_to_decimal, cents_to_display

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class DepositRequest(BaseModel):
    # Positivity and rounding are enforced by the service (InvalidAmountError)
    amount: Decimal = Field(..., description="Amount to deposit, rounded to 2 decimals")


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class DepositResponse(BaseModel):
    client_id: int
    deposited_cents: int
    deposited_display: str
    new_balance: Decimal
    new_balance_cents: int
    new_balance_display: str
    max_deposit_cents: int
    max_deposit_display: str

    @classmethod
    def from_result(
        cls, client_id: int, amount: int, balance: int, max_deposit: int
    ) -> "DepositResponse":
        return cls(
            client_id=client_id,
            deposited_cents=amount,
            deposited_display=cents_to_display(amount),
            new_balance=cents_to_decimal(balance),
            new_balance_cents=balance,
            new_balance_display=cents_to_display(balance),
            max_deposit_cents=max_deposit,
            max_deposit_display=cents_to_display(max_deposit),
        )
