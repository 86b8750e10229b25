"""BalanceApplicationService — the deposit evaluator.

deposit() owns one unit of work on the caller-supplied session:
lock client row → sum unpaid jobs → check cap → credit → commit.
Every rejection rolls the transaction back before the error propagates;
unexpected persistence failures are rolled back and re-raised as InternalError.
"""

import logging
from decimal import Decimal

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from config.settings import settings
from src.fm_balance.application.schemas import DepositResponse
from src.fm_balance.domain.deposit_limit import evaluate_deposit
from src.fm_balance.domain.repository import BalanceRepositoryProtocol
from src.fm_balance.infrastructure.persistence import BalanceRepository
from src.fm_common.cents import amount_to_cents, cents_to_display
from src.fm_common.errors import (
    AppError,
    DepositLimitExceededError,
    ForbiddenError,
    InternalError,
    InvalidAmountError,
    ProfileNotFoundError,
)

logger = logging.getLogger(__name__)


class BalanceApplicationService:
    def __init__(
        self,
        repo: BalanceRepositoryProtocol | None = None,
        cap_bps: int | None = None,
    ) -> None:
        self._repo: BalanceRepositoryProtocol = repo or BalanceRepository()
        self._cap_bps = settings.DEPOSIT_CAP_BPS if cap_bps is None else cap_bps

    async def deposit(
        self, db: AsyncSession, client_id: int, amount: Decimal | int | str
    ) -> DepositResponse:
        try:
            amount_cents = amount_to_cents(amount)
        except ValueError as exc:
            raise InvalidAmountError(str(exc)) from None

        try:
            profile = await self._repo.lock_profile(db, client_id)
            if profile is None:
                raise ProfileNotFoundError(client_id)
            if not profile.is_client:
                raise ForbiddenError("only clients can deposit money")

            total_unpaid = await self._repo.sum_unpaid_job_prices(db, client_id)
            decision = evaluate_deposit(amount_cents, total_unpaid, self._cap_bps)
            if not decision.approved:
                raise DepositLimitExceededError(
                    amount_cents,
                    decision.max_deposit_cents,
                    cents_to_display(decision.max_deposit_cents),
                )

            new_balance = await self._repo.credit_balance(db, client_id, amount_cents)
            await db.commit()
        except AppError as exc:
            await db.rollback()
            logger.info(
                "Deposit rejected: client=%s amount=%d code=%d", client_id, amount_cents, exc.code
            )
            raise
        except SQLAlchemyError as exc:
            await db.rollback()
            logger.exception("Deposit failed: client=%s amount=%d", client_id, amount_cents)
            raise InternalError("Deposit could not be completed") from exc

        logger.info(
            "Deposit applied: client=%s amount=%d balance=%d unpaid=%d",
            client_id,
            amount_cents,
            new_balance,
            decision.total_unpaid_cents,
        )
        return DepositResponse.from_result(
            client_id=client_id,
            amount=amount_cents,
            balance=new_balance,
            max_deposit=decision.max_deposit_cents,
        )
