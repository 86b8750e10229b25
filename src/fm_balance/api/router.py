"""fm_balance REST API — client deposits, requires the profile id header."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.fm_balance.application.schemas import DepositRequest
from src.fm_balance.application.service import BalanceApplicationService
from src.fm_common.database import get_db_session
from src.fm_common.errors import ForbiddenError
from src.fm_common.response import ApiResponse, success_response
from src.fm_gateway.auth.dependencies import get_current_profile
from src.fm_profile.domain.models import Profile

router = APIRouter(prefix="/balances", tags=["balances"])

_service = BalanceApplicationService()


@router.post("/deposit/{user_id}")
async def deposit(
    user_id: int,
    body: DepositRequest,
    current_profile: Annotated[Profile, Depends(get_current_profile)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
    request: Request,
) -> ApiResponse:
    if current_profile.id != user_id:
        raise ForbiddenError("you can only deposit into your own account")
    data = await _service.deposit(db, user_id, body.amount)
    resp = success_response(data.model_dump())
    resp.message = "Deposit successful"
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp
