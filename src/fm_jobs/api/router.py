"""fm_jobs REST API — 3 endpoints, all require the profile id header."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.fm_common.database import get_db_session
from src.fm_common.errors import ForbiddenError
from src.fm_common.response import ApiResponse, success_response
from src.fm_gateway.auth.dependencies import get_current_profile
from src.fm_jobs.application.service import JobApplicationService
from src.fm_profile.domain.models import Profile

router = APIRouter(prefix="/jobs", tags=["jobs"])

_service = JobApplicationService()


@router.get("/unpaid")
async def list_unpaid_jobs(
    current_profile: Annotated[Profile, Depends(get_current_profile)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
    request: Request,
) -> ApiResponse:
    data = await _service.list_unpaid_jobs(db, current_profile.id)
    resp = success_response(data.model_dump())
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.get("/paid-and-unpaid")
async def list_jobs(
    current_profile: Annotated[Profile, Depends(get_current_profile)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
    request: Request,
) -> ApiResponse:
    data = await _service.list_jobs(db, current_profile.id)
    resp = success_response(data.model_dump())
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.post("/{job_id}/pay")
async def pay_job(
    job_id: int,
    current_profile: Annotated[Profile, Depends(get_current_profile)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
    request: Request,
) -> ApiResponse:
    if not current_profile.is_client:
        raise ForbiddenError("only clients can pay for jobs")
    data = await _service.pay_job(db, job_id, current_profile.id)
    resp = success_response(data.model_dump())
    resp.message = "Payment successful"
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp
