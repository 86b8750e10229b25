"""fm_profile REST API — public profile listing (used by the front-end login picker)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.fm_common.database import get_db_session
from src.fm_common.enums import ProfileType
from src.fm_common.response import ApiResponse, success_response
from src.fm_profile.application.service import ProfileApplicationService

router = APIRouter(prefix="/profiles", tags=["profiles"])

_service = ProfileApplicationService()


@router.get("")
async def list_profiles(
    db: Annotated[AsyncSession, Depends(get_db_session)],
    request: Request,
    type: ProfileType | None = Query(None, description="Filter by profile type"),
) -> ApiResponse:
    data = await _service.list_profiles(db, type.value if type else None)
    resp = success_response(data.model_dump())
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp
