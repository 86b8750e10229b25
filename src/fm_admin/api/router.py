"""Admin REST API — earnings reports."""
from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.fm_admin.application.service import AdminService
from src.fm_common.database import get_db_session
from src.fm_common.response import ApiResponse, success_response

router = APIRouter(prefix="/admin", tags=["admin"])
_service = AdminService()


@router.get("/best-profession")
async def best_profession(
    db: Annotated[AsyncSession, Depends(get_db_session)],
    request: Request,
    start: date = Query(..., description="Start date (YYYY-MM-DD), inclusive"),
    end: date = Query(..., description="End date (YYYY-MM-DD), inclusive"),
) -> ApiResponse:
    result = await _service.best_profession(start, end, db)
    resp = success_response(result)
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.get("/best-clients")
async def best_clients(
    db: Annotated[AsyncSession, Depends(get_db_session)],
    request: Request,
    start: date = Query(..., description="Start date (YYYY-MM-DD), inclusive"),
    end: date = Query(..., description="End date (YYYY-MM-DD), inclusive"),
    limit: int = Query(2, ge=1, le=100, description="Maximum number of clients"),
) -> ApiResponse:
    result = await _service.best_clients(start, end, limit, db)
    resp = success_response(result)
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp
