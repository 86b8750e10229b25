"""FastAPI dependency: get_current_profile.

The caller identifies itself with a profile id header (`profile_id` by
default). The resolved Profile is trusted as authoritative for role and
ownership checks downstream.

Usage in any protected router:
    from src.fm_gateway.auth.dependencies import get_current_profile

    @router.get("/protected")
    async def protected(profile: Profile = Depends(get_current_profile)):
        ...
"""

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from config.settings import settings
from src.fm_common.database import get_db_session
from src.fm_profile.application.service import ProfileApplicationService
from src.fm_profile.domain.models import Profile

_profiles = ProfileApplicationService()


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=f"Unauthorized: {detail}",
    )


async def get_current_profile(
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> Profile:
    """Resolve the calling profile from the profile id header.

    Raises HTTP 401 if the header is missing, not an integer, or unknown.
    """
    raw = request.headers.get(settings.PROFILE_ID_HEADER)
    if not raw:
        raise _unauthorized(f"no {settings.PROFILE_ID_HEADER} header provided")
    try:
        profile_id = int(raw)
    except ValueError:
        raise _unauthorized(f"invalid {settings.PROFILE_ID_HEADER}") from None

    profile = await _profiles.resolve_profile(db, profile_id)
    if profile is None:
        raise _unauthorized(f"invalid {settings.PROFILE_ID_HEADER}")
    return profile
