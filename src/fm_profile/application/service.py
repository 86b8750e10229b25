"""ProfileApplicationService — read-only, no commit/rollback needed."""

from sqlalchemy.ext.asyncio import AsyncSession

from src.fm_profile.application.schemas import ProfileItem, ProfileListResponse
from src.fm_profile.domain.models import Profile
from src.fm_profile.domain.repository import ProfileRepositoryProtocol
from src.fm_profile.infrastructure.persistence import ProfileRepository


class ProfileApplicationService:
    def __init__(self, repo: ProfileRepositoryProtocol | None = None) -> None:
        self._repo: ProfileRepositoryProtocol = repo or ProfileRepository()

    async def resolve_profile(self, db: AsyncSession, profile_id: int) -> Profile | None:
        return await self._repo.get_profile_by_id(db, profile_id)

    async def list_profiles(
        self, db: AsyncSession, profile_type: str | None
    ) -> ProfileListResponse:
        profiles = await self._repo.list_profiles(db, profile_type)
        return ProfileListResponse(items=[ProfileItem.from_domain(p) for p in profiles])
