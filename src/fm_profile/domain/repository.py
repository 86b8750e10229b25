"""Repository Protocol — dependency inversion for testability.

Unit tests inject a mock that conforms to this Protocol.
Infrastructure layer provides the real implementation.
"""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.fm_profile.domain.models import Profile


class ProfileRepositoryProtocol(Protocol):
    async def get_profile_by_id(
        self, db: AsyncSession, profile_id: int
    ) -> Profile | None: ...

    async def list_profiles(
        self, db: AsyncSession, profile_type: str | None
    ) -> list[Profile]: ...
