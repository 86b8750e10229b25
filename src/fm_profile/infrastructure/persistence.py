"""ProfileRepository — read-only profile lookups used by identity resolution and listing.

Balance mutations never go through this repository; they live in the
balance and jobs modules, inside the caller's transaction.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.fm_common.enums import ProfileType
from src.fm_profile.domain.models import Profile
from src.fm_profile.infrastructure.db_models import ProfileORM


def row_to_profile(row: object) -> Profile:
    """Map a raw SQL row or a ProfileORM instance to the domain model."""
    return Profile(
        id=row.id,  # type: ignore[attr-defined]
        first_name=row.first_name,  # type: ignore[attr-defined]
        last_name=row.last_name,  # type: ignore[attr-defined]
        profession=row.profession,  # type: ignore[attr-defined]
        type=ProfileType(row.type),  # type: ignore[attr-defined]
        balance_cents=row.balance_cents,  # type: ignore[attr-defined]
        created_at=getattr(row, "created_at", None),
        updated_at=getattr(row, "updated_at", None),
    )


class ProfileRepository:
    async def get_profile_by_id(
        self, db: AsyncSession, profile_id: int
    ) -> Profile | None:
        result = await db.execute(select(ProfileORM).where(ProfileORM.id == profile_id))
        orm = result.scalar_one_or_none()
        return row_to_profile(orm) if orm else None

    async def list_profiles(
        self, db: AsyncSession, profile_type: str | None
    ) -> list[Profile]:
        stmt = select(ProfileORM).order_by(ProfileORM.id)
        if profile_type is not None:
            stmt = stmt.where(ProfileORM.type == profile_type)
        result = await db.execute(stmt)
        return [row_to_profile(orm) for orm in result.scalars().all()]
