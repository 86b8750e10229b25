"""Pydantic schemas for fm_profile API."""

from pydantic import BaseModel

from src.fm_common.cents import cents_to_display
from src.fm_profile.domain.models import Profile


class ProfileItem(BaseModel):
    id: int
    first_name: str
    last_name: str
    full_name: str
    profession: str
    type: str
    balance_cents: int
    balance_display: str

    @classmethod
    def from_domain(cls, p: Profile) -> "ProfileItem":
        return cls(
            id=p.id,
            first_name=p.first_name,
            last_name=p.last_name,
            full_name=p.full_name,
            profession=p.profession,
            type=p.type.value,
            balance_cents=p.balance_cents,
            balance_display=cents_to_display(p.balance_cents),
        )


class ProfileListResponse(BaseModel):
    items: list[ProfileItem]
