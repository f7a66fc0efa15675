"""Member profile entity."""

from datetime import date, datetime
from typing import Optional

from pydantic import Field

from shiki.domain.model.common import DomainModel, utc_now
from shiki.domain.value import MemberId


class Member(DomainModel):
    """Member of the group, shown on the home and members pages."""

    id: MemberId
    name: str = Field(min_length=1, max_length=100)
    nickname: str = ""
    age: Optional[int] = Field(default=None, ge=0)
    birthday: Optional[date] = None
    position: str = ""
    personality: str = ""
    hobbies: str = ""
    image_color: str = "#3b82f6"
    catchphrase: str = ""
    profile_image_url: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
