"""Member representation shared by member and home use cases."""

from datetime import date

from pydantic import BaseModel

from shiki.domain.model import Member
from shiki.util.images import optimized_image_url

PROFILE_IMAGE_SIZE = 400


class MemberItem(BaseModel):
    """Member profile card."""

    member_id: str
    name: str
    nickname: str
    age: int | None
    birthday: date | None
    position: str
    personality: str
    hobbies: str
    image_color: str
    catchphrase: str
    profile_image_url: str | None

    @classmethod
    def from_domain(cls, member: Member) -> "MemberItem":
        image = member.profile_image_url
        return cls(
            member_id=str(member.id),
            name=member.name,
            nickname=member.nickname,
            age=member.age,
            birthday=member.birthday,
            position=member.position,
            personality=member.personality,
            hobbies=member.hobbies,
            image_color=member.image_color,
            catchphrase=member.catchphrase,
            profile_image_url=(
                optimized_image_url(image, PROFILE_IMAGE_SIZE, PROFILE_IMAGE_SIZE)
                if image
                else None
            ),
        )
