"""Strongly typed identifiers for Shiki∞Link domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

ArticleId = NewType("ArticleId", UUID)
CommentId = NewType("CommentId", UUID)
LikeId = NewType("LikeId", UUID)
CategoryId = NewType("CategoryId", UUID)
MemberId = NewType("MemberId", UUID)
