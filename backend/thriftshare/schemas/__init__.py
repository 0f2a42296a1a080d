"""
Pydantic схемы
"""
from thriftshare.schemas.sustainability import Contribution
from thriftshare.schemas.user import UserUpsert, UserBrief, UserResponse, UserWithStats, SustainabilitySummary
from thriftshare.schemas.badge import BadgeResponse, EarnedBadgeResponse
from thriftshare.schemas.post import (
    PostCreate, PostResponse, PostWithUserResponse, LikeToggleResponse,
    CommentCreate, CommentResponse
)
from thriftshare.schemas.rental import RentalRequestCreate, RentalStatusUpdate, RentalRequestResponse

__all__ = [
    "Contribution",
    "UserUpsert", "UserBrief", "UserResponse", "UserWithStats", "SustainabilitySummary",
    "BadgeResponse", "EarnedBadgeResponse",
    "PostCreate", "PostResponse", "PostWithUserResponse", "LikeToggleResponse",
    "CommentCreate", "CommentResponse",
    "RentalRequestCreate", "RentalStatusUpdate", "RentalRequestResponse",
]
