"""
SQLAlchemy модели
"""
from thriftshare.models.user import User
from thriftshare.models.post import Post, Like, Comment
from thriftshare.models.rental import RentalRequest, RentalStatus
from thriftshare.models.badge import Badge, UserBadge, BadgeRequirement

__all__ = [
    "User",
    "Post",
    "Like",
    "Comment",
    "RentalRequest",
    "RentalStatus",
    "Badge",
    "UserBadge",
    "BadgeRequirement",
]
