"""
Модели бейджей (каталог и выданные награды)
"""
from sqlalchemy import Column, String, Text, Integer, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid
import enum

from thriftshare.database import Base


class BadgeRequirement(str, enum.Enum):
    """Условия получения бейджей (закрытый набор)"""
    POSTS_COUNT_50 = "posts_count_50"
    POSTS_COUNT_100 = "posts_count_100"
    ECO_POINTS_1000 = "eco_points_1000"
    WATER_SAVED_200 = "water_saved_200"
    CARBON_REDUCED_100 = "carbon_reduced_100"
    LIKES_AVERAGE_100 = "likes_average_100"


class Badge(Base):
    """Бейдж из каталога (не привязан к пользователю)"""
    __tablename__ = "badges"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False, unique=True)  # unique защищает от двойного сидирования
    description = Column(Text, nullable=True)
    icon = Column(String, nullable=True)
    requirement = Column(String, nullable=False)  # значение BadgeRequirement
    sort_order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<Badge {self.name} ({self.requirement})>"


class UserBadge(Base):
    """Факт получения бейджа пользователем"""
    __tablename__ = "user_badges"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    badge_id = Column(UUID(as_uuid=True), ForeignKey("badges.id", ondelete="CASCADE"), nullable=False, index=True)
    earned_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    badge = relationship("Badge", foreign_keys=[badge_id])

    __table_args__ = (
        UniqueConstraint("user_id", "badge_id", name="user_badges_user_badge_unique"),
    )

    def __repr__(self):
        return f"<UserBadge {self.user_id} -> {self.badge_id}>"
