"""
Модели постов, лайков и комментариев
"""
from sqlalchemy import Column, String, Text, Integer, Numeric, Boolean, DateTime, ForeignKey, JSON, CheckConstraint, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from thriftshare.database import Base


class Post(Base):
    """Пост с находкой из секонд-хенда"""
    __tablename__ = "posts"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    image_url = Column(String, nullable=False)
    caption = Column(Text, nullable=True)
    tags = Column(JSON, nullable=False, default=list)

    # Информация о вещи
    thrift_store = Column(String, nullable=True)
    price_paid = Column(Numeric(8, 2), nullable=True)
    original_brand = Column(String, nullable=True)
    size = Column(String, nullable=True)

    # Аренда
    available_for_rent = Column(Boolean, nullable=False, default=False, index=True)
    rent_price = Column(Numeric(8, 2), nullable=True)  # за день

    # Вклад поста в эко-показатели автора (неизменяем после создания)
    eco_points = Column(Integer, nullable=False, default=0)
    water_saved = Column(Numeric(8, 2), nullable=False, default=0)
    carbon_reduced = Column(Numeric(8, 2), nullable=False, default=0)

    # Счётчики
    likes_count = Column(Integer, nullable=False, default=0, server_default="0")
    comments_count = Column(Integer, nullable=False, default=0, server_default="0")

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    # Relationships
    user = relationship("User", foreign_keys=[user_id])

    __table_args__ = (
        CheckConstraint("eco_points >= 0", name="posts_eco_points_non_negative"),
        CheckConstraint("water_saved >= 0", name="posts_water_saved_non_negative"),
        CheckConstraint("carbon_reduced >= 0", name="posts_carbon_reduced_non_negative"),
    )

    def __repr__(self):
        return f"<Post {self.id} (user: {self.user_id})>"


class Like(Base):
    """Лайк поста"""
    __tablename__ = "likes"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    post_id = Column(UUID(as_uuid=True), ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    __table_args__ = (
        UniqueConstraint("user_id", "post_id", name="likes_user_post_unique"),
    )

    def __repr__(self):
        return f"<Like {self.user_id} -> {self.post_id}>"


class Comment(Base):
    """Комментарий к посту"""
    __tablename__ = "comments"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    post_id = Column(UUID(as_uuid=True), ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)

    user = relationship("User", foreign_keys=[user_id])

    __table_args__ = (
        CheckConstraint("LENGTH(TRIM(content)) > 0", name="comments_content_not_empty"),
    )

    def __repr__(self):
        return f"<Comment {self.id} on {self.post_id}>"
