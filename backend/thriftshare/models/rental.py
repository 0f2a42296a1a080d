"""
Модель заявок на аренду одежды
"""
from sqlalchemy import Column, String, Text, Numeric, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid
import enum

from thriftshare.database import Base


class RentalStatus(str, enum.Enum):
    """Статусы заявки на аренду"""
    PENDING = "pending"      # Ожидает ответа владельца
    APPROVED = "approved"    # Одобрена
    DECLINED = "declined"    # Отклонена
    COMPLETED = "completed"  # Аренда завершена


class RentalRequest(Base):
    """Заявка на аренду вещи из поста"""
    __tablename__ = "rental_requests"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    requester_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    post_id = Column(UUID(as_uuid=True), ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True)
    owner_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    start_date = Column(DateTime(timezone=True), nullable=False)
    end_date = Column(DateTime(timezone=True), nullable=False)
    # Храним значение enum'а строкой, чтобы одинаково работать в SQLite и PostgreSQL
    status = Column(String(20), nullable=False, default=RentalStatus.PENDING.value, server_default="pending", index=True)
    total_price = Column(Numeric(8, 2), nullable=True)
    message = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    post = relationship("Post", foreign_keys=[post_id])

    __table_args__ = (
        CheckConstraint("end_date >= start_date", name="rental_requests_dates_ordered"),
    )

    def __repr__(self):
        return f"<RentalRequest {self.id} ({self.status})>"
