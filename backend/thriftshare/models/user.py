"""
Модель пользователя
"""
from sqlalchemy import Column, String, Text, Integer, Numeric, DateTime, CheckConstraint
from sqlalchemy.sql import func
import uuid

from thriftshare.database import Base


class User(Base):
    """Пользователь вместе с накопительными показателями устойчивости"""
    __tablename__ = "users"

    # id приходит от внешнего провайдера авторизации (claim "sub"), поэтому строка
    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String, unique=True, nullable=True)
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    profile_image_url = Column(String, nullable=True)
    bio = Column(Text, nullable=True)
    location = Column(String, nullable=True)
    username = Column(String, unique=True, nullable=True)

    # Эко-показатели: меняются только через LedgerService
    eco_points = Column(Integer, nullable=False, default=0, server_default="0", index=True)
    water_saved = Column(Numeric(10, 2), nullable=False, default=0, server_default="0")  # литры
    carbon_reduced = Column(Numeric(10, 2), nullable=False, default=0, server_default="0")  # кг CO₂
    items_reused = Column(Integer, nullable=False, default=0, server_default="0")

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    __table_args__ = (
        CheckConstraint("eco_points >= 0", name="users_eco_points_non_negative"),
        CheckConstraint("water_saved >= 0", name="users_water_saved_non_negative"),
        CheckConstraint("carbon_reduced >= 0", name="users_carbon_reduced_non_negative"),
        CheckConstraint("items_reused >= 0", name="users_items_reused_non_negative"),
    )

    @property
    def display_name(self) -> str:
        full_name = f"{self.first_name or ''} {self.last_name or ''}".strip()
        return full_name or self.username or self.id

    def __repr__(self):
        return f"<User {self.id} ({self.display_name})>"
