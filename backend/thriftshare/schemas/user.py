"""
Pydantic схемы для пользователей
"""
from pydantic import BaseModel, Field
from typing import Optional, List
from decimal import Decimal
from datetime import datetime

from thriftshare.schemas.badge import EarnedBadgeResponse


class UserUpsert(BaseModel):
    """Данные пользователя от провайдера авторизации"""
    id: str = Field(..., min_length=1, description="Идентификатор пользователя (claim sub)")
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    username: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[str] = None


class UserBrief(BaseModel):
    """Краткая информация об авторе (для ленты)"""
    id: str
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None

    class Config:
        from_attributes = True


class UserResponse(UserBrief):
    """Схема ответа с пользователем"""
    email: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[str] = None
    eco_points: int
    water_saved: Decimal
    carbon_reduced: Decimal
    items_reused: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class UserWithStats(UserResponse):
    """Пользователь со статистикой профиля"""
    posts_count: int = 0
    badges: List[EarnedBadgeResponse] = Field(default_factory=list)


class SustainabilitySummary(BaseModel):
    """Эко-показатели пользователя (для страниц профиля и Style Score)"""
    user_id: str
    eco_points: int
    water_saved: Decimal
    carbon_reduced: Decimal
    items_reused: int
    posts_count: int
    badges: List[EarnedBadgeResponse] = Field(default_factory=list)
