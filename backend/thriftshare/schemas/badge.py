"""
Pydantic схемы для бейджей
"""
from pydantic import BaseModel
from typing import Optional
from uuid import UUID
from datetime import datetime


class BadgeResponse(BaseModel):
    """Бейдж из каталога"""
    id: UUID
    name: str
    description: Optional[str] = None
    icon: Optional[str] = None
    requirement: str
    created_at: datetime

    class Config:
        from_attributes = True


class EarnedBadgeResponse(BadgeResponse):
    """Бейдж, полученный пользователем"""
    earned_at: datetime
