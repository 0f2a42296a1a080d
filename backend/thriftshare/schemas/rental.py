"""
Pydantic схемы для аренды
"""
from pydantic import BaseModel, Field, model_validator
from typing import Optional
from uuid import UUID
from decimal import Decimal
from datetime import datetime

from thriftshare.models.rental import RentalStatus


class RentalRequestCreate(BaseModel):
    """Схема для создания заявки на аренду"""
    post_id: UUID
    start_date: datetime
    end_date: datetime
    total_price: Optional[Decimal] = Field(None, ge=0, le=Decimal("999999.99"))
    message: Optional[str] = Field(None, max_length=2000)

    @model_validator(mode="after")
    def check_dates(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date не может быть раньше start_date")
        return self


class RentalStatusUpdate(BaseModel):
    """Схема для смены статуса заявки"""
    status: RentalStatus


class RentalRequestResponse(BaseModel):
    """Схема ответа с заявкой на аренду"""
    id: UUID
    requester_id: str
    post_id: UUID
    owner_id: str
    start_date: datetime
    end_date: datetime
    status: RentalStatus
    total_price: Optional[Decimal] = None
    message: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
