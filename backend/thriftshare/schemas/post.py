"""
Pydantic схемы для постов, лайков и комментариев
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from uuid import UUID
from decimal import Decimal
from datetime import datetime

from thriftshare.schemas.sustainability import Contribution, quantize_amount
from thriftshare.schemas.user import UserBrief

# Вклад поста по умолчанию, если клиент его не прислал
DEFAULT_ECO_POINTS = 50
DEFAULT_WATER_SAVED = Decimal("2.5")
DEFAULT_CARBON_REDUCED = Decimal("1.2")


class PostBase(BaseModel):
    """Базовая схема поста"""
    caption: Optional[str] = Field(None, description="Подпись к посту")
    tags: List[str] = Field(default_factory=list, description="Теги")
    thrift_store: Optional[str] = Field(None, description="Магазин, где найдена вещь")
    price_paid: Optional[Decimal] = Field(None, ge=0, le=Decimal("999999.99"))
    original_brand: Optional[str] = None
    size: Optional[str] = None
    available_for_rent: bool = False
    rent_price: Optional[Decimal] = Field(None, ge=0, le=Decimal("999999.99"), description="Цена аренды за день")


class PostCreate(PostBase):
    """Схема для создания поста"""
    eco_points: int = Field(DEFAULT_ECO_POINTS, ge=0)
    water_saved: Decimal = Field(DEFAULT_WATER_SAVED, ge=0, le=Decimal("999999.99"))
    carbon_reduced: Decimal = Field(DEFAULT_CARBON_REDUCED, ge=0, le=Decimal("999999.99"))

    @field_validator("water_saved", "carbon_reduced", "price_paid", "rent_price")
    @classmethod
    def quantize(cls, v: Optional[Decimal]) -> Optional[Decimal]:
        if v is None:
            return v
        return quantize_amount(v)

    @field_validator("tags")
    @classmethod
    def clean_tags(cls, v: List[str]) -> List[str]:
        return [tag.strip() for tag in v if tag and tag.strip()]

    def contribution(self) -> Contribution:
        """Вклад поста в эко-показатели автора"""
        return Contribution(
            eco_points=self.eco_points,
            water_saved=self.water_saved,
            carbon_reduced=self.carbon_reduced,
        )


class PostResponse(PostBase):
    """Схема ответа с постом"""
    id: UUID
    user_id: str
    image_url: str
    eco_points: int
    water_saved: Decimal
    carbon_reduced: Decimal
    likes_count: int
    comments_count: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class PostWithUserResponse(PostResponse):
    """Пост вместе с автором"""
    user: UserBrief
    is_liked: Optional[bool] = None


class LikeToggleResponse(BaseModel):
    """Результат переключения лайка"""
    is_liked: bool
    likes_count: int


class CommentCreate(BaseModel):
    """Схема для создания комментария"""
    content: str = Field(..., min_length=1, max_length=2000)

    @field_validator("content")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Комментарий не может быть пустым")
        return v


class CommentResponse(BaseModel):
    """Схема ответа с комментарием"""
    id: UUID
    user_id: str
    post_id: UUID
    content: str
    created_at: datetime

    class Config:
        from_attributes = True
