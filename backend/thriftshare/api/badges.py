"""
API endpoints для бейджей
"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from thriftshare.database import get_db
from thriftshare.schemas.badge import BadgeResponse, EarnedBadgeResponse
from thriftshare.services.badge_service import BadgeService

router = APIRouter(prefix="/badges", tags=["badges"])


@router.get("", response_model=List[BadgeResponse])
async def get_badges(db: AsyncSession = Depends(get_db)):
    """Каталог бейджей"""
    catalog = await BadgeService.get_catalog(db)
    return [BadgeResponse.model_validate(badge) for badge in catalog]


@router.get("/user/{user_id}", response_model=List[EarnedBadgeResponse])
async def get_user_badges(user_id: str, db: AsyncSession = Depends(get_db)):
    """Бейджи, полученные пользователем"""
    return await BadgeService.get_earned_badges(db, user_id)
