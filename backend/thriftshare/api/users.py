"""
API endpoints для профилей пользователей
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from thriftshare.database import get_db
from thriftshare.schemas.user import UserWithStats, SustainabilitySummary
from thriftshare.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/{user_id}", response_model=UserWithStats)
async def get_user_profile(user_id: str, db: AsyncSession = Depends(get_db)):
    """Профиль пользователя со статистикой"""
    try:
        return await UserService.get_user_with_stats(db, user_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )


@router.get("/{user_id}/sustainability", response_model=SustainabilitySummary)
async def get_user_sustainability(user_id: str, db: AsyncSession = Depends(get_db)):
    """
    Эко-показатели пользователя: баллы, вода, CO₂, вещи, бейджи

    Используется страницами Sustainability и Style Score
    """
    try:
        return await UserService.get_sustainability_summary(db, user_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
