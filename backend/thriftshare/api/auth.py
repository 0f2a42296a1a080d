"""
API endpoints для аутентификации
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from thriftshare.database import get_db
from thriftshare.models.user import User
from thriftshare.schemas.user import UserWithStats
from thriftshare.services.user_service import UserService
from thriftshare.utils.permissions import get_current_user

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/me", response_model=UserWithStats)
async def get_me(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Получить текущего пользователя с количеством постов и бейджами"""
    try:
        return await UserService.get_user_with_stats(db, current_user.id)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching user: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch user"
        )
