"""
Сервис пользователей и их профильной статистики
"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from typing import Optional
import logging

from thriftshare.models.user import User
from thriftshare.models.post import Post
from thriftshare.schemas.user import UserUpsert, UserResponse, UserWithStats, SustainabilitySummary
from thriftshare.services.badge_service import BadgeService

logger = logging.getLogger(__name__)


class UserService:
    """Сервис для работы с пользователями"""

    @staticmethod
    async def get_user(db: AsyncSession, user_id: str) -> Optional[User]:
        """Получить пользователя по ID"""
        result = await db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    @staticmethod
    async def upsert_user(db: AsyncSession, user_data: UserUpsert) -> User:
        """
        Создать пользователя или обновить его профиль

        Эко-показатели здесь не трогаются, ими управляет только LedgerService.
        """
        user = await UserService.get_user(db, user_data.id)
        profile = user_data.model_dump(exclude={"id"}, exclude_unset=True)

        if user is None:
            user = User(id=user_data.id, **profile)
            db.add(user)
            logger.info(f"Создан пользователь {user_data.id}")
        else:
            for field, value in profile.items():
                setattr(user, field, value)

        await db.commit()
        await db.refresh(user)
        return user

    @staticmethod
    async def count_posts(db: AsyncSession, user_id: str) -> int:
        """Количество постов пользователя"""
        result = await db.execute(select(func.count(Post.id)).where(Post.user_id == user_id))
        return result.scalar_one() or 0

    @staticmethod
    async def get_user_with_stats(db: AsyncSession, user_id: str) -> UserWithStats:
        """
        Получить пользователя с количеством постов и бейджами

        Raises:
            ValueError: если пользователь не найден
        """
        user = await UserService.get_user(db, user_id)
        if not user:
            raise ValueError(f"User {user_id} not found")

        posts_count = await UserService.count_posts(db, user_id)
        badges = await BadgeService.get_earned_badges(db, user_id)

        return UserWithStats(
            **UserResponse.model_validate(user).model_dump(),
            posts_count=posts_count,
            badges=badges,
        )

    @staticmethod
    async def get_sustainability_summary(db: AsyncSession, user_id: str) -> SustainabilitySummary:
        """
        Эко-показатели пользователя и его бейджи (только чтение)

        Raises:
            ValueError: если пользователь не найден
        """
        user = await UserService.get_user(db, user_id)
        if not user:
            raise ValueError(f"User {user_id} not found")

        return SustainabilitySummary(
            user_id=user.id,
            eco_points=user.eco_points,
            water_saved=user.water_saved,
            carbon_reduced=user.carbon_reduced,
            items_reused=user.items_reused,
            posts_count=await UserService.count_posts(db, user_id),
            badges=await BadgeService.get_earned_badges(db, user_id),
        )
