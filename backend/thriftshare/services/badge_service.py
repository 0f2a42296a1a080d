"""
Сервис бейджей: каталог, проверка условий и выдача наград
"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError
from typing import Callable, Dict, List, Optional, Set
from dataclasses import dataclass
from decimal import Decimal
import logging

from thriftshare.models.user import User
from thriftshare.models.post import Post
from thriftshare.models.badge import Badge, UserBadge, BadgeRequirement
from thriftshare.schemas.badge import EarnedBadgeResponse

logger = logging.getLogger(__name__)


# Каталог по умолчанию (порядок = порядок проверки и отображения)
DEFAULT_BADGES = [
    {
        "name": "Eco Star",
        "description": "50+ eco-friendly posts",
        "icon": "♻️",
        "requirement": BadgeRequirement.POSTS_COUNT_50.value,
    },
    {
        "name": "Green Icon",
        "description": "1000+ eco points",
        "icon": "💚",
        "requirement": BadgeRequirement.ECO_POINTS_1000.value,
    },
    {
        "name": "Water Saver",
        "description": "200L+ water saved",
        "icon": "💧",
        "requirement": BadgeRequirement.WATER_SAVED_200.value,
    },
    {
        "name": "Trendsetter",
        "description": "100+ likes average",
        "icon": "🌟",
        "requirement": BadgeRequirement.LIKES_AVERAGE_100.value,
    },
    {
        "name": "Thrift Champion",
        "description": "100 thrift finds",
        "icon": "🏆",
        "requirement": BadgeRequirement.POSTS_COUNT_100.value,
    },
    {
        "name": "Planet Protector",
        "description": "Save 100kg CO₂",
        "icon": "🌍",
        "requirement": BadgeRequirement.CARBON_REDUCED_100.value,
    },
]


@dataclass(frozen=True)
class SustainabilitySnapshot:
    """Состояние пользователя, по которому проверяются условия бейджей"""
    eco_points: int
    water_saved: Decimal
    carbon_reduced: Decimal
    post_count: int
    total_likes: int

    @property
    def average_likes(self) -> Optional[Decimal]:
        """Среднее число лайков на пост (None, если постов нет)"""
        if self.post_count == 0:
            return None
        return Decimal(self.total_likes) / self.post_count


def _likes_average_at_least(threshold: int) -> Callable[[SustainabilitySnapshot], bool]:
    def predicate(snapshot: SustainabilitySnapshot) -> bool:
        # Без постов среднего нет, делить на ноль не нужно
        if snapshot.post_count == 0:
            return False
        return snapshot.total_likes >= threshold * snapshot.post_count
    return predicate


REQUIREMENT_PREDICATES: Dict[BadgeRequirement, Callable[[SustainabilitySnapshot], bool]] = {
    BadgeRequirement.POSTS_COUNT_50: lambda s: s.post_count >= 50,
    BadgeRequirement.POSTS_COUNT_100: lambda s: s.post_count >= 100,
    BadgeRequirement.ECO_POINTS_1000: lambda s: s.eco_points >= 1000,
    BadgeRequirement.WATER_SAVED_200: lambda s: s.water_saved >= 200,
    BadgeRequirement.CARBON_REDUCED_100: lambda s: s.carbon_reduced >= 100,
    BadgeRequirement.LIKES_AVERAGE_100: _likes_average_at_least(100),
}


class BadgeService:
    """Сервис для работы с бейджами"""

    @staticmethod
    async def _count_badges(db: AsyncSession) -> int:
        result = await db.execute(select(func.count(Badge.id)))
        return result.scalar_one() or 0

    @staticmethod
    async def initialize_badges(db: AsyncSession) -> int:
        """
        Засеять каталог бейджей, если он пуст

        Повторный вызов ничего не делает. Если две инициализации одновременно
        увидели пустой каталог, вторая упрётся в unique(name) и откатится.

        Returns:
            Количество созданных бейджей
        """
        count = await BadgeService._count_badges(db)
        if count > 0:
            logger.debug(f"ℹ️ Каталог бейджей уже заполнен ({count} шт.)")
            return 0

        for position, badge_data in enumerate(DEFAULT_BADGES):
            db.add(Badge(sort_order=position, **badge_data))

        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            logger.info("Каталог бейджей уже засеян параллельной инициализацией, пропускаем")
            return 0

        logger.info(f"✅ Каталог бейджей создан ({len(DEFAULT_BADGES)} шт.)")
        return len(DEFAULT_BADGES)

    @staticmethod
    async def get_catalog(db: AsyncSession) -> List[Badge]:
        """Получить каталог бейджей в порядке проверки"""
        result = await db.execute(select(Badge).order_by(Badge.sort_order, Badge.name))
        return list(result.scalars().all())

    @staticmethod
    async def get_earned_badges(db: AsyncSession, user_id: str) -> List[EarnedBadgeResponse]:
        """Получить бейджи, полученные пользователем"""
        query = (
            select(Badge, UserBadge.earned_at)
            .join(UserBadge, UserBadge.badge_id == Badge.id)
            .where(UserBadge.user_id == user_id)
            .order_by(UserBadge.earned_at, Badge.sort_order)
        )
        result = await db.execute(query)

        return [
            EarnedBadgeResponse(
                id=badge.id,
                name=badge.name,
                description=badge.description,
                icon=badge.icon,
                requirement=badge.requirement,
                created_at=badge.created_at,
                earned_at=earned_at,
            )
            for badge, earned_at in result.all()
        ]

    @staticmethod
    async def _get_earned_badge_names(db: AsyncSession, user_id: str) -> Set[str]:
        query = (
            select(Badge.name)
            .join(UserBadge, UserBadge.badge_id == Badge.id)
            .where(UserBadge.user_id == user_id)
        )
        result = await db.execute(query)
        return set(result.scalars().all())

    @staticmethod
    async def build_snapshot(db: AsyncSession, user: User) -> SustainabilitySnapshot:
        """Собрать показатели пользователя и статистику его постов"""
        # Пересчитывается по всей истории постов на каждый вызов
        stats_query = select(
            func.count(Post.id),
            func.coalesce(func.sum(Post.likes_count), 0)
        ).where(Post.user_id == user.id)
        stats_result = await db.execute(stats_query)
        post_count, total_likes = stats_result.one()

        return SustainabilitySnapshot(
            eco_points=user.eco_points or 0,
            water_saved=Decimal(user.water_saved or 0),
            carbon_reduced=Decimal(user.carbon_reduced or 0),
            post_count=post_count or 0,
            total_likes=int(total_likes or 0),
        )

    @staticmethod
    def requirement_met(requirement: str, snapshot: SustainabilitySnapshot) -> bool:
        """Проверить условие бейджа; неизвестное условие считается невыполненным"""
        try:
            predicate = REQUIREMENT_PREDICATES[BadgeRequirement(requirement)]
        except ValueError:
            logger.warning(f"⚠️ Неизвестное условие бейджа: {requirement!r}")
            return False
        return predicate(snapshot)

    @staticmethod
    async def evaluate_badges(db: AsyncSession, user_id: str) -> List[Badge]:
        """
        Проверить каталог и выдать пользователю новые бейджи

        Уже полученные бейджи пропускаются, поэтому повторный вызов без
        изменений ничего не выдаёт. Если параллельный запрос успел выдать тот же
        бейдж (unique(user_id, badge_id)), проверка повторяется один раз.

        Returns:
            Список только что выданных бейджей
        """
        try:
            return await BadgeService._evaluate_once(db, user_id)
        except IntegrityError:
            await db.rollback()
            logger.warning(f"⚠️ Бейдж для {user_id} выдан параллельным запросом, повторная проверка")
            return await BadgeService._evaluate_once(db, user_id)

    @staticmethod
    async def _evaluate_once(db: AsyncSession, user_id: str) -> List[Badge]:
        user = await db.get(User, user_id, populate_existing=True)
        if user is None:
            logger.warning(f"⚠️ Пользователь {user_id} не найден, проверка бейджей пропущена")
            return []

        snapshot = await BadgeService.build_snapshot(db, user)
        earned_names = await BadgeService._get_earned_badge_names(db, user_id)
        catalog = await BadgeService.get_catalog(db)

        new_badges = []
        for badge in catalog:
            if badge.name in earned_names:
                continue
            if not BadgeService.requirement_met(badge.requirement, snapshot):
                continue

            db.add(UserBadge(user_id=user_id, badge_id=badge.id))
            earned_names.add(badge.name)
            new_badges.append(badge)

        if new_badges:
            await db.commit()
            logger.info(f"🏅 User {user_id} earned badges: {', '.join(b.name for b in new_badges)}")

        return new_badges
