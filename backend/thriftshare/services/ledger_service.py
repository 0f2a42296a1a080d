"""
Сервис эко-леджера: накопление показателей устойчивости пользователя
"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import update, func
from typing import Optional
import logging

from thriftshare.models.user import User
from thriftshare.schemas.sustainability import Contribution

logger = logging.getLogger(__name__)


class LedgerService:
    """
    Единственная точка изменения накопительных показателей пользователя

    Обновление выполняется одним UPDATE с инкрементом на стороне БД
    (col = col + :delta), поэтому параллельные посты одного пользователя
    не теряют вклад друг друга.
    """

    @staticmethod
    async def apply_contribution(
        db: AsyncSession,
        user_id: str,
        contribution: Contribution
    ) -> Optional[User]:
        """
        Добавить вклад поста к показателям пользователя

        Прибавляет eco_points, water_saved, carbon_reduced и увеличивает
        items_reused ровно на 1.

        Returns:
            Обновлённый User или None, если пользователь не найден
            (в этом случае ничего не меняется)
        """
        stmt = (
            update(User)
            .where(User.id == user_id)
            .values(
                eco_points=User.eco_points + contribution.eco_points,
                water_saved=User.water_saved + contribution.water_saved,
                carbon_reduced=User.carbon_reduced + contribution.carbon_reduced,
                items_reused=User.items_reused + 1,
                updated_at=func.now(),
            )
            .execution_options(synchronize_session=False)
        )
        result = await db.execute(stmt)

        if result.rowcount == 0:
            logger.warning(f"⚠️ Пользователь {user_id} не найден, вклад в леджер не применён")
            await db.rollback()
            return None

        await db.commit()

        # Объект в identity map мог устареть, перечитываем из БД
        user = await db.get(User, user_id, populate_existing=True)
        logger.info(
            f"Ledger updated for user {user_id}: +{contribution.eco_points} eco points, "
            f"+{contribution.water_saved}L water, +{contribution.carbon_reduced}kg CO2 "
            f"(total eco points: {user.eco_points}, items reused: {user.items_reused})"
        )
        return user
