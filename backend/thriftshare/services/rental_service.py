"""
Сервис аренды одежды между пользователями
"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from typing import List, Optional
from uuid import UUID
import logging

from thriftshare.models.post import Post
from thriftshare.models.rental import RentalRequest, RentalStatus
from thriftshare.schemas.rental import RentalRequestCreate

logger = logging.getLogger(__name__)


class RentalService:
    """Сервис для работы с заявками на аренду"""

    @staticmethod
    async def create_rental_request(
        db: AsyncSession,
        requester_id: str,
        request_data: RentalRequestCreate
    ) -> Optional[RentalRequest]:
        """
        Создать заявку на аренду вещи из поста

        Владелец берётся из поста, а не из запроса.

        Returns:
            RentalRequest или None, если пост не найден

        Raises:
            ValueError: если пост не сдаётся в аренду или это свой пост
        """
        post = await db.get(Post, request_data.post_id)
        if post is None:
            return None

        if not post.available_for_rent:
            raise ValueError("Этот пост не доступен для аренды")
        if post.user_id == requester_id:
            raise ValueError("Нельзя арендовать собственную вещь")

        rental_request = RentalRequest(
            requester_id=requester_id,
            post_id=post.id,
            owner_id=post.user_id,
            start_date=request_data.start_date,
            end_date=request_data.end_date,
            status=RentalStatus.PENDING.value,
            total_price=request_data.total_price,
            message=request_data.message,
        )
        db.add(rental_request)
        await db.commit()
        await db.refresh(rental_request)

        logger.info(f"Rental request {rental_request.id} created: {requester_id} -> post {post.id}")
        return rental_request

    @staticmethod
    async def get_rental_requests_by_user(db: AsyncSession, user_id: str) -> List[RentalRequest]:
        """Заявки, отправленные пользователем (новые сверху)"""
        query = (
            select(RentalRequest)
            .where(RentalRequest.requester_id == user_id)
            .order_by(RentalRequest.created_at.desc())
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    @staticmethod
    async def update_rental_request_status(
        db: AsyncSession,
        request_id: UUID,
        status: RentalStatus,
        acting_user_id: str
    ) -> Optional[RentalRequest]:
        """
        Изменить статус заявки

        Менять статус может только владелец вещи.

        Returns:
            RentalRequest или None, если заявка не найдена

        Raises:
            PermissionError: если пользователь не владелец вещи
        """
        rental_request = await db.get(RentalRequest, request_id)
        if rental_request is None:
            return None

        if rental_request.owner_id != acting_user_id:
            raise PermissionError("Only the item owner can change the rental status")

        rental_request.status = status.value
        await db.commit()
        await db.refresh(rental_request)

        logger.info(f"Rental request {request_id} -> {status.value}")
        return rental_request
