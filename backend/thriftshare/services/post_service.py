"""
Сервис постов: создание (с начислением эко-показателей), лента, лайки, комментарии
"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete, and_
from sqlalchemy.orm import selectinload
from sqlalchemy.exc import IntegrityError
from typing import List, Optional, Tuple
from uuid import UUID
import logging

from thriftshare.models.post import Post, Like, Comment
from thriftshare.schemas.post import PostCreate, CommentCreate
from thriftshare.services.ledger_service import LedgerService
from thriftshare.services.badge_service import BadgeService

logger = logging.getLogger(__name__)


class PostService:
    """Сервис для работы с постами"""

    @staticmethod
    async def create_post(
        db: AsyncSession,
        post_data: PostCreate,
        user_id: str,
        image_url: str
    ) -> Post:
        """
        Создать пост и начислить автору его вклад

        Порядок: сохранить пост -> обновить леджер -> проверить бейджи.
        Пост коммитится первым и не откатывается, если следующие шаги
        упали (ошибка пробрасывается вызывающему).
        """
        post = Post(
            user_id=user_id,
            image_url=image_url,
            **post_data.model_dump()
        )
        db.add(post)
        await db.commit()
        await db.refresh(post)
        logger.info(f"Post {post.id} created by user {user_id}")

        user = await LedgerService.apply_contribution(db, user_id, post_data.contribution())
        if user is not None:
            await BadgeService.evaluate_badges(db, user_id)

        # rollback внутри леджера или бейджей экспирирует объект
        await db.refresh(post)
        return post

    @staticmethod
    async def get_posts(db: AsyncSession, limit: int = 20, offset: int = 0) -> List[Post]:
        """Лента постов (новые сверху)"""
        query = (
            select(Post)
            .options(selectinload(Post.user))
            .order_by(Post.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    @staticmethod
    async def get_post(db: AsyncSession, post_id: UUID) -> Optional[Post]:
        """Получить пост вместе с автором"""
        query = select(Post).options(selectinload(Post.user)).where(Post.id == post_id)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    @staticmethod
    async def get_posts_by_user(db: AsyncSession, user_id: str) -> List[Post]:
        """Посты пользователя (новые сверху)"""
        query = select(Post).where(Post.user_id == user_id).order_by(Post.created_at.desc())
        result = await db.execute(query)
        return list(result.scalars().all())

    @staticmethod
    async def get_rentable_posts(db: AsyncSession, limit: int = 20, offset: int = 0) -> List[Post]:
        """Посты, доступные для аренды"""
        query = (
            select(Post)
            .options(selectinload(Post.user))
            .where(Post.available_for_rent == True)  # noqa: E712
            .order_by(Post.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    @staticmethod
    async def is_post_liked(db: AsyncSession, user_id: str, post_id: UUID) -> bool:
        """Лайкнул ли пользователь пост"""
        query = select(Like.id).where(and_(Like.user_id == user_id, Like.post_id == post_id))
        result = await db.execute(query)
        return result.first() is not None

    @staticmethod
    async def toggle_like(db: AsyncSession, user_id: str, post_id: UUID) -> Tuple[bool, int]:
        """
        Поставить или снять лайк

        Returns:
            (лайкнут ли пост теперь, новое количество лайков)

        Raises:
            ValueError: если пост не найден
        """
        post = await db.get(Post, post_id)
        if post is None:
            raise ValueError(f"Post {post_id} not found")

        if await PostService.is_post_liked(db, user_id, post_id):
            await db.execute(
                delete(Like).where(and_(Like.user_id == user_id, Like.post_id == post_id))
            )
            delta = -1
        else:
            db.add(Like(user_id=user_id, post_id=post_id))
            delta = 1

        try:
            await db.execute(
                update(Post)
                .where(Post.id == post_id)
                .values(likes_count=Post.likes_count + delta)
                .execution_options(synchronize_session=False)
            )
            await db.commit()
        except IntegrityError:
            # Параллельный запрос этого же пользователя уже поставил лайк
            await db.rollback()
            logger.warning(f"⚠️ Повторный лайк {user_id} -> {post_id}, возвращаем текущее состояние")
            post = await db.get(Post, post_id, populate_existing=True)
            return await PostService.is_post_liked(db, user_id, post_id), post.likes_count

        post = await db.get(Post, post_id, populate_existing=True)
        return delta > 0, post.likes_count

    @staticmethod
    async def create_comment(
        db: AsyncSession,
        user_id: str,
        post_id: UUID,
        comment_data: CommentCreate
    ) -> Comment:
        """
        Добавить комментарий к посту

        Raises:
            ValueError: если пост не найден
        """
        post = await db.get(Post, post_id)
        if post is None:
            raise ValueError(f"Post {post_id} not found")

        comment = Comment(user_id=user_id, post_id=post_id, content=comment_data.content)
        db.add(comment)
        await db.execute(
            update(Post)
            .where(Post.id == post_id)
            .values(comments_count=Post.comments_count + 1)
            .execution_options(synchronize_session=False)
        )
        await db.commit()
        await db.refresh(comment)
        return comment

    @staticmethod
    async def get_comments_by_post(db: AsyncSession, post_id: UUID) -> List[Comment]:
        """Комментарии к посту (новые сверху)"""
        query = select(Comment).where(Comment.post_id == post_id).order_by(Comment.created_at.desc())
        result = await db.execute(query)
        return list(result.scalars().all())
