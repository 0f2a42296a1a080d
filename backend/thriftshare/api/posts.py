"""
API endpoints для постов, лайков и комментариев
"""
from fastapi import APIRouter, Depends, HTTPException, status, Query, UploadFile, File, Form
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional, List
from uuid import UUID
import logging

from thriftshare.database import get_db
from thriftshare.models.user import User
from thriftshare.schemas.post import (
    PostCreate, PostResponse, PostWithUserResponse, LikeToggleResponse,
    CommentCreate, CommentResponse
)
from thriftshare.services.post_service import PostService
from thriftshare.services.image_storage_service import ImageStorageService
from thriftshare.utils.permissions import get_current_user, OptionalUser

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("", response_model=List[PostWithUserResponse])
async def get_posts(
    limit: int = Query(20, ge=1, le=100, description="Количество постов"),
    offset: int = Query(0, ge=0, description="Количество пропущенных постов"),
    db: AsyncSession = Depends(get_db)
):
    """Лента постов (новые сверху)"""
    posts = await PostService.get_posts(db, limit=limit, offset=offset)
    return [PostWithUserResponse.model_validate(post) for post in posts]


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    image: Optional[UploadFile] = File(None, description="Фото вещи"),
    caption: Optional[str] = Form(None),
    tags: Optional[str] = Form(None, description="Теги через запятую"),
    thrift_store: Optional[str] = Form(None),
    price_paid: Optional[str] = Form(None),
    original_brand: Optional[str] = Form(None),
    size: Optional[str] = Form(None),
    available_for_rent: bool = Form(False),
    rent_price: Optional[str] = Form(None),
    eco_points: Optional[str] = Form(None, description="По умолчанию 50"),
    water_saved: Optional[str] = Form(None, description="Литры, по умолчанию 2.5"),
    carbon_reduced: Optional[str] = Form(None, description="Кг CO₂, по умолчанию 1.2"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Создать пост

    Вклад поста (eco_points, water_saved, carbon_reduced) прибавляется к
    показателям автора, после чего проверяются бейджи.
    """
    if image is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Image is required"
        )

    # Пустые поля формы считаем отсутствующими, чтобы сработали значения по умолчанию
    raw_data = {
        "caption": caption,
        "tags": tags.split(",") if tags else None,
        "thrift_store": thrift_store,
        "price_paid": price_paid,
        "original_brand": original_brand,
        "size": size,
        "available_for_rent": available_for_rent,
        "rent_price": rent_price,
        "eco_points": eco_points,
        "water_saved": water_saved,
        "carbon_reduced": carbon_reduced,
    }
    try:
        post_data = PostCreate(**{k: v for k, v in raw_data.items() if v is not None and v != ""})
    except ValidationError as e:
        raise RequestValidationError(e.errors())

    image_url = await ImageStorageService().save_image(image)

    try:
        post = await PostService.create_post(
            db=db,
            post_data=post_data,
            user_id=current_user.id,
            image_url=image_url
        )
    except Exception as e:
        logger.error(f"Error creating post: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create post"
        )

    return PostResponse.model_validate(post)


@router.get("/user/{user_id}", response_model=List[PostResponse])
async def get_user_posts(
    user_id: str,
    db: AsyncSession = Depends(get_db)
):
    """Посты пользователя"""
    posts = await PostService.get_posts_by_user(db, user_id)
    return [PostResponse.model_validate(post) for post in posts]


@router.get("/{post_id}", response_model=PostWithUserResponse)
async def get_post(
    post_id: UUID,
    db: AsyncSession = Depends(get_db),
    current_user: Optional[User] = Depends(OptionalUser)
):
    """
    Получить пост по ID

    Для авторизованного пользователя заполняется is_liked
    """
    post = await PostService.get_post(db, post_id)
    if not post:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found"
        )

    response = PostWithUserResponse.model_validate(post)
    response.is_liked = False
    if current_user is not None:
        response.is_liked = await PostService.is_post_liked(db, current_user.id, post_id)
    return response


@router.post("/{post_id}/like", response_model=LikeToggleResponse)
async def toggle_like(
    post_id: UUID,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Поставить или снять лайк"""
    try:
        is_liked, likes_count = await PostService.toggle_like(db, current_user.id, post_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found"
        )
    return LikeToggleResponse(is_liked=is_liked, likes_count=likes_count)


@router.get("/{post_id}/comments", response_model=List[CommentResponse])
async def get_comments(
    post_id: UUID,
    db: AsyncSession = Depends(get_db)
):
    """Комментарии к посту"""
    comments = await PostService.get_comments_by_post(db, post_id)
    return [CommentResponse.model_validate(comment) for comment in comments]


@router.post("/{post_id}/comments", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
async def create_comment(
    post_id: UUID,
    comment_data: CommentCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Добавить комментарий"""
    try:
        comment = await PostService.create_comment(db, current_user.id, post_id, comment_data)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found"
        )
    return CommentResponse.model_validate(comment)
