"""
API endpoints для аренды
"""
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
from uuid import UUID
import logging

from thriftshare.database import get_db
from thriftshare.models.user import User
from thriftshare.schemas.post import PostWithUserResponse
from thriftshare.schemas.rental import RentalRequestCreate, RentalRequestResponse, RentalStatusUpdate
from thriftshare.services.post_service import PostService
from thriftshare.services.rental_service import RentalService
from thriftshare.utils.permissions import get_current_user

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/rentals", tags=["rentals"])


@router.get("", response_model=List[PostWithUserResponse])
async def get_rentals(
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db)
):
    """Вещи, доступные для аренды"""
    posts = await PostService.get_rentable_posts(db, limit=limit, offset=offset)
    return [PostWithUserResponse.model_validate(post) for post in posts]


@router.post("/request", response_model=RentalRequestResponse, status_code=status.HTTP_201_CREATED)
async def create_rental_request(
    request_data: RentalRequestCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Отправить заявку на аренду"""
    try:
        rental_request = await RentalService.create_rental_request(db, current_user.id, request_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    if rental_request is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found"
        )
    return RentalRequestResponse.model_validate(rental_request)


@router.get("/my-requests", response_model=List[RentalRequestResponse])
async def get_my_requests(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Мои заявки на аренду"""
    requests = await RentalService.get_rental_requests_by_user(db, current_user.id)
    return [RentalRequestResponse.model_validate(r) for r in requests]


@router.patch("/{request_id}/status", response_model=RentalRequestResponse)
async def update_request_status(
    request_id: UUID,
    status_data: RentalStatusUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Изменить статус заявки

    Доступно только владельцу вещи
    """
    try:
        rental_request = await RentalService.update_rental_request_status(
            db, request_id, status_data.status, current_user.id
        )
    except PermissionError as e:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(e)
        )

    if rental_request is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Rental request not found"
        )
    return RentalRequestResponse.model_validate(rental_request)
