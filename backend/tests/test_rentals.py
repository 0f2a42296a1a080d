"""
Тесты заявок на аренду
"""
import pytest
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from uuid import uuid4

from thriftshare.models import RentalStatus
from thriftshare.schemas.rental import RentalRequestCreate
from thriftshare.services.rental_service import RentalService


def rental_data(post_id, days=3):
    start = datetime(2026, 5, 1, tzinfo=timezone.utc)
    return RentalRequestCreate(
        post_id=post_id,
        start_date=start,
        end_date=start + timedelta(days=days),
        total_price=Decimal("45"),
        message="Нужно на свадьбу",
    )


@pytest.mark.asyncio
async def test_owner_is_taken_from_post(db, user, other_user, add_posts):
    [post] = await add_posts(user.id, 1, available_for_rent=True, rent_price=Decimal("15"))

    rental = await RentalService.create_rental_request(db, other_user.id, rental_data(post.id))

    assert rental.owner_id == user.id
    assert rental.requester_id == other_user.id
    assert rental.status == RentalStatus.PENDING.value


@pytest.mark.asyncio
async def test_cannot_rent_unavailable_post(db, user, other_user, add_posts):
    [post] = await add_posts(user.id, 1)

    with pytest.raises(ValueError):
        await RentalService.create_rental_request(db, other_user.id, rental_data(post.id))


@pytest.mark.asyncio
async def test_cannot_rent_own_post(db, user, add_posts):
    [post] = await add_posts(user.id, 1, available_for_rent=True)

    with pytest.raises(ValueError):
        await RentalService.create_rental_request(db, user.id, rental_data(post.id))


@pytest.mark.asyncio
async def test_rental_for_missing_post(db, other_user):
    assert await RentalService.create_rental_request(db, other_user.id, rental_data(uuid4())) is None


def test_end_date_before_start_rejected():
    with pytest.raises(ValueError):
        rental_data(uuid4(), days=-1)


@pytest.mark.asyncio
async def test_only_owner_changes_status(db, user, other_user, add_posts):
    [post] = await add_posts(user.id, 1, available_for_rent=True)
    rental = await RentalService.create_rental_request(db, other_user.id, rental_data(post.id))

    with pytest.raises(PermissionError):
        await RentalService.update_rental_request_status(db, rental.id, RentalStatus.APPROVED, other_user.id)

    updated = await RentalService.update_rental_request_status(db, rental.id, RentalStatus.APPROVED, user.id)
    assert updated.status == RentalStatus.APPROVED.value


@pytest.mark.asyncio
async def test_status_of_missing_request(db, user):
    assert await RentalService.update_rental_request_status(db, uuid4(), RentalStatus.DECLINED, user.id) is None


@pytest.mark.asyncio
async def test_my_requests(db, user, other_user, add_posts):
    posts = await add_posts(user.id, 2, available_for_rent=True)
    for post in posts:
        await RentalService.create_rental_request(db, other_user.id, rental_data(post.id))

    mine = await RentalService.get_rental_requests_by_user(db, other_user.id)

    assert {r.post_id for r in mine} == {p.id for p in posts}
    assert await RentalService.get_rental_requests_by_user(db, user.id) == []
