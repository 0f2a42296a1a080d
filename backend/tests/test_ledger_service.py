"""
Тесты эко-леджера
"""
import logging
import pytest
from decimal import Decimal
from sqlalchemy import update
from sqlalchemy.exc import IntegrityError

from thriftshare.models import User
from thriftshare.schemas.sustainability import Contribution, quantize_amount
from thriftshare.services.ledger_service import LedgerService


@pytest.mark.asyncio
async def test_apply_contribution_adds_to_totals(db, user):
    contribution = Contribution(eco_points=50, water_saved=Decimal("2.5"), carbon_reduced=Decimal("1.2"))

    updated = await LedgerService.apply_contribution(db, user.id, contribution)

    assert updated is not None
    assert updated.eco_points == 50
    assert updated.water_saved == Decimal("2.50")
    assert updated.carbon_reduced == Decimal("1.20")
    assert updated.items_reused == 1


@pytest.mark.asyncio
async def test_totals_equal_sum_of_contributions(db, user):
    user_id = user.id
    contributions = [
        Contribution(eco_points=50, water_saved=Decimal("2.5"), carbon_reduced=Decimal("1.2")),
        Contribution(eco_points=0, water_saved=Decimal("0"), carbon_reduced=Decimal("0")),
        Contribution(eco_points=120, water_saved=Decimal("10.25"), carbon_reduced=Decimal("3.33")),
        Contribution(eco_points=7, water_saved=Decimal("0.1"), carbon_reduced=Decimal("0.2")),
    ]

    for contribution in contributions:
        await LedgerService.apply_contribution(db, user_id, contribution)

    stored = await db.get(User, user_id, populate_existing=True)
    assert stored.eco_points == sum(c.eco_points for c in contributions)
    assert stored.water_saved == sum(c.water_saved for c in contributions)
    assert stored.carbon_reduced == sum(c.carbon_reduced for c in contributions)
    assert stored.items_reused == len(contributions)


@pytest.mark.asyncio
async def test_zero_contribution_still_counts_item(db, user):
    updated = await LedgerService.apply_contribution(db, user.id, Contribution())

    assert updated.eco_points == 0
    assert updated.water_saved == Decimal("0")
    assert updated.items_reused == 1


@pytest.mark.asyncio
async def test_unknown_user_changes_nothing(db, user):
    user_id = user.id

    result = await LedgerService.apply_contribution(db, "missing-user", Contribution(eco_points=50))

    assert result is None
    stored = await db.get(User, user_id, populate_existing=True)
    assert stored.eco_points == 0
    assert stored.items_reused == 0


@pytest.mark.asyncio
async def test_increment_is_not_based_on_stale_object(db, session_factory, user):
    """Объект в памяти устарел, а вклад всё равно прибавляется к значению в БД"""
    user_id = user.id

    # Параллельный запрос в другой сессии успел обновить показатели
    async with session_factory() as other_session:
        await LedgerService.apply_contribution(other_session, user_id, Contribution(eco_points=30))

    assert user.eco_points == 0  # в этой сессии объект ещё старый

    updated = await LedgerService.apply_contribution(db, user_id, Contribution(eco_points=20))

    assert updated.eco_points == 50
    assert updated.items_reused == 2


def test_contribution_quantizes_amounts():
    contribution = Contribution(eco_points=1, water_saved="0.005", carbon_reduced="1.234")

    assert contribution.water_saved == Decimal("0.01")
    assert contribution.carbon_reduced == Decimal("1.23")


def test_contribution_rejects_negative_values():
    with pytest.raises(ValueError):
        Contribution(eco_points=-1)
    with pytest.raises(ValueError):
        Contribution(water_saved="-0.5")


def test_quantize_amount_rounds_half_up():
    assert quantize_amount(Decimal("2.345")) == Decimal("2.35")
    assert quantize_amount(Decimal("2.5")) == Decimal("2.50")


@pytest.mark.asyncio
async def test_unknown_user_logs_warning(db, caplog):
    with caplog.at_level(logging.WARNING, logger="thriftshare.services.ledger_service"):
        result = await LedgerService.apply_contribution(db, "missing-user", Contribution(eco_points=50))

    assert result is None
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert any("missing-user" in r.getMessage() for r in warnings)


@pytest.mark.asyncio
@pytest.mark.parametrize("field", ["water_saved", "carbon_reduced"])
async def test_user_totals_cannot_go_negative(db, user, field):
    """Накопители защищены check-ограничениями так же, как вклад поста"""
    user_id = user.id

    with pytest.raises(IntegrityError):
        await db.execute(
            update(User)
            .where(User.id == user_id)
            .values({field: Decimal("-0.01")})
            .execution_options(synchronize_session=False)
        )
    await db.rollback()

    stored = await db.get(User, user_id, populate_existing=True)
    assert getattr(stored, field) == Decimal("0")
