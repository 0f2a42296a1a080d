"""
Pydantic схемы для эко-показателей
"""
from pydantic import BaseModel, Field, field_validator
from decimal import Decimal, ROUND_HALF_UP

# Точность хранения накопителей в БД (Numeric(_, 2))
CENTS = Decimal("0.01")


def quantize_amount(value: Decimal) -> Decimal:
    """Округлить значение до точности хранения (2 знака)"""
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


class Contribution(BaseModel):
    """Вклад одного поста в эко-показатели автора"""
    eco_points: int = Field(0, ge=0)
    water_saved: Decimal = Field(Decimal("0"), ge=0, description="Сэкономленная вода, литры")
    carbon_reduced: Decimal = Field(Decimal("0"), ge=0, description="Сокращение CO₂, кг")

    @field_validator("water_saved", "carbon_reduced")
    @classmethod
    def quantize(cls, v: Decimal) -> Decimal:
        return quantize_amount(v)
