"""Article model: a rentable item type with a fixed owned quantity."""

from decimal import Decimal

from pydantic import Field

from rental_calendar.models.base import CamelModel


class Article(CamelModel):
    """An article owned by the rental business. Read-only input."""

    id: int
    name: str = ""
    category_id: int | None = None
    description: str | None = None
    quantity_total: int | None = Field(None, ge=0)  # None when the catalogue has no stock figure
    price_per_day: Decimal | None = None
    is_active: bool = True
