"""Restaurant schemas"""

from datetime import datetime

from pydantic import BaseModel, Field

from app.schemas.common import CoreOutput
from app.utils.constants import MIN_RESTAURANT_NAME_LENGTH


class RestaurantResponse(BaseModel):
    id: int
    name: str
    address: str
    is_vegan: bool
    owner_id: int | None
    is_promoted: bool
    promoted_until: datetime | None

    class Config:
        from_attributes = True


class CreateRestaurantInput(BaseModel):
    name: str = Field(min_length=MIN_RESTAURANT_NAME_LENGTH)
    address: str = Field(min_length=1)
    is_vegan: bool = True


class CreateRestaurantOutput(CoreOutput):
    restaurant_id: int | None = None


class RestaurantOutput(CoreOutput):
    restaurant: RestaurantResponse | None = None


class RestaurantsOutput(CoreOutput):
    restaurants: list[RestaurantResponse] | None = None
