"""Restaurant listing and creation"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Restaurant, User
from app.schemas.restaurant import (
    CreateRestaurantOutput,
    RestaurantOutput,
    RestaurantResponse,
    RestaurantsOutput,
)

logger = logging.getLogger(__name__)


class RestaurantService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_restaurant(
        self,
        owner: User,
        name: str,
        address: str,
        is_vegan: bool = True,
    ) -> CreateRestaurantOutput:
        try:
            restaurant = Restaurant(
                name=name,
                address=address,
                is_vegan=is_vegan,
                owner_id=owner.id,
            )
            self.session.add(restaurant)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Failed to create restaurant for owner {owner.id}: {e}", exc_info=True)
            return CreateRestaurantOutput(ok=False, error="Could not create restaurant")

        return CreateRestaurantOutput(ok=True, restaurant_id=restaurant.id)

    async def get_restaurants(self) -> RestaurantsOutput:
        """All restaurants, promoted ones first."""
        try:
            result = await self.session.execute(
                select(Restaurant).order_by(Restaurant.is_promoted.desc(), Restaurant.id)
            )
            restaurants = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error(f"Failed to list restaurants: {e}", exc_info=True)
            return RestaurantsOutput(ok=False, error="Could not load restaurants")

        return RestaurantsOutput(
            ok=True,
            restaurants=[RestaurantResponse.model_validate(r) for r in restaurants],
        )

    async def find_by_id(self, restaurant_id: int) -> RestaurantOutput:
        try:
            result = await self.session.execute(
                select(Restaurant).where(Restaurant.id == restaurant_id)
            )
            restaurant = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Failed to load restaurant {restaurant_id}: {e}", exc_info=True)
            return RestaurantOutput(ok=False, error="Could not load restaurant")

        if not restaurant:
            return RestaurantOutput(ok=False, error="Restaurant not found")
        return RestaurantOutput(ok=True, restaurant=RestaurantResponse.model_validate(restaurant))
