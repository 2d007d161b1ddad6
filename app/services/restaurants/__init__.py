"""Restaurant service module"""

from app.services.restaurants.restaurant_service import RestaurantService

__all__ = ["RestaurantService"]
