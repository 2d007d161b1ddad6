"""Restaurants router"""

from fastapi import APIRouter, Depends

from app.models import User, UserRole
from app.schemas.restaurant import (
    CreateRestaurantInput,
    CreateRestaurantOutput,
    RestaurantOutput,
    RestaurantsOutput,
)
from app.services.auth import get_restaurant_service, require_role
from app.services.restaurants import RestaurantService

router = APIRouter(prefix="/restaurants", tags=["Restaurants"])


@router.post("", response_model=CreateRestaurantOutput)
async def create_restaurant(
    data: CreateRestaurantInput,
    owner: User = Depends(require_role(UserRole.OWNER)),
    service: RestaurantService = Depends(get_restaurant_service),
):
    return await service.create_restaurant(owner, data.name, data.address, data.is_vegan)


@router.get("", response_model=RestaurantsOutput)
async def list_restaurants(service: RestaurantService = Depends(get_restaurant_service)):
    """
    List restaurants with promoted ones first.
    """
    return await service.get_restaurants()


@router.get("/{restaurant_id}", response_model=RestaurantOutput)
async def get_restaurant(
    restaurant_id: int,
    service: RestaurantService = Depends(get_restaurant_service),
):
    return await service.find_by_id(restaurant_id)
