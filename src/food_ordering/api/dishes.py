"""Dish catalog endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

if TYPE_CHECKING:
    from food_ordering.containers import AppContainer
    from food_ordering.domain.dishes import Dish

router = APIRouter(tags=["dishes"])


@router.get("/dishes")
def list_dishes(request: Request) -> list[dict[str, object]]:
    """Return every dish with a numeric price."""
    container: AppContainer = request.app.state.container
    return [_serialize_dish(dish) for dish in container.dish_catalog.list_dishes()]


def _serialize_dish(dish: Dish) -> dict[str, object]:
    payload: dict[str, object] = {"id": dish.id, **dish.details}
    if dish.name is not None:
        payload["name"] = dish.name
    payload["price"] = dish.price
    return payload
