"""Order endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request, status

from food_ordering.api.auth import require_identity
from food_ordering.api.schemas import (  # noqa: TC001
    CreateOrderRequest,
    RateItemRequest,
)
from food_ordering.domain.errors import UnauthorizedError
from food_ordering.domain.models import Identity  # noqa: TC001
from food_ordering.domain.orders import NewOrder
from food_ordering.messages import RATING_UPDATED, UNAUTHORIZED

if TYPE_CHECKING:
    from food_ordering.containers import AppContainer
    from food_ordering.domain.orders import OrderDetail, OrderItem

router = APIRouter(tags=["orders"])


@router.get("/orders/{user_id}")
async def list_orders(
    user_id: str,
    request: Request,
    identity: Identity = Depends(require_identity),
) -> list[dict[str, object]]:
    """Return the orders of a user with their items."""
    container: AppContainer = request.app.state.container
    _check_caller(container, identity, user_id)
    details = await container.order_service.list_orders_for_user(user_id)
    return [_serialize_order(detail) for detail in details]


@router.post("/orders", status_code=status.HTTP_201_CREATED)
def create_order(payload: CreateOrderRequest, request: Request) -> dict[str, str]:
    """Store an order with its items.

    The route is public and trusts ``userId`` from the body.
    """
    container: AppContainer = request.app.state.container
    order = None
    if payload.order is not None:
        order = NewOrder(
            order_start_datetime=payload.order.order_start_datetime,
            order_end_datetime=payload.order.order_end_datetime,
            total_price=payload.order.total_price,
            total_count=payload.order.total_count,
            items=payload.order.items,
        )
    order_id = container.order_service.create_order(payload.user_id, order)
    return {"orderId": order_id}


@router.patch("/orders/{user_id}/{order_id}/{dish_id}")
def rate_item(  # noqa: PLR0913
    user_id: str,
    order_id: str,
    dish_id: str,
    request: Request,
    payload: RateItemRequest | None = None,
    identity: Identity = Depends(require_identity),
) -> dict[str, str]:
    """Set the grade of an ordered dish."""
    container: AppContainer = request.app.state.container
    _check_caller(container, identity, user_id)
    container.order_service.rate_item(
        user_id=user_id,
        order_id=order_id,
        dish_id=dish_id,
        grade=payload.grade if payload else None,
    )
    return {"message": RATING_UPDATED}


def _check_caller(container: AppContainer, identity: Identity, user_id: str) -> None:
    if container.settings.enforce_order_ownership and identity.uid != user_id:
        raise UnauthorizedError(UNAUTHORIZED)


def _serialize_order(detail: OrderDetail) -> dict[str, object]:
    header = detail.header
    return {
        "orderId": header.id,
        "userId": header.user_id,
        "orderStartDatetime": header.order_start_datetime,
        "orderEndDatetime": header.order_end_datetime,
        "totalPrice": header.total_price,
        "totalCount": header.total_count,
        "createdAt": header.created_at.isoformat() if header.created_at else None,
        "items": [_serialize_item(item) for item in detail.items],
    }


def _serialize_item(item: OrderItem) -> dict[str, object]:
    payload: dict[str, object] = dict(item.snapshot)
    if item.grade is not None:
        payload["grade"] = item.grade
    return payload
