"""Order lifecycle: creation, per-user listing and item grading."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Protocol

from food_ordering.domain.errors import (
    InternalError,
    InvalidInputError,
    NotFoundError,
    OrderingError,
)
from food_ordering.domain.orders import NewOrder, OrderDetail, OrderHeader, OrderItem
from food_ordering.messages import (
    DISH_NOT_FOUND,
    MISSING_DATA,
    MISSING_ORDER_DATA,
    ORDER_SAVE_FAILED,
    ORDERS_LOAD_FAILED,
    RATING_FAILED,
)

logger = logging.getLogger(__name__)


class OrderRepository(Protocol):
    """Persistence interface for orders and order items."""

    def create_order(self, user_id: str, order: NewOrder) -> str:
        """Write the order header and return its id."""

    def create_items(self, order_id: str, items: list[dict[str, object]]) -> None:
        """Write all items of an order in one atomic batch."""

    def delete_order(self, order_id: str) -> None:
        """Delete an order header."""

    def get_order(self, order_id: str) -> OrderHeader | None:
        """Return an order header by id, if present."""

    def list_orders(self, user_id: str) -> list[OrderHeader]:
        """Return order headers of a user, oldest first."""

    def list_items(self, order_id: str) -> list[OrderItem]:
        """Return the items of an order in submission order."""

    def find_item_by_dish(self, order_id: str, dish_id: str) -> OrderItem | None:
        """Return the first item of an order that references a dish."""

    def update_item_grade(self, item_id: str, grade: float) -> None:
        """Overwrite the grade of an item."""


@dataclass
class OrderService:
    """Application service for order persistence."""

    repository: OrderRepository
    fanout_limit: int = 8
    enforce_ownership: bool = False

    def create_order(self, user_id: str | None, order: NewOrder | None) -> str:
        """Persist an order header and its items, returning the order id.

        The header and the item batch are separate writes. When the batch
        fails the header is removed again so that no order without items
        remains visible.
        """
        if not user_id or order is None or not order.items:
            raise InvalidInputError(MISSING_ORDER_DATA)
        try:
            order_id = self.repository.create_order(user_id, order)
        except Exception as exc:
            logger.exception("Failed to save order", extra={"user_id": user_id})
            raise InternalError(ORDER_SAVE_FAILED, detail=str(exc)) from exc
        try:
            self.repository.create_items(order_id, order.items)
        except Exception as exc:
            logger.exception(
                "Failed to save order items", extra={"order_id": order_id}
            )
            self._discard_order(order_id)
            raise InternalError(ORDER_SAVE_FAILED, detail=str(exc)) from exc
        logger.info(
            "Order created",
            extra={"order_id": order_id, "item_count": len(order.items)},
        )
        return order_id

    async def list_orders_for_user(self, user_id: str) -> list[OrderDetail]:
        """Return all orders of a user with their items hydrated."""
        try:
            headers = await asyncio.to_thread(self.repository.list_orders, user_id)
            semaphore = asyncio.Semaphore(max(self.fanout_limit, 1))

            async def hydrate(header: OrderHeader) -> OrderDetail:
                async with semaphore:
                    items = await asyncio.to_thread(
                        self.repository.list_items, header.id
                    )
                return OrderDetail(header=header, items=items)

            results = await asyncio.gather(
                *(hydrate(h) for h in headers), return_exceptions=True
            )
            for result in results:
                if isinstance(result, BaseException):
                    raise result
            return list(results)
        except Exception as exc:
            logger.exception("Failed to load orders", extra={"user_id": user_id})
            raise InternalError(ORDERS_LOAD_FAILED, detail=str(exc)) from exc

    def rate_item(
        self,
        user_id: str | None,
        order_id: str | None,
        dish_id: str | None,
        grade: float | None,
    ) -> OrderItem:
        """Overwrite the grade of the first item in an order matching a dish."""
        if not user_id or not order_id or not dish_id or grade is None:
            raise InvalidInputError(MISSING_DATA)
        try:
            if self.enforce_ownership:
                header = self.repository.get_order(order_id)
                if header is None or header.user_id != user_id:
                    raise NotFoundError(DISH_NOT_FOUND)
            item = self.repository.find_item_by_dish(order_id, dish_id)
            if item is None:
                raise NotFoundError(DISH_NOT_FOUND)
            self.repository.update_item_grade(item.id, grade)
        except OrderingError:
            raise
        except Exception as exc:
            logger.exception(
                "Failed to update grade",
                extra={"order_id": order_id, "dish_id": dish_id},
            )
            raise InternalError(RATING_FAILED, detail=str(exc)) from exc
        return OrderItem(
            id=item.id,
            order_id=item.order_id,
            position=item.position,
            dish_id=item.dish_id,
            snapshot=item.snapshot,
            grade=grade,
        )

    def _discard_order(self, order_id: str) -> None:
        try:
            self.repository.delete_order(order_id)
        except Exception:
            logger.exception(
                "Failed to discard order without items",
                extra={"order_id": order_id},
            )
