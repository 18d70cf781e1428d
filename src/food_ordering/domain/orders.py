"""Domain models for orders and their items."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class NewOrder:
    """Order header fields and line items submitted by a client."""

    order_start_datetime: object
    order_end_datetime: object
    total_price: object
    total_count: object
    items: list[dict[str, object]]


@dataclass(frozen=True)
class OrderHeader:
    """Stored order row without its items."""

    id: str
    user_id: str
    order_start_datetime: object
    order_end_datetime: object
    total_price: object
    total_count: object
    created_at: datetime | None


@dataclass(frozen=True)
class OrderItem:
    """Stored line item with the dish snapshot taken at order time."""

    id: str
    order_id: str
    position: int
    dish_id: str
    snapshot: dict[str, object]
    grade: float | None = None


@dataclass(frozen=True)
class OrderDetail:
    """Order header with its hydrated items."""

    header: OrderHeader
    items: list[OrderItem]
