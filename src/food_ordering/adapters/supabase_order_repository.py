"""Supabase repository for orders and order items."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from food_ordering.domain.orders import NewOrder, OrderHeader, OrderItem
from food_ordering.services.orders import OrderRepository

_HEADER_COLUMNS = (
    "id, user_id, order_start_datetime, order_end_datetime, total_price, "
    "total_count, created_at"
)
_ITEM_COLUMNS = "id, order_id, position, dish_id, grade, snapshot"


@dataclass
class SupabaseOrderRepository(OrderRepository):
    """Supabase implementation for order persistence."""

    client: Client

    def create_order(self, user_id: str, order: NewOrder) -> str:
        """Insert the order header; created_at defaults to now() in the table."""
        response = (
            self.client.table("orders")
            .insert(
                {
                    "user_id": user_id,
                    "order_start_datetime": order.order_start_datetime,
                    "order_end_datetime": order.order_end_datetime,
                    "total_price": order.total_price,
                    "total_count": order.total_count,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create order in Supabase")
        return str(response.data[0]["id"])

    def create_items(self, order_id: str, items: list[dict[str, object]]) -> None:
        """Insert every item with a single statement."""
        payload = []
        for position, item in enumerate(items):
            dish_id = item.get("id")
            payload.append(
                {
                    "order_id": order_id,
                    "position": position,
                    "dish_id": str(dish_id) if dish_id is not None else None,
                    "grade": item.get("grade"),
                    "snapshot": dict(item),
                }
            )
        self.client.table("order_items").insert(payload).execute()

    def delete_order(self, order_id: str) -> None:
        """Delete an order header."""
        self.client.table("orders").delete().eq("id", order_id).execute()

    def get_order(self, order_id: str) -> OrderHeader | None:
        """Return an order header by id."""
        if _parse_uuid(order_id) is None:
            return None
        response = (
            self.client.table("orders")
            .select(_HEADER_COLUMNS)
            .eq("id", order_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_header(response.data[0])

    def list_orders(self, user_id: str) -> list[OrderHeader]:
        """Return order headers for a user, oldest first."""
        response = (
            self.client.table("orders")
            .select(_HEADER_COLUMNS)
            .eq("user_id", user_id)
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_header(row) for row in response.data or []]

    def list_items(self, order_id: str) -> list[OrderItem]:
        """Return the items of an order in submission order."""
        response = (
            self.client.table("order_items")
            .select(_ITEM_COLUMNS)
            .eq("order_id", order_id)
            .order("position", desc=False)
            .execute()
        )
        return [_parse_item(row) for row in response.data or []]

    def find_item_by_dish(self, order_id: str, dish_id: str) -> OrderItem | None:
        """Return the earliest item of an order that references a dish."""
        if _parse_uuid(order_id) is None:
            return None
        response = (
            self.client.table("order_items")
            .select(_ITEM_COLUMNS)
            .eq("order_id", order_id)
            .eq("dish_id", dish_id)
            .order("position", desc=False)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_item(response.data[0])

    def update_item_grade(self, item_id: str, grade: float) -> None:
        """Overwrite the grade of an item."""
        self.client.table("order_items").update({"grade": grade}).eq(
            "id", item_id
        ).execute()


def _parse_header(row: dict[str, object]) -> OrderHeader:
    created_at = row.get("created_at")
    return OrderHeader(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        order_start_datetime=row.get("order_start_datetime"),
        order_end_datetime=row.get("order_end_datetime"),
        total_price=row.get("total_price"),
        total_count=row.get("total_count"),
        created_at=(
            datetime.fromisoformat(created_at)
            if isinstance(created_at, str) and created_at
            else None
        ),
    )


def _parse_item(row: dict[str, object]) -> OrderItem:
    grade = row.get("grade")
    return OrderItem(
        id=str(row["id"]),
        order_id=str(row["order_id"]),
        position=int(row.get("position") or 0),
        dish_id=str(row["dish_id"]),
        snapshot=dict(row.get("snapshot") or {}),
        grade=float(grade) if grade is not None else None,
    )


def _parse_uuid(value: str) -> UUID | None:
    try:
        return UUID(value)
    except ValueError:
        return None
