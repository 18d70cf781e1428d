"""Pydantic models for request payloads."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class OrderPayload(BaseModel):
    """Order header fields and line items."""

    model_config = ConfigDict(populate_by_name=True)

    order_start_datetime: Any = Field(default=None, alias="orderStartDatetime")
    order_end_datetime: Any = Field(default=None, alias="orderEndDatetime")
    total_price: Any = Field(default=None, alias="totalPrice")
    total_count: Any = Field(default=None, alias="totalCount")
    items: list[dict[str, Any]] = Field(default_factory=list)


class CreateOrderRequest(BaseModel):
    """Body of an order creation request."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str | None = Field(default=None, alias="userId")
    order: OrderPayload | None = None


class RateItemRequest(BaseModel):
    """Body of an item rating request."""

    grade: float | None = None


class CredentialsRequest(BaseModel):
    """Email and password pair for signup and login."""

    email: str | None = None
    password: str | None = None
