"""Read-only dish catalog."""

import logging
import math
from dataclasses import dataclass
from typing import Protocol

from food_ordering.domain.dishes import Dish
from food_ordering.domain.errors import InternalError, NotFoundError
from food_ordering.messages import DISHES_LOAD_FAILED, DISHES_NOT_FOUND

logger = logging.getLogger(__name__)


class DishRepository(Protocol):
    """Persistence interface for dishes."""

    def list_dishes(self) -> list[dict[str, object]]:
        """Return raw dish rows."""


@dataclass
class DishCatalog:
    """Service that lists dishes with normalized prices."""

    repository: DishRepository

    def list_dishes(self) -> list[Dish]:
        """Return every dish; an empty catalog is reported as not found."""
        try:
            dishes = [_to_dish(row) for row in self.repository.list_dishes()]
        except Exception as exc:
            logger.exception("Failed to load dishes")
            raise InternalError(DISHES_LOAD_FAILED, detail=str(exc)) from exc
        if not dishes:
            raise NotFoundError(DISHES_NOT_FOUND)
        return dishes


def _to_dish(row: dict[str, object]) -> Dish:
    details = {
        key: value for key, value in row.items() if key not in {"id", "name", "price"}
    }
    name = row.get("name")
    return Dish(
        id=str(row["id"]),
        name=str(name) if name is not None else None,
        price=_to_price(row.get("price"), row["id"]),
        details=details,
    )


def _to_price(value: object, dish_id: object) -> float:
    if value is None or value == "":
        return 0.0
    try:
        price = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        price = math.nan
    if not math.isfinite(price):
        logger.warning("Dish has a non-numeric price", extra={"dish_id": dish_id})
        return 0.0
    return price
