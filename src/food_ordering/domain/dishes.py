"""Domain models for the dish catalog."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Dish:
    """Menu dish with a normalized numeric price."""

    id: str
    name: str | None
    price: float
    details: dict[str, object] = field(default_factory=dict)
