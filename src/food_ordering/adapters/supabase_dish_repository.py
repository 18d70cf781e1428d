"""Supabase repository for the dish catalog."""

from dataclasses import dataclass

from supabase import Client

from food_ordering.services.dishes import DishRepository


@dataclass
class SupabaseDishRepository(DishRepository):
    """Supabase implementation for reading dishes."""

    client: Client

    def list_dishes(self) -> list[dict[str, object]]:
        """Return every dish row."""
        response = self.client.table("dishes").select("*").order("id").execute()
        return response.data or []
