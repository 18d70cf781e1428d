"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from food_ordering.adapters.supabase_dish_repository import SupabaseDishRepository
from food_ordering.adapters.supabase_identity_provider import (
    SupabaseIdentityProvider,
)
from food_ordering.adapters.supabase_order_repository import (
    SupabaseOrderRepository,
)
from food_ordering.adapters.token_exchange_client import HttpxTokenExchangeClient
from food_ordering.config import Settings, auth_base_url
from food_ordering.services.dishes import DishCatalog
from food_ordering.services.identity import IdentityGateway
from food_ordering.services.orders import OrderService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    identity_gateway: IdentityGateway
    order_service: OrderService
    dish_catalog: DishCatalog
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    exchange_client = HttpxTokenExchangeClient.create(
        base_url=auth_base_url(resolved_settings.supabase_url),
        api_key=resolved_settings.supabase_anon_key,
        timeout=resolved_settings.request_timeout_seconds,
    )
    identity_gateway = IdentityGateway(
        provider=SupabaseIdentityProvider(
            supabase_client, page_size=resolved_settings.auth_users_page_size
        ),
        exchange_client=exchange_client,
    )
    order_service = OrderService(
        repository=SupabaseOrderRepository(supabase_client),
        fanout_limit=resolved_settings.orders_fanout_limit,
        enforce_ownership=resolved_settings.enforce_order_ownership,
    )
    dish_catalog = DishCatalog(SupabaseDishRepository(supabase_client))

    async def close_resources() -> None:
        await exchange_client.close()

    return AppContainer(
        settings=resolved_settings,
        identity_gateway=identity_gateway,
        order_service=order_service,
        dish_catalog=dish_catalog,
        close_resources=close_resources,
    )
