"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from food_ordering.api.accounts import router as accounts_router
from food_ordering.api.dishes import router as dishes_router
from food_ordering.api.orders import router as orders_router
from food_ordering.app_logging import configure_logging
from food_ordering.containers import AppContainer
from food_ordering.domain.errors import OrderingError
from food_ordering.messages import (
    MISSING_DATA,
    MISSING_ORDER_DATA,
    MISSING_REQUIRED_FIELDS,
)

API_PREFIX = "/api"

_VALIDATION_MESSAGES = {
    f"{API_PREFIX}/orders": MISSING_ORDER_DATA,
    f"{API_PREFIX}/signup": MISSING_REQUIRED_FIELDS,
    f"{API_PREFIX}/login": MISSING_REQUIRED_FIELDS,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(dishes_router, prefix=API_PREFIX)
    app.include_router(orders_router, prefix=API_PREFIX)
    app.include_router(accounts_router, prefix=API_PREFIX)

    @app.exception_handler(OrderingError)
    async def handle_ordering_error(
        request: Request, exc: OrderingError
    ) -> JSONResponse:
        content: dict[str, str] = {"message": exc.message}
        if exc.status_code >= 500 and exc.detail:
            content["error"] = exc.detail
        if exc.status_code >= 500:
            logger.error(
                "Request failed",
                extra={"path": request.url.path, "status": exc.status_code},
            )
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        route = request.scope.get("route")
        path = getattr(route, "path", request.url.path)
        message = _VALIDATION_MESSAGES.get(path, MISSING_DATA)
        return JSONResponse(status_code=400, content={"message": message})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
