"""Bearer token authentication for protected routes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Header, Request

from food_ordering.domain.errors import UnauthorizedError
from food_ordering.domain.models import Identity  # noqa: TC001
from food_ordering.messages import UNAUTHORIZED

if TYPE_CHECKING:
    from food_ordering.containers import AppContainer

_BEARER_PREFIX = "Bearer "


def require_identity(
    request: Request,
    authorization: str | None = Header(default=None),
) -> Identity:
    """Verify the bearer token and attach the identity to the request.

    Requests without a ``Bearer <token>`` header are rejected before the
    identity provider is consulted.
    """
    token = extract_bearer_token(authorization)
    if token is None:
        raise UnauthorizedError(UNAUTHORIZED)
    container: AppContainer = request.app.state.container
    identity = container.identity_gateway.verify_credential(token)
    request.state.identity = identity
    return identity


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the token of a ``Bearer <token>`` header value."""
    if not authorization or not authorization.startswith(_BEARER_PREFIX):
        return None
    token = authorization[len(_BEARER_PREFIX) :].strip()
    return token or None
