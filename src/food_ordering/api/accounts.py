"""Signup, login and session endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request, status

from food_ordering.api.auth import require_identity
from food_ordering.api.schemas import CredentialsRequest  # noqa: TC001
from food_ordering.domain.errors import (
    ConflictError,
    InternalError,
    InvalidInputError,
    OrderingError,
    UnauthorizedError,
)
from food_ordering.domain.models import Identity  # noqa: TC001
from food_ordering.messages import (
    INVALID_CREDENTIALS,
    LOGIN_SUCCEEDED,
    LOGOUT_FAILED,
    LOGOUT_SUCCEEDED,
    SIGNUP_FAILED,
    SIGNUP_SUCCEEDED,
    USER_LOAD_FAILED,
)

if TYPE_CHECKING:
    from food_ordering.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(tags=["accounts"])


@router.post("/signup", status_code=status.HTTP_201_CREATED)
async def signup(payload: CredentialsRequest, request: Request) -> dict[str, object]:
    """Create an account and return a session token."""
    container: AppContainer = request.app.state.container
    try:
        identity, credential = await container.identity_gateway.sign_up(
            payload.email, payload.password
        )
    except (InvalidInputError, ConflictError):
        raise
    except OrderingError as exc:
        logger.warning("Signup failed: %s", exc.message)
        raise InternalError(SIGNUP_FAILED) from exc
    return {
        "message": SIGNUP_SUCCEEDED,
        "token": credential.access_token,
        "user": _serialize_user(identity),
    }


@router.post("/login")
async def login(payload: CredentialsRequest, request: Request) -> dict[str, object]:
    """Return a session token for an existing account."""
    container: AppContainer = request.app.state.container
    try:
        identity, credential = await container.identity_gateway.log_in(
            payload.email, payload.password
        )
    except InvalidInputError:
        raise
    except OrderingError as exc:
        logger.warning("Login failed: %s", exc.message)
        raise UnauthorizedError(INVALID_CREDENTIALS) from exc
    return {
        "message": LOGIN_SUCCEEDED,
        "token": credential.access_token,
        "user": _serialize_user(identity),
    }


@router.post("/logout")
def logout(
    request: Request, identity: Identity = Depends(require_identity)
) -> dict[str, str]:
    """Revoke every session of the caller."""
    container: AppContainer = request.app.state.container
    try:
        container.identity_gateway.revoke_all_sessions(identity)
    except OrderingError as exc:
        raise InternalError(LOGOUT_FAILED) from exc
    return {"message": LOGOUT_SUCCEEDED}


@router.get("/user")
def current_user(
    request: Request, identity: Identity = Depends(require_identity)
) -> dict[str, object]:
    """Return the account of the caller."""
    container: AppContainer = request.app.state.container
    try:
        account = container.identity_gateway.get_account(identity.uid)
    except OrderingError as exc:
        raise InternalError(USER_LOAD_FAILED) from exc
    return {"user": _serialize_user(account)}


def _serialize_user(identity: Identity) -> dict[str, object]:
    return {"uid": identity.uid, "email": identity.email}
