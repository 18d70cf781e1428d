"""Identity gateway over the external identity provider."""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, TypeVar

from food_ordering.domain.errors import (
    InternalError,
    InvalidInputError,
    OrderingError,
    UnauthorizedError,
)
from food_ordering.domain.models import Identity, SessionCredential
from food_ordering.messages import (
    INVALID_CREDENTIALS,
    LOGOUT_FAILED,
    MISSING_REQUIRED_FIELDS,
    SIGNUP_FAILED,
    UNAUTHORIZED,
    USER_LOAD_FAILED,
)

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


class IdentityProvider(Protocol):
    """Interface for identity provider user management.

    Implementations raise ``UnauthorizedError``, ``ConflictError`` or
    ``NotFoundError`` for the provider failures that map onto them and let
    anything else propagate.
    """

    def verify_token(self, token: str) -> Identity:
        """Validate a bearer token and return its identity."""

    def create_user(self, email: str, password: str) -> Identity:
        """Create a user account."""

    def get_user(self, uid: str) -> Identity:
        """Return a user by id."""

    def get_user_by_email(self, email: str) -> Identity:
        """Return a user by email."""

    def create_exchange_token(self, identity: Identity) -> str:
        """Mint a one-time token that can be exchanged for a session."""

    def revoke_sessions(self, identity: Identity) -> None:
        """Invalidate every session of the identity."""


class TokenExchangeClient(Protocol):
    """Interface for trading exchange tokens for session credentials."""

    async def exchange(self, token: str) -> SessionCredential:
        """Exchange a one-time token for a session credential."""


@dataclass
class IdentityGateway:
    """Service wrapping identity provider operations."""

    provider: IdentityProvider
    exchange_client: TokenExchangeClient

    def verify_credential(self, token: str) -> Identity:
        """Return the identity behind a bearer token."""
        try:
            identity = self.provider.verify_token(token)
        except Exception as exc:
            logger.warning("Token verification failed: %s", type(exc).__name__)
            raise UnauthorizedError(UNAUTHORIZED) from exc
        return Identity(
            uid=identity.uid,
            email=identity.email,
            claims=identity.claims,
            credential=token,
        )

    def create_account(self, email: str, password: str) -> Identity:
        """Provision a new account."""
        return self._call(
            lambda: self.provider.create_user(email, password),
            SIGNUP_FAILED,
            "Failed to create account",
        )

    def lookup_account_by_email(self, email: str) -> Identity:
        """Return the account registered for an email."""
        return self._call(
            lambda: self.provider.get_user_by_email(email),
            INVALID_CREDENTIALS,
            "Failed to look up account",
        )

    def get_account(self, uid: str) -> Identity:
        """Return the account for an identity id."""
        return self._call(
            lambda: self.provider.get_user(uid),
            USER_LOAD_FAILED,
            "Failed to load account",
        )

    def issue_session_token(self, identity: Identity) -> str:
        """Mint a short-lived exchange token for an identity."""
        return self._call(
            lambda: self.provider.create_exchange_token(identity),
            INVALID_CREDENTIALS,
            "Failed to issue exchange token",
        )

    async def exchange_for_session_credential(self, token: str) -> SessionCredential:
        """Trade an exchange token for a session credential."""
        try:
            return await self.exchange_client.exchange(token)
        except Exception as exc:
            logger.exception("Token exchange failed")
            raise InternalError(INVALID_CREDENTIALS, detail=str(exc)) from exc

    def revoke_all_sessions(self, identity: Identity) -> None:
        """Invalidate every session issued to an identity."""
        self._call(
            lambda: self.provider.revoke_sessions(identity),
            LOGOUT_FAILED,
            "Failed to revoke sessions",
        )

    async def sign_up(
        self, email: str | None, password: str | None
    ) -> tuple[Identity, SessionCredential]:
        """Create an account and return it with a fresh session."""
        email, password = _require_credentials(email, password)
        identity = await asyncio.to_thread(self.create_account, email, password)
        token = await asyncio.to_thread(self.issue_session_token, identity)
        credential = await self.exchange_for_session_credential(token)
        logger.info("Account created", extra={"uid": identity.uid})
        return identity, credential

    async def log_in(
        self, email: str | None, password: str | None
    ) -> tuple[Identity, SessionCredential]:
        """Return the account for an email with a fresh session."""
        email, _ = _require_credentials(email, password)
        identity = await asyncio.to_thread(self.lookup_account_by_email, email)
        token = await asyncio.to_thread(self.issue_session_token, identity)
        credential = await self.exchange_for_session_credential(token)
        return identity, credential

    def _call(
        self, operation: Callable[[], _T], message: str, log_message: str
    ) -> _T:
        try:
            return operation()
        except OrderingError:
            raise
        except Exception as exc:
            logger.exception(log_message)
            raise InternalError(message, detail=str(exc)) from exc


def _require_credentials(
    email: str | None, password: str | None
) -> tuple[str, str]:
    if not email or not password:
        raise InvalidInputError(MISSING_REQUIRED_FIELDS)
    return email, password
