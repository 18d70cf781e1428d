"""Supabase Auth identity provider."""

from dataclasses import dataclass
from typing import Any

from supabase import AuthApiError, Client

from food_ordering.domain.errors import ConflictError, NotFoundError, UnauthorizedError
from food_ordering.domain.models import Identity
from food_ordering.messages import EMAIL_IN_USE, INVALID_CREDENTIALS, UNAUTHORIZED
from food_ordering.services.identity import IdentityProvider

_CONFLICT_CODES = {"email_exists", "user_already_exists"}


@dataclass
class SupabaseIdentityProvider(IdentityProvider):
    """Identity provider backed by the Supabase Auth admin API."""

    client: Client
    page_size: int = 1000

    def verify_token(self, token: str) -> Identity:
        """Validate an access token with Supabase Auth."""
        try:
            response = self.client.auth.get_user(token)
        except AuthApiError as exc:
            raise UnauthorizedError(UNAUTHORIZED) from exc
        if response is None or response.user is None:
            raise UnauthorizedError(UNAUTHORIZED)
        return _to_identity(response.user)

    def create_user(self, email: str, password: str) -> Identity:
        """Create a confirmed user account."""
        try:
            response = self.client.auth.admin.create_user(
                {"email": email, "password": password, "email_confirm": True}
            )
        except AuthApiError as exc:
            if _is_conflict(exc):
                raise ConflictError(EMAIL_IN_USE) from exc
            raise
        return _to_identity(response.user)

    def get_user(self, uid: str) -> Identity:
        """Return a user by id."""
        try:
            response = self.client.auth.admin.get_user_by_id(uid)
        except AuthApiError as exc:
            if exc.status == 404 or exc.code == "user_not_found":
                raise NotFoundError(INVALID_CREDENTIALS) from exc
            raise
        if response is None or response.user is None:
            raise NotFoundError(INVALID_CREDENTIALS)
        return _to_identity(response.user)

    def get_user_by_email(self, email: str) -> Identity:
        """Scan the user list page by page for an email."""
        wanted = email.strip().lower()
        page = 1
        while True:
            users = self.client.auth.admin.list_users(
                page=page, per_page=self.page_size
            )
            for user in users:
                if (user.email or "").lower() == wanted:
                    return _to_identity(user)
            if len(users) < self.page_size:
                raise NotFoundError(INVALID_CREDENTIALS)
            page += 1

    def create_exchange_token(self, identity: Identity) -> str:
        """Generate a magic-link token hash for the identity."""
        if not identity.email:
            raise NotFoundError(INVALID_CREDENTIALS)
        response = self.client.auth.admin.generate_link(
            {"type": "magiclink", "email": identity.email}
        )
        return response.properties.hashed_token

    def revoke_sessions(self, identity: Identity) -> None:
        """Sign the identity out of every session."""
        if not identity.credential:
            raise UnauthorizedError(UNAUTHORIZED)
        self.client.auth.admin.sign_out(identity.credential, scope="global")


def _is_conflict(exc: AuthApiError) -> bool:
    if exc.code in _CONFLICT_CODES:
        return True
    return "already" in (exc.message or "").lower()


def _to_identity(user: Any) -> Identity:
    claims: dict[str, object] = {
        "role": getattr(user, "role", None),
        "aud": getattr(user, "aud", None),
        "app_metadata": dict(getattr(user, "app_metadata", None) or {}),
        "user_metadata": dict(getattr(user, "user_metadata", None) or {}),
    }
    return Identity(uid=str(user.id), email=user.email, claims=claims)
