"""Identity models for the ordering backend."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Identity:
    """A user record held by the identity provider."""

    uid: str
    email: str | None
    claims: dict[str, object] = field(default_factory=dict)
    credential: str | None = None


@dataclass(frozen=True)
class SessionCredential:
    """Client-presentable session token issued by the provider."""

    access_token: str
    refresh_token: str | None = None
    expires_in: int | None = None
