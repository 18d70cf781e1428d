"""Supabase Auth token exchange client."""

from dataclasses import dataclass

import httpx

from food_ordering.domain.models import SessionCredential
from food_ordering.services.identity import TokenExchangeClient


@dataclass
class HttpxTokenExchangeClient(TokenExchangeClient):
    """Exchanges magic-link token hashes for sessions over HTTP."""

    base_url: str
    api_key: str
    http_client: httpx.AsyncClient
    timeout: float = 10.0

    @classmethod
    def create(
        cls, base_url: str, api_key: str, timeout: float = 10.0
    ) -> "HttpxTokenExchangeClient":
        """Create an exchange client with a managed httpx session."""
        return cls(
            base_url=base_url,
            api_key=api_key,
            http_client=httpx.AsyncClient(),
            timeout=timeout,
        )

    async def exchange(self, token: str) -> SessionCredential:
        """Verify the token hash and return the issued session."""
        response = await self.http_client.post(
            f"{self.base_url}/verify",
            headers={"apikey": self.api_key},
            json={"type": "magiclink", "token_hash": token},
            timeout=self.timeout,
        )
        response.raise_for_status()
        data = response.json()
        access_token = data.get("access_token")
        if not access_token:
            raise ValueError("Token exchange response has no access_token")
        return SessionCredential(
            access_token=str(access_token),
            refresh_token=data.get("refresh_token"),
            expires_in=data.get("expires_in"),
        )

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
