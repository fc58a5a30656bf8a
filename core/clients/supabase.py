"""Supabase client helpers."""
from typing import Any, Dict, Optional

import httpx

from core.config import get_settings


class InfrastructureUnavailableError(RuntimeError):
    """Raised when infrastructure records cannot be fetched from storage."""


class SupabaseClient:
    """Lightweight async client for Supabase REST endpoints."""

    def __init__(
        self,
        *,
        url: Optional[str] = None,
        key: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        settings = get_settings()
        self._url = url or settings.supabase_url
        self._key = key or settings.supabase_key
        self._timeout = timeout or settings.supabase_timeout_seconds
        self._transport = transport

    @property
    def is_configured(self) -> bool:
        return bool(self._url and self._key)

    async def fetch(self, endpoint: str) -> Any:
        if not self.is_configured:
            raise InfrastructureUnavailableError("Supabase credentials not configured")

        headers: Dict[str, str] = {
            "apikey": str(self._key),
            "Authorization": f"Bearer {self._key}",
        }
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.get(f"{self._url}/rest/v1/{endpoint}", headers=headers)
        except httpx.HTTPError as exc:
            raise InfrastructureUnavailableError(f"Supabase request failed: {exc}") from exc
        if response.status_code == 200:
            return response.json()
        raise InfrastructureUnavailableError(
            f"Supabase error {response.status_code}: {response.text[:200]}"
        )
