"""Address screening against the legacy blacklist/whitelist server."""

import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)


class ScreeningError(Exception):
    """Raised when an address check cannot be completed."""


class ScreeningService:
    """Proxies blacklist and whitelist checks to the legacy server."""

    def __init__(
        self,
        base_url: Optional[str],
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/") if base_url else None
        self.timeout = timeout
        self._transport = transport

    async def _check(self, list_name: str, address: str) -> dict:
        if not self.base_url:
            raise ScreeningError("Legacy server URL not configured")

        url = f"{self.base_url}/{list_name}-check"
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(url, params={"address": address})
                if response.is_error:
                    logger.warning(
                        f"{list_name.capitalize()} check for {address} answered {response.status_code}"
                    )
                return response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"{list_name.capitalize()} check error for {address}: {e}")
            raise ScreeningError(f"{list_name} check failed: {e}") from e

    async def check_blacklist(self, address: str) -> dict:
        """Return the legacy server's blacklist verdict for an address."""
        return await self._check("blacklist", address)

    async def check_whitelist(self, address: str) -> dict:
        """Return the legacy server's whitelist verdict for an address."""
        return await self._check("whitelist", address)
