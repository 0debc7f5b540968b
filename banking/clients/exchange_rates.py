"""Async client for a Frankfurter-compatible exchange-rate API."""

from decimal import Decimal, InvalidOperation

import httpx

from banking.config import Settings
from banking.errors import UpstreamServiceError
from banking.utils.logging import get_logger

logger = get_logger(__name__)


class ExchangeRateClient:
    """Looks up the latest rate for a currency pair.

    Failures are not retried; they surface as ``UpstreamServiceError``.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    @classmethod
    def from_settings(cls, settings: Settings) -> "ExchangeRateClient":
        return cls(settings.exchange_rate_api_url, timeout=settings.exchange_rate_timeout_seconds)

    async def get_rate(self, source: str, target: str) -> Decimal:
        """Return how many units of *target* one unit of *source* buys."""
        if source == target:
            return Decimal("1")

        try:
            response = await self._client.get(
                "/v1/latest", params={"from": source, "to": target}
            )
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("exchange_rate_lookup_failed", source=source, target=target, error=str(exc))
            raise UpstreamServiceError(f"Failed to get exchange rate {source}->{target}") from exc

        raw_rate = (payload.get("rates") or {}).get(target) if isinstance(payload, dict) else None
        if raw_rate is None:
            logger.warning("exchange_rate_missing", source=source, target=target)
            raise UpstreamServiceError(f"Rate not found for {target}")
        try:
            return Decimal(str(raw_rate))
        except InvalidOperation as exc:
            raise UpstreamServiceError(f"Malformed rate for {target}") from exc

    async def aclose(self) -> None:
        await self._client.aclose()
