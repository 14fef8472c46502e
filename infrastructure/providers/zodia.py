import logging
import time
from datetime import UTC, datetime
from decimal import Decimal

import httpx
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from domain.exceptions.quote import ProviderUnavailable
from domain.models.quote import Quote
from domain.selection import usable_rate

logger = logging.getLogger(__name__)


class ZodiaQuoteSource:
    DEFAULT_BASE_URL = "https://trade-uk.sandbox.zodiamarkets.com"

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        client: httpx.AsyncClient | None = None,
        timeout: float = 10,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.AsyncClient(
            timeout=timeout,
            headers={"Content-Type": "application/json", "accept": "application/json"},
        )

    @property
    def name(self) -> str:
        return "Zodia"

    @retry(
        stop=stop_after_attempt(2),
        wait=wait_exponential(multiplier=0.2, max=1),
        retry=retry_if_exception_type(httpx.TransportError),
        reraise=True,
    )
    async def _get(self, path: str, headers: dict | None = None) -> httpx.Response:
        response = await self._client.get(f"{self.base_url}{path}", headers=headers)
        response.raise_for_status()
        return response

    @retry(
        stop=stop_after_attempt(2),
        wait=wait_exponential(multiplier=0.2, max=1),
        retry=retry_if_exception_type(httpx.TransportError),
        reraise=True,
    )
    async def _post(self, path: str, body: dict, headers: dict | None = None) -> httpx.Response:
        response = await self._client.post(f"{self.base_url}{path}", json=body, headers=headers)
        response.raise_for_status()
        return response

    async def _request(self, path: str, headers: dict | None = None, body: dict | None = None) -> dict:
        try:
            if body is None:
                response = await self._get(path, headers)
            else:
                response = await self._post(path, body, headers)
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise ProviderUnavailable(
                self.name, f"HTTP error {e.response.status_code}: {e.response.text[:200]}"
            ) from e
        except httpx.RequestError as e:
            raise ProviderUnavailable(self.name, f"request failed: {e.__class__.__name__}") from e
        except Exception as e:
            raise ProviderUnavailable(self.name, f"response parsing error: {str(e)}") from e

        if not isinstance(data, dict):
            raise ProviderUnavailable(self.name, "response parsing error: expected a JSON object")
        return data

    async def fetch_quote(self, currency_pair: str) -> Quote:
        if not self.api_key:
            raise ProviderUnavailable(self.name, "Zodia API key not configured")

        logger.info(f"Fetching {self.name} price for {currency_pair}")
        data = await self._request(f"/v1/prices/{currency_pair}", headers={"x-api-key": self.api_key})

        buy_rate = usable_rate(data.get("buy"))
        sell_rate = usable_rate(data.get("sell"))
        if buy_rate is None and sell_rate is None:
            raise ProviderUnavailable(self.name, f"no usable buy/sell rate for {currency_pair}")

        return Quote(
            provider=self.name,
            currency_pair=currency_pair,
            buy_rate=buy_rate,
            sell_rate=sell_rate,
            observed_at=datetime.now(tz=UTC),
            source="rest",
        )

    async def fetch_instruments(self) -> list[dict]:
        data = await self._request("/zm/rest/available-instruments")
        instruments = data.get("instruments") or []
        logger.info(f"Available instruments fetched: {len(instruments)} instruments")
        return instruments

    async def _account_request(self, path: str, **filters) -> dict:
        """POST to an account endpoint with a fresh ``tonce``; ``None`` filters are left out."""
        if not self.api_key:
            raise ProviderUnavailable(self.name, "Zodia API key not configured")

        body = {"tonce": time.time_ns() // 1000}
        body.update({k: v for k, v in filters.items() if v is not None})
        logger.info(f"Making Zodia API request: POST {path}")
        return await self._request(path, headers={"Rest-Key": self.api_key}, body=body)

    async def fetch_account(self) -> dict:
        return await self._account_request("/api/3/account")

    async def fetch_limits(self) -> dict:
        return await self._account_request("/api/3/user/limit")

    async def fetch_transactions(self, **filters) -> dict:
        return await self._account_request("/api/3/transaction/list", **filters)

    async def fetch_transfers(self, **filters) -> dict:
        return await self._account_request("/api/3/transfer/list", **filters)

    async def execute_transfer(
        self, from_account: str, to_account: str, amount: Decimal, ccy: str, account_group_uuid: str
    ) -> dict:
        return await self._account_request(
            "/api/3/transfer",
            **{
                "from": from_account,
                "to": to_account,
                "amount": float(amount),
                "ccy": ccy,
                "accountGroupUuid": account_group_uuid,
            },
        )

    async def close(self) -> None:
        await self._client.aclose()
