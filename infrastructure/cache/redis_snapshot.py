import json
from datetime import datetime, timedelta
from decimal import Decimal

from redis import asyncio as redis

from domain.exceptions.quote import CacheError, InvalidDirection
from domain.models.quote import AggregationResult, Quote, TradeDirection
from infrastructure.cache.rate_cache import RateSnapshot


class RedisSnapshotStore:
    """Mirrors the in-memory rate snapshot into Redis as a single JSON value."""

    KEY = "rates:snapshot"

    def __init__(self, redis_client: redis.Redis, ttl: timedelta = timedelta(hours=1)):
        self.redis = redis_client
        self.ttl = ttl

    @staticmethod
    def _quote_to_dict(quote: Quote | None) -> dict | None:
        if quote is None:
            return None
        return {
            "provider": quote.provider,
            "currency_pair": quote.currency_pair,
            "buy_rate": None if quote.buy_rate is None else str(quote.buy_rate),
            "sell_rate": None if quote.sell_rate is None else str(quote.sell_rate),
            "observed_at": quote.observed_at.isoformat(),
            "source": quote.source,
        }

    @staticmethod
    def _quote_from_dict(data: dict | None) -> Quote | None:
        if data is None:
            return None
        return Quote(
            provider=data["provider"],
            currency_pair=data["currency_pair"],
            buy_rate=None if data["buy_rate"] is None else Decimal(data["buy_rate"]),
            sell_rate=None if data["sell_rate"] is None else Decimal(data["sell_rate"]),
            observed_at=datetime.fromisoformat(data["observed_at"]),
            source=data["source"],
        )

    def _serialize(self, snapshot: RateSnapshot) -> str:
        result = snapshot.result
        return json.dumps({
            "result": {
                "requested_pair": result.requested_pair,
                "requested_direction": result.requested_direction.value,
                "quotes": [self._quote_to_dict(q) for q in result.quotes],
                "best_quote": self._quote_to_dict(result.best_quote),
                "failed_providers": list(result.failed_providers),
                "aggregated_at": result.aggregated_at.isoformat(),
            },
            "best_by_direction": {
                direction.value: self._quote_to_dict(quote)
                for direction, quote in snapshot.best_by_direction.items()
            },
        })

    def _deserialize(self, raw: str) -> RateSnapshot:
        try:
            data = json.loads(raw)
            result = data["result"]
            return RateSnapshot(
                result=AggregationResult(
                    requested_pair=result["requested_pair"],
                    requested_direction=TradeDirection.parse(result["requested_direction"]),
                    quotes=tuple(self._quote_from_dict(q) for q in result["quotes"]),
                    best_quote=self._quote_from_dict(result["best_quote"]),
                    failed_providers=tuple(result.get("failed_providers", [])),
                    aggregated_at=datetime.fromisoformat(result["aggregated_at"]),
                ),
                best_by_direction={
                    TradeDirection.parse(direction): self._quote_from_dict(quote)
                    for direction, quote in data.get("best_by_direction", {}).items()
                },
            )
        except (ValueError, KeyError, TypeError, InvalidDirection) as e:
            raise CacheError(f"Invalid json data in {self.KEY}: {e}") from e

    async def save(self, snapshot: RateSnapshot) -> None:
        await self.redis.setex(self.KEY, self.ttl, self._serialize(snapshot))

    async def load(self) -> RateSnapshot | None:
        raw = await self.redis.get(self.KEY)
        if not raw:
            return None
        return self._deserialize(raw)
