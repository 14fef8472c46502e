import asyncio
import logging
from collections.abc import Sequence
from datetime import UTC, datetime

from domain.exceptions.quote import ProviderUnavailable
from domain.models.quote import AggregationResult, ProviderConfig, Quote, TradeDirection
from domain.selection import select_best
from infrastructure.cache.rate_cache import RateCache
from infrastructure.cache.redis_snapshot import RedisSnapshotStore

logger = logging.getLogger(__name__)


class RateService:
    """Fans out to every enabled provider, picks the best quote and publishes it to the cache."""

    def __init__(
        self,
        providers: Sequence[ProviderConfig],
        cache: RateCache,
        timeout: float = 10.0,
        snapshot_store: RedisSnapshotStore | None = None,
    ):
        self.providers = tuple(providers)
        self.cache = cache
        self.timeout = timeout
        self.snapshot_store = snapshot_store

    @property
    def enabled_providers(self) -> list[ProviderConfig]:
        return [p for p in self.providers if p.enabled]

    async def aggregate(
        self, currency_pair: str, direction: TradeDirection | str = TradeDirection.BUY
    ) -> AggregationResult:
        result = await self._collect(currency_pair, TradeDirection.parse(direction))

        snapshot = self.cache.set(result)
        if self.snapshot_store is not None:
            try:
                await self.snapshot_store.save(snapshot)
            except Exception as e:
                logger.warning(f"Failed to mirror rate snapshot: {e}")

        return result

    async def compare(
        self, currency_pair: str, direction: TradeDirection | str = TradeDirection.BUY
    ) -> AggregationResult:
        """Same fan-out as ``aggregate`` without publishing the result."""
        return await self._collect(currency_pair, TradeDirection.parse(direction))

    async def _fetch_from_provider(self, provider: ProviderConfig, currency_pair: str) -> Quote:
        try:
            quote = await asyncio.wait_for(provider.source.fetch_quote(currency_pair), timeout=self.timeout)
        except ProviderUnavailable:
            raise
        except TimeoutError as e:
            raise ProviderUnavailable(provider.name, f"timed out after {self.timeout}s") from e
        except Exception as e:
            raise ProviderUnavailable(provider.name, str(e) or e.__class__.__name__) from e

        if not isinstance(quote, Quote):
            raise ProviderUnavailable(provider.name, f"malformed payload: {type(quote).__name__}")
        return quote

    async def _collect(self, currency_pair: str, direction: TradeDirection) -> AggregationResult:
        providers = self.enabled_providers
        logger.info(f"Fetching all rates for {currency_pair} from {len(providers)} providers")

        results = await asyncio.gather(
            *(self._fetch_from_provider(p, currency_pair) for p in providers),
            return_exceptions=True,
        )

        quotes: list[Quote] = []
        failed: list[str] = []
        for provider, outcome in zip(providers, results, strict=True):
            if isinstance(outcome, Quote):
                quotes.append(outcome)
                logger.info(f"{provider.name}: {direction.value} rate = {direction.rate_of(outcome)}")
            elif isinstance(outcome, Exception):
                failed.append(provider.name)
                logger.error(
                    f"Provider {provider.name} failed: {outcome}",
                    extra={"extra_data": {"provider": provider.name, "currency_pair": currency_pair}},
                )
            else:
                # CancelledError and friends belong to the caller
                raise outcome

        logger.info(f"Fetched {len(quotes)} valid rates out of {len(providers)} providers")

        best = select_best(quotes, direction)
        if best is None:
            logger.warning(f"No quotes available for {currency_pair} ({direction.value})")
        else:
            logger.info(f"Best {direction.value} provider: {best.provider} at {direction.rate_of(best)}")

        return AggregationResult(
            requested_pair=currency_pair,
            requested_direction=direction,
            quotes=tuple(quotes),
            best_quote=best,
            failed_providers=tuple(failed),
            aggregated_at=datetime.now(tz=UTC),
        )
