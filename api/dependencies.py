import logging
from typing import Annotated

from fastapi import Depends
from redis.asyncio import Redis

from application.services import AccountService, CoinService, OrderService, RateService
from config.settings import Settings, get_settings
from domain.models.quote import ProviderConfig
from infrastructure.cache.rate_cache import RateCache
from infrastructure.cache.redis_snapshot import RedisSnapshotStore
from infrastructure.providers import QuoteSource, SyntheticQuoteSource, ZodiaQuoteSource

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	rate_cache: RateCache | None = None
	redis_client: Redis | None = None
	snapshot_store: RedisSnapshotStore | None = None
	zodia: ZodiaQuoteSource | None = None
	providers: list[ProviderConfig] | None = None


deps = AppDependencies()


def build_providers(settings: Settings, zodia: ZodiaQuoteSource) -> list[ProviderConfig]:
	zodia_source: QuoteSource = zodia
	if settings.ZODIA_MODE == 'synthetic':
		zodia_source = SyntheticQuoteSource('Zodia', band=2, latency=(0, 0))

	return [
		ProviderConfig(name='Zodia', enabled=settings.ZODIA_ENABLED, source=zodia_source),
		ProviderConfig(name='TransFi', enabled=settings.TRANSFI_ENABLED, source=SyntheticQuoteSource('TransFi')),
		ProviderConfig(name='Ramp', enabled=settings.RAMP_ENABLED, source=SyntheticQuoteSource('Ramp')),
	]


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	deps.rate_cache = RateCache(ttl_seconds=settings.RATE_CACHE_TTL_SECONDS)
	deps.zodia = ZodiaQuoteSource(
		api_key=settings.ZODIA_API_KEY,
		base_url=settings.ZODIA_BASE_URL,
		timeout=settings.PROVIDER_TIMEOUT_SECONDS,
	)
	deps.providers = build_providers(settings, deps.zodia)

	if settings.REDIS_URL:
		deps.redis_client = Redis.from_url(settings.REDIS_URL, decode_responses=True)
		deps.snapshot_store = RedisSnapshotStore(deps.redis_client)

	enabled = [p.name for p in deps.providers if p.enabled]
	logger.info(f'Dependencies initialized, enabled providers: {enabled}')


async def warm_cache() -> None:
	"""Load the last mirrored snapshot, if any, into the in-memory cache."""
	if deps.snapshot_store is None or deps.rate_cache is None:
		return
	try:
		snapshot = await deps.snapshot_store.load()
	except Exception as e:
		logger.warning(f'Could not load rate snapshot: {e}')
		return
	if snapshot is not None:
		deps.rate_cache.restore(snapshot)
		logger.info(f'Rate cache warmed with {snapshot.result.requested_pair} snapshot')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.redis_client:
		await deps.redis_client.aclose()
	if deps.providers:
		for provider in deps.providers:
			await provider.source.close()
	if deps.zodia:
		await deps.zodia.close()
	if deps.rate_cache:
		deps.rate_cache.clear()

	deps.redis_client = None
	deps.snapshot_store = None
	deps.providers = None
	deps.zodia = None
	deps.rate_cache = None
	logger.info('Cleanup complete')


def get_rate_cache() -> RateCache:
	if deps.rate_cache is None:
		raise RuntimeError('Rate cache not initialized')
	return deps.rate_cache


def get_providers() -> list[ProviderConfig]:
	if deps.providers is None:
		raise RuntimeError('Providers not initialized')
	return deps.providers


def get_zodia_source() -> ZodiaQuoteSource:
	if deps.zodia is None:
		raise RuntimeError('Zodia client not initialized')
	return deps.zodia


def get_rate_service(
	providers: Annotated[list[ProviderConfig], Depends(get_providers)],
	cache: Annotated[RateCache, Depends(get_rate_cache)],
) -> RateService:
	return RateService(
		providers=providers,
		cache=cache,
		timeout=get_settings().PROVIDER_TIMEOUT_SECONDS,
		snapshot_store=deps.snapshot_store,
	)


def get_order_service(cache: Annotated[RateCache, Depends(get_rate_cache)]) -> OrderService:
	return OrderService(cache=cache)


def get_account_service(source: Annotated[ZodiaQuoteSource, Depends(get_zodia_source)]) -> AccountService:
	return AccountService(source=source)


def get_coin_service(providers: Annotated[list[ProviderConfig], Depends(get_providers)]) -> CoinService:
	return CoinService(providers=providers)
