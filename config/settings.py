from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	# Application
	APP_NAME: str = 'Best Rate Relay API'
	DEBUG: bool = False
	CORS_ORIGINS: list[str] = ['*']

	LOG_LEVEL: str = 'INFO'
	LOG_DIR: str = 'logs'

	DEFAULT_PAIR: str = 'USDT-INR'
	PROVIDER_TIMEOUT_SECONDS: float = 10.0

	ZODIA_BASE_URL: str = 'https://trade-uk.sandbox.zodiamarkets.com'
	ZODIA_API_KEY: str = ''
	# 'live' calls the upstream pricing endpoint, 'synthetic' generates quotes locally
	ZODIA_MODE: Literal['live', 'synthetic'] = 'synthetic'
	ZODIA_ENABLED: bool = True
	TRANSFI_ENABLED: bool = True
	RAMP_ENABLED: bool = True

	RATE_CACHE_TTL_SECONDS: float | None = None

	# Empty disables the snapshot mirror
	REDIS_URL: str = ''

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
