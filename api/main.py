import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.dependencies import cleanup_dependencies, init_dependencies, warm_cache
from api.error_handlers import register_exception_handlers
from api.routes import account, coins, health, orders, price, rates
from config.logging import setup_logging
from config.settings import get_settings

logger = logging.getLogger(__name__)


settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
	setup_logging(log_directory=settings.LOG_DIR, console_level=settings.LOG_LEVEL)
	logger.info('Starting Best Rate Relay API...')

	init_dependencies()
	await warm_cache()

	logger.info('Application ready')

	yield

	logger.info('Shutting down...')
	await cleanup_dependencies()


app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG, lifespan=lifespan)

app.add_middleware(
	CORSMiddleware,
	allow_origins=settings.CORS_ORIGINS,
	allow_methods=['*'],
	allow_headers=['*'],
)

app.include_router(rates.router)
app.include_router(orders.router)
app.include_router(price.router)
app.include_router(health.router)
app.include_router(account.router)
app.include_router(coins.router)
register_exception_handlers(app)
