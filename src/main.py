import logging.config
from contextlib import asynccontextmanager

import redis.asyncio as redis
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.v1.api import api_router
from core.config import LOGGING_CONFIG_PATH, settings
from core.database import Database
from core.exception.exception_handlers import register_exception_handlers
from core.logging_middleware import StructuredLoggingMiddleware

if LOGGING_CONFIG_PATH.exists():
    logging.config.fileConfig(str(LOGGING_CONFIG_PATH), disable_existing_loggers=False)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.database = Database(
        settings.POSTGRES_DATABASE_URL,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_pre_ping=True,
        echo=settings.DB_ECHO,
    )
    app.state.redis_pool = redis.ConnectionPool.from_url(settings.REDIS_URL, decode_responses=True)
    logger.info("database pool and redis pool ready")

    yield

    await app.state.database.dispose()
    await app.state.redis_pool.disconnect()
    logger.info("database pool and redis pool closed")


app = FastAPI(
    title="ChefSphere API",
    description="레시피 공유 서비스 백엔드",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(StructuredLoggingMiddleware, sample_rate=settings.LOG_SAMPLE_RATE)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type", "Accept"],
)

register_exception_handlers(app)

app.include_router(api_router, prefix="/api/v1")


@app.get("/", include_in_schema=False)
async def root():
    return {"success": True, "message": "ChefSphere API"}
