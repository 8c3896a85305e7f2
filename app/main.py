# app/main.py

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI

# Конфигурация и ядро
from app.core.config import Settings, get_settings
from app.core.errors import register_exception_handlers
from app.core.logging_config import setup_logging
from app.core.middleware import register_middleware
from app.db.init_db import create_tables
from app.db.session import Database
from app.routers.api import api_router

# --- Инициализация ---
logger = logging.getLogger(__name__)


# --- Lifespan Manager (запуск и остановка приложения) ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info(f"Application lifespan startup (environment: {settings.ENVIRONMENT})...")

    if settings.AUTO_CREATE_TABLES:
        create_tables(app.state.database.engine)

    yield

    logger.info("Application shutting down...")
    if app.state.owns_database:
        app.state.database.dispose()


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    """
    Собирает приложение. Настройки и объект БД можно передать явно (тесты, скрипты);
    иначе они берутся из окружения.
    """
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="Loyalty Rewards API",
        description="CRUD API for business loyalty programs, cards, rewards and redemption codes",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.owns_database = database is None
    app.state.database = database or Database.from_settings(settings)
    app.state.started_at = time.monotonic()

    register_middleware(app)
    register_exception_handlers(app)

    # --- Подключение роутеров FastAPI ---
    app.include_router(api_router)

    return app
