# app/db/session.py

import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.core.config import Settings

logger = logging.getLogger(__name__)

Base = declarative_base()


class Database:
    """
    Единственный на процесс объект доступа к БД: engine + фабрика сессий.
    Создается явно при сборке приложения и передается в него,
    а не живет глобальной переменной модуля.
    """

    def __init__(self, url: Optional[str] = None, engine: Optional[Engine] = None, **engine_options):
        if engine is None:
            if not url:
                raise ValueError("Database URL is not configured")
            engine = create_engine(url, pool_pre_ping=True, **engine_options)
        self.engine = engine
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        if self.engine.dialect.name == "sqlite":
            # SQLite не проверяет внешние ключи без этой прагмы
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        url = settings.SQLALCHEMY_DATABASE_URL
        options = {}
        if url.startswith("postgresql"):
            options["pool_size"] = settings.DB_POOL_SIZE
            if settings.DB_STATEMENT_TIMEOUT_MS:
                options["connect_args"] = {"options": f"-c statement_timeout={settings.DB_STATEMENT_TIMEOUT_MS}"}
        return cls(url, **options)

    def session(self) -> Session:
        """Создает и возвращает новую сессию БД."""
        return self.SessionLocal()

    def ping(self) -> bool:
        """Проверяет соединение простым SELECT 1."""
        with self.engine.connect() as connection:
            return connection.execute(text("SELECT 1 AS test")).scalar() == 1

    def dispose(self):
        self.engine.dispose()
        logger.info("Database engine disposed.")


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
