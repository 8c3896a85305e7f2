# app/core/config.py

from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Строка подключения к Postgres. Литерала по умолчанию нет и не будет:
    # без переменной окружения приложение не стартует.
    DATABASE_URL: str = Field(validation_alias=AliasChoices("DATABASE_URL", "VITE_DATABASE_URL"))

    # development / production / test
    ENVIRONMENT: str = Field(
        default="development",
        validation_alias=AliasChoices("ENVIRONMENT", "NODE_ENV"),
    )
    PORT: int = 3001
    LOG_LEVEL: str = "INFO"

    # Создавать недостающие таблицы при старте (CREATE TABLE только для отсутствующих)
    AUTO_CREATE_TABLES: bool = True

    DB_POOL_SIZE: int = 5
    DB_STATEMENT_TIMEOUT_MS: Optional[int] = None

    @property
    def SQLALCHEMY_DATABASE_URL(self) -> str:
        """
        Managed Postgres отдает строки вида postgres://... или postgresql://...,
        SQLAlchemy нужен явный драйвер.
        """
        url = self.DATABASE_URL
        for prefix in ("postgres://", "postgresql://"):
            if url.startswith(prefix):
                return "postgresql+psycopg2://" + url[len(prefix):]
        return url

    @property
    def expose_error_details(self) -> bool:
        # Текст ошибки БД уходит клиенту только в development
        return self.ENVIRONMENT == "development"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)


@lru_cache
def get_settings() -> Settings:
    return Settings()
