# alembic/env.py

import sys
from os.path import abspath, dirname
# Корень проекта в sys.path, чтобы пакет app импортировался при запуске alembic из любой папки
sys.path.insert(0, abspath(dirname(dirname(__file__))))

from logging.config import fileConfig
from sqlalchemy import create_engine
from sqlalchemy.pool import NullPool
from alembic import context

from app.core.config import get_settings
# init_db импортирует все модули моделей, так что метаданные уже полные
from app.db.init_db import Base

target_metadata = Base.metadata

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)


def database_url() -> str:
    # Строка подключения только из окружения (DATABASE_URL / VITE_DATABASE_URL)
    return get_settings().SQLALCHEMY_DATABASE_URL


def configure_options(url: str) -> dict:
    return {
        "target_metadata": target_metadata,
        "compare_type": True,
        # SQLite не умеет ALTER COLUMN, для локальной базы нужны batch-операции
        "render_as_batch": url.startswith("sqlite"),
    }


def run_migrations_offline() -> None:
    """Генерирует SQL-скрипт без подключения к базе."""
    url = database_url()
    context.configure(
        url=url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **configure_options(url),
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Применяет миграции к живой базе."""
    url = database_url()
    connectable = create_engine(url, poolclass=NullPool)

    with connectable.connect() as connection:
        context.configure(connection=connection, **configure_options(url))

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
