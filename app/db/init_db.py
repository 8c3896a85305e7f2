# app/db/init_db.py

import logging

from sqlalchemy import inspect
from sqlalchemy.engine import Engine

from app.db.session import Base
# Импортируем все модели, чтобы они зарегистрировались в Base.metadata
from app.models import comment, loyalty_card, program, qr_code, redemption_code, reward, setting, transaction  # noqa: F401

logger = logging.getLogger(__name__)


def create_tables(engine: Engine) -> list[str]:
    """
    Создает отсутствующие таблицы (CREATE TABLE выполняется только для таблиц,
    которых еще нет). Повторный запуск схему не меняет.
    Возвращает список таблиц, созданных этим вызовом.
    """
    existing = set(inspect(engine).get_table_names())
    Base.metadata.create_all(bind=engine, checkfirst=True)
    created = [name for name in Base.metadata.tables if name not in existing]

    for name in Base.metadata.tables:
        if name in created:
            logger.info(f"Table '{name}' created")
        else:
            logger.debug(f"Table '{name}' already exists")
    logger.info(f"Schema bootstrap finished: {len(created)} table(s) created, {len(existing & set(Base.metadata.tables))} already present")
    return created
