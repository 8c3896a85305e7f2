# tests/test_init_db.py
from sqlalchemy import create_engine, inspect
from sqlalchemy.pool import StaticPool

from app.db.init_db import create_tables

EXPECTED_TABLES = {
    "comments",
    "loyalty_cards",
    "loyalty_programs",
    "qr_codes",
    "redemption_codes",
    "rewards",
    "settings",
    "transactions",
}


def test_bootstrap_is_idempotent():
    engine = create_engine("sqlite://", poolclass=StaticPool)
    try:
        created = create_tables(engine)
        assert set(created) == EXPECTED_TABLES

        columns_before = {t: [c["name"] for c in inspect(engine).get_columns(t)] for t in EXPECTED_TABLES}

        # второй запуск ничего не создает и схему не трогает
        assert create_tables(engine) == []
        columns_after = {t: [c["name"] for c in inspect(engine).get_columns(t)] for t in EXPECTED_TABLES}
        assert columns_after == columns_before
    finally:
        engine.dispose()


def test_bootstrap_creates_only_missing_tables():
    engine = create_engine("sqlite://", poolclass=StaticPool)
    try:
        create_tables(engine)
        with engine.begin() as connection:
            connection.exec_driver_sql("DROP TABLE comments")

        assert create_tables(engine) == ["comments"]
    finally:
        engine.dispose()
