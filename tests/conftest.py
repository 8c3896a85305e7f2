# tests/conftest.py
import uuid

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from app.core.config import Settings
from app.db.init_db import create_tables
from app.db.session import Base, Database
from app.main import create_app

# Используем in-memory SQLite для тестов - это быстро и изолированно.
# StaticPool держит одно соединение, иначе каждая сессия видела бы свою пустую базу.
SQLALCHEMY_DATABASE_URL = "sqlite://"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        DATABASE_URL=SQLALCHEMY_DATABASE_URL,
        ENVIRONMENT="test",
        AUTO_CREATE_TABLES=False,
    )


@pytest.fixture
def database() -> Database:
    """
    Фикстура для создания чистой базы данных для каждого теста.
    """
    engine = create_engine(
        SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    database = Database(engine=engine)
    create_tables(engine)  # Создаем все таблицы
    try:
        yield database
    finally:
        Base.metadata.drop_all(bind=engine)  # Очищаем все после теста
        engine.dispose()


@pytest.fixture
def db_session(database: Database) -> Session:
    db = database.session()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def sql_statements(database: Database) -> list:
    """Список всех SQL-запросов, ушедших в базу за время теста."""
    statements = []

    def record(conn, cursor, statement, parameters, context, executemany):
        statements.append(statement)

    event.listen(database.engine, "before_cursor_execute", record)
    yield statements
    event.remove(database.engine, "before_cursor_execute", record)


@pytest.fixture
def app(settings: Settings, database: Database):
    return create_app(settings=settings, database=database)


@pytest.fixture
async def client(app) -> AsyncClient:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def business_id() -> str:
    return str(uuid.uuid4())


@pytest.fixture
def customer_id() -> str:
    return str(uuid.uuid4())
