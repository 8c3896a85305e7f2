# app/dependencies.py

from typing import Iterator

from fastapi import Request
from sqlalchemy.orm import Session


# --- Управление сессией БД ---
def get_db(request: Request) -> Iterator[Session]:
    """
    Основная зависимость FastAPI для получения сессии БД.
    Сессия берется из объекта Database, переданного в приложение при сборке,
    и закрывается после ответа (незавершенная транзакция откатывается).
    """
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
