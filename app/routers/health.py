# app/routers/health.py
import logging
import time

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
def health_check(request: Request):
    """
    Проверка живости сервиса и соединения с БД.
    При недоступной БД отвечает 500 с database = "error".
    """
    state = request.app.state
    health = {
        "uptime": round(time.monotonic() - state.started_at, 3),
        "timestamp": int(time.time() * 1000),
        "environment": state.settings.ENVIRONMENT,
        "database": "unknown",
    }

    try:
        health["database"] = "connected" if state.database.ping() else "error"
    except SQLAlchemyError as e:
        logger.error("Health check database error", exc_info=True)
        health["database"] = "error"
        health["error"] = str(e.__cause__ or e)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=health)

    return health
