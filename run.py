# run.py
import uvicorn

from app.core.config import get_settings


def main() -> None:
    """Локальный запуск API через uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "api.index:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.ENVIRONMENT == "development",
        log_config=None,
    )


if __name__ == "__main__":
    main()
