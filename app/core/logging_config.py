# app/core/logging_config.py

import copy
from logging.config import dictConfig

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
            "stream": "ext://sys.stdout",
        },
    },
    "loggers": {
        "uvicorn": {"handlers": ["console"], "level": "INFO", "propagate": False},
        "fastapi": {"handlers": ["console"], "level": "INFO", "propagate": False},
        "sqlalchemy.engine": {"handlers": ["console"], "level": "WARNING", "propagate": False},
        "app": {"handlers": ["console"], "level": "INFO", "propagate": False},
    },
    "root": {
        "level": "INFO",
        "handlers": ["console"],
    },
}


def setup_logging(level: str = "INFO"):
    """Применяет конфигурацию логирования."""
    config = copy.deepcopy(LOGGING_CONFIG)
    config["loggers"]["app"]["level"] = level.upper()
    config["root"]["level"] = level.upper()
    dictConfig(config)
