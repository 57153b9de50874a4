import logging
from logging.config import dictConfig

LOGGER_NAME = "pos_api"


def setup_logging(level: str = "INFO") -> logging.Logger:
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "loggers": {
                LOGGER_NAME: {
                    "handlers": ["console"],
                    "level": level,
                    "propagate": True,
                },
            },
        }
    )
    return logging.getLogger(LOGGER_NAME)
