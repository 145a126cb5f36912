"""Logging setup: one console handler for the app, uvicorn and sqlalchemy."""
import logging.config

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"default": {"format": LOG_FORMAT}},
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "root": {"handlers": ["console"], "level": level.upper()},
            "loggers": {
                # engine echo is controlled by settings.debug, keep it quiet otherwise
                "sqlalchemy.engine": {"level": "WARNING"},
            },
        }
    )
