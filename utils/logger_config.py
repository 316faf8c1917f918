import logging.config
import sys

ACCESS_LOGGER = "app.access"


def configure_logging(level: str = "INFO", log_file: str = "app_errors.log"):
    """Console logging for the solver service, rejected input and failures go to a rotating file."""
    level = level.upper()
    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,

        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S"
            },
            # one line per request: client "agent" method path status time
            "access": {
                "format": "%(asctime)s [access] %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S"
            },
        },

        "handlers": {
            "console": {
                "level": level,
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "stream": sys.stdout,
            },
            "access_console": {
                "class": "logging.StreamHandler",
                "formatter": "access",
                "stream": sys.stdout,
            },
            "rejections": {
                "level": "WARNING",
                "class": "logging.handlers.RotatingFileHandler",
                "formatter": "standard",
                "filename": log_file,
                "maxBytes": 10485760,  # 10MB
                "backupCount": 5,
                "delay": True,
            },
        },

        "loggers": {
            "": {
                "handlers": ["console"],
                "level": "WARNING",
            },
            # solvers, services and routers
            "app": {
                "handlers": ["console", "rejections"],
                "level": level,
                "propagate": False
            },
            ACCESS_LOGGER: {
                "handlers": ["access_console"],
                "level": "INFO",
                "propagate": False
            },
            # uvicorn's own access line duplicates the middleware
            "uvicorn.access": {
                "handlers": [],
                "level": "WARNING",
                "propagate": False
            },
        }
    }

    logging.config.dictConfig(logging_config)
