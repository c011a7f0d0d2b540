import logging.config


def configure_logging(level: str = "INFO") -> None:
    """Route application loggers (and Flask's app.logger) to one console handler."""
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {
                "format": "%(asctime)s %(levelname)s [%(name)s]: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "console",
            },
        },
        "loggers": {
            "backend": {"level": level.upper(), "handlers": ["console"], "propagate": False},
        },
    })
