"""
structlog setup shared by the CLI and library users.
"""
import logging
import sys

import structlog

from ..config import Config


def configure_logging(app_config: Config) -> structlog.stdlib.BoundLogger:
    """Configures stdlib logging and structlog from `app_config.logging` and returns the app logger."""
    log_config = app_config.logging
    level = getattr(logging, log_config.level.upper(), logging.INFO)

    handler: logging.Handler
    if log_config.file:
        handler = logging.FileHandler(log_config.file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.dev.ConsoleRenderer(colors=False) if log_config.format.lower() == "console"
            else structlog.processors.JSONRenderer(sort_keys=True)
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    app_logger = structlog.get_logger(app_config.app_name).bind(app_version=app_config.app_version)
    app_logger.debug("Logging configured.", logging_level=log_config.level, logging_format=log_config.format)
    return app_logger
