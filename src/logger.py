"""Centralized logging configuration."""

import logging
import sys

from loguru import logger

from src.config import settings


log_format = ' | '.join(
    (
        '<lk>{time:YYYY-MM-DD HH:mm:ss.SSS}</>',
        '<lvl>{level:<8}</>',
        '<c>{name}:{function}:{line}</>',
        '{message}',
    )
)


class InterceptHandler(logging.Handler):
    """Handler to intercept standard logging and redirect to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find the caller outside of the logging module
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging() -> None:
    logger.remove()  # Remove default handler to avoid duplicate output
    logger.add(sys.stdout, format=log_format, level=settings.LOG_LEVEL)

    if settings.LOG_DIR:
        logger.add(
            f'{settings.LOG_DIR}/{{time:YYYY-MM-DD}}.log',
            format=log_format,
            level=settings.LOG_LEVEL,
            rotation='1 day',
            retention='30 days',
            compression='zip',
            enqueue=True,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in ('uvicorn', 'uvicorn.error', 'uvicorn.access'):
        std_logger = logging.getLogger(name)
        std_logger.handlers = [InterceptHandler()]
        std_logger.propagate = False


__all__ = ['logger', 'setup_logging', 'InterceptHandler']
