import sys
import logging
from typing import Optional

from loguru import logger

from wnba_schedule.config.settings import settings


class InterceptHandler(logging.Handler):
    """Routes standard logging records (httpx, asyncio) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        # Get corresponding Loguru level if it exists
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging(level: Optional[str] = None) -> None:
    """Configures Loguru logger based on application settings."""
    level = (level or settings.log_level).upper()
    logger.remove()  # Remove default handler

    logger.add(
        sys.stderr,
        level=level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        colorize=True,
        backtrace=True,
        diagnose=True,
    )

    logger.info(f"Logging initialized with level: {level}")

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logger.info("Standard logging intercepted.")
