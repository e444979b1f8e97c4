"""
logging_config.py — Loguru setup for processes that embed the college client

The client itself only emits records (loguru `logger` in the HTTP layer,
logging.getLogger in the facades and form services). setup_logging() decides
where they go: one stdout sink whose level and format come from Settings.

Business Rules:
- Settings.log_level is the minimum level for every record, stdlib or loguru
- Settings.is_production selects JSON lines; otherwise a colorized console line
- Bearer tokens and passwords are never logged
- httpx/httpcore request chatter is capped at WARNING

Called by: applications and scripts at startup, before building a CollegeClient
Depends on: college_client/config.py (log_level, is_production)
"""

import logging
import sys

from loguru import logger

from .config import Settings, get_settings

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "{message}"
)

QUIET_LOGGERS = ("httpx", "httpcore")


def _sink_options(config: Settings) -> dict:
    level = config.log_level.upper()
    if config.is_production:
        return {"level": level, "format": "{message}", "serialize": True}
    return {"level": level, "format": CONSOLE_FORMAT, "colorize": True}


def setup_logging(config: Settings | None = None) -> None:
    """Replace loguru's sinks with one stdout sink and route stdlib logging into it.

    `config` defaults to get_settings(); pass one explicitly to configure a
    client built with non-default Settings.
    """
    config = config or get_settings()

    logger.remove()
    logger.add(sys.stdout, **_sink_options(config))

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger.info("Logging configured", level=config.log_level.upper(), production=config.is_production)


class _InterceptHandler(logging.Handler):
    """Forward stdlib records to loguru, keeping the caller's frame."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Walk out of logging's own frames so {name}:{line} point at the caller
        frame, depth = logging.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())
