import logging
import sys

import structlog

from .config import LOG_LEVEL


def resolve_level(name: str) -> int:
    """Numeric level for a name like "DEBUG"; unknown names fall back to INFO."""
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


level = resolve_level(LOG_LEVEL)

logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

structlog.configure(
    processors=[
        # request_id bound by RequestLoggingMiddleware
        structlog.contextvars.merge_contextvars,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.processors.format_exc_info,
        structlog.dev.ConsoleRenderer(colors=False),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(level),
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


console_logger: structlog.BoundLogger = structlog.get_logger("checkout")
