"""
Structured Logging

Services log one structured event per request (what was computed,
for whom, how many accounts and periods). The pure engine does not log.
"""

import logging

import structlog


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


def configure_logging(level: str = "INFO") -> None:
    """Route stdlib logging (and so structlog) to stderr at `level`."""
    logging.basicConfig(format="%(message)s", level=getattr(logging, level.upper()))


def get_logger(name: str = "networth") -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
