"""Logging setup for the storefront.

structlog sits on top of the standard library so protean, uvicorn and our own
modules end up in the same console stream and rotating files. Production and
staging render JSON lines; everything else gets the coloured console renderer.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any

import structlog

_LEVEL_BY_ENVIRONMENT = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}

_MAX_LOG_BYTES = 10 * 1024 * 1024

_configured = False


def current_environment() -> str:
    return (os.getenv("ENVIRONMENT") or os.getenv("PROTEAN_ENV") or "development").lower()


def get_log_level() -> str:
    """LOG_LEVEL wins; otherwise the level follows the environment."""
    return os.getenv("LOG_LEVEL", _LEVEL_BY_ENVIRONMENT.get(current_environment(), "INFO")).upper()


def _rotating_file(path: Path, level) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=path,
        maxBytes=_MAX_LOG_BYTES,
        backupCount=5,
        encoding="utf-8",
    )
    handler.setLevel(level)
    return handler


def setup_stdlib_logging(log_dir: Path) -> None:
    level = get_log_level()
    log_dir.mkdir(parents=True, exist_ok=True)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers = [
        console,
        _rotating_file(log_dir / "girlies_hub.log", level),
        _rotating_file(log_dir / "girlies_hub_error.log", logging.ERROR),
    ]

    for noisy in ("urllib3", "asyncio", "protean", "uvicorn.access"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def setup_structlog() -> None:
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.MODULE,
                structlog.processors.CallsiteParameter.LINENO,
            ]
        ),
    ]

    if current_environment() in ("production", "staging"):
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=sys.stdout.isatty(),
                exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=False, max_frames=3),
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(force: bool = False) -> None:
    """Configure logging once per process.

    Log files go to ``LOG_DIR`` (default ``logs/``).
    """
    global _configured
    if _configured and not force:
        return

    setup_stdlib_logging(Path(os.getenv("LOG_DIR", "logs")))
    setup_structlog()
    _configured = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def add_context(**kwargs: Any) -> None:
    """Bind values that every following log line in this context carries."""
    structlog.contextvars.bind_contextvars(**kwargs)


def bind_request_context(request_id: str, method: str, path: str) -> None:
    """Start a fresh log context for one HTTP request."""
    structlog.contextvars.clear_contextvars()
    add_context(request_id=request_id, method=method, path=path)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
