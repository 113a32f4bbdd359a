"""structlog setup for httperr events.

Modules log through get_logger() and never touch handlers themselves.
Applications that want the events rendered call configure_logging() once;
until then structlog's defaults apply.
"""

import logging
import logging.config
import sys
from datetime import UTC, datetime
from typing import Any

import structlog
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from structlog.stdlib import BoundLogger
from structlog.typing import Processor


class LoggingSettings(BaseSettings):
    """LOG_LEVEL and LOG_CONSOLE from the environment or .env."""

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_console: bool = Field(default=False, alias="LOG_CONSOLE")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


def _utc_timestamp(
    _logger: object,
    _method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    event_dict["timestamp"] = datetime.now(UTC).isoformat()
    return event_dict


def _pre_chain() -> list[Processor]:
    """Processors shared by structlog events and plain stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        _utc_timestamp,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Route structlog and stdlib logging to one stdout handler.

    Records are rendered as JSON lines, or with structlog's ConsoleRenderer
    when LOG_CONSOLE is set.
    """
    settings = settings or LoggingSettings()
    pre_chain = _pre_chain()
    renderer: Processor = (
        structlog.dev.ConsoleRenderer()
        if settings.log_console
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *pre_chain,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "httperr": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "processor": renderer,
                    "foreign_pre_chain": pre_chain,
                },
            },
            "handlers": {
                "stdout": {
                    "class": "logging.StreamHandler",
                    "formatter": "httperr",
                    "stream": sys.stdout,
                },
            },
            "root": {"handlers": ["stdout"], "level": settings.log_level},
        }
    )


def get_logger(name: str) -> BoundLogger:
    """Return a structlog logger named ``name``.

    Event names are snake_case with context passed as keywords:
        get_logger(__name__).warning("http_error", status_code=404, path="/items/7")
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]
