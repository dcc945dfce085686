"""Structured logging for embedding services.

structlog renders every entry, including stdlib records from the host
process: JSON lines when ``json_logs`` is set, colored console output
otherwise. Values bound with ``structlog.contextvars`` are merged in.
"""

import logging
import sys

import structlog

from deploy_gates.core.config import Settings, get_settings

SHARED_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
]


def _build_handler(json_logs: bool) -> logging.Handler:
    renderer = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        foreign_pre_chain=SHARED_PROCESSORS,
    ))
    return handler


def configure_structlog(
    log_level: str | None = None,
    json_logs: bool | None = None,
    settings: Settings | None = None,
) -> None:
    """Route structlog and stdlib logging through one stdout handler.

    Call once at process start; loggers are cached on first use.

    Args:
        log_level: Root log level, defaults to ``settings.log_level``
        json_logs: JSON lines if True, console output if False,
            defaults to ``settings.json_logs``
        settings: Settings to read defaults from, defaults to ``get_settings()``
    """
    settings = settings or get_settings()
    level = log_level or settings.log_level
    use_json = settings.json_logs if json_logs is None else json_logs

    logging.basicConfig(handlers=[_build_handler(use_json)], level=level, force=True)

    structlog.configure(
        processors=SHARED_PROCESSORS + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
