"""Structured logging for deploy-dll: structlog events through stdlib logging."""

from __future__ import annotations

import logging
import logging.config
import os

import structlog


def setup_logging(verbose: bool = False) -> None:
    """Route ``dll_deploy.*`` structlog events to stdout.

    ``--verbose`` forces DEBUG; otherwise DLL_DEPLOY_LOG_LEVEL (default INFO)
    applies. DLL_DEPLOY_LOG_FORMAT picks ``console`` (default) or ``json``.
    Skipped missing DLLs are echoed by the CLI, not logged, so no level hides them.
    """
    level = "DEBUG" if verbose else os.environ.get("DLL_DEPLOY_LOG_LEVEL", "INFO").upper()
    json_output = os.environ.get("DLL_DEPLOY_LOG_FORMAT", "console").lower() == "json"

    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    structlog.configure(
        processors=pre_chain + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structlog": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "foreign_pre_chain": pre_chain,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        structlog.processors.JSONRenderer()
                        if json_output
                        else structlog.dev.ConsoleRenderer(),
                    ],
                },
            },
            "handlers": {
                "stdout": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stdout",
                    "formatter": "structlog",
                },
            },
            "root": {"handlers": ["stdout"], "level": "WARNING"},
            "loggers": {"dll_deploy": {"level": level}},
        }
    )
