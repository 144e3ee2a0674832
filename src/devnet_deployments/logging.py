"""Structured logging for the deployment orchestrator.

Log records go to stderr so they interleave with the output of the deploy
scripts, which inherit the orchestrator's stdout and stderr.
"""

import logging
import sys
from typing import Any, MutableMapping

import structlog

from .types import REDACTED

# Event keys whose values must never reach a log line
SECRET_KEYS = frozenset({"private_key", "pkey"})


def mask_secrets(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Replace the values of secret keys in an event with a placeholder."""
    for key in SECRET_KEYS.intersection(event_dict):
        event_dict[key] = REDACTED
    return event_dict


def configure_logging(level: str = "info", json_output: bool = False) -> None:
    """Route structlog events through the standard logging root handler.

    Args:
        level: Log level name (debug, info, warning, error)
        json_output: Render one JSON object per line instead of console output
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        handlers=[logging.StreamHandler(sys.stderr)],
        format="%(message)s",
        force=True,
    )

    processors: list[structlog.types.Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        mask_secrets,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if json_output:
        # ConsoleRenderer formats tracebacks itself
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Module-level loggers must pick up a later reconfiguration
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a logger for a module of this package."""
    return structlog.get_logger(name)
