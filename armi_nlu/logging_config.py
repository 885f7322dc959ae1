"""
Logging for ARMi NLU.

Every module logs structured events through ``get_logger(__name__)``:
``intent_classified``, ``interaction_llm_error``, ``unknown_reminder_type``
and so on. The interaction service opens a trace per call with
``start_trace()`` and the id is stamped on every event emitted while that
call runs, so the LLM attempt and the rule-based fallback for one sentence
can be read together.

Production renders one JSON object per line; any other environment gets
coloured console output.

Usage:
    from armi_nlu.logging_config import get_logger

    logger = get_logger(__name__)
    logger.info("intent_classified", intent="create_profile", confidence=0.85)
"""

from __future__ import annotations

import logging
import sys
import uuid
from contextvars import ContextVar
from typing import Any, Optional

import structlog

from armi_nlu.config import get_settings

# Id of the interaction currently being processed, "" outside one
trace_id_var: ContextVar[str] = ContextVar("trace_id", default="")

# Chatty transport loggers underneath the OpenAI collaborator
_QUIET_LOGGERS = ("httpx", "httpcore")


def _inject_context_vars(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Stamp the active interaction's trace id on the event."""
    trace_id = trace_id_var.get("")
    if trace_id:
        event_dict["trace_id"] = trace_id

    return event_dict


def generate_trace_id() -> str:
    return uuid.uuid4().hex[:12]


def start_trace() -> str:
    """Open a trace for one interaction and return its id."""
    trace_id = generate_trace_id()
    trace_id_var.set(trace_id)
    return trace_id


def setup_logging(level: Optional[str] = None) -> None:
    """
    Route structlog and stdlib logging through a single stdout handler.

    ``level`` overrides ``LOG_LEVEL`` from settings. Safe to call more than
    once; the root handler is replaced rather than duplicated.
    """
    settings = get_settings()

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        _inject_context_vars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.is_production:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel((level or settings.log_level).upper())

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
