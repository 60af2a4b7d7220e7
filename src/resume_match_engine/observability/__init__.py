"""Observability: structured logging."""

from resume_match_engine.observability.logging import (
    bind_request_context,
    clear_request_context,
    configure_logging,
)

__all__ = [
    "bind_request_context",
    "clear_request_context",
    "configure_logging",
]
