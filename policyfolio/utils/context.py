# policyfolio/utils/context.py
"""
Correlation context for valuation runs.

The engine is called by an outer API or batch layer. That caller may tag a
run (one portfolio request, one nightly statement batch) with a correlation
ID so that every log line emitted while valuing its subscriptions can be
traced back to it.

Uses Python's contextvars, so the ID follows the caller through threads
started with copied contexts and through async/await.

Usage:
    from policyfolio.utils.context import correlation_scope

    with correlation_scope("stmt-2024-06") as cid:
        aggregator.aggregate(holdings, as_of=date(2024, 6, 30))
"""

import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

_correlation_id_var: ContextVar[str | None] = ContextVar("correlation_id", default=None)


def get_correlation_id() -> str | None:
    """Return the correlation ID of the current run, or None if not set."""
    return _correlation_id_var.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID for the current context."""
    _correlation_id_var.set(correlation_id)


def clear_correlation_id() -> None:
    """Clear the correlation ID for the current context."""
    _correlation_id_var.set(None)


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """
    Tag everything inside the block with a correlation ID.

    The previous ID (if any) is restored on exit, so scopes can nest.

    Args:
        correlation_id: ID to use. A random UUID4 hex is generated if omitted.

    Yields:
        The correlation ID in effect inside the block
    """
    cid = correlation_id or uuid.uuid4().hex
    token = _correlation_id_var.set(cid)
    try:
        yield cid
    finally:
        _correlation_id_var.reset(token)
