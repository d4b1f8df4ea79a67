# policyfolio/utils/__init__.py
"""
Cross-cutting utilities for Policyfolio.

- logging: Logging configuration with correlation ID support
- context: Correlation ID context for valuation runs
- date_utils: Whole-unit calendar arithmetic (days, months, years)

Usage:
    from policyfolio.utils import setup_logging, get_logger
    from policyfolio.utils import correlation_scope
    from policyfolio.utils.date_utils import months_between
"""

from policyfolio.utils.context import (
    get_correlation_id,
    set_correlation_id,
    clear_correlation_id,
    correlation_scope,
)
from policyfolio.utils.logging import setup_logging, get_logger

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    # Context
    "get_correlation_id",
    "set_correlation_id",
    "clear_correlation_id",
    "correlation_scope",
]
