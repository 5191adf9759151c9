"""
Shared utilities for logging, event filtering and text pattern matching.
"""

from src.core.utils.event_filter import FilterResult, filter_pull_request, is_eligible
from src.core.utils.logging import configure_logging, log_operation
from src.core.utils.patterns import contains_issue_number, contains_url, is_long_enough

__all__ = [
    "FilterResult",
    "filter_pull_request",
    "is_eligible",
    "configure_logging",
    "log_operation",
    "contains_issue_number",
    "contains_url",
    "is_long_enough",
]
