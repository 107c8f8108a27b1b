"""seleniumext helper classes, not for direct use."""

from .logadapter import AutomationLogAdapter
from .retry import (
    RetryPolicy,
    get_text_list,
    get_text_list_without_empty_strings,
    handle_boolean,
    handle_boolean_or_driver_exception,
    handle_driver_exception,
)

__all__ = [
    "AutomationLogAdapter",
    "RetryPolicy",
    "get_text_list",
    "get_text_list_without_empty_strings",
    "handle_boolean",
    "handle_boolean_or_driver_exception",
    "handle_driver_exception",
]
