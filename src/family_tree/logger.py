"""
Compatibility wrapper around the centralized logging package.

Prefer importing from ``family_tree.logging`` directly:
    from family_tree.logging import get_logger
"""

from family_tree.logging import (
    get_logger,
    list_active_loggers,
    set_debug,
)

__all__ = [
    "get_logger",
    "list_active_loggers",
    "set_debug",
]
