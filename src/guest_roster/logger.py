"""
Compatibility wrapper around the centralized logging package.

Prefer importing from ``guest_roster.logging`` directly:
    from guest_roster.logging import get_logger
"""

from guest_roster.logging import get_logger

__all__ = [
    "get_logger",
]
