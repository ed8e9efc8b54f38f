"""
Logging package for ``guest_roster``.

Use ``get_logger("<module>")`` in modules to inherit the shared handlers.
"""

from .logger import get_logger

__all__ = [
    "get_logger",
]
