"""
guest_roster.normalization package

Contains the backend payload normalization boundary:

- backend (raw guest-fetch payloads -> GuestRecord)
"""

from .backend import map_backend_guests

__all__ = ["map_backend_guests"]
