"""
CLI command modules for guest_roster.

Each command module defines Typer-compatible command functions.
"""

from guest_roster.cli.commands.cache import clear_cache_command, show_cache_command
from guest_roster.cli.commands.reconcile import reconcile_command

__all__ = [
    "clear_cache_command",
    "reconcile_command",
    "show_cache_command",
]
