"""
CLI package for guest_roster.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from guest_roster.cli.app import app, main

__all__ = [
    "app",
    "main",
]
