
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from guest_roster.cli.utils import booking_key, console, open_store, roster_table


def show_cache_command(
    booking_id: str = typer.Option(..., "--booking-id", "-b"),
    room_id: Optional[str] = typer.Option(None, "--room-id", "-r"),
    cache_dir: Optional[Path] = typer.Option(None, "--cache-dir"),
):
    """
    Show the cached roster for a booking (empty when missing or expired).
    """
    key = booking_key(booking_id, room_id)
    entry = open_store(cache_dir).load_entry(key)
    if entry is None:
        console.print(f"[yellow]No valid cache for booking {key}[/yellow]")
        raise typer.Exit(code=1)
    console.print(roster_table(f"Cached roster {key} (ts={entry.timestamp})", entry.guests))


def clear_cache_command(
    booking_id: str = typer.Option(..., "--booking-id", "-b"),
    room_id: Optional[str] = typer.Option(None, "--room-id", "-r"),
    cache_dir: Optional[Path] = typer.Option(None, "--cache-dir"),
):
    """
    Remove the cached roster for a booking.
    """
    key = booking_key(booking_id, room_id)
    open_store(cache_dir).clear(key)
    console.print(f"Cleared cache for booking {key}")
