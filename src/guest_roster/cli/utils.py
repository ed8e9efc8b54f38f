
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Optional

from rich.console import Console
from rich.table import Table

from guest_roster.cache.storage import JsonFileStorage
from guest_roster.cache.store import CacheStore
from guest_roster.config import get_config
from guest_roster.models import BookingKey, GuestRecord
from guest_roster.scoring.completeness import score

console = Console()


def open_store(cache_dir: Optional[Path]) -> CacheStore:
    """
    File-backed cache store; defaults to the configured cache directory.
    """
    directory = cache_dir or Path(get_config().cache_dir)
    return CacheStore(JsonFileStorage(directory))


def booking_key(booking_id: str, room_id: Optional[str]) -> BookingKey:
    return BookingKey(booking_id, room_id)


def read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def roster_table(title: str, guests: Iterable[GuestRecord]) -> Table:
    table = Table(title=title)
    table.add_column("ID", style="dim")
    table.add_column("Name", style="bold")
    table.add_column("Main", justify="center")
    table.add_column("Document")
    table.add_column("Room")
    table.add_column("Progress", justify="right")
    table.add_column("Score", justify="right")

    for g in guests:
        table.add_row(
            g.id,
            g.name,
            "yes" if g.is_main else "",
            g.details.document_number or "",
            g.booking_room_id or "",
            f"{g.progress or 0}%",
            str(score(g)),
        )
    return table


def write_json(guests: Iterable[GuestRecord], *, out: Path | None, pretty: bool):
    """
    Write the roster as JSON to stdout or file.
    """
    data = [g.to_dict() for g in guests]
    if pretty:
        payload = json.dumps(data, indent=2, ensure_ascii=False)
    else:
        payload = json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    if out:
        out.write_text(payload, encoding="utf-8")
    else:
        print(payload)
