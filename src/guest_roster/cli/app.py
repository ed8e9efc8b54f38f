
from __future__ import annotations

import typer

from guest_roster.cli.commands.cache import clear_cache_command, show_cache_command
from guest_roster.cli.commands.reconcile import reconcile_command

app = typer.Typer(
    name="guest-roster",
    help="Inspect and reconcile cached guest rosters",
    add_completion=False,
)

app.command("reconcile")(reconcile_command)
app.command("show-cache")(show_cache_command)
app.command("clear-cache")(clear_cache_command)


def main():
    app()


if __name__ == "__main__":
    main()
