"""
Parcel Tracker CLI - `parcel-tracker` command.

Commands:
  parcel-tracker           Start the interactive menu (default)
  parcel-tracker menu      Start the interactive menu
"""

from typing import Optional

import click
from rich.console import Console

from parcel_tracker.app.cli.menu import run_menu
from parcel_tracker.app.core.config import settings
from parcel_tracker.app.core.observability import configure_logging
from parcel_tracker.app.services.registry import ParcelRegistry

console = Console()


@click.group(invoke_without_command=True)
@click.version_option(settings.version)
@click.option("--log-level", default=None, help="Override the configured log level.")
@click.pass_context
def main(ctx: click.Context, log_level: Optional[str]):
    """Parcel Tracker - register, load, dispatch and deliver parcels."""
    configure_logging(log_level)
    if ctx.invoked_subcommand is None:
        ctx.invoke(menu)


@main.command("menu")
@click.option("--unique-ids", is_flag=True, help="Reject IDs that are already active or queued.")
@click.option("--reconcile-undo", is_flag=True, help="Remove the audit entry when a delivery is undone.")
def menu(unique_ids: bool, reconcile_undo: bool):
    """Interactive parcel tracking menu."""
    config = settings.model_copy(update={
        "enforce_unique_ids": settings.enforce_unique_ids or unique_ids,
        "reconcile_delivered_on_undo": settings.reconcile_delivered_on_undo or reconcile_undo,
    })
    run_menu(ParcelRegistry(config), console)


if __name__ == "__main__":
    main()
