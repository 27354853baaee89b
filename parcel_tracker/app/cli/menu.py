"""
Interactive text menu.

Prompts for raw text, hands it to the registry and prints the outcome.
Every registry error is turned into an OperationResult here, so a failed
operation never ends the loop.
"""

from typing import Callable, Optional

import click
from rich.console import Console
from rich.markup import escape

from parcel_tracker.app.core.config import settings
from parcel_tracker.app.core.exceptions import AppException, app_exception_handler
from parcel_tracker.app.models.parcel import PRIORITY_MAX, PRIORITY_MIN
from parcel_tracker.app.schemas.parcel import ParcelResponse
from parcel_tracker.app.schemas.result import OperationResult
from parcel_tracker.app.services.registry import ParcelRegistry
from parcel_tracker.app.services.reporting import ReportingService

MENU_OPTIONS = [
    ("1", "Register New Parcel"),
    ("2", "Update Parcel Weight"),
    ("3", "Prepare for Loading"),
    ("4", "Dispatch Next Parcel"),
    ("5", "Complete Delivery"),
    ("6", "Undo Last Action"),
    ("7", "Generate Summary Reports"),
    ("0", "Exit Program"),
]


def display_menu(console: Console) -> None:
    rule = "=" * 39
    console.print(f"\n{rule}")
    console.print(f"[bold]{settings.app_name.upper()}[/bold]")
    console.print(rule)
    for key, label in MENU_OPTIONS:
        console.print(f"{key}. {label}")


def _ask(label: str) -> str:
    return click.prompt(label, default="", show_default=False, prompt_suffix=": ").strip()


def perform(operation: Callable[[], OperationResult]) -> OperationResult:
    """Run one menu operation, converting application errors into a result."""
    try:
        return operation()
    except AppException as exc:
        return app_exception_handler(exc)


# Operations

def register_parcel(registry: ParcelRegistry) -> OperationResult:
    click.echo("\n--- Register New Parcel ---")
    parcel = registry.register(
        parcel_id=_ask("Enter Parcel ID"),
        sender=_ask("Enter Sender Name"),
        recipient=_ask("Enter Recipient Name"),
        address=_ask("Enter Address (no spaces)"),
        weight=_ask("Enter Weight (kg)"),
        priority=_ask(f"Enter Delivery Priority ({PRIORITY_MIN}=High, {PRIORITY_MAX}=Low)"),
    )
    return OperationResult(
        ok=True,
        message=f"Parcel {parcel.id} registered and recorded for undo.",
        parcel=ParcelResponse.model_validate(parcel)
    )


def update_parcel(registry: ParcelRegistry) -> OperationResult:
    parcel_id = _ask("Enter Parcel ID to Update")
    current = registry.get_parcel(parcel_id)
    weight = _ask(f"Enter New Weight for P{current.id} (Current: {current.weight:g})")
    _, updated = registry.update_weight(current.id, weight)
    return OperationResult(
        ok=True,
        message=f"Parcel {updated.id} updated.",
        parcel=ParcelResponse.model_validate(updated)
    )


def load_parcel(registry: ParcelRegistry) -> OperationResult:
    parcel = registry.load(_ask("Enter Parcel ID to Load onto truck"))
    return OperationResult(
        ok=True,
        message=(
            f"Parcel {parcel.id} loaded (Priority: {parcel.priority}). "
            "Will be dispatched based on urgency."
        ),
        parcel=ParcelResponse.model_validate(parcel)
    )


def dispatch_parcel(registry: ParcelRegistry) -> OperationResult:
    parcel = registry.dispatch_next()
    return OperationResult(
        ok=True,
        message=f"Parcel ID {parcel.id} (Priority {parcel.priority}) dispatched immediately.",
        parcel=ParcelResponse.model_validate(parcel)
    )


def complete_delivery(registry: ParcelRegistry) -> OperationResult:
    parcel = registry.complete_delivery(_ask("Enter Parcel ID to mark as delivered"))
    return OperationResult(
        ok=True,
        message=f"Parcel {parcel.id} marked delivered and removed from active list.",
        parcel=ParcelResponse.model_validate(parcel)
    )


UNDO_MESSAGES = {
    "ADD": "Registered Parcel {id} removed from active list.",
    "DELETE": "Parcel {id} restored to active list.",
    "UPDATE": "Parcel {id} weight restored to {weight:g}.",
}


def undo_action(registry: ParcelRegistry) -> OperationResult:
    action, applied = registry.undo()
    snapshot = action.data
    message = f"Undid {action.type.value} on Parcel ID {snapshot.id}."
    if applied:
        message = UNDO_MESSAGES[action.type.value].format(id=snapshot.id, weight=snapshot.weight)
    return OperationResult(
        ok=True,
        message=message,
        details={"action": action.type.value, "applied": applied},
        parcel=ParcelResponse.model_validate(snapshot)
    )


def show_report(registry: ParcelRegistry, console: Console) -> OperationResult:
    report = registry.generate_report()
    ReportingService.render(report, console)
    return OperationResult(ok=True, message="Report generated.", details=report.model_dump())


def print_result(result: OperationResult, console: Console) -> None:
    if result.ok:
        console.print(f"\n[green]SUCCESS:[/green] {escape(result.message)}")
    else:
        console.print(f"\n[red]Error:[/red] {escape(result.message)}")


def run_menu(registry: Optional[ParcelRegistry] = None, console: Optional[Console] = None) -> ParcelRegistry:
    """
    Loop over the menu until the user chooses 0 or input ends.

    Returns:
        The registry the session operated on
    """
    if registry is None:
        registry = ParcelRegistry()
    if console is None:
        console = Console()

    handlers = {
        "1": lambda: register_parcel(registry),
        "2": lambda: update_parcel(registry),
        "3": lambda: load_parcel(registry),
        "4": lambda: dispatch_parcel(registry),
        "5": lambda: complete_delivery(registry),
        "6": lambda: undo_action(registry),
    }

    while True:
        display_menu(console)
        try:
            choice = _ask("Enter choice")
        except click.Abort:
            break

        try:
            choice = str(int(choice))
        except ValueError:
            console.print("[red]Invalid input type. Please enter a number.[/red]")
            continue

        if choice == "0":
            break

        try:
            if choice == "7":
                perform(lambda: show_report(registry, console))
            elif choice in handlers:
                print_result(perform(handlers[choice]), console)
            else:
                console.print("[red]Invalid choice. Please try again (0-7).[/red]")
        except click.Abort:
            break

    console.print(f"Exiting {settings.app_name}. Goodbye!")
    return registry
