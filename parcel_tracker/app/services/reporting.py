"""
Reporting Service.

Builds the summary report from the registry's containers and renders it for
the console. Focused on READ-ONLY operations.
"""

from typing import Iterable, List

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from parcel_tracker.app.core.config import settings
from parcel_tracker.app.models.parcel import PRIORITY_MAX, PRIORITY_MIN, Parcel
from parcel_tracker.app.schemas.report import DeliveryRecord, SummaryReport

NO_DELIVERIES_MESSAGE = "No deliveries completed yet."


class ReportingService:

    @staticmethod
    def build_summary(active: Iterable[Parcel], delivered: Iterable[Parcel]) -> SummaryReport:
        """
        Summarize active and delivered parcels.
        
        Average weight is taken over every parcel in both collections and is
        None when there are none.
        """
        active = list(active)
        delivered = list(delivered)
        
        # 1. Totals
        total_registered = len(active) + len(delivered)
        total_weight = sum(p.weight for p in active) + sum(p.weight for p in delivered)
        average_weight = (total_weight / total_registered) if total_registered > 0 else None
        
        # 2. Pending by priority (out-of-range priorities are not counted)
        levels = range(PRIORITY_MIN, PRIORITY_MAX + 1)
        pending_by_priority = {level: 0 for level in levels}
        for parcel in active:
            if parcel.priority in pending_by_priority:
                pending_by_priority[parcel.priority] += 1
        
        # 3. Delivery history
        deliveries = [
            DeliveryRecord(id=p.id, recipient=p.recipient, priority=p.priority)
            for p in delivered
        ]
        
        return SummaryReport(
            total_registered=total_registered,
            total_delivered=len(delivered),
            average_weight=average_weight,
            pending_by_priority=pending_by_priority,
            deliveries=deliveries
        )

    @staticmethod
    def render(report: SummaryReport, console: Console) -> None:
        """Print the report to a rich console."""
        console.print(f"\n[bold]--- {settings.app_name.upper()} SUMMARY REPORT ---[/bold]")
        console.print(f"Total Parcels Registered: {report.total_registered}")
        console.print(f"Total Parcels Delivered: {report.total_delivered}")
        if report.average_weight is not None:
            console.print(f"Average Parcel Weight: {report.average_weight:g} kg")
        
        pending = Table(title="Parcels Pending by Priority Level")
        pending.add_column("Priority", justify="right")
        pending.add_column("Pending", justify="right")
        for level, count in report.pending_by_priority.items():
            pending.add_row(str(level), str(count))
        console.print(pending)
        
        console.print("\nDelivery History (Audit Trail - Delivered Parcels):")
        for line in ReportingService.delivery_lines(report):
            console.print(f"  {escape(line)}")

    @staticmethod
    def delivery_lines(report: SummaryReport) -> List[str]:
        if not report.deliveries:
            return [NO_DELIVERIES_MESSAGE]
        return [
            f"[DELIVERED] P{d.id} to {d.recipient} (P{d.priority})"
            for d in report.deliveries
        ]
