"""
Tests for the summary report.
"""

from rich.console import Console

from parcel_tracker.app.services.reporting import NO_DELIVERIES_MESSAGE, ReportingService


def test_report_empty_registry(registry):
    """No parcels means no average and an empty audit section."""
    report = registry.generate_report()
    
    assert report.total_registered == 0
    assert report.total_delivered == 0
    assert report.average_weight is None
    assert report.pending_by_priority == {1: 0, 2: 0, 3: 0, 4: 0, 5: 0}
    assert report.deliveries == []
    assert ReportingService.delivery_lines(report) == [NO_DELIVERIES_MESSAGE]


def test_report_averages_active_and_delivered(registry, make_parcel):
    make_parcel(1, weight=2.0, priority=1)
    make_parcel(2, weight=4.0, priority=1)
    make_parcel(3, weight=9.0, priority=5)
    registry.complete_delivery(3)
    
    report = registry.generate_report()
    
    assert report.total_registered == 3
    assert report.total_delivered == 1
    assert report.average_weight == 5.0
    assert report.pending_by_priority == {1: 2, 2: 0, 3: 0, 4: 0, 5: 0}
    assert [(d.id, d.recipient, d.priority) for d in report.deliveries] == [(3, "recipient3", 5)]
    assert ReportingService.delivery_lines(report) == ["[DELIVERED] P3 to recipient3 (P5)"]


def test_report_does_not_mutate(registry, make_parcel):
    make_parcel(1)
    registry.load(1)
    
    registry.generate_report()
    registry.generate_report()
    
    assert len(registry.active_parcels()) == 1
    assert len(registry.queued_parcels()) == 1
    assert registry.undo_depth == 1


def test_report_counts_duplicate_audit_entries(registry, make_parcel):
    """Undone deliveries stay in the audit log and are counted again."""
    make_parcel(1, weight=3.0)
    registry.complete_delivery(1)
    registry.undo()
    
    report = registry.generate_report()
    
    assert report.total_registered == 2
    assert report.total_delivered == 1
    assert report.average_weight == 3.0


def test_end_to_end_dispatch_and_report(registry):
    """Two parcels loaded and dispatched by urgency, then summarized."""
    registry.register(1, "Ada", "Bola", "Yaba", 5.0, 2)
    registry.register(2, "Chi", "Dayo", "Lekki", 3.0, 1)
    registry.load(1)
    registry.load(2)
    
    first = registry.dispatch_next()
    second = registry.dispatch_next()
    report = registry.generate_report()
    
    assert (first.id, second.id) == (2, 1)
    assert report.total_registered == 2
    assert report.total_delivered == 0
    assert report.average_weight == 4.0


def test_render_writes_summary(registry, make_parcel):
    make_parcel(1, weight=2.0, priority=2)
    registry.complete_delivery(1)
    console = Console(record=True, width=100)
    
    ReportingService.render(registry.generate_report(), console)
    text = console.export_text()
    
    assert "Total Parcels Registered: 1" in text
    assert "Average Parcel Weight: 2 kg" in text
    assert "[DELIVERED] P1 to recipient1 (P2)" in text
