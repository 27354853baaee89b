"""
Centralized Test Configuration.
"""

import pytest

from parcel_tracker.app.core.config import settings
from parcel_tracker.app.services.registry import ParcelRegistry


@pytest.fixture
def registry():
    """Fresh registry with default settings."""
    return ParcelRegistry()


@pytest.fixture
def strict_registry():
    """Registry that rejects duplicate IDs and reconciles the audit log on undo."""
    config = settings.model_copy(update={
        "enforce_unique_ids": True,
        "reconcile_delivered_on_undo": True,
    })
    return ParcelRegistry(config)


@pytest.fixture
def make_parcel(registry):
    """Register a parcel on the default registry with sensible defaults."""
    def _make(parcel_id: int, weight: float = 1.0, priority: int = 3, **overrides):
        fields = {
            "sender": f"sender{parcel_id}",
            "recipient": f"recipient{parcel_id}",
            "address": f"{parcel_id}_Market_Road",
        }
        fields.update(overrides)
        return registry.register(parcel_id=parcel_id, weight=weight, priority=priority, **fields)
    return _make
