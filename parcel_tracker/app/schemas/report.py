"""
Summary report schemas.
"""

from pydantic import BaseModel
from typing import Dict, List, Optional


class DeliveryRecord(BaseModel):
    """A delivered parcel as listed in the audit section."""
    id: int
    recipient: str
    priority: int


class SummaryReport(BaseModel):
    """Registry-wide summary."""
    total_registered: int
    total_delivered: int
    average_weight: Optional[float]
    pending_by_priority: Dict[int, int]
    deliveries: List[DeliveryRecord]
