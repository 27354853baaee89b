"""
Delivered-parcel audit log.

Append-only history of completed deliveries, used for reporting.
"""

import logging
from typing import List, Optional

from parcel_tracker.app.models.parcel import Parcel

logger = logging.getLogger("parcel_tracker")


class DeliveredLog:
    """
    Audit trail of delivered parcels.
    
    Entries are only ever appended, except when undo reconciliation is
    enabled, in which case `retract` removes the newest entry for a parcel.
    """
    
    def __init__(self):
        self._entries: List[Parcel] = []
    
    def record(self, parcel: Parcel) -> Parcel:
        """
        Append a delivered parcel to the audit trail.
        
        Args:
            parcel: Parcel that completed delivery
            
        Returns:
            The stored copy
        """
        entry = parcel.copy()
        self._entries.append(entry)
        logger.info("Delivery recorded", extra={"parcel_id": entry.id, "audit_size": len(self._entries)})
        return entry
    
    def retract(self, parcel_id: int) -> Optional[Parcel]:
        """
        Remove the most recent entry for a parcel.
        
        Args:
            parcel_id: ID of the parcel whose delivery is being reversed
            
        Returns:
            The removed entry, or None if the parcel never appears
        """
        for index in range(len(self._entries) - 1, -1, -1):
            if self._entries[index].id == parcel_id:
                return self._entries.pop(index)
        return None
    
    def entries(self) -> List[Parcel]:
        return [parcel.copy() for parcel in self._entries]
    
    def __len__(self) -> int:
        return len(self._entries)
