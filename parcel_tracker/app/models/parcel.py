"""
Parcel record.

A parcel is a shipment tracked by the registry. Records are copied, never
shared, whenever they move between containers.
"""

from dataclasses import dataclass, replace

# Delivery priority range, 1 = most urgent
PRIORITY_MIN = 1
PRIORITY_MAX = 5


@dataclass
class Parcel:
    """
    Parcel model for the tracker.
    
    Only `weight` is ever mutated after registration.
    """
    id: int
    sender: str
    recipient: str
    address: str
    weight: float
    priority: int
    
    def copy(self) -> "Parcel":
        return replace(self)
    
    def __repr__(self):
        return f"<Parcel(id={self.id}, recipient='{self.recipient}', weight={self.weight}, priority={self.priority})>"
