"""
Loading queue for parcels awaiting dispatch.

Parcels are served by urgency: the lowest priority number leaves first.
Parcels with equal priority leave in the order they were loaded.
"""

import heapq
import itertools
from typing import List, Tuple

from parcel_tracker.app.models.parcel import Parcel


class LoadingQueue:
    """Min-heap of parcel copies keyed by (priority, load sequence)."""
    
    def __init__(self):
        self._heap: List[Tuple[int, int, Parcel]] = []
        self._sequence = itertools.count()
    
    def push(self, parcel: Parcel) -> None:
        heapq.heappush(self._heap, (parcel.priority, next(self._sequence), parcel.copy()))
    
    def pop(self) -> Parcel:
        """
        Remove and return the most urgent parcel.
        
        Raises:
            IndexError: If the queue is empty
        """
        _, _, parcel = heapq.heappop(self._heap)
        return parcel
    
    def snapshot(self) -> List[Parcel]:
        """Queued parcels in dispatch order."""
        return [parcel.copy() for _, _, parcel in sorted(self._heap)]
    
    def __len__(self) -> int:
        return len(self._heap)
    
    def __bool__(self) -> bool:
        return bool(self._heap)
