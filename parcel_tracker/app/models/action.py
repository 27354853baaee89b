"""
Undo action record.
"""

from dataclasses import dataclass

from parcel_tracker.app.models.action_enums import ActionType
from parcel_tracker.app.models.parcel import Parcel


@dataclass(frozen=True)
class Action:
    """
    A recorded mutation and the parcel snapshot needed to reverse it.
    
    For ADD the snapshot is the parcel as added, for UPDATE the parcel before
    the update, for DELETE the parcel as delivered.
    """
    type: ActionType
    data: Parcel
    
    def __repr__(self):
        return f"<Action(type='{self.type.value}', parcel_id={self.data.id})>"
