"""
Undo stack (LIFO) of recorded actions.
"""

from typing import List, Optional

from parcel_tracker.app.models.action import Action
from parcel_tracker.app.models.action_enums import ActionType
from parcel_tracker.app.models.parcel import Parcel


class UndoStack:
    
    def __init__(self):
        self._actions: List[Action] = []
    
    def record(self, action_type: ActionType, parcel: Parcel) -> Action:
        """Push an action holding a copy of the given parcel."""
        action = Action(type=action_type, data=parcel.copy())
        self._actions.append(action)
        return action
    
    def pop(self) -> Action:
        """
        Remove and return the most recent action.
        
        Raises:
            IndexError: If no actions are recorded
        """
        return self._actions.pop()
    
    def peek(self) -> Optional[Action]:
        return self._actions[-1] if self._actions else None
    
    def __len__(self) -> int:
        return len(self._actions)
    
    def __bool__(self) -> bool:
        return bool(self._actions)
