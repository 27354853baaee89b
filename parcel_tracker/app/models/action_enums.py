"""
Undo Action Type Enumeration.
"""

import enum


class ActionType(str, enum.Enum):
    """
    Mutating operations recorded on the undo stack.
    
    Reversal:
        ADD    → remove the parcel from the active set
        UPDATE → restore the previous weight
        DELETE → re-append the delivered parcel to the active set
    """
    ADD = "ADD"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
