"""
Operation result schema returned to the menu.
"""

from pydantic import BaseModel
from typing import Any, Dict, Optional

from parcel_tracker.app.schemas.parcel import ParcelResponse


class OperationResult(BaseModel):
    """Outcome of a single registry operation."""
    ok: bool
    message: str
    error_code: Optional[str] = None
    details: Dict[str, Any] = {}
    parcel: Optional[ParcelResponse] = None
