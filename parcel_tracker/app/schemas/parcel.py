"""
Parcel Pydantic schemas.

Defines the input models used to parse raw menu text into typed values and
the response model used to report a parcel back.
"""

from pydantic import BaseModel, Field

from parcel_tracker.app.models.parcel import PRIORITY_MAX, PRIORITY_MIN

# Names and addresses are single tokens
TOKEN_PATTERN = r"^\S+$"


class ParcelCreate(BaseModel):
    """Schema for registering a new parcel."""
    id: int = Field(..., description="Parcel ID")
    sender: str = Field(..., pattern=TOKEN_PATTERN, description="Sender name")
    recipient: str = Field(..., pattern=TOKEN_PATTERN, description="Recipient name")
    address: str = Field(..., pattern=TOKEN_PATTERN, description="Delivery address")
    weight: float = Field(..., allow_inf_nan=False, description="Weight in kilograms")
    priority: int = Field(
        ...,
        ge=PRIORITY_MIN,
        le=PRIORITY_MAX,
        description="Delivery priority (1=High, 5=Low)"
    )


class ParcelLookup(BaseModel):
    """Schema for operations addressed by parcel ID."""
    id: int


class ParcelWeightUpdate(BaseModel):
    """Schema for updating a parcel's weight."""
    weight: float = Field(..., allow_inf_nan=False)


class ParcelResponse(BaseModel):
    """Schema for parcel response."""
    id: int
    sender: str
    recipient: str
    address: str
    weight: float
    priority: int
    
    class Config:
        from_attributes = True
