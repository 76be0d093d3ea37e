"""Pydantic schemas for the reference check backend."""

from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from ....domain.value_objects.checklist import CheckItem, CheckItemKey, CheckItemStatus
from ....domain.value_objects.field_error import FieldError


class VehicleResponse(BaseModel):
    """Response model for a selectable vehicle."""
    id: str
    registration: str
    make: str
    model: str
    year: int


class CheckItemSchema(BaseModel):
    """A checklist key with its status."""
    key: CheckItemKey
    status: CheckItemStatus

    def to_domain(self) -> CheckItem:
        return CheckItem(key=self.key, status=self.status)


class CreateCheckRequest(BaseModel):
    """Request model for recording a check.

    Every field is optional at the schema level so that missing values are
    reported by the check service as field-level validation errors.
    """
    vehicle_id: Optional[str] = Field(None, alias="vehicleId", description="Identifier of the checked vehicle")
    odometer_km: Optional[float] = Field(None, alias="odometerKm", description="Odometer reading in kilometres")
    items: Optional[List[CheckItemSchema]] = Field(None, description="One entry per checklist key")
    note: Optional[str] = Field(None, description="Optional free-text note")

    class Config:
        populate_by_name = True


class CheckResponse(BaseModel):
    """Response model for a recorded check."""
    id: UUID
    vehicle_id: str = Field(..., alias="vehicleId")
    odometer_km: float = Field(..., alias="odometerKm")
    items: List[CheckItemSchema]
    note: Optional[str] = None
    passed: bool
    created_at: datetime = Field(..., alias="createdAt")

    class Config:
        populate_by_name = True


class CheckListResponse(BaseModel):
    """Response model for listing checks."""
    checks: List[CheckResponse]
    total: int


def error_envelope(code: str, message: str, details: Optional[List[FieldError]] = None) -> Dict[str, Any]:
    """Build the ``{"error": {...}}`` body returned on failures."""
    error: Dict[str, Any] = {"code": code, "message": message}
    if details is not None:
        error["details"] = [detail.to_dict() for detail in details]
    return {"error": error}
