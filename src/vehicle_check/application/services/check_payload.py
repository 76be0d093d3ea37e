"""Building the create-check request from a draft inspection."""

import math
import re
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from src.vehicle_check.domain.entities.draft_inspection import DraftInspection
from src.vehicle_check.domain.value_objects.checklist import CheckItem

_DECIMAL_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_odometer(text: str) -> float:
    """Parse the longest decimal prefix of text.

    Leading whitespace is skipped and trailing garbage ignored, so "12000 km"
    parses as 12000.0. Text without a numeric prefix yields NaN; it is sent
    as-is and left for the server to reject.
    """
    match = _DECIMAL_PREFIX.match(text.lstrip())
    if not match:
        return math.nan

    literal = match.group(0)
    if literal.lstrip("+-") == "Infinity":
        return -math.inf if literal.startswith("-") else math.inf
    return float(literal)


class CreateCheckPayload(BaseModel):
    """Request sent to the check persistence service."""

    vehicle_id: str = Field(..., alias="vehicleId")
    odometer_km: float = Field(..., alias="odometerKm")
    items: List[CheckItem]
    note: Optional[str] = None

    class Config:
        populate_by_name = True
        frozen = True

    def to_wire(self) -> Dict[str, Any]:
        """Get the JSON body; non-finite odometer values become null."""
        data: Dict[str, Any] = {
            "vehicleId": self.vehicle_id,
            "odometerKm": self.odometer_km if math.isfinite(self.odometer_km) else None,
            "items": [{"key": item.key.value, "status": item.status.value} for item in self.items],
        }
        if self.note is not None:
            data["note"] = self.note
        return data


def build_payload(draft: DraftInspection) -> CreateCheckPayload:
    """Snapshot the draft into a create-check request."""
    note = draft.note.strip()
    return CreateCheckPayload(
        vehicle_id=draft.selected_vehicle_id,
        odometer_km=parse_odometer(draft.odometer_text),
        items=draft.items,
        note=note or None,
    )
