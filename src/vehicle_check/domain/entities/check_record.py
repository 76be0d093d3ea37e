"""Recorded check entity kept by the reference check backend."""

from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID, uuid4

from ..value_objects.checklist import CheckItem, CheckItemStatus


class CheckRecord:
    """A completed vehicle check accepted by the persistence service."""

    def __init__(
        self,
        vehicle_id: str,
        odometer_km: float,
        items: List[CheckItem],
        note: Optional[str] = None,
        check_id: Optional[UUID] = None,
        created_at: Optional[datetime] = None
    ):
        self._id = check_id or uuid4()
        self._vehicle_id = vehicle_id
        self._odometer_km = odometer_km
        self._items = list(items)
        self._note = note
        self._created_at = created_at or datetime.utcnow()

    @property
    def id(self) -> UUID:
        """Get check ID."""
        return self._id

    @property
    def vehicle_id(self) -> str:
        """Get checked vehicle identifier."""
        return self._vehicle_id

    @property
    def odometer_km(self) -> float:
        """Get odometer reading in kilometres."""
        return self._odometer_km

    @property
    def items(self) -> List[CheckItem]:
        """Get checklist items."""
        return self._items.copy()

    @property
    def note(self) -> Optional[str]:
        """Get optional note."""
        return self._note

    @property
    def created_at(self) -> datetime:
        """Get creation timestamp."""
        return self._created_at

    @property
    def failed_items(self) -> List[CheckItem]:
        """Get items marked as FAIL."""
        return [item for item in self._items if item.status == CheckItemStatus.FAIL]

    @property
    def passed(self) -> bool:
        """Check if every item is OK."""
        return not self.failed_items

    def to_dict(self) -> Dict[str, Any]:
        """Get the wire representation."""
        data: Dict[str, Any] = {
            "id": str(self._id),
            "vehicleId": self._vehicle_id,
            "odometerKm": self._odometer_km,
            "items": [{"key": item.key.value, "status": item.status.value} for item in self._items],
            "passed": self.passed,
            "createdAt": self._created_at.isoformat() + "Z",
        }
        if self._note is not None:
            data["note"] = self._note
        return data

    def __eq__(self, other: object) -> bool:
        """Check equality based on check ID."""
        if not isinstance(other, CheckRecord):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        """Hash based on check ID."""
        return hash(self._id)

    def __str__(self) -> str:
        """String representation."""
        return f"CheckRecord({self._id}, {self._vehicle_id})"
