"""Check service validating and recording completed checks."""

import logging
import math
from typing import List, Optional, Sequence, TYPE_CHECKING

from src.vehicle_check.application.errors import CheckValidationError
from src.vehicle_check.domain.entities.check_record import CheckRecord
from src.vehicle_check.domain.entities.draft_inspection import NOTE_MAX_LENGTH
from src.vehicle_check.domain.entities.vehicle import Vehicle
from src.vehicle_check.domain.value_objects.checklist import (
    DEFAULT_CHECKLIST_KEYS,
    CheckItem,
    CheckItemKey,
)
from src.vehicle_check.domain.value_objects.field_error import FieldError
from src.vehicle_check.infrastructure.logging import get_logger, log_with_extra

if TYPE_CHECKING:
    from src.vehicle_check.application.ports.repositories import CheckRepository, VehicleRepository


class CheckService:
    """Service behind the reference check backend."""

    def __init__(
        self,
        vehicle_repository: "VehicleRepository",
        check_repository: "CheckRepository",
        checklist_keys: Sequence[CheckItemKey] = DEFAULT_CHECKLIST_KEYS,
        note_max_length: int = NOTE_MAX_LENGTH
    ):
        """Initialize check service with repository dependencies."""
        self._vehicle_repository = vehicle_repository
        self._check_repository = check_repository
        self._checklist_keys = tuple(checklist_keys)
        self._note_max_length = note_max_length
        self._logger = get_logger(__name__)

    async def list_vehicles(self) -> List[Vehicle]:
        """List every selectable vehicle."""
        return await self._vehicle_repository.find_all()

    async def list_checks(self, vehicle_id: Optional[str] = None) -> List[CheckRecord]:
        """List recorded checks, optionally for one vehicle."""
        if vehicle_id:
            return await self._check_repository.find_by_vehicle(vehicle_id)
        return await self._check_repository.find_all()

    async def record_check(
        self,
        vehicle_id: Optional[str],
        odometer_km: Optional[float],
        items: Optional[List[CheckItem]],
        note: Optional[str] = None
    ) -> CheckRecord:
        """Validate and store a completed check.

        Args:
            vehicle_id: Identifier of an existing vehicle
            odometer_km: Positive odometer reading in kilometres
            items: One item per configured checklist key
            note: Optional free-text note

        Returns:
            The stored check

        Raises:
            CheckValidationError: With every field failure, in field order
        """
        details: List[FieldError] = []

        if vehicle_id is None or not vehicle_id.strip():
            details.append(FieldError("vehicleId", "required"))
        elif await self._vehicle_repository.find_by_id(vehicle_id) is None:
            details.append(FieldError("vehicleId", "unknown vehicle"))

        if odometer_km is None or not math.isfinite(odometer_km) or odometer_km <= 0:
            details.append(FieldError("odometerKm", "must be a positive number"))

        details.extend(self._validate_items(items))

        if note is not None and len(note) > self._note_max_length:
            details.append(FieldError("note", f"must be at most {self._note_max_length} characters"))

        if details:
            log_with_extra(
                self._logger,
                logging.WARNING,
                f"Rejected check for vehicle '{vehicle_id}'",
                vehicle_id=vehicle_id,
                validation_errors=[detail.format_message() for detail in details]
            )
            raise CheckValidationError(details)

        check = CheckRecord(
            vehicle_id=vehicle_id,
            odometer_km=odometer_km,
            items=items,
            note=note or None
        )
        saved = await self._check_repository.save(check)

        log_with_extra(
            self._logger,
            logging.INFO,
            f"Check recorded for vehicle '{vehicle_id}'",
            check_id=str(saved.id),
            vehicle_id=vehicle_id,
            odometer_km=odometer_km,
            failed_items=[item.key.value for item in saved.failed_items]
        )
        return saved

    def _validate_items(self, items: Optional[List[CheckItem]]) -> List[FieldError]:
        if not items:
            return [FieldError("items", "required")]

        details = []
        seen = set()
        for item in items:
            if item.key in seen:
                details.append(FieldError("items", f"duplicate key {item.key.value}"))
            elif item.key not in self._checklist_keys:
                details.append(FieldError("items", f"unexpected key {item.key.value}"))
            seen.add(item.key)

        for key in self._checklist_keys:
            if key not in seen:
                details.append(FieldError("items", f"missing key {key.value}"))
        return details
