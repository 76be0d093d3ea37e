"""In-memory repository implementations for the reference check backend."""

from typing import Dict, Iterable, List, Optional
from uuid import UUID

from src.vehicle_check.application.ports.repositories import CheckRepository, VehicleRepository
from src.vehicle_check.domain.entities.check_record import CheckRecord
from src.vehicle_check.domain.entities.vehicle import Vehicle


def sample_vehicles() -> List[Vehicle]:
    """Vehicles seeded into a fresh development backend."""
    return [
        Vehicle("v1", "ABC123", "Ford", "Focus", 2019),
        Vehicle("v2", "XYZ789", "Toyota", "Hilux", 2021),
        Vehicle("v3", "DEF456", "Volkswagen", "Transporter", 2017),
    ]


class InMemoryVehicleRepository(VehicleRepository):
    """In-memory implementation of vehicle repository."""

    def __init__(self, vehicles: Optional[Iterable[Vehicle]] = None):
        self._vehicles: Dict[str, Vehicle] = {}
        for vehicle in vehicles or []:
            self._vehicles[vehicle.id] = vehicle

    async def save(self, vehicle: Vehicle) -> Vehicle:
        """Save a vehicle."""
        self._vehicles[vehicle.id] = vehicle
        return vehicle

    async def find_by_id(self, vehicle_id: str) -> Optional[Vehicle]:
        """Find vehicle by ID."""
        return self._vehicles.get(vehicle_id)

    async def find_all(self) -> List[Vehicle]:
        """Find all vehicles."""
        return list(self._vehicles.values())


class InMemoryCheckRepository(CheckRepository):
    """In-memory implementation of check repository."""

    def __init__(self):
        self._checks: Dict[UUID, CheckRecord] = {}

    async def save(self, check: CheckRecord) -> CheckRecord:
        """Save a check."""
        self._checks[check.id] = check
        return check

    async def find_by_id(self, check_id: UUID) -> Optional[CheckRecord]:
        """Find check by ID."""
        return self._checks.get(check_id)

    async def find_by_vehicle(self, vehicle_id: str) -> List[CheckRecord]:
        """Find all checks for a vehicle."""
        return [check for check in self._checks.values() if check.vehicle_id == vehicle_id]

    async def find_all(self) -> List[CheckRecord]:
        """Find all checks, oldest first."""
        return sorted(self._checks.values(), key=lambda check: check.created_at)
