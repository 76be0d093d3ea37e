"""Port interfaces for repositories used by the reference check backend."""

from abc import ABC, abstractmethod
from typing import List, Optional, TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from src.vehicle_check.domain.entities.vehicle import Vehicle
    from src.vehicle_check.domain.entities.check_record import CheckRecord


class VehicleRepository(ABC):
    """Port interface for vehicle repository."""

    @abstractmethod
    async def save(self, vehicle: "Vehicle") -> "Vehicle":
        """Save a vehicle."""
        raise NotImplementedError

    @abstractmethod
    async def find_by_id(self, vehicle_id: str) -> Optional["Vehicle"]:
        """Find vehicle by ID."""
        raise NotImplementedError

    @abstractmethod
    async def find_all(self) -> List["Vehicle"]:
        """Find all vehicles."""
        raise NotImplementedError


class CheckRepository(ABC):
    """Port interface for check repository."""

    @abstractmethod
    async def save(self, check: "CheckRecord") -> "CheckRecord":
        """Save a check."""
        raise NotImplementedError

    @abstractmethod
    async def find_by_id(self, check_id: UUID) -> Optional["CheckRecord"]:
        """Find check by ID."""
        raise NotImplementedError

    @abstractmethod
    async def find_by_vehicle(self, vehicle_id: str) -> List["CheckRecord"]:
        """Find all checks for a vehicle."""
        raise NotImplementedError

    @abstractmethod
    async def find_all(self) -> List["CheckRecord"]:
        """Find all checks, oldest first."""
        raise NotImplementedError
