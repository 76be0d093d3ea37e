"""Port interfaces for the external services the check form consumes."""

from abc import ABC, abstractmethod
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from src.vehicle_check.domain.entities.vehicle import Vehicle
    from src.vehicle_check.application.services.check_payload import CreateCheckPayload


class VehicleDirectory(ABC):
    """Port interface for the vehicle directory service."""

    @abstractmethod
    async def list_vehicles(self) -> List["Vehicle"]:
        """List every selectable vehicle."""
        raise NotImplementedError


class CheckPersistence(ABC):
    """Port interface for the check persistence service."""

    @abstractmethod
    async def create_check(self, payload: "CreateCheckPayload") -> None:
        """Record a completed check.

        Raises:
            CheckApiError: If the service rejects the check or cannot be reached
        """
        raise NotImplementedError
