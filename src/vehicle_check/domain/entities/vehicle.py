"""Vehicle entity as exposed by the vehicle directory."""

from typing import Any, Dict


class Vehicle:
    """Read-only snapshot of a vehicle that can be inspected."""

    def __init__(
        self,
        vehicle_id: str,
        registration: str,
        make: str,
        model: str,
        year: int
    ):
        if not vehicle_id:
            raise ValueError("Vehicle ID cannot be empty")
        self._id = vehicle_id
        self._registration = registration
        self._make = make
        self._model = model
        self._year = year

    @property
    def id(self) -> str:
        """Get vehicle identifier."""
        return self._id

    @property
    def registration(self) -> str:
        """Get vehicle registration."""
        return self._registration

    @property
    def make(self) -> str:
        """Get vehicle make."""
        return self._make

    @property
    def model(self) -> str:
        """Get vehicle model."""
        return self._model

    @property
    def year(self) -> int:
        """Get vehicle year."""
        return self._year

    @property
    def display_label(self) -> str:
        """Get the label shown in the vehicle selector."""
        return f"{self._registration} - {self._make} {self._model} ({self._year})"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Vehicle":
        """Build a vehicle from its wire representation."""
        return cls(
            vehicle_id=str(data["id"]),
            registration=data["registration"],
            make=data["make"],
            model=data["model"],
            year=int(data["year"])
        )

    def to_dict(self) -> Dict[str, Any]:
        """Get the wire representation."""
        return {
            "id": self._id,
            "registration": self._registration,
            "make": self._make,
            "model": self._model,
            "year": self._year,
        }

    def __eq__(self, other: object) -> bool:
        """Check equality based on identifier."""
        if not isinstance(other, Vehicle):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        """Hash based on identifier."""
        return hash(self._id)

    def __str__(self) -> str:
        """String representation."""
        return f"Vehicle({self._id}, {self._registration})"
