"""Checklist keys, statuses and the default checklist."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence


class CheckItemKey(Enum):
    """Enumeration of inspectable checklist points."""

    TYRES = "TYRES"
    BRAKES = "BRAKES"
    LIGHTS = "LIGHTS"
    OIL = "OIL"
    COOLANT = "COOLANT"

    def get_description(self) -> str:
        """Get human-readable description of the checklist point."""
        descriptions = {
            CheckItemKey.TYRES: "Tread depth, pressure, sidewall condition",
            CheckItemKey.BRAKES: "Pedal feel, pads, parking brake",
            CheckItemKey.LIGHTS: "Headlights, indicators, brake lights",
            CheckItemKey.OIL: "Engine oil level and leaks",
            CheckItemKey.COOLANT: "Coolant level and hoses",
        }
        return descriptions.get(self, "Unknown checklist point")


class CheckItemStatus(Enum):
    """Two-valued status of a checklist point."""

    OK = "OK"
    FAIL = "FAIL"

    @classmethod
    def from_checked(cls, checked: bool) -> "CheckItemStatus":
        """Convert a checkbox value (checked means OK) to a status."""
        return cls.OK if checked else cls.FAIL

    @property
    def is_ok(self) -> bool:
        """Check if the status is OK."""
        return self is CheckItemStatus.OK


@dataclass(frozen=True)
class CheckItem:
    """Immutable value object pairing a checklist key with its status."""

    key: CheckItemKey
    status: CheckItemStatus = CheckItemStatus.OK

    def __post_init__(self) -> None:
        """Validate check item data."""
        if not isinstance(self.key, CheckItemKey):
            raise ValueError("key must be a CheckItemKey enum")
        if not isinstance(self.status, CheckItemStatus):
            raise ValueError("status must be a CheckItemStatus enum")

    def with_status(self, status: CheckItemStatus) -> "CheckItem":
        """Create a new CheckItem with a different status."""
        return CheckItem(key=self.key, status=status)


DEFAULT_CHECKLIST_KEYS: tuple[CheckItemKey, ...] = (
    CheckItemKey.TYRES,
    CheckItemKey.BRAKES,
    CheckItemKey.LIGHTS,
)


def default_checklist(keys: Sequence[CheckItemKey] = DEFAULT_CHECKLIST_KEYS) -> List[CheckItem]:
    """Build one OK item per configured key, in configured order."""
    if len(set(keys)) != len(keys):
        raise ValueError("Duplicate checklist keys in configuration")
    return [CheckItem(key=key, status=CheckItemStatus.OK) for key in keys]
