"""Draft inspection entity holding an in-progress check."""

from typing import List, Sequence

from ..value_objects.checklist import (
    DEFAULT_CHECKLIST_KEYS,
    CheckItem,
    CheckItemKey,
    CheckItemStatus,
    default_checklist,
)

NOTE_MAX_LENGTH = 300


class DraftInspection:
    """In-memory inspection being edited in one form session.

    Every configured checklist key carries exactly one status at all times.
    Text fields are stored verbatim; parsing and trimming happen when the
    submission payload is built.
    """

    def __init__(self, checklist_keys: Sequence[CheckItemKey] = DEFAULT_CHECKLIST_KEYS):
        self._checklist_keys = tuple(checklist_keys)
        self._selected_vehicle_id = ""
        self._odometer_text = ""
        self._note = ""
        self._items: List[CheckItem] = default_checklist(self._checklist_keys)

    @property
    def checklist_keys(self) -> tuple[CheckItemKey, ...]:
        """Get configured checklist keys in display order."""
        return self._checklist_keys

    @property
    def selected_vehicle_id(self) -> str:
        """Get selected vehicle identifier ("" when unselected)."""
        return self._selected_vehicle_id

    @property
    def odometer_text(self) -> str:
        """Get raw odometer text."""
        return self._odometer_text

    @property
    def note(self) -> str:
        """Get raw note text."""
        return self._note

    @property
    def items(self) -> List[CheckItem]:
        """Get checklist items."""
        return self._items.copy()

    def select_vehicle(self, vehicle_id: str) -> None:
        self._selected_vehicle_id = vehicle_id

    def set_odometer_text(self, text: str) -> None:
        self._odometer_text = text

    def set_note(self, text: str) -> None:
        self._note = text

    def set_item_status(self, key: CheckItemKey, status: CheckItemStatus) -> bool:
        """Replace the status of the item matching key.

        Returns False, leaving the checklist unchanged, when key is not part
        of the configured checklist.
        """
        if key not in self._checklist_keys:
            return False
        if not isinstance(status, CheckItemStatus):
            raise ValueError("status must be a CheckItemStatus enum")

        self._items = [
            item.with_status(status) if item.key == key else item
            for item in self._items
        ]
        return True

    def get_item_status(self, key: CheckItemKey) -> CheckItemStatus | None:
        """Get status for a specific checklist key."""
        for item in self._items:
            if item.key == key:
                return item.status
        return None

    def reset(self) -> None:
        """Return to the freshly created state."""
        self._selected_vehicle_id = ""
        self._odometer_text = ""
        self._note = ""
        self._items = default_checklist(self._checklist_keys)

    def copy(self) -> "DraftInspection":
        """Create an independent copy of the draft."""
        clone = DraftInspection(self._checklist_keys)
        clone._selected_vehicle_id = self._selected_vehicle_id
        clone._odometer_text = self._odometer_text
        clone._note = self._note
        clone._items = self._items.copy()
        return clone

    def is_pristine(self) -> bool:
        """Check if the draft equals a freshly created one."""
        return self == DraftInspection(self._checklist_keys)

    def __eq__(self, other: object) -> bool:
        """Check equality based on all editable fields."""
        if not isinstance(other, DraftInspection):
            return False
        return (
            self._checklist_keys == other._checklist_keys
            and self._selected_vehicle_id == other._selected_vehicle_id
            and self._odometer_text == other._odometer_text
            and self._note == other._note
            and self._items == other._items
        )

    def __repr__(self) -> str:
        """Detailed string representation."""
        return (
            f"DraftInspection(vehicle_id='{self._selected_vehicle_id}', "
            f"odometer_text='{self._odometer_text}', note_length={len(self._note)}, "
            f"items={[(item.key.value, item.status.value) for item in self._items]})"
        )
