"""Unit tests for the draft inspection entity."""

import pytest

from src.vehicle_check.domain.entities.draft_inspection import DraftInspection
from src.vehicle_check.domain.value_objects.checklist import (
    CheckItem,
    CheckItemKey,
    CheckItemStatus,
    default_checklist,
)


class TestDraftInspection:
    """Test cases for DraftInspection."""

    def test_initial_state(self):
        """Test a new draft is unselected, empty and all OK."""
        draft = DraftInspection()

        assert draft.selected_vehicle_id == ""
        assert draft.odometer_text == ""
        assert draft.note == ""
        assert draft.items == default_checklist()
        assert draft.is_pristine()

    def test_select_vehicle_round_trip(self):
        """Test selected vehicle id reads back exactly, including empty."""
        draft = DraftInspection()

        for vehicle_id in ["v1", "  spaced id ", ""]:
            draft.select_vehicle(vehicle_id)
            assert draft.selected_vehicle_id == vehicle_id

    def test_text_fields_stored_verbatim(self):
        """Test odometer and note text are not parsed or truncated."""
        draft = DraftInspection()
        long_note = "x" * 450

        draft.set_odometer_text(" 12,000 km ")
        draft.set_note(long_note)

        assert draft.odometer_text == " 12,000 km "
        assert draft.note == long_note

    def test_set_item_status(self):
        """Test item status replacement."""
        draft = DraftInspection()

        assert draft.set_item_status(CheckItemKey.BRAKES, CheckItemStatus.FAIL) is True

        assert draft.items == [
            CheckItem(CheckItemKey.TYRES, CheckItemStatus.OK),
            CheckItem(CheckItemKey.BRAKES, CheckItemStatus.FAIL),
            CheckItem(CheckItemKey.LIGHTS, CheckItemStatus.OK),
        ]
        assert draft.get_item_status(CheckItemKey.BRAKES) == CheckItemStatus.FAIL

    def test_set_item_status_idempotent(self):
        """Test setting the same status twice equals setting it once."""
        once = DraftInspection()
        twice = DraftInspection()

        once.set_item_status(CheckItemKey.LIGHTS, CheckItemStatus.FAIL)
        twice.set_item_status(CheckItemKey.LIGHTS, CheckItemStatus.FAIL)
        twice.set_item_status(CheckItemKey.LIGHTS, CheckItemStatus.FAIL)

        assert once == twice
        assert len(twice.items) == 3

    def test_unconfigured_key_is_ignored(self):
        """Test a key outside the configured checklist changes nothing."""
        draft = DraftInspection()

        assert draft.set_item_status(CheckItemKey.OIL, CheckItemStatus.FAIL) is False

        assert draft.is_pristine()
        assert draft.get_item_status(CheckItemKey.OIL) is None

    def test_invalid_status_rejected(self):
        """Test non-enum statuses are rejected."""
        draft = DraftInspection()

        with pytest.raises(ValueError):
            draft.set_item_status(CheckItemKey.TYRES, False)

    def test_items_returns_copy(self):
        """Test callers cannot mutate the checklist through items."""
        draft = DraftInspection()

        draft.items.clear()

        assert len(draft.items) == 3

    def test_reset(self):
        """Test reset returns every field to its initial value."""
        keys = (CheckItemKey.TYRES, CheckItemKey.OIL, CheckItemKey.COOLANT)
        draft = DraftInspection(keys)
        draft.select_vehicle("v1")
        draft.set_odometer_text("12000")
        draft.set_note("Wipers worn")
        draft.set_item_status(CheckItemKey.OIL, CheckItemStatus.FAIL)

        draft.reset()

        assert draft == DraftInspection(keys)
        assert draft.checklist_keys == keys

    def test_copy_is_independent(self):
        """Test copies do not share state."""
        draft = DraftInspection()
        draft.select_vehicle("v1")

        clone = draft.copy()
        clone.set_item_status(CheckItemKey.TYRES, CheckItemStatus.FAIL)

        assert clone.selected_vehicle_id == "v1"
        assert draft.get_item_status(CheckItemKey.TYRES) == CheckItemStatus.OK
        assert clone != draft

    def test_configured_keys_differ(self):
        """Test drafts with different checklists are not equal."""
        assert DraftInspection() != DraftInspection(tuple(CheckItemKey))
