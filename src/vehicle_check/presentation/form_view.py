"""View model turning check form state into renderable values."""

from typing import List, Optional

from pydantic import BaseModel

from ..application.services.submission_controller import FormState, VehicleListStatus
from ..domain.entities.draft_inspection import NOTE_MAX_LENGTH
from ..domain.value_objects.checklist import CheckItemKey, CheckItemStatus

VEHICLE_PLACEHOLDER = "Select a vehicle"
CHECKLIST_HELPER = "Checked means OK. Unchecked means FAIL."
VALIDATION_ERRORS_HEADING = "Validation errors:"
SUBMIT_LABEL = "Submit Check"
SUBMITTING_LABEL = "Submitting..."


class VehicleOption(BaseModel):
    """One entry of the vehicle selector."""
    value: str
    label: str
    selected: bool = False


class ChecklistRow(BaseModel):
    """One checklist item as rendered."""
    key: CheckItemKey
    label: str
    hint: str
    status: CheckItemStatus
    checked: bool
    css_class: str


class FormView(BaseModel):
    """Everything a renderer needs to draw the check form."""
    vehicle_options: List[VehicleOption]
    vehicles_loading: bool
    vehicles_error: Optional[str] = None
    odometer_text: str
    note: str
    note_counter: str
    note_max_length: int
    checklist_helper: str = CHECKLIST_HELPER
    checklist: List[ChecklistRow]
    banner_error: Optional[str] = None
    validation_heading: Optional[str] = None
    validation_errors: List[str]
    submit_label: str
    submit_disabled: bool


def render_form(state: FormState, note_max_length: int = NOTE_MAX_LENGTH) -> FormView:
    """Render a form state snapshot.

    The vehicle selector always starts with the unselected placeholder, so
    it is usable while the vehicle list is loading or after a load failure.
    """
    options = [VehicleOption(
        value="",
        label=VEHICLE_PLACEHOLDER,
        selected=state.selected_vehicle_id == ""
    )]
    options.extend(
        VehicleOption(
            value=vehicle.id,
            label=vehicle.display_label,
            selected=vehicle.id == state.selected_vehicle_id
        )
        for vehicle in state.vehicles
    )

    checklist = [
        ChecklistRow(
            key=item.key,
            label=item.key.value,
            hint=item.key.get_description(),
            status=item.status,
            checked=item.status.is_ok,
            css_class="ok" if item.status.is_ok else "fail"
        )
        for item in state.items
    ]

    return FormView(
        vehicle_options=options,
        vehicles_loading=state.vehicles_status == VehicleListStatus.LOADING,
        vehicles_error=state.vehicles_error,
        odometer_text=state.odometer_text,
        note=state.note,
        note_counter=f"{len(state.note)}/{note_max_length}",
        note_max_length=note_max_length,
        checklist=checklist,
        banner_error=state.error,
        validation_heading=VALIDATION_ERRORS_HEADING if state.validation_errors else None,
        validation_errors=list(state.validation_errors),
        submit_label=SUBMITTING_LABEL if state.submitting else SUBMIT_LABEL,
        submit_disabled=state.submitting
    )
