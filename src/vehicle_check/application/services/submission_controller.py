"""Check form controller owning the draft inspection and its submission."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence, TYPE_CHECKING

from src.vehicle_check.application.errors import CheckApiError
from src.vehicle_check.application.services.check_payload import build_payload
from src.vehicle_check.domain.entities.draft_inspection import DraftInspection
from src.vehicle_check.domain.entities.vehicle import Vehicle
from src.vehicle_check.domain.value_objects.checklist import (
    DEFAULT_CHECKLIST_KEYS,
    CheckItem,
    CheckItemKey,
    CheckItemStatus,
)
from src.vehicle_check.infrastructure.logging import (
    get_logger,
    log_submission_outcome,
    log_validation_failure,
    log_with_extra
)

if TYPE_CHECKING:
    from src.vehicle_check.application.ports.services import CheckPersistence, VehicleDirectory

GENERIC_SUBMIT_ERROR = "Failed to submit check. Please try again."
VEHICLES_LOAD_ERROR = "Could not load vehicles. Please try again."


class SubmissionPhase(Enum):
    """Submission state machine phases."""
    IDLE = "idle"
    SUBMITTING = "submitting"
    FAILED = "failed"


class VehicleListStatus(Enum):
    """Load status of the vehicle selector options."""
    NOT_LOADED = "not_loaded"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class FormState:
    """Immutable snapshot of everything a check form renders."""

    vehicles: tuple[Vehicle, ...]
    vehicles_status: VehicleListStatus
    vehicles_error: Optional[str]
    selected_vehicle_id: str
    odometer_text: str
    note: str
    items: tuple[CheckItem, ...]
    phase: SubmissionPhase
    error: Optional[str]
    validation_errors: tuple[str, ...]

    @property
    def submitting(self) -> bool:
        """Check if a submission is in flight."""
        return self.phase == SubmissionPhase.SUBMITTING


FormStateListener = Callable[[FormState], None]


class CheckFormController:
    """Controller for one check form session.

    Holds the draft inspection and the ephemeral form state, loads the
    vehicle list, and submits completed checks. It is UI-framework agnostic:
    renderers read ``state`` and ``subscribe`` to be told about changes.
    """

    def __init__(
        self,
        vehicle_directory: "VehicleDirectory",
        check_persistence: "CheckPersistence",
        on_success: Callable[[], None],
        checklist_keys: Sequence[CheckItemKey] = DEFAULT_CHECKLIST_KEYS
    ):
        """Initialize controller with its service dependencies."""
        self._vehicle_directory = vehicle_directory
        self._check_persistence = check_persistence
        self._on_success = on_success
        self._draft = DraftInspection(checklist_keys)
        self._vehicles: tuple[Vehicle, ...] = ()
        self._vehicles_status = VehicleListStatus.NOT_LOADED
        self._vehicles_error: Optional[str] = None
        self._phase = SubmissionPhase.IDLE
        self._error: Optional[str] = None
        self._validation_errors: List[str] = []
        self._listeners: List[FormStateListener] = []
        self._initialized = False
        self._closed = False
        self._logger = get_logger(__name__)

    @property
    def state(self) -> FormState:
        """Get a snapshot of the current form state."""
        return FormState(
            vehicles=self._vehicles,
            vehicles_status=self._vehicles_status,
            vehicles_error=self._vehicles_error,
            selected_vehicle_id=self._draft.selected_vehicle_id,
            odometer_text=self._draft.odometer_text,
            note=self._draft.note,
            items=tuple(self._draft.items),
            phase=self._phase,
            error=self._error,
            validation_errors=tuple(self._validation_errors),
        )

    @property
    def draft(self) -> DraftInspection:
        """Get a copy of the draft inspection."""
        return self._draft.copy()

    @property
    def submitting(self) -> bool:
        """Check if a submission is in flight."""
        return self._phase == SubmissionPhase.SUBMITTING

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, listener: FormStateListener) -> Callable[[], None]:
        """Register a listener called with the new state after each change.

        Returns:
            A callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def close(self) -> None:
        """Discard the controller; pending results are ignored afterwards."""
        self._closed = True
        self._listeners.clear()

    async def initialize(self) -> None:
        """Load the vehicle list once per form instance."""
        if self._initialized:
            return
        self._initialized = True
        await self._load_vehicles()

    async def reload_vehicles(self) -> None:
        """Retry loading the vehicle list after a failure."""
        if self._vehicles_status == VehicleListStatus.LOADING:
            return
        self._initialized = True
        await self._load_vehicles()

    def select_vehicle(self, vehicle_id: str) -> None:
        self._draft.select_vehicle(vehicle_id)
        self._notify()

    def set_odometer_text(self, text: str) -> None:
        self._draft.set_odometer_text(text)
        self._notify()

    def set_note(self, text: str) -> None:
        self._draft.set_note(text)
        self._notify()

    def set_item_status(self, key: CheckItemKey, status: CheckItemStatus) -> None:
        """Replace the status of one checklist item.

        Keys outside the configured checklist are ignored.
        """
        if not self._draft.set_item_status(key, status):
            self._logger.warning(
                f"Ignoring status change for unconfigured checklist key {key}"
            )
            return
        self._notify()

    async def submit(self) -> bool:
        """Submit the draft to the check persistence service.

        On success the draft is reset to its initial state before
        ``on_success`` is called. Failures never propagate: they are turned
        into a banner error or field-level messages and the draft is kept
        for correction. Exceptions raised by listeners or by ``on_success``
        are logged and do not affect the submission outcome.

        Returns:
            True if the check was recorded
        """
        if self._closed:
            return False
        if self._phase == SubmissionPhase.SUBMITTING:
            self._logger.debug("Submit ignored while a submission is in flight")
            return False

        self._phase = SubmissionPhase.SUBMITTING
        self._error = None
        self._validation_errors = []
        self._notify()

        vehicle_id = self._draft.selected_vehicle_id
        try:
            payload = build_payload(self._draft)
            log_with_extra(
                self._logger,
                logging.INFO,
                f"Submitting check for vehicle '{vehicle_id}'",
                vehicle_id=vehicle_id,
                item_count=len(payload.items),
                has_note=payload.note is not None
            )
            await self._check_persistence.create_check(payload)
        except Exception as exc:
            self._record_failure(vehicle_id, exc)
            return False

        log_submission_outcome(self._logger, vehicle_id, "succeeded")
        if self._closed:
            return True

        self._draft.reset()
        self._phase = SubmissionPhase.IDLE
        self._notify()
        try:
            self._on_success()
        except Exception:
            self._logger.exception("Check form success callback failed")
        return True

    def _record_failure(self, vehicle_id: str, exc: Exception) -> None:
        """Classify a submission failure into form messages."""
        if isinstance(exc, CheckApiError) and exc.is_validation_error:
            messages = exc.field_messages()
            log_validation_failure(self._logger, vehicle_id, messages, status_code=exc.status_code)
            if self._closed:
                return
            self._validation_errors = messages
        else:
            log_submission_outcome(
                self._logger,
                vehicle_id,
                "failed",
                error=str(exc),
                error_type=type(exc).__name__
            )
            if self._closed:
                return
            self._error = GENERIC_SUBMIT_ERROR

        self._phase = SubmissionPhase.FAILED
        self._notify()

    async def _load_vehicles(self) -> None:
        self._vehicles_status = VehicleListStatus.LOADING
        self._vehicles_error = None
        self._notify()

        try:
            vehicles = await self._vehicle_directory.list_vehicles()
        except Exception:
            self._logger.exception("Failed to load vehicle list")
            if self._closed:
                return
            self._vehicles_status = VehicleListStatus.FAILED
            self._vehicles_error = VEHICLES_LOAD_ERROR
            self._notify()
            return

        if self._closed:
            return
        self._vehicles = tuple(vehicles)
        self._vehicles_status = VehicleListStatus.READY
        log_with_extra(
            self._logger,
            logging.INFO,
            f"Loaded {len(self._vehicles)} vehicles",
            vehicle_count=len(self._vehicles)
        )
        self._notify()

    def _notify(self) -> None:
        if self._closed or not self._listeners:
            return
        state = self.state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                self._logger.exception("Form state listener failed")
