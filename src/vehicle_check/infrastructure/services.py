"""Dependency wiring for the check form and the reference backend."""

from typing import AsyncGenerator, Callable, Iterable, Optional
from contextlib import asynccontextmanager

from src.vehicle_check.config import Settings, get_settings
from src.vehicle_check.application.services.check_service import CheckService
from src.vehicle_check.application.services.submission_controller import CheckFormController
from src.vehicle_check.domain.entities.vehicle import Vehicle
from src.vehicle_check.infrastructure.http_client import CheckApiClient
from src.vehicle_check.infrastructure.repositories.memory_repositories import (
    InMemoryCheckRepository,
    InMemoryVehicleRepository,
    sample_vehicles
)


class ServiceFactory:
    """Factory for creating services with proper dependencies."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    @asynccontextmanager
    async def open_check_form(
        self,
        on_success: Callable[[], None],
        api_client: Optional[CheckApiClient] = None
    ) -> AsyncGenerator[CheckFormController, None]:
        """Open a check form session backed by the HTTP check API.

        The vehicle list is loaded before the controller is yielded. The
        controller is closed, and a client created here is shut down, when
        the context exits.
        """
        client = api_client or CheckApiClient(
            base_url=self.settings.api_base_url,
            timeout=self.settings.request_timeout_seconds
        )
        controller = CheckFormController(
            vehicle_directory=client,
            check_persistence=client,
            on_success=on_success,
            checklist_keys=self.settings.configured_checklist
        )
        try:
            await controller.initialize()
            yield controller
        finally:
            controller.close()
            if api_client is None:
                await client.close()

    def create_check_service(self, vehicles: Optional[Iterable[Vehicle]] = None) -> CheckService:
        """Create the in-memory check service used by the reference backend."""
        return CheckService(
            vehicle_repository=InMemoryVehicleRepository(
                sample_vehicles() if vehicles is None else vehicles
            ),
            check_repository=InMemoryCheckRepository(),
            checklist_keys=self.settings.configured_checklist,
            note_max_length=self.settings.note_max_length
        )
