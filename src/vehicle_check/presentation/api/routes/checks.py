"""Check recording endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, status

from ....application.services.check_service import CheckService
from ..dependencies import get_check_service
from ..schemas.check_schemas import CheckListResponse, CheckResponse, CreateCheckRequest

router = APIRouter()


@router.post(
    "",
    response_model=CheckResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED
)
async def create_check(
    request: CreateCheckRequest,
    check_service: CheckService = Depends(get_check_service)
) -> CheckResponse:
    """
    Record a completed vehicle check.

    Validation failures are answered with 400 and a list of
    ``{field, reason}`` details.
    """
    check = await check_service.record_check(
        vehicle_id=request.vehicle_id,
        odometer_km=request.odometer_km,
        items=[item.to_domain() for item in request.items] if request.items is not None else None,
        note=request.note
    )
    return CheckResponse.model_validate(check.to_dict())


@router.get("", response_model=CheckListResponse, response_model_exclude_none=True)
async def list_checks(
    vehicle_id: Optional[str] = None,
    check_service: CheckService = Depends(get_check_service)
) -> CheckListResponse:
    """List recorded checks, optionally filtered by vehicle."""
    checks = await check_service.list_checks(vehicle_id)
    return CheckListResponse(
        checks=[CheckResponse.model_validate(check.to_dict()) for check in checks],
        total=len(checks)
    )
