"""Vehicle directory endpoints."""

from typing import List

from fastapi import APIRouter, Depends

from ....application.services.check_service import CheckService
from ..dependencies import get_check_service
from ..schemas.check_schemas import VehicleResponse

router = APIRouter()


@router.get("", response_model=List[VehicleResponse])
async def list_vehicles(
    check_service: CheckService = Depends(get_check_service)
) -> List[VehicleResponse]:
    """List every vehicle that can be checked."""
    vehicles = await check_service.list_vehicles()
    return [VehicleResponse(**vehicle.to_dict()) for vehicle in vehicles]
