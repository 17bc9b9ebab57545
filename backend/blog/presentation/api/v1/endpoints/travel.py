"""Travel map endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from blog.application.schemas import TravelRecordsResponse, TravelRecordsUpdate
from blog.application.services import TravelService
from blog.domain.exceptions import ValidationError
from blog.infrastructure.dependencies import get_travel_service, require_user_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/travel", tags=["Travel"])


@router.get("/records", response_model=TravelRecordsResponse)
async def get_records(
    service: TravelService = Depends(get_travel_service),
) -> TravelRecordsResponse:
    """Public: the visited places and whether the map is shown."""
    records = await service.get_records()
    return TravelRecordsResponse(data=records["data"], visible=records["visible"])


@router.post("/records", dependencies=[Depends(require_user_id)])
async def save_records(
    data: TravelRecordsUpdate,
    service: TravelService = Depends(get_travel_service),
) -> dict:
    try:
        await service.save_records(data.data, data.visible)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return {"success": True, "message": "Travel records saved"}
