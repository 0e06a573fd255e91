"""HTTP controller layer for room booking and hotel state."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from backend.controllers.dependencies import get_booking_service
from backend.domain.models import (
    AllocationFailureReason,
    BookingResult,
    HotelState,
    Room,
    RoomStatus,
)
from backend.services.booking_service import (
    BookingRejectedError,
    BookingService,
    BookingValidationError,
)
from backend.utils.logger import get_logger


logger = get_logger(__name__)

router = APIRouter(tags=["booking"])

_REJECTION_STATUS = {
    AllocationFailureReason.INVALID_COUNT: status.HTTP_400_BAD_REQUEST,
    AllocationFailureReason.INSUFFICIENT_FREE_ROOMS: status.HTTP_409_CONFLICT,
    AllocationFailureReason.NO_FEASIBLE_ALLOCATION: status.HTTP_409_CONFLICT,
}


class BookingRequest(BaseModel):
    """Room count is range-checked by the allocator so the reason is reported."""

    room_count: int


class RandomOccupancyRequest(BaseModel):
    probability: float | None = Field(default=None, ge=0.0, le=1.0)
    seed: int | None = Field(default=None, ge=0)


class RoomResponse(BaseModel):
    room_id: int = Field(gt=0)
    floor: int = Field(ge=1)
    position_on_floor: int = Field(ge=0)
    status: RoomStatus


class BookingResponse(BaseModel):
    rooms: list[RoomResponse]
    total_travel_time: int = Field(ge=0)


class FloorResponse(BaseModel):
    floor: int = Field(ge=1)
    rooms: list[RoomResponse]


class HotelStatsResponse(BaseModel):
    total: int = Field(ge=0)
    free: int = Field(ge=0)
    booked: int = Field(ge=0)
    blocked: int = Field(ge=0)


class HotelStateResponse(BaseModel):
    floors: list[FloorResponse]
    stats: HotelStatsResponse
    last_booking: Optional[BookingResponse] = None
    message: Optional[str] = None


def _room_response(room: Room) -> RoomResponse:
    return RoomResponse(
        room_id=room.room_id,
        floor=room.floor,
        position_on_floor=room.position_on_floor,
        status=room.status,
    )


def _booking_response(result: BookingResult) -> BookingResponse:
    return BookingResponse(
        rooms=[_room_response(room) for room in result.rooms],
        total_travel_time=result.total_travel_time,
    )


def _state_response(state: HotelState) -> HotelStateResponse:
    return HotelStateResponse(
        floors=[
            FloorResponse(floor=floor, rooms=[_room_response(room) for room in rooms])
            for floor, rooms in state.rooms_by_floor()
        ],
        stats=HotelStatsResponse(**state.status_counts()),
        last_booking=(
            _booking_response(state.last_booking)
            if state.last_booking is not None
            else None
        ),
        message=state.message,
    )


def _rejection(exc: BookingRejectedError) -> HTTPException:
    return HTTPException(
        status_code=_REJECTION_STATUS[exc.reason],
        detail={"reason": exc.reason.value, "message": exc.message},
    )


@router.get("/hotel", response_model=HotelStateResponse, status_code=status.HTTP_200_OK)
async def get_hotel(
    service: BookingService = Depends(get_booking_service),
) -> HotelStateResponse:
    return _state_response(service.state)


@router.post("/bookings", response_model=BookingResponse, status_code=status.HTTP_200_OK)
async def create_booking(
    payload: BookingRequest,
    service: BookingService = Depends(get_booking_service),
) -> BookingResponse:
    """Allocate and mark rooms as booked."""
    try:
        return _booking_response(service.book(payload.room_count))
    except BookingRejectedError as exc:
        raise _rejection(exc) from exc
    except Exception as exc:  # pragma: no cover - defensive fallback
        logger.exception("Unexpected booking failure")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to book rooms",
        ) from exc


@router.post(
    "/bookings/preview",
    response_model=BookingResponse,
    status_code=status.HTTP_200_OK,
)
async def preview_booking(
    payload: BookingRequest,
    service: BookingService = Depends(get_booking_service),
) -> BookingResponse:
    """Show the rooms a booking would get without applying it."""
    try:
        return _booking_response(service.preview(payload.room_count))
    except BookingRejectedError as exc:
        raise _rejection(exc) from exc
    except Exception as exc:  # pragma: no cover - defensive fallback
        logger.exception("Unexpected booking preview failure")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to preview booking",
        ) from exc


@router.post(
    "/occupancy/random",
    response_model=HotelStateResponse,
    status_code=status.HTTP_200_OK,
)
async def random_occupancy(
    payload: RandomOccupancyRequest,
    service: BookingService = Depends(get_booking_service),
) -> HotelStateResponse:
    try:
        state = service.randomize(probability=payload.probability, seed=payload.seed)
        return _state_response(state)
    except BookingValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc
    except Exception as exc:  # pragma: no cover - defensive fallback
        logger.exception("Unexpected random occupancy failure")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to apply random occupancy",
        ) from exc


@router.post("/reset", response_model=HotelStateResponse, status_code=status.HTTP_200_OK)
async def reset(
    service: BookingService = Depends(get_booking_service),
) -> HotelStateResponse:
    return _state_response(service.reset())
