"""
Маршруты журнала бронирований.
"""

from typing import List

from booking.application import (
    BookingApplicationService,
    BookingDTO,
    CreateBookingRequest,
)
from fastapi import APIRouter, Depends, Path

from ..dependencies import get_booking_service, unwrap_or_raise

router = APIRouter()


@router.post("/booking", response_model=BookingDTO)
def create_booking(
    request: CreateBookingRequest,
    service: BookingApplicationService = Depends(get_booking_service),
) -> BookingDTO:
    """Создать бронь для существующего пользователя.

    Если пользователь не найден, возвращается HTTP 400 с описанием.
    """
    return unwrap_or_raise(service.create_booking(request))


@router.get("/bookings/{user_name}", response_model=List[BookingDTO])
def list_bookings(
    user_name: str = Path(..., description="Имя пользователя"),
    service: BookingApplicationService = Depends(get_booking_service),
) -> List[BookingDTO]:
    """Получить бронирования пользователя в порядке создания."""
    return unwrap_or_raise(service.list_bookings(user_name))
