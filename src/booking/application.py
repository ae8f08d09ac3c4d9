"""
Прикладной слой контекста бронирования.

Содержит сервис приложения, который координирует
взаимодействие между внешними интерфейсами и доменной моделью.
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from shared_kernel import (
    DomainException,
    EntityId,
    Failure,
    ILogger,
    Result,
    StandardLogger,
    Success,
)

from . import interfaces as ports
from .domain import Booking, BookingService, coerce_booking_date

# DTO (Data Transfer Objects) для входящих данных


class CreateBookingRequest(BaseModel):
    """Запрос на создание бронирования."""

    model_config = ConfigDict(populate_by_name=True)

    user_name: str = Field(..., min_length=1, alias="userName")
    booking_date: datetime = Field(..., alias="date")

    @field_validator("booking_date", mode="before")
    @classmethod
    def date_to_datetime(cls, v: Any) -> Any:
        return coerce_booking_date(v)


# DTO для исходящих данных


class BookingDTO(BaseModel):
    """DTO для представления бронирования."""

    model_config = ConfigDict(populate_by_name=True)

    id: EntityId
    user_name: str = Field(..., alias="userName")
    booking_date: datetime = Field(..., alias="bookingDate")

    @classmethod
    def from_domain(cls, booking: Booking) -> "BookingDTO":
        """Создает DTO из доменной модели."""
        return cls(
            id=booking.id,
            user_name=booking.user_name,
            booking_date=booking.booking_date,
        )


# Сервисы приложения


class BookingApplicationService:
    """Сервис приложения для работы с журналом бронирований."""

    def __init__(self, uow: ports.IBookingUnitOfWork, logger: Optional[ILogger] = None):
        """Инициализирует сервис."""
        self._uow = uow
        self._logger = logger or StandardLogger("booking")
        self._booking_service = BookingService(self._uow.bookings, self._uow.users)

    def create_booking(self, request: CreateBookingRequest) -> Result[BookingDTO]:
        """Создает новое бронирование."""
        try:
            with self._uow:
                booking = self._booking_service.create_booking(
                    user_name=request.user_name,
                    booking_date=request.booking_date,
                )
        except DomainException as e:
            self._logger.warning(
                "Booking rejected", user_name=request.user_name, reason=str(e)
            )
            return Failure(e)

        self._logger.info(
            "Booking created",
            booking_id=booking.id,
            user_name=booking.user_name,
            booking_date=booking.booking_date.isoformat(),
        )
        return Success(BookingDTO.from_domain(booking))

    def list_bookings(self, user_name: str) -> Result[List[BookingDTO]]:
        """Возвращает бронирования пользователя; пустой список не является ошибкой."""
        with self._uow:
            bookings = self._booking_service.bookings_for_user(user_name)
        return Success([BookingDTO.from_domain(booking) for booking in bookings])
