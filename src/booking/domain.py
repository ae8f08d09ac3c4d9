"""
Доменная модель контекста бронирования.

Содержит сущность бронирования и доменный сервис,
проверяющий существование пользователя перед созданием брони.
"""

from datetime import date, datetime, time
from typing import Any, List

from pydantic import BaseModel, Field, field_validator
from shared_kernel import EntityId, UserNotFound, generate_id

from .interfaces import IBookingRepository, IUserLookup


def coerce_booking_date(value: Any) -> Any:
    """Приводит дату без времени (объект или строку ``YYYY-MM-DD``) к началу суток."""
    if isinstance(value, str) and len(value) == 10:
        value = date.fromisoformat(value)
    if isinstance(value, date) and not isinstance(value, datetime):
        return datetime.combine(value, time.min)
    return value


class Booking(BaseModel):
    """Бронирование, оформленное на имя пользователя."""

    id: EntityId = Field(default_factory=generate_id)
    user_name: str = Field(..., min_length=1)  # Ссылка на пользователя по имени, не владение
    booking_date: datetime

    @field_validator("booking_date", mode="before")
    @classmethod
    def date_to_datetime(cls, v: Any) -> Any:
        return coerce_booking_date(v)

    @classmethod
    def create(cls, user_name: str, booking_date: datetime) -> "Booking":
        """Создает новое бронирование."""
        return cls(user_name=user_name, booking_date=booking_date)


class BookingService:
    """Доменный сервис для работы с бронированиями."""

    def __init__(
        self, booking_repository: IBookingRepository, user_lookup: IUserLookup
    ):
        self.booking_repository = booking_repository
        self.user_lookup = user_lookup

    def create_booking(self, user_name: str, booking_date: datetime) -> Booking:
        """Создает бронирование для существующего пользователя."""
        # Проверка существования строго до добавления в репозиторий
        if self.user_lookup.get(user_name) is None:
            raise UserNotFound(f"Пользователь {user_name} не существует")

        booking = Booking.create(user_name=user_name, booking_date=booking_date)
        self.booking_repository.add(booking)
        return booking

    def bookings_for_user(self, user_name: str) -> List[Booking]:
        """Возвращает бронирования пользователя в порядке создания."""
        return self.booking_repository.find_by_user(user_name)
