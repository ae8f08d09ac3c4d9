"""
Интерфейсы (порты) для контекста бронирования.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional, Protocol

if TYPE_CHECKING:
    from user_management.domain import User

    from .domain import Booking


class IBookingRepository(Protocol):
    """Интерфейс репозитория для бронирований."""

    def add(self, booking: Booking) -> None: ...
    def find_by_user(self, user_name: str) -> List[Booking]: ...


class IUserLookup(Protocol):
    """Доступ только на чтение к каталогу пользователей."""

    def get(self, name: str) -> Optional[User]: ...


class IBookingUnitOfWork(Protocol):
    """Интерфейс Unit of Work для контекста Booking."""

    @property
    def bookings(self) -> IBookingRepository: ...
    @property
    def users(self) -> IUserLookup: ...

    def __enter__(self) -> IBookingUnitOfWork: ...
    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> bool: ...
    def commit(self) -> None: ...
    def rollback(self) -> None: ...
