"""
Инфраструктурный слой контекста бронирования.

Содержит реализации репозиториев и Unit of Work, хранящие данные в памяти процесса.
"""

from __future__ import annotations

import threading
from typing import List, Optional

from shared_kernel import ILogger, StandardLogger

from . import interfaces as ports
from .domain import Booking


class InMemoryBookingRepository(ports.IBookingRepository):
    """Реализация репозитория бронирований в памяти."""

    def __init__(self):
        self._bookings: List[Booking] = []

    def add(self, booking: Booking) -> None:
        self._bookings.append(booking)

    def find_by_user(self, user_name: str) -> List[Booking]:
        return [booking for booking in self._bookings if booking.user_name == user_name]


class BookingUnitOfWork(ports.IBookingUnitOfWork):
    """Единица работы для контекста бронирования.

    Каталог пользователей передается извне и используется только для чтения.
    Если блокировка общая с ``UserUnitOfWork``, проверка пользователя
    и добавление брони не пересекаются с удалением пользователя.
    """

    def __init__(
        self,
        users_repo: ports.IUserLookup,
        bookings_repo: Optional[ports.IBookingRepository] = None,
        logger: Optional[ILogger] = None,
        lock: Optional[threading.RLock] = None,
    ):
        self._users = users_repo
        self._bookings = bookings_repo or InMemoryBookingRepository()
        self._logger = logger or StandardLogger("booking")
        self._lock = lock or threading.RLock()
        self._committed = False

    @property
    def bookings(self) -> ports.IBookingRepository:
        return self._bookings

    @property
    def users(self) -> ports.IUserLookup:
        return self._users

    def commit(self) -> None:
        """Фиксирует все изменения."""
        self._committed = True
        self._logger.debug("BookingUnitOfWork committed")

    def rollback(self) -> None:
        """Откатывает все изменения."""
        # Сценарий выполняет не более одного изменения, откатывать нечего
        self._committed = False
        self._logger.debug("BookingUnitOfWork rolled back")

    def __enter__(self):
        self._lock.acquire()
        self._committed = False
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is None:
                self.commit()
            else:
                self.rollback()
        finally:
            self._lock.release()
        return False
