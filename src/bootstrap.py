import threading
from typing import Any, Dict, Optional

from booking.application import BookingApplicationService
from booking.infrastructure import BookingUnitOfWork, InMemoryBookingRepository
from shared_kernel import Settings, StandardLogger
from user_management.application import UserApplicationService
from user_management.infrastructure import InMemoryUserRepository, UserUnitOfWork


def bootstrap_app(settings: Optional[Settings] = None) -> Dict[str, Any]:
    """Создает и настраивает все компоненты приложения."""
    settings = settings or Settings.from_env()

    # 1. Общая блокировка: проверка пользователя и создание брони не пересекаются с удалением
    lock = threading.RLock()

    # 2. Создаем Unit of Work для каждого контекста
    users_repo = InMemoryUserRepository()
    user_uow = UserUnitOfWork(
        users_repo=users_repo,
        logger=StandardLogger("user_management.uow"),
        lock=lock,
    )
    booking_uow = BookingUnitOfWork(
        # Передаем репозиторий пользователей из одного контекста в другой
        users_repo=users_repo,
        bookings_repo=InMemoryBookingRepository(),
        logger=StandardLogger("booking.uow"),
        lock=lock,
    )

    # 3. Создаем сервисы, передавая им зависимости
    user_service = UserApplicationService(
        user_uow, logger=StandardLogger("user_management")
    )
    booking_service = BookingApplicationService(
        booking_uow, logger=StandardLogger("booking")
    )

    # Возвращаем настроенные компоненты
    return {
        "settings": settings,
        "user_uow": user_uow,
        "booking_uow": booking_uow,
        "user_service": user_service,
        "booking_service": booking_service,
    }
