"""
Сквозной сценарий: регистрация, бронирование и отказы.
"""

from datetime import datetime

from booking.application import CreateBookingRequest
from shared_kernel import UserNotFound, ValidationError
from user_management.application import RegisterUserRequest


def test_register_book_and_reject(user_service, booking_service):
    """Полный сценарий работы каталога пользователей и журнала бронирований."""
    new_year = datetime(2024, 1, 1)

    # 1. Регистрируем взрослого пользователя
    alice = user_service.register_user(RegisterUserRequest(name="Alice", age=30))
    assert alice.is_success

    # 2. Бронируем для него
    booking = booking_service.create_booking(
        CreateBookingRequest(user_name="Alice", booking_date=new_year)
    )
    assert booking.is_success

    # 3. Список содержит ровно эту бронь
    listed = booking_service.list_bookings("Alice").value
    assert [(b.user_name, b.booking_date) for b in listed] == [("Alice", new_year)]

    # 4. Несовершеннолетний не регистрируется, каталог не меняется
    bob = user_service.register_user(RegisterUserRequest(name="Bob", age=15))
    assert isinstance(bob.error, ValidationError)
    assert [u.name for u in user_service.list_users().value] == ["Alice"]

    # 5. Бронь для несуществующего пользователя отклоняется
    carol = booking_service.create_booking(
        CreateBookingRequest(user_name="Carol", booking_date=new_year)
    )
    assert isinstance(carol.error, UserNotFound)
