"""
Зависимости FastAPI: доступ к сервисам, собранным в ``bootstrap_app``.
"""

from typing import Any, Dict, Optional, TypeVar

from booking.application import BookingApplicationService
from fastapi import HTTPException, Request, status
from shared_kernel import NotFound, Result
from user_management.application import UserApplicationService

T = TypeVar("T")


def get_container(request: Request) -> Dict[str, Any]:
    return request.app.state.container


def get_user_service(request: Request) -> UserApplicationService:
    return get_container(request)["user_service"]


def get_booking_service(request: Request) -> BookingApplicationService:
    return get_container(request)["booking_service"]


def unwrap_or_raise(
    result: Result[T],
    status_code: int = status.HTTP_400_BAD_REQUEST,
    not_found_status: Optional[int] = None,
) -> T:
    """Возвращает значение успешного результата или выбрасывает HTTPException.

    ``not_found_status`` переопределяет код ответа для ошибок ``NotFound``.
    """
    if result.is_success:
        return result.value
    code = status_code
    if not_found_status is not None and isinstance(result.error, NotFound):
        code = not_found_status
    raise HTTPException(status_code=code, detail=result.message)
